# src/hmcon_shell/core/context/session_context.py
import logging
from typing import Callable, List, Optional, TYPE_CHECKING

from hmcon_shell.core.command_queue import CommandQueue
from hmcon_shell.core.command_registry import CommandRegistry
from hmcon_shell.core.console import ConsoleReporter
from hmcon_shell.core.input_reader import InputReader

# Prevent circular imports during runtime, but retain type hinting for static analysis
if TYPE_CHECKING:
    from hmcon_shell.core.context.job import Job, JobObserver

logger = logging.getLogger(__name__)


class SessionContext:
    """
    Everything the dispatch loop and the command handlers work with.

    Passed explicitly to every handler. Holds at most one live Job; the
    command queue outlives jobs so a script can drive several of them.
    """

    def __init__(
            self,
            registry: CommandRegistry,
            import_manager,
            export_manager,
            prompt_fn: Optional[Callable[[str], str]] = None,
            reporter: Optional[ConsoleReporter] = None,
    ):
        self.registry = registry
        self.import_manager = import_manager
        self.export_manager = export_manager

        self.reporter = reporter or ConsoleReporter()
        self.queue = CommandQueue()
        # Any reported warning or error ends a scripted run.
        self.reporter.add_problem_listener(self.queue.clear)
        self.reader = InputReader(self.queue, self.reporter, prompt_fn=prompt_fn)

        self.job: Optional['Job'] = None
        self.observers: List['JobObserver'] = []

    def read_line(self) -> str:
        """Next command line, expanded with the live job's variables."""
        return self.reader.read_line(self.job.variables if self.job else None)

    def __repr__(self) -> str:
        return f"<SessionContext job={self.job!r} queued={len(self.queue)}>"
