# src/hmcon_shell/core/input_reader.py
import logging
from typing import Callable, Optional

from hmcon_shell.core.command_queue import CommandQueue
from hmcon_shell.core.console import ConsoleReporter
from hmcon_shell.core.managers.config_manager import config_manager
from hmcon_shell.core.variable_store import VariableStore

logger = logging.getLogger(__name__)

DEFAULT_MARKER = "> "


class InputReader:
    """
    The single line source of the shell.

    Queued script lines are served first (and echoed to the transcript);
    only an empty queue falls through to the interactive prompt.
    """

    def __init__(
            self,
            queue: CommandQueue,
            reporter: ConsoleReporter,
            prompt_fn: Optional[Callable[[str], str]] = None,
            marker: Optional[str] = None,
    ):
        self.queue = queue
        self.reporter = reporter
        self.prompt_fn = prompt_fn or input
        self._marker = marker

    @property
    def marker(self) -> str:
        if self._marker is not None:
            return self._marker
        return config_manager.get_nested("prompt.marker", DEFAULT_MARKER)

    def read_line(self, variables: Optional[VariableStore] = None) -> str:
        """
        Returns the next command line with ${name} references expanded.

        Raises:
            EOFError: Interactive input was closed.
        """
        if self.queue:
            line = self.queue.pop()
            self.reporter.line(f"{self.marker}{line}")
        else:
            line = self.prompt_fn(self.marker)

        line = (line or "").strip()
        if variables is not None:
            expanded = variables.substitute(line)
            if expanded != line:
                logger.debug("Expanded '%s' -> '%s'", line, expanded)
            line = expanded
        return line

    def read_raw(self, prompt: Optional[str] = None) -> str:
        """Reads one interactive line, bypassing the queue."""
        if prompt:
            self.reporter.line(prompt)
        return (self.prompt_fn(self.marker) or "").strip()
