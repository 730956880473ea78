from __future__ import annotations

import argparse
import logging
import sys
import traceback
from typing import List, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import Completer
from prompt_toolkit.document import Document
from prompt_toolkit.history import FileHistory

from hmcon_shell.core.command_registry import CommandRegistry, register_all_commands
from hmcon_shell.core.console import ConsoleReporter
from hmcon_shell.core.context.job import JobObserver, JobState
from hmcon_shell.core.context.session_context import SessionContext
from hmcon_shell.core.errors import ScriptError
from hmcon_shell.core.managers.completion_manager import CompletionManager
from hmcon_shell.core.managers.config_manager import config_manager
from hmcon_shell.core.managers.progress_manager import ProgressManager
from hmcon_shell.core.utils.configure_logging import configure_logger
from hmcon_shell.core.utils.path_utils import PathUtils
from hmcon_shell.core.xngine import ExecuteEngine
from hmcon_shell.formats.export_manager import ExportManager
from hmcon_shell.formats.import_manager import ImportManager

logger = logging.getLogger(__name__)

BANNER = "HEIGHTMAP CONVERTER V1.1"


class PromptToolkitCompleter(Completer):
    """
    A wrapper that uses the CompletionManager to generate suggestions
    in a way that prompt_toolkit expects.
    """

    def __init__(self, manager: CompletionManager):
        self.manager = manager

    def get_completions(self, document: Document, complete_event):
        yield from self.manager.generate_completions(document)


class ConsoleJobObserver(JobObserver):
    """Turns job events into transcript lines and the batch progress bar."""

    def __init__(self, ctx: SessionContext):
        self.ctx = ctx
        self._progress: Optional[ProgressManager] = None

    @property
    def _job(self):
        return self.ctx.job

    def _batch(self) -> bool:
        return self._job is not None and self._job.batch_mode

    def _advance(self, failed: bool) -> None:
        if not self._batch():
            return
        if self._progress is None:
            self._progress = ProgressManager(
                total=self._job.pending_exports,
                disable=not config_manager.get_nested("batch.progress_bar", True),
            )
        self._progress.advance(failed=failed)

    def file_imported(self, index: int, path: str) -> None:
        logger.debug("Imported %s", path)

    def file_import_failed(self, index: int, path: str, error: Exception) -> None:
        self.ctx.reporter.error(f"IMPORT FAILED: {path}")
        self.ctx.reporter.error(str(error))
        if self._job is not None and self._job.state is JobState.EXPORTING:
            self._advance(failed=True)

    def file_exported(self, index: int, path: str) -> None:
        if self._batch():
            self.ctx.reporter.success(f"EXPORT {index + 1}/{len(self._job.input_files)} SUCCESSFUL")
        else:
            self.ctx.reporter.success("EXPORT SUCCESSFUL")
        self._advance(failed=False)

    def file_export_failed(self, index: int, path: str, error: Exception) -> None:
        if self._batch():
            self.ctx.reporter.error(f"EXPORT {index + 1}/{len(self._job.input_files)} FAILED: {path}")
        else:
            self.ctx.reporter.error(f"EXPORT FAILED: {path}")
        self.ctx.reporter.error(str(error))
        self._advance(failed=True)

    def export_completed(self) -> None:
        if self._progress is not None:
            self._progress.close()
            self._progress = None
        if self._batch():
            self.ctx.reporter.success("DONE!")


def build_session(
        prompt_fn=None,
        load_modules: bool = True,
        reporter: Optional[ConsoleReporter] = None,
) -> SessionContext:
    """Wires registry, collaborators and console observer into a session."""
    registry = CommandRegistry()
    register_all_commands(registry, load_modules=load_modules)
    ctx = SessionContext(
        registry,
        ImportManager(),
        ExportManager(),
        prompt_fn=prompt_fn,
        reporter=reporter,
    )
    ctx.observers.append(ConsoleJobObserver(ctx))
    return ctx


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="hmcon-shell", description="Interactive heightmap batch converter.")
    parser.add_argument("--no-modules", action="store_true", help="Do not register the bundled modifier commands.")
    parser.add_argument("--script", "-s", help="Queue the commands of this script file at startup.")
    parser.add_argument("--log-level", help="Override debug.level from settings.json.")
    parser.add_argument("--log-file", help="Also write log records to this file.")
    return parser.parse_args(argv)


def start_shell(args: argparse.Namespace) -> int:
    """Starts the interactive loop. Returns the process exit code."""
    history_path = PathUtils.get_shell_history_file()
    session = PromptSession(history=FileHistory(str(history_path)), complete_while_typing=True)

    load_modules = config_manager.get_nested("modules.enabled", True) and not args.no_modules
    ctx = build_session(prompt_fn=session.prompt, load_modules=load_modules)
    session.completer = PromptToolkitCompleter(CompletionManager(ctx))
    logger.info("Shell startup; history file at: %s", history_path)

    ctx.reporter.box(BANNER)

    if args.script:
        try:
            ctx.queue.load_script(args.script)
        except ScriptError as e:
            ctx.reporter.error(str(e), halt_script=False)

    engine = ExecuteEngine()
    try:
        engine.run(ctx)
    except (EOFError, KeyboardInterrupt):
        pass
    except Exception as e:
        logger.critical("Unhandled error in the main loop: %s", e, exc_info=True)
        ctx.reporter.box("FATAL ERROR")
        ctx.reporter.line(traceback.format_exc())
        ctx.reporter.line("The session cannot be resumed. Press Enter to exit.")
        try:
            input()
        except (EOFError, KeyboardInterrupt):
            pass
        return 1
    finally:
        print("Bye!")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entrypoint for running the shell from the command line."""
    args = _parse_args(argv)
    configure_logger(args.log_level or config_manager.get_nested("debug.level", "WARNING"), log_file=args.log_file)
    return start_shell(args)


if __name__ == "__main__":
    sys.exit(main())
