# src/hmcon_shell/core/xngine.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Dict, List, Optional

from hmcon_shell.core.command_registry import CommandContext, CommandSpec
from hmcon_shell.core.context.job import Job
from hmcon_shell.core.context.session_context import SessionContext
from hmcon_shell.core.errors import UserInputError
from hmcon_shell.core.handlers.batch_handler import handle_equalizeheightmaps, handle_join
from hmcon_shell.core.handlers.define_handler import handle_define, handle_definep
from hmcon_shell.core.handlers.format_handler import handle_format
from hmcon_shell.core.parser import parse_command_line, strip_quotes
from hmcon_shell.core.utils.helptext import print_export_options, print_input_options
from hmcon_shell.core.utils.path_utils import PathUtils
from hmcon_shell.core.utils.run_timers import RunTimers

QUIT_COMMANDS = {"exit", "quit"}
ABORT_COMMANDS = {"abort"} | QUIT_COMMANDS
MOD_COMMANDS = {"mod", "modify"}

JobHandler = Callable[[List[str], Job, SessionContext], object]


class ExecuteEngine:
    """
    Drives the job state machine:

        AwaitingInput -> Importing -> ConfiguringExport -> Exporting -> Done

    with Aborted and ImportFailed as the abnormal exits. One call to
    `run_once` handles one job from input selection to the end of its export.
    """

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._log = logger or logging.getLogger(__name__)
        self._job_builtins: Dict[str, JobHandler] = {
            "format": handle_format,
            "define": handle_define,
            "definep": handle_definep,
        }
        self._batch_builtins: Dict[str, JobHandler] = {
            "join": handle_join,
            "equalizeheightmaps": handle_equalizeheightmaps,
        }

    # --- Top level ---

    def run(self, ctx: SessionContext) -> None:
        """Loops over jobs until the input selection yields the terminate signal."""
        while self.run_once(ctx):
            pass

    def run_once(self, ctx: SessionContext) -> bool:
        """
        Runs one job. Returns False when the user asked to quit.
        """
        files = self.select_input_files(ctx)
        if files is None:
            return False

        job = Job(files)
        for observer in ctx.observers:
            job.add_observer(observer)
        ctx.job = job
        self._log.info("New job with %d input file(s), batch=%s", len(files), job.batch_mode)

        try:
            if job.next_file(ctx.import_manager) is None:
                self._log.info("No importable data in job; discarding it.")
                return True

            if not self.configure_export(ctx, job):
                job.abort()
                return True

            job.output_path = self.prompt_export_path(ctx, job.batch_mode)

            timer = RunTimers()
            timer.start()
            exported = job.export_all(ctx.import_manager, ctx.export_manager)
            timer.stop()
            self._log.info("Exported %d/%d file(s) in %.2f s", exported, len(files), timer.duration)
            ctx.reporter.line("---------------------------------")
        finally:
            ctx.job = None
        return True

    # --- AwaitingInput ---

    def select_input_files(self, ctx: SessionContext) -> Optional[List[str]]:
        """
        Reads lines until an input selection is made.

        Returns the list of files to process, or None to terminate.
        """
        print_input_options(ctx)
        while True:
            line = ctx.read_line()
            cmd, args = parse_command_line(line)
            if not cmd:
                continue

            if cmd in QUIT_COMMANDS:
                return None

            if cmd == "batch":
                files = self._collect_batch(args, ctx)
                if files:
                    return files
                continue

            spec = ctx.registry.find_command(cmd, CommandContext.BEFORE_IMPORT)
            if spec is not None:
                self._invoke_command(spec, args, ctx)
                continue

            path = strip_quotes(line)
            ctx.reporter.line(f"Reading file {path} ...")
            return [path]

    def _collect_batch(self, args: List[str], ctx: SessionContext) -> List[str]:
        if not args:
            ctx.reporter.warning("Usage: batch <directory>")
            return []

        directory = Path(strip_quotes(" ".join(args)))
        if not directory.is_dir():
            ctx.reporter.warning(f"Directory not found: {directory}")
            return []

        ctx.reporter.line(f"Starting batch in directory {directory} ...")
        files: List[str] = []
        for candidate in sorted(p for p in directory.rglob("*") if p.is_file()):
            if ctx.import_manager.can_import(str(candidate)):
                files.append(str(candidate))
            else:
                ctx.reporter.warning(f"Skipping file '{candidate}', unknown or unsupported file type.")

        if not files:
            ctx.reporter.warning("No importable files found in the batch directory.")
            return []
        ctx.reporter.line(f"{len(files)} files have been added to the batch queue")
        return files

    # --- ConfiguringExport ---

    def configure_export(self, ctx: SessionContext, job: Job) -> bool:
        """
        Reads configuration commands until 'export' (True) or 'abort' (False).

        An 'export' whose settings do not validate keeps the job here.
        """
        print_export_options(ctx, job)
        while True:
            line = ctx.read_line()
            cmd, args = parse_command_line(line)
            decision = self.handle_command(cmd, args, ctx, job)
            if decision is None:
                continue
            if decision and not ctx.export_manager.validate_settings(job.export_settings, job.current_data):
                ctx.reporter.warning(
                    "The export settings are not valid for this data. "
                    "Select at least one supported format with 'format'."
                )
                continue
            return decision

    def handle_command(self, cmd: str, args: List[str], ctx: SessionContext, job: Job) -> Optional[bool]:
        """
        Resolves one configuration command. First match wins:

        export, abort, mod/modify, format, define/definep, registered plain
        commands, then (batch only) join and equalizeheightmaps.

        Returns True to export, False to abort, None to keep configuring.
        """
        if not cmd:
            return None

        if cmd == "export":
            return True

        if cmd in ABORT_COMMANDS:
            ctx.reporter.special("Export aborted")
            return False

        if cmd in MOD_COMMANDS:
            self._handle_modifier(args, ctx, job)
            return None

        builtin = self._job_builtins.get(cmd)
        if builtin is not None:
            self._invoke_job_builtin(builtin, args, ctx, job)
            return None

        spec = ctx.registry.find_command(cmd, CommandContext.AFTER_IMPORT)
        if spec is not None:
            self._invoke_command(spec, args, ctx)
            return None

        if job.batch_mode:
            batch_builtin = self._batch_builtins.get(cmd)
            if batch_builtin is not None:
                self._invoke_job_builtin(batch_builtin, args, ctx, job)
                return None

        ctx.reporter.warning(f"Unknown option: {cmd}")
        return None

    def _handle_modifier(self, args: List[str], ctx: SessionContext, job: Job) -> None:
        if not args:
            ctx.reporter.warning("Usage: mod <name> <args...>")
            return

        name, mod_args = args[0], args[1:]
        spec = ctx.registry.find_modifier(name)
        if spec is None:
            ctx.reporter.warning(f"Unknown modifier: {name}")
            return

        try:
            modifier = spec.handler(mod_args, ctx)
            if modifier is None:
                raise UserInputError(f"Modifier '{spec.name}' could not be created.")
        except Exception as e:
            self._log.debug("Modifier '%s' failed with args %s", spec.name, mod_args, exc_info=True)
            ctx.reporter.warning(str(e) or type(e).__name__)
            ctx.reporter.warning(f"Usage: {spec.usage}")
            return

        job.modification_chain.add_modifier(modifier)
        ctx.reporter.line(f"Added modifier #{len(job.modification_chain)}: {modifier.describe()}")

    def _invoke_job_builtin(self, handler: JobHandler, args: List[str], ctx: SessionContext, job: Job) -> None:
        try:
            handler(args, job, ctx)
        except UserInputError as e:
            ctx.reporter.warning(str(e))

    def _invoke_command(self, spec: CommandSpec, args: List[str], ctx: SessionContext) -> int:
        try:
            return int(spec.handler(args, ctx) or 0)
        except UserInputError as e:
            ctx.reporter.warning(str(e))
            ctx.reporter.warning(f"Usage: {spec.usage}")
            return 1
        except Exception as e:
            self._log.error("Command '%s' failed: %s", spec.name, e, exc_info=True)
            ctx.reporter.error(f"Command '{spec.name}' failed: {e}")
            return 1

    # --- Export destination ---

    def prompt_export_path(self, ctx: SessionContext, must_be_directory: bool) -> Path:
        """Asks until an existing directory (batch) or a file in one (single) is named."""
        if must_be_directory:
            ctx.reporter.line("Enter destination path:")
        else:
            ctx.reporter.line("Enter path and filename to write the file(s):")

        while True:
            path = strip_quotes(ctx.read_line())
            if must_be_directory:
                if PathUtils.is_existing_directory(path):
                    return Path(path).expanduser()
            elif PathUtils.is_existing_directory(path):
                ctx.reporter.warning("Please enter a file name, not a directory.")
                continue
            elif PathUtils.parent_exists(path):
                return Path(path).expanduser()
            ctx.reporter.warning("Directory not found!")

