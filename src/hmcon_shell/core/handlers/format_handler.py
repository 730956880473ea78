# src/hmcon_shell/core/handlers/format_handler.py
from typing import List

from hmcon_shell.core.context.job import Job
from hmcon_shell.core.context.session_context import SessionContext


def handle_format(args: List[str], job: Job, ctx: SessionContext) -> None:
    """
    format <id...>

    Replaces the selected format set. Unknown identifiers are reported and
    left out of the new selection.
    """
    selected = []
    for key in args:
        fmt = ctx.export_manager.resolve_format(key)
        if fmt is None:
            ctx.reporter.warning(f"Unknown format: {key}")
            continue
        selected.append(fmt.identifier)

    job.export_settings.set_formats(selected)
    ctx.reporter.line(f"Selected formats: {job.export_settings.describe_formats()}")
