# src/hmcon_shell/core/handlers/job_info_handler.py
from typing import List

from hmcon_shell.core.context.session_context import SessionContext


def handle_vars(_args: List[str], ctx: SessionContext) -> int:
    """Lists the variables of the live job."""
    job = ctx.job
    if not job or not len(job.variables):
        ctx.reporter.line("No variables defined.")
        return 0
    for name, value in job.variables.items():
        ctx.reporter.line(f"    ${{{name}}} = {value}")
    return 0


def handle_chain(_args: List[str], ctx: SessionContext) -> int:
    """Lists the modification chain in the order it will be applied."""
    job = ctx.job
    if not job or not len(job.modification_chain):
        ctx.reporter.line("Modification chain is empty.")
        return 0
    for i, modifier in enumerate(job.modification_chain, start=1):
        ctx.reporter.line(f"    {i}. {modifier.describe()}")
    return 0


def handle_info(_args: List[str], ctx: SessionContext) -> int:
    """Prints the current file and a summary of the job."""
    job = ctx.job
    if job is None or job.current_data is None:
        ctx.reporter.warning("No data has been imported.")
        return 1

    ctx.reporter.line(f"File:        {job.current_file}")
    if job.batch_mode:
        ctx.reporter.line(f"Batch:       {len(job.input_files)} files")
    info_fn = getattr(job.current_data, "info", None)
    if callable(info_fn):
        info = info_fn()
        ctx.reporter.line(f"Lowest:      {info.low:g}")
        ctx.reporter.line(f"Highest:     {info.high:g}")
        ctx.reporter.line(f"Average:     {info.average:g}")
    ctx.reporter.line(f"Formats:     {job.export_settings.describe_formats()}")
    ctx.reporter.line(f"Modifiers:   {len(job.modification_chain)}")
    return 0
