# src/hmcon_shell/core/handlers/batch_handler.py
import logging
import sys
from pathlib import Path
from typing import List, Optional

from hmcon_shell.core.context.job import Job
from hmcon_shell.core.context.session_context import SessionContext
from hmcon_shell.core.managers.config_manager import config_manager
from hmcon_shell.model import EqualizeResult

logger = logging.getLogger(__name__)

DEFAULT_GRID_EXTENSION = ".asc"


def handle_join(_args: List[str], _job: Job, ctx: SessionContext) -> None:
    # TODO: merge all batch grids into one file once grid mosaicking exists in the formats package.
    ctx.reporter.warning("'join' is not implemented yet.")


def handle_equalizeheightmaps(_args: List[str], job: Job, ctx: SessionContext) -> Optional[EqualizeResult]:
    """
    Computes the common low, high and average of every grid file in the batch.

    Files with another extension are reported and left out of all three
    values. The results are stored as equalize.low / .high / .average.
    """
    extension = config_manager.get_nested("batch.grid_extension", DEFAULT_GRID_EXTENSION).lower()
    total = len(job.input_files)
    low = sys.float_info.max
    high = -sys.float_info.max
    avg_sum = 0.0
    eligible = 0

    for path in job.input_files:
        if Path(path).suffix.lower() != extension:
            ctx.reporter.error(f"{path} is not a {extension.lstrip('.').upper()} file!")
            continue
        try:
            info = ctx.import_manager.get_data_info(path)
        except Exception as e:
            logger.debug("get_data_info failed for '%s'", path, exc_info=True)
            ctx.reporter.error(f"Could not read {path}: {e}")
            continue
        eligible += 1
        ctx.reporter.line(f"{eligible}/{total}")
        low = min(low, info.low)
        high = max(high, info.high)
        avg_sum += info.average

    if eligible == 0:
        ctx.reporter.error("No eligible files found; nothing to equalize.")
        return None

    result = EqualizeResult(low=low, high=high, average=avg_sum / eligible, eligible=eligible, total=total)
    job.variables.define("equalize.low", repr(result.low))
    job.variables.define("equalize.high", repr(result.high))
    job.variables.define("equalize.average", repr(result.average))

    ctx.reporter.line("Success:")
    ctx.reporter.line(f"    lowest:   {result.low:g}")
    ctx.reporter.line(f"    highest:  {result.high:g}")
    ctx.reporter.line(f"    average:  {result.average:g}")
    return result
