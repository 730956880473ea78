# src/hmcon_shell/core/handlers/exec_handler.py
import logging
from typing import List

from hmcon_shell.core.context.session_context import SessionContext
from hmcon_shell.core.errors import ScriptError
from hmcon_shell.core.parser import strip_quotes

logger = logging.getLogger(__name__)


def handle_exec(args: List[str], ctx: SessionContext) -> int:
    """
    Handles the 'exec' command: queues the lines of a script file.

    A failed exec leaves the queue exactly as it was, including any lines
    of the script that is currently running.
    """
    if not args:
        ctx.reporter.warning("Usage: exec <path>")
        return 1

    path = strip_quotes(" ".join(args))
    try:
        count = ctx.queue.load_script(path)
    except ScriptError as e:
        logger.error("exec '%s' failed: %s", path, e)
        ctx.reporter.error(str(e), halt_script=False)
        return 1

    ctx.reporter.line(f"Queued {count} command(s) from {path}")
    return 0
