# src/hmcon_shell/core/handlers/help_handler.py
from typing import List

from hmcon_shell.core.context.session_context import SessionContext
from hmcon_shell.core.utils.helptext import print_export_options, print_input_options


def handle_help(_args: List[str], ctx: SessionContext) -> int:
    if ctx.job is None:
        print_input_options(ctx)
    else:
        print_export_options(ctx, ctx.job)
    return 0
