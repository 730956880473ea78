# src/hmcon_shell/core/handlers/define_handler.py
import logging
from typing import List

from hmcon_shell.core.context.job import Job
from hmcon_shell.core.context.session_context import SessionContext
from hmcon_shell.core.errors import UserInputError

logger = logging.getLogger(__name__)


def handle_define(args: List[str], job: Job, _ctx: SessionContext) -> None:
    """
    define <name> <value>

    Raises:
        UserInputError: Not exactly two arguments were given.
    """
    if len(args) < 2:
        raise UserInputError("Not enough arguments. Usage: define <name> <value>")
    if len(args) > 2:
        raise UserInputError('Too many arguments. Quote values containing spaces: define <name> "<value>"')
    name, value = args
    job.variables.define(name, value)
    logger.debug("Defined variable '%s'", name)


def handle_definep(args: List[str], job: Job, ctx: SessionContext) -> None:
    """
    definep <name> [prompt]

    Always asks the user, even while a script is running.
    """
    if not args:
        raise UserInputError("Not enough arguments. Usage: definep <name> [prompt]")
    name = args[0]
    prompt = " ".join(args[1:]) if len(args) > 1 else f"Enter value for variable '{name}':"
    value = ctx.reader.read_raw(prompt)
    job.variables.define(name, value)
