# src/hmcon_shell/core/handlers/config_handler.py
import json
import logging
from typing import List

from hmcon_shell.core.context.session_context import SessionContext
from hmcon_shell.core.managers.config_manager import config_manager

logger = logging.getLogger(__name__)

USAGE = "Usage: config list | config set <key> <value> | config reset"


def handle_config(args: List[str], ctx: SessionContext) -> int:
    """Handles the 'config' command for viewing and modifying session configuration."""
    if not args:
        ctx.reporter.warning(USAGE)
        return 1

    command = args[0].lower()

    if command == "list":
        ctx.reporter.line(json.dumps(config_manager.get_all(), indent=2))
        return 0

    if command == "set":
        if len(args) < 3:
            ctx.reporter.warning("Usage: config set <key> <value>")
            return 1
        key_path = args[1]
        value = " ".join(args[2:])

        if config_manager.set_nested(key_path, value):
            new_value = config_manager.get_nested(key_path)
            ctx.reporter.success(f"Config updated: {key_path} = {new_value} (type: {type(new_value).__name__})")
            return 0
        ctx.reporter.error(f"Failed to set config value for key '{key_path}'.")
        return 1

    if command == "reset":
        config_manager.reset()
        ctx.reporter.success("Configuration has been reset to the values from settings.json.")
        return 0

    ctx.reporter.warning(f"Unknown command: 'config {command}'. {USAGE}")
    return 1
