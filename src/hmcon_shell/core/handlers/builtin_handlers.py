# src/hmcon_shell/core/handlers/builtin_handlers.py
from hmcon_shell.core.command_registry import CommandContext, CommandRegistry
from hmcon_shell.core.handlers.config_handler import handle_config
from hmcon_shell.core.handlers.exec_handler import handle_exec
from hmcon_shell.core.handlers.help_handler import handle_help
from hmcon_shell.core.handlers.job_info_handler import handle_chain, handle_info, handle_vars


def register(registry: CommandRegistry) -> None:
    """Registers the plain commands that ship with the shell."""
    registry.register_command(
        "help", handle_help, description="Show the options of the current step", context=CommandContext.ANY)
    registry.register_command(
        "exec", handle_exec, description="Run the commands of a script file", args="<path>",
        context=CommandContext.ANY)
    registry.register_command(
        "config", handle_config, description="Show or change settings", args="list|set <key> <value>|reset",
        context=CommandContext.ANY)
    registry.register_command("info", handle_info, description="Show information about the current file")
    registry.register_command("vars", handle_vars, description="List the defined variables")
    registry.register_command("chain", handle_chain, description="List the modifications in order")
