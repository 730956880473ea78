# tests/core/test_command_registry.py
from hmcon_shell.core.command_registry import CommandContext, CommandKind, CommandRegistry, register_all_commands


def _noop(args, ctx):
    return 0


def test_names_match_case_insensitively():
    registry = CommandRegistry()
    registry.register_command("Info", _noop, description="Show info")
    assert registry.find_command("INFO", CommandContext.AFTER_IMPORT).name == "info"


def test_context_filters_commands():
    registry = CommandRegistry()
    registry.register_command("late", _noop, context=CommandContext.AFTER_IMPORT)
    registry.register_command("both", _noop, context=CommandContext.ANY)

    assert registry.find_command("late", CommandContext.BEFORE_IMPORT) is None
    assert registry.find_command("both", CommandContext.BEFORE_IMPORT) is not None
    assert [c.name for c in registry.commands(CommandContext.BEFORE_IMPORT)] == ["both"]


def test_modifiers_live_in_their_own_namespace():
    registry = CommandRegistry()
    registry.register_modifier("offset", lambda args, ctx: None, args="<amount>")

    assert registry.find_command("offset", CommandContext.ANY) is None
    spec = registry.find_modifier("OFFSET")
    assert spec.kind is CommandKind.MODIFIER
    assert spec.usage == "offset <amount>"


def test_register_all_commands_respects_module_flag():
    with_modules = CommandRegistry()
    register_all_commands(with_modules)
    without_modules = CommandRegistry()
    register_all_commands(without_modules, load_modules=False)

    assert {m.name for m in with_modules.modifiers()} == {"offset", "scale", "clamp"}
    assert without_modules.modifiers() == []
    assert without_modules.find_command("exec", CommandContext.BEFORE_IMPORT) is not None
