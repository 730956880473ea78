# src/hmcon_shell/core/command_registry.py
import enum
import logging
from typing import Any, Callable, Dict, List, Optional

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)


class CommandContext(enum.Flag):
    """The phases in which a command may be used."""
    BEFORE_IMPORT = enum.auto()
    AFTER_IMPORT = enum.auto()
    ANY = BEFORE_IMPORT | AFTER_IMPORT


class CommandKind(str, enum.Enum):
    PLAIN = "plain"
    MODIFIER = "modifier"


class CommandSpec(BaseModel):
    """
    A registered command and its metadata.

    Plain handlers are called as handler(args, ctx) and return an exit code.
    Modifier handlers are called the same way and return a Modifier.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    name: str
    handler: Callable[..., Any]
    kind: CommandKind = CommandKind.PLAIN
    description: str = ""
    args: str = ""
    context: CommandContext = CommandContext.AFTER_IMPORT

    @property
    def usage(self) -> str:
        return f"{self.name} {self.args}".strip()

    def applies_to(self, context: CommandContext) -> bool:
        return bool(self.context & context)


class CommandRegistry:
    """
    Explicit mapping from command name to handler.

    Names are matched case-insensitively. Plain commands and modifier-producing
    commands live in separate namespaces, as 'mod <name>' only ever looks at
    the latter.
    """

    def __init__(self):
        self._commands: Dict[str, CommandSpec] = {}
        self._modifiers: Dict[str, CommandSpec] = {}

    def register_command(
            self,
            name: str,
            handler: Callable[..., int],
            *,
            description: str = "",
            args: str = "",
            context: CommandContext = CommandContext.AFTER_IMPORT,
    ) -> CommandSpec:
        """Adds a plain command and its handler function to the registry."""
        spec = CommandSpec(
            name=name.lower(), handler=handler, kind=CommandKind.PLAIN,
            description=description, args=args, context=context,
        )
        self._store(self._commands, spec)
        return spec

    def register_modifier(
            self,
            name: str,
            builder: Callable[..., Any],
            *,
            description: str = "",
            args: str = "",
    ) -> CommandSpec:
        """Adds a modifier-producing command; these are only reachable through 'mod'."""
        spec = CommandSpec(
            name=name.lower(), handler=builder, kind=CommandKind.MODIFIER,
            description=description, args=args, context=CommandContext.AFTER_IMPORT,
        )
        self._store(self._modifiers, spec)
        return spec

    def find_command(self, name: str, context: CommandContext) -> Optional[CommandSpec]:
        spec = self._commands.get(name.lower())
        if spec is not None and spec.applies_to(context):
            return spec
        return None

    def find_modifier(self, name: str) -> Optional[CommandSpec]:
        return self._modifiers.get(name.lower())

    def commands(self, context: CommandContext = CommandContext.ANY) -> List[CommandSpec]:
        """Plain commands usable in the given context, in registration order."""
        return [c for c in self._commands.values() if c.applies_to(context)]

    def modifiers(self) -> List[CommandSpec]:
        return list(self._modifiers.values())

    @staticmethod
    def _store(table: Dict[str, CommandSpec], spec: CommandSpec) -> None:
        if spec.name in table:
            logger.warning("Command '%s' registered twice; the later handler wins.", spec.name)
        table[spec.name] = spec
        logger.debug("Registered %s command '%s'", spec.kind.value, spec.name)

    def __len__(self) -> int:
        return len(self._commands) + len(self._modifiers)


def register_all_commands(registry: CommandRegistry, load_modules: bool = True) -> None:
    """
    Registers the built-in commands and, unless disabled, the bundled
    modifier module.
    """
    # Imported here; the handler modules import this one for CommandContext.
    from hmcon_shell.core.handlers import builtin_handlers
    from hmcon_shell.modifiers import basic_modifiers

    logger.debug("Registering built-in commands...")
    builtin_handlers.register(registry)

    if load_modules:
        basic_modifiers.register(registry)
    else:
        logger.info("Module loading disabled; no modifier commands registered.")

    logger.debug("Successfully registered %d commands.", len(registry))
