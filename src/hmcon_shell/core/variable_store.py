# src/hmcon_shell/core/variable_store.py
import logging
import re
from typing import Dict, Iterator, Optional, Pattern, Tuple

from hmcon_shell.core.parser import VAR_PATTERN

logger = logging.getLogger(__name__)


class VariableStore:
    """
    Per-job mapping from variable name to string value.

    Incoming lines are passed through `substitute` before tokenization.
    References to undefined names are left untouched.
    """

    def __init__(self, var_pattern: Pattern[str] = VAR_PATTERN):
        self._vars: Dict[str, str] = {}
        self._pattern = var_pattern

    def define(self, name: str, value: str) -> None:
        """Creates or overwrites a variable."""
        if name in self._vars:
            logger.debug("Overwriting variable '%s' ('%s' -> '%s')", name, self._vars[name], value)
        self._vars[name] = str(value)

    def get(self, name: str) -> Optional[str]:
        return self._vars.get(name)

    def substitute(self, text: str) -> str:
        """Performs ${name} expansion in the given text."""
        def repl(m: re.Match) -> str:
            val = self._vars.get(m.group(1))
            return val if val is not None else m.group(0)

        return self._pattern.sub(repl, text)

    def items(self) -> Iterator[Tuple[str, str]]:
        return iter(sorted(self._vars.items()))

    def names(self):
        return sorted(self._vars)

    def __contains__(self, name: object) -> bool:
        return name in self._vars

    def __len__(self) -> int:
        return len(self._vars)

    def __repr__(self) -> str:
        return f"<VariableStore vars_count={len(self._vars)}>"
