# src/hmcon_shell/core/parser.py
from __future__ import annotations

import re
from typing import List, Tuple

# Pattern to identify variable expansion: ${name}
VAR_PATTERN = re.compile(r"\$\{([^}]+)\}")
# A double-quoted run is one token, anything else is a run of non-space characters.
# A quote without a partner is kept as a literal character of its token.
_TOKEN_PATTERN = re.compile(r'"([^"]*)"|(\S+)')
_MULTI_SPACE = re.compile(r" {2,}")


def collapse_spaces(line: str) -> str:
    """Replaces every run of spaces with a single space."""
    return _MULTI_SPACE.sub(" ", line)


def split_arguments(text: str) -> List[str]:
    """
    Splits an argument string into tokens.

    Quoted runs keep their inner spaces and lose their quotes:
    'a "b c" d' -> ['a', 'b c', 'd'].
    """
    tokens: List[str] = []
    for match in _TOKEN_PATTERN.finditer(text):
        quoted, bare = match.group(1), match.group(2)
        tokens.append(quoted if quoted is not None else bare)
    return tokens


def parse_command_line(line: str) -> Tuple[str, List[str]]:
    """
    Parses an (already variable-expanded) input line into (command, args).

    The command name is lower-cased. An empty line yields ("", []).

    Args:
        line (str): The raw input string.

    Returns:
        Tuple[str, List[str]]: The command name and its argument tokens.
    """
    s = collapse_spaces((line or "").strip())
    if not s:
        return "", []

    command, _, remainder = s.partition(" ")
    return command.lower(), split_arguments(remainder)


def strip_quotes(text: str) -> str:
    """Removes every double quote, used for free-form path input."""
    return (text or "").replace('"', "").strip()
