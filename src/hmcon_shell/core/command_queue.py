# src/hmcon_shell/core/command_queue.py
import logging
from collections import deque
from pathlib import Path
from typing import Deque, Iterable, List, Optional, Union

from hmcon_shell.core.errors import QueueOverflowError, ScriptError
from hmcon_shell.core.managers.config_manager import config_manager

logger = logging.getLogger(__name__)

DEFAULT_MAX_SIZE = 100


class CommandQueue:
    """
    Bounded FIFO of pre-authored command lines.

    Lines queued here are served before any interactive input. Scripts are
    prepended, so a script started from inside another script runs to the end
    before the outer one continues.
    """

    def __init__(self, max_size: Optional[int] = None):
        self._max_size = max_size
        self._lines: Deque[str] = deque()

    @property
    def max_size(self) -> int:
        """The fixed limit if one was given, otherwise the current `queue.max_size` setting."""
        if self._max_size is not None:
            return self._max_size
        return int(config_manager.get_nested("queue.max_size", DEFAULT_MAX_SIZE))

    def prepend(self, lines: Iterable[str]) -> int:
        """
        Puts the given lines in front of the queue, keeping their order.

        The insert is all-or-nothing: if the queue would grow beyond
        `max_size`, nothing is added and QueueOverflowError is raised.
        """
        new_lines = list(lines)
        total = len(self._lines) + len(new_lines)
        if total > self.max_size:
            raise QueueOverflowError(
                f"Command queue overflow: {total} lines exceed the limit of {self.max_size}."
            )
        self._lines.extendleft(reversed(new_lines))
        logger.debug("Queued %d lines (queue size now %d)", len(new_lines), len(self._lines))
        return len(new_lines)

    def load_script(self, path: Union[str, Path]) -> int:
        """
        Reads a script file and prepends its command lines.

        Blank lines and lines starting with '#' are not queued.

        Raises:
            ScriptError: The file could not be read.
            QueueOverflowError: The script does not fit into the queue.
        """
        script_path = Path(path)
        try:
            text = script_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ScriptError(f"Could not read script '{script_path}': {e}") from e

        lines: List[str] = []
        for raw in text.splitlines():
            stripped = raw.strip()
            if stripped and not stripped.startswith("#"):
                lines.append(stripped)
        return self.prepend(lines)

    def pop(self) -> str:
        """Removes and returns the front line."""
        return self._lines.popleft()

    def clear(self) -> None:
        if self._lines:
            logger.debug("Clearing command queue (%d pending lines dropped)", len(self._lines))
        self._lines.clear()

    def __len__(self) -> int:
        return len(self._lines)

    def __bool__(self) -> bool:
        return bool(self._lines)

    def __repr__(self) -> str:
        return f"<CommandQueue size={len(self._lines)}/{self.max_size}>"
