# src/hmcon_shell/core/console.py
import logging
import sys
from typing import Callable, List, Optional

from tqdm import tqdm

logger = logging.getLogger(__name__)


def _tqdm_write(text: str) -> None:
    # Goes through tqdm so transcript lines never tear an active progress bar.
    tqdm.write(text, file=sys.stdout)


class ConsoleReporter:
    """
    Leveled transcript output for the shell.

    Every warning or error notifies the registered problem listeners; the
    session uses this to drop any pending scripted commands.
    """

    def __init__(self, write: Optional[Callable[[str], None]] = None):
        self._write = write or _tqdm_write
        self._problem_listeners: List[Callable[[], None]] = []

    def add_problem_listener(self, listener: Callable[[], None]) -> None:
        self._problem_listeners.append(listener)

    def line(self, text: str = "") -> None:
        self._write(text)

    def special(self, text: str) -> None:
        self._write(f"» {text}")

    def success(self, text: str) -> None:
        self._write(f"✅ {text}")

    def warning(self, text: str, halt_script: bool = True) -> None:
        self._write(f"⚠️  {text}")
        logger.debug("Reported warning: %s", text)
        if halt_script:
            self._notify_problem()

    def error(self, text: str, halt_script: bool = True) -> None:
        self._write(f"❌ {text}")
        logger.debug("Reported error: %s", text)
        if halt_script:
            self._notify_problem()

    def box(self, title: str) -> None:
        width = len(title) + 4
        self._write("+" + "-" * width + "+")
        self._write(f"|  {title}  |")
        self._write("+" + "-" * width + "+")

    def list_entry(self, cmd: str, desc: str, indent_level: int = 0, required: bool = False) -> None:
        """Writes one aligned line of an option listing."""
        s = "*" if required else ""
        s = s.ljust((indent_level + 1) * 4)
        s += cmd
        s = s.ljust(24)
        s += desc
        self._write(s)

    def _notify_problem(self) -> None:
        for listener in self._problem_listeners:
            listener()
