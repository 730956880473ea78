# src/hmcon_shell/core/utils/path_utils.py
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class PathUtils:
    """
    A central utility for reliably retrieving important package and user paths.
    """

    # --- Package specific paths

    @staticmethod
    def get_shell_package_root() -> Path:
        """Returns the directory of the hmcon_shell package (holds settings.json)."""
        return Path(__file__).resolve().parents[2]

    @staticmethod
    def get_settings_file() -> Path:
        return PathUtils.get_shell_package_root() / "settings.json"

    # --- User specific paths ---

    @staticmethod
    def get_shell_history_file() -> Path:
        """
        Returns the path to the shell history file in the user's home directory.
        (e.g., ~/.hmcon_shell_history)
        """
        return Path.home() / ".hmcon_shell_history"

    # --- Helper methods ---

    @staticmethod
    def is_existing_directory(path: str) -> bool:
        return bool(path) and Path(path).expanduser().is_dir()

    @staticmethod
    def parent_exists(path: str) -> bool:
        """True when the directory that would hold `path` exists."""
        if not path:
            return False
        parent = Path(path).expanduser().resolve().parent
        return parent.is_dir()
