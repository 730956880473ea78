# src/hmcon_shell/core/managers/progress_manager.py
import logging
import sys

from tqdm import tqdm

logger = logging.getLogger(__name__)


class ProgressManager:
    """
    Manages the lifecycle of the tqdm bar shown during a batch export.
    """

    def __init__(self, total: int, desc: str = "Exporting", unit: str = "file", disable: bool = False):
        if total <= 0:
            total = 1
        self.failures = 0
        self.pbar = tqdm(
            total=total,
            desc=desc,
            unit=f" {unit}",
            dynamic_ncols=True,
            postfix={"failures": 0},
            bar_format="{l_bar}{bar}| {n_fmt}/{total_fmt} [{elapsed}<{remaining}] {postfix}",
            file=sys.stderr,
            disable=disable,
        )

    def advance(self, failed: bool = False) -> None:
        """Counts one processed file."""
        if self.pbar is None:
            return
        if failed:
            self.failures += 1
            self.pbar.set_postfix({"failures": self.failures}, refresh=False)
        self.pbar.update(1)

    def close(self) -> None:
        if self.pbar is not None:
            self.pbar.close()
            self.pbar = None
            logger.debug("Progress bar closed (%d failures).", self.failures)
