# src/hmcon_shell/formats/height_data.py
from dataclasses import dataclass, replace
from typing import Optional

import numpy as np

from hmcon_shell.model import DataInfo


@dataclass(frozen=True)
class HeightData:
    """
    A regular elevation grid. Row 0 is the northernmost row, nodata cells are NaN.
    """
    grid: np.ndarray
    cellsize: float = 1.0
    xllcorner: float = 0.0
    yllcorner: float = 0.0
    nodata_value: Optional[float] = -9999.0
    source_path: str = ""

    @property
    def is_valid(self) -> bool:
        return self.grid.size > 0 and bool(np.isfinite(self.grid).any())

    @property
    def nrows(self) -> int:
        return int(self.grid.shape[0])

    @property
    def ncols(self) -> int:
        return int(self.grid.shape[1])

    def info(self) -> DataInfo:
        return DataInfo(
            low=float(np.nanmin(self.grid)),
            high=float(np.nanmax(self.grid)),
            average=float(np.nanmean(self.grid)),
        )

    def with_grid(self, grid: np.ndarray) -> "HeightData":
        """Returns a copy carrying a new grid and the same georeference."""
        return replace(self, grid=grid)
