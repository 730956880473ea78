# src/hmcon_shell/formats/xyz_format.py
from pathlib import Path
from typing import Union

import numpy as np

from hmcon_shell.formats.height_data import HeightData

XYZ_EXTENSION = ".xyz"


def write_xyz(data: HeightData, path: Union[str, Path]) -> None:
    """Writes one 'x y z' line per cell centre; nodata cells are left out."""
    rows, cols = np.indices(data.grid.shape)
    x = data.xllcorner + (cols + 0.5) * data.cellsize
    y = data.yllcorner + (data.nrows - rows - 0.5) * data.cellsize
    points = np.column_stack((x.ravel(), y.ravel(), data.grid.ravel()))
    points = points[np.isfinite(points[:, 2])]
    np.savetxt(path, points, fmt="%.6g")
