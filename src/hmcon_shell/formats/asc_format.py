# src/hmcon_shell/formats/asc_format.py
"""
ESRI ASCII grid (.asc) reading and writing.

    ncols         4
    nrows         3
    xllcorner     0.0
    yllcorner     0.0
    cellsize      1.0
    NODATA_value  -9999
    <nrows lines of ncols values>
"""
import logging
from pathlib import Path
from typing import Dict, Union

import numpy as np

from hmcon_shell.core.errors import DataImportError
from hmcon_shell.formats.height_data import HeightData

logger = logging.getLogger(__name__)

ASC_EXTENSION = ".asc"
_HEADER_KEYS = {"ncols", "nrows", "xllcorner", "yllcorner", "xllcenter", "yllcenter", "cellsize", "nodata_value"}


def _read_header(f) -> Dict[str, str]:
    header: Dict[str, str] = {}
    while True:
        pos = f.tell()
        line = f.readline()
        if not line:
            break
        parts = line.split()
        if len(parts) == 2 and parts[0].lower() in _HEADER_KEYS:
            header[parts[0].lower()] = parts[1]
        else:
            f.seek(pos)
            break
    return header


def read_asc(path: Union[str, Path]) -> HeightData:
    """
    Reads an ASCII grid file.

    Raises:
        DataImportError: The file is unreadable or its header and body disagree.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            header = _read_header(f)
            if "ncols" not in header or "nrows" not in header:
                raise DataImportError(f"'{path}' has no ncols/nrows header.")
            grid = np.loadtxt(f, dtype=float, ndmin=2)
    except OSError as e:
        raise DataImportError(f"Could not read '{path}': {e}") from e
    except ValueError as e:
        raise DataImportError(f"Malformed grid in '{path}': {e}") from e

    try:
        ncols, nrows = int(header["ncols"]), int(header["nrows"])
        cellsize = float(header.get("cellsize", 1.0))
        nodata = float(header["nodata_value"]) if "nodata_value" in header else None
        xll = float(header.get("xllcorner", header.get("xllcenter", 0.0)))
        yll = float(header.get("yllcorner", header.get("yllcenter", 0.0)))
    except ValueError as e:
        raise DataImportError(f"Malformed header in '{path}': {e}") from e

    if grid.shape != (nrows, ncols):
        raise DataImportError(
            f"'{path}' declares {nrows}x{ncols} cells but contains {grid.shape[0]}x{grid.shape[1]}."
        )

    if nodata is not None:
        grid = np.where(grid == nodata, np.nan, grid)

    logger.debug("Read %dx%d grid from '%s'", nrows, ncols, path)
    return HeightData(
        grid=grid, cellsize=cellsize, xllcorner=xll, yllcorner=yll,
        nodata_value=nodata, source_path=str(path),
    )


def write_asc(data: HeightData, path: Union[str, Path]) -> None:
    nodata = data.nodata_value if data.nodata_value is not None else -9999.0
    body = np.where(np.isnan(data.grid), nodata, data.grid)
    header = (
        f"ncols         {data.ncols}\n"
        f"nrows         {data.nrows}\n"
        f"xllcorner     {data.xllcorner}\n"
        f"yllcorner     {data.yllcorner}\n"
        f"cellsize      {data.cellsize}\n"
        f"NODATA_value  {nodata:g}"
    )
    np.savetxt(path, body, fmt="%.6g", header=header, comments="")
