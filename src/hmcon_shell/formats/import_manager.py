# src/hmcon_shell/formats/import_manager.py
import logging
from pathlib import Path
from typing import Callable, Dict, Optional, Union

from hmcon_shell.core.errors import DataImportError
from hmcon_shell.formats.asc_format import ASC_EXTENSION, read_asc
from hmcon_shell.formats.height_data import HeightData
from hmcon_shell.model import DataInfo

logger = logging.getLogger(__name__)

Reader = Callable[[Union[str, Path]], HeightData]


class ImportManager:
    """Import collaborator: maps file extensions to readers."""

    def __init__(self, readers: Optional[Dict[str, Reader]] = None):
        self._readers: Dict[str, Reader] = dict(readers) if readers else {ASC_EXTENSION: read_asc}

    def can_import(self, path: Union[str, Path]) -> bool:
        return Path(path).suffix.lower() in self._readers

    def import_file(self, path: Union[str, Path]) -> HeightData:
        """
        Raises:
            DataImportError: Unsupported extension or unreadable file.
        """
        reader = self._readers.get(Path(path).suffix.lower())
        if reader is None:
            raise DataImportError(f"Unknown or unsupported file type: '{path}'.")
        logger.info("Importing '%s'", path)
        return reader(path)

    def get_data_info(self, path: Union[str, Path]) -> DataInfo:
        data = self.import_file(path)
        if not data.is_valid:
            raise DataImportError(f"'{path}' does not contain valid data.")
        return data.info()
