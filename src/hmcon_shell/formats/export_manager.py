# src/hmcon_shell/formats/export_manager.py
import logging
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

from hmcon_shell.core.errors import DataExportError
from hmcon_shell.formats.asc_format import ASC_EXTENSION, write_asc
from hmcon_shell.formats.height_data import HeightData
from hmcon_shell.formats.xyz_format import XYZ_EXTENSION, write_xyz
from hmcon_shell.model import ExportSettings, FileFormat

logger = logging.getLogger(__name__)

Writer = Callable[[HeightData, Path], None]

DEFAULT_FORMATS: List[Tuple[FileFormat, Writer]] = [
    (FileFormat(identifier="ASC", command_key="asc", description="ESRI ASCII grid", extension=ASC_EXTENSION),
     write_asc),
    (FileFormat(identifier="XYZ", command_key="xyz", description="XYZ point list", extension=XYZ_EXTENSION),
     write_xyz),
]


class ExportManager:
    """Export/format collaborator: the registry of output formats and their writers."""

    def __init__(self, formats: Optional[List[Tuple[FileFormat, Writer]]] = None):
        self._formats: Dict[str, Tuple[FileFormat, Writer]] = {}
        for fmt, writer in (formats if formats is not None else DEFAULT_FORMATS):
            self.register_format(fmt, writer)

    def register_format(self, fmt: FileFormat, writer: Writer) -> None:
        self._formats[fmt.identifier] = (fmt, writer)

    def get_supported_formats(self) -> List[FileFormat]:
        return [fmt for fmt, _ in self._formats.values()]

    def resolve_format(self, key: str) -> Optional[FileFormat]:
        """Finds a format by identifier or command key, case-insensitively."""
        lowered = key.lower()
        for fmt, _ in self._formats.values():
            if lowered in (fmt.identifier.lower(), fmt.command_key.lower()):
                return fmt
        return None

    def validate_settings(self, settings: ExportSettings, data) -> bool:
        if not settings.formats:
            logger.debug("Validation failed: no format selected.")
            return False
        unknown = [f for f in settings.formats if f not in self._formats]
        if unknown:
            logger.debug("Validation failed: unknown formats %s", unknown)
            return False
        return data is not None and bool(data.is_valid)

    def export(self, data: HeightData, settings: ExportSettings, base_path: Path) -> List[Path]:
        """
        Writes `data` once per selected format next to `base_path`.

        Raises:
            DataExportError: A format is unknown or a writer failed.
        """
        written: List[Path] = []
        for identifier in settings.sorted_formats():
            entry = self._formats.get(identifier)
            if entry is None:
                raise DataExportError(f"Unknown export format '{identifier}'.")
            fmt, writer = entry
            target = Path(f"{base_path}{fmt.extension}")
            try:
                writer(data, target)
            except (OSError, ValueError) as e:
                raise DataExportError(f"Could not write '{target}': {e}") from e
            logger.info("Wrote %s", target)
            written.append(target)
        return written
