# src/hmcon_shell/model.py (Shell Layer)
from pathlib import Path
from typing import Iterable, List, Optional, Set

from pydantic import BaseModel, Field


class FileFormat(BaseModel):
    identifier: str = Field(description="Unique format identifier, e.g. 'ASC'.")
    command_key: str = Field(description="Key typed after 'format' to select it.")
    description: str = Field(default="", description="One-line description for the option listing.")
    extension: str = Field(description="File extension including the dot.")


class DataInfo(BaseModel):
    """Elevation statistics of a single input file."""
    low: float
    high: float
    average: float


class ExportSettings(BaseModel):
    """The selected output formats (set semantics) and the resolved destination."""
    formats: Set[str] = Field(default_factory=set)
    output_path: Optional[Path] = None

    def set_formats(self, identifiers: Iterable[str]) -> None:
        """Replaces the current selection."""
        self.formats = set(identifiers)

    def describe_formats(self) -> str:
        return ", ".join(sorted(self.formats)) if self.formats else "<NONE>"

    def sorted_formats(self) -> List[str]:
        return sorted(self.formats)


class EqualizeResult(BaseModel):
    """Aggregate of 'equalizeheightmaps' over all eligible batch files."""
    low: float
    high: float
    average: float
    eligible: int
    total: int
