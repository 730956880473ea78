# tests/core/conftest.py
from typing import Dict, Iterable, List, Optional

import pytest

from hmcon_shell.core.command_registry import CommandRegistry, register_all_commands
from hmcon_shell.core.console import ConsoleReporter
from hmcon_shell.core.context.job import JobObserver
from hmcon_shell.core.context.session_context import SessionContext
from hmcon_shell.core.errors import DataImportError
from hmcon_shell.model import DataInfo, ExportSettings, FileFormat


class FakeData:
    def __init__(self, name: str, valid: bool = True):
        self.name = name
        self.is_valid = valid
        self.applied: List[str] = []


class FakeImportManager:
    """Import collaborator backed by a dict of path -> data (or exception)."""

    def __init__(self, files: Optional[Dict[str, object]] = None, infos: Optional[Dict[str, DataInfo]] = None):
        self.files = files or {}
        self.infos = infos or {}
        self.imported: List[str] = []

    def can_import(self, path: str) -> bool:
        return path.endswith(".asc")

    def import_file(self, path: str):
        self.imported.append(path)
        entry = self.files.get(path)
        if entry is None:
            raise DataImportError(f"No such file: {path}")
        if isinstance(entry, Exception):
            raise entry
        return entry

    def get_data_info(self, path: str) -> DataInfo:
        return self.infos[path]


class FakeExportManager:
    def __init__(self, fail_for: Iterable[str] = ()):
        self.fail_for = set(fail_for)
        self.exports: List[tuple] = []

    def get_supported_formats(self) -> List[FileFormat]:
        return [
            FileFormat(identifier="ASC", command_key="asc", description="ASCII grid", extension=".asc"),
            FileFormat(identifier="XYZ", command_key="xyz", description="Point list", extension=".xyz"),
        ]

    def resolve_format(self, key: str):
        for fmt in self.get_supported_formats():
            if key.lower() in (fmt.identifier.lower(), fmt.command_key):
                return fmt
        return None

    def validate_settings(self, settings: ExportSettings, data) -> bool:
        return bool(settings.formats) and data is not None and data.is_valid

    def export(self, data, settings: ExportSettings, base_path):
        if data.name in self.fail_for:
            raise OSError(f"disk full while writing {data.name}")
        self.exports.append((data.name, sorted(settings.formats), str(base_path), list(data.applied)))


class ScriptedInput:
    """Stands in for the interactive prompt; raises EOFError when exhausted."""

    def __init__(self, lines: Iterable[str] = ()):
        self.lines = list(lines)
        self.prompts: List[str] = []

    def __call__(self, marker: str) -> str:
        self.prompts.append(marker)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


class RecordingObserver(JobObserver):
    def __init__(self):
        self.events: List[tuple] = []

    def file_imported(self, index, path):
        self.events.append(("imported", index, path))

    def file_import_failed(self, index, path, error):
        self.events.append(("import_failed", index, path))

    def file_exported(self, index, path):
        self.events.append(("exported", index, path))

    def file_export_failed(self, index, path, error):
        self.events.append(("export_failed", index, path))

    def export_completed(self):
        self.events.append(("completed",))


@pytest.fixture
def transcript() -> List[str]:
    return []


@pytest.fixture
def scripted_input() -> ScriptedInput:
    return ScriptedInput()


@pytest.fixture
def make_session(transcript, scripted_input):
    """Factory for a session wired to fake collaborators and a recorded transcript."""

    def _make(files=None, infos=None, fail_for=(), load_modules=True) -> SessionContext:
        registry = CommandRegistry()
        register_all_commands(registry, load_modules=load_modules)
        ctx = SessionContext(
            registry,
            FakeImportManager(files, infos),
            FakeExportManager(fail_for),
            prompt_fn=scripted_input,
            reporter=ConsoleReporter(write=transcript.append),
        )
        return ctx

    return _make
