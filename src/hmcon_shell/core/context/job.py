# src/hmcon_shell/core/context/job.py
import enum
import logging
from pathlib import Path
from typing import Any, List, Optional, Sequence, Set, Tuple

from hmcon_shell.core.errors import DataImportError
from hmcon_shell.core.modification_chain import ModificationChain
from hmcon_shell.core.variable_store import VariableStore
from hmcon_shell.model import ExportSettings

logger = logging.getLogger(__name__)


class JobState(enum.Enum):
    AWAITING_INPUT = "awaiting_input"
    IMPORTING = "importing"
    CONFIGURING_EXPORT = "configuring_export"
    EXPORTING = "exporting"
    DONE = "done"
    ABORTED = "aborted"
    IMPORT_FAILED = "import_failed"


class JobObserver:
    """
    Receives the progress events of a job.

    Events are delivered synchronously, in the order the underlying
    operations complete. Override only what you need.
    """

    def file_imported(self, index: int, path: str) -> None:
        pass

    def file_import_failed(self, index: int, path: str, error: Exception) -> None:
        pass

    def file_exported(self, index: int, path: str) -> None:
        pass

    def file_export_failed(self, index: int, path: str, error: Exception) -> None:
        pass

    def export_completed(self) -> None:
        pass


class Job:
    """
    The single active conversion session.

    Holds the input file list (fixed at creation), the currently imported
    data, export settings, the modification chain and the job variables.
    """

    def __init__(self, input_files: Sequence[str]):
        self._input_files: Tuple[str, ...] = tuple(input_files)
        self._batch_mode = len(self._input_files) > 1
        self.current_index = -1
        self.current_data: Optional[Any] = None
        self.export_settings = ExportSettings()
        self.modification_chain = ModificationChain()
        self.variables = VariableStore()
        self.state = JobState.IMPORTING
        self._observers: List[JobObserver] = []
        self._failed_imports: Set[int] = set()

    @property
    def input_files(self) -> Tuple[str, ...]:
        return self._input_files

    @property
    def batch_mode(self) -> bool:
        return self._batch_mode

    @property
    def output_path(self) -> Optional[Path]:
        return self.export_settings.output_path

    @output_path.setter
    def output_path(self, value: Optional[Path]) -> None:
        self.export_settings.output_path = Path(value) if value is not None else None

    @property
    def pending_exports(self) -> int:
        """Number of input files the export pass will visit."""
        return len(self._input_files) - len(self._failed_imports)

    @property
    def current_file(self) -> Optional[str]:
        if 0 <= self.current_index < len(self._input_files):
            return self._input_files[self.current_index]
        return None

    def add_observer(self, observer: JobObserver) -> None:
        self._observers.append(observer)

    # --- Import ---

    def next_file(self, import_manager) -> Optional[Any]:
        """
        Imports the next queued file that holds valid data.

        Files that fail to import are reported through `file_import_failed`
        and skipped. Returns None (state IMPORT_FAILED) when no file remains.
        """
        self.state = JobState.IMPORTING
        while self.current_index + 1 < len(self._input_files):
            self.current_index += 1
            path = self._input_files[self.current_index]
            data = self._import(self.current_index, path, import_manager)
            if data is not None:
                self.current_data = data
                self.state = JobState.CONFIGURING_EXPORT
                return data

        self.current_data = None
        self.state = JobState.IMPORT_FAILED
        return None

    def _import(self, index: int, path: str, import_manager) -> Optional[Any]:
        try:
            data = import_manager.import_file(path)
            if data is None or not data.is_valid:
                raise DataImportError(f"'{path}' does not contain valid data.")
        except Exception as e:
            logger.debug("Import of '%s' failed: %s", path, e, exc_info=True)
            self._failed_imports.add(index)
            self._emit("file_import_failed", index, path, e)
            return None
        self._emit("file_imported", index, path)
        return data

    # --- Export ---

    def output_base_for(self, path: str) -> Path:
        """Destination of one input file, without format extension."""
        if self.output_path is None:
            raise ValueError("No output path has been set for this job.")
        if self._batch_mode:
            return self.output_path / Path(path).stem
        return self.output_path.with_suffix("")

    def export_all(self, import_manager, export_manager) -> int:
        """
        Imports, modifies and exports every input file.

        Per-file failures are reported and do not stop the remaining files.
        Returns the number of files exported successfully.
        """
        self.state = JobState.EXPORTING
        exported = 0
        for index, path in enumerate(self._input_files):
            if index in self._failed_imports:
                continue
            if index == self.current_index and self.current_data is not None:
                data = self.current_data
            else:
                data = self._import(index, path, import_manager)
                if data is None:
                    continue

            try:
                modified = self.modification_chain.apply(data)
                export_manager.export(modified, self.export_settings, self.output_base_for(path))
            except Exception as e:
                logger.error("Export of '%s' failed: %s", path, e, exc_info=True)
                self._emit("file_export_failed", index, path, e)
                continue

            exported += 1
            self._emit("file_exported", index, path)

        self.state = JobState.DONE
        self._emit("export_completed")
        return exported

    def abort(self) -> None:
        self.state = JobState.ABORTED
        logger.info("Job aborted with %d input file(s).", len(self._input_files))

    def _emit(self, event: str, *args) -> None:
        for observer in self._observers:
            getattr(observer, event)(*args)

    def __repr__(self) -> str:
        return (
            f"<Job files={len(self._input_files)} batch={self._batch_mode} "
            f"state={self.state.value} modifiers={len(self.modification_chain)}>"
        )
