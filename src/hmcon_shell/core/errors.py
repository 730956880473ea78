# src/hmcon_shell/core/errors.py
"""
Exception hierarchy for the HMCon shell.
"""


class HMConError(Exception):
    """Base exception for the HMCon shell."""

    pass


class UserInputError(HMConError):
    """Unknown command, missing arguments or an unmatched modifier name."""

    pass


class DataImportError(HMConError):
    pass


class DataExportError(HMConError):
    pass


class ScriptError(HMConError):
    """A script could not be queued."""

    pass


class QueueOverflowError(ScriptError):
    pass
