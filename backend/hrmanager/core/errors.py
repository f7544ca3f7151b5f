"""Exception hierarchy for the HR manager.

Parse and command errors are recoverable and reported to the user verbatim.
Data-conversion and storage errors only occur at the file boundary and are
kept apart so callers can react differently to corrupt data and to I/O faults.
"""


class HrManagerError(Exception):
    """Base exception for all HR manager errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ParseError(HrManagerError):
    """User input could not be turned into a command."""

    def __init__(self, message: str, usage: str | None = None):
        super().__init__(message)
        self.usage = usage


class CommandError(HrManagerError):
    """A well-formed command failed a precondition at execution time."""


class DataConversionError(HrManagerError):
    """A persisted document is well-formed but holds invalid or dangling values."""


class StorageError(HrManagerError):
    """A data file could not be read, parsed, or written."""


class DuplicateEntityError(HrManagerError):
    """An entity that is the same as a stored one was added to a repository."""

    def __init__(self, label: str):
        super().__init__(f"Operation would result in duplicate {label}s")
        self.label = label


class EntityNotFoundError(HrManagerError):
    """The entity to remove or replace is not in the repository."""

    def __init__(self, label: str):
        super().__init__(f"The {label} does not exist")
        self.label = label
