"""Error types for 2log."""

from enum import Enum


class ErrorKind(Enum):
    """Failure categories surfaced to the user."""

    DIRECTORY_NOT_FOUND = "directory_not_found"
    HEADER_NOT_FOUND = "header_not_found"
    FILE_WRITE_ERROR = "file_write_error"
    INVALID_ARGUMENTS = "invalid_arguments"
    INVALID_TIME_FORMAT = "invalid_time_format"
    NO_ENTRIES_TO_UNDO = "no_entries_to_undo"


class TwoLogError(Exception):
    """A terminal failure for one invocation, with an optional remediation hint."""

    def __init__(self, kind: ErrorKind, message: str, hint: str | None = None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.hint = hint
