"""Error taxonomy for the generator.

Every error is terminal for the invocation. The CLI layer is the only place
that turns these into a printed line and an exit code.
"""

from __future__ import annotations


class PassgenError(Exception):
    """Base class for reportable generator errors."""

    exit_code: int = 1


class InvalidModeError(PassgenError):
    """`--type` is neither `chars` nor `words`."""

    def __init__(self, value: object) -> None:
        super().__init__("Invalid type. Allowed types are 'chars' and 'words'.")
        self.value = value


class InvalidRangeError(PassgenError):
    """Length bounds are negative or inverted."""

    def __init__(self, message: str, *, min_length: int, max_length: int) -> None:
        super().__init__(message)
        self.min_length = min_length
        self.max_length = max_length


class EmptyCandidateListError(PassgenError):
    """No catalog word fits the requested length bounds."""

    def __init__(self, *, min_length: int, max_length: int) -> None:
        super().__init__("No words found with the specified length constraints.")
        self.min_length = min_length
        self.max_length = max_length


class FileWriteError(PassgenError):
    """The secret could not be written to `--file`."""

    def __init__(self, path: object, reason: str) -> None:
        super().__init__(f"could not write to file {path}: {reason}")
        self.path = path
        self.reason = reason
