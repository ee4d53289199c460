"""
Result and error types shared by the scanner and analyzer.

Recoverable failures (a file that cannot be read, a rejected extension,
a failed remote call) come back as an Outcome carrying a tagged Failure.
Fatal ones (an unreadable directory, a missing credential) are raised as
RepoInsightError subclasses carrying the same Failure.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class FailureKind(str, Enum):
    FILE_READ = "file_read"
    EXTENSION_NOT_ALLOWED = "extension_not_allowed"
    DIRECTORY_LISTING = "directory_listing"
    REMOTE_CALL = "remote_call"
    MISSING_CREDENTIAL = "missing_credential"


@dataclass(frozen=True)
class Failure:
    """Why an operation produced no value."""
    kind: FailureKind
    message: str


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Either a value or a failure, never both."""
    value: T | None = None
    failure: Failure | None = None

    def __post_init__(self):
        if self.failure is not None and self.value is not None:
            raise ValueError("Outcome cannot carry both a value and a failure")

    @classmethod
    def success(cls, value: T) -> "Outcome[T]":
        return cls(value=value)

    @classmethod
    def fail(cls, kind: FailureKind, message: str) -> "Outcome[T]":
        return cls(failure=Failure(kind, message))

    @property
    def ok(self) -> bool:
        return self.failure is None

    @property
    def text(self) -> str:
        """The value as a string, or the failure message when there is none."""
        if self.failure is not None:
            return self.failure.message
        return "" if self.value is None else str(self.value)


class RepoInsightError(Exception):
    """Base class for failures that abort an invocation.

    Subclasses must set kind.
    """

    kind: FailureKind

    def __init__(self, message: str):
        if not isinstance(getattr(type(self), "kind", None), FailureKind):
            raise TypeError(f"{type(self).__name__} does not declare a failure kind")
        super().__init__(message)
        self.failure = Failure(self.kind, message)


class DirectoryScanError(RepoInsightError, OSError):
    """A directory could not be listed during a scan."""

    kind = FailureKind.DIRECTORY_LISTING

    def __init__(self, path: str, message: str):
        super().__init__(f"Cannot scan directory '{path}': {message}")
        self.path = path


class MissingCredentialError(RepoInsightError):
    """No client is configured for the remote model endpoint."""

    kind = FailureKind.MISSING_CREDENTIAL
