"""Custom exceptions for changelog-md."""

from __future__ import annotations

from enum import Enum


class ChangelogError(Exception):
    """Base exception for changelog-md operations."""


class ParseError(ChangelogError):
    """Error during changelog tokenization."""

    def __init__(self, message: str, *, line: int | None = None) -> None:
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class StructuralError(ChangelogError):
    """Document is missing its level-1 title heading."""


class MissingVersionError(ChangelogError):
    """Release attempted without a previous version reference to diff against."""


class SectionNotFoundError(ChangelogError):
    """Requested section does not exist in the changelog."""


class CollaboratorError(ChangelogError):
    """Failure raised by an external collaborator (VCS, package manager, network)."""


class SemVerErrorCause(str, Enum):
    """Reason a version string could not be parsed."""

    MISSING_MAJOR = "missing_major"
    MISSING_MINOR = "missing_minor"
    MISSING_PATCH = "missing_patch"
    NON_NUMERIC = "non_numeric"


class SemVerParseError(ParseError):
    """Version string is not ``major.minor.patch[-prerelease]``."""

    def __init__(
        self, text: str, cause: SemVerErrorCause, component: str | None = None
    ) -> None:
        self.text = text
        self.cause = cause
        self.component = component
        if cause is SemVerErrorCause.NON_NUMERIC:
            message = f"{component} version is not numeric in {text!r}"
        else:
            message = f"{component} version is missing in {text!r}"
        super().__init__(message)
