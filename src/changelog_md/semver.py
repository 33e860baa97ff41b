"""Semantic version parsing and bumping."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

from changelog_md.exceptions import SemVerErrorCause, SemVerParseError

_COMPONENTS = (
    ("major", SemVerErrorCause.MISSING_MAJOR),
    ("minor", SemVerErrorCause.MISSING_MINOR),
    ("patch", SemVerErrorCause.MISSING_PATCH),
)

INFER = "infer"


class BumpKind(str, Enum):
    """Which component of a version to increment."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"


@dataclass(frozen=True, order=True)
class SemVer:
    """Semantic Versioning 2.0.0 version.

    Versions order by ``(major, minor, patch)``. The pre-release tag is kept
    for display only: it takes no part in comparisons and is dropped by
    every bump.
    """

    major: int
    minor: int
    patch: int
    pre_release: str | None = field(default=None, compare=False)

    @classmethod
    def parse(cls, text: str) -> SemVer:
        """Parse ``major.minor.patch[-prerelease]``.

        Raises:
            SemVerParseError: With the missing or non-numeric component.
        """
        raw = text.strip()
        core, _, pre_release = raw.partition("-")
        parts = core.split(".", 2)

        values: list[int] = []
        for index, (name, missing) in enumerate(_COMPONENTS):
            if index >= len(parts) or not parts[index]:
                raise SemVerParseError(raw, missing, name)
            part = parts[index]
            if not (part.isascii() and part.isdigit()):
                raise SemVerParseError(raw, SemVerErrorCause.NON_NUMERIC, name)
            values.append(int(part))

        major, minor, patch = values
        return cls(major, minor, patch, pre_release or None)

    def bump(self, kind: BumpKind | str) -> SemVer:
        kind = BumpKind(kind.lower() if isinstance(kind, str) else kind)
        if kind is BumpKind.MAJOR:
            return SemVer(self.major + 1, 0, 0)
        if kind is BumpKind.MINOR:
            return SemVer(self.major, self.minor + 1, 0)
        return SemVer(self.major, self.minor, self.patch + 1)

    def infer(self) -> SemVer:
        """Keep the current version as the release version."""
        return replace(self)

    def change_to(self, target: str) -> SemVer:
        """Resolve a release request against this version.

        ``target`` is one of ``major``, ``minor``, ``patch``, ``infer`` or an
        explicit version such as ``1.2.3``.
        """
        lowered = target.strip().lower()
        if lowered == INFER:
            return self.infer()
        if lowered in {kind.value for kind in BumpKind}:
            return self.bump(lowered)
        return SemVer.parse(target)

    def __str__(self) -> str:
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.pre_release:
            return f"{version}-{self.pre_release}"
        return version
