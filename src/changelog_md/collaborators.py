"""Interfaces of the outside tools changelog-md works alongside.

Version control, the package manager, the GitHub metadata lookup, the
package manifest and the interactive editor all live outside this package.
Callers implement the protocols below and hand them to the helpers at the
bottom of this module, which keep their failures visible as
:class:`CollaboratorError`.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Protocol, TypeVar

from changelog_md.exceptions import ChangelogError, CollaboratorError
from changelog_md.semver import SemVer

logger = logging.getLogger(__name__)

T = TypeVar("T")

COMMIT_MESSAGE = "update changelog"


class VersionControl(Protocol):
    def long_hash(self, revision: str) -> str: ...

    def short_hash(self, revision: str) -> str: ...

    def commit_message(self, revision: str) -> str: ...

    def is_repo(self) -> bool: ...

    def add(self, path: str) -> VersionControl: ...

    def commit(self, message: str) -> VersionControl: ...

    def tag(self, name: str) -> VersionControl: ...


class PackageManager(Protocol):
    def bump_version(self, version: str, options: Mapping[str, Any] | None = None) -> None: ...


class MetadataResolver(Protocol):
    def resolve_title(self, reference: str) -> str:
        """Display title of a commit, pull request, issue or discussion URL."""
        ...


class ManifestReader(Protocol):
    @property
    def name(self) -> str: ...

    @property
    def version(self) -> str: ...

    @property
    def workspaces(self) -> list[str] | None: ...


class Editor(Protocol):
    def edit(self, preface: str | None = None) -> str | None: ...


def call_collaborator(fn: Callable[..., T], *args: Any, what: str, **kwargs: Any) -> T:
    """Call an external collaborator, wrapping its failures.

    Raises:
        CollaboratorError: Chained to whatever the collaborator raised.
    """
    try:
        return fn(*args, **kwargs)
    except ChangelogError:
        raise
    except Exception as exc:
        logger.debug("%s failed", what, exc_info=True)
        raise CollaboratorError(f"{what} failed: {exc}") from exc


def resolve_item_text(
    *,
    message: str | None = None,
    reference: str | None = None,
    resolver: MetadataResolver | None = None,
) -> str | None:
    """Turn either a manual message or a GitHub reference into entry text."""
    if message:
        return message
    if reference and resolver is not None:
        return call_collaborator(
            resolver.resolve_title, reference, what=f"Looking up {reference}"
        )
    return None


def parse_editor_entries(text: str | None) -> list[str]:
    """Split editor output into entries, skipping blank and ``#`` comment lines."""
    if not text:
        return []
    entries: list[str] = []
    for line in text.strip().splitlines():
        line = line.strip()
        if line and not line.startswith("#"):
            entries.append(line)
    return entries


def read_editor_entries(editor: Editor, preface: str | None = None) -> list[str]:
    """Ask the editor for entries, one per line."""
    return parse_editor_entries(call_collaborator(editor.edit, preface, what="Editing entries"))


def next_version(manifest: ManifestReader, target: str) -> SemVer:
    """Version a package moves to, from its manifest version and a release target."""
    return SemVer.parse(manifest.version).change_to(target)


def bump_package_version(manager: PackageManager, version: SemVer | str) -> None:
    """Write ``version`` to the package manifest without letting the manager tag it."""
    call_collaborator(
        manager.bump_version,
        str(version),
        {"git_tag_version": False},
        what=f"Bumping package version to {version}",
    )


def commit_changelog(
    vcs: VersionControl, path: str, message: str = COMMIT_MESSAGE, tag: str | None = None
) -> None:
    """Stage and commit the changelog, optionally tagging the commit."""
    call_collaborator(vcs.add, path, what=f"Staging {path}")
    call_collaborator(vcs.commit, message, what="Committing changelog")
    if tag:
        call_collaborator(vcs.tag, tag, what=f"Tagging {tag}")
    logger.debug("Committed %s%s", path, f" as {tag}" if tag else "")
