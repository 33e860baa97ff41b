"""Changelog document facade: load, edit, query and persist a changelog file."""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path

from changelog_md.config import (
    CHANGELOG_MD_DEFAULT_SECTION,
    CHANGELOG_MD_FILENAME,
    CHANGELOG_MD_LIST_AMOUNT,
    CHANGELOG_TEMPLATE,
)
from changelog_md.formatting import format_version_list
from changelog_md.items import add_item
from changelog_md.release import latest_reference, release
from changelog_md.renderer import render, render_document
from changelog_md.schemas import ChangelogNode, ReferenceEntry, TokenKind, kind_is
from changelog_md.sections import is_unreleased_label, resolve
from changelog_md.semver import SemVer
from changelog_md.tree_builder import parse

logger = logging.getLogger(__name__)

ALL_AMOUNT = "all"


def parse_amount(value: str | int | None) -> int | None:
    """Parse a listing amount: a positive count, or ``"all"`` (None)."""
    if value is None or (isinstance(value, str) and value.strip().lower() == ALL_AMOUNT):
        return None
    try:
        amount = int(value)
    except ValueError as exc:
        raise ValueError("Invalid amount") from exc
    if amount < 0:
        raise ValueError("Invalid amount")
    return amount


class Changelog:
    """A parsed changelog document, optionally bound to a file."""

    def __init__(self, root: ChangelogNode, path: Path | None = None) -> None:
        self.root = root
        self.path = path

    @classmethod
    def from_text(cls, text: str, path: Path | None = None) -> Changelog:
        return cls(parse(text), path)

    @classmethod
    def load(cls, path: Path | None = None) -> Changelog:
        """Read and parse a changelog file.

        Without a path, ``CHANGELOG_MD_FILENAME`` in the working directory is read.

        Raises:
            FileNotFoundError: If the file does not exist.
            ParseError: If the file contains a malformed reference line.
        """
        path = path or Path(CHANGELOG_MD_FILENAME)
        return cls.from_text(path.read_text(encoding="utf-8"), path)

    @staticmethod
    def init(path: Path | None = None) -> bool:
        """Write a fresh changelog unless one exists. Returns True when written."""
        path = path or Path(CHANGELOG_MD_FILENAME)
        if path.exists():
            logger.info("%s already exists, leaving it untouched", path)
            return False
        path.write_text(CHANGELOG_TEMPLATE, encoding="utf-8")
        return True

    def render(self) -> str:
        return render_document(self.root)

    def persist(self) -> None:
        if self.path is None:
            raise ValueError("Changelog is not bound to a file")
        self.path.write_text(self.render(), encoding="utf-8")

    def add_item(
        self,
        text: str,
        section_name: str = CHANGELOG_MD_DEFAULT_SECTION,
        scope: str | None = None,
    ) -> None:
        add_item(self.root, section_name, text, scope)

    def release(
        self, version: SemVer | str, scope: str | None = None, today: date | None = None
    ) -> None:
        release(self.root, version, scope, today)

    def resolve(self, selector: str | None = None, scope: str | None = None) -> ChangelogNode | None:
        return resolve(self.root, selector, scope)

    def notes(self, selector: str | None = None, scope: str | None = None) -> str:
        """Rendered body of the selected section, or a not-found message."""
        body = self.resolve(selector, scope)
        if body is None:
            wanted = selector or "<unknown>"
            logger.warning("Couldn't find notes for version: %s", wanted)
            return f"Couldn't find notes for version: {wanted}"
        return render(body)

    def latest_version(self, scope: str | None = None) -> str | None:
        reference = latest_reference(self.root, scope)
        return reference.token.label if reference is not None else None

    def references(self) -> list[ReferenceEntry]:
        return [
            ReferenceEntry(label=node.token.label, url=node.token.url)
            for node in self.root.filter(kind_is(TokenKind.REFERENCE))
        ]

    def list_versions(
        self, amount: int | None = CHANGELOG_MD_LIST_AMOUNT, *, include_unreleased: bool = True
    ) -> list[ReferenceEntry]:
        entries = self.references()
        if not include_unreleased:
            entries = [entry for entry in entries if not is_unreleased_label(entry.label)]
        return entries if amount is None else entries[:amount]

    def format_versions(self, amount: int | None = CHANGELOG_MD_LIST_AMOUNT) -> str:
        return format_version_list(self.list_versions(amount))
