"""changelog-md: parse and edit Keep a Changelog documents."""

from changelog_md.changelog import Changelog, parse_amount
from changelog_md.exceptions import (
    ChangelogError,
    CollaboratorError,
    MissingVersionError,
    ParseError,
    SectionNotFoundError,
    SemVerErrorCause,
    SemVerParseError,
    StructuralError,
)
from changelog_md.items import add_item
from changelog_md.release import release
from changelog_md.renderer import render, render_document
from changelog_md.schemas import ChangelogNode, ReferenceEntry, TokenKind
from changelog_md.sections import require_section, resolve
from changelog_md.semver import BumpKind, SemVer
from changelog_md.tokenizer import tokenize
from changelog_md.tree_builder import build_tree, parse

__all__ = [
    "BumpKind",
    "Changelog",
    "ChangelogError",
    "ChangelogNode",
    "CollaboratorError",
    "MissingVersionError",
    "ParseError",
    "ReferenceEntry",
    "SectionNotFoundError",
    "SemVer",
    "SemVerErrorCause",
    "SemVerParseError",
    "StructuralError",
    "TokenKind",
    "add_item",
    "build_tree",
    "parse",
    "parse_amount",
    "release",
    "render",
    "render_document",
    "require_section",
    "resolve",
    "tokenize",
]
