"""Shared schemas for changelog-md."""

from changelog_md.schemas.nodes import (
    ChangelogNode,
    NodePredicate,
    heading_is,
    kind_is,
    reference_is,
)
from changelog_md.schemas.references import ReferenceEntry
from changelog_md.schemas.tokens import (
    BlankLine,
    Heading,
    ListGroupMarker,
    ListItem,
    Paragraph,
    ReferenceDefinition,
    Token,
    TokenKind,
)

__all__ = [
    "BlankLine",
    "ChangelogNode",
    "Heading",
    "ListGroupMarker",
    "ListItem",
    "NodePredicate",
    "Paragraph",
    "ReferenceDefinition",
    "ReferenceEntry",
    "Token",
    "TokenKind",
    "heading_is",
    "kind_is",
    "reference_is",
]
