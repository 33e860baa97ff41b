"""Token models produced by the changelog tokenizer."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class TokenKind(str, Enum):
    """Every kind of token the changelog dialect knows about."""

    HEADING = "heading"
    PARAGRAPH = "paragraph"
    LIST_GROUP = "list_group"
    LIST_ITEM = "list_item"
    REFERENCE = "reference"
    BLANK_LINE = "blank_line"


class _FrozenToken(BaseModel):
    model_config = ConfigDict(frozen=True)


class Heading(_FrozenToken):
    """``#``, ``##`` or ``###`` heading."""

    kind: Literal[TokenKind.HEADING] = TokenKind.HEADING
    level: int = Field(..., ge=1, le=3)
    text: str


class Paragraph(_FrozenToken):
    """Opaque block of text, rendered back verbatim."""

    kind: Literal[TokenKind.PARAGRAPH] = TokenKind.PARAGRAPH
    text: str


class ListGroupMarker(_FrozenToken):
    """Synthetic parent grouping consecutive list items."""

    kind: Literal[TokenKind.LIST_GROUP] = TokenKind.LIST_GROUP


class ListItem(_FrozenToken):
    """``- text`` line with its original indentation."""

    kind: Literal[TokenKind.LIST_ITEM] = TokenKind.LIST_ITEM
    text: str
    indent: int = Field(default=0, ge=0)


class ReferenceDefinition(_FrozenToken):
    """Trailing ``[label]: url`` link definition."""

    kind: Literal[TokenKind.REFERENCE] = TokenKind.REFERENCE
    label: str
    url: str


class BlankLine(_FrozenToken):
    """Separator emitted after a list group."""

    kind: Literal[TokenKind.BLANK_LINE] = TokenKind.BLANK_LINE


Token = Annotated[
    Union[Heading, Paragraph, ListGroupMarker, ListItem, ReferenceDefinition, BlankLine],
    Field(discriminator="kind"),
]
