"""Changelog tree model and its query/mutation primitives."""

from __future__ import annotations

from typing import Callable, Iterator

from pydantic import BaseModel, Field

from changelog_md.schemas.tokens import Heading, Token, TokenKind

NodePredicate = Callable[["ChangelogNode"], bool]


class ChangelogNode(BaseModel):
    """A node of the changelog tree.

    The root carries no token. Headings own the content that follows them,
    list items always live under a synthetic ``ListGroupMarker`` node and
    reference definitions sit flat at the root.

    Mutating helpers edit the tree in place. Callers follow a single-writer
    convention: a node obtained from :meth:`find_mut` is the only live handle
    used for edits until it is dropped.
    """

    token: Token | None = None
    children: list["ChangelogNode"] = Field(default_factory=list)

    @property
    def kind(self) -> TokenKind | None:
        return self.token.kind if self.token is not None else None

    @property
    def heading_level(self) -> int | None:
        if isinstance(self.token, Heading):
            return self.token.level
        return None

    @property
    def heading_text(self) -> str | None:
        if isinstance(self.token, Heading):
            return self.token.text
        return None

    def walk(self) -> Iterator[ChangelogNode]:
        """Yield this node and its descendants in pre-order."""
        stack: list[ChangelogNode] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def find(self, predicate: NodePredicate) -> ChangelogNode | None:
        """Return the first pre-order match (self included), or None."""
        for node in self.walk():
            if predicate(node):
                return node
        return None

    def find_mut(self, predicate: NodePredicate) -> ChangelogNode | None:
        """Like :meth:`find`, for callers that are about to edit the match."""
        return self.find(predicate)

    def filter(self, predicate: NodePredicate) -> list[ChangelogNode]:
        """Return every pre-order match (self included)."""
        return [node for node in self.walk() if predicate(node)]

    def child_index(self, predicate: NodePredicate) -> int | None:
        """Index of the first direct child matching predicate."""
        for index, child in enumerate(self.children):
            if predicate(child):
                return index
        return None

    def append_child(self, node: ChangelogNode) -> ChangelogNode:
        self.children.append(node)
        return node

    def insert_child_at(self, index: int, node: ChangelogNode) -> ChangelogNode:
        self.children.insert(index, node)
        return node

    def remove_child(self, node: ChangelogNode) -> None:
        for index, child in enumerate(self.children):
            if child is node:
                del self.children[index]
                return
        raise ValueError("node is not a direct child")

    def rename_heading(self, text: str) -> None:
        """Replace a heading's text in place. No-op for other nodes."""
        if isinstance(self.token, Heading):
            self.token = self.token.model_copy(update={"text": text})


def kind_is(kind: TokenKind) -> NodePredicate:
    """Match nodes carrying a token of the given kind."""

    def _match(node: ChangelogNode) -> bool:
        return node.kind is kind

    return _match


def heading_is(
    level: int, *, text: str | None = None, prefix: str | None = None
) -> NodePredicate:
    """Match headings of ``level``, optionally by case-insensitive text or prefix."""
    wanted_text = text.lower() if text is not None else None
    wanted_prefix = prefix.lower() if prefix is not None else None

    def _match(node: ChangelogNode) -> bool:
        if node.heading_level != level:
            return False
        current = (node.heading_text or "").lower()
        if wanted_text is not None and current != wanted_text:
            return False
        if wanted_prefix is not None and not current.startswith(wanted_prefix):
            return False
        return True

    return _match


def reference_is(label: str) -> NodePredicate:
    """Match reference definitions by case-insensitive label."""
    wanted = label.lower()

    def _match(node: ChangelogNode) -> bool:
        return node.kind is TokenKind.REFERENCE and node.token.label.lower() == wanted

    return _match
