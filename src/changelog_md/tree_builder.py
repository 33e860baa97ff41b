"""Build the changelog tree from tokens."""

from __future__ import annotations

from typing import Iterable

from changelog_md.schemas import ChangelogNode, ListGroupMarker, Token, TokenKind
from changelog_md.tokenizer import tokenize


def parse(text: str) -> ChangelogNode:
    """Tokenize and build the tree for a changelog document."""
    return build_tree(tokenize(text))


def build_tree(tokens: Iterable[Token]) -> ChangelogNode:
    """Arrange tokens into a tree following heading levels.

    A heading of level L owns everything after it up to the next heading of
    level <= L. A reference definition closes every open heading and is
    attached to the root, so the trailing link block stays flat. Consecutive
    list items are grouped under one synthetic ``ListGroupMarker`` node.
    """
    root = ChangelogNode()
    stack: list[ChangelogNode] = []
    open_list: ChangelogNode | None = None

    for token in tokens:
        if token.kind is TokenKind.LIST_ITEM:
            if open_list is None:
                open_list = ChangelogNode(token=ListGroupMarker())
                (stack[-1] if stack else root).append_child(open_list)
            open_list.append_child(ChangelogNode(token=token))
            continue

        open_list = None
        node = ChangelogNode(token=token)

        if token.kind is TokenKind.HEADING:
            while stack and stack[-1].heading_level >= token.level:
                stack.pop()
            (stack[-1] if stack else root).append_child(node)
            stack.append(node)
        elif token.kind is TokenKind.REFERENCE:
            stack.clear()
            root.append_child(node)
        else:
            (stack[-1] if stack else root).append_child(node)

    return root
