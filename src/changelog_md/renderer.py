"""Serialize a changelog tree back to Markdown."""

from __future__ import annotations

from changelog_md.schemas import BlankLine, ChangelogNode, Token, TokenKind

_BLANK_LINE = BlankLine()


def flatten(node: ChangelogNode) -> list[Token]:
    """Flatten a (sub)tree back into its token sequence.

    A list group contributes its items followed by exactly one blank line.
    """
    tokens: list[Token] = []
    if node.kind is TokenKind.LIST_GROUP:
        for child in node.children:
            tokens.extend(flatten(child))
        tokens.append(_BLANK_LINE)
        return tokens

    if node.token is not None:
        tokens.append(node.token)
    for child in node.children:
        tokens.extend(flatten(child))
    return tokens


def render_token(token: Token) -> str:
    if token.kind is TokenKind.HEADING:
        return f"{'#' * token.level} {token.text}\n"
    if token.kind is TokenKind.PARAGRAPH:
        return f"{token.text}\n"
    if token.kind is TokenKind.LIST_ITEM:
        return f"{' ' * token.indent}- {token.text}"
    if token.kind is TokenKind.REFERENCE:
        return f"[{token.label}]: {token.url}"
    return ""


def render(node: ChangelogNode) -> str:
    """Render a (sub)tree as Markdown, one token per line."""
    return "\n".join(render_token(token) for token in flatten(node))


def render_document(node: ChangelogNode) -> str:
    """Render a full document with exactly one trailing newline."""
    return render(node).rstrip("\n") + "\n"
