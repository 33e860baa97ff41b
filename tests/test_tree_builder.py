"""Tests for building the changelog tree."""

from __future__ import annotations

from changelog_md.schemas import (
    ChangelogNode,
    Heading,
    ListItem,
    Paragraph,
    ReferenceDefinition,
    TokenKind,
)
from changelog_md.tree_builder import build_tree, parse


def _shape(node: ChangelogNode) -> list:
    """Compact (kind, children) view of a tree for assertions."""
    return [(child.kind.value, _shape(child)) for child in node.children]


class TestBuildTree:
    """Tests for build_tree and parse."""

    def test_headings_nest_by_level(self) -> None:
        """Lower level headings own the higher level ones that follow."""
        root = build_tree(
            [
                Heading(level=1, text="Changelog"),
                Heading(level=2, text="[1.0.0]"),
                Heading(level=3, text="Added"),
                Heading(level=3, text="Fixed"),
                Heading(level=2, text="[0.9.0]"),
            ]
        )

        title = root.children[0]
        assert len(root.children) == 1
        assert [child.heading_text for child in title.children] == ["[1.0.0]", "[0.9.0]"]
        assert [child.heading_text for child in title.children[0].children] == [
            "Added",
            "Fixed",
        ]
        assert title.children[1].children == []

    def test_empty_heading_does_not_swallow_sibling(self) -> None:
        """A heading directly followed by one of the same level stays empty."""
        root = parse("# Title\n\n## A\n\n## B\n\n### Added\n\n- x")

        title = root.children[0]
        assert [child.heading_text for child in title.children] == ["A", "B"]
        assert title.children[0].children == []

    def test_list_items_are_grouped(self) -> None:
        """Consecutive list items share one synthetic list group."""
        root = build_tree(
            [
                Heading(level=3, text="Added"),
                ListItem(text="a"),
                ListItem(text="b"),
                Paragraph(text="note"),
                ListItem(text="c"),
            ]
        )

        assert _shape(root) == [
            (
                "heading",
                [
                    ("list_group", [("list_item", []), ("list_item", [])]),
                    ("paragraph", []),
                    ("list_group", [("list_item", [])]),
                ],
            )
        ]

    def test_list_item_parent_is_always_list_group(self, changelog_text: str) -> None:
        """Every list item in a parsed document sits under a list group."""
        root = parse(changelog_text)

        for node in root.walk():
            for child in node.children:
                if child.kind is TokenKind.LIST_ITEM:
                    assert node.kind is TokenKind.LIST_GROUP

    def test_reference_closes_open_sections(self) -> None:
        """References always land flat at the root."""
        root = build_tree(
            [
                Heading(level=1, text="Changelog"),
                Heading(level=2, text="[1.0.0]"),
                Heading(level=3, text="Added"),
                ListItem(text="a"),
                ReferenceDefinition(label="1.0.0", url="https://example.com"),
                ReferenceDefinition(label="0.9.0", url="https://example.org"),
            ]
        )

        assert [child.kind for child in root.children] == [
            TokenKind.HEADING,
            TokenKind.REFERENCE,
            TokenKind.REFERENCE,
        ]

    def test_parsed_document_layout(self, changelog_text: str) -> None:
        """Title owns description and versions; links trail at the root."""
        root = parse(changelog_text)

        title = root.children[0]
        assert title.heading_level == 1
        assert [child.kind for child in title.children[:2]] == [
            TokenKind.PARAGRAPH,
            TokenKind.PARAGRAPH,
        ]
        assert [child.heading_text for child in title.children[2:]] == [
            "[Unreleased]",
            "[1.1.0] - 2024-02-01",
            "[1.0.0] - 2024-01-01",
        ]
        assert [child.token.label for child in root.children[1:]] == [
            "unreleased",
            "1.1.0",
            "1.0.0",
        ]

    def test_empty_input(self) -> None:
        """No tokens gives a bare root."""
        root = build_tree([])

        assert root.token is None
        assert root.children == []
