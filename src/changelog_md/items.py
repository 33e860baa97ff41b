"""Add entries to the Unreleased section."""

from __future__ import annotations

import logging

from changelog_md.config import PLACEHOLDER_ITEM
from changelog_md.schemas import (
    ChangelogNode,
    Heading,
    ListGroupMarker,
    ListItem,
    TokenKind,
    heading_is,
    kind_is,
)
from changelog_md.sections import (
    find_unreleased,
    title_node,
    unreleased_heading,
    unreleased_position,
)

logger = logging.getLogger(__name__)


def placeholder_list() -> ChangelogNode:
    """A list group holding only the ``Nothing yet!`` item."""
    return ChangelogNode(
        token=ListGroupMarker(),
        children=[ChangelogNode(token=ListItem(text=PLACEHOLDER_ITEM))],
    )


def is_placeholder_list(node: ChangelogNode) -> bool:
    if node.kind is not TokenKind.LIST_GROUP or len(node.children) != 1:
        return False
    item = node.children[0]
    return item.kind is TokenKind.LIST_ITEM and item.token.text == PLACEHOLDER_ITEM


def ensure_unreleased(root: ChangelogNode, scope: str | None = None) -> ChangelogNode:
    """Return the Unreleased heading for ``scope``, creating it when absent.

    A new section is placed under the title, after its description.

    Raises:
        StructuralError: If the section must be created but the document has
            no level-1 title.
    """
    unreleased = find_unreleased(root, scope)
    if unreleased is not None:
        return unreleased

    title = title_node(root)
    unreleased = ChangelogNode(token=Heading(level=2, text=unreleased_heading(scope)))
    title.insert_child_at(unreleased_position(title), unreleased)
    logger.debug("Created %s section", unreleased.heading_text)
    return unreleased


def add_item(
    root: ChangelogNode, section_name: str, text: str, scope: str | None = None
) -> ChangelogNode:
    """Append ``text`` to the ``section_name`` category of the Unreleased section.

    Missing pieces (the Unreleased heading, the category heading, its list)
    are created on the way and the ``Nothing yet!`` placeholder is dropped,
    so calling this repeatedly accumulates items in call order.

    Returns:
        The Unreleased heading node.
    """
    unreleased = ensure_unreleased(root, scope)

    placeholder_index = unreleased.child_index(is_placeholder_list)
    if placeholder_index is not None:
        del unreleased.children[placeholder_index]
        logger.debug("Removed placeholder from %s", unreleased.heading_text)

    category = unreleased.find_mut(heading_is(3, text=section_name))
    if category is None:
        category = unreleased.append_child(
            ChangelogNode(token=Heading(level=3, text=section_name))
        )

    items = category.find_mut(kind_is(TokenKind.LIST_GROUP))
    if items is None:
        items = category.append_child(ChangelogNode(token=ListGroupMarker()))

    items.append_child(ChangelogNode(token=ListItem(text=text)))
    logger.debug("Added %r to %s / %s", text, unreleased.heading_text, section_name)
    return unreleased
