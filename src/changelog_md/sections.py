"""Section naming conventions and section lookup."""

from __future__ import annotations

import logging

from changelog_md.config import UNRELEASED_INDEX, UNRELEASED_NAME
from changelog_md.exceptions import SectionNotFoundError, StructuralError
from changelog_md.schemas import ChangelogNode, NodePredicate, heading_is

logger = logging.getLogger(__name__)

LATEST_SELECTOR = "latest"
UNRELEASED_SELECTOR = "unreleased"

_UNRELEASED_KEY = UNRELEASED_NAME.lower()


def unreleased_label(scope: str | None = None) -> str:
    """Link label of the Unreleased section, e.g. ``Unreleased - web``."""
    if scope:
        return f"{UNRELEASED_NAME} - {scope}"
    return UNRELEASED_NAME


def unreleased_heading(scope: str | None = None) -> str:
    return f"[{unreleased_label(scope)}]"


def version_label(version: object, scope: str | None = None) -> str:
    """Link label of a release: ``1.2.0`` or ``scope@v1.2.0``."""
    if scope:
        return f"{scope}@v{version}"
    return str(version)


def release_heading(version: object, date: str, scope: str | None = None) -> str:
    return f"[{version_label(version, scope)}] - {date}"


def release_tag(version: object, scope: str | None = None) -> str:
    """Version-control tag of a release: ``v1.2.0`` or ``scope@v1.2.0``."""
    if scope:
        return version_label(version, scope)
    return f"v{version}"


def is_unreleased_label(label: str) -> bool:
    """True for the Unreleased label of any scope."""
    lowered = label.lower()
    return lowered == _UNRELEASED_KEY or lowered.startswith(f"{_UNRELEASED_KEY} - ")


def is_unreleased_heading(text: str, scope: str | None = None) -> bool:
    return text.lower() == unreleased_heading(scope).lower()


def is_release_heading(text: str, scope: str | None = None) -> bool:
    """True for a level-2 key that names a release belonging to ``scope``."""
    if text.startswith("[") and is_unreleased_label(text[1:].split("]", 1)[0]):
        return False
    if scope:
        return text.lower().startswith(f"[{scope.lower()}@")
    return True


def title_node(root: ChangelogNode) -> ChangelogNode:
    """Return the document's level-1 title heading.

    Raises:
        StructuralError: If the first element of the document is not a ``#`` heading.
    """
    if not root.children or root.children[0].heading_level != 1:
        raise StructuralError(
            "Couldn't find the main heading, is your changelog formatted correctly?"
        )
    return root.children[0]


def unreleased_position(title: ChangelogNode) -> int:
    """Index under the title where a new Unreleased section goes.

    That is right above the first release section. A title with no sections
    yet gets it after its description.
    """
    index = title.child_index(heading_is(2))
    return UNRELEASED_INDEX if index is None else index


def find_unreleased(root: ChangelogNode, scope: str | None = None) -> ChangelogNode | None:
    return root.find_mut(heading_is(2, text=unreleased_heading(scope)))


def resolve(
    root: ChangelogNode, selector: str | None = None, scope: str | None = None
) -> ChangelogNode | None:
    """Find the section a caller asks for and return a detached copy of its body.

    Args:
        root: Parsed changelog tree.
        selector: ``None`` for the upcoming notes (Unreleased when it has
            categories, otherwise the latest release), ``"latest"``,
            ``"unreleased"`` or an explicit version such as ``"1.2.0"``.
        scope: Monorepo package name the section belongs to.

    Returns:
        A deep copy of the matching level-2 node with its heading removed,
        or None if nothing matches.
    """
    node = root.find(_selector_predicate(selector, scope))
    if node is None:
        logger.debug("No section matches selector %r (scope=%r)", selector, scope)
        return None

    body = node.model_copy(deep=True)
    body.token = None
    return body


def require_section(
    root: ChangelogNode, selector: str | None = None, scope: str | None = None
) -> ChangelogNode:
    """Like :func:`resolve`, raising when the section does not exist."""
    body = resolve(root, selector, scope)
    if body is None:
        raise SectionNotFoundError(
            f"Couldn't find notes for version: {selector or '<unknown>'}"
        )
    return body


def _selector_predicate(selector: str | None, scope: str | None) -> NodePredicate:
    if selector is None:
        return _next_or_latest(scope)

    lowered = selector.lower()
    if lowered == LATEST_SELECTOR:
        return _release_of(scope)
    if lowered == UNRELEASED_SELECTOR:
        return heading_is(2, text=unreleased_heading(scope))
    return heading_is(2, prefix=f"[{version_label(selector, scope)}]")


def _release_of(scope: str | None) -> NodePredicate:
    def _match(node: ChangelogNode) -> bool:
        return node.heading_level == 2 and is_release_heading(node.heading_text, scope)

    return _match


def _next_or_latest(scope: str | None) -> NodePredicate:
    has_categories = heading_is(3)
    is_release = _release_of(scope)

    def _match(node: ChangelogNode) -> bool:
        if node.heading_level != 2:
            return False
        if is_unreleased_heading(node.heading_text, scope):
            return node.find(has_categories) is not None
        return is_release(node)

    return _match
