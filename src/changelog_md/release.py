"""Promote the Unreleased section to a dated release."""

from __future__ import annotations

import logging
import re
from datetime import date

from changelog_md.exceptions import MissingVersionError, SectionNotFoundError
from changelog_md.items import placeholder_list
from changelog_md.schemas import (
    ChangelogNode,
    Heading,
    ReferenceDefinition,
    TokenKind,
    reference_is,
)
from changelog_md.sections import (
    find_unreleased,
    is_unreleased_label,
    release_heading,
    release_tag,
    title_node,
    unreleased_heading,
    unreleased_label,
    unreleased_position,
    version_label,
)
from changelog_md.semver import SemVer

logger = logging.getLogger(__name__)

_COMPARE_URL_RE = re.compile(r"^(?P<base>.+)/compare/[^/]+\.\.\.HEAD$")


def latest_reference(root: ChangelogNode, scope: str | None = None) -> ChangelogNode | None:
    """First reference definition naming a release (of ``scope``, when given)."""
    prefix = f"{scope.lower()}@" if scope else None

    def _match(node: ChangelogNode) -> bool:
        if node.kind is not TokenKind.REFERENCE:
            return False
        label = node.token.label
        if is_unreleased_label(label):
            return False
        return prefix is None or label.lower().startswith(prefix)

    return root.find(_match)


def release_url(unreleased_url: str, tag: str) -> str:
    """Derive the link of a new release from the Unreleased link.

    A ``<repo>/compare/<from>...HEAD`` link becomes ``<repo>/releases/tag/<tag>``.
    Any other link gets ``HEAD`` replaced by the tag.
    """
    match = _COMPARE_URL_RE.match(unreleased_url)
    if match:
        return f"{match.group('base')}/releases/tag/{tag}"
    return unreleased_url.replace("HEAD", tag)


def release(
    root: ChangelogNode,
    version: SemVer | str,
    scope: str | None = None,
    today: date | None = None,
) -> ChangelogNode:
    """Turn the Unreleased section into ``version`` and start a fresh one.

    The Unreleased heading is renamed to ``[version] - YYYY-MM-DD`` (or
    ``[scope@vversion] - YYYY-MM-DD``), a new Unreleased section holding the
    ``Nothing yet!`` placeholder is inserted under the title, the Unreleased
    link is moved forward to the new version and a link for the new version
    is added above the previous newest one.

    Returns:
        The renamed heading node.

    Raises:
        StructuralError: If the document has no level-1 title.
        SectionNotFoundError: If there is no Unreleased section for ``scope``.
        MissingVersionError: If no earlier release link exists to diff against.
    """
    title = title_node(root)
    unreleased = find_unreleased(root, scope)
    if unreleased is None:
        raise SectionNotFoundError(f"Couldn't find the {unreleased_heading(scope)} section")

    previous = latest_reference(root, scope)
    if previous is None:
        raise MissingVersionError(
            "Couldn't find the latest version, add a link for the previous release first"
        )
    previous_label = previous.token.label
    new_label = version_label(version, scope)
    released_on = (today or date.today()).isoformat()

    unreleased.rename_heading(release_heading(version, released_on, scope))
    title.insert_child_at(
        unreleased_position(title),
        ChangelogNode(
            token=Heading(level=2, text=unreleased_heading(scope)),
            children=[placeholder_list()],
        ),
    )
    logger.info("Released %s (previous: %s)", new_label, previous_label)

    _update_references(root, scope, previous_label, new_label, release_tag(version, scope))
    return unreleased


def _update_references(
    root: ChangelogNode,
    scope: str | None,
    previous_label: str,
    new_label: str,
    tag: str,
) -> None:
    reference = root.find_mut(reference_is(unreleased_label(scope)))
    if reference is None:
        logger.warning(
            "No [%s] link found, leaving links untouched", unreleased_label(scope)
        )
        return

    unreleased_url = reference.token.url
    reference.token = reference.token.model_copy(
        update={"url": unreleased_url.replace(previous_label, new_label)}
    )

    new_reference = ChangelogNode(
        token=ReferenceDefinition(label=new_label, url=release_url(unreleased_url, tag))
    )
    index = root.child_index(
        lambda node: node.kind is TokenKind.REFERENCE
        and not is_unreleased_label(node.token.label)
    )
    if index is None:
        root.append_child(new_reference)
    else:
        root.insert_child_at(index, new_reference)
    logger.debug("Inserted link for %s", new_label)
