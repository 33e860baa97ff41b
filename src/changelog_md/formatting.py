"""Human-readable formatting helpers."""

from __future__ import annotations

from typing import Iterable, Sequence

from changelog_md.schemas import ReferenceEntry


def conjunction(items: Sequence[object]) -> str:
    """Join items as ``a``, ``a and b`` or ``a, b and c``."""
    words = [str(item) for item in items]
    if not words:
        return ""
    if len(words) == 1:
        return words[0]
    return f"{', '.join(words[:-1])} and {words[-1]}"


def format_version_list(entries: Iterable[ReferenceEntry]) -> str:
    """One ``- <label> <url>`` line per release link, labels padded to 15 columns."""
    return "\n".join(f"- {entry.label:15} {entry.url}" for entry in entries)
