"""Reference listing model."""

from __future__ import annotations

from pydantic import BaseModel


class ReferenceEntry(BaseModel):
    """A ``[label]: url`` line from the changelog's trailing link block."""

    label: str
    url: str
