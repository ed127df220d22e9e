"""
Generated file models — used by all generators.
"""

from __future__ import annotations

from pydantic import BaseModel


class DimensionEntry(BaseModel):
    """One ``<dimen>`` line: a unit index and its scaled value."""

    index: int
    value: float


class GeneratedFile(BaseModel):
    """A file produced by a generator.

    Attributes:
        path:    Path relative to the output root.
        content: Full file content.
        reason:  Why this file was generated.
    """

    path: str
    content: str
    reason: str = ""

    def to_bytes(self) -> bytes:
        """Raw bytes as written to disk."""
        return self.content.encode("utf-8")
