"""
Bucket model — smallest-width screen buckets.

A bucket is a ``sw<N>dp`` resource qualifier: the device picks the
largest bucket whose width does not exceed its smallest screen width.
Every bucket's dimensions are scaled linearly against the baseline
bucket the designs were drawn for.
"""

from __future__ import annotations

from pydantic import BaseModel


class Bucket(BaseModel):
    """A named smallest-width bucket.

    Attributes:
        name:  Constant name, e.g. ``DP_360``.
        width: Smallest width in dp.
    """

    model_config = {"frozen": True}

    name: str
    width: int

    @property
    def qualifier(self) -> str:
        """Resource directory name, e.g. ``values-sw360dp``."""
        return f"values-sw{self.width}dp"

    def scale(self, baseline: Bucket) -> float:
        """Scale factor of this bucket relative to *baseline*."""
        return self.width / baseline.width
