"""
Generator settings — the compiled-in bucket table and output layout.

The bucket list and baseline are constants of this module. Edit them
here to change what gets generated; no file or flag overrides them.
``load_settings()`` validates the table and returns a typed
``GeneratorSettings``.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field

from dimensgen.core.models.bucket import Bucket

logger = logging.getLogger(__name__)

# ── Bucket table ────────────────────────────────────────────────
# Any width can be added; order here is the generation order.

BUCKETS: tuple[Bucket, ...] = (
    Bucket(name="DP_300", width=300),
    Bucket(name="DP_320", width=320),
    Bucket(name="DP_340", width=340),
    Bucket(name="DP_360", width=360),
    Bucket(name="DP_380", width=380),
    Bucket(name="DP_420", width=420),
    Bucket(name="DP_480", width=480),
    Bucket(name="DP_520", width=520),
    Bucket(name="DP_600", width=600),
    Bucket(name="DP_720", width=720),
    Bucket(name="DP_800", width=800),
    Bucket(name="DP_1080", width=1080),
    Bucket(name="DP_1440", width=1440),
)

# Design baseline: mockups drawn at 1080x1920 @ 480dpi → 360dp wide
BASELINE = "DP_360"

MAX_INDEX = 200
OUTPUT_DIR = "output"
FILE_NAME = "dimens.xml"
MAX_DELETE_DEPTH = 100
LINE_ENDING = "\r\n"


class ConfigError(Exception):
    """Raised when the compiled-in generator configuration is invalid."""


class GeneratorSettings(BaseModel):
    """Everything the generator needs for one run."""

    buckets: list[Bucket] = Field(default_factory=lambda: list(BUCKETS))
    baseline: str = BASELINE
    max_index: int = MAX_INDEX
    output_dir: str = OUTPUT_DIR
    file_name: str = FILE_NAME
    max_delete_depth: int = MAX_DELETE_DEPTH
    line_ending: str = LINE_ENDING

    @property
    def baseline_bucket(self) -> Bucket:
        """The bucket all scale factors are computed against."""
        for bucket in self.buckets:
            if bucket.name == self.baseline:
                return bucket
        raise ConfigError(f"Baseline '{self.baseline}' is not in the bucket list")


def validate_settings(settings: GeneratorSettings) -> list[str]:
    """Return a list of problems with *settings* (empty when valid)."""
    errors: list[str] = []

    if not settings.buckets:
        errors.append("Bucket list is empty.")

    names = [b.name for b in settings.buckets]
    if settings.baseline not in names:
        errors.append(f"Baseline '{settings.baseline}' is not in the bucket list.")

    dupes = {n for n in names if names.count(n) > 1}
    if dupes:
        errors.append(f"Duplicate bucket names: {', '.join(sorted(dupes))}")

    widths = [b.width for b in settings.buckets]
    width_dupes = {w for w in widths if widths.count(w) > 1}
    if width_dupes:
        errors.append(
            f"Duplicate bucket widths: {', '.join(str(w) for w in sorted(width_dupes))}"
        )

    bad = [b.name for b in settings.buckets if b.width <= 0]
    if bad:
        errors.append(f"Non-positive bucket widths: {', '.join(bad)}")

    if settings.max_index < 0:
        errors.append(f"max_index must be >= 0, got {settings.max_index}")

    return errors


def load_settings(settings: GeneratorSettings | None = None) -> GeneratorSettings:
    """Build and validate the generator settings.

    Args:
        settings: Explicit settings (tests). Defaults to the compiled-in table.

    Returns:
        Validated GeneratorSettings.

    Raises:
        ConfigError: If the bucket table is inconsistent.
    """
    if settings is None:
        settings = GeneratorSettings()

    errors = validate_settings(settings)
    if errors:
        raise ConfigError("Invalid generator configuration: " + " ".join(errors))

    logger.debug(
        "Loaded %d buckets, baseline %s (%ddp)",
        len(settings.buckets),
        settings.baseline,
        settings.baseline_bucket.width,
    )
    return settings
