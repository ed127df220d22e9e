"""
Buckets use case — describe the compiled-in bucket table.
"""

from __future__ import annotations

from dimensgen.core.config.settings import GeneratorSettings, load_settings


def list_buckets(settings: GeneratorSettings | None = None) -> dict:
    """Return the bucket table with each bucket's scale factor.

    Returns:
        {"baseline": {...}, "buckets": [{"name", "width", "qualifier",
        "scale", "baseline"}, ...]}

    Raises:
        ConfigError: If the bucket table is invalid.
    """
    settings = load_settings(settings)
    baseline = settings.baseline_bucket

    return {
        "baseline": {"name": baseline.name, "width": baseline.width},
        "max_index": settings.max_index,
        "buckets": [
            {
                "name": b.name,
                "width": b.width,
                "qualifier": b.qualifier,
                "scale": round(b.scale(baseline), 4),
                "baseline": b.name == baseline.name,
            }
            for b in settings.buckets
        ],
    }
