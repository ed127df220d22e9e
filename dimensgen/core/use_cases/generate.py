"""
Generate use case — write one dimens.xml per bucket.

The output root is wiped and recreated first, then for every bucket,
in table order:

    clear stale dir  →  mkdir  →  render  →  write

Each step reports instead of raising. A failed step is logged with the
bucket it belongs to and the loop moves on: one bucket never stops the
others, and nothing is rolled back.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from dimensgen.core.config.settings import GeneratorSettings, load_settings
from dimensgen.core.models.bucket import Bucket
from dimensgen.core.services import fs_ops
from dimensgen.core.services.generators.dimens import generate_dimens

logger = logging.getLogger(__name__)


@dataclass
class BucketResult:
    """Outcome of generating one bucket."""

    width: int
    directory: Path
    file: Path
    written: bool = False
    errors: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.written and not self.errors

    def to_dict(self) -> dict:
        return {
            "width": self.width,
            "directory": str(self.directory),
            "file": str(self.file),
            "written": self.written,
            "errors": self.errors,
        }


@dataclass
class RunResult:
    """Outcome of a full generation run."""

    output_root: Path
    baseline: int
    buckets: list[BucketResult] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors and all(b.ok for b in self.buckets)

    @property
    def failed(self) -> list[BucketResult]:
        return [b for b in self.buckets if not b.ok]

    def to_dict(self) -> dict:
        return {
            "output_root": str(self.output_root),
            "baseline": self.baseline,
            "ok": self.ok,
            "errors": self.errors,
            "buckets": [b.to_dict() for b in self.buckets],
        }


def make_bucket(
    output_root: Path,
    target: Bucket,
    baseline: Bucket,
    settings: GeneratorSettings,
) -> BucketResult:
    """Clear, recreate and fill one bucket directory."""
    directory = output_root / target.qualifier
    result = BucketResult(
        width=target.width,
        directory=directory,
        file=directory / settings.file_name,
    )

    cleared = fs_ops.clear_dir(directory, settings.max_delete_depth)
    if "error" in cleared:
        _fail(result, "delete", cleared["error"])

    # Carry on after a failed delete: mkdir reports the leftover dir
    created = fs_ops.make_dir(directory)
    if "error" in created:
        _fail(result, "mkdir", created["error"])

    generated = generate_dimens(
        target,
        baseline,
        max_index=settings.max_index,
        file_name=settings.file_name,
        line_ending=settings.line_ending,
    )

    written = fs_ops.write_generated_file(output_root, generated)
    if "error" in written:
        _fail(result, "write", written["error"])
    else:
        result.written = True
        logger.info("makeDimens %d success", target.width)

    return result


def run(
    output_root: Path | None = None,
    settings: GeneratorSettings | None = None,
) -> RunResult:
    """Generate dimens.xml for every bucket.

    Args:
        output_root: Directory to generate into (default: ``./output``).
        settings: Generator settings (default: the compiled-in table).

    Returns:
        RunResult with one BucketResult per bucket, in table order.

    Raises:
        ConfigError: If the compiled-in bucket table is invalid.
    """
    settings = load_settings(settings)
    baseline = settings.baseline_bucket

    if output_root is None:
        output_root = Path(settings.output_dir)

    result = RunResult(output_root=output_root, baseline=baseline.width)

    # Start from an empty root: buckets dropped from the table must not linger
    cleared = fs_ops.clear_dir(output_root, settings.max_delete_depth, remove_files=True)
    if "error" in cleared:
        _root_fail(result, "delete", cleared["error"])

    # Buckets are still attempted after a root failure; each reports its own
    created = fs_ops.make_dir(output_root)
    if "error" in created:
        _root_fail(result, "mkdir", created["error"])

    for target in settings.buckets:
        result.buckets.append(make_bucket(output_root, target, baseline, settings))

    logger.info(
        "Generated %d/%d buckets into %s",
        len(result.buckets) - len(result.failed),
        len(result.buckets),
        output_root,
    )
    return result


def _root_fail(result: RunResult, step: str, message: str) -> None:
    logger.error("[%s] %s: %s", result.output_root, step, message)
    result.errors.append(f"{step}: {message}")


def _fail(result: BucketResult, step: str, message: str) -> None:
    logger.error("[%ddp] %s: %s", result.width, step, message)
    result.errors.append(f"{step}: {message}")
