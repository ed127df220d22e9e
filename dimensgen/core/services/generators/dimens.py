"""
dimens.xml generator — scaled ``<dimen>`` table for one bucket.

Each entry maps a unit index to ``index * target / baseline`` dp,
rendered with two decimals regardless of the process locale.
"""

from __future__ import annotations

from dimensgen.core.models.bucket import Bucket
from dimensgen.core.models.template import DimensionEntry, GeneratedFile

XML_HEADER = '<?xml version="1.0" encoding="utf-8"?>'
RESOURCES_OPEN = "<resources>"
RESOURCES_CLOSE = "</resources>"

_DIMEN_LINE = '    <dimen name="common_measure_{index}dp">{value:.2f}dp</dimen>'


def scaled_value(index: int, target: int, baseline: int) -> float:
    """Scale *index* from the baseline width to the target width."""
    return index * target / baseline


def build_entries(target: int, baseline: int, max_index: int = 200) -> list[DimensionEntry]:
    """Entries for indices ``0..max_index`` inclusive, ascending."""
    return [
        DimensionEntry(index=index, value=scaled_value(index, target, baseline))
        for index in range(max_index + 1)
    ]


def format_entry(entry: DimensionEntry) -> str:
    # str.format ignores locale; "." separator, no grouping
    return _DIMEN_LINE.format(index=entry.index, value=entry.value)


def render_dimens(entries: list[DimensionEntry], line_ending: str = "\r\n") -> str:
    """Render a full dimens.xml document, every line terminated."""
    lines = [XML_HEADER, RESOURCES_OPEN]
    lines.extend(format_entry(e) for e in entries)
    lines.append(RESOURCES_CLOSE)
    return "".join(line + line_ending for line in lines)


def generate_dimens(
    target: Bucket,
    baseline: Bucket,
    *,
    max_index: int = 200,
    file_name: str = "dimens.xml",
    line_ending: str = "\r\n",
) -> GeneratedFile:
    """Generate the dimens.xml for *target* scaled against *baseline*.

    Args:
        target: Bucket to generate values for.
        baseline: Bucket the designs were drawn at (scale 1.0).
        max_index: Highest unit index emitted.
        file_name: Resource file name inside the bucket directory.
        line_ending: Line terminator for every line.

    Returns:
        GeneratedFile with a path relative to the output root.
    """
    entries = build_entries(target.width, baseline.width, max_index)
    return GeneratedFile(
        path=f"{target.qualifier}/{file_name}",
        content=render_dimens(entries, line_ending),
        reason=(
            f"Scaled {len(entries)} dimensions for {target.width}dp "
            f"against {baseline.width}dp baseline"
        ),
    )
