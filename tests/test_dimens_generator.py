"""
Tests for the dimens.xml generator.

Pure unit tests: bucket pair in → GeneratedFile out. No filesystem.
"""

import re

import pytest

from dimensgen.core.config.settings import BUCKETS
from dimensgen.core.models.bucket import Bucket
from dimensgen.core.services.generators.dimens import (
    build_entries,
    format_entry,
    generate_dimens,
    render_dimens,
    scaled_value,
)

_LINE_RE = re.compile(r'^    <dimen name="common_measure_(\d+)dp">(\d+\.\d\d)dp</dimen>$')

BASELINE = Bucket(name="DP_360", width=360)


def _values(content: str) -> dict[int, str]:
    """index → rendered value for every <dimen> line."""
    out: dict[int, str] = {}
    for line in content.split("\r\n"):
        m = _LINE_RE.match(line)
        if m:
            out[int(m.group(1))] = m.group(2)
    return out


# ═══════════════════════════════════════════════════════════════════
#  scaled_value / build_entries
# ═══════════════════════════════════════════════════════════════════


class TestScaledValue:
    def test_double_width(self):
        assert scaled_value(10, 720, 360) == 20.0

    def test_zero_index(self):
        assert scaled_value(0, 1440, 360) == 0.0

    def test_fractional(self):
        assert scaled_value(1, 300, 360) == pytest.approx(0.8333, abs=1e-4)


class TestBuildEntries:
    def test_count_and_order(self):
        entries = build_entries(720, 360)
        assert len(entries) == 201
        assert [e.index for e in entries] == list(range(201))

    def test_custom_max_index(self):
        assert len(build_entries(720, 360, max_index=5)) == 6


# ═══════════════════════════════════════════════════════════════════
#  Rendering
# ═══════════════════════════════════════════════════════════════════


class TestFormatEntry:
    def test_example_line(self):
        entries = build_entries(720, 360)
        assert format_entry(entries[10]) == (
            '    <dimen name="common_measure_10dp">20.00dp</dimen>'
        )

    def test_two_decimals_no_grouping(self):
        entries = build_entries(1440, 360)
        # 200 * 4 = 800, 3 digits; still no separator
        assert format_entry(entries[200]).endswith(">800.00dp</dimen>")


class TestRenderDimens:
    def test_structure(self):
        content = render_dimens(build_entries(360, 360))
        lines = content.split("\r\n")
        # trailing terminator leaves one empty string at the end
        assert lines[-1] == ""
        lines = lines[:-1]
        assert len(lines) == 2 + 201 + 1
        assert lines[0] == '<?xml version="1.0" encoding="utf-8"?>'
        assert lines[1] == "<resources>"
        assert lines[-1] == "</resources>"

    def test_crlf_only(self):
        content = render_dimens(build_entries(480, 360))
        assert content.count("\r\n") == 204
        assert content.count("\n") == 204

    def test_custom_line_ending(self):
        content = render_dimens(build_entries(480, 360, max_index=1), line_ending="\n")
        assert "\r" not in content
        assert content.count("\n") == 5


# ═══════════════════════════════════════════════════════════════════
#  generate_dimens — scaling properties
# ═══════════════════════════════════════════════════════════════════


class TestGenerateDimens:
    def test_metadata(self):
        result = generate_dimens(Bucket(name="DP_720", width=720), BASELINE)
        assert result.path == "values-sw720dp/dimens.xml"
        assert "720dp" in result.reason
        assert "360dp" in result.reason

    @pytest.mark.parametrize("bucket", BUCKETS, ids=lambda b: b.name)
    def test_values_match_rounded_scale(self, bucket: Bucket):
        values = _values(generate_dimens(bucket, BASELINE).content)
        assert len(values) == 201
        for i, rendered in values.items():
            assert rendered == f"{round(i * bucket.width / 360, 2):.2f}", (bucket.width, i)

    @pytest.mark.parametrize("bucket", BUCKETS, ids=lambda b: b.name)
    def test_index_zero_is_zero(self, bucket: Bucket):
        assert _values(generate_dimens(bucket, BASELINE).content)[0] == "0.00"

    def test_baseline_is_identity(self):
        values = _values(generate_dimens(BASELINE, BASELINE).content)
        assert all(v == f"{i}.00" for i, v in values.items())

    def test_deterministic(self):
        b = Bucket(name="DP_340", width=340)
        assert generate_dimens(b, BASELINE).content == generate_dimens(b, BASELINE).content
