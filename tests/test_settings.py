"""
Tests for generator settings — the compiled-in bucket table.
"""

import pytest

from dimensgen.core.config.settings import (
    BASELINE,
    BUCKETS,
    ConfigError,
    GeneratorSettings,
    load_settings,
    validate_settings,
)
from dimensgen.core.models.bucket import Bucket


class TestBucketTable:
    def test_thirteen_buckets_in_order(self):
        widths = [b.width for b in BUCKETS]
        assert widths == [300, 320, 340, 360, 380, 420, 480, 520, 600, 720, 800, 1080, 1440]

    def test_names_match_widths(self):
        for b in BUCKETS:
            assert b.name == f"DP_{b.width}"

    def test_baseline_is_360(self):
        assert BASELINE == "DP_360"
        assert load_settings().baseline_bucket.width == 360


class TestDefaults:
    def test_defaults(self, settings: GeneratorSettings):
        assert settings.max_index == 200
        assert settings.output_dir == "output"
        assert settings.file_name == "dimens.xml"
        assert settings.max_delete_depth == 100
        assert settings.line_ending == "\r\n"

    def test_default_table_is_valid(self):
        assert validate_settings(GeneratorSettings()) == []


class TestValidation:
    def test_unknown_baseline(self):
        s = GeneratorSettings(baseline="DP_999")
        with pytest.raises(ConfigError, match="DP_999"):
            load_settings(s)

    def test_baseline_bucket_raises_for_unknown(self):
        s = GeneratorSettings(baseline="DP_999")
        with pytest.raises(ConfigError):
            s.baseline_bucket

    def test_empty_bucket_list(self):
        errors = validate_settings(GeneratorSettings(buckets=[]))
        assert any("empty" in e for e in errors)

    def test_duplicate_names(self):
        s = GeneratorSettings(
            buckets=[Bucket(name="DP_360", width=360), Bucket(name="DP_360", width=400)],
        )
        errors = validate_settings(s)
        assert any("Duplicate bucket names" in e for e in errors)

    def test_duplicate_widths(self):
        s = GeneratorSettings(
            buckets=[Bucket(name="DP_360", width=360), Bucket(name="ALSO", width=360)],
        )
        errors = validate_settings(s)
        assert any("Duplicate bucket widths: 360" in e for e in errors)

    def test_non_positive_width(self):
        s = GeneratorSettings(
            buckets=[Bucket(name="DP_360", width=360), Bucket(name="ZERO", width=0)],
        )
        with pytest.raises(ConfigError, match="ZERO"):
            load_settings(s)

    def test_negative_max_index(self):
        errors = validate_settings(GeneratorSettings(max_index=-1))
        assert any("max_index" in e for e in errors)
