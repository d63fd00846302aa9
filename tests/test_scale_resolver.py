"""
Unit tests for scale_resolver module.

Tests the shared vertical scale across two records, per-mode maxima,
missing records and the draw-skip signal.
"""

import pytest

from HC_Libs.HistogramLib.histogram_models import HistogramMode, HistogramRecord
from HC_Libs.HistogramLib.scale_resolver import max_bucket_value, resolve_scale


class TestMaxBucketValue:
    """Tests for max_bucket_value function."""

    def test_brightness_uses_brightness_series(self, peak_record):
        assert max_bucket_value([peak_record(5, 10)], HistogramMode.BRIGHTNESS) == 30

    def test_color_uses_channel_series(self, peak_record):
        assert max_bucket_value([peak_record(5, 10)], HistogramMode.COLOR) == 10

    def test_color_takes_max_over_all_channels(self):
        zeros = [0] * 256
        blue = [0] * 256
        blue[200] = 99
        red = [0] * 256
        red[3] = 12
        record = HistogramRecord(brightness=zeros, red=red, green=zeros, blue=blue)

        assert max_bucket_value([record], HistogramMode.COLOR) == 99

    def test_max_across_both_records(self, peak_record):
        records = [peak_record(0, 10), peak_record(255, 1000)]
        assert max_bucket_value(records, HistogramMode.COLOR) == 1000

    def test_missing_records_ignored(self, peak_record):
        assert max_bucket_value([None, peak_record(1, 4)], HistogramMode.COLOR) == 4
        assert max_bucket_value([None, None], HistogramMode.COLOR) == 0
        assert max_bucket_value([], HistogramMode.BRIGHTNESS) == 0


class TestResolveScale:
    """Tests for resolve_scale function."""

    def test_scale_formula(self, peak_record):
        """Scale is (height - margin) / max bucket."""
        scale = resolve_scale([peak_record(10, 62)], HistogramMode.COLOR, height=256, margin=8)
        assert scale == pytest.approx(248 / 62)

    def test_default_margin_is_eight(self, peak_record):
        scale = resolve_scale([peak_record(10, 31)], HistogramMode.COLOR, height=256)
        assert scale == pytest.approx(248 / 31)

    def test_tallest_bar_fits_below_margin(self, peak_record):
        records = [peak_record(0, 500), peak_record(100, 12345)]
        scale = resolve_scale(records, HistogramMode.BRIGHTNESS, height=256)
        assert 3 * 12345 * scale == pytest.approx(248)

    def test_shared_scale_for_different_pixel_counts(self, peak_record):
        """A small image is scaled by the large image's peak, not its own."""
        small, large = peak_record(0, 10), peak_record(0, 10000)
        scale = resolve_scale([small, large], HistogramMode.COLOR, height=256)
        assert 10 * scale < 1

    def test_mode_changes_scale(self, peak_record):
        record = peak_record(0, 100)
        brightness = resolve_scale([record], HistogramMode.BRIGHTNESS, height=256)
        color = resolve_scale([record], HistogramMode.COLOR, height=256)
        assert color == pytest.approx(3 * brightness)

    def test_draw_skip_when_absent(self):
        assert resolve_scale([None, None], HistogramMode.BRIGHTNESS, height=256) is None
        assert resolve_scale([], HistogramMode.COLOR, height=256) is None

    def test_draw_skip_when_all_zero(self):
        empty = HistogramRecord.empty()
        assert resolve_scale([empty, empty], HistogramMode.COLOR, height=256) is None
        assert resolve_scale([empty, None], HistogramMode.BRIGHTNESS, height=256) is None

    def test_height_must_exceed_margin(self, peak_record):
        with pytest.raises(ValueError):
            resolve_scale([peak_record(0, 1)], HistogramMode.COLOR, height=8, margin=8)
