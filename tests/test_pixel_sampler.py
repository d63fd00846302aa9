"""
Tests for pixel sampling.

Tests cover:
- Raster order and shape of sampled pixels
- Alpha and palette handling
- File-like sources
- 16-bit integer and float images rescaled to 8-bit
- DecodeError for missing, corrupt, unsupported and zero-size resources
- Supported format helpers
"""

import io
import struct
import zlib
from pathlib import Path
from unittest.mock import MagicMock, patch

import numpy as np
import pytest
from PIL import Image

from HC_Libs.HistogramLib import pixel_sampler
from HC_Libs.HistogramLib.histogram_builder import compute_histogram
from HC_Libs.HistogramLib.histogram_models import PixelSample
from HC_Libs.HistogramLib.pixel_sampler import (
    DecodeError,
    get_supported_image_formats,
    is_supported_format,
    iter_pixel_samples,
    sample_pixels,
)


class TestSamplePixels:
    """Tests for sample_pixels function."""

    def test_returns_one_row_per_pixel(self, solid_image):
        """Should return (W*H, 3) uint8 samples."""
        path = solid_image((10, 20, 30), size=(5, 3))

        samples = sample_pixels(path)

        assert samples.shape == (15, 3)
        assert samples.dtype == np.uint8
        assert (samples == [10, 20, 30]).all()

    def test_raster_order(self, tmp_path):
        """Samples should run left-to-right, then top-to-bottom."""
        img = Image.new("RGB", (2, 2))
        img.putpixel((0, 0), (1, 0, 0))
        img.putpixel((1, 0), (2, 0, 0))
        img.putpixel((0, 1), (3, 0, 0))
        img.putpixel((1, 1), (4, 0, 0))
        path = tmp_path / "order.png"
        img.save(path)

        samples = sample_pixels(path)

        assert samples[:, 0].tolist() == [1, 2, 3, 4]

    def test_alpha_is_ignored(self, solid_image):
        """RGBA input should keep RGB values regardless of alpha."""
        path = solid_image((40, 50, 60, 0), size=(3, 3), mode="RGBA")

        samples = sample_pixels(path)

        assert samples.shape == (9, 3)
        assert (samples == [40, 50, 60]).all()

    def test_greyscale_expanded_to_rgb(self, solid_image):
        """Single-channel images should give equal R, G and B."""
        path = solid_image(77, size=(4, 4), mode="L")

        samples = sample_pixels(path)

        assert (samples == [77, 77, 77]).all()

    def test_accepts_string_path(self, solid_image):
        path = solid_image((0, 0, 0))
        assert sample_pixels(str(path)).shape == (32, 3)

    def test_accepts_file_like_object(self):
        """Should decode from an in-memory buffer."""
        buffer = io.BytesIO()
        Image.new("RGB", (6, 2), color=(9, 8, 7)).save(buffer, format="PNG")
        buffer.seek(0)

        samples = sample_pixels(buffer)

        assert samples.shape == (12, 3)
        assert (samples == [9, 8, 7]).all()

    def test_missing_file_raises_decode_error(self, tmp_path):
        with pytest.raises(DecodeError):
            sample_pixels(tmp_path / "missing.png")

    def test_corrupt_file_raises_decode_error(self, tmp_path):
        """Non-image bytes should raise DecodeError, not a Pillow exception."""
        path = tmp_path / "broken.png"
        path.write_bytes(b"this is not an image")

        with pytest.raises(DecodeError):
            sample_pixels(path)

    def test_truncated_file_raises_decode_error(self, tmp_path):
        """A file cut short mid-stream should fail to decode."""
        buffer = io.BytesIO()
        Image.new("RGB", (64, 64), color=(1, 2, 3)).save(buffer, format="PNG")
        path = tmp_path / "truncated.png"
        path.write_bytes(buffer.getvalue()[:60])

        with pytest.raises(DecodeError):
            sample_pixels(path)

    def test_directory_raises_decode_error(self, tmp_path):
        with pytest.raises(DecodeError):
            sample_pixels(tmp_path)

    def test_decode_error_is_ioerror(self):
        """DecodeError should be catchable as IOError."""
        assert issubclass(DecodeError, IOError)


class TestWideModes:
    """Tests for 16-bit integer and float images."""

    def test_16bit_mid_grey_lands_mid_scale(self, tmp_path):
        """A 16-bit grey of 32768 should count in bucket 128, not clip at 255."""
        path = tmp_path / "grey16.png"
        Image.fromarray(np.full((4, 4), 32768, dtype=np.uint16)).save(path)

        record = compute_histogram(path)

        assert record.red[128] == 16
        assert record.red[255] == 0
        assert record.brightness[128] == 48

    def test_16bit_extremes(self, tmp_path):
        data = np.array([[0, 65535], [255, 256]], dtype=np.uint16)
        path = tmp_path / "extremes16.png"
        Image.fromarray(data).save(path)

        samples = sample_pixels(path)

        assert samples[:, 0].tolist() == [0, 255, 0, 1]

    def test_32bit_integer_mode(self, tmp_path):
        """Mode "I" images should use the same 16-bit scale."""
        img = Image.fromarray(np.full((2, 3), 32768, dtype=np.int32))
        assert img.mode == "I"
        buffer = io.BytesIO()
        img.save(buffer, format="PNG")
        buffer.seek(0)

        samples = sample_pixels(buffer)

        assert (samples == [128, 128, 128]).all()

    def test_float_mode_read_as_unit_range(self, tmp_path):
        data = np.array([[0.0, 0.5], [1.0, 2.0]], dtype=np.float32)
        path = tmp_path / "float.tiff"
        Image.fromarray(data).save(path)

        samples = sample_pixels(path)

        assert samples[:, 0].tolist() == [0, 128, 255, 255]


class TestZeroDimension:
    """Tests for images reporting an empty size."""

    def test_zero_width_header_raises_decode_error(self):
        """A PNG whose header declares width 0 should not decode."""
        def chunk(kind, data):
            return struct.pack(">I", len(data)) + kind + data + struct.pack(">I", zlib.crc32(kind + data))

        header = struct.pack(">IIBBBBB", 0, 4, 8, 2, 0, 0, 0)
        data = b"\x89PNG\r\n\x1a\n" + chunk(b"IHDR", header) + chunk(b"IEND", b"")

        with pytest.raises(DecodeError):
            sample_pixels(io.BytesIO(data))

    @pytest.mark.parametrize("size", [(0, 4), (4, 0)])
    def test_zero_size_image_raises_decode_error(self, size):
        fake = MagicMock()
        fake.__enter__.return_value = fake
        fake.size = size

        with patch.object(pixel_sampler.Image, "open", return_value=fake):
            with pytest.raises(DecodeError, match="zero dimension"):
                sample_pixels(io.BytesIO(b"stand-in"))

        fake.convert.assert_not_called()


class TestIterPixelSamples:
    """Tests for iter_pixel_samples function."""

    def test_yields_pixel_samples(self, solid_image):
        path = solid_image((200, 100, 50), size=(2, 2))

        samples = list(iter_pixel_samples(path))

        assert len(samples) == 4
        assert all(isinstance(s, PixelSample) for s in samples)
        assert samples[0] == PixelSample(red=200, green=100, blue=50)


class TestSupportedFormats:
    """Tests for supported format helpers."""

    def test_common_formats_listed(self):
        formats = get_supported_image_formats()
        assert ".png" in formats
        assert ".jpg" in formats
        assert formats == sorted(formats)

    def test_is_supported_format_case_insensitive(self):
        assert is_supported_format(Path("photo.JPG"))
        assert is_supported_format(Path("shot.png"))

    def test_unsupported_format(self):
        assert not is_supported_format(Path("clip.mp4"))
        assert not is_supported_format(Path("notes.txt"))
