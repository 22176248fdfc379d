# MediaSync Formatting Tests

import pytest

from mediasync.utils.formatting import SIZE_UNITS, format_size


class TestFormatSize:
    """Tests for format_size()."""

    @pytest.mark.parametrize("num_bytes", [0, 1, 512, 1023])
    def test_bytes_below_one_kilobyte(self, num_bytes):
        assert format_size(num_bytes) == f"{num_bytes}.00 B"

    @pytest.mark.parametrize("exponent, unit", list(enumerate(SIZE_UNITS)))
    def test_unit_follows_magnitude(self, exponent, unit):
        assert format_size(3 * 1024**exponent) == f"3.00 {unit}"

    def test_exact_boundary_moves_to_next_unit(self):
        assert format_size(1024) == "1.00 KB"

    def test_fractional_value_rounded(self):
        assert format_size(int(1.5 * 1024**3)) == "1.50 GB"
        assert format_size(1536 + 5) == "1.50 KB"

    def test_just_below_next_unit(self):
        assert format_size(1024**2 - 1) == "1024.00 KB"

    def test_beyond_terabytes_stays_in_terabytes(self):
        assert format_size(1024**5) == "1024.00 TB"
        assert format_size(4 * 1024**6) == "4194304.00 TB"
