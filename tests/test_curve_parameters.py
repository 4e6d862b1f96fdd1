"""
Tests for curve_parameters.py - Curve definition and validation
"""

import pytest

from ec_arithmetic import curve_parameters
from ec_arithmetic import errors

from conftest import SECP256K1_N, SECP256K1_P


class TestCurveParametersCreation:
    """Tests for CurveParameters creation methods."""

    def test_from_bytes_matches_from_ints(self):
        """Test byte-encoded parameters decode as big-endian unsigned integers."""
        from_bytes = curve_parameters.CurveParameters.from_bytes(
            SECP256K1_P.to_bytes(32, byteorder="big"),
            b"",
            b"\x00\x07",
            SECP256K1_N.to_bytes(32, byteorder="big"),
        )
        from_ints = curve_parameters.CurveParameters.from_ints(
            SECP256K1_P, 0, 7, order=SECP256K1_N
        )
        assert from_bytes == from_ints
        assert from_bytes.order == SECP256K1_N

    def test_coefficients_reduced(self):
        params = curve_parameters.CurveParameters.from_ints(17, -3, 20)
        assert params.a == 14
        assert params.b == 3

    def test_immutable(self):
        params = curve_parameters.CurveParameters.from_ints(17, 2, 2)
        with pytest.raises(AttributeError):
            params.a = 3

    @pytest.mark.parametrize(
        "prime,a,b,order,error_match",
        [
            (16, 2, 2, None, "odd integer greater than 3"),
            (3, 1, 1, None, "odd integer greater than 3"),
            (1 << 257 | 1, 2, 2, None, "does not fit"),
            (17, 0, 0, None, "singular"),
            (17, 2, 2, 0, "Group order must be positive"),
        ],
    )
    def test_rejected_parameters(self, prime, a, b, order, error_match):
        """Test unsupported curves fail at construction."""
        with pytest.raises(errors.UnsupportedCurveError, match=error_match):
            curve_parameters.CurveParameters.from_ints(prime, a, b, order=order)


class TestCurveParametersCapabilities:
    """Tests for derived curve properties."""

    @pytest.mark.parametrize(
        "prime,expected",
        [
            (17, False),
            (23, True),
            (SECP256K1_P, True),
        ],
    )
    def test_supports_compression(self, prime, expected):
        params = curve_parameters.CurveParameters.from_ints(prime, 2, 3)
        assert params.supports_compression is expected

    def test_coordinate_length(self):
        params = curve_parameters.CurveParameters.from_ints(17, 2, 2)
        assert params.coordinate_length == 32
