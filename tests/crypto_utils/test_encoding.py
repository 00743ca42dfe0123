"""
Tests for encoding.py - SEC1 point encoding/decoding
"""

import pytest
from ecc_engine import curves
from ecc_engine import errors
from ecc_engine import point
from ecc_engine.crypto_utils import encoding


SMALL_CURVE = curves.CurveDescriptor(
    name="small-23", a=22, b=0, p=23, Gx=2, Gy=11, n=3
)

ALL_PRESETS = [curves.P256, curves.SECP256K1, curves.P521]


class TestEncodeCoordinates:
    """Tests for SEC1 encoding."""

    def test_secp256k1_generator_compressed(self):
        """Test the well-known compressed secp256k1 generator."""
        encoded = encoding.encode_coordinates(
            curves.SECP256K1.Gx, curves.SECP256K1.Gy, 32, compressed=True
        )
        assert encoded.hex() == (
            "0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
        )

    def test_p256_generator_compressed_prefix(self):
        """Test the P-256 generator has an odd y and a 0x03 prefix."""
        encoded = point.Point.generator(curves.P256).to_sec1_compressed
        assert encoded[0] == 0x03
        assert encoded[1:].hex() == (
            "6b17d1f2e12c4247f8bce6e563a440f277037d812deb33a0f4a13945d898c296"
        )

    @pytest.mark.parametrize(
        "curve,compressed_len,uncompressed_len",
        [
            (curves.P256, 33, 65),
            (curves.SECP256K1, 33, 65),
            (curves.P521, 67, 133),
            (SMALL_CURVE, 2, 3),
        ],
        ids=lambda v: getattr(v, "name", str(v)),
    )
    def test_lengths(self, curve, compressed_len, uncompressed_len):
        """Test encoded lengths follow the field size."""
        G = point.Point.generator(curve)
        assert len(G.to_sec1_compressed) == compressed_len
        assert len(G.to_sec1_uncompressed) == uncompressed_len
        assert G.to_sec1_uncompressed[0] == 0x04

    def test_identity_encoding(self):
        """Test the point at infinity encodes as a single zero byte."""
        inf = point.Point.identity(curves.P256)
        assert inf.to_sec1_compressed == b"\x00"
        assert inf.to_sec1_uncompressed == b"\x00"


class TestDecodeCoordinates:
    """Tests for SEC1 decoding."""

    @pytest.mark.parametrize("curve", ALL_PRESETS, ids=lambda c: c.name)
    def test_decode_compressed(self, curve):
        """Test compressed decoding recovers both parities."""
        pt = point.Point.generator(curve) * 0xC0FFEE
        assert point.Point.from_sec1(pt.to_sec1_compressed, curve) == pt
        neg = -pt
        assert point.Point.from_sec1(neg.to_sec1_compressed, curve) == neg

    @pytest.mark.parametrize("curve", ALL_PRESETS, ids=lambda c: c.name)
    def test_decode_uncompressed(self, curve):
        """Test uncompressed decoding."""
        pt = point.Point.generator(curve) * 31337
        assert point.Point.from_sec1(pt.to_sec1_uncompressed, curve) == pt

    def test_decode_identity(self):
        """Test b"\\x00" decodes to the point at infinity."""
        assert encoding.decode_coordinates(b"\x00", curves.P256) is None
        assert point.Point.from_sec1(b"\x00", curves.P256).is_infinity

    @pytest.mark.parametrize(
        "data,expected",
        [(b"\x02\x02", (2, 12)), (b"\x03\x02", (2, 11))],
    )
    def test_decompress_small_curve(self, data, expected):
        """Test decompression picks the y with the requested parity."""
        assert encoding.decode_coordinates(data, SMALL_CURVE) == expected

    @pytest.mark.parametrize(
        "invalid_data,error_match",
        [
            (b"", "Invalid SEC1 length"),
            (b"\x02" + b"\x00" * 31, "Invalid SEC1 length"),
            (b"\x01" + b"\x00" * 32, "Invalid SEC1 compressed prefix"),
            (b"\x04" + b"\x00" * 32, "Invalid SEC1 compressed prefix"),
            (b"\x02" + b"\x00" * 64, "Invalid SEC1 uncompressed prefix"),
            (b"\x02" + b"\xff" * 32, "Invalid SEC1 x-coordinate"),
            (b"\x04" + b"\xff" * 64, "Invalid SEC1 uncompressed coordinates"),
        ],
    )
    def test_decode_invalid(self, invalid_data, error_match):
        """Test SEC1 decoding rejects invalid inputs."""
        with pytest.raises(errors.EncodingError, match=error_match):
            encoding.decode_coordinates(invalid_data, curves.SECP256K1)

    def test_decode_uncompressed_off_curve(self):
        """Test uncompressed points must satisfy the curve equation."""
        data = encoding.encode_coordinates(
            curves.P256.Gx, curves.P256.Gy ^ 1, 32, compressed=False
        )
        with pytest.raises(errors.EncodingError, match="not on the P-256 curve"):
            point.Point.from_sec1(data, curves.P256)

    def test_decode_compressed_no_square_root(self):
        """Test compressed x without a matching curve point is rejected."""
        # x = 4: 4^3 - 4 = 14 is a non-residue mod 23
        with pytest.raises(errors.EncodingError, match="Invalid SEC1 compressed point"):
            encoding.decode_coordinates(b"\x02\x04", SMALL_CURVE)

    @pytest.mark.parametrize("x", [0, 1, 22])
    def test_decode_y_zero_requires_even_prefix(self, x):
        """Test a point with y = 0 only decodes from its canonical 0x02 form."""
        pt = point.Point.from_sec1(bytes([0x02, x]), SMALL_CURVE)
        assert pt.y == 0
        assert pt.to_sec1_compressed == bytes([0x02, x])
        with pytest.raises(errors.EncodingError, match="prefix for y = 0"):
            point.Point.from_sec1(bytes([0x03, x]), SMALL_CURVE)

    def test_encoding_error_is_value_error(self):
        """Test EncodingError is catchable as ValueError."""
        with pytest.raises(ValueError):
            point.Point.from_sec1(b"\x07", curves.P256)
