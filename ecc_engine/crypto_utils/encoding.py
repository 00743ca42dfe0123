import typing as t

from .. import errors

if t.TYPE_CHECKING:
    from .. import curves


INFINITY_ENCODING = b"\x00"


def encode_coordinates(
    x: int, y: int, length: int, compressed: bool = True
) -> bytes:
    """
    Encode affine coordinates in SEC1 format.

    Args:
        x: x-coordinate
        y: y-coordinate
        length: Field element length in bytes
        compressed: Whether to use compressed format (1 + length bytes)
            or uncompressed (1 + 2 * length bytes)

    Returns:
        SEC1-encoded bytes
    """
    x_bytes = x.to_bytes(length, byteorder="big")
    if compressed:
        prefix = b"\x02" if y % 2 == 0 else b"\x03"
        return prefix + x_bytes

    y_bytes = y.to_bytes(length, byteorder="big")
    return b"\x04" + x_bytes + y_bytes


def decompress_y(x: int, odd: bool, curve: "curves.CurveDescriptor") -> int:
    """
    Recover the y-coordinate with the requested parity for a given x.

    Raises:
        EncodingError: If x is not the abscissa of a curve point
    """
    p = curve.p
    if p % 4 != 3:
        raise errors.EncodingError(
            f"Point decompression is not supported on {curve.name}"
        )
    y_sq = (pow(x, 3, p) + curve.a * x + curve.b) % p
    y = pow(y_sq, (p + 1) // 4, p)
    if (y * y) % p != y_sq:
        raise errors.EncodingError("Invalid SEC1 compressed point")
    if y == 0 and odd:
        raise errors.EncodingError("Invalid SEC1 compressed prefix for y = 0")
    if (y % 2 == 1) != odd:
        y = (p - y) % p
    return y


def decode_coordinates(
    data: bytes, curve: "curves.CurveDescriptor"
) -> t.Optional[t.Tuple[int, int]]:
    """
    Decode SEC1-encoded bytes into affine coordinates.

    Args:
        data: SEC1-encoded bytes
        curve: Curve the point belongs to

    Returns:
        (x, y) tuple, or None for the point at infinity

    Raises:
        EncodingError: If SEC1 format is invalid
    """
    length = curve.byte_length

    if data == INFINITY_ENCODING:
        return None

    if len(data) == length + 1:
        prefix = data[0]
        if prefix not in (0x02, 0x03):
            raise errors.EncodingError("Invalid SEC1 compressed prefix")

        x = int.from_bytes(data[1:], byteorder="big")
        if x >= curve.p:
            raise errors.EncodingError("Invalid SEC1 x-coordinate")

        return x, decompress_y(x, prefix == 0x03, curve)

    if len(data) == 2 * length + 1:
        if data[0] != 0x04:
            raise errors.EncodingError("Invalid SEC1 uncompressed prefix")

        x = int.from_bytes(data[1 : length + 1], byteorder="big")
        y = int.from_bytes(data[length + 1 :], byteorder="big")
        if x >= curve.p or y >= curve.p:
            raise errors.EncodingError("Invalid SEC1 uncompressed coordinates")
        if not curve.contains(x, y):
            raise errors.EncodingError(
                f"Invalid SEC1 point: not on the {curve.name} curve"
            )

        return x, y

    raise errors.EncodingError("Invalid SEC1 length")
