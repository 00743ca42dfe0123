import typing as t

from . import config
from . import curves
from . import errors
from .crypto_utils import encoding
from .crypto_utils import modular


def _check_scalar(k: object) -> int:
    if isinstance(k, bool) or not isinstance(k, int):
        raise errors.InvalidScalarError(
            f"Scalar must be an integer, got {type(k).__name__}"
        )
    if k < 0:
        raise errors.InvalidScalarError("Scalar must be a non-negative integer")
    return k


class Point:
    """
    Represents a point on a short Weierstrass curve, or the point at infinity.

    Every point, the identity included, is bound to a CurveDescriptor.
    Points are immutable: arithmetic returns new points.
    """

    def __init__(self) -> None:
        raise TypeError(
            "Use Point.identity() or Point.from_* classmethods for construction"
        )

    @classmethod
    def _create(
        cls, curve: curves.CurveDescriptor, x: t.Optional[int], y: t.Optional[int]
    ) -> "Point":
        instance = object.__new__(cls)
        instance._init_state(curve, x, y)
        return instance

    def _init_state(
        self, curve: curves.CurveDescriptor, x: t.Optional[int], y: t.Optional[int]
    ) -> None:
        self._curve = curve
        self._x = x
        self._y = y
        self._sec1_compressed_cache: t.Optional[bytes] = None
        self._sec1_uncompressed_cache: t.Optional[bytes] = None

    def _validate(self) -> None:
        """Validate finite point coordinates."""
        if isinstance(self._x, bool) or not isinstance(self._x, int):
            raise TypeError("Point coordinates must be integers")
        if isinstance(self._y, bool) or not isinstance(self._y, int):
            raise TypeError("Point coordinates must be integers")

        p = self._curve.p
        if not (0 <= self._x < p and 0 <= self._y < p):
            raise errors.PointNotOnCurveError("Point coordinates out of field range")

        if not self._curve.contains(self._x, self._y):
            raise errors.PointNotOnCurveError(
                f"Point is not on the {self._curve.name} curve"
            )

    @classmethod
    def identity(cls, curve: t.Optional[curves.CurveDescriptor] = None) -> "Point":
        """Create the point at infinity on curve (default: the active curve)."""
        return cls._create(config.resolve_curve(curve), None, None)

    @classmethod
    def from_coordinates(
        cls, x: int, y: int, curve: t.Optional[curves.CurveDescriptor] = None
    ) -> "Point":
        """
        Create a finite point from affine coordinates.

        Args:
            x: x-coordinate in [0, p)
            y: y-coordinate in [0, p)
            curve: Curve to bind to; the active curve when omitted

        Returns:
            Point on the curve

        Raises:
            PointNotOnCurveError: If the coordinates are not a curve point
            CurveConfigurationError: If curve is omitted and none is active
        """
        instance = cls._create(config.resolve_curve(curve), x, y)
        instance._validate()
        return instance

    @classmethod
    def from_hex(
        cls, x_hex: str, y_hex: str, curve: t.Optional[curves.CurveDescriptor] = None
    ) -> "Point":
        """Create a finite point from hex coordinates (with or without 0x prefix)."""
        return cls.from_coordinates(
            modular.parse_int(x_hex, 16), modular.parse_int(y_hex, 16), curve
        )

    @classmethod
    def generator(cls, curve: t.Optional[curves.CurveDescriptor] = None) -> "Point":
        """Return the base point G of curve (default: the active curve)."""
        resolved = config.resolve_curve(curve)
        return cls._create(resolved, resolved.Gx, resolved.Gy)

    @classmethod
    def from_sec1(
        cls, data: bytes, curve: t.Optional[curves.CurveDescriptor] = None
    ) -> "Point":
        """
        Decode from SEC1-encoded bytes.

        Args:
            data: SEC1-encoded bytes, or b"\\x00" for the point at infinity
            curve: Curve to decode against; the active curve when omitted

        Returns:
            Point decoded from SEC1 format

        Raises:
            EncodingError: If SEC1 format is invalid
        """
        resolved = config.resolve_curve(curve)
        coordinates = encoding.decode_coordinates(data, resolved)
        if coordinates is None:
            return cls._create(resolved, None, None)
        return cls.from_coordinates(*coordinates, curve=resolved)

    @property
    def curve(self) -> curves.CurveDescriptor:
        return self._curve

    @property
    def p(self) -> int:
        return self._curve.p

    @property
    def x(self) -> t.Optional[int]:
        """x-coordinate, or None for the point at infinity."""
        return self._x

    @property
    def y(self) -> t.Optional[int]:
        """y-coordinate, or None for the point at infinity."""
        return self._y

    @property
    def is_infinity(self) -> bool:
        return self._x is None

    def is_on_curve(self) -> bool:
        """Check the curve equation; the point at infinity is always on the curve."""
        if self.is_infinity:
            return True
        return self._curve.contains(self._x, self._y)

    @property
    def to_sec1_compressed(self) -> bytes:
        """
        Encode to SEC1 compressed format (1 + field length bytes).

        Returns:
            SEC1 compressed-encoded bytes
        """
        if self._sec1_compressed_cache is None:
            if self.is_infinity:
                self._sec1_compressed_cache = encoding.INFINITY_ENCODING
            else:
                self._sec1_compressed_cache = encoding.encode_coordinates(
                    self._x, self._y, self._curve.byte_length, compressed=True
                )
        return self._sec1_compressed_cache

    @property
    def to_sec1_uncompressed(self) -> bytes:
        """
        Encode to SEC1 uncompressed format (1 + 2 * field length bytes).

        Returns:
            SEC1 uncompressed-encoded bytes
        """
        if self._sec1_uncompressed_cache is None:
            if self.is_infinity:
                self._sec1_uncompressed_cache = encoding.INFINITY_ENCODING
            else:
                self._sec1_uncompressed_cache = encoding.encode_coordinates(
                    self._x, self._y, self._curve.byte_length, compressed=False
                )
        return self._sec1_uncompressed_cache

    def _check_same_curve(self, other: "Point") -> None:
        if self._curve != other._curve:
            raise errors.CurveMismatchError(
                "Points are on different curves: "
                f"{self._curve.name} and {other._curve.name}"
            )

    def negate(self) -> "Point":
        """Return -P: (x, p - y), or the point at infinity for the identity."""
        if self.is_infinity:
            return self
        return Point._create(self._curve, self._x, (self.p - self._y) % self.p)

    def add(self, other: "Point") -> "Point":
        """
        Add this point to another point.

        Args:
            other: Another Point on the same curve

        Returns:
            Result of point addition

        Raises:
            TypeError: If other is not a Point
            CurveMismatchError: If the points are on different curves
        """
        if not isinstance(other, Point):
            raise TypeError("Can only add Point to Point")
        self._check_same_curve(other)

        if self.is_infinity:
            return other
        if other.is_infinity:
            return self

        p = self.p
        x1, y1 = self._x, self._y
        x2, y2 = other._x, other._y

        if x1 == x2:
            if (y1 + y2) % p == 0:
                # P + (-P) = point at infinity
                return Point._create(self._curve, None, None)
            return self.double()

        # Regular addition: (y2 - y1) / (x2 - x1)
        s = ((y2 - y1) * modular.mod_inverse(x2 - x1, p)) % p
        x3 = (s * s - x1 - x2) % p
        y3 = (s * (x1 - x3) - y1) % p
        return Point._create(self._curve, x3, y3)

    def double(self) -> "Point":
        """
        Return 2P using the tangent-line formula.

        A point with y = 0 is its own inverse, so doubling it gives the
        point at infinity.
        """
        if self.is_infinity or self._y == 0:
            return Point._create(self._curve, None, None)

        p = self.p
        x, y = self._x, self._y
        s = ((3 * x * x + self._curve.a) * modular.mod_inverse(2 * y, p)) % p
        x3 = (s * s - 2 * x) % p
        y3 = (s * (x - x3) - y) % p
        return Point._create(self._curve, x3, y3)

    def subtract(self, other: "Point") -> "Point":
        """Return P - Q, computed as P + (-Q)."""
        if not isinstance(other, Point):
            raise TypeError("Can only subtract Point from Point")
        return self.add(other.negate())

    def multiply(self, k: int) -> "Point":
        """
        Multiply this point by a scalar using double-and-add algorithm.

        Bits are consumed from least to most significant. The sequence of
        additions depends on the bits of k, so this must not be used with
        secret scalars where timing is observable.

        Args:
            k: Non-negative scalar multiplier

        Returns:
            Result point k*P

        Raises:
            InvalidScalarError: If k is not a non-negative integer
        """
        k = _check_scalar(k)

        result = Point._create(self._curve, None, None)
        addend = self

        while k:
            if k & 1:
                result = result.add(addend)
            addend = addend.double()
            k >>= 1

        return result

    def multiply_ladder(self, k: int) -> "Point":
        """
        Multiply this point by a scalar using a Montgomery ladder.

        Performs one addition and one doubling per bit of k regardless of
        the bit values. Python integer arithmetic is not constant time, so
        this is still not side-channel resistant.
        """
        k = _check_scalar(k)

        r0 = Point._create(self._curve, None, None)
        r1 = self

        for i in reversed(range(k.bit_length())):
            if (k >> i) & 1:
                r0 = r0.add(r1)
                r1 = r1.double()
            else:
                r1 = r0.add(r1)
                r0 = r0.double()

        return r0

    def describe(self) -> str:
        """Human-readable coordinates in hex, for debugging only."""
        if self.is_infinity:
            return "Point at Infinity"
        return (
            "Point Coordinates:\n"
            f"x = {modular.format_int(self._x, 16)}\n"
            f"y = {modular.format_int(self._y, 16)}"
        )

    def print_coordinates(self, file: t.Optional[t.TextIO] = None) -> None:
        """Print the coordinates (or the infinity marker)."""
        print(self.describe(), file=file)

    def __neg__(self) -> "Point":
        return self.negate()

    def __add__(self, other: object) -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, k: object) -> "Point":
        if isinstance(k, Point):
            return NotImplemented
        return self.multiply(k)

    __rmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        """Check equality with another Point on the same curve."""
        if not isinstance(other, Point):
            return NotImplemented
        self._check_same_curve(other)
        return self._x == other._x and self._y == other._y

    def __hash__(self) -> int:
        """Return hash of the point."""
        return hash((self._curve.name, self._x, self._y))

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        """String representation of the point."""
        if self.is_infinity:
            return f"Point({self._curve.name}, infinity)"
        width = 2 * self._curve.byte_length
        return f"Point({self._curve.name}, 0x{self._x:0{width}x}, 0x{self._y:0{width}x})"
