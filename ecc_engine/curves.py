import dataclasses
import enum
import logging
import typing as t

from . import errors
from .crypto_utils import modular


logger = logging.getLogger(__name__)


class CurveName(enum.Enum):
    """Named curves that can be selected as the active curve."""

    P256 = "P-256"
    SECP256K1 = "secp256k1"
    P521 = "P-521"


@dataclasses.dataclass(frozen=True)
class CurveDescriptor:
    """
    Constants of a short Weierstrass curve y^2 = x^3 + ax + b (mod p).

    (Gx, Gy) is the generator and n its order. Descriptors are compared by
    value, so two points are on the same curve when their descriptors are
    equal.
    """

    name: str
    a: int
    b: int
    p: int
    Gx: int
    Gy: int
    n: int
    byte_length: int = dataclasses.field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.p <= 3:
            raise errors.InvalidCurveError(f"{self.name}: field prime must be > 3")
        if not (0 <= self.a < self.p and 0 <= self.b < self.p):
            raise errors.InvalidCurveError(
                f"{self.name}: coefficients must be reduced modulo p"
            )
        # 4a^3 + 27b^2 != 0 (mod p)
        if (4 * pow(self.a, 3, self.p) + 27 * pow(self.b, 2, self.p)) % self.p == 0:
            raise errors.InvalidCurveError(f"{self.name}: curve is singular")
        if self.n <= 0:
            raise errors.InvalidCurveError(f"{self.name}: order must be positive")
        if not (0 <= self.Gx < self.p and 0 <= self.Gy < self.p):
            raise errors.InvalidCurveError(
                f"{self.name}: generator coordinates out of field range"
            )
        if not self.contains(self.Gx, self.Gy):
            raise errors.InvalidCurveError(
                f"{self.name}: generator is not on the curve"
            )
        object.__setattr__(self, "byte_length", modular.byte_length(self.p))

    @classmethod
    def from_hex(
        cls, name: str, a: str, b: str, p: str, Gx: str, Gy: str, n: str
    ) -> "CurveDescriptor":
        """Create a descriptor from hexadecimal constants."""
        return cls(
            name=name,
            a=modular.parse_int(a, 16),
            b=modular.parse_int(b, 16),
            p=modular.parse_int(p, 16),
            Gx=modular.parse_int(Gx, 16),
            Gy=modular.parse_int(Gy, 16),
            n=modular.parse_int(n, 16),
        )

    def contains(self, x: int, y: int) -> bool:
        """Check whether (x, y) satisfies the curve equation."""
        return (y * y - (x * x * x + self.a * x + self.b)) % self.p == 0

    def __str__(self) -> str:
        return self.name


P256 = CurveDescriptor.from_hex(
    name=CurveName.P256.value,
    a="ffffffff00000001000000000000000000000000fffffffffffffffffffffffc",
    b="5ac635d8aa3a93e7b3ebbd55769886bc651d06b0cc53b0f63bce3c3e27d2604b",
    p="ffffffff00000001000000000000000000000000ffffffffffffffffffffffff",
    Gx="6b17d1f2e12c4247f8bce6e563a440f277037d812deb33a0f4a13945d898c296",
    Gy="4fe342e2fe1a7f9b8ee7eb4a7c0f9e162bce33576b315ececbb6406837bf51f5",
    n="ffffffff00000000ffffffffffffffffbce6faada7179e84f3b9cac2fc632551",
)

SECP256K1 = CurveDescriptor.from_hex(
    name=CurveName.SECP256K1.value,
    a="0",
    b="7",
    p="fffffffffffffffffffffffffffffffffffffffffffffffffffffffefffffc2f",
    Gx="79be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798",
    Gy="483ada7726a3c4655da4fbfc0e1108a8fd17b448a68554199c47d08ffb10d4b8",
    n="fffffffffffffffffffffffffffffffebaaedce6af48a03bbfd25e8cd0364141",
)

P521 = CurveDescriptor.from_hex(
    name=CurveName.P521.value,
    a="01fffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffc",
    b="0051953eb9618e1c9a1f929a21a0b68540eea2da725b99b315f3b8b489918ef109e156193951ec7e937b1652c0bd3bb1bf073573df883d2c34f1ef451fd46b503f00",
    p="01ffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffff",
    Gx="00c6858e06b70404e9cd9e3ecb662395b4429c648139053fb521f828af606b4d3dbaa14b5e77efe75928fe1dc127a2ffa8de3348b3c1856a429bf97e7e31c2e5bd66",
    Gy="011839296a789a3bc0045c8a5fb42c7d1bd998f54449579b446817afbd17273e662c97ee72995ef42640c550b9013fad0761353c7086a272c24088be94769fd16650",
    n="01fffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffa51868783bf2f966b7fcc0148f709a5d03bb5c9b8899c47aebb6fb71e91386409",
)

PRESETS: t.Dict[CurveName, CurveDescriptor] = {
    CurveName.P256: P256,
    CurveName.SECP256K1: SECP256K1,
    CurveName.P521: P521,
}

_ALIASES = {
    "P256": CurveName.P256,
    "SECP256R1": CurveName.P256,
    "PRIME256V1": CurveName.P256,
    "SECP256K1": CurveName.SECP256K1,
    "P521": CurveName.P521,
    "SECP521R1": CurveName.P521,
}


def _normalize_name(name: str) -> str:
    return "".join(name.strip().split()).upper().replace("-", "").replace("_", "")


def get_curve(name: t.Union[CurveName, str]) -> CurveDescriptor:
    """
    Look up a preset curve.

    Args:
        name: CurveName member or its string form ("P-256", "p256",
            "secp256k1", "P521", ...)

    Returns:
        The preset CurveDescriptor

    Raises:
        CurveConfigurationError: If the name is not a known preset
    """
    if isinstance(name, CurveName):
        return PRESETS[name]
    if not isinstance(name, str):
        raise errors.CurveConfigurationError(
            f"Curve name must be a string or CurveName, got {type(name).__name__}"
        )
    key = _alias_lookup(name)
    logger.debug("Resolved curve name %r to %s", name, key.value)
    return PRESETS[key]


def _alias_lookup(name: str) -> CurveName:
    try:
        return _ALIASES[_normalize_name(name)]
    except KeyError:
        known = ", ".join(member.value for member in CurveName)
        raise errors.CurveConfigurationError(
            f"Unknown curve {name!r} (expected one of: {known})"
        ) from None
