class EccError(Exception):
    """Base class for every error raised by ecc_engine."""


class CurveConfigurationError(EccError, LookupError):
    """No curve is selected, or the requested curve name is unknown."""


class InvalidCurveError(EccError, ValueError):
    """Curve constants do not describe a usable Weierstrass curve."""


class CurveMismatchError(EccError, TypeError):
    """Two points bound to different curves were combined or compared."""


class PointNotOnCurveError(EccError, ValueError):
    """Coordinates are out of the field range or do not satisfy the curve equation."""


class InvalidScalarError(EccError, ValueError):
    """Scalar multiplier is not a non-negative integer."""


class NotInvertibleError(EccError, ZeroDivisionError):
    """Value has no inverse modulo the given modulus."""


class EncodingError(EccError, ValueError):
    """Malformed SEC1 point encoding."""
