from .config import CURVE_ENV_VAR, active_curve, clear_selection, select_curve
from .curves import P256, P521, SECP256K1, CurveDescriptor, CurveName, get_curve
from .errors import (
    CurveConfigurationError,
    CurveMismatchError,
    EccError,
    EncodingError,
    InvalidCurveError,
    InvalidScalarError,
    NotInvertibleError,
    PointNotOnCurveError,
)
from .point import Point
