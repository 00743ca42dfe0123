import logging
import os
import typing as t

from . import curves
from . import errors


logger = logging.getLogger(__name__)

# Environment variable read when no curve was selected programmatically
CURVE_ENV_VAR = "ECC_ENGINE_CURVE"

_active: t.Optional[curves.CurveDescriptor] = None


def select_curve(
    name: t.Union[curves.CurveName, str]
) -> curves.CurveDescriptor:
    """
    Make a preset curve the process-wide active curve.

    Args:
        name: CurveName member or curve name string

    Returns:
        The selected CurveDescriptor

    Raises:
        CurveConfigurationError: If the name is not a known preset
    """
    global _active
    descriptor = curves.get_curve(name)
    if _active is not None and _active != descriptor:
        logger.warning("Active curve changed from %s to %s", _active, descriptor)
    _active = descriptor
    logger.info("Active curve set to %s", descriptor)
    return descriptor


def clear_selection() -> None:
    """Forget the programmatic curve selection."""
    global _active
    _active = None


def active_curve() -> curves.CurveDescriptor:
    """
    Return the active curve.

    Falls back to the ECC_ENGINE_CURVE environment variable when no curve
    was selected. There is no default curve.

    Raises:
        CurveConfigurationError: If no curve is selected or configured
    """
    if _active is not None:
        return _active

    env_name = os.environ.get(CURVE_ENV_VAR, "").strip()
    if not env_name:
        raise errors.CurveConfigurationError(
            f"No elliptic curve selected: call select_curve() or set {CURVE_ENV_VAR}"
        )
    return curves.get_curve(env_name)


def resolve_curve(
    curve: t.Optional[curves.CurveDescriptor],
) -> curves.CurveDescriptor:
    """Return curve if given, otherwise the active curve."""
    if curve is None:
        return active_curve()
    if not isinstance(curve, curves.CurveDescriptor):
        raise TypeError(
            f"curve must be a CurveDescriptor, got {type(curve).__name__}"
        )
    return curve
