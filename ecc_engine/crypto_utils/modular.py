from .. import errors


_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_FORMAT_SPECS = {16: "x", 10: "d", 8: "o", 2: "b"}


def parse_int(text: str, radix: int = 16) -> int:
    """
    Parse a non-negative integer written in the given radix.

    Whitespace and a matching 0x/0o/0b prefix are accepted.

    Args:
        text: Digits to parse
        radix: Base between 2 and 36

    Returns:
        Parsed integer

    Raises:
        ValueError: If the text is empty, negative or has invalid digits
    """
    if not 2 <= radix <= 36:
        raise ValueError("Radix must be between 2 and 36")
    cleaned = "".join(text.strip().split()).lower()
    prefix = {16: "0x", 8: "0o", 2: "0b"}.get(radix)
    if prefix is not None:
        cleaned = cleaned.removeprefix(prefix)
    if not cleaned:
        raise ValueError("Integer string is empty")
    if cleaned.startswith("-"):
        raise ValueError("Integer string must be non-negative")
    try:
        return int(cleaned, radix)
    except ValueError as exc:
        raise ValueError(f"Invalid base-{radix} integer: {text!r}") from exc


def format_int(value: int, radix: int = 16) -> str:
    """Format a non-negative integer in the given radix, lowercase, no prefix."""
    if not 2 <= radix <= 36:
        raise ValueError("Radix must be between 2 and 36")
    if value < 0:
        raise ValueError("Value must be non-negative")
    spec = _FORMAT_SPECS.get(radix)
    if spec is not None:
        return format(value, spec)
    if value == 0:
        return "0"
    out = []
    while value:
        value, digit = divmod(value, radix)
        out.append(_DIGITS[digit])
    return "".join(reversed(out))


def mod_reduce(value: int, modulus: int) -> int:
    """Reduce an integer into the range [0, modulus)."""
    return value % modulus


def mod_inverse(value: int, modulus: int) -> int:
    """
    Compute the multiplicative inverse of value modulo modulus.

    Args:
        value: Integer to invert
        modulus: Positive modulus

    Returns:
        Integer inv with (value * inv) % modulus == 1

    Raises:
        NotInvertibleError: If value shares a factor with modulus
    """
    try:
        return pow(value, -1, modulus)
    except ValueError as exc:
        raise errors.NotInvertibleError(
            f"0x{value % modulus:x} has no inverse modulo 0x{modulus:x}"
        ) from exc


def byte_length(value: int) -> int:
    """Return the number of bytes needed to hold value."""
    return (value.bit_length() + 7) // 8
