"""Conversions between numbers and text."""

import re
import struct

from .errors import PuzzleError

_SPACE = r"[ \t\n\r\f\v]*"
_INT_RE = re.compile(_SPACE + r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    _SPACE
    + r"(?P<sign>[+-]?)(?:"
    + r"(?P<hex>0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?[0-9]+)?)"
    + r"|(?P<dec>(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"
    + r"|(?P<special>(?i:infinity|inf|nan)))"
)


def to_string(value):
    """Render a value the way a default text stream would."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return f"{value:g}"
    try:
        return str(value)
    except Exception as exc:
        raise PuzzleError(f"Can't convert {type(value).__name__} to string") from exc


def _map_chars(text, convert):
    result = []
    for ch in text:
        mapped = convert(ch)
        result.append(mapped if len(mapped) == 1 else ch)
    return "".join(result)


def to_lower_case(text):
    """Lower-case every character, one character at a time."""
    return _map_chars(text, str.lower)


def to_upper_case(text):
    """Upper-case every character, one character at a time."""
    return _map_chars(text, str.upper)


def num_to_str(num):
    """Decimal text of an integer."""
    return str(int(num))


def str_to_int(text):
    """Parse a whole string as a base-10 integer."""
    if not _INT_RE.fullmatch(text):
        raise PuzzleError(f"Invalid integer '{text}'")
    return int(text.lstrip(" \t\n\r\f\v"))


def str_to_double(text):
    """Parse a whole string as a floating point number."""
    match = _FLOAT_RE.fullmatch(text)
    if not match:
        raise PuzzleError(f"Invalid double '{text}'")
    sign = match.group("sign")
    if match.group("hex"):
        return float.fromhex(sign + match.group("hex"))
    body = match.group("dec") or match.group("special")
    return float(sign + body)


def to_float32(value):
    """Round a number to single precision."""
    return struct.unpack("<f", struct.pack("<f", float(value)))[0]