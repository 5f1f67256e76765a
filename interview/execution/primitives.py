"""
Primitive Codec - Textual Forms of Scalars

Parses operator answers into scalar values and formats scalar values back
into the same textual form. Parsing is strict: surrounding whitespace,
digit separators and out-of-range values are rejected.
"""

import math
import re
import struct
from typing import Any, Dict, List, Tuple

from ..domain.models import PrimitiveKind

_SIGNED = re.compile(r"[+-]?[0-9]+")
_UNSIGNED = re.compile(r"\+?[0-9]+")

INTEGER_RANGES: Dict[str, Tuple[int, int]] = {
    "i8": (-(2**7), 2**7 - 1),
    "i16": (-(2**15), 2**15 - 1),
    "i32": (-(2**31), 2**31 - 1),
    "i64": (-(2**63), 2**63 - 1),
    "i128": (-(2**127), 2**127 - 1),
    "u8": (0, 2**8 - 1),
    "u16": (0, 2**16 - 1),
    "u32": (0, 2**32 - 1),
    "u64": (0, 2**64 - 1),
    "u128": (0, 2**128 - 1),
}

BOOL_VARIANTS: List[str] = ["true", "false"]
U8_VARIANTS: List[str] = [str(n) for n in range(0, 256)]
I8_VARIANTS: List[str] = [str(n) for n in range(-128, 128)]


def variants_for(kind: PrimitiveKind) -> List[str]:
    """Allowed answers worth offering for completion."""
    if kind == "bool":
        return BOOL_VARIANTS
    if kind == "u8":
        return U8_VARIANTS
    if kind == "i8":
        return I8_VARIANTS
    return []


def parse(kind: PrimitiveKind, text: str) -> Any:
    """
    Parses `text` as a value of `kind`.

    Raises:
        ValueError: with a short human-readable reason.
    """
    if kind == "bool":
        if text == "true":
            return True
        if text == "false":
            return False
        raise ValueError("provided string was not `true` or `false`")

    if kind == "char":
        if len(text) != 1:
            raise ValueError("expected exactly one character")
        return text

    if kind in INTEGER_RANGES:
        low, high = INTEGER_RANGES[kind]
        pattern = _SIGNED if low < 0 else _UNSIGNED
        if not pattern.fullmatch(text):
            raise ValueError("invalid digit found in string")
        value = int(text)
        if not low <= value <= high:
            raise ValueError(f"number out of range for {kind}")
        return value

    if kind in ("f32", "f64"):
        if text != text.strip() or "_" in text:
            raise ValueError("invalid float literal")
        value = float(text)
        if kind == "f32":
            value = _to_single(value)
        return value

    raise ValueError(f"unknown primitive kind '{kind}'")


def format_value(kind: PrimitiveKind, value: Any) -> str:
    if kind == "bool":
        return "true" if value else "false"
    if kind == "f32":
        return _format_single(_to_single(float(value)))
    if kind == "f64":
        return repr(float(value))
    return str(value)


def _to_single(value: float) -> float:
    if math.isnan(value) or math.isinf(value):
        return value
    try:
        single = struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        single = math.inf
    # Newer interpreters pack overflowing values as infinity instead of raising.
    if math.isinf(single):
        raise ValueError("number out of range for f32")
    return single


def _format_single(value: float) -> str:
    """Shortest text that parses back to the same single-precision value."""
    if math.isnan(value) or math.isinf(value):
        return repr(value)
    for precision in range(1, 10):
        text = f"{value:.{precision}g}"
        if _to_single(float(text)) == value:
            return text
    return repr(value)


def check_value(kind: PrimitiveKind, value: Any) -> str:
    """
    Formats a value for display after checking that it fits `kind`.

    Raises:
        ValueError: when the value could not have been built as `kind`.
    """
    if kind == "bool":
        if not isinstance(value, bool):
            raise ValueError(f"expected bool, got {type(value).__name__}")
    elif kind == "char":
        if not isinstance(value, str):
            raise ValueError(f"expected str, got {type(value).__name__}")
    elif kind in INTEGER_RANGES:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"expected int, got {type(value).__name__}")
    elif kind in ("f32", "f64"):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"expected float, got {type(value).__name__}")
    text = format_value(kind, value)
    parse(kind, text)
    return text
