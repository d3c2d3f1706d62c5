"""Number parsing/formatting and SVG file helpers."""

import math
import re
from decimal import Decimal
from pathlib import Path

# Decimal literal with optional fraction and exponent (e.g. "1", "-2.5", ".5", "1e3")
DECIMAL_PATTERN = re.compile(r"^[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?$")
RADIX_PATTERN = re.compile(r"^0([xXoObB])([0-9a-fA-F]+)$")
INT_PREFIX_PATTERN = re.compile(r"^\s*([+-]?[0-9]+)")

RADIX_BASES = {"x": 16, "o": 8, "b": 2}

XML_PROLOG_PATTERN = re.compile(r"<\?xml[^>]*\?>|<!DOCTYPE[^>]*>", re.IGNORECASE)


def escape_xml(text: str) -> str:
    """Escape XML special characters."""
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#x27;")
    )


def parse_number(token: str) -> float | None:
    """Convert a numeric literal token to a number.

    Surrounding whitespace is ignored and an empty token is 0. Accepts
    decimal/exponent literals and 0x/0o/0b integer literals.

    Args:
        token: Raw token, e.g. one whitespace-separated piece of a viewBox

    Returns:
        The number, or None if the token is not a finite number
    """
    token = token.strip()
    if not token:
        return 0
    if DECIMAL_PATTERN.match(token):
        value = float(token)
        return value if math.isfinite(value) else None

    match = RADIX_PATTERN.match(token)
    if match:
        try:
            return int(match.group(2), RADIX_BASES[match.group(1).lower()])
        except ValueError:
            return None
    return None


def parse_int_prefix(value: str) -> int | None:
    """Parse the leading base-10 integer of a string.

    Parsing stops at the first non-digit, so "256px" gives 256 and "08" gives 8.

    Returns:
        The integer, or None if the string does not start with digits
    """
    match = INT_PREFIX_PATTERN.match(value)
    if match:
        return int(match.group(1), 10)
    return None


def format_number(value: float) -> str:
    """Render a number for an SVG attribute.

    Integral values drop the fractional part ("60", not "60.0"); other values
    use the shortest round-trip form ("73.84615384615384").
    """
    if isinstance(value, bool):
        value = int(value)
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))

    text = repr(value)
    if "e" in text:
        mantissa, exponent = text.split("e")
        if -7 < int(exponent) < 0:
            # 1e-05 -> 0.00001
            return format(Decimal(text), "f")
        # 1e-07 -> 1e-7, 1e+21 stays
        sign = "-" if exponent.startswith("-") else "+"
        text = f"{mantissa}e{sign}{exponent.lstrip('+-').lstrip('0') or '0'}"
    return text


def strip_xml_prolog(svg_content: str) -> str:
    """Remove XML declarations and doctypes so an SVG can be nested."""
    return XML_PROLOG_PATTERN.sub("", svg_content).strip()


def load_svg_file(path: Path) -> str:
    """Load SVG file content.

    Args:
        path: Path to SVG file

    Returns:
        SVG file content as string
    """
    return path.read_text(encoding="utf-8")


def save_svg_file(path: Path, content: str) -> None:
    """Save SVG content to file.

    Args:
        path: Path to save SVG file
        content: SVG content to save
    """
    path.write_text(content, encoding="utf-8")
