"""SVG dimension extraction from viewBox or width/height attributes."""

import re
from typing import Callable, NamedTuple

from .utils import parse_int_prefix, parse_number

DEFAULT_WIDTH = 200
DEFAULT_HEIGHT = 100

VIEWBOX_PATTERN = re.compile(r"""viewBox=['"]([^'"]*)['"]""")
WIDTH_PATTERN = re.compile(r"""width=['"]([^'"]*)['"]""")
HEIGHT_PATTERN = re.compile(r"""height=['"]([^'"]*)['"]""")


class Dimensions(NamedTuple):
    """Natural width and height of an SVG."""

    width: float
    height: float


def dimensions_from_viewbox(svg_content: str) -> Dimensions | None:
    """Read width/height from the 3rd and 4th viewBox values.

    The first two values (minX, minY) are the origin and are ignored.

    Returns:
        Dimensions, or None if there is no viewBox or it lacks two valid sizes
    """
    match = VIEWBOX_PATTERN.search(svg_content)
    if not match:
        return None

    values = [parse_number(token) for token in re.split(r"\s+", match.group(1))]
    if len(values) < 4:
        return None

    width, height = values[2], values[3]
    if width is None or height is None:
        return None
    return Dimensions(width, height)


def dimensions_from_attributes(svg_content: str) -> Dimensions:
    """Read width/height attributes as base-10 integers ("256px" -> 256).

    Each missing or unparseable value falls back to its own default.
    """
    width_match = WIDTH_PATTERN.search(svg_content)
    height_match = HEIGHT_PATTERN.search(svg_content)

    width = parse_int_prefix(width_match.group(1)) if width_match else None
    height = parse_int_prefix(height_match.group(1)) if height_match else None

    return Dimensions(
        width if width is not None else DEFAULT_WIDTH,
        height if height is not None else DEFAULT_HEIGHT,
    )


# Tried in order, first non-None result wins
EXTRACTION_STRATEGIES: list[Callable[[str], Dimensions | None]] = [
    dimensions_from_viewbox,
    dimensions_from_attributes,
]


def extract_svg_dimensions(svg_content: str) -> Dimensions:
    """Extract dimensions from SVG content.

    Tries the viewBox first, then width/height attributes, then defaults of
    200x100. Never raises; always returns finite numbers.

    Args:
        svg_content: The SVG content as a string

    Returns:
        Dimensions(width, height)
    """
    for strategy in EXTRACTION_STRATEGIES:
        dimensions = strategy(svg_content)
        if dimensions is not None:
            return dimensions
    return Dimensions(DEFAULT_WIDTH, DEFAULT_HEIGHT)
