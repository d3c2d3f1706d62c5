"""SVG utilities for sponsor logos and banners."""

from .utils import format_number, parse_int_prefix, parse_number, strip_xml_prolog
from .dimensions import Dimensions, extract_svg_dimensions
from .wrapper import create_wrapped_sponsor_svg, sponsor_id
from .composer import compose_sponsors, place_sponsors

__all__ = [
    # Utils
    "format_number",
    "parse_int_prefix",
    "parse_number",
    "strip_xml_prolog",
    # Dimensions
    "Dimensions",
    "extract_svg_dimensions",
    # Wrapper
    "create_wrapped_sponsor_svg",
    "sponsor_id",
    # Composer
    "compose_sponsors",
    "place_sponsors",
]
