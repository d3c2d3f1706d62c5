"""Sponsor logo wrapping with positioning and scaling."""

import re

from ..config import Sponsor
from .utils import format_number

LINK_CLASS = "contribkit-link"

# Outer <svg> carries the scaled size; viewBox keeps the natural size
SPONSOR_SVG_TEMPLATE = """
  <a xlink:href="{url}" class="{link_class}" target="_blank" id="{sponsor_id}">
    <svg x="{x}" y="{y}" width="{scaled_width}" height="{scaled_height}" viewBox="0 0 {svg_width} {svg_height}">
      <rect width="{svg_width}" height="{svg_height}" fill="transparent" />
      {svg_content}
    </svg>
  </a>"""


def sponsor_id(name: str) -> str:
    """Build an element id from a sponsor name by removing all whitespace."""
    return re.sub(r"\s+", "", name)


def create_wrapped_sponsor_svg(
    sponsor: Sponsor,
    svg_content: str,
    svg_width: float,
    svg_height: float,
    height: float,
    x: float,
    y: float,
) -> str:
    """Create a wrapped SVG element for a sponsor with positioning and scaling.

    Args:
        sponsor: Sponsor with name and url
        svg_content: The SVG content to wrap (inserted verbatim)
        svg_width: Original width of the SVG
        svg_height: Original height of the SVG
        height: Target height for the scaled SVG (falsy keeps natural size)
        x: X position for the SVG
        y: Y position for the SVG

    Returns:
        Wrapped SVG string
    """
    scale = height / svg_height if height and svg_height else 1
    scaled_width = svg_width * scale
    scaled_height = svg_height * scale

    return SPONSOR_SVG_TEMPLATE.format(
        url=sponsor.url,
        link_class=LINK_CLASS,
        sponsor_id=sponsor_id(sponsor.name),
        x=format_number(x),
        y=format_number(y),
        scaled_width=format_number(scaled_width),
        scaled_height=format_number(scaled_height),
        svg_width=format_number(svg_width),
        svg_height=format_number(svg_height),
        svg_content=svg_content,
    )
