"""Composite sponsor banner layout."""

from ..config import Sponsor, SponsorEntry, SponsorLayout
from .dimensions import Dimensions, extract_svg_dimensions
from .utils import escape_xml, format_number, load_svg_file, strip_xml_prolog
from .wrapper import LINK_CLASS, create_wrapped_sponsor_svg

# SVG namespace constants
SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"

BANNER_TEMPLATE = """<svg xmlns="{svg_ns}" xmlns:xlink="{xlink_ns}" width="{width}" height="{height}" viewBox="0 0 {width} {height}">
<style>
.{link_class} {{ cursor: pointer; }}
</style>{fragments}
</svg>
"""


def scaled_width(dimensions: Dimensions, logo_height: float) -> float:
    """Width of a logo once scaled to logo_height."""
    if not dimensions.height:
        return dimensions.width
    return dimensions.width * (logo_height / dimensions.height)


def place_sponsors(
    sizes: list[Dimensions], layout: SponsorLayout
) -> tuple[list[tuple[float, float]], int]:
    """Pack scaled logos into centred rows.

    Logos go left to right until the next one would overflow the usable
    width; a logo wider than a row gets a row of its own.

    Args:
        sizes: Natural dimensions of each logo, in display order
        layout: Banner layout settings

    Returns:
        ((x, y) per logo, number of rows)
    """
    usable = layout.width - 2 * layout.padding
    widths = [scaled_width(size, layout.logo_height) for size in sizes]

    rows: list[list[int]] = []
    row_width = 0.0
    for index, width in enumerate(widths):
        if rows and row_width + layout.gap + width <= usable:
            rows[-1].append(index)
            row_width += layout.gap + width
        else:
            rows.append([index])
            row_width = width

    positions: list[tuple[float, float]] = [(0.0, 0.0)] * len(sizes)
    for row_index, row in enumerate(rows):
        total = sum(widths[i] for i in row) + layout.gap * (len(row) - 1)
        x = layout.padding + max(usable - total, 0) / 2
        y = layout.padding + row_index * (layout.logo_height + layout.gap)
        for i in row:
            positions[i] = (x, y)
            x += widths[i] + layout.gap
    return positions, len(rows)


def banner_height(rows: int, layout: SponsorLayout) -> float:
    """Total banner height for the given number of rows."""
    if rows == 0:
        return 2 * layout.padding
    return 2 * layout.padding + rows * layout.logo_height + (rows - 1) * layout.gap


def compose_sponsors(entries: list[SponsorEntry], layout: SponsorLayout) -> str:
    """Build a complete SVG banner with every sponsor logo linked and scaled.

    Args:
        entries: Sponsors with logo paths, in display order
        layout: Banner layout settings

    Returns:
        SVG document string

    Raises:
        OSError: If a logo file cannot be read
        UnicodeDecodeError: If a logo file is not UTF-8
    """
    logos = [strip_xml_prolog(load_svg_file(entry.logo)) for entry in entries]
    sizes = [extract_svg_dimensions(logo) for logo in logos]
    positions, rows = place_sponsors(sizes, layout)

    # Attribute values must be escaped for the banner to stay well-formed
    sponsors = [Sponsor(name=escape_xml(entry.name), url=escape_xml(entry.url)) for entry in entries]

    fragments = [
        create_wrapped_sponsor_svg(sponsor, logo, size.width, size.height, layout.logo_height, x, y)
        for sponsor, logo, size, (x, y) in zip(sponsors, logos, sizes, positions)
    ]

    return BANNER_TEMPLATE.format(
        svg_ns=SVG_NS,
        xlink_ns=XLINK_NS,
        width=format_number(layout.width),
        height=format_number(banner_height(rows, layout)),
        link_class=LINK_CLASS,
        fragments="".join(fragments),
    )
