"""
Sponsor logo utilities for contribkit-rendered graphics.

Extracts SVG dimensions and wraps sponsor logos into positioned, scaled
fragments for a composite sponsors banner.

Usage:
    python -m contribkit_sponsors dimensions logo.svg
    python -m contribkit_sponsors wrap logo.svg --name "GitHub" --url https://github.com
    python -m contribkit_sponsors compose sponsors.yaml -o sponsors.svg
    python -m contribkit_sponsors config contribkit.yaml
"""

from .config import (
    Sponsor,
    SponsorEntry,
    SponsorLayout,
    SponsorsConfig,
    ContribkitConfig,
    load_yaml,
    load_sponsors_config,
    load_contribkit_config,
)
from .svg.dimensions import Dimensions, extract_svg_dimensions
from .svg.wrapper import create_wrapped_sponsor_svg
from .svg.composer import compose_sponsors

__all__ = [
    # Config
    "Sponsor",
    "SponsorEntry",
    "SponsorLayout",
    "SponsorsConfig",
    "ContribkitConfig",
    "load_yaml",
    "load_sponsors_config",
    "load_contribkit_config",
    # SVG
    "Dimensions",
    "extract_svg_dimensions",
    "create_wrapped_sponsor_svg",
    "compose_sponsors",
]
