"""Command-line interface for sponsor graphic utilities."""

import argparse
import json
import os
import sys
from pathlib import Path

import yaml
from pydantic import ValidationError

from .config import (
    LOGIN_ENV,
    TOKEN_ENV,
    Sponsor,
    load_contribkit_config,
    load_sponsors_config,
)
from .svg.composer import compose_sponsors
from .svg.dimensions import extract_svg_dimensions
from .svg.utils import format_number, load_svg_file, save_svg_file, strip_xml_prolog
from .svg.wrapper import create_wrapped_sponsor_svg


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog="contribkit_sponsors",
        description="Sponsor logo utilities for contribkit graphics",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # --- dimensions subcommand ---
    dimensions_parser = subparsers.add_parser(
        "dimensions",
        help="Print the natural width and height of an SVG",
    )
    dimensions_parser.add_argument("svg_file", type=Path, help="SVG file to measure")

    # --- wrap subcommand ---
    wrap_parser = subparsers.add_parser(
        "wrap",
        help="Wrap a sponsor logo into a positioned, scaled link fragment",
    )
    wrap_parser.add_argument("svg_file", type=Path, help="Sponsor logo SVG")
    wrap_parser.add_argument("--name", required=True, help="Sponsor display name")
    wrap_parser.add_argument("--url", required=True, help="Sponsor link target")
    wrap_parser.add_argument(
        "--height",
        type=float,
        default=60,
        help="Target logo height, 0 keeps the natural size (default: 60)",
    )
    wrap_parser.add_argument("--x", type=float, default=0, help="X position (default: 0)")
    wrap_parser.add_argument("--y", type=float, default=0, help="Y position (default: 0)")

    # --- compose subcommand ---
    compose_parser = subparsers.add_parser(
        "compose",
        help="Lay out all sponsor logos into one SVG banner",
    )
    compose_parser.add_argument(
        "sponsors_file",
        type=Path,
        help="Sponsors YAML with layout and name/url/logo entries",
    )
    compose_parser.add_argument(
        "-o", "--output",
        type=Path,
        required=True,
        help="Output SVG file",
    )

    # --- config subcommand ---
    config_parser = subparsers.add_parser(
        "config",
        help="Print the resolved contribkit renderer config as JSON",
    )
    config_parser.add_argument(
        "config_file",
        type=Path,
        nargs="?",
        help="Renderer config YAML (defaults apply when omitted)",
    )

    return parser


def cmd_dimensions(args: argparse.Namespace) -> int:
    """Execute dimensions subcommand."""
    if not args.svg_file.exists():
        print(f"Error: SVG file not found: {args.svg_file}", file=sys.stderr)
        return 1

    try:
        svg_content = load_svg_file(args.svg_file)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: Cannot read SVG file {args.svg_file}: {e}", file=sys.stderr)
        return 1

    width, height = extract_svg_dimensions(svg_content)
    print(f"{format_number(width)} {format_number(height)}")
    return 0


def cmd_wrap(args: argparse.Namespace) -> int:
    """Execute wrap subcommand."""
    if not args.svg_file.exists():
        print(f"Error: SVG file not found: {args.svg_file}", file=sys.stderr)
        return 1

    try:
        svg_content = strip_xml_prolog(load_svg_file(args.svg_file))
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: Cannot read SVG file {args.svg_file}: {e}", file=sys.stderr)
        return 1

    width, height = extract_svg_dimensions(svg_content)
    sponsor = Sponsor(name=args.name, url=args.url)

    print(create_wrapped_sponsor_svg(
        sponsor, svg_content, width, height, args.height, args.x, args.y
    ))
    return 0


def cmd_compose(args: argparse.Namespace) -> int:
    """Execute compose subcommand."""
    if not args.sponsors_file.exists():
        print(f"Error: Sponsors file not found: {args.sponsors_file}", file=sys.stderr)
        return 1

    try:
        config = load_sponsors_config(args.sponsors_file)
        banner = compose_sponsors(config.sponsors, config.layout)
    except (yaml.YAMLError, ValidationError) as e:
        print(f"Error: Invalid sponsors file {args.sponsors_file}: {e}", file=sys.stderr)
        return 1
    except FileNotFoundError as e:
        print(f"Error: Sponsor logo not found: {e.filename}", file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: Cannot read sponsors input: {e}", file=sys.stderr)
        return 1

    save_svg_file(args.output, banner)
    print(f"Wrote {len(config.sponsors)} sponsors to {args.output}")
    return 0


def cmd_config(args: argparse.Namespace) -> int:
    """Execute config subcommand."""
    if args.config_file is not None and not args.config_file.exists():
        print(f"Error: Config file not found: {args.config_file}", file=sys.stderr)
        return 1

    try:
        config = load_contribkit_config(
            args.config_file,
            login=os.environ.get(LOGIN_ENV),
            token=os.environ.get(TOKEN_ENV),
        )
    except (yaml.YAMLError, ValidationError) as e:
        print(f"Error: Invalid config file {args.config_file}: {e}", file=sys.stderr)
        return 1

    print(json.dumps(config.model_dump(by_alias=True), indent=2))
    return 0


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command == "dimensions":
        sys.exit(cmd_dimensions(args))
    elif args.command == "wrap":
        sys.exit(cmd_wrap(args))
    elif args.command == "compose":
        sys.exit(cmd_compose(args))
    elif args.command == "config":
        sys.exit(cmd_config(args))
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
