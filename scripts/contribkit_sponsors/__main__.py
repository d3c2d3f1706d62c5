"""CLI entry point for contribkit_sponsors package.

Usage:
    python -m contribkit_sponsors dimensions logo.svg
    python -m contribkit_sponsors wrap logo.svg --name "GitHub" --url https://github.com
    python -m contribkit_sponsors compose sponsors.yaml -o sponsors.svg
    python -m contribkit_sponsors config contribkit.yaml
"""

from .cli import main

if __name__ == "__main__":
    main()
