"""Sponsor banner layout tests."""

from pathlib import Path
from xml.dom import minidom

import pytest

from contribkit_sponsors.config import SponsorEntry, SponsorLayout
from contribkit_sponsors.svg.composer import banner_height, compose_sponsors, place_sponsors
from contribkit_sponsors.svg.dimensions import Dimensions


def write_logo(path: Path, width: int, height: int) -> Path:
    path.write_text(
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {width} {height}">'
        f'<rect width="{width}" height="{height}"/></svg>\n'
    )
    return path


class TestPlaceSponsors:
    def test_single_row_centred(self) -> None:
        layout = SponsorLayout(width=300, logo_height=60, gap=20, padding=10)
        sizes = [Dimensions(100, 100)] * 3
        positions, rows = place_sponsors(sizes, layout)
        assert rows == 1
        assert positions == [(40, 10), (120, 10), (200, 10)]

    def test_wraps_to_next_row(self) -> None:
        layout = SponsorLayout(width=200, logo_height=60, gap=20, padding=10)
        sizes = [Dimensions(100, 100), Dimensions(200, 100)]
        positions, rows = place_sponsors(sizes, layout)
        assert rows == 2
        assert positions == [(70, 10), (40, 90)]

    def test_oversized_logo_gets_own_row(self) -> None:
        layout = SponsorLayout(width=100, logo_height=60, gap=10, padding=0)
        sizes = [Dimensions(500, 100), Dimensions(50, 100)]
        positions, rows = place_sponsors(sizes, layout)
        assert rows == 2
        assert positions[0] == (0, 0)
        assert positions[1] == (35, 70)

    def test_empty(self) -> None:
        positions, rows = place_sponsors([], SponsorLayout())
        assert positions == []
        assert rows == 0


class TestBannerHeight:
    def test_no_rows(self) -> None:
        assert banner_height(0, SponsorLayout(padding=10)) == 20

    def test_two_rows(self) -> None:
        layout = SponsorLayout(logo_height=60, gap=20, padding=10)
        assert banner_height(2, layout) == 160


class TestComposeSponsors:
    def test_builds_document(self, tmp_path: Path) -> None:
        entries = [
            SponsorEntry(name="Square Co", url="https://square.example", logo=write_logo(tmp_path / "a.svg", 100, 100)),
            SponsorEntry(name="Wide", url="https://wide.example", logo=write_logo(tmp_path / "b.svg", 200, 100)),
        ]
        layout = SponsorLayout(width=200, logo_height=60, gap=20, padding=10)
        banner = compose_sponsors(entries, layout)

        assert banner.startswith('<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink"')
        assert 'width="200" height="160" viewBox="0 0 200 160"' in banner
        assert 'id="SquareCo"' in banner
        assert '<svg x="70" y="10" width="60" height="60" viewBox="0 0 100 100">' in banner
        assert '<svg x="40" y="90" width="120" height="60" viewBox="0 0 200 100">' in banner
        assert "<?xml" not in banner

    def test_no_sponsors(self) -> None:
        banner = compose_sponsors([], SponsorLayout(width=400, padding=5))
        assert 'width="400" height="10"' in banner

    def test_missing_logo(self, tmp_path: Path) -> None:
        entries = [SponsorEntry(name="Gone", url="https://gone.example", logo=tmp_path / "missing.svg")]
        with pytest.raises(FileNotFoundError):
            compose_sponsors(entries, SponsorLayout())

    def test_escapes_sponsor_attributes(self, tmp_path: Path) -> None:
        entries = [
            SponsorEntry(
                name="Tom & Jerry",
                url="https://x.example/?a=1&b=2",
                logo=write_logo(tmp_path / "a.svg", 100, 100),
            ),
        ]
        banner = compose_sponsors(entries, SponsorLayout())

        document = minidom.parseString(banner)
        link = document.getElementsByTagName("a")[0]
        assert link.getAttribute("xlink:href") == "https://x.example/?a=1&b=2"
        assert link.getAttribute("id") == "Tom&Jerry"

    def test_oversized_logo_stays_inside_padding(self, tmp_path: Path) -> None:
        entries = [SponsorEntry(name="Huge", url="u", logo=write_logo(tmp_path / "h.svg", 1000, 100))]
        banner = compose_sponsors(entries, SponsorLayout(width=200, logo_height=60, padding=10))
        assert '<svg x="10" y="10" width="600" height="60"' in banner
