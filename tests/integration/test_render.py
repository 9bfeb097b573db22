"""Integration tests for PNG rendering and the mosaic-render command."""

import random

import pytest
from PIL import Image

from mosaic.core.constants import COLORS, UNKNOWN_COLOR
from mosaic.core.generator import MosaicGenerator
from mosaic.core.layout import Layout, PlacedTile
from mosaic.formats.layout_data import load_layout
from mosaic.rendering.pil_renderer import render_layout_to_image, tile_color, tile_pixel_box
from viewer.main import main, parse_size


class TestRenderer:
    """Tests for rendering layouts to PIL images."""

    def test_image_size_matches_grid(self, site):
        """Image size is the grid size times the cell size."""
        layout = MosaicGenerator(8, 5, site.fixed_tiles_for("home"), rng=random.Random(2)).generate_layout()

        img = render_layout_to_image(layout, cell_size=20)

        assert img.size == (160, 100)

    def test_tile_fill_colors(self):
        """Tiles are filled with their palette color, unknown colors with the default."""
        layout = Layout(
            2,
            1,
            "primary",
            [PlacedTile(0, 0, 1, 1, "a", 3), PlacedTile(0, 1, 1, 1, "b", 42)],
        )

        img = render_layout_to_image(layout, cell_size=10, gap=1)

        assert img.getpixel((5, 5)) == COLORS[3]
        assert img.getpixel((15, 5)) == UNKNOWN_COLOR

    def test_text_tiles_render(self, site):
        """Text is drawn inside fixed tiles that carry a label."""
        layout = MosaicGenerator(21, 16, site.fixed_tiles_for("home"), rng=random.Random(4)).generate_layout()

        with_text = render_layout_to_image(layout)
        without_text = render_layout_to_image(layout, render_text=False)

        identity = layout.fixed_tiles[0]
        box = tile_pixel_box(identity, 60, 1)
        assert with_text.crop(box).tobytes() != without_text.crop(box).tobytes()
        assert with_text.getpixel((box[0] + 1, box[1] + 1)) == tile_color(identity.color)


class TestRenderCommand:
    """Tests for the mosaic-render command line."""

    def test_parse_size(self):
        """WIDTHxHEIGHT parses to a tuple."""
        assert parse_size("20x15") == (20, 15)

    def test_writes_png_and_json(self, tmp_path, validator, capsys):
        """PNG and JSON outputs are written and the layout is valid."""
        png = tmp_path / "mosaic.png"
        layout_json = tmp_path / "layout.json"

        main([str(png), "--json", str(layout_json), "--grid", "12x8", "--seed", "3", "--cell-size", "10"])

        with Image.open(png) as img:
            assert img.size == (120, 80)
        layout = load_layout(layout_json)
        assert (layout.width, layout.height) == (12, 8)
        validator.validate(layout)
        assert "Generated 12x8 mosaic for page 'home'" in capsys.readouterr().out

    def test_same_seed_same_json(self, tmp_path):
        """The same seed writes identical JSON."""
        first = tmp_path / "a.json"
        second = tmp_path / "b.json"

        main(["--json", str(first), "--page", "projects", "--seed", "11"])
        main(["--json", str(second), "--page", "projects", "--seed", "11"])

        assert first.read_text() == second.read_text()

    def test_unknown_page_exits(self, tmp_path, capsys):
        """An unknown page prints an error and exits."""
        with pytest.raises(SystemExit):
            main(["--json", str(tmp_path / "x.json"), "--page", "contact"])

        assert "Error: Unknown page 'contact'" in capsys.readouterr().out

    def test_nothing_to_write_exits(self):
        """Without an output path the command exits."""
        with pytest.raises(SystemExit):
            main(["--seed", "1"])

    def test_missing_pages_file_exits(self, tmp_path):
        """A missing pages file exits."""
        with pytest.raises(SystemExit):
            main(["--json", str(tmp_path / "x.json"), "--pages", str(tmp_path / "missing.json")])

    def test_invalid_json_pages_file_exits(self, tmp_path, capsys):
        """A pages file that is not JSON prints an error and exits."""
        pages = tmp_path / "bad.json"
        pages.write_text("{not json")

        with pytest.raises(SystemExit):
            main(["--json", str(tmp_path / "x.json"), "--pages", str(pages)])

        assert "Error: Invalid JSON" in capsys.readouterr().out

    def test_null_static_tiles_exits(self, tmp_path, capsys):
        """A pages file with null static_tiles prints an error and exits."""
        pages = tmp_path / "site.json"
        pages.write_text('{"pages": {"home": []}, "static_tiles": null}')

        with pytest.raises(SystemExit):
            main(["--json", str(tmp_path / "x.json"), "--pages", str(pages)])

        assert "Error: 'static_tiles' must be a list" in capsys.readouterr().out

    def test_custom_pages_file(self, site, tmp_path):
        """A saved pages file drives generation for the chosen page."""
        pages = tmp_path / "site.json"
        site.save(pages)
        out = tmp_path / "layout.json"

        main(["--json", str(out), "--pages", str(pages), "--page", "about", "--attempts", "0"])

        layout = load_layout(out)
        assert all(tile.area == 1 for tile in layout.tiles if tile.kind != "fixed")
