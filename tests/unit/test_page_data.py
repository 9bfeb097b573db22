"""Unit tests for page definitions and JSON loading."""

import pytest

from mosaic.core.fixed_tiles import TileRect
from mosaic.formats.page_data import (
    DEFAULT_SITE_DATA,
    IDENTITY_LABEL,
    PageDataError,
    SiteData,
    fixed_tile_from_dict,
    fixed_tile_to_dict,
)


class TestFixedTileDict:
    """Tests for fixed tile dictionary conversion."""

    def test_minimal_tile(self):
        """Optional fields default to unset."""
        tile = fixed_tile_from_dict({"row": -1, "col": 2, "width": 3, "height": 1, "color": 10})

        assert tile.primary == TileRect(-1, 2, 3, 1)
        assert tile.alternate is None
        assert tile.text is None
        assert tile.essential is False

    def test_alternate_without_size_inherits(self):
        """An alternate without width/height uses the primary size."""
        tile = fixed_tile_from_dict(
            {
                "row": 1, "col": 6, "width": 5, "height": 1, "color": 10,
                "alternate": {"row": 3, "col": 1},
            }
        )

        assert tile.alternate.width is None
        assert tile.alternate_rect() == TileRect(3, 1, 5, 1)

    def test_missing_key_raises(self):
        """A missing required key names the key."""
        with pytest.raises(PageDataError, match="missing required key 'color'"):
            fixed_tile_from_dict({"row": 1, "col": 1, "width": 1, "height": 1})

    def test_invalid_size_raises(self):
        """A zero width is rejected."""
        with pytest.raises(PageDataError, match="Invalid fixed tile"):
            fixed_tile_from_dict({"row": 1, "col": 1, "width": 0, "height": 1, "color": 1})

    def test_to_dict_omits_unset_fields(self):
        """Unset optional fields are left out of the dictionary."""
        tile = fixed_tile_from_dict({"row": 0, "col": 0, "width": 1, "height": 1, "color": 3})

        assert fixed_tile_to_dict(tile) == {
            "row": 0, "col": 0, "width": 1, "height": 1, "color": 3
        }


class TestSiteData:
    """Tests for SiteData pages, navigation and persistence."""

    def test_default_site_pages(self, site):
        """Built-in site has three pages and label navigation."""
        assert site.page_names == ["home", "about", "projects"]
        assert site.home_page == "home"
        assert site.page_for_label("About") == "about"
        assert site.page_for_label(IDENTITY_LABEL) == "home"
        assert site.page_for_label("Nothing") is None
        assert site.page_for_label(None) is None

    def test_static_tiles_come_first(self, site):
        """Static tiles precede the page's own tiles."""
        tiles = site.fixed_tiles_for("about")

        assert tiles[0].text == IDENTITY_LABEL
        assert tiles[0].essential
        assert len(tiles) == 3

    def test_unknown_page(self, site):
        """Asking for an undefined page raises PageDataError."""
        with pytest.raises(PageDataError, match="Unknown page"):
            site.fixed_tiles_for("contact")

    def test_navigation_to_unknown_page_rejected(self):
        """Navigation targets must be defined pages."""
        with pytest.raises(PageDataError, match="unknown page 'contact'"):
            SiteData(pages={"home": []}, navigation={"Contact": "contact"})

    def test_unknown_home_page_rejected(self):
        """The home page must be a defined page."""
        with pytest.raises(PageDataError, match="Home page"):
            SiteData(pages={"index": []}, home_page="home")

    def test_from_dict_requires_pages(self):
        """Site data without pages is rejected."""
        with pytest.raises(PageDataError, match="at least one page"):
            SiteData.from_dict({"static_tiles": []})

    def test_to_dict_matches_source(self, site):
        """Default site converts back to its source dictionary."""
        assert site.to_dict() == DEFAULT_SITE_DATA

    def test_save_and_load(self, site, tmp_path):
        """Saved site data loads back unchanged and records its path."""
        path = tmp_path / "pages" / "site.json"

        site.save(path)
        loaded = SiteData.load(path)

        assert loaded.filepath == path
        assert loaded.to_dict() == site.to_dict()
        assert loaded.fixed_tiles_for("projects") == site.fixed_tiles_for("projects")


class TestMalformedSiteData:
    """Tests that malformed page definitions raise PageDataError."""

    def test_invalid_json_file(self, tmp_path):
        """A file that is not JSON raises PageDataError naming the file."""
        path = tmp_path / "bad.json"
        path.write_text("{not json")

        with pytest.raises(PageDataError, match="Invalid JSON in .*bad.json"):
            SiteData.load(path)

    def test_top_level_not_object(self):
        """A JSON list at the top level is rejected."""
        with pytest.raises(PageDataError, match="JSON object"):
            SiteData.from_dict([])

    @pytest.mark.parametrize("static_tiles", [None, {"row": 0}, "tiles"])
    def test_static_tiles_not_list(self, static_tiles):
        """static_tiles must be a list."""
        with pytest.raises(PageDataError, match="'static_tiles' must be a list"):
            SiteData.from_dict({"pages": {"home": []}, "static_tiles": static_tiles})

    @pytest.mark.parametrize("tiles", [None, 5, {"row": 0}])
    def test_page_not_list(self, tiles):
        """Every page value must be a list of tiles."""
        with pytest.raises(PageDataError, match="Page 'home' must be a list"):
            SiteData.from_dict({"pages": {"home": tiles}})

    def test_page_tile_not_dict(self):
        """A tile entry that is not an object is rejected."""
        with pytest.raises(PageDataError):
            SiteData.from_dict({"pages": {"home": [5]}})

    @pytest.mark.parametrize("navigation", [["ab"], "About", None])
    def test_navigation_not_dict(self, navigation):
        """navigation must be an object."""
        with pytest.raises(PageDataError, match="'navigation' must map"):
            SiteData.from_dict({"pages": {"home": []}, "navigation": navigation})

    def test_navigation_target_not_string(self):
        """Navigation targets must be page name strings."""
        with pytest.raises(PageDataError, match="'navigation' must map"):
            SiteData.from_dict({"pages": {"home": []}, "navigation": {"Home": 1}})

    @pytest.mark.parametrize("home_page", [None, 1, ["home"]])
    def test_home_page_not_string(self, home_page):
        """home_page must be a page name string."""
        with pytest.raises(PageDataError, match="'home_page' must be a page name"):
            SiteData.from_dict({"pages": {"home": []}, "home_page": home_page})
