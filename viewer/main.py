"""
Mosaic Grid - Viewer Main

Command-line entry point that generates a mosaic for a viewport and page and
writes it as a PNG preview and/or a JSON layout.

Usage:
    mosaic-render output.png [--viewport 1200x900] [--page about] [--seed 42]
    mosaic-render --json layout.json --grid 20x15
"""

import argparse
import logging
import random
import sys
from pathlib import Path

from mosaic.core.constants import MAX_PLACEMENT_ATTEMPTS, TILE_SIZE
from mosaic.core.generator import GeneratorConfig, InvalidGridSpecError
from mosaic.core.validation import InvalidLayoutError, LayoutValidator
from mosaic.formats.layout_data import save_layout
from mosaic.formats.page_data import PageDataError, SiteData, default_site

from .navigation import NavigationState
from .view_state import ViewState

DEFAULT_VIEWPORT = (1200, 900)


def parse_size(value: str) -> tuple[int, int]:
    """Parse a WIDTHxHEIGHT argument."""
    try:
        width, height = value.lower().split("x")
        return int(width), int(height)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected WIDTHxHEIGHT, got '{value}'")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a tile mosaic and render it as PNG and/or JSON"
    )
    parser.add_argument("output", nargs="?", help="Output PNG file (optional)")
    parser.add_argument("--json", help="Also write the layout as JSON to this path")

    size = parser.add_mutually_exclusive_group()
    size.add_argument(
        "--viewport",
        type=parse_size,
        help="Viewport size in pixels, e.g. 1200x900 (default: 1200x900)",
    )
    size.add_argument(
        "--grid",
        type=parse_size,
        help="Grid size in cells, e.g. 20x15 (overrides --viewport)",
    )

    parser.add_argument(
        "--cell-size",
        type=int,
        default=TILE_SIZE,
        help=f"Cell size in pixels (default: {TILE_SIZE})",
    )
    parser.add_argument("--pages", help="Page definitions JSON (default: built-in site)")
    parser.add_argument("--page", help="Page to render (default: the site's home page)")
    parser.add_argument("--seed", type=int, help="Random seed for a reproducible layout")
    parser.add_argument(
        "--attempts",
        type=int,
        default=MAX_PLACEMENT_ATTEMPTS,
        help=f"Random placement attempts (default: {MAX_PLACEMENT_ATTEMPTS})",
    )
    parser.add_argument("--no-text", action="store_true", help="Do not draw tile text")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log placement decisions"
    )
    return parser


def load_site(pages_path: str | None) -> SiteData:
    """Load page definitions, exiting with an error message on failure."""
    if pages_path is None:
        return default_site()

    path = Path(pages_path)
    if not path.is_file():
        print(f"Error: Page definitions file not found: {pages_path}")
        sys.exit(1)

    try:
        return SiteData.load(path)
    except PageDataError as e:
        print(f"Error: {e}")
        sys.exit(1)


def main(argv: list[str] | None = None):
    """Main entry point for the renderer."""
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if not args.output and not args.json:
        print("Error: Nothing to write; give an output PNG and/or --json")
        sys.exit(1)

    site = load_site(args.pages)

    try:
        if args.grid:
            grid_width, grid_height = args.grid
            # Smallest viewport that maps to the requested grid
            view_state = ViewState(
                (grid_width - 1) * args.cell_size,
                (grid_height - 1) * args.cell_size,
                args.cell_size,
            )
        else:
            viewport = args.viewport or DEFAULT_VIEWPORT
            view_state = ViewState(viewport[0], viewport[1], args.cell_size)

        config = GeneratorConfig(max_attempts=args.attempts)
        navigation = NavigationState(
            view_state, site, config=config, rng=random.Random(args.seed)
        )
        if args.page:
            navigation.current_page = args.page
            navigation.fixed_tiles()

        layout = navigation.generate()
        LayoutValidator().validate(layout)
    except (InvalidGridSpecError, PageDataError, InvalidLayoutError, ValueError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    print(
        f"Generated {layout.width}x{layout.height} mosaic for page '{navigation.current_page}' "
        f"({len(layout.tiles)} tiles, {len(layout.fixed_tiles)} fixed, strategy: {layout.strategy})"
    )

    if args.json:
        save_layout(layout, args.json)
        print(f"Saved: {args.json}")

    if args.output:
        from mosaic.rendering.pil_renderer import render_layout_to_image

        img = render_layout_to_image(
            layout, cell_size=args.cell_size, render_text=not args.no_text
        )
        img.save(args.output)
        print(f"Saved: {args.output} ({img.width}x{img.height})")


if __name__ == "__main__":
    main()
