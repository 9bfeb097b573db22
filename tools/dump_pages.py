#!/usr/bin/env python3
"""
Mosaic Grid - Page Definitions Dumper

Writes the built-in site's page definitions as an editable JSON file, or
checks and summarizes an existing one.
"""

import argparse
import sys
from pathlib import Path

from mosaic.formats.page_data import PageDataError, SiteData, default_site


def describe_site(site: SiteData):
    """Print a summary of each page's fixed tiles."""
    print(f"Home page: {site.home_page}")
    print(f"Static tiles: {len(site.static_tiles)}")

    for page in site.page_names:
        tiles = site.fixed_tiles_for(page)
        essential = sum(1 for tile in tiles if tile.essential)
        print(f"  {page}: {len(tiles)} fixed tile(s), {essential} essential")

    for label, page in site.navigation.items():
        print(f"  '{label}' -> {page}")


def main():
    parser = argparse.ArgumentParser(
        description="Dump or check mosaic page definitions"
    )
    parser.add_argument(
        "output", nargs="?", help="Write the built-in page definitions to this JSON file"
    )
    parser.add_argument("--check", help="Load and summarize an existing page definitions file")

    args = parser.parse_args()

    if args.check:
        path = Path(args.check)
        if not path.exists():
            print(f"Error: {args.check} not found")
            sys.exit(1)
        try:
            site = SiteData.load(path)
        except PageDataError as e:
            print(f"Error: {e}")
            sys.exit(1)
        describe_site(site)
        return

    if not args.output:
        parser.print_help()
        sys.exit(1)

    site = default_site()
    site.save(args.output)
    describe_site(site)
    print(f"Saved: {args.output}")


if __name__ == "__main__":
    main()
