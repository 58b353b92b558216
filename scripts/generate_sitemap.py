#!/usr/bin/env python3
"""
Sitemap Generation Script

Builds the full site topology from the YAML catalogs and writes
sitemap.xml (or a sitemap index plus parts) and robots.txt.

Usage:
    python3 scripts/generate_sitemap.py --output public
    python3 scripts/generate_sitemap.py --site-url https://staging.example.com --dry-run
    python3 scripts/generate_sitemap.py --config-dir config --include-venues
"""

import argparse
import logging
import os
import sys
from dataclasses import replace
from pathlib import Path

from dotenv import load_dotenv

# Add project root to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from sitegen.catalog import CatalogRegistry
from sitegen.common.config_loader import load_site_settings
from sitegen.common.constants import DEFAULT_SITE_URL, MAX_URLS_PER_SITEMAP
from sitegen.common.log_config import setup_logging
from sitegen.errors import TopologyError
from sitegen.pipeline import generate, options_from_settings
from sitegen.sitemap import write_sitemaps
from sitegen.topology import TopologyReport

logger = logging.getLogger(__name__)

load_dotenv(Path(__file__).parent.parent / ".env")


def main():
    parser = argparse.ArgumentParser(
        description="Generate sitemap.xml and robots.txt from the site catalogs"
    )
    parser.add_argument(
        "--output", "-o",
        default="public",
        help="Output directory (default: public)"
    )
    parser.add_argument(
        "--config-dir", "-c",
        help="Directory with the YAML catalogs (default: config/)"
    )
    parser.add_argument(
        "--site-url",
        help="Site origin for <loc> (default: $SITE_URL, then site.yaml)"
    )
    parser.add_argument(
        "--max-urls",
        type=int,
        default=MAX_URLS_PER_SITEMAP,
        help=f"URLs per sitemap file before splitting (default: {MAX_URLS_PER_SITEMAP})"
    )
    parser.add_argument(
        "--include-funeral-homes",
        action="store_true",
        help="Advertise funeral-home pages"
    )
    parser.add_argument(
        "--include-venues",
        action="store_true",
        help="Advertise venue pages"
    )
    parser.add_argument(
        "--no-robots",
        action="store_true",
        help="Do not write robots.txt"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Build and report, write nothing"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress info messages, show only warnings and errors"
    )

    args = parser.parse_args()
    setup_logging(verbose=args.verbose, quiet=args.quiet)

    try:
        settings = load_site_settings(args.config_dir)
        site_url = (
            args.site_url
            or os.environ.get("SITE_URL")
            or settings.get("site_url")
            or DEFAULT_SITE_URL
        )
        sitemap_filename = settings.get("sitemap_filename", "sitemap.xml")

        options = options_from_settings(settings)
        if args.include_funeral_homes or args.include_venues:
            options = replace(
                options,
                include_funeral_homes=options.include_funeral_homes or args.include_funeral_homes,
                include_venues=options.include_venues or args.include_venues,
            )

        print("=" * 60)
        print("Sitemap Generation")
        print("=" * 60)
        print(f"  Site:     {site_url}")
        print(f"  Output:   {args.output if not args.dry_run else '(dry run)'}")

        registry = CatalogRegistry.from_config(args.config_dir)
        result = generate(registry, site_url=site_url, options=options)
    except (TopologyError, FileNotFoundError) as e:
        logger.error("Sitemap build failed: %s", e)
        sys.exit(1)

    TopologyReport.from_document(result.document).print_final_report()

    if args.dry_run:
        return

    written = write_sitemaps(
        result.document,
        args.output,
        sitemap_filename=sitemap_filename,
        max_urls=args.max_urls,
        write_robots=not args.no_robots,
    )
    for path in written:
        print(f"  Wrote: {path}")


if __name__ == "__main__":
    main()
