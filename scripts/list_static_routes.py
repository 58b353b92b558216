#!/usr/bin/env python3
"""
Static Route Listing

Prints the static params the page-rendering layer must pre-build, as JSON.

Usage:
    python3 scripts/list_static_routes.py                       # {state, city} pairs
    python3 scripts/list_static_routes.py --route "hospital/[hospital]"
    python3 scripts/list_static_routes.py --all --output routes.json
"""

import argparse
import json
import logging
import os
import sys
from dataclasses import replace

# Add project root to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from sitegen.catalog import CatalogRegistry
from sitegen.common.config_loader import load_site_settings
from sitegen.common.log_config import setup_logging
from sitegen.errors import TopologyError
from sitegen.pipeline import options_from_settings
from sitegen.topology import (
    enumerate_city_params,
    enumerate_route_params,
    get_supported_routes,
)

logger = logging.getLogger(__name__)


def main():
    supported = get_supported_routes()

    parser = argparse.ArgumentParser(
        description="List static route params for pre-rendering"
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--route", "-r",
        choices=supported,
        help="Content route to enumerate (default: city params only)"
    )
    group.add_argument(
        "--all",
        action="store_true",
        help="Enumerate city params and every content route"
    )
    parser.add_argument(
        "--config-dir", "-c",
        help="Directory with the YAML catalogs (default: config/)"
    )
    parser.add_argument(
        "--include-funeral-homes",
        action="store_true",
        help="Pre-render funeral-home pages (must match generate_sitemap.py)"
    )
    parser.add_argument(
        "--include-venues",
        action="store_true",
        help="Pre-render venue pages (must match generate_sitemap.py)"
    )
    parser.add_argument(
        "--output", "-o",
        help="Write JSON to this file instead of stdout"
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
        options = options_from_settings(load_site_settings(args.config_dir))
        if args.include_funeral_homes or args.include_venues:
            options = replace(
                options,
                include_funeral_homes=options.include_funeral_homes or args.include_funeral_homes,
                include_venues=options.include_venues or args.include_venues,
            )

        registry = CatalogRegistry.from_config(args.config_dir)
        if args.all:
            payload = {"[state]/[city]": enumerate_city_params(registry)}
            for route in get_supported_routes(options):
                payload[route] = enumerate_route_params(registry, route, options)
        elif args.route:
            payload = enumerate_route_params(registry, args.route, options)
        else:
            payload = enumerate_city_params(registry)
    except (TopologyError, FileNotFoundError) as e:
        logger.error("Route enumeration failed: %s", e)
        sys.exit(1)

    text = json.dumps(payload, indent=2, ensure_ascii=False)
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(text + "\n")
        logger.info("Saved static routes to %s", args.output)
    else:
        print(text)


if __name__ == "__main__":
    main()
