#!/usr/bin/env python3
"""
Goodyear Tire Scraper CLI

Usage:
    python tire_main.py                        # Headless run, outputs in the current directory
    python tire_main.py --no-headless          # Visible browser
    python tire_main.py --debug -o out/        # Dump page HTML, write outputs to out/

Writes tire_data.json and tire_page.png, or scraping_error.log when the run fails.
"""

import sys
import logging
import argparse

from dotenv import load_dotenv

load_dotenv()

from scrapers.config import get_settings
from shared.constants import ERROR_LOG_FILE
from scrapers.goodyear_scraper import GoodyearTireScraper
from scrapers.tire_data import TireData


def print_result(data: TireData) -> None:
    """Print the scraped record in a formatted way."""
    print("\n" + "=" * 60)
    print(f"Name:     {data.product_info.name}")
    print(f"Product:  {data.product_info.base_product_id}")
    print(f"Price:    {data.product_info.price_range}")
    print(f"Rims:     {', '.join(data.rim_diameters) or 'N/A'}")
    print(f"Sizes:    {data.counts['tireSizes']}")
    for size in list(data.tire_sizes.values())[:5]:
        print(f"  - {size.size}  (pid {size.product_id or 'N/A'})")
    if len(data.tire_sizes) > 5:
        print(f"  ... {len(data.tire_sizes) - 5} more")
    print("=" * 60)


def main(argv: list[str] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Scrape price and size variants from the Goodyear tire product page"
    )
    parser.add_argument(
        "-o", "--output-dir",
        help="Directory for tire_data.json, tire_page.png and scraping_error.log"
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Save page HTML to file for inspection"
    )
    parser.add_argument(
        "--no-headless", action="store_true",
        help="Show browser window (not headless)"
    )

    args = parser.parse_args(argv)

    settings = get_settings()
    overrides = {}
    if args.output_dir:
        overrides["output_dir"] = args.output_dir
    if args.debug:
        overrides["debug"] = True
    if args.no_headless:
        overrides["headless"] = False
    if overrides:
        settings = settings.model_copy(update=overrides)

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s — %(message)s",
    )

    mode = "headless browser" if settings.headless else "visible browser"
    print(f"\nScraping {GoodyearTireScraper.url} in {mode} mode...")

    result = GoodyearTireScraper(settings=settings).run()

    if result["status"] != "success":
        print(f"\nERROR: {result['error']}")
        print(f"Details written to {settings.get_output_path() / ERROR_LOG_FILE}")
        return 1

    print_result(result["record"])
    print(f"\nResults saved to: {result['file']}")
    print(f"Screenshot saved to: {result['screenshot']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
