"""
Main module for launching the Enterprise Car Sales scraper.

This module contains the application entry point: it registers signal
handlers, loads the search region, runs the crawl into the dated CSV file
and reports the result.

Attributes:
    logger: Logger for registering main module events.

Functions:
    signal_handler: Signal handler for proper shutdown.
    scrape_sites: Runs the crawl and returns the output file path.
    main: Main application startup function.
"""

import argparse
import signal
import sys
from pathlib import Path
from typing import Any, List, NoReturn, Optional

from carsales_scraper.config.settings import (
    CONFIG_FILE,
    MAX_PAGES_TO_PARSE,
    OUTPUT_DIR,
    load_search_region,
)
from carsales_scraper.core.output import CsvRecordSink, build_output_path
from carsales_scraper.scraper.enterprise import EnterpriseScraper
from carsales_scraper.utils.logger import get_logger

logger = get_logger(__name__)


def signal_handler(signum: int, frame: Any) -> NoReturn:
    """
    Signal handler for proper shutdown.

    Intercepts termination signals (SIGINT, SIGTERM) and exits with status
    128 + signum, so an interrupted run is never reported as successful.
    Rows already written stay in the output file; the run is not resumable.
    """
    logger.warning(f"Received signal {signum}. Shutting down, output is incomplete...")
    sys.exit(128 + signum)


def scrape_sites(
    config_path: Path = CONFIG_FILE,
    output_dir: Path = OUTPUT_DIR,
    max_pages: int = MAX_PAGES_TO_PARSE,
    **scraper_kwargs: Any,
) -> Path:
    """
    Load the search region, crawl it and write the CSV file.

    Args:
        config_path (Path): TOML file with the [search] table.
        output_dir (Path): Directory receiving rentals<MMDDYYYY>.csv.
        max_pages (int): Search page limit, 0 means no limit.
        **scraper_kwargs: Extra EnterpriseScraper arguments (delay, error_policy, ...).

    Returns:
        Path: Output file path.

    Raises:
        ConfigError: If the search region cannot be loaded.
        Exception: Any crawl or write error.
    """
    region = load_search_region(config_path)
    output_path = build_output_path(output_dir)
    client = scraper_kwargs.pop("client", None)

    scraper = EnterpriseScraper(region, max_pages=max_pages, **scraper_kwargs)
    with CsvRecordSink(output_path) as sink:
        scraper.run(sink, client=client)
    return output_path


def non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be 0 or greater, got {number}")
    return number


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="carsales-scraper",
        description="Scrape Enterprise Car Sales inventory into a dated CSV file.",
    )
    parser.add_argument("--config", type=Path, default=CONFIG_FILE, help="TOML config file")
    parser.add_argument("--output-dir", type=Path, default=OUTPUT_DIR, help="output directory")
    parser.add_argument(
        "--max-pages",
        type=non_negative_int,
        default=MAX_PAGES_TO_PARSE,
        help="stop after this many search pages (0 - no limit)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    """
    Main scraper startup function.

    Returns:
        None

    Raises:
        SystemExit: On any error calls sys.exit(1).
    """
    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    args = parse_args(argv)
    logger.info("Starting scraping...")
    try:
        output_path = scrape_sites(
            config_path=args.config,
            output_dir=args.output_dir,
            max_pages=args.max_pages,
        )
    except Exception as e:
        logger.critical(f"Critical error: {str(e)}")
        sys.exit(1)

    logger.info(f"Done. Data saved to {output_path}")


if __name__ == "__main__":
    main()
