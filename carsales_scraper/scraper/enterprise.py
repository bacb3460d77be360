"""
Main scraper class for enterprisecarsales.com (httpx+bs4).

This module implements the crawl loop for the Enterprise Car Sales website.
Search pages are walked from page 1 until a page lists no vehicles; each VIN
found is enriched through the vehicle JSON API and the vehicle detail page,
and written to the record sink as soon as it is complete. Everything runs
sequentially on one shared httpx client, with a fixed pause before every
vehicle request.

Attributes:
    logger: Logger for registering scraping events.

Classes:
    EnterpriseScraper: Crawls one search region and writes one row per vehicle.

Functions:
    build_client: Creates the shared httpx client.
"""

import time
from contextlib import contextmanager
from typing import Callable, Dict, Iterator, Optional, Set

import httpx
from fake_useragent import UserAgent

from carsales_scraper.config.settings import (
    DEDUPLICATE_VINS,
    ITEM_ERROR_POLICIES,
    ITEM_ERROR_POLICY,
    MAX_PAGES_TO_PARSE,
    REQUEST_DELAY,
    REQUEST_TIMEOUT,
    SITE_BASE_URL,
    SITE_NAME,
)
from carsales_scraper.core.models import SearchRegion, VehicleRecord
from carsales_scraper.core.output import CsvRecordSink
from carsales_scraper.scraper.parsers.search_page import SearchPageParser
from carsales_scraper.scraper.parsers.vehicle_api import VehicleApiParser
from carsales_scraper.scraper.parsers.vehicle_page import VehiclePageParser
from carsales_scraper.utils.logger import get_logger

logger = get_logger(__name__)


def build_client(timeout: float = REQUEST_TIMEOUT, **kwargs) -> httpx.Client:
    """Create the httpx client shared by every request of a run."""
    return httpx.Client(
        headers={"User-Agent": UserAgent().random},
        timeout=timeout,
        follow_redirects=True,
        **kwargs,
    )


class EnterpriseScraper:
    """
    Scraper for enterprisecarsales.com.

    Uses SearchPageParser to walk the search pages, VehicleApiParser and
    VehiclePageParser to enrich each VIN, and writes VehicleRecord rows
    to a CsvRecordSink.

    Attributes:
        region (SearchRegion): Postal code and radius to search.
        delay (float): Seconds to sleep before each vehicle request.
        max_pages (int): Page limit, 0 means no limit.
        error_policy (str): "fail" or "skip", applied to vehicle errors.
        deduplicate (bool): Skip VINs already seen during this run.
        pages_processed (int): Search pages requested so far.
    """

    def __init__(
        self,
        region: SearchRegion,
        base_url: str = SITE_BASE_URL,
        delay: float = REQUEST_DELAY,
        max_pages: int = MAX_PAGES_TO_PARSE,
        error_policy: str = ITEM_ERROR_POLICY,
        deduplicate: bool = DEDUPLICATE_VINS,
        sleep: Callable[[float], None] = time.sleep,
    ):
        if error_policy not in ITEM_ERROR_POLICIES:
            raise ValueError(
                f"Unknown error policy {error_policy!r}, expected one of {ITEM_ERROR_POLICIES}"
            )
        if max_pages < 0:
            raise ValueError(f"max_pages must be 0 or greater, got {max_pages}")
        self.region = region
        self.delay = delay
        self.max_pages = max_pages
        self.error_policy = error_policy
        self.deduplicate = deduplicate
        self.search_parser = SearchPageParser(base_url)
        self.api_parser = VehicleApiParser(base_url)
        self.page_parser = VehiclePageParser()
        self.pages_processed = 0
        self._sleep = sleep

    @contextmanager
    def _error_handler(self, operation: str, target: str):
        """
        Context manager for handling errors.

        Logs the exception with the operation it interrupted, then re-raises it.

        Args:
            operation (str): Name of the operation for logging.
            target (str): VIN or URL associated with the operation.
        """
        try:
            yield
        except Exception as e:
            logger.error(f"Error during {operation} ({target}): {str(e)}", exc_info=True)
            raise

    def _pause(self) -> None:
        if self.delay > 0:
            self._sleep(self.delay)

    def iter_vins(self, client: httpx.Client) -> Iterator[str]:
        """
        Yield VINs page by page, starting from page 1.

        Stops after the first page listing no vehicles, or once max_pages
        pages were requested. The next page is only requested after every VIN
        of the current page has been consumed.

        Args:
            client (httpx.Client): HTTP client for making requests.

        Yields:
            str: VIN, in page order.

        Raises:
            httpx.HTTPError: If a search page cannot be fetched.
        """
        page = 1
        while True:
            if self.max_pages and self.pages_processed >= self.max_pages:
                logger.warning(f"Reached limit of {self.max_pages} pages.")
                return

            url = self.search_parser.build_page_url(self.region, page)
            with self._error_handler("parsing search page", url):
                vins = self.search_parser.parse(self.region, page, client)
            self.pages_processed += 1

            if not vins:
                logger.info(f"No vehicles on page {page}. Reached end of list.")
                return

            for vin in vins:
                if not vin:
                    logger.warning(f"Skipping vehicle card without VIN on page {page}")
                    continue
                yield vin
            page += 1

    def enrich(self, vin: str, client: httpx.Client) -> VehicleRecord:
        """
        Build the full record for one VIN.

        Pauses, fetches the vehicle JSON record, pauses again, then fetches
        the detail page for mileage and KBB value.

        Args:
            vin (str): Vehicle identification number.
            client (httpx.Client): HTTP client for making requests.

        Returns:
            VehicleRecord: Enriched vehicle.

        Raises:
            httpx.HTTPError: If either request fails.
            ValueError: On a malformed API record or a missing detail page URL.
        """
        self._pause()
        with self._error_handler("fetching vehicle record", vin):
            detail = self.api_parser.parse(vin, client)

        self._pause()
        with self._error_handler("parsing detail page", detail.detail_page_url or vin):
            page_data = self.page_parser.parse(detail.detail_page_url, client)

        return VehicleRecord.from_detail(SITE_NAME, detail, **page_data)

    def run(self, sink: CsvRecordSink, client: Optional[httpx.Client] = None) -> Dict[str, int]:
        """
        Crawl the region and write one row per vehicle.

        Args:
            sink (CsvRecordSink): Open sink receiving the rows.
            client (Optional[httpx.Client]): HTTP client for making requests.
                If not specified, creates new client that closes after use.

        Returns:
            Dict[str, int]: Statistics with keys:
                - pages (int): Search pages requested
                - saved (int): Rows written
                - skipped (int): Vehicles skipped after an error
                - duplicates (int): Repeated VINs that were not written again

        Raises:
            Exception: Any error when error_policy is "fail", and search
                page errors regardless of the policy.
        """
        logger.info(
            f"Starting {SITE_NAME} scraper. ZIP: {self.region.postal_code}, "
            f"distance: {self.region.radius_miles}"
        )
        saved_count = skipped_count = duplicate_count = 0
        seen: Set[str] = set()

        close_client = False
        if client is None:
            client = build_client()
            close_client = True
        try:
            for vin in self.iter_vins(client):
                if self.deduplicate:
                    if vin in seen:
                        duplicate_count += 1
                        logger.info(f"Skipping duplicate VIN {vin}")
                        continue
                    seen.add(vin)

                try:
                    record = self.enrich(vin, client)
                except Exception:
                    if self.error_policy == "fail":
                        raise
                    skipped_count += 1
                    logger.warning(f"Skipping vehicle {vin} after error")
                    continue

                sink.write(record)
                saved_count += 1
                logger.info(
                    f"Added: {record.year} {record.make} {record.model} {record.trim} "
                    f"- ${record.price} - mileage: {record.mileage}"
                )
        finally:
            if close_client:
                client.close()

        logger.info(
            f"Scraping completed. Pages processed: {self.pages_processed}. "
            f"Saved: {saved_count}, skipped: {skipped_count}, duplicates: {duplicate_count}"
        )
        return {
            "pages": self.pages_processed,
            "saved": saved_count,
            "skipped": skipped_count,
            "duplicates": duplicate_count,
        }
