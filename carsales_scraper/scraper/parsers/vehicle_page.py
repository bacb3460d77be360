"""
Enterprise Car Sales vehicle detail page (VDP) parser (httpx+bs4).

Extracts the two fields that only the detail page carries: mileage, shown as
a label/value span pair, and the Kelley Blue Book suggested value.

Attributes:
    logger: Logger for registering parsing events.

Classes:
    VehiclePageParser: Parser for vehicle detail pages.
"""

from typing import Dict

import httpx
from bs4 import BeautifulSoup

from carsales_scraper.core.models import UNKNOWN
from carsales_scraper.scraper.base import BaseScraper
from carsales_scraper.utils.html import (
    element_text,
    extract_value_after_label,
    strip_non_numeric,
)
from carsales_scraper.utils.logger import get_logger

logger = get_logger(__name__)


class VehiclePageParser(BaseScraper):
    """
    Parser for extracting mileage and KBB value from a vehicle detail page.

    Attributes:
        label_selector (str): Selector matching both label and value spans.
        mileage_label (str): Label text preceding the mileage value.
        kbb_selector (str): Selector of the KBB suggested value cell.
    """

    def __init__(
        self,
        label_selector: str = "span.label, span.value",
        mileage_label: str = "Mileage:",
        kbb_selector: str = ".kbbsuggested-row .row-value",
    ):
        self.label_selector = label_selector
        self.mileage_label = mileage_label
        self.kbb_selector = kbb_selector

    def _extract_mileage(self, soup: BeautifulSoup) -> str:
        """Extract mileage text verbatim, e.g. "32,104 mi"."""
        mileage = extract_value_after_label(soup, self.label_selector, self.mileage_label)
        return mileage if mileage is not None else UNKNOWN

    def _extract_kbb_value(self, soup: BeautifulSoup) -> str:
        """Extract KBB value stripped to digits and decimal point."""
        kbb_tag = soup.select_one(self.kbb_selector)
        if kbb_tag is None:
            return UNKNOWN
        return strip_non_numeric(element_text(kbb_tag))

    def extract(self, html: str) -> Dict[str, str]:
        soup = self.get_soup(html)
        return {
            "mileage": self._extract_mileage(soup),
            "kbb_value": self._extract_kbb_value(soup),
        }

    def parse(self, url: str, client: httpx.Client) -> Dict[str, str]:
        """
        Fetch and parse a vehicle detail page.

        Args:
            url (str): Detail page URL from the vehicle API.
            client (httpx.Client): HTTP client for making requests.

        Returns:
            Dict[str, str]: "mileage" and "kbb_value", each "Unknown" when absent.

        Raises:
            ValueError: If url is empty.
            httpx.HTTPError: On transport failure or non-success status.
        """
        if not url:
            raise ValueError("Vehicle record has no detail page URL")
        logger.debug(f"Parsing detail page: {url}")
        resp = self.fetch(client, url)
        data = self.extract(resp.text)
        if data["mileage"] == UNKNOWN:
            logger.warning(f"Mileage not found on {url}")
        return data
