"""
Enterprise Car Sales search page parser (httpx+bs4).

This module implements a parser for extracting vehicle VINs from the
paginated search result pages of enterprisecarsales.com. Every vehicle card
on a result page carries its VIN in a ``data-auto5-vehicle-vin`` attribute.

Attributes:
    logger: Logger for registering parsing events.

Classes:
    SearchPageParser: Parser for Enterprise Car Sales search pages.
"""

from typing import List

import httpx
from bs4 import BeautifulSoup

from carsales_scraper.config.settings import SITE_BASE_URL
from carsales_scraper.core.models import SearchRegion
from carsales_scraper.scraper.base import BaseScraper
from carsales_scraper.utils.logger import get_logger

logger = get_logger(__name__)


class SearchPageParser(BaseScraper):
    """
    Parser for extracting VINs from an Enterprise Car Sales search page.

    Attributes:
        base_url (str): Site base URL.
    """

    VIN_ATTR = "data-auto5-vehicle-vin"
    VIN_SELECTOR = f"div[{VIN_ATTR}]"
    PAGE_URL_TEMPLATE = (
        "{base_url}/list/buy-a-car/distance---{distance}/srp-page-{page}/?zipcode={zip}"
    )

    def __init__(self, base_url: str = SITE_BASE_URL):
        self.base_url = base_url.rstrip("/")

    def build_page_url(self, region: SearchRegion, page: int) -> str:
        """
        Build the search page URL for a region and 1-based page number.

        Examples:
            >>> SearchPageParser().build_page_url(SearchRegion("60601", 50), 2)
            'https://www.enterprisecarsales.com/list/buy-a-car/distance---50/srp-page-2/?zipcode=60601'
        """
        return self.PAGE_URL_TEMPLATE.format(
            base_url=self.base_url,
            distance=region.radius_miles,
            page=page,
            zip=region.postal_code,
        )

    def _extract_vins(self, soup: BeautifulSoup) -> List[str]:
        """
        Extract VINs of all vehicle cards, in page order.

        A card with an empty VIN attribute still counts as a listed vehicle,
        so it is returned as "" and keeps the page from ending the crawl.
        """
        return [node.get(self.VIN_ATTR, "") for node in soup.select(self.VIN_SELECTOR)]

    def parse(self, region: SearchRegion, page: int, client: httpx.Client) -> List[str]:
        """
        Fetch and parse a single search page.

        Args:
            region (SearchRegion): Search region.
            page (int): 1-based page number.
            client (httpx.Client): HTTP client for making requests.

        Returns:
            List[str]: VINs found on the page. An empty list marks the end of results.

        Raises:
            httpx.HTTPError: On transport failure or non-success status.
        """
        url = self.build_page_url(region, page)
        logger.info(f"Parsing search page {page}: {url}")
        resp = self.fetch(client, url)
        vins = self._extract_vins(self.get_soup(resp.text))
        logger.info(f"Found {len(vins)} vehicles on page {page}")
        return vins
