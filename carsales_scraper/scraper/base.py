"""
Base parser class.

This module provides an abstract base class for all parsers in the project.
Defines common interface and basic functionality that should be implemented
by all specialized parsers.

Attributes:
    logger: Logger for registering parsing events.

Classes:
    BaseScraper: Abstract base class for all parsers.
"""

from abc import ABC, abstractmethod
from typing import Any

import httpx
from bs4 import BeautifulSoup

from carsales_scraper.utils.logger import get_logger

logger = get_logger(__name__)


class BaseScraper(ABC):
    """
    Base class for parsers.

    Defines common interface and basic functionality for all parsers.
    Inheritors must implement the parse() method to fetch and extract data
    from specific types of pages.

    Methods:
        get_soup: Creates BeautifulSoup object from HTML code.
        fetch: Issues a GET request and fails on non-success status.
        parse: Abstract method for parsing data, must be implemented in inheritors.
    """

    @staticmethod
    def get_soup(html: str) -> BeautifulSoup:
        """
        Create BeautifulSoup object from HTML.

        Uses lxml parser for better performance and reliability.

        Args:
            html (str): Page HTML code for parsing.

        Returns:
            BeautifulSoup: BeautifulSoup object for convenient HTML parsing.

        Examples:
            >>> html = "<html><body><h1>Title</h1></body></html>"
            >>> soup = BaseScraper.get_soup(html)
            >>> soup.h1.text
            'Title'
        """
        return BeautifulSoup(html, "lxml")

    @staticmethod
    def fetch(client: httpx.Client, url: str) -> httpx.Response:
        """
        GET a URL through the shared client.

        Args:
            client (httpx.Client): HTTP client holding the connection pool.
            url (str): Absolute URL to request.

        Returns:
            httpx.Response: Successful response.

        Raises:
            httpx.HTTPStatusError: On a 4xx/5xx response.
            httpx.HTTPError: On transport errors. Nothing is retried.
        """
        logger.debug(f"GET {url}")
        resp = client.get(url)
        resp.raise_for_status()
        return resp

    @abstractmethod
    def parse(self, *args, **kwargs) -> Any:
        """
        Abstract parsing method.

        Must be implemented in child classes to extract
        data from specific types of pages.

        Raises:
            NotImplementedError: If method is not overridden in child class.
        """
        pass
