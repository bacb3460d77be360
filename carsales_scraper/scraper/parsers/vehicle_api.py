"""
Enterprise Car Sales vehicle API parser.

The site exposes a WordPress JSON endpoint returning one record per VIN with
year, make, model, trim, displayPrice and the detail page URL (vdp_url).

Classes:
    VehicleApiParser: Fetches and decodes the vehicle JSON record.
"""

import json
from typing import Any, Dict

import httpx

from carsales_scraper.config.settings import SITE_BASE_URL
from carsales_scraper.core.models import VehicleDetail
from carsales_scraper.scraper.base import BaseScraper
from carsales_scraper.utils.logger import get_logger

logger = get_logger(__name__)

TEXT_FIELDS = ("year", "make", "model", "trim")


def render_price(value: Any) -> str:
    """
    Render displayPrice as text without normalizing its type.

    Strings are kept as they are, numbers are written the way JSON writes
    them (18999, 18999.5) and a missing or null price becomes "".
    """
    # Strings are written without JSON quotes and null as "", unlike a plain
    # JSON dump of the field.
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value)


class VehicleApiParser(BaseScraper):
    """Parser for the per-VIN vehicle JSON API."""

    API_URL_TEMPLATE = "{base_url}/wp-json/jazel-auto5/v1/vehicle/{vin}"

    def __init__(self, base_url: str = SITE_BASE_URL):
        self.base_url = base_url.rstrip("/")

    def build_api_url(self, vin: str) -> str:
        return self.API_URL_TEMPLATE.format(base_url=self.base_url, vin=vin)

    @staticmethod
    def _extract_detail(vin: str, payload: Dict[str, Any]) -> VehicleDetail:
        """Map the API record to a VehicleDetail; non-string text fields become ""."""
        fields = {}
        for name in TEXT_FIELDS:
            value = payload.get(name)
            fields[name] = value if isinstance(value, str) else ""

        vdp_url = payload.get("vdp_url")
        return VehicleDetail(
            vin=vin,
            price=render_price(payload.get("displayPrice")),
            detail_page_url=vdp_url if isinstance(vdp_url, str) else "",
            **fields,
        )

    def parse(self, vin: str, client: httpx.Client) -> VehicleDetail:
        """
        Fetch the vehicle record for a VIN.

        Args:
            vin (str): Vehicle identification number.
            client (httpx.Client): HTTP client for making requests.

        Returns:
            VehicleDetail: Decoded record.

        Raises:
            httpx.HTTPError: On transport failure or non-success status.
            ValueError: If the body is not a JSON object.
        """
        resp = self.fetch(client, self.build_api_url(vin))
        payload = resp.json()
        if not isinstance(payload, dict):
            raise ValueError(
                f"Unexpected API response for {vin}: expected object, got {type(payload).__name__}"
            )
        return self._extract_detail(vin, payload)
