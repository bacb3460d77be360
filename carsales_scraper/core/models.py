"""
Data models for the scraped inventory.

This module contains the plain dataclasses passed between the crawler, the
enricher and the CSV sink. The main model is VehicleRecord, which represents
one output row.

Attributes:
    UNKNOWN (str): Placeholder written when mileage or valuation is not found.
    CSV_HEADER (Tuple[str, ...]): Output column names in their fixed order.

Classes:
    SearchRegion: Postal code and radius used for the listing search.
    VehicleDetail: Fields taken from the vehicle JSON API record.
    VehicleRecord: Final enriched vehicle, one CSV row.
"""

from dataclasses import dataclass
from typing import Tuple

UNKNOWN = "Unknown"

CSV_HEADER: Tuple[str, ...] = (
    "Site",
    "VIN",
    "Year",
    "Make",
    "Model",
    "Trim",
    "Price",
    "Mileage",
    "KBB",
    "URL",
)


@dataclass(frozen=True)
class SearchRegion:
    """
    Search region loaded once at startup.

    Attributes:
        postal_code (str): ZIP code the search is centered on.
        radius_miles (int): Search radius in miles.
    """

    postal_code: str
    radius_miles: int


@dataclass(frozen=True)
class VehicleDetail:
    """
    Vehicle data from the JSON API.

    Attributes:
        vin (str): Vehicle identification number the record was requested for.
        year (str): Model year, empty if missing.
        make (str): Manufacturer, empty if missing.
        model (str): Model name, empty if missing.
        trim (str): Trim level, empty if missing.
        price (str): displayPrice rendered as text.
        detail_page_url (str): Vehicle detail page (VDP) URL, empty if missing.
    """

    vin: str
    year: str = ""
    make: str = ""
    model: str = ""
    trim: str = ""
    price: str = ""
    detail_page_url: str = ""


@dataclass(frozen=True)
class VehicleRecord:
    """
    Enriched vehicle written as one CSV row.

    Attributes:
        site (str): Source site name.
        vin (str): Vehicle identification number.
        year (str): Model year.
        make (str): Manufacturer.
        model (str): Model name.
        trim (str): Trim level.
        price (str): Listed price.
        mileage (str): Mileage text from the detail page, verbatim.
        kbb_value (str): KBB valuation reduced to digits and decimal point.
        url (str): Detail page URL.
    """

    site: str
    vin: str
    year: str
    make: str
    model: str
    trim: str
    price: str
    mileage: str = UNKNOWN
    kbb_value: str = UNKNOWN
    url: str = ""

    @classmethod
    def from_detail(
        cls,
        site: str,
        detail: VehicleDetail,
        mileage: str = UNKNOWN,
        kbb_value: str = UNKNOWN,
    ) -> "VehicleRecord":
        return cls(
            site=site,
            vin=detail.vin,
            year=detail.year,
            make=detail.make,
            model=detail.model,
            trim=detail.trim,
            price=detail.price,
            mileage=mileage,
            kbb_value=kbb_value,
            url=detail.detail_page_url,
        )

    def as_row(self) -> Tuple[str, ...]:
        """Return the record fields in CSV_HEADER order."""
        return (
            self.site,
            self.vin,
            self.year,
            self.make,
            self.model,
            self.trim,
            self.price,
            self.mileage,
            self.kbb_value,
            self.url,
        )

    def __repr__(self):
        return f"<VehicleRecord(vin='{self.vin}', title='{self.year} {self.make} {self.model}')>"
