import httpx
import pytest

from carsales_scraper.core.models import SearchRegion, UNKNOWN
from carsales_scraper.scraper.parsers.search_page import SearchPageParser
from carsales_scraper.scraper.parsers.vehicle_api import VehicleApiParser, render_price
from carsales_scraper.scraper.parsers.vehicle_page import VehiclePageParser
from tests.fakes import detail_html, listing_html


def test_search_page_url():
    url = SearchPageParser().build_page_url(SearchRegion("60601", 50), 3)
    assert url == (
        "https://www.enterprisecarsales.com/list/buy-a-car/distance---50/srp-page-3/?zipcode=60601"
    )


def test_search_page_extracts_vins_in_order():
    parser = SearchPageParser()
    soup = parser.get_soup(listing_html(["VIN1", "VIN2", "VIN3"]))
    assert parser._extract_vins(soup) == ["VIN1", "VIN2", "VIN3"]


def test_search_page_keeps_cards_with_empty_vin():
    parser = SearchPageParser()
    soup = parser.get_soup('<div data-auto5-vehicle-vin=""></div><div data-auto5-vehicle-vin="X1"></div>')
    assert parser._extract_vins(soup) == ["", "X1"]


def test_search_page_raises_on_error_status():
    client = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(500)))
    with pytest.raises(httpx.HTTPStatusError):
        SearchPageParser().parse(SearchRegion("60601", 50), 1, client)


def test_api_record_fields():
    detail = VehicleApiParser._extract_detail(
        "VIN1",
        {
            "year": "2020",
            "make": "Honda",
            "model": "Civic",
            "trim": "LX",
            "displayPrice": "17,500",
            "vdp_url": "https://example.test/vdp/VIN1/",
        },
    )
    assert detail.vin == "VIN1"
    assert (detail.year, detail.make, detail.model, detail.trim) == ("2020", "Honda", "Civic", "LX")
    assert detail.price == "17,500"
    assert detail.detail_page_url == "https://example.test/vdp/VIN1/"


def test_api_record_missing_or_non_string_fields_become_empty():
    detail = VehicleApiParser._extract_detail("VIN1", {"year": 2020, "make": None})
    assert (detail.year, detail.make, detail.model, detail.trim) == ("", "", "", "")
    assert detail.price == ""
    assert detail.detail_page_url == ""


@pytest.mark.parametrize(
    "value, expected",
    [(21999, "21999"), (21999.5, "21999.5"), ("$21,999", "$21,999"), (None, "")],
)
def test_render_price(value, expected):
    assert render_price(value) == expected


def test_api_url():
    assert VehicleApiParser().build_api_url("VIN1") == (
        "https://www.enterprisecarsales.com/wp-json/jazel-auto5/v1/vehicle/VIN1"
    )


def test_api_rejects_non_object_payload():
    client = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(200, json=[1, 2])))
    with pytest.raises(ValueError):
        VehicleApiParser().parse("VIN1", client)


def test_api_rejects_malformed_json():
    client = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(200, text="<html>")))
    with pytest.raises(ValueError):
        VehicleApiParser().parse("VIN1", client)


def test_detail_page_mileage_and_kbb():
    data = VehiclePageParser().extract(detail_html(mileage="32,104 mi", kbb="$18,250.00"))
    assert data == {"mileage": "32,104 mi", "kbb_value": "18250.00"}


def test_detail_page_missing_fields_are_unknown():
    data = VehiclePageParser().extract(detail_html(mileage=None, kbb=None))
    assert data == {"mileage": UNKNOWN, "kbb_value": UNKNOWN}


def test_detail_page_requires_url():
    client = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(200)))
    with pytest.raises(ValueError):
        VehiclePageParser().parse("", client)
