"""Fake dealer site served through httpx.MockTransport."""

from typing import Dict, List, Optional

import httpx

BASE_URL = "https://www.enterprisecarsales.com"


def listing_html(vins: List[str]) -> str:
    cards = "\n".join(
        f'<div class="vehicle-card" data-auto5-vehicle-vin="{vin}"><h3>{vin}</h3></div>'
        for vin in vins
    )
    return f"<html><body><div class='srp'>{cards}</div></body></html>"


def detail_html(mileage: Optional[str] = "32,104 mi", kbb: Optional[str] = "$18,250.00") -> str:
    specs = '<span class="label">Exterior:</span><span class="value">Blue</span>'
    if mileage is not None:
        specs += f'<span class="label">Mileage:</span><span class="value">{mileage}</span>'
    specs += '<span class="label">Engine:</span><span class="value">2.5L</span>'
    kbb_row = ""
    if kbb is not None:
        kbb_row = (
            '<div class="kbbsuggested-row"><span class="row-label">KBB Suggested</span>'
            f'<span class="row-value">{kbb}</span></div>'
        )
    return f"<html><body><div class='specs'>{specs}</div>{kbb_row}</body></html>"


def vehicle_json(vin: str, **overrides) -> Dict:
    data = {
        "vin": vin,
        "year": "2021",
        "make": "Toyota",
        "model": "Camry",
        "trim": "SE",
        "displayPrice": 21999,
        "vdp_url": f"{BASE_URL}/vdp/{vin}/",
    }
    data.update(overrides)
    return data


class FakeSite:
    """In-memory stand-in for the dealer site, served through httpx.MockTransport."""

    def __init__(self, pages: List[List[str]]):
        self.pages = pages
        self.vehicles: Dict[str, Dict] = {}
        self.details: Dict[str, str] = {}
        self.status_overrides: Dict[str, int] = {}
        self.requests: List[httpx.Request] = []
        for page in pages:
            for vin in page:
                self.vehicles.setdefault(vin, vehicle_json(vin))
                self.details.setdefault(f"/vdp/{vin}/", detail_html())

    @property
    def listing_pages_requested(self) -> List[int]:
        pages = []
        for request in self.requests:
            path = request.url.path
            if path.startswith("/list/"):
                pages.append(int(path.rstrip("/").rsplit("srp-page-", 1)[1]))
        return pages

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if path in self.status_overrides:
            return httpx.Response(self.status_overrides[path], text="error")

        if path.startswith("/list/"):
            page = int(path.rstrip("/").rsplit("srp-page-", 1)[1])
            vins = self.pages[page - 1] if page <= len(self.pages) else []
            return httpx.Response(200, text=listing_html(vins))

        if path.startswith("/wp-json/jazel-auto5/v1/vehicle/"):
            vin = path.rsplit("/", 1)[1]
            if vin not in self.vehicles:
                return httpx.Response(404, json={"code": "not_found"})
            return httpx.Response(200, json=self.vehicles[vin])

        if path in self.details:
            return httpx.Response(200, text=self.details[path])

        return httpx.Response(404, text="not found")

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self.handler))
