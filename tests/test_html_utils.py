from bs4 import BeautifulSoup

from carsales_scraper.utils.html import extract_value_after_label, strip_non_numeric

SELECTOR = "span.label, span.value"


def soup_of(html):
    return BeautifulSoup(html, "lxml")


def test_value_after_label_is_returned_verbatim():
    soup = soup_of(
        '<span class="label">Color:</span><span class="value">Red</span>'
        '<span class="label">Mileage:</span><span class="value"> 32,104 mi </span>'
    )
    assert extract_value_after_label(soup, SELECTOR, "Mileage:") == "32,104 mi"


def test_first_label_match_wins():
    soup = soup_of(
        '<span class="label">Mileage:</span><span class="value">10 mi</span>'
        '<span class="label">Mileage:</span><span class="value">20 mi</span>'
    )
    assert extract_value_after_label(soup, SELECTOR, "Mileage:") == "10 mi"


def test_label_must_match_exactly():
    soup = soup_of('<span class="label">Mileage</span><span class="value">10 mi</span>')
    assert extract_value_after_label(soup, SELECTOR, "Mileage:") is None


def test_label_as_last_element_yields_nothing():
    soup = soup_of('<span class="value">Red</span><span class="label">Mileage:</span>')
    assert extract_value_after_label(soup, SELECTOR, "Mileage:") is None


def test_label_and_selector_are_configurable():
    soup = soup_of("<dl><dt>Odometer</dt><dd>5,000 km</dd></dl>")
    assert extract_value_after_label(soup, "dt, dd", "Odometer") == "5,000 km"


def test_strip_non_numeric():
    assert strip_non_numeric("$18,250.00") == "18250.00"
    assert strip_non_numeric("KBB: $9,999") == "9999"
    assert strip_non_numeric("n/a") == ""
