"""
HTML text extraction helpers.

Functions:
    element_text: Stripped text content of a tag.
    extract_value_after_label: Text of the element that follows a label element.
    strip_non_numeric: Removes everything except digits and decimal points.
"""

import re
from typing import Optional

from bs4 import BeautifulSoup, Tag

NON_NUMERIC_RE = re.compile(r"[^\d.]")


def element_text(tag: Tag) -> str:
    return tag.get_text().strip()


def extract_value_after_label(
    soup: BeautifulSoup, selector: str, label: str
) -> Optional[str]:
    """
    Extract the value that follows a labeled element.

    Label and value elements are expected to match the same selector and
    appear in document order, e.g. ``span.label, span.value`` on
    ``<span class="label">Mileage:</span><span class="value">32,104 mi</span>``.
    Scanning stops at the first element matched right after an element whose
    stripped text equals ``label``.

    Args:
        soup (BeautifulSoup): Parsed page.
        selector (str): CSS selector matching both label and value elements.
        label (str): Exact label text, e.g. "Mileage:".

    Returns:
        Optional[str]: Stripped text of the value element, or None if no
            matched element follows the label.
    """
    last_was_label = False
    for element in soup.select(selector):
        text = element_text(element)
        if last_was_label:
            return text
        if text == label:
            last_was_label = True
    return None


def strip_non_numeric(text: str) -> str:
    """Remove everything except digits and decimal points ("$18,250.00" -> "18250.00")."""
    return NON_NUMERIC_RE.sub("", text)
