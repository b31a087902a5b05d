"""Business information extraction from page text.

Pulls the fields used to fill synthesized JSON-LD (title, phone number,
postal code, address, opening hours) out of raw page text with regular
expressions. Every field is always present; a field with no match is an
empty string.
"""

import re
from typing import Dict

from bs4 import BeautifulSoup

from localseo.structured_data import get_domain, make_soup

PAGE_INFO_KEYS = (
    "title",
    "telephone",
    "postal_code",
    "address",
    "opening_hours",
    "url",
    "domain",
)

# Domestic (0X-XXXX-XXXX) or international (+81) Japanese phone numbers
PHONE_PATTERN = re.compile(
    r"(?:0[0-9]{1,4}[-\s]?[0-9]{1,4}[-\s]?[0-9]{4}"
    r"|\+81[-\s]?[0-9]+[-\s]?[0-9]+[-\s]?[0-9]+)"
)

POSTAL_CODE_PATTERN = re.compile(r"〒\s*[0-9]{3}[-\s]?[0-9]{4}")

# Prefecture followed by an address-unit suffix within 2-50 characters
ADDRESS_PATTERN = re.compile(
    r"(?:東京都|大阪府|京都府|北海道|[\u4e00-\u9fff]{2,3}(?:県|都|府|道))"
    r".{2,50}(?:丁目|番地|号|ビル|棟)"
)

OPENING_HOURS_PATTERN = re.compile(
    r"[0-9]{1,2}:[0-9]{2}\s*[〜～~\-–]\s*[0-9]{1,2}:[0-9]{2}"
)


def page_text(soup: BeautifulSoup) -> str:
    """Return the document's text content."""
    return soup.get_text()


def _first_match(pattern: re.Pattern, text: str) -> str:
    match = pattern.search(text)
    return match.group(0) if match else ""


def extract_page_info_from_soup(soup: BeautifulSoup, url: str) -> Dict[str, str]:
    """Extract business information from an already parsed document."""
    text = page_text(soup)
    # Every <title> contributes, including inline SVG titles
    title = "".join(element.get_text() for element in soup.find_all("title"))

    return {
        "title": title.strip(),
        "telephone": _first_match(PHONE_PATTERN, text),
        "postal_code": _first_match(POSTAL_CODE_PATTERN, text).replace("〒", "").strip(),
        "address": _first_match(ADDRESS_PATTERN, text),
        "opening_hours": _first_match(OPENING_HOURS_PATTERN, text),
        "url": url or "",
        "domain": get_domain(url),
    }


def extract_page_info(html: str, url: str = "") -> Dict[str, str]:
    """Extract business information from raw HTML.

    Args:
        html: Complete HTML document
        url: Page URL

    Returns:
        Mapping with every key in PAGE_INFO_KEYS (empty string when not found)
    """
    return extract_page_info_from_soup(make_soup(html), url)
