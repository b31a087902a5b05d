"""JSON-LD generation for high priority schema gaps."""

import logging
import re
from typing import Any, Dict, Iterable, List, Optional, Set

from localseo.constants import (
    ALL_WEEK_DAYS,
    BREADCRUMB_HOME_NAME,
    BREADCRUMB_TYPE,
    DEFAULT_BUSINESS_TYPE,
    DEFAULT_CLOSES,
    DEFAULT_COUNTRY,
    DEFAULT_OPENS,
    DEFAULT_PRICE_RANGE,
    FAQ_TEMPLATE_ENTRIES,
    FAQ_TYPE,
    LOCAL_BUSINESS_TYPES,
    PLACEHOLDER_DESCRIPTION,
    PLACEHOLDER_FAQ_ANSWER,
    PLACEHOLDER_FAQ_QUESTION,
    PLACEHOLDER_IMAGE,
    PLACEHOLDER_NAME,
    PLACEHOLDER_PAGE_NAME,
    PLACEHOLDER_PAGE_URL,
    PLACEHOLDER_POSTAL_CODE,
    PLACEHOLDER_REGION,
    PLACEHOLDER_SAME_AS,
    PLACEHOLDER_STREET_ADDRESS,
    PLACEHOLDER_TELEPHONE,
    SCHEMA_CONTEXT,
    SNIPPET_PRIORITY_HIGH,
)
from localseo.gaps import found_type_set, has_faq_content, has_local_business
from localseo.models import EvalLabel, GeneratedSnippet, StructuredDataItem

logger = logging.getLogger(__name__)


def business_name_from_title(title: str) -> str:
    """Take the part of a page title before the first "|"."""
    return (title or "").split("|")[0].strip()


class JsonLdSynthesizer:
    """Build ready-to-publish JSON-LD for missing or weak schema types.

    Values extracted from the page are used where available; everything else
    is filled with a visible placeholder so no field is ever omitted.
    """

    def __init__(self, business_type: str = DEFAULT_BUSINESS_TYPE):
        """Initialize the synthesizer.

        Args:
            business_type: Industry-specific LocalBusiness subtype for @type
        """
        self.business_type = business_type

    def synthesize(
        self,
        page_info: Dict[str, str],
        items: Iterable[StructuredDataItem],
        page_text: str,
        found_types: Optional[Set[str]] = None,
    ) -> List[GeneratedSnippet]:
        """Generate snippets for the highest priority gaps.

        Args:
            page_info: Extracted page information (see page_info.PAGE_INFO_KEYS)
            items: Evaluated structured data items found on the page
            page_text: Full text content of the page
            found_types: Types present on the page (derived from items if None)

        Returns:
            Generated snippets: local business, breadcrumb, FAQ (as applicable)
        """
        items = list(items)
        if found_types is None:
            found_types = found_type_set(item.schema_type for item in items)

        snippets = []

        if not has_local_business(found_types) or self._has_weak_local_business(items):
            snippets.append(GeneratedSnippet(
                type=f"{self.business_type}（LocalBusiness派生）",
                schema=self.local_business(page_info),
                priority=SNIPPET_PRIORITY_HIGH,
            ))

        if BREADCRUMB_TYPE not in found_types:
            snippets.append(GeneratedSnippet(
                type=BREADCRUMB_TYPE,
                schema=self.breadcrumb_list(page_info.get("url", "")),
                priority=SNIPPET_PRIORITY_HIGH,
            ))

        if has_faq_content(page_text) and FAQ_TYPE not in found_types:
            snippets.append(GeneratedSnippet(
                type=FAQ_TYPE,
                schema=self.faq_page(),
                priority=SNIPPET_PRIORITY_HIGH,
            ))

        logger.debug(f"Generated {len(snippets)} JSON-LD snippet(s)")
        return snippets

    @staticmethod
    def _has_weak_local_business(items: List[StructuredDataItem]) -> bool:
        for item in items:
            if item.evaluation.label != EvalLabel.WARNING:
                continue
            if has_local_business(found_type_set([item.schema_type])):
                return True
        return False

    def local_business(self, page_info: Dict[str, str]) -> Dict[str, Any]:
        url = page_info.get("url", "")
        return {
            "@context": SCHEMA_CONTEXT,
            "@type": self.business_type,
            "name": business_name_from_title(page_info.get("title", "")) or PLACEHOLDER_NAME,
            "url": url,
            "telephone": page_info.get("telephone") or PLACEHOLDER_TELEPHONE,
            "address": {
                "@type": "PostalAddress",
                "streetAddress": page_info.get("address") or PLACEHOLDER_STREET_ADDRESS,
                "postalCode": page_info.get("postal_code") or PLACEHOLDER_POSTAL_CODE,
                "addressRegion": PLACEHOLDER_REGION,
                "addressCountry": DEFAULT_COUNTRY,
            },
            "openingHoursSpecification": [
                {
                    "@type": "OpeningHoursSpecification",
                    "dayOfWeek": list(ALL_WEEK_DAYS),
                    "opens": DEFAULT_OPENS,
                    "closes": DEFAULT_CLOSES,
                }
            ],
            "priceRange": DEFAULT_PRICE_RANGE,
            "image": f"{url}{PLACEHOLDER_IMAGE}",
            "description": PLACEHOLDER_DESCRIPTION,
            "sameAs": list(PLACEHOLDER_SAME_AS),
        }

    @staticmethod
    def breadcrumb_list(url: str) -> Dict[str, Any]:
        # Home is the page URL with exactly one trailing slash
        home = re.sub(r"/$", "", url or "") + "/"
        return {
            "@context": SCHEMA_CONTEXT,
            "@type": BREADCRUMB_TYPE,
            "itemListElement": [
                {
                    "@type": "ListItem",
                    "position": 1,
                    "name": BREADCRUMB_HOME_NAME,
                    "item": home,
                },
                {
                    "@type": "ListItem",
                    "position": 2,
                    "name": PLACEHOLDER_PAGE_NAME,
                    "item": f"{url or ''}{PLACEHOLDER_PAGE_URL}",
                },
            ],
        }

    @staticmethod
    def faq_page() -> Dict[str, Any]:
        return {
            "@context": SCHEMA_CONTEXT,
            "@type": FAQ_TYPE,
            "mainEntity": [
                {
                    "@type": "Question",
                    "name": PLACEHOLDER_FAQ_QUESTION.format(n),
                    "acceptedAnswer": {
                        "@type": "Answer",
                        "text": PLACEHOLDER_FAQ_ANSWER.format(n),
                    },
                }
                for n in range(1, FAQ_TEMPLATE_ENTRIES + 1)
            ],
        }
