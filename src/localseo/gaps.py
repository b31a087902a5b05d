"""Missing schema detection.

Decides which high-value schema types a page lacks, from the set of types
already present and simple keyword signals in the page text. Each check is
an independent rule in one of three priority buckets; bucket order is the
display order.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Set, Tuple

from localseo.constants import (
    BREADCRUMB_TYPE,
    FAQ_INDICATORS,
    FAQ_TYPE,
    LOCAL_BUSINESS_GAP_LABEL,
    LOCAL_BUSINESS_TYPES,
    REASON_AGGREGATE_RATING,
    REASON_BREADCRUMB,
    REASON_FAQ,
    REASON_IMAGE_OBJECT,
    REASON_LOCAL_BUSINESS,
    REASON_SERVICE,
    REASON_WEBSITE,
    REVIEW_INDICATORS,
    TYPE_JOIN_SEPARATOR,
)
from localseo.models import MissingSchema, MissingSchemaReport

logger = logging.getLogger(__name__)


def found_type_set(schema_types: Iterable[str]) -> Set[str]:
    """Build the set of types present on a page.

    Joined multi-type strings ("FuneralHome / LocalBusiness") contribute both
    the joined string and each component type.
    """
    found = set()
    for schema_type in schema_types:
        found.add(schema_type)
        found.update(
            part.strip() for part in schema_type.split(TYPE_JOIN_SEPARATOR)
            if part.strip()
        )
    return found


def contains_any(text: str, indicators: Iterable[str]) -> bool:
    return any(indicator in text for indicator in indicators)


def has_local_business(found_types: Set[str]) -> bool:
    return bool(found_types & LOCAL_BUSINESS_TYPES)


def has_faq_content(page_text: str) -> bool:
    return contains_any(page_text, FAQ_INDICATORS)


def has_review_content(page_text: str) -> bool:
    return contains_any(page_text, REVIEW_INDICATORS)


@dataclass(frozen=True)
class GapRule:
    """One missing-schema check."""

    priority: str  # high/mid/low
    type: str
    reason: str
    applies: Callable[[Set[str], str], bool]


GAP_RULES: Tuple[GapRule, ...] = (
    # High priority
    GapRule(
        "high", LOCAL_BUSINESS_GAP_LABEL, REASON_LOCAL_BUSINESS,
        lambda found, text: not has_local_business(found),
    ),
    GapRule(
        "high", BREADCRUMB_TYPE, REASON_BREADCRUMB,
        lambda found, text: BREADCRUMB_TYPE not in found,
    ),
    GapRule(
        "high", FAQ_TYPE, REASON_FAQ,
        lambda found, text: has_faq_content(text) and FAQ_TYPE not in found,
    ),
    # Mid priority
    GapRule(
        "mid", "AggregateRating", REASON_AGGREGATE_RATING,
        lambda found, text: has_review_content(text) and "AggregateRating" not in found,
    ),
    GapRule(
        "mid", "Service", REASON_SERVICE,
        lambda found, text: "Service" not in found,
    ),
    GapRule(
        "mid", "WebSite", REASON_WEBSITE,
        lambda found, text: "WebSite" not in found,
    ),
    # Low priority
    GapRule(
        "low", "ImageObject", REASON_IMAGE_OBJECT,
        lambda found, text: "ImageObject" not in found,
    ),
)


def detect_missing_schemas(
    found_types: Iterable[str],
    page_text: str,
    rules: Tuple[GapRule, ...] = GAP_RULES,
) -> MissingSchemaReport:
    """Determine absent schema types and bucket them by priority.

    Args:
        found_types: Schema types present on the page
        page_text: Full text content of the page
        rules: Checks to run, in display order

    Returns:
        MissingSchemaReport with high/mid/low buckets
    """
    found = found_type_set(found_types)
    report = MissingSchemaReport()
    buckets = {"high": report.high, "mid": report.mid, "low": report.low}

    for rule in rules:
        if rule.applies(found, page_text):
            buckets[rule.priority].append(MissingSchema(rule.type, rule.reason))

    logger.debug(
        f"Missing schemas: {len(report.high)} high, "
        f"{len(report.mid)} mid, {len(report.low)} low"
    )
    return report
