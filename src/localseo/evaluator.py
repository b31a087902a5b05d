"""Schema completeness evaluation.

Classifies a single structured data item as good, warning or error from its
declared type and property names. Rules are checked in order:

1. Local business family (or any type containing "Business"): required
   properties first, then recommended properties.
2. BreadcrumbList: needs a non-empty ``itemListElement`` list.
3. FAQPage: needs at least ``MIN_FAQ_ENTRIES`` entries in ``mainEntity``.
4. Anything else: error when there are no properties at all.
"""

from typing import Any, Dict, Iterable

from localseo.constants import (
    BREADCRUMB_TYPE,
    FAQ_TYPE,
    LOCAL_BUSINESS_RECOMMENDED,
    LOCAL_BUSINESS_REQUIRED,
    LOCAL_BUSINESS_TYPE_MARKER,
    LOCAL_BUSINESS_TYPES,
    MIN_FAQ_ENTRIES,
    NOTE_ALL_PROPERTIES_PRESENT,
    NOTE_BREADCRUMB_EMPTY,
    NOTE_EMPTY_PROPERTIES,
    NOTE_FAQ_COUNT,
    NOTE_FAQ_TOO_FEW,
    NOTE_MISSING_RECOMMENDED,
    NOTE_MISSING_REQUIRED,
    NOTE_PROPERTY_COUNT,
)
from localseo.models import EvalLabel, Evaluation


def is_local_business_type(schema_type: str) -> bool:
    """Check whether a type is evaluated with the local business rules."""
    return (
        schema_type in LOCAL_BUSINESS_TYPES
        or LOCAL_BUSINESS_TYPE_MARKER in schema_type
    )


def count_entries(value: Any) -> int:
    """Count entries of a property that may hold a list or a single node."""
    if isinstance(value, list):
        return len(value)
    return 1 if value else 0


def _missing(expected: Iterable[str], present: Iterable[str]) -> str:
    return ", ".join(sorted(set(expected) - set(present)))


def evaluate_schema(schema_type: str, properties: Dict[str, Any]) -> Evaluation:
    """Evaluate one item's completeness.

    Args:
        schema_type: Declared type (may be a " / " joined list)
        properties: Property bag without "@" metadata keys

    Returns:
        Evaluation with label and a human readable note
    """
    keys = set(properties)

    if is_local_business_type(schema_type):
        missing_required = _missing(LOCAL_BUSINESS_REQUIRED, keys)
        if missing_required:
            return Evaluation(
                EvalLabel.WARNING, NOTE_MISSING_REQUIRED.format(missing_required)
            )

        missing_recommended = _missing(LOCAL_BUSINESS_RECOMMENDED, keys)
        if missing_recommended:
            return Evaluation(
                EvalLabel.WARNING,
                NOTE_MISSING_RECOMMENDED.format(missing_recommended),
            )
        return Evaluation(EvalLabel.GOOD, NOTE_ALL_PROPERTIES_PRESENT)

    if schema_type == BREADCRUMB_TYPE:
        elements = properties.get("itemListElement")
        if isinstance(elements, list) and elements:
            return Evaluation(EvalLabel.GOOD)
        return Evaluation(EvalLabel.WARNING, NOTE_BREADCRUMB_EMPTY)

    if schema_type == FAQ_TYPE:
        count = count_entries(properties.get("mainEntity"))
        if count >= MIN_FAQ_ENTRIES:
            return Evaluation(EvalLabel.GOOD, NOTE_FAQ_COUNT.format(count))
        return Evaluation(EvalLabel.WARNING, NOTE_FAQ_TOO_FEW.format(count))

    if not properties:
        return Evaluation(EvalLabel.ERROR, NOTE_EMPTY_PROPERTIES)
    return Evaluation(EvalLabel.GOOD, NOTE_PROPERTY_COUNT.format(len(properties)))
