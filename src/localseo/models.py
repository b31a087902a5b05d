"""Data models for structured data audits."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from localseo.constants import (
    EVAL_DISPLAY_ERROR,
    EVAL_DISPLAY_GOOD,
    EVAL_DISPLAY_WARNING,
    SNIPPET_PRIORITY_HIGH,
)


class EvalLabel(str, Enum):
    """Completeness classification of one structured data item."""

    GOOD = "good"
    WARNING = "warning"
    ERROR = "error"

    @property
    def display(self) -> str:
        """Label shown in reports."""
        return {
            EvalLabel.GOOD: EVAL_DISPLAY_GOOD,
            EvalLabel.WARNING: EVAL_DISPLAY_WARNING,
            EvalLabel.ERROR: EVAL_DISPLAY_ERROR,
        }[self]


class SchemaSource(str, Enum):
    """Markup format a structured data item was extracted from."""

    JSON_LD = "json-ld"
    MICRODATA = "microdata"
    RDFA = "rdfa"


@dataclass(frozen=True)
class Evaluation:
    """Result of evaluating one item against the rule tables."""

    label: EvalLabel
    note: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {"label": self.label.value, "note": self.note}


@dataclass(frozen=True)
class StructuredDataItem:
    """One schema instance discovered on a page."""

    schema_type: str
    source: SchemaSource
    properties: Dict[str, Any] = field(default_factory=dict)
    raw_snippet: str = ""
    evaluation: Evaluation = field(
        default_factory=lambda: Evaluation(EvalLabel.ERROR)
    )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "schema_type": self.schema_type,
            "source": self.source.value,
            "properties": self.properties,
            "raw_snippet": self.raw_snippet,
            "evaluation": self.evaluation.to_dict(),
        }


@dataclass
class ParseResult:
    """All structured data items found in one document."""

    items: List[StructuredDataItem] = field(default_factory=list)
    domain: str = ""

    @property
    def schema_types(self) -> List[str]:
        return [item.schema_type for item in self.items]


@dataclass(frozen=True)
class MissingSchema:
    """A schema type judged absent or needed on the page."""

    type: str
    reason: str

    def to_dict(self) -> Dict[str, str]:
        return {"type": self.type, "reason": self.reason}


@dataclass
class MissingSchemaReport:
    """Missing schema gaps bucketed by priority, in discovery order."""

    high: List[MissingSchema] = field(default_factory=list)
    mid: List[MissingSchema] = field(default_factory=list)
    low: List[MissingSchema] = field(default_factory=list)


@dataclass(frozen=True)
class GeneratedSnippet:
    """A ready-to-publish JSON-LD document for a missing or weak type."""

    type: str
    schema: Dict[str, Any]
    priority: str = SNIPPET_PRIORITY_HIGH

    def to_dict(self) -> Dict[str, Any]:
        return {
            "priority": self.priority,
            "type": self.type,
            "schema": self.schema,
        }


@dataclass
class AuditResult:
    """Structured data audit of a single page."""

    url: str
    items: List[StructuredDataItem] = field(default_factory=list)
    missing_high: List[MissingSchema] = field(default_factory=list)
    missing_mid: List[MissingSchema] = field(default_factory=list)
    missing_low: List[MissingSchema] = field(default_factory=list)
    snippets: List[GeneratedSnippet] = field(default_factory=list)
    page_info: Dict[str, str] = field(default_factory=dict)

    @property
    def has_gaps(self) -> bool:
        return bool(self.missing_high or self.missing_mid or self.missing_low)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "url": self.url,
            "items": [item.to_dict() for item in self.items],
            "missing_high": [gap.to_dict() for gap in self.missing_high],
            "missing_mid": [gap.to_dict() for gap in self.missing_mid],
            "missing_low": [gap.to_dict() for gap in self.missing_low],
            "snippets": [snippet.to_dict() for snippet in self.snippets],
            "page_info": dict(self.page_info),
        }


@dataclass
class FetchResult:
    """Outcome of fetching one page for auditing."""

    url: str
    html: str = ""
    status_code: Optional[int] = None
    status: str = "pending"  # pending/success/blocked/error/timeout
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.status == "success"


@dataclass
class AuditOutcome:
    """Per-URL outcome of a batch audit."""

    url: str
    result: Optional[AuditResult] = None
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.result is not None
