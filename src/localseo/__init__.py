"""Structured data (Schema.org) audit engine for local SEO."""

__version__ = "0.1.0"

from localseo.audit import SchemaAuditor, audit_page, audit_url, audit_urls
from localseo.config import Config
from localseo.crawler import PageFetcher, PageFetchError
from localseo.evaluator import evaluate_schema
from localseo.gaps import detect_missing_schemas
from localseo.models import (
    AuditOutcome,
    AuditResult,
    EvalLabel,
    Evaluation,
    FetchResult,
    GeneratedSnippet,
    MissingSchema,
    MissingSchemaReport,
    ParseResult,
    SchemaSource,
    StructuredDataItem,
)
from localseo.page_info import extract_page_info
from localseo.report import render_audit_json, render_audit_markdown
from localseo.structured_data import (
    JsonLdExtractor,
    MicrodataExtractor,
    RdfaExtractor,
    StructuredDataExtractor,
    StructuredDataParser,
    parse_structured_data,
)
from localseo.synthesizer import JsonLdSynthesizer

__all__ = [
    # Core
    "SchemaAuditor",
    "audit_page",
    "audit_url",
    "audit_urls",
    "parse_structured_data",
    "extract_page_info",
    "evaluate_schema",
    "detect_missing_schemas",
    "render_audit_markdown",
    "render_audit_json",
    # Extraction
    "StructuredDataExtractor",
    "JsonLdExtractor",
    "MicrodataExtractor",
    "RdfaExtractor",
    "StructuredDataParser",
    "JsonLdSynthesizer",
    # Fetching
    "PageFetcher",
    "PageFetchError",
    # Models
    "AuditOutcome",
    "AuditResult",
    "EvalLabel",
    "Evaluation",
    "FetchResult",
    "GeneratedSnippet",
    "MissingSchema",
    "MissingSchemaReport",
    "ParseResult",
    "SchemaSource",
    "StructuredDataItem",
    # Config
    "Config",
]
