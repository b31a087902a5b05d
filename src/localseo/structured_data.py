"""
Structured Data Extraction

Extracts every embedded structured data block from an HTML document:
- JSON-LD (<script type="application/ld+json">, @graph expanded)
- Microdata (itemscope / itemtype / itemprop)
- RDFa (typeof / property)

Each extracted node is evaluated as soon as it is built, so callers receive
fully evaluated StructuredDataItem objects.
"""

import json
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence
from urllib.parse import urlparse

from bs4 import BeautifulSoup, Tag

from localseo.constants import (
    MAX_PARSE_ERROR_MESSAGE_LENGTH,
    MAX_PARSE_ERROR_SNIPPET_LENGTH,
    MAX_PROPERTY_TEXT_LENGTH,
    MAX_RAW_SNIPPET_LENGTH,
    NOTE_JSON_PARSE_ERROR,
    PARSE_ERROR_SCHEMA_TYPE,
    TYPE_JOIN_SEPARATOR,
    UNKNOWN_SCHEMA_TYPE,
)
from localseo.evaluator import evaluate_schema
from localseo.models import (
    EvalLabel,
    Evaluation,
    ParseResult,
    SchemaSource,
    StructuredDataItem,
)

logger = logging.getLogger(__name__)

HTML_PARSER = "lxml"


def make_soup(html: str) -> BeautifulSoup:
    """Parse an HTML document with the parser used across the audit."""
    return BeautifulSoup(html or "", HTML_PARSER)


def get_domain(url: str) -> str:
    """Return the host name of a URL, or an empty string if it has none."""
    try:
        return urlparse(url or "").hostname or ""
    except ValueError:
        return ""


def _element_text(element: Tag) -> str:
    return element.get_text().strip()[:MAX_PROPERTY_TEXT_LENGTH]


class StructuredDataExtractor(ABC):
    """Base class for one structured data markup format."""

    @property
    @abstractmethod
    def source(self) -> SchemaSource:
        """Markup format handled by this extractor."""
        pass

    @abstractmethod
    def extract(self, soup: BeautifulSoup) -> List[StructuredDataItem]:
        """Extract all items of this format from a parsed document."""
        pass

    def _build_item(
        self, schema_type: str, properties: Dict[str, Any], raw: str = ""
    ) -> StructuredDataItem:
        return StructuredDataItem(
            schema_type=schema_type,
            source=self.source,
            properties=properties,
            raw_snippet=raw,
            evaluation=evaluate_schema(schema_type, properties),
        )


class JsonLdExtractor(StructuredDataExtractor):
    """Extract JSON-LD script blocks."""

    @property
    def source(self) -> SchemaSource:
        return SchemaSource.JSON_LD

    def extract(self, soup: BeautifulSoup) -> List[StructuredDataItem]:
        items = []

        for script in soup.find_all('script', type='application/ld+json'):
            raw = (script.string or '').strip()
            if not raw:
                continue

            try:
                data = json.loads(raw)
            except (ValueError, RecursionError) as e:
                logger.warning(f"Invalid JSON-LD block skipped: {e}")
                items.append(self._build_parse_error(raw, e))
                continue

            for node in self._expand_graph(data):
                items.append(self._build_node(node, raw))

        return items

    @staticmethod
    def _expand_graph(data: Any) -> List[Any]:
        """Return graph members for @graph documents, else the document itself."""
        if isinstance(data, dict) and '@graph' in data:
            graph = data['@graph']
            if isinstance(graph, list):
                return graph
            if graph:
                return [graph]
        return [data]

    @staticmethod
    def _declared_type(node: Dict[str, Any]) -> str:
        type_val = node.get('@type')
        if isinstance(type_val, list):
            type_val = TYPE_JOIN_SEPARATOR.join(str(t) for t in type_val)
        elif type_val is not None:
            type_val = str(type_val)
        return type_val or UNKNOWN_SCHEMA_TYPE

    def _build_node(self, node: Any, raw: str) -> StructuredDataItem:
        if not isinstance(node, dict):
            # Scalars and bare arrays carry no typed properties
            return self._build_item(
                UNKNOWN_SCHEMA_TYPE, {}, raw[:MAX_RAW_SNIPPET_LENGTH]
            )

        properties = {
            key: value for key, value in node.items()
            if not key.startswith('@')
        }
        return self._build_item(
            self._declared_type(node), properties, raw[:MAX_RAW_SNIPPET_LENGTH]
        )

    def _build_parse_error(
        self, raw: str, error: Exception
    ) -> StructuredDataItem:
        note = NOTE_JSON_PARSE_ERROR.format(
            str(error)[:MAX_PARSE_ERROR_MESSAGE_LENGTH]
        )
        return StructuredDataItem(
            schema_type=PARSE_ERROR_SCHEMA_TYPE,
            source=self.source,
            properties={},
            raw_snippet=raw[:MAX_PARSE_ERROR_SNIPPET_LENGTH],
            evaluation=Evaluation(EvalLabel.ERROR, note),
        )


class MicrodataExtractor(StructuredDataExtractor):
    """Extract Microdata item scopes.

    Properties are collected from every descendant carrying itemprop, so a
    nested itemscope also contributes its properties to the enclosing item.
    """

    @property
    def source(self) -> SchemaSource:
        return SchemaSource.MICRODATA

    def extract(self, soup: BeautifulSoup) -> List[StructuredDataItem]:
        items = []

        for scope in soup.find_all(attrs={'itemscope': True}):
            # e.g., "https://schema.org/FuneralHome" -> "FuneralHome"
            itemtype = scope.get('itemtype', '')
            schema_type = itemtype.split('/')[-1] if itemtype else ''
            schema_type = schema_type or UNKNOWN_SCHEMA_TYPE

            properties = {}
            for element in scope.find_all(attrs={'itemprop': True}):
                name = element.get('itemprop', '')
                if name:
                    properties[name] = (
                        element.get('content')
                        or element.get('href')
                        or element.get('src')
                        or _element_text(element)
                    )

            items.append(self._build_item(schema_type, properties))

        return items


class RdfaExtractor(StructuredDataExtractor):
    """Extract RDFa typed resources."""

    @property
    def source(self) -> SchemaSource:
        return SchemaSource.RDFA

    def extract(self, soup: BeautifulSoup) -> List[StructuredDataItem]:
        items = []

        for resource in soup.find_all(attrs={'typeof': True}):
            schema_type = resource.get('typeof') or UNKNOWN_SCHEMA_TYPE

            properties = {}
            for element in resource.find_all(attrs={'property': True}):
                # "schema:telephone" -> "telephone"
                name = element.get('property', '').split(':')[-1]
                if name:
                    properties[name] = (
                        element.get('content') or _element_text(element)
                    )

            items.append(self._build_item(schema_type, properties))

        return items


class StructuredDataParser:
    """Run every extractor over a document, in JSON-LD, Microdata, RDFa order."""

    def __init__(
        self, extractors: Optional[Sequence[StructuredDataExtractor]] = None
    ):
        """Initialize the parser.

        Args:
            extractors: Extractors to run, in output order (defaults to all three)
        """
        if extractors is None:
            extractors = (JsonLdExtractor(), MicrodataExtractor(), RdfaExtractor())
        self.extractors = tuple(extractors)

    def extract_items(self, soup: BeautifulSoup) -> List[StructuredDataItem]:
        items: List[StructuredDataItem] = []
        for extractor in self.extractors:
            found = extractor.extract(soup)
            logger.debug(f"{extractor.source.value}: {len(found)} item(s)")
            items.extend(found)
        return items

    def parse_soup(self, soup: BeautifulSoup, base_url: str = "") -> ParseResult:
        return ParseResult(
            items=self.extract_items(soup),
            domain=get_domain(base_url),
        )

    def parse(self, html: str, base_url: str = "") -> ParseResult:
        """Extract all structured data from raw HTML.

        Args:
            html: Complete HTML document
            base_url: URL the document was fetched from

        Returns:
            ParseResult with evaluated items and the page domain
        """
        return self.parse_soup(make_soup(html), base_url)


def parse_structured_data(html: str, base_url: str = "") -> ParseResult:
    """Extract every structured data block from an HTML document."""
    return StructuredDataParser().parse(html, base_url)
