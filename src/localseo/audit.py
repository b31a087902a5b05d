"""
Structured Data Audit

Runs the full audit for one page:
1. Extract structured data (JSON-LD, then Microdata, then RDFa)
2. Extract business information from the page text
3. Detect missing schema types by priority
4. Generate JSON-LD for the high priority gaps
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence

from localseo.constants import DEFAULT_BUSINESS_TYPE
from localseo.crawler import PageFetcher, PageFetchError
from localseo.gaps import detect_missing_schemas, found_type_set
from localseo.models import AuditOutcome, AuditResult
from localseo.page_info import extract_page_info_from_soup, page_text
from localseo.structured_data import StructuredDataParser, make_soup
from localseo.synthesizer import JsonLdSynthesizer

logger = logging.getLogger(__name__)


class SchemaAuditor:
    """Audit the structured data of single pages."""

    def __init__(
        self,
        business_type: str = DEFAULT_BUSINESS_TYPE,
        parser: Optional[StructuredDataParser] = None,
    ):
        """Initialize the auditor.

        Args:
            business_type: LocalBusiness subtype used for generated JSON-LD
            parser: Structured data parser (defaults to all three formats)
        """
        self.parser = parser or StructuredDataParser()
        self.synthesizer = JsonLdSynthesizer(business_type)

    def audit(self, html: str, url: str = "") -> AuditResult:
        """Audit one HTML document.

        Args:
            html: Complete HTML document
            url: Page URL

        Returns:
            AuditResult with items, gaps, generated snippets and page info
        """
        soup = make_soup(html)
        text = page_text(soup)

        parsed = self.parser.parse_soup(soup, url)
        items = parsed.items
        page_info = extract_page_info_from_soup(soup, url)
        found_types = found_type_set(parsed.schema_types)

        gaps = detect_missing_schemas(found_types, text)
        snippets = self.synthesizer.synthesize(page_info, items, text, found_types)

        logger.info(
            f"Audited {url or '(no url)'}: {len(items)} item(s), "
            f"{len(gaps.high)} high priority gap(s), {len(snippets)} snippet(s)"
        )

        return AuditResult(
            url=url,
            items=items,
            missing_high=gaps.high,
            missing_mid=gaps.mid,
            missing_low=gaps.low,
            snippets=snippets,
            page_info=page_info,
        )


def audit_page(
    html: str, url: str = "", business_type: str = DEFAULT_BUSINESS_TYPE
) -> AuditResult:
    """Audit the structured data of one HTML document."""
    return SchemaAuditor(business_type).audit(html, url)


def audit_url(
    url: str,
    fetcher: Optional[PageFetcher] = None,
    business_type: str = DEFAULT_BUSINESS_TYPE,
) -> AuditResult:
    """Fetch a page and audit it.

    Raises:
        PageFetchError: If the page could not be fetched
    """
    fetcher = fetcher or PageFetcher()
    fetched = fetcher.fetch(url)

    if not fetched.success:
        raise PageFetchError(url, fetched.status, fetched.error or "")

    return audit_page(fetched.html, url, business_type)


def audit_urls(
    urls: Sequence[str],
    fetcher: Optional[PageFetcher] = None,
    business_type: str = DEFAULT_BUSINESS_TYPE,
    max_workers: int = 4,
) -> List[AuditOutcome]:
    """Fetch and audit several pages in parallel.

    Args:
        urls: Pages to audit (e.g. own site followed by competitors)
        fetcher: Page fetcher shared by all workers
        business_type: LocalBusiness subtype used for generated JSON-LD
        max_workers: Maximum number of pages processed at once

    Returns:
        One AuditOutcome per URL, in input order
    """
    if not urls:
        return []

    fetcher = fetcher or PageFetcher()

    def run(url: str) -> AuditOutcome:
        try:
            return AuditOutcome(url=url, result=audit_url(url, fetcher, business_type))
        except PageFetchError as e:
            logger.error(str(e))
            return AuditOutcome(url=url, error=str(e))

    with ThreadPoolExecutor(max_workers=max(1, min(max_workers, len(urls)))) as executor:
        return list(executor.map(run, urls))
