# tests/test_gaps.py
"""Tests for missing schema detection."""

import pytest

from localseo.constants import (
    FAQ_INDICATORS,
    LOCAL_BUSINESS_GAP_LABEL,
    REVIEW_INDICATORS,
)
from localseo.gaps import (
    GAP_RULES,
    GapRule,
    detect_missing_schemas,
    found_type_set,
    has_faq_content,
    has_review_content,
)

ALL_TYPES = {
    "FuneralHome",
    "BreadcrumbList",
    "FAQPage",
    "AggregateRating",
    "Service",
    "WebSite",
    "ImageObject",
}


def types(gaps):
    return [gap.type for gap in gaps]


class TestDetectMissingSchemas:
    """Test suite for detect_missing_schemas."""

    def test_faq_page_without_markup(self):
        report = detect_missing_schemas({"WebPage"}, "よくある質問")

        assert types(report.high) == [LOCAL_BUSINESS_GAP_LABEL, "BreadcrumbList", "FAQPage"]
        assert types(report.mid) == ["Service", "WebSite"]
        assert types(report.low) == ["ImageObject"]

    def test_nothing_missing(self):
        report = detect_missing_schemas(ALL_TYPES, "FAQ ★★★★★ 口コミ")

        assert report.high == []
        assert report.mid == []
        assert report.low == []

    def test_no_faq_text_no_faq_gap(self):
        report = detect_missing_schemas(set(), "葬儀のご案内")

        assert "FAQPage" not in types(report.high)
        assert len(report.high) == 2

    def test_faq_markup_present(self):
        report = detect_missing_schemas({"FAQPage"}, "よくある質問")

        assert "FAQPage" not in types(report.high)

    def test_review_text_adds_aggregate_rating_first(self):
        report = detect_missing_schemas(set(), "お客様の口コミ ★★★★☆")

        assert types(report.mid) == ["AggregateRating", "Service", "WebSite"]

    def test_review_markup_present(self):
        report = detect_missing_schemas({"AggregateRating"}, "レビュー")

        assert "AggregateRating" not in types(report.mid)

    @pytest.mark.parametrize("schema_type", ["LocalBusiness", "Organization", "FuneralHome"])
    def test_local_business_family_satisfies_gap(self, schema_type):
        report = detect_missing_schemas({schema_type}, "")

        assert LOCAL_BUSINESS_GAP_LABEL not in types(report.high)

    def test_joined_type_satisfies_gap(self):
        report = detect_missing_schemas(["FuneralHome / LocalBusiness"], "")

        assert LOCAL_BUSINESS_GAP_LABEL not in types(report.high)

    def test_business_substring_does_not_satisfy_gap(self):
        report = detect_missing_schemas({"AutomotiveBusiness"}, "")

        assert LOCAL_BUSINESS_GAP_LABEL in types(report.high)

    def test_gaps_carry_reasons(self):
        report = detect_missing_schemas(set(), "")

        assert all(gap.reason for gap in report.high + report.mid + report.low)

    def test_custom_rules(self):
        rules = (
            GapRule("low", "VideoObject", "動画", lambda found, text: "VideoObject" not in found),
        )
        report = detect_missing_schemas(set(), "", rules=rules)

        assert report.high == [] and report.mid == []
        assert types(report.low) == ["VideoObject"]


class TestIndicators:
    """Test cases for content indicators."""

    @pytest.mark.parametrize("indicator", FAQ_INDICATORS)
    def test_faq_indicators(self, indicator):
        assert has_faq_content(f"本文 {indicator} 本文")

    @pytest.mark.parametrize("indicator", REVIEW_INDICATORS)
    def test_review_indicators(self, indicator):
        assert has_review_content(f"本文{indicator}本文")

    def test_no_indicators(self):
        assert not has_faq_content("葬儀のご案内")
        assert not has_review_content("葬儀のご案内")

    def test_rule_order(self):
        assert [(rule.priority, rule.type) for rule in GAP_RULES] == [
            ("high", LOCAL_BUSINESS_GAP_LABEL),
            ("high", "BreadcrumbList"),
            ("high", "FAQPage"),
            ("mid", "AggregateRating"),
            ("mid", "Service"),
            ("mid", "WebSite"),
            ("low", "ImageObject"),
        ]


class TestFoundTypeSet:
    """Test cases for found_type_set."""

    def test_splits_joined_types(self):
        found = found_type_set(["FuneralHome / LocalBusiness", "WebSite"])

        assert found == {"FuneralHome / LocalBusiness", "FuneralHome", "LocalBusiness", "WebSite"}
