# tests/test_report.py
"""Tests for audit report rendering."""

import json
import re

import pytest

from localseo.audit import audit_page
from localseo.models import (
    AuditResult,
    EvalLabel,
    Evaluation,
    SchemaSource,
    StructuredDataItem,
)
from localseo.report import render_audit_json, render_audit_markdown

EMPTY_PAGE = "<html><head><title>さくら葬祭</title></head><body><p>よくある質問</p></body></html>"


def table_rows(markdown: str):
    return [line for line in markdown.splitlines() if line.startswith("|")]


def column_count(row: str) -> int:
    # Unescaped pipes delimit cells
    return len(re.split(r"(?<!\\)\|", row)) - 2


class TestRenderAuditMarkdown:
    """Test suite for render_audit_markdown."""

    @pytest.fixture
    def result(self):
        return audit_page(EMPTY_PAGE, "https://sakura-sousai.example.jp/")

    def test_headings(self, result):
        markdown = render_audit_markdown(result)

        assert markdown.startswith("# 構造化データ（Schema）監査レポート")
        assert "**対象URL:** https://sakura-sousai.example.jp/" in markdown
        assert "## 既存Schema一覧" in markdown
        assert "## 不足・弱いSchema（優先度付き）" in markdown
        assert "## 優先度「高」のJSON-LD（実装用）" in markdown

    def test_no_items_message(self, result):
        markdown = render_audit_markdown(result)

        assert "**構造化データは検出されませんでした。**" in markdown

    def test_gap_rows_by_priority(self, result):
        markdown = render_audit_markdown(result)

        assert "| **高** | FAQPage |" in markdown
        assert "| 中 | WebSite |" in markdown
        assert "| 低 | ImageObject |" in markdown

    def test_snippets_embedded_as_json(self, result):
        markdown = render_audit_markdown(result)
        blocks = re.findall(r"```json\n(.*?)\n```", markdown, re.DOTALL)

        assert len(blocks) == len(result.snippets) == 3
        assert json.loads(blocks[0]) == result.snippets[0].schema
        # Japanese placeholders are written unescaped
        assert "（電話番号を入力）" in blocks[0]

    def test_item_table(self):
        result = AuditResult(
            url="https://example.com/",
            items=[StructuredDataItem(
                schema_type="Type|With|Pipes",
                source=SchemaSource.MICRODATA,
                properties={name: "x" for name in "abcdefgh"},
                evaluation=Evaluation(EvalLabel.WARNING, "note\nwith newline"),
            )],
        )
        markdown = render_audit_markdown(result)

        assert "| Type\\|With\\|Pipes | microdata | a, b, c, d, e, f | ⚠️ 不足あり | note with newline |" in markdown

    def test_consistent_column_counts(self):
        html = (
            '<html><body><script type="application/ld+json">'
            '{"@type": "FuneralHome", "name": "A | B"}</script></body></html>'
        )
        markdown = render_audit_markdown(audit_page(html, "https://example.com/"))
        rows = table_rows(markdown)

        item_rows = [row for row in rows if column_count(row) == 5]
        gap_rows = [row for row in rows if column_count(row) == 3]
        assert len(item_rows) + len(gap_rows) == len(rows)
        assert len(item_rows) == 3  # header, separator, one item

    def test_no_gaps_row(self):
        result = AuditResult(url="https://example.com/")
        markdown = render_audit_markdown(result)

        assert "| - | なし | 主要Schemaは実装済みです |" in markdown

    def test_rendering_does_not_modify_result(self, result):
        before = result.to_dict()
        render_audit_markdown(result)

        assert result.to_dict() == before


class TestRenderAuditJson:
    """Test cases for render_audit_json."""

    def test_round_trip_matches_to_dict(self):
        result = audit_page(EMPTY_PAGE, "https://sakura-sousai.example.jp/")
        data = json.loads(render_audit_json(result))

        assert data == result.to_dict()
        assert data["page_info"]["title"] == "さくら葬祭"
        assert len(data["missing_high"]) == 3
        assert data["snippets"][0]["priority"] == "high"

    def test_item_serialization(self):
        html = '<html><body><div itemscope itemtype="https://schema.org/Service"></div></body></html>'
        data = json.loads(render_audit_json(audit_page(html, "")))

        assert data["items"] == [{
            "schema_type": "Service",
            "source": "microdata",
            "properties": {},
            "raw_snippet": "",
            "evaluation": {"label": "error", "note": "プロパティが空です"},
        }]
