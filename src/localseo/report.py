"""Markdown and JSON rendering of audit results.

Rendering is a pure function of the AuditResult: no timestamps, no ordering
changes, so identical results always render to identical text.
"""

import json
from typing import List

from localseo.constants import PRIORITY_DISPLAY, REPORT_MAX_PROPERTY_NAMES
from localseo.models import AuditResult, MissingSchema


def _cell(value: str) -> str:
    """Escape a value for use inside a Markdown table cell."""
    return " ".join(str(value).replace("|", "\\|").split())


def _gap_rows(priority: str, gaps: List[MissingSchema]) -> List[str]:
    label = PRIORITY_DISPLAY[priority]
    return [f"| {label} | {_cell(gap.type)} | {_cell(gap.reason)} |" for gap in gaps]


def render_audit_markdown(result: AuditResult) -> str:
    """Render an audit result as a Markdown report.

    Args:
        result: Audit result to render

    Returns:
        Markdown text with the found schema table, the prioritized gap table
        and the generated JSON-LD blocks
    """
    lines = [
        "# 構造化データ（Schema）監査レポート",
        "",
        f"**対象URL:** {result.url}",
        "",
        "---",
        "",
        "## 既存Schema一覧",
        "",
    ]

    if result.items:
        lines.append("| Schema種別 | ソース | 主要プロパティ | 評価 | 備考 |")
        lines.append("|---|---|---|---|---|")
        for item in result.items:
            props = ", ".join(list(item.properties)[:REPORT_MAX_PROPERTY_NAMES])
            lines.append(
                f"| {_cell(item.schema_type)} | {item.source.value} | {_cell(props)} "
                f"| {item.evaluation.label.display} | {_cell(item.evaluation.note)} |"
            )
    else:
        lines.append("**構造化データは検出されませんでした。**")

    lines.extend([
        "",
        "---",
        "",
        "## 不足・弱いSchema（優先度付き）",
        "",
        "| 優先度 | Schema種別 | 理由 |",
        "|---|---|---|",
    ])
    lines.extend(_gap_rows("high", result.missing_high))
    lines.extend(_gap_rows("mid", result.missing_mid))
    lines.extend(_gap_rows("low", result.missing_low))

    if not result.has_gaps:
        lines.append("| - | なし | 主要Schemaは実装済みです |")

    lines.extend([
        "",
        "---",
        "",
        "## 優先度「高」のJSON-LD（実装用）",
        "",
    ])

    for snippet in result.snippets:
        lines.extend([
            f"### {snippet.type}",
            "",
            "```json",
            json.dumps(snippet.schema, ensure_ascii=False, indent=2),
            "```",
            "",
        ])

    return "\n".join(lines)


def render_audit_json(result: AuditResult) -> str:
    """Render an audit result as a JSON document."""
    return json.dumps(result.to_dict(), ensure_ascii=False, indent=2)
