"""
Report builder for analysis output.

Renders results as the plain text users copy and share, and as the
JSON document emitted by the CLI.
"""

import json
from typing import Any, Dict, List

from phishhunter.core.enums import RiskLevel
from phishhunter.models.models import AnalysisResult, LinkHint, ScanReport

RISK_LEVEL_EMOJI = {
    RiskLevel.HIGH: "🔴",
    RiskLevel.MEDIUM: "🟡",
    RiskLevel.LOW: "🟢",
}

HIGH_RISK_WARNING = "⚠️ 이 메시지는 스미싱일 가능성이 매우 높습니다. 링크를 클릭하거나 개인정보를 입력하지 마세요."
DISCLAIMER = "⚠️ 이 도구는 참고용입니다. 최종 판단은 사용자 본인이 해야 합니다."


def _numbered(items: List[str]) -> str:
    return "\n".join(f"{i}. {item}" for i, item in enumerate(items, start=1))


def build_result_text(result: AnalysisResult) -> str:
    """
    Render a result as shareable plain text.

    Example output:
        위험도: HIGH (95점)

        의심 근거:
        1. 유사 도메인 사용

        대응 가이드:
        1. 링크를 클릭하지 마세요

        의심 키워드: 즉시, 계정 정지
    """
    return (
        f"위험도: {result.risk_level.value} ({result.risk_score}점)\n"
        f"\n"
        f"의심 근거:\n{_numbered(result.reasons)}\n"
        f"\n"
        f"대응 가이드:\n{_numbered(result.action_guide)}\n"
        f"\n"
        f"의심 키워드: {', '.join(result.keywords)}"
    ).strip()


def build_links_text(links: List[LinkHint]) -> str:
    lines = ["🔗 발견된 URL"]
    for link in links:
        marker = " ⚠️ 의심 도메인" if link.suspicious else ""
        lines.append(f"- {link.url}{marker}")
    return "\n".join(lines)


def build_report_text(report: ScanReport, report_url: str) -> str:
    """
    Render a full scan report for terminal display.

    Args:
        report: Scan outcome
        report_url: Where suspicious messages should be reported

    Returns:
        Multi-section text; the result section is omitted for failed scans
    """
    sections = []

    if report.result is not None:
        result = report.result
        sections.append(f"{RISK_LEVEL_EMOJI[result.risk_level]} {build_result_text(result)}")
        if result.is_high_risk:
            sections.append(HIGH_RISK_WARNING)
    elif report.error is not None:
        sections.append(f"⚠️ 오류 발생: {report.error.message}")

    if report.links:
        sections.append(build_links_text(report.links))

    sections.append(f"{DISCLAIMER}\n의심스러운 메시지는 한국인터넷진흥원({report_url})에 신고하세요.")
    return "\n\n".join(sections)


def report_to_dict(report: ScanReport) -> Dict[str, Any]:
    """Serialize a report with camelCase result fields."""
    return report.model_dump(mode="json", by_alias=True)


def report_to_json(report: ScanReport) -> str:
    return json.dumps(report_to_dict(report), ensure_ascii=False, indent=2)
