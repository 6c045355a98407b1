import json

import pytest

from phishhunter.core.enums import ErrorKind, RiskLevel
from phishhunter.models.models import AnalysisResult, ErrorInfo, LinkHint, ScanReport
from phishhunter.services.report_builder import (
    HIGH_RISK_WARNING,
    build_report_text,
    build_result_text,
    report_to_json,
)


pytestmark = pytest.mark.services

REPORT_URL = "https://www.kisa.or.kr"


@pytest.fixture
def high_result():
    return AnalysisResult(
        risk_score=95,
        risk_level=RiskLevel.HIGH,
        reasons=["유사 도메인 사용", "긴급성 문구"],
        action_guide=["링크 클릭 금지", "118 신고"],
        keywords=["즉시", "계정 정지"],
    )


def test_result_text_layout(high_result):
    text = build_result_text(high_result)

    assert text == (
        "위험도: HIGH (95점)\n"
        "\n"
        "의심 근거:\n1. 유사 도메인 사용\n2. 긴급성 문구\n"
        "\n"
        "대응 가이드:\n1. 링크 클릭 금지\n2. 118 신고\n"
        "\n"
        "의심 키워드: 즉시, 계정 정지"
    )


def test_report_text_for_high_risk(high_result):
    report = ScanReport.success(
        high_result,
        [LinkHint(url="http://kakaao-safe.com/verify", suspicious=True)],
    )

    text = build_report_text(report, REPORT_URL)

    assert text.startswith("🔴 위험도: HIGH")
    assert HIGH_RISK_WARNING in text
    assert "http://kakaao-safe.com/verify ⚠️ 의심 도메인" in text
    assert REPORT_URL in text


def test_report_text_for_low_risk_has_no_warning():
    result = AnalysisResult(risk_score=10, risk_level=RiskLevel.LOW, reasons=["일반 인사"], action_guide=[], keywords=[])

    text = build_report_text(ScanReport.success(result, []), REPORT_URL)

    assert text.startswith("🟢")
    assert HIGH_RISK_WARNING not in text
    assert "발견된 URL" not in text


def test_report_text_for_failure():
    report = ScanReport.failure(ErrorInfo(kind=ErrorKind.TIMEOUT, message="요청 시간이 초과되었습니다."), [])

    text = build_report_text(report, REPORT_URL)

    assert "오류 발생: 요청 시간이 초과되었습니다." in text
    assert "위험도" not in text


def test_report_json_uses_wire_names(high_result):
    data = json.loads(report_to_json(ScanReport.success(high_result, [])))

    assert data["status"] == "success"
    assert data["result"]["riskScore"] == 95
    assert data["result"]["actionGuide"] == ["링크 클릭 금지", "118 신고"]
    assert data["error"] is None
