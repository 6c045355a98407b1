"""
CLI Tests
=========

Runs phishhunter.cli.main in-process with the HTTP layer mocked.
"""

import io
import json

import pytest

from phishhunter.cli import EXIT_ANALYSIS_FAILED, EXIT_INVALID_INPUT, EXIT_OK, main

from conftest import completion_for, make_payload


pytestmark = pytest.mark.cli

SMISHING = "링크: http://kakaao-safe.com/verify 확인하세요"


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "test-key")


def test_hints_only_lists_links(capsys):
    code = main(["--hints-only", SMISHING])

    out = capsys.readouterr().out
    assert code == EXIT_OK
    assert "http://kakaao-safe.com/verify ⚠️ 의심 도메인" in out
    assert "위험도" not in out


def test_hints_only_rejects_short_input(capsys):
    code = main(["--hints-only", "짧음"])

    assert code == EXIT_INVALID_INPUT
    assert "10자" in capsys.readouterr().out


def test_full_scan_json(api_key, mock_http_client, capsys):
    mock_http_client.post.return_value.json.return_value = completion_for(
        make_payload(risk_score=95, risk_level="LOW")
    )

    code = main([SMISHING, "--json"])

    data = json.loads(capsys.readouterr().out)
    assert code == EXIT_OK
    assert data["status"] == "success"
    assert data["result"]["riskLevel"] == "HIGH"
    assert data["links"] == [{"url": "http://kakaao-safe.com/verify", "suspicious": True}]


def test_full_scan_text(api_key, mock_http_client, capsys):
    code = main([SMISHING])

    out = capsys.readouterr().out
    assert code == EXIT_OK
    assert "위험도: HIGH (95점)" in out
    assert "https://www.kisa.or.kr" in out


def test_missing_key_fails(capsys):
    code = main([SMISHING, "--json"])

    data = json.loads(capsys.readouterr().out)
    assert code == EXIT_ANALYSIS_FAILED
    assert data["error"]["kind"] == "MISSING_CREDENTIAL"


def test_reads_message_from_file(tmp_path, capsys):
    message_file = tmp_path / "message.txt"
    message_file.write_text(SMISHING, encoding="utf-8")

    code = main(["--hints-only", "--file", str(message_file)])

    assert code == EXIT_OK
    assert "kakaao-safe.com" in capsys.readouterr().out


def test_unreadable_file(tmp_path, capsys):
    code = main(["--file", str(tmp_path / "missing.txt")])

    assert code == EXIT_INVALID_INPUT
    assert "파일을 읽을 수 없습니다" in capsys.readouterr().err


def test_non_utf8_file(tmp_path, capsys):
    path = tmp_path / "message.txt"
    path.write_bytes(b"\xff\xfe\xfa invalid bytes message here")

    code = main(["--hints-only", "--file", str(path)])

    assert code == EXIT_INVALID_INPUT
    assert "파일을 읽을 수 없습니다" in capsys.readouterr().err


def test_non_utf8_stdin(monkeypatch, capsys):
    stdin = io.TextIOWrapper(io.BytesIO(b"\xff\xfe\xfa invalid bytes message here"), encoding="utf-8")
    monkeypatch.setattr("sys.stdin", stdin)

    code = main(["--hints-only"])

    assert code == EXIT_INVALID_INPUT
    assert "stdin" in capsys.readouterr().err
