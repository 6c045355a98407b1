"""
Command-line entry point.

Usage:
    phishhunter "의심스러운 메시지 내용..."
    phishhunter --file message.txt --json
    echo "메시지" | phishhunter --hints-only
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import List, Optional

from phishhunter.core.config import get_settings
from phishhunter.core.enums import ErrorKind
from phishhunter.core.logging import configure_logging, get_logger
from phishhunter.models.models import ScanReport
from phishhunter.services.report_builder import build_links_text, build_report_text, report_to_json
from phishhunter.services.scan_service import MessageScanService
from phishhunter.signals.link_analyzer import analyze_links
from phishhunter.signals.validators import validate_message

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_ANALYSIS_FAILED = 1
EXIT_INVALID_INPUT = 2

VALIDATION_KINDS = {ErrorKind.EMPTY_INPUT, ErrorKind.TOO_SHORT, ErrorKind.TOO_LONG}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="phishhunter",
        description="Analyze a text message for smishing/phishing risk",
    )
    parser.add_argument(
        "message",
        nargs="?",
        help="Message text (read from --file or stdin when omitted)",
    )
    parser.add_argument(
        "--file",
        type=Path,
        help="Read the message from a UTF-8 text file",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the report as JSON",
    )
    parser.add_argument(
        "--hints-only",
        action="store_true",
        help="Only run local checks; do not call the analysis service",
    )
    return parser


def read_message(args: argparse.Namespace) -> str:
    if args.message is not None:
        return args.message
    if args.file is not None:
        return args.file.read_text(encoding="utf-8")
    if not sys.stdin.isatty():
        return sys.stdin.read()
    return ""


def run_local_checks(message: str, as_json: bool) -> int:
    """Print validation and link hints without calling the analysis service."""
    links = analyze_links(message)
    outcome = validate_message(message)

    if as_json:
        data = {
            "validation": outcome.model_dump(mode="json"),
            "links": [link.model_dump(mode="json") for link in links],
        }
        print(json.dumps(data, ensure_ascii=False, indent=2))
    else:
        if not outcome.valid:
            print(f"⚠️ {outcome.message}")
        print(build_links_text(links) if links else "발견된 URL이 없습니다.")

    return EXIT_OK if outcome.valid else EXIT_INVALID_INPUT


def exit_code_for(report: ScanReport) -> int:
    if report.succeeded:
        return EXIT_OK
    if report.error.kind in VALIDATION_KINDS:
        return EXIT_INVALID_INPUT
    return EXIT_ANALYSIS_FAILED


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI and return a process exit code."""
    args = build_parser().parse_args(argv)
    configure_logging()
    settings = get_settings()

    try:
        message = read_message(args)
    except (OSError, UnicodeDecodeError) as e:
        source = args.file or "stdin"
        logger.error("message_read_failed", source=str(source), error=str(e))
        print(f"파일을 읽을 수 없습니다: {source}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    if args.hints_only:
        return run_local_checks(message, args.json)

    report = asyncio.run(MessageScanService(settings=settings).scan(message))

    if args.json:
        print(report_to_json(report))
    else:
        print(build_report_text(report, settings.report_url))

    return exit_code_for(report)


if __name__ == "__main__":
    sys.exit(main())
