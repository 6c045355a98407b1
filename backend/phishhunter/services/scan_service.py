"""
Message scan service.

Orchestrates a full scan of one message:

1. Compute local link hints (always, even for invalid input).
2. Validate the message; invalid input is never sent out.
3. Run the remote analysis.
4. Fold the outcome into a tagged ScanReport.

Every failure becomes a failed report carrying an ErrorKind and a
user-facing message. No partial results are returned.
"""

from typing import Any, Optional

from phishhunter.core.exceptions import PhishHunterException, UnknownAnalysisError
from phishhunter.core.logging import get_logger
from phishhunter.models.models import ErrorInfo, ScanReport
from phishhunter.services.analysis_client import PhishingAnalyzer
from phishhunter.signals.link_analyzer import analyze_links
from phishhunter.signals.validators import validate_message

logger = get_logger(__name__)


def error_info_from_exception(exc: PhishHunterException) -> ErrorInfo:
    return ErrorInfo(kind=exc.kind, message=exc.message, retryable=exc.retryable)


class MessageScanService:
    """
    Service for scanning a single message end to end.
    """

    def __init__(self, analyzer: Optional[PhishingAnalyzer] = None, settings: Optional[Any] = None):
        self.analyzer = analyzer or PhishingAnalyzer(settings)
        self.settings = self.analyzer.settings

    async def scan(self, message: str) -> ScanReport:
        """
        Scan a message and return a tagged report.

        Args:
            message: Raw message text

        Returns:
            ScanReport with either a normalized result or an error
        """
        links = analyze_links(message)
        outcome = validate_message(message, self.settings)

        if not outcome.valid:
            logger.info("scan_rejected", error_kind=outcome.error_kind.value)
            return ScanReport.failure(
                ErrorInfo(kind=outcome.error_kind, message=outcome.message, retryable=False),
                links,
            )

        try:
            result = await self.analyzer.analyze(message)
        except PhishHunterException as e:
            logger.warning("scan_failed", error_kind=e.kind.value, details=e.details)
            return ScanReport.failure(error_info_from_exception(e), links)
        except Exception as e:
            logger.exception("scan_unexpected_error", error_type=type(e).__name__)
            return ScanReport.failure(error_info_from_exception(UnknownAnalysisError()), links)

        report = ScanReport.success(result, links)
        logger.info(
            "scan_completed",
            risk_score=result.risk_score,
            risk_level=result.risk_level.value,
            links=len(links),
            suspicious_links=len(report.suspicious_links),
        )
        return report
