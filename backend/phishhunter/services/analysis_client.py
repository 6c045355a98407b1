"""
Analysis client.

Sends one validated message to the hosted chat-completion service and
turns the reply into a normalized AnalysisResult. Transport and HTTP
failures are mapped onto the PhishHunterException hierarchy.
"""

import asyncio
from typing import Any, Dict, Optional

import httpx
from httpx import HTTPError, HTTPStatusError, TimeoutException

from phishhunter.core.config import get_settings
from phishhunter.core.exceptions import (
    AnalysisTimeoutError,
    InvalidCredentialError,
    MalformedResponseError,
    MissingCredentialError,
    PhishHunterException,
    RateLimitError,
    ServiceError,
)
from phishhunter.core.logging import get_logger, log_execution_time
from phishhunter.models.models import AnalysisResult
from phishhunter.services.prompt_loader import build_user_prompt, load_system_prompt
from phishhunter.services.response_parser import parse_completion

logger = get_logger(__name__)


class PhishingAnalyzer:
    """
    Client for the hosted chat-completion service.

    Sends one request per call, with no retries, racing it against the
    configured deadline. On expiry the request task is cancelled and its
    connection closed before AnalysisTimeoutError is raised.
    """

    def __init__(self, settings: Optional[Any] = None, system_prompt: Optional[str] = None):
        self.settings = settings or get_settings()
        self._system_prompt = system_prompt

    @property
    def system_prompt(self) -> str:
        if self._system_prompt is None:
            self._system_prompt = load_system_prompt(self.settings)
        return self._system_prompt

    def build_request(self, message: str) -> Dict[str, Any]:
        return {
            "model": self.settings.model,
            "messages": [
                {"role": "system", "content": self.system_prompt},
                {"role": "user", "content": build_user_prompt(message)},
            ],
            "response_format": {"type": "json_object"},
            "temperature": self.settings.temperature,
        }

    def _headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.settings.openai_api_key}",
        }

    @log_execution_time(logger, "analysis", expected=(PhishHunterException,))
    async def analyze(self, message: str) -> AnalysisResult:
        """
        Analyze a message that already passed local validation.

        Raises:
            MissingCredentialError: No API key configured; nothing is sent
            AnalysisTimeoutError: The deadline expired first
            InvalidCredentialError: The service rejected the key
            RateLimitError: The service reported a quota or rate limit
            ServiceError: Any other transport or HTTP failure
            EmptyResponseError, MalformedResponseError, InvalidShapeError:
                The reply could not be turned into a result
        """
        if not self.settings.has_api_key:
            raise MissingCredentialError()

        body = self.build_request(message)
        timeout = self.settings.request_timeout_seconds

        logger.info("analysis_started", model=self.settings.model, message_length=len(message))

        try:
            completion = await asyncio.wait_for(self._post(body), timeout=timeout)
        except asyncio.TimeoutError:
            logger.warning("analysis_timeout", timeout_seconds=timeout)
            raise AnalysisTimeoutError(timeout_seconds=timeout)

        return parse_completion(completion)

    async def _post(self, body: Dict[str, Any]) -> Any:
        url = self.settings.completions_url

        # httpx's own timeout sits just past the deadline so the outer race decides.
        async with httpx.AsyncClient(timeout=self.settings.request_timeout_seconds + 5.0) as client:
            try:
                response = await client.post(url, headers=self._headers(), json=body)
                response.raise_for_status()
            except TimeoutException:
                raise AnalysisTimeoutError(timeout_seconds=self.settings.request_timeout_seconds)
            except HTTPStatusError as e:
                raise self._status_error(e) from e
            except HTTPError as e:
                logger.warning("analysis_transport_error", error=str(e), error_type=type(e).__name__)
                raise ServiceError(reason=str(e)) from e

            try:
                return response.json()
            except ValueError as e:
                raise MalformedResponseError(details={"error": "response body is not JSON"}) from e

    @staticmethod
    def _status_error(error: HTTPStatusError) -> Exception:
        status_code = error.response.status_code
        logger.warning("analysis_http_error", status_code=status_code)

        if status_code in (401, 403):
            return InvalidCredentialError(details={"status_code": status_code})
        if status_code == 429:
            return RateLimitError(details={"status_code": status_code})
        return ServiceError(status_code=status_code, reason=error.response.reason_phrase)
