"""
Centralized Exception Handling Module
=====================================

Defines custom exception classes for the analysis pipeline.

Every exception carries an ErrorKind so callers can branch on the
failure without parsing messages, plus a user-facing message that can
be shown as-is.

Usage:
    raise MissingCredentialError()
    raise InvalidShapeError(details={"errors": [...]})
"""

from typing import Any, Dict, Optional

from phishhunter.core.enums import ErrorKind


class PhishHunterException(Exception):
    """
    Base exception class for PhishHunter.

    All custom exceptions should inherit from this class.
    """

    kind: ErrorKind = ErrorKind.UNKNOWN
    default_message: str = "분석 중 오류가 발생했습니다."
    retryable: bool = True

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "message": self.message,
            "details": self.details,
        }


# ==========================
# Configuration Exceptions
# ==========================

class MissingCredentialError(PhishHunterException):
    """Raised when no API key is configured."""

    kind = ErrorKind.MISSING_CREDENTIAL
    default_message = "OpenAI API 키가 설정되지 않았습니다. .env 파일을 확인해주세요."
    retryable = False


class PromptLoadError(PhishHunterException):
    """Raised when the system prompt asset cannot be read."""

    kind = ErrorKind.UNKNOWN
    default_message = "분석 지침 파일을 읽을 수 없습니다."
    retryable = False


# ==========================
# Service Exceptions
# ==========================

class InvalidCredentialError(PhishHunterException):
    """Raised when the service rejects the API key."""

    kind = ErrorKind.INVALID_CREDENTIAL
    default_message = "OpenAI API 키가 유효하지 않습니다."
    retryable = False


class RateLimitError(PhishHunterException):
    """Raised when the service reports an exceeded quota or rate limit."""

    kind = ErrorKind.RATE_LIMITED
    default_message = "API 사용 한도를 초과했습니다. 잠시 후 다시 시도해주세요."


class AnalysisTimeoutError(PhishHunterException):
    """Raised when the service does not answer before the deadline."""

    kind = ErrorKind.TIMEOUT
    default_message = "요청 시간이 초과되었습니다. 네트워크를 확인하고 다시 시도해주세요."

    def __init__(self, timeout_seconds: Optional[float] = None):
        details = {}
        if timeout_seconds is not None:
            details["timeout_seconds"] = timeout_seconds
        super().__init__(details=details)


class ServiceError(PhishHunterException):
    """Raised on transport failures or unexpected HTTP statuses."""

    kind = ErrorKind.SERVICE_ERROR
    default_message = "AI 서비스와 통신하는 중 오류가 발생했습니다. 잠시 후 다시 시도해주세요."

    def __init__(self, status_code: Optional[int] = None, reason: Optional[str] = None):
        details: Dict[str, Any] = {}
        if status_code is not None:
            details["status_code"] = status_code
        if reason:
            details["reason"] = reason
        super().__init__(details=details)


# ==========================
# Response Exceptions
# ==========================

class EmptyResponseError(PhishHunterException):
    """Raised when the completion carries no content."""

    kind = ErrorKind.EMPTY_RESPONSE
    default_message = "AI 응답을 받지 못했습니다."


class MalformedResponseError(PhishHunterException):
    """Raised when the completion content is not a JSON object."""

    kind = ErrorKind.MALFORMED_RESPONSE
    default_message = "AI 응답을 해석할 수 없습니다."


class InvalidShapeError(PhishHunterException):
    """Raised when the JSON object does not match the result schema."""

    kind = ErrorKind.INVALID_SHAPE
    default_message = "AI 응답 형식이 올바르지 않습니다."


class UnknownAnalysisError(PhishHunterException):
    """Fallback for failures with no specific kind."""

    kind = ErrorKind.UNKNOWN
    default_message = "알 수 없는 오류가 발생했습니다."
