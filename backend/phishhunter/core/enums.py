"""
Enumeration Module
==================

Defines enumerations used across the application.
"""

from enum import Enum


class RiskLevel(str, Enum):
    """Coarse risk buckets derived from the risk score."""

    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class ErrorKind(str, Enum):
    """Failure kinds surfaced to callers of the analysis pipeline."""

    EMPTY_INPUT = "EMPTY_INPUT"
    TOO_SHORT = "TOO_SHORT"
    TOO_LONG = "TOO_LONG"
    MISSING_CREDENTIAL = "MISSING_CREDENTIAL"
    INVALID_CREDENTIAL = "INVALID_CREDENTIAL"
    RATE_LIMITED = "RATE_LIMITED"
    TIMEOUT = "TIMEOUT"
    EMPTY_RESPONSE = "EMPTY_RESPONSE"
    MALFORMED_RESPONSE = "MALFORMED_RESPONSE"
    INVALID_SHAPE = "INVALID_SHAPE"
    SERVICE_ERROR = "SERVICE_ERROR"
    UNKNOWN = "UNKNOWN"


class ScanStatus(str, Enum):
    """Outcome tag for a full message scan."""

    SUCCESS = "success"
    FAILED = "failed"
