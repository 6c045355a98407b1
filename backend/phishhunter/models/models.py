"""
PhishHunter - Base Data Models

This module defines the Pydantic models for type-safe data flow
between the heuristics, the analysis client and the presentation layer.

All models use Pydantic v2 for validation and serialization.
"""

from __future__ import annotations

from typing import List, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictFloat,
    StrictInt,
    StrictStr,
    field_validator,
    model_validator,
)

from phishhunter.core.enums import ErrorKind, RiskLevel, ScanStatus


HIGH_RISK_THRESHOLD = 80
MEDIUM_RISK_THRESHOLD = 40
MIN_RISK_SCORE = 0
MAX_RISK_SCORE = 100


def risk_level_for_score(score: int) -> RiskLevel:
    """
    Map a risk score to its level bucket.

    Examples:
        >>> risk_level_for_score(95)
        <RiskLevel.HIGH: 'HIGH'>
        >>> risk_level_for_score(40)
        <RiskLevel.MEDIUM: 'MEDIUM'>
        >>> risk_level_for_score(39)
        <RiskLevel.LOW: 'LOW'>
    """
    if score >= HIGH_RISK_THRESHOLD:
        return RiskLevel.HIGH
    if score >= MEDIUM_RISK_THRESHOLD:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


class RawAnalysisPayload(BaseModel):
    """
    Untrusted JSON object returned by the language model.

    Field types are strict: a score sent as a string or a boolean, or a
    list holding non-string items, is a shape error rather than something
    to coerce.
    """

    model_config = ConfigDict(extra="ignore")

    riskScore: Union[StrictInt, StrictFloat]
    riskLevel: StrictStr
    reasons: List[StrictStr]
    actionGuide: List[StrictStr]
    keywords: List[StrictStr]

    @field_validator("riskScore", mode="before")
    @classmethod
    def reject_boolean_score(cls, v: object) -> object:
        if isinstance(v, bool):
            raise ValueError("riskScore must be a number, not a boolean")
        return v

    @field_validator("riskScore")
    @classmethod
    def score_must_be_nonzero(cls, v: Union[int, float]) -> Union[int, float]:
        """A zero or NaN score is treated as a missing field."""
        if not v or v != v:
            raise ValueError("riskScore must be a non-zero number")
        return v

    @field_validator("riskLevel")
    @classmethod
    def level_must_be_present(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("riskLevel must be a non-empty string")
        return v


class AnalysisResult(BaseModel):
    """
    Normalized verdict for a single analyzed message.

    Instances are frozen. The constructor enforces the score range and
    the score/level consistency, so an AnalysisResult can never carry a
    level that disagrees with its score.

    Attributes:
        risk_score: Integer score in [0, 100]
        risk_level: Level derived from risk_score
        reasons: Why the message is (or is not) suspicious
        action_guide: Recommended remediation steps
        keywords: Flagged terms, in first-seen order without duplicates
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    risk_score: int = Field(..., ge=MIN_RISK_SCORE, le=MAX_RISK_SCORE, alias="riskScore")
    risk_level: RiskLevel = Field(..., alias="riskLevel")
    reasons: List[str] = Field(default_factory=list)
    action_guide: List[str] = Field(default_factory=list, alias="actionGuide")
    keywords: List[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def level_matches_score(self) -> "AnalysisResult":
        expected = risk_level_for_score(self.risk_score)
        if self.risk_level != expected:
            raise ValueError(
                f"risk_level {self.risk_level.value} inconsistent with score {self.risk_score}"
            )
        return self

    @property
    def is_high_risk(self) -> bool:
        return self.risk_level == RiskLevel.HIGH


class ValidationOutcome(BaseModel):
    """Pass/fail verdict of local input validation."""

    valid: bool
    error_kind: Optional[ErrorKind] = None
    message: Optional[str] = None

    @classmethod
    def ok(cls) -> "ValidationOutcome":
        return cls(valid=True)

    @classmethod
    def fail(cls, kind: ErrorKind, message: str) -> "ValidationOutcome":
        return cls(valid=False, error_kind=kind, message=message)


class LinkHint(BaseModel):
    """A URL found in the message and whether it matched a suspicious pattern."""

    url: str = Field(..., min_length=1)
    suspicious: bool = False


class ErrorInfo(BaseModel):
    """Failure description carried by a failed scan."""

    kind: ErrorKind
    message: str
    retryable: bool = True


class ScanReport(BaseModel):
    """
    Tagged outcome of a full message scan.

    Exactly one of result / error is set, matching status. Link hints are
    computed locally and are present whatever the analysis outcome.
    """

    status: ScanStatus
    result: Optional[AnalysisResult] = None
    error: Optional[ErrorInfo] = None
    links: List[LinkHint] = Field(default_factory=list)

    @model_validator(mode="after")
    def exactly_one_outcome(self) -> "ScanReport":
        if self.status == ScanStatus.SUCCESS and (self.result is None or self.error is not None):
            raise ValueError("successful scan must carry a result and no error")
        if self.status == ScanStatus.FAILED and (self.error is None or self.result is not None):
            raise ValueError("failed scan must carry an error and no result")
        return self

    @property
    def succeeded(self) -> bool:
        return self.status == ScanStatus.SUCCESS

    @property
    def suspicious_links(self) -> List[LinkHint]:
        return [link for link in self.links if link.suspicious]

    @classmethod
    def success(cls, result: AnalysisResult, links: List[LinkHint]) -> "ScanReport":
        return cls(status=ScanStatus.SUCCESS, result=result, links=links)

    @classmethod
    def failure(cls, error: ErrorInfo, links: List[LinkHint]) -> "ScanReport":
        return cls(status=ScanStatus.FAILED, error=error, links=links)
