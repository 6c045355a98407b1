"""
Response parser for language-model completions.

This is the only place where untrusted model output becomes an
AnalysisResult. Parsing runs in three steps:

1. Decode the completion content as a JSON object.
2. Validate it against RawAnalysisPayload.
3. Normalize: clamp the score into [0, 100] and recompute the level
   from the clamped score. The recomputed level replaces whatever
   level the model sent; this override is intentional.
"""

import json
import math
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from phishhunter.core.exceptions import (
    EmptyResponseError,
    InvalidShapeError,
    MalformedResponseError,
)
from phishhunter.core.logging import get_logger
from phishhunter.models.models import (
    MAX_RISK_SCORE,
    MIN_RISK_SCORE,
    AnalysisResult,
    RawAnalysisPayload,
    risk_level_for_score,
)

logger = get_logger(__name__)


def extract_content(completion: Any) -> str:
    """
    Pull the first choice's message content out of a chat completion body.

    Raises:
        EmptyResponseError: If the body has no choices or the content is empty
    """
    try:
        content = completion["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        content = None

    if not isinstance(content, str) or not content.strip():
        raise EmptyResponseError()
    return content


def decode_payload(content: str) -> Dict[str, Any]:
    """
    Decode completion content into a JSON object.

    Raises:
        MalformedResponseError: If content is not valid JSON or not an object
    """
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        logger.warning("completion_not_json", error=str(e), content_length=len(content))
        raise MalformedResponseError(details={"error": str(e)}) from e

    if not isinstance(data, dict):
        raise MalformedResponseError(details={"error": f"expected object, got {type(data).__name__}"})
    return data


def validate_payload(data: Dict[str, Any]) -> RawAnalysisPayload:
    """
    Check that all five result fields are present with the expected types.

    Raises:
        InvalidShapeError: On any missing or mistyped field
    """
    try:
        return RawAnalysisPayload.model_validate(data)
    except ValidationError as e:
        errors = [
            {"field": ".".join(str(p) for p in err["loc"]), "error": err["msg"]}
            for err in e.errors()
        ]
        logger.warning("completion_invalid_shape", errors=errors)
        raise InvalidShapeError(details={"errors": errors}) from e


def clamp_score(raw_score: float) -> int:
    """
    Bound a raw score to [0, 100] and round it to an integer.

    Examples:
        >>> clamp_score(150)
        100
        >>> clamp_score(-5)
        0
        >>> clamp_score(72.6)
        73
    """
    bounded = max(MIN_RISK_SCORE, min(MAX_RISK_SCORE, raw_score))
    return int(math.floor(bounded + 0.5))


def _dedupe(items: List[str]) -> List[str]:
    seen = set()
    unique = []
    for item in items:
        if item not in seen:
            seen.add(item)
            unique.append(item)
    return unique


def normalize_payload(payload: RawAnalysisPayload) -> AnalysisResult:
    """
    Turn a structurally valid payload into a consistent AnalysisResult.

    The level is always recomputed from the clamped score.
    """
    score = clamp_score(payload.riskScore)
    level = risk_level_for_score(score)

    if score != payload.riskScore:
        logger.info("risk_score_clamped", raw_score=payload.riskScore, score=score)
    if level.value != payload.riskLevel:
        logger.info("risk_level_overridden", raw_level=payload.riskLevel, level=level.value, score=score)

    return AnalysisResult(
        risk_score=score,
        risk_level=level,
        reasons=list(payload.reasons),
        action_guide=list(payload.actionGuide),
        keywords=_dedupe(payload.keywords),
    )


def parse_completion_content(content: Optional[str]) -> AnalysisResult:
    """
    Parse raw completion content into a normalized AnalysisResult.

    Args:
        content: The assistant message text

    Returns:
        Normalized AnalysisResult

    Raises:
        EmptyResponseError: If content is missing or blank
        MalformedResponseError: If content is not a JSON object
        InvalidShapeError: If the object does not match the schema
    """
    if content is None or not content.strip():
        raise EmptyResponseError()
    data = decode_payload(content)
    payload = validate_payload(data)
    return normalize_payload(payload)


def parse_completion(completion: Any) -> AnalysisResult:
    """Parse a full chat completion response body."""
    return parse_completion_content(extract_content(completion))
