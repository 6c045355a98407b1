"""
PhishHunter - Input Validation

Local gate applied to a message before it is sent for analysis.
Validation is pure: the same text always yields the same outcome.
"""

from __future__ import annotations

from typing import Any, Optional

from phishhunter.core.config import get_settings
from phishhunter.core.enums import ErrorKind
from phishhunter.models.models import ValidationOutcome


EMPTY_INPUT_MESSAGE = "메시지를 입력해주세요."
TOO_SHORT_MESSAGE = "메시지는 최소 {limit}자 이상이어야 합니다."
TOO_LONG_MESSAGE = "메시지는 최대 {limit}자까지 입력 가능합니다."


def validate_message(text: str, settings: Optional[Any] = None) -> ValidationOutcome:
    """
    Check that a message is non-empty and within the length limits.

    Rules are applied in order to the whitespace-trimmed text:
    empty, then too short, then too long.

    Args:
        text: Raw message as entered by the user
        settings: Optional settings override

    Returns:
        ValidationOutcome with the failing ErrorKind, if any

    Examples:
        >>> validate_message("   ").error_kind
        <ErrorKind.EMPTY_INPUT: 'EMPTY_INPUT'>
        >>> validate_message("짧음").error_kind
        <ErrorKind.TOO_SHORT: 'TOO_SHORT'>
        >>> validate_message("안녕하세요 반갑습니다").valid
        True
    """
    settings = settings or get_settings()
    trimmed = text.strip()

    if not trimmed:
        return ValidationOutcome.fail(ErrorKind.EMPTY_INPUT, EMPTY_INPUT_MESSAGE)

    if len(trimmed) < settings.min_message_length:
        return ValidationOutcome.fail(
            ErrorKind.TOO_SHORT,
            TOO_SHORT_MESSAGE.format(limit=settings.min_message_length),
        )

    if len(trimmed) > settings.max_message_length:
        return ValidationOutcome.fail(
            ErrorKind.TOO_LONG,
            TOO_LONG_MESSAGE.format(limit=settings.max_message_length),
        )

    return ValidationOutcome.ok()
