"""
Prompt loader.

Reads the system instruction sent with every analysis request. The
bundled asset lives in phishhunter/prompts; a file path in settings
takes precedence so the rubric can be audited or swapped without code
changes.
"""

from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any, Optional

from phishhunter.core.config import get_settings
from phishhunter.core.exceptions import PromptLoadError
from phishhunter.core.logging import get_logger

logger = get_logger(__name__)

PROMPT_PACKAGE = "phishhunter.prompts"
SYSTEM_PROMPT_FILE = "system_prompt.txt"
USER_PROMPT_TEMPLATE = "다음 메시지를 분석해주세요:\n\n{message}"


@lru_cache(maxsize=8)
def _read_prompt(path: Optional[str]) -> str:
    try:
        if path:
            text = Path(path).read_text(encoding="utf-8")
        else:
            text = resources.files(PROMPT_PACKAGE).joinpath(SYSTEM_PROMPT_FILE).read_text(encoding="utf-8")
    except OSError as e:
        logger.error("system_prompt_load_failed", path=path or SYSTEM_PROMPT_FILE, error=str(e))
        raise PromptLoadError(details={"path": path or SYSTEM_PROMPT_FILE}) from e

    text = text.strip()
    if not text:
        raise PromptLoadError(details={"path": path or SYSTEM_PROMPT_FILE, "reason": "empty"})
    return text


def load_system_prompt(settings: Optional[Any] = None) -> str:
    """
    Load the system instruction text.

    Args:
        settings: Optional settings override

    Returns:
        Prompt text with surrounding whitespace removed

    Raises:
        PromptLoadError: If the file is missing, unreadable or empty
    """
    settings = settings or get_settings()
    return _read_prompt(settings.system_prompt_path)


def build_user_prompt(message: str) -> str:
    """Wrap the analyzed message in the user turn template."""
    return USER_PROMPT_TEMPLATE.format(message=message)
