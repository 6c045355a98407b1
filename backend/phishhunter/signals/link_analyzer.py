"""
PhishHunter - Link Analyzer

Extracts URLs from a message and flags those matching known
look-alike or URL-shortener patterns.

Detection Methods:
    - Character-substitution look-alikes of Kakao / Naver domains
    - Known URL shortener hosts

Example Threats Detected:
    - http://kakaao-safe.com/verify (extra 'a' in kakao)
    - http://kakao-pay.top/login (brand plus suffix)
    - https://bit.ly/3abcd (hidden destination)

The pattern list is static and advisory. A clean result is not a
guarantee that a link is safe.
"""

from __future__ import annotations

import re
from typing import List, Pattern, Tuple

from phishhunter.core.logging import get_logger
from phishhunter.models.models import LinkHint

log = get_logger(__name__)


# Scheme followed by any run of non-whitespace. Trailing punctuation such
# as ")" or "," is kept as part of the match.
URL_PATTERN: Pattern[str] = re.compile(r"https?://\S+")

# Ordered; any single match marks the URL as suspicious.
SUSPICIOUS_DOMAIN_PATTERNS: Tuple[Pattern[str], ...] = (
    re.compile(r"kakaao?\.", re.IGNORECASE),
    re.compile(r"naverl?\.", re.IGNORECASE),
    re.compile(r"kakao[^t]", re.IGNORECASE),
    re.compile(r"bit\.ly", re.IGNORECASE),
    re.compile(r"tinyurl\.", re.IGNORECASE),
    re.compile(r"t\.co", re.IGNORECASE),
    re.compile(r"goo\.gl", re.IGNORECASE),
)


def extract_urls(text: str) -> List[str]:
    """
    Extract every http(s) URL from text, in order of appearance.

    Args:
        text: Arbitrary message text

    Returns:
        List of matched substrings, verbatim and not deduplicated

    Examples:
        >>> extract_urls("링크: http://kakaao-safe.com/verify 확인하세요")
        ['http://kakaao-safe.com/verify']
        >>> extract_urls("no links here")
        []
    """
    return URL_PATTERN.findall(text)


def is_suspicious_domain(url: str) -> bool:
    """
    Check a URL against the fixed suspicious-domain patterns.

    Args:
        url: A single URL string

    Returns:
        True if any pattern matches
    """
    return any(pattern.search(url) for pattern in SUSPICIOUS_DOMAIN_PATTERNS)


def matched_patterns(url: str) -> List[str]:
    """Return the source of every suspicious pattern matching url."""
    return [pattern.pattern for pattern in SUSPICIOUS_DOMAIN_PATTERNS if pattern.search(url)]


def analyze_links(text: str) -> List[LinkHint]:
    """
    Extract URLs from text and classify each one.

    Args:
        text: Arbitrary message text

    Returns:
        One LinkHint per extracted URL, in text order
    """
    hints = []
    for url in extract_urls(text):
        suspicious = is_suspicious_domain(url)
        if suspicious:
            log.debug("suspicious_link_detected", url=url, patterns=matched_patterns(url))
        hints.append(LinkHint(url=url, suspicious=suspicious))
    return hints
