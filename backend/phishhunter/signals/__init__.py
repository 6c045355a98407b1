"""Local, network-free heuristics run on the raw message text."""

from .link_analyzer import analyze_links, extract_urls, is_suspicious_domain
from .validators import validate_message

__all__ = [
    "analyze_links",
    "extract_urls",
    "is_suspicious_domain",
    "validate_message",
]
