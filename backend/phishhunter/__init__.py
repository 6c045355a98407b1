"""PhishHunter Lite: smishing/phishing message analysis."""

__version__ = "1.0.0"
