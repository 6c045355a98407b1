"""Versioned prompt assets shipped with the package."""
