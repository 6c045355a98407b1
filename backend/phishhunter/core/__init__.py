"""Configuration, logging and exception infrastructure."""
