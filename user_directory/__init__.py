"""User directory with Relay cursor pagination."""

__version__ = "0.1.0"
