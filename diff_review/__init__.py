"""LLM-backed code review for diffs."""

__version__ = "0.1.0"
