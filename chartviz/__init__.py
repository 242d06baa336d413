"""Guarded operations, function-text validation, numerical analysis and chart interface models."""

__version__ = "0.1.0"