"""Shared utilities for batch reporting."""

from src.utils.reporting import ReportFormatter

__all__ = [
    'ReportFormatter',
]
