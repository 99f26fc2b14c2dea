"""
Core functionality for langsplit.

This module exposes the public API for language detection and reporting.
"""

from .discovery import detect, get_language_breakdown
from .languages import get_language_info
from .report import (
    aggregate_strategies,
    compute_language_split,
    group_languages,
    print_file_breakdown,
    print_language_split,
    print_strategy_breakdown,
    strip_relative_parts,
)

__all__ = [
    "get_language_breakdown",
    "detect",
    "get_language_info",
    "group_languages",
    "compute_language_split",
    "print_language_split",
    "print_file_breakdown",
    "aggregate_strategies",
    "print_strategy_breakdown",
    "strip_relative_parts",
]
