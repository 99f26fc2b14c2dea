"""
langsplit - language breakdown reports for a source tree.

This package provides a CLI tool and library that detects the language of
every file under a directory and reports how the files split across
languages and across detection strategies.

Main components:
- cli: Command-line interface
- core: Detection engine, language metadata and reports
- schemas: Data models for detections
- config: Report options
- utils: Utilities (logging, etc.)

Public API (for use as a library):
"""

from langsplit.config import ReportOptions
from langsplit.core import (
    aggregate_strategies,
    get_language_breakdown,
    get_language_info,
    group_languages,
    print_file_breakdown,
    print_language_split,
    print_strategy_breakdown,
    strip_relative_parts,
)
from langsplit.schemas import DetectionStrategy, FileDetection, LanguageMetadata, LanguageType

__version__ = "0.1.0"

__all__ = [
    # Schemas
    "DetectionStrategy",
    "FileDetection",
    "LanguageMetadata",
    "LanguageType",
    # Config
    "ReportOptions",
    # Core
    "get_language_breakdown",
    "get_language_info",
    "group_languages",
    "print_language_split",
    "print_file_breakdown",
    "aggregate_strategies",
    "print_strategy_breakdown",
    "strip_relative_parts",
]
