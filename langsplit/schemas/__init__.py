"""
Data schemas for langsplit.

This module exposes the public API for all data models used in the reporting pipeline.
"""

from .detection import (
    Breakdown,
    DetectionStrategy,
    FileDetection,
    LanguageGroup,
    LanguageMetadata,
    LanguageType,
    StrategyGroup,
)

__all__ = [
    "Breakdown",
    "DetectionStrategy",
    "FileDetection",
    "LanguageGroup",
    "LanguageMetadata",
    "LanguageType",
    "StrategyGroup",
]
