"""
Data schemas for language detections.

A detection run produces a Breakdown: every scanned file is assigned to exactly
one language, and records the strategy that decided it.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class LanguageType(str, Enum):
    """Type category of a language."""

    DATA = "data"
    MARKUP = "markup"
    PROGRAMMING = "programming"
    PROSE = "prose"


class DetectionStrategy(str, Enum):
    """How a file's language was determined, in the order strategies are tried."""

    FILENAME = "Filename"
    SHEBANG = "Shebang"
    EXTENSION = "Extension"
    HEURISTICS = "Heuristics"
    CLASSIFIER = "Classifier"

    def __str__(self) -> str:
        return self.value


class LanguageMetadata(BaseModel):
    """
    Static description of a language.

    Attributes:
        name: Display name (e.g. "Rust", "Markdown")
        language_type: Type category; only markup and programming are reported
        extensions: File extensions, lowercase with leading dot
        filenames: Exact file names that identify the language
        interpreters: Shebang interpreters that identify the language
    """

    name: str = Field(..., min_length=1)
    language_type: LanguageType
    extensions: tuple[str, ...] = ()
    filenames: tuple[str, ...] = ()
    interpreters: tuple[str, ...] = ()

    model_config = ConfigDict(frozen=True)


class FileDetection(BaseModel):
    """
    The result of classifying one file.

    Attributes:
        strategy: The strategy that produced the detection
        path: File path as produced by the scan (may start with "./")
    """

    strategy: DetectionStrategy
    path: str = Field(..., min_length=1)

    model_config = ConfigDict(frozen=True)


# Language name -> detections in scan order
Breakdown = dict[str, list[FileDetection]]

# (language name, detections), as ordered by the language grouper
LanguageGroup = tuple[str, list[FileDetection]]

# (strategy, [(language name, path), ...]) with pairs in ascending order
StrategyGroup = tuple[DetectionStrategy, list[tuple[str, str]]]
