"""
Language and strategy reports for langsplit.

This module turns a Breakdown into:
1. A percentage split of files per language
2. A per-language file listing
3. A per-strategy file listing

Ordering is always explicit (count descending, then name ascending) so the
same set of detections renders byte-identical output regardless of the
order in which files were scanned.
"""

import os
from collections.abc import Callable, Iterable

from rich.console import Console
from rich.style import Style
from rich.segment import Segment, Segments

from langsplit.config import ReportOptions
from langsplit.core.languages import get_language_info
from langsplit.schemas import (
    Breakdown,
    DetectionStrategy,
    LanguageGroup,
    LanguageMetadata,
    LanguageType,
    StrategyGroup,
)
from langsplit.utils.logger import get_logger

logger = get_logger(__name__)

TITLE_STYLE = Style(color="magenta")
DEFAULT_STYLE = Style()
LANGUAGE_STYLE = Style(color="green")

REPORTED_TYPES = frozenset({LanguageType.MARKUP, LanguageType.PROGRAMMING})

_RELATIVE_PREFIXES = ("./",) if os.sep == "/" else ("./", "." + os.sep)


def strip_relative_parts(path: str) -> str:
    """Strip a single leading "./" from a path for display."""
    for prefix in _RELATIVE_PREFIXES:
        if path.startswith(prefix):
            return path[len(prefix):]
    return path


def group_languages(
    breakdown: Breakdown,
    language_info: Callable[[str], LanguageMetadata | None] = get_language_info,
) -> list[LanguageGroup]:
    """
    Keep markup and programming languages and order them by file count.

    Args:
        breakdown: Detections keyed by language name
        language_info: Metadata lookup; languages it doesn't know are dropped

    Returns:
        (language, detections) pairs, most files first, ties by name
    """
    groups: list[LanguageGroup] = []
    for language, detections in breakdown.items():
        metadata = language_info(language)
        if metadata is None or metadata.language_type not in REPORTED_TYPES:
            continue
        groups.append((language, list(detections)))

    groups.sort(key=lambda group: (-len(group[1]), group[0]))
    return groups


def compute_language_split(groups: list[LanguageGroup]) -> list[tuple[str, float]]:
    """
    Compute each language's share of the total file count.

    Args:
        groups: Output of group_languages

    Returns:
        (language, percentage) pairs in the same order; empty when there are no files
    """
    total = sum(len(detections) for _, detections in groups)
    if total == 0:
        return []
    return [(language, len(detections) * 100 / total) for language, detections in groups]


def print_language_split(groups: list[LanguageGroup], console: Console) -> None:
    """Print one "<percentage>% <language>" line per language."""
    for language, percentage in compute_language_split(groups):
        _write_line(console, (f"{percentage:.2f}% {language}", DEFAULT_STYLE))


def print_file_breakdown(
    groups: list[LanguageGroup],
    options: ReportOptions,
    console: Console,
) -> None:
    """
    Print each language with the files detected as it.

    Args:
        groups: Output of group_languages
        options: Filter and condensed flag
        console: Output sink

    Raises:
        OSError: If the console rejects a write; printing stops at that point
    """
    try:
        for language, detections in groups:
            if not options.matches(language):
                continue

            _write_header(console, language, len(detections))
            if not options.condensed:
                for detection in detections:
                    _write_line(console, (strip_relative_parts(detection.path), DEFAULT_STYLE))
                console.print()
    except OSError as e:
        logger.error(
            f"Failed to write file breakdown: {e}",
            extra={"context": {"error": str(e)}},
        )
        raise


def aggregate_strategies(groups: Iterable[LanguageGroup]) -> list[StrategyGroup]:
    """
    Repartition detections by the strategy that produced them.

    Args:
        groups: (language, detections) pairs

    Returns:
        (strategy, [(language, path), ...]) with pairs in ascending order,
        largest bucket first, ties by strategy name
    """
    buckets: dict[DetectionStrategy, list[tuple[str, str]]] = {}
    for language, detections in groups:
        for detection in detections:
            buckets.setdefault(detection.strategy, []).append((language, detection.path))

    strategy_groups: list[StrategyGroup] = [
        (strategy, sorted(pairs)) for strategy, pairs in buckets.items()
    ]
    strategy_groups.sort(key=lambda group: (-len(group[1]), group[0].value))
    return strategy_groups


def print_strategy_breakdown(
    groups: list[LanguageGroup],
    options: ReportOptions,
    console: Console,
) -> None:
    """
    Print each detection strategy with the files it decided.

    Args:
        groups: Output of group_languages
        options: Filter and condensed flag
        console: Output sink

    Raises:
        OSError: If the console rejects a write; printing stops at that point
    """
    try:
        for strategy, pairs in aggregate_strategies(groups):
            if not options.matches(strategy.value):
                continue

            _write_header(console, strategy.value, len(pairs))
            if not options.condensed:
                for language, path in pairs:
                    _write_line(
                        console,
                        (strip_relative_parts(path), DEFAULT_STYLE),
                        (f" ({language})", LANGUAGE_STYLE),
                    )
                console.print()
    except OSError as e:
        logger.error(
            f"Failed to write strategy breakdown: {e}",
            extra={"context": {"error": str(e)}},
        )
        raise


def _write_header(console: Console, title: str, count: int) -> None:
    _write_line(console, (title, TITLE_STYLE), (f" ({count})", DEFAULT_STYLE))


def _write_line(console: Console, *parts: tuple[str, Style]) -> None:
    # Segments are written verbatim: no markup, tab expansion or control-code stripping
    segments = [Segment(text, style) for text, style in parts]
    segments.append(Segment.line())
    console.print(Segments(segments), soft_wrap=True)
