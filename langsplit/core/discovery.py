"""
File discovery and language detection for langsplit.

This module handles:
1. Recursive scanning of a directory tree
2. Per-file language detection with a strategy cascade
   (filename, shebang, extension, heuristics, classifier)
3. Grouping detections into a Breakdown keyed by language
"""

import os
import re
from collections.abc import Iterator
from pathlib import Path

from langsplit.core.heuristics import apply_heuristics, classify
from langsplit.core.languages import (
    languages_for_extension,
    languages_for_filename,
    languages_for_interpreter,
)
from langsplit.schemas import Breakdown, DetectionStrategy, FileDetection
from langsplit.utils.logger import get_logger

logger = get_logger(__name__)

# Directories that never hold first-party sources
DEFAULT_EXCLUDES = frozenset(
    {
        "node_modules",
        ".git",
        ".hg",
        ".svn",
        ".venv",
        "venv",
        "__pycache__",
        ".pytest_cache",
        ".mypy_cache",
        "dist",
        "build",
        "target",
        ".tox",
        "vendor",
    }
)

# Only the head of a file is inspected by content-based strategies
CONTENT_SAMPLE_BYTES = 51200

_VERSION_SUFFIX_RE = re.compile(r"[\d.]+$")


def get_language_breakdown(
    root: str | Path,
    exclude_patterns: set[str] | None = None,
) -> Breakdown:
    """
    Detect the language of every file below a directory, or of a single file.

    Args:
        root: Directory or file to scan, as given by the user
        exclude_patterns: Extra directory names to skip

    Returns:
        Mapping of language name to detections, in scan order. Paths are
        joined onto ``root`` as given, so a root of "." yields "./"-prefixed
        paths; a file root is recorded exactly as given. A root that doesn't
        exist yields an empty mapping.
    """
    root_path = Path(root)
    if not root_path.exists():
        logger.warning(
            f"Path does not exist, nothing to scan: {root}",
            extra={"context": {"root_path": str(root)}},
        )
        return {}

    excludes = set(DEFAULT_EXCLUDES)
    if exclude_patterns:
        excludes.update(exclude_patterns)

    breakdown: Breakdown = {}
    skipped = 0

    for file_path, display_path in _walk(root, root_path, excludes):
        detected = detect(file_path)
        if detected is None:
            skipped += 1
            continue

        language, strategy = detected
        breakdown.setdefault(language, []).append(
            FileDetection(strategy=strategy, path=display_path)
        )

    total_files = sum(len(detections) for detections in breakdown.values())
    logger.info(
        f"Detected {total_files} files across {len(breakdown)} languages",
        extra={
            "context": {
                "root_path": str(root),
                "skipped": skipped,
                "files_by_language": {lang: len(d) for lang, d in breakdown.items()},
            }
        },
    )

    return breakdown


def _walk(root: str | Path, root_path: Path, excludes: set[str]) -> Iterator[tuple[Path, str]]:
    """Yield (file, display path) for a file root or every file under a directory root."""
    if root_path.is_file():
        yield root_path, str(root)
        return

    for file_path in sorted(root_path.rglob("*")):
        if not file_path.is_file():
            continue

        if _should_exclude(file_path, root_path, excludes):
            continue

        yield file_path, os.path.join(str(root), str(file_path.relative_to(root_path)))


def detect(file_path: Path) -> tuple[str, DetectionStrategy] | None:
    """
    Detect the language of a single file.

    Strategies are tried in order; the first one that narrows the candidates
    to a single language wins.

    Args:
        file_path: Path to the file

    Returns:
        (language, strategy) or None when no strategy recognises the file
    """
    by_filename = languages_for_filename(file_path.name)
    if len(by_filename) == 1:
        return by_filename[0], DetectionStrategy.FILENAME

    try:
        content = _read_sample(file_path)
    except OSError as e:
        logger.debug(
            f"Skipping unreadable file: {file_path}",
            extra={"context": {"file": str(file_path), "error": str(e)}},
        )
        return None

    by_shebang = _languages_for_shebang(content)
    if len(by_shebang) == 1:
        return by_shebang[0], DetectionStrategy.SHEBANG

    extension = file_path.suffix.lower()
    candidates = by_filename or languages_for_extension(extension)
    if not candidates:
        return None
    if len(candidates) == 1:
        return candidates[0], DetectionStrategy.EXTENSION

    if "\x00" in content:
        return None

    language = apply_heuristics(extension, content, candidates)
    if language is not None:
        return language, DetectionStrategy.HEURISTICS

    return classify(content, candidates), DetectionStrategy.CLASSIFIER


def _read_sample(file_path: Path) -> str:
    """Read the head of a file as text, replacing undecodable bytes."""
    with file_path.open("rb") as f:
        data = f.read(CONTENT_SAMPLE_BYTES)
    return data.decode("utf-8", errors="replace")


def _languages_for_shebang(content: str) -> list[str]:
    """
    Resolve the interpreter named by a "#!" first line.

    Handles "/usr/bin/env [-S] python3" and version suffixes like "python3.11".
    """
    if not content.startswith("#!"):
        return []

    parts = content[2:].splitlines()[0].split() if content[2:].strip() else []
    if not parts:
        return []

    interpreter = os.path.basename(parts[0])
    if interpreter == "env":
        args = [part for part in parts[1:] if not part.startswith("-") and "=" not in part]
        if not args:
            return []
        interpreter = os.path.basename(args[0])

    languages = languages_for_interpreter(interpreter)
    if not languages:
        languages = languages_for_interpreter(_VERSION_SUFFIX_RE.sub("", interpreter))
    return languages


def _should_exclude(file_path: Path, root_path: Path, exclude_patterns: set[str]) -> bool:
    """
    Check if a file lies inside an excluded directory.

    Args:
        file_path: The file to check
        root_path: The root directory being scanned
        exclude_patterns: Set of directory names to exclude

    Returns:
        True if the file should be excluded, False otherwise
    """
    try:
        relative_path = file_path.relative_to(root_path)
    except ValueError:
        # File is not relative to root_path, exclude it
        return True

    return any(part in exclude_patterns for part in relative_path.parts[:-1])
