"""
Disambiguation of files whose extension is shared by several languages.

Two strategies live here:
1. Heuristics: ordered regex rules per extension. The first rule whose
   pattern matches the content decides, provided its language is a candidate.
2. Classifier: token scoring against small per-language keyword sets, used
   when no heuristic rule fires.
"""

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class HeuristicRule:
    """A content pattern that identifies one language."""

    language: str
    pattern: re.Pattern[str]


def _rule(language: str, pattern: str) -> HeuristicRule:
    return HeuristicRule(language=language, pattern=re.compile(pattern, re.MULTILINE))


HEURISTICS: dict[str, tuple[HeuristicRule, ...]] = {
    ".h": (
        _rule("Objective-C", r"^\s*(@interface|@end|@property|@protocol|#import\s)"),
        _rule(
            "C++",
            r"^\s*#\s*include\s*<(cstdint|cstdlib|string|vector|map|memory|iostream|algorithm)>"
            r"|^\s*(template\s*<|namespace\s+\w+|class\s+\w+\s*(:|\{))"
            r"|\bstd::",
        ),
    ),
    ".m": (
        _rule("Objective-C", r"^\s*(@interface|@implementation|@end|#import\s)"),
        _rule("MATLAB", r"^\s*function\s+(\[[^\]]*\]|\w+)\s*=|^\s*%[%{ ]|^\s*end\s*$"),
    ),
    ".pl": (
        _rule("Prolog", r"^[^#\n]*:-"),
        _rule("Perl", r"\buse\s+(strict|warnings)\b|^\s*my\s+[$@%]|^\s*sub\s+\w+\s*\{"),
    ),
}

_TOKEN_RE = re.compile(r"[@#]?[A-Za-z_][A-Za-z0-9_]*")

# Tokens that are frequent in one language and rare in its look-alikes.
CLASSIFIER_TOKENS: dict[str, frozenset[str]] = {
    "C": frozenset(
        {"#include", "#define", "typedef", "struct", "malloc", "free", "printf", "sizeof",
         "NULL", "void"}
    ),
    "C++": frozenset(
        {"class", "namespace", "template", "typename", "std", "public", "private", "virtual",
         "nullptr", "auto"}
    ),
    "Objective-C": frozenset(
        {
            "@interface",
            "@implementation",
            "@end",
            "@property",
            "#import",
            "NSString",
            "NSObject",
            "self",
            "nil",
            "YES",
            "NO",
        }
    ),
    "MATLAB": frozenset(
        {"function", "end", "disp", "zeros", "ones", "size", "length", "fprintf",
         "elseif", "nargin"}
    ),
    "Perl": frozenset(
        {"my", "use", "sub", "strict", "warnings", "print", "foreach", "elsif", "unless", "local"}
    ),
    "Prolog": frozenset(
        {"is", "fail", "true", "assert", "retract", "findall", "format", "nl", "write", "halt"}
    ),
}


def apply_heuristics(extension: str, content: str, candidates: list[str]) -> str | None:
    """
    Pick a language for ambiguous content with the extension's regex rules.

    Args:
        extension: Lowercase extension with leading dot
        content: File content (possibly truncated)
        candidates: Languages still in the running

    Returns:
        The chosen language, or None if no rule decided
    """
    for rule in HEURISTICS.get(extension, ()):
        if rule.language in candidates and rule.pattern.search(content):
            return rule.language
    return None


def classify(content: str, candidates: list[str]) -> str:
    """
    Score each candidate by how many of its characteristic tokens occur.

    Ties, including the all-zero case, go to the earliest candidate.

    Args:
        content: File content (possibly truncated)
        candidates: Non-empty list of candidate languages, in table order

    Returns:
        The highest-scoring candidate
    """
    tokens = _TOKEN_RE.findall(content)
    best, best_score = candidates[0], -1
    for language in candidates:
        vocabulary = CLASSIFIER_TOKENS.get(language, frozenset())
        score = sum(1 for token in tokens if token in vocabulary)
        if score > best_score:
            best, best_score = language, score
    return best
