"""Tests for core.heuristics module."""

import pytest

from langsplit.core.heuristics import apply_heuristics, classify

H_CANDIDATES = ["C", "C++", "Objective-C"]
M_CANDIDATES = ["MATLAB", "Objective-C"]


class TestApplyHeuristics:
    """Tests for apply_heuristics function."""

    @pytest.mark.parametrize(
        ("extension", "content", "candidates", "expected"),
        [
            (".h", "@interface Foo : NSObject\n@end\n", H_CANDIDATES, "Objective-C"),
            (".h", "#include <vector>\nint f();\n", H_CANDIDATES, "C++"),
            (".h", "namespace util {\n}\n", H_CANDIDATES, "C++"),
            (".m", "#import \"Foo.h\"\n@implementation Foo\n@end\n", M_CANDIDATES, "Objective-C"),
            (".m", "function y = square(x)\n  y = x.^2;\nend\n", M_CANDIDATES, "MATLAB"),
            (".pl", "main :- write(hello), nl.\n", ["Perl", "Prolog"], "Prolog"),
            (".pl", "use strict;\nmy $x = 1;\n", ["Perl", "Prolog"], "Perl"),
        ],
    )
    def test_rules(
        self, extension: str, content: str, candidates: list[str], expected: str
    ) -> None:
        assert apply_heuristics(extension, content, candidates) == expected

    def test_no_rule_fires(self) -> None:
        assert apply_heuristics(".h", "int add(int a, int b);\n", H_CANDIDATES) is None

    def test_rule_ignored_when_language_not_candidate(self) -> None:
        assert apply_heuristics(".h", "@interface Foo\n@end\n", ["C", "C++"]) is None

    def test_extension_without_rules(self) -> None:
        assert apply_heuristics(".rs", "fn main() {}", ["Rust"]) is None


class TestClassify:
    """Tests for classify function."""

    def test_highest_score_wins(self) -> None:
        content = "#include <stdio.h>\n#define N 4\ntypedef struct s { void *p; } s;\n"

        assert classify(content, H_CANDIDATES) == "C"

    def test_tie_goes_to_first_candidate(self) -> None:
        assert classify("int add(int a, int b);\n", H_CANDIDATES) == "C"

    def test_perl_tokens(self) -> None:
        content = "sub greet {\n  my $name = shift;\n  print $name;\n}\n"

        assert classify(content, ["Perl", "Prolog"]) == "Perl"
