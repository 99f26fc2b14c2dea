"""
Static language metadata for langsplit.

Each language carries its type category plus the extensions, exact filenames
and shebang interpreters the detection engine matches against. Lookups are
served from indexes built once at import time.
"""

from langsplit.schemas import LanguageMetadata, LanguageType

_P = LanguageType.PROGRAMMING
_M = LanguageType.MARKUP
_D = LanguageType.DATA
_T = LanguageType.PROSE

# Order matters: when several languages share an extension, candidates are
# returned in table order and the classifier breaks ties with it.
LANGUAGES: tuple[LanguageMetadata, ...] = (
    LanguageMetadata(name="C", language_type=_P, extensions=(".c", ".h")),
    LanguageMetadata(
        name="C++",
        language_type=_P,
        extensions=(".cpp", ".cc", ".cxx", ".hpp", ".hh", ".hxx", ".h"),
    ),
    LanguageMetadata(name="C#", language_type=_P, extensions=(".cs",)),
    LanguageMetadata(name="CSS", language_type=_M, extensions=(".css",)),
    LanguageMetadata(
        name="Dockerfile",
        language_type=_P,
        extensions=(".dockerfile",),
        filenames=("Dockerfile", "Containerfile"),
    ),
    LanguageMetadata(name="Go", language_type=_P, extensions=(".go",)),
    LanguageMetadata(name="HTML", language_type=_M, extensions=(".html", ".htm", ".xhtml")),
    LanguageMetadata(name="Java", language_type=_P, extensions=(".java",)),
    LanguageMetadata(
        name="JavaScript",
        language_type=_P,
        extensions=(".js", ".jsx", ".mjs", ".cjs"),
        interpreters=("node", "nodejs"),
    ),
    LanguageMetadata(
        name="JSON",
        language_type=_D,
        extensions=(".json",),
        filenames=(".babelrc", ".eslintrc.json"),
    ),
    LanguageMetadata(name="Kotlin", language_type=_P, extensions=(".kt", ".kts")),
    LanguageMetadata(name="Lua", language_type=_P, extensions=(".lua",), interpreters=("lua",)),
    LanguageMetadata(
        name="Makefile",
        language_type=_P,
        extensions=(".mk", ".mak"),
        filenames=("Makefile", "GNUmakefile", "makefile"),
        interpreters=("make",),
    ),
    LanguageMetadata(
        name="Markdown",
        language_type=_M,
        extensions=(".md", ".markdown"),
        filenames=("contents.lr",),
    ),
    LanguageMetadata(name="MATLAB", language_type=_P, extensions=(".m", ".matlab")),
    LanguageMetadata(name="Objective-C", language_type=_P, extensions=(".m", ".h")),
    LanguageMetadata(
        name="Perl",
        language_type=_P,
        extensions=(".pl", ".pm", ".t"),
        interpreters=("perl",),
    ),
    LanguageMetadata(name="PHP", language_type=_P, extensions=(".php",), interpreters=("php",)),
    LanguageMetadata(
        name="Prolog",
        language_type=_P,
        extensions=(".pl", ".pro", ".prolog"),
        interpreters=("swipl",),
    ),
    LanguageMetadata(
        name="Python",
        language_type=_P,
        extensions=(".py", ".pyi", ".pyw"),
        filenames=("SConstruct", "SConscript"),
        interpreters=("python", "python2", "python3"),
    ),
    LanguageMetadata(name="R", language_type=_P, extensions=(".r",), interpreters=("Rscript",)),
    LanguageMetadata(name="reStructuredText", language_type=_T, extensions=(".rst",)),
    LanguageMetadata(
        name="Ruby",
        language_type=_P,
        extensions=(".rb", ".rake", ".gemspec"),
        filenames=("Gemfile", "Rakefile"),
        interpreters=("ruby",),
    ),
    LanguageMetadata(name="Rust", language_type=_P, extensions=(".rs",)),
    LanguageMetadata(name="SCSS", language_type=_M, extensions=(".scss",)),
    LanguageMetadata(
        name="Shell",
        language_type=_P,
        extensions=(".sh", ".bash", ".zsh"),
        filenames=(".bashrc", ".bash_profile", ".zshrc", ".profile"),
        interpreters=("sh", "bash", "zsh", "dash", "ksh"),
    ),
    LanguageMetadata(name="SQL", language_type=_D, extensions=(".sql",)),
    LanguageMetadata(name="Swift", language_type=_P, extensions=(".swift",)),
    LanguageMetadata(
        name="Text",
        language_type=_T,
        extensions=(".txt",),
        filenames=("LICENSE", "COPYING"),
    ),
    LanguageMetadata(
        name="TOML",
        language_type=_D,
        extensions=(".toml",),
        filenames=("Cargo.lock", "Pipfile"),
    ),
    LanguageMetadata(
        name="TypeScript",
        language_type=_P,
        extensions=(".ts", ".tsx", ".mts", ".cts"),
        interpreters=("deno", "ts-node"),
    ),
    LanguageMetadata(name="XML", language_type=_D, extensions=(".xml", ".xsd", ".svg")),
    LanguageMetadata(
        name="YAML",
        language_type=_D,
        extensions=(".yml", ".yaml"),
        filenames=(".clang-format",),
    ),
)


def _build_index(attribute: str, lowercase: bool = False) -> dict[str, tuple[str, ...]]:
    index: dict[str, list[str]] = {}
    for language in LANGUAGES:
        for key in getattr(language, attribute):
            if lowercase:
                key = key.lower()
            index.setdefault(key, []).append(language.name)
    return {key: tuple(names) for key, names in index.items()}


_BY_NAME: dict[str, LanguageMetadata] = {language.name: language for language in LANGUAGES}
_BY_EXTENSION = _build_index("extensions", lowercase=True)
_BY_FILENAME = _build_index("filenames")
_BY_INTERPRETER = _build_index("interpreters")


def get_language_info(name: str) -> LanguageMetadata | None:
    """
    Look up the metadata of a language by its display name.

    Args:
        name: Language name (e.g. "Rust")

    Returns:
        The language metadata, or None for an unknown language
    """
    return _BY_NAME.get(name)


def languages_for_filename(filename: str) -> list[str]:
    """Languages identified by an exact file name (e.g. "Makefile")."""
    return list(_BY_FILENAME.get(filename, ()))


def languages_for_extension(extension: str) -> list[str]:
    """
    Languages that use a file extension.

    Args:
        extension: Extension with leading dot, any case (e.g. ".H")

    Returns:
        Candidate language names in table order (empty if unknown)
    """
    return list(_BY_EXTENSION.get(extension.lower(), ()))


def languages_for_interpreter(interpreter: str) -> list[str]:
    """Languages run by a shebang interpreter (e.g. "python3")."""
    return list(_BY_INTERPRETER.get(interpreter, ()))
