"""Supported source languages and their file extensions."""

from __future__ import annotations

from enum import Enum


class Language(Enum):
    """A source language that can be parsed."""

    TYPESCRIPT = "typescript"
    TSX = "tsx"
    JAVASCRIPT = "javascript"
    JSX = "jsx"
    C = "c"
    CPP = "cpp"
    CSHARP = "csharp"
    RUST = "rust"
    PYTHON = "python"
    GO = "go"
    JAVA = "java"
    PHP = "php"

    @classmethod
    def from_extension(cls, ext: str) -> Language | None:
        """Return the language a file extension (without the dot) belongs to."""
        return _BY_EXTENSION.get(ext)

    def as_str(self) -> str:
        """The language's canonical lower-case name."""
        return self.value

    def extension(self) -> str:
        """The primary file extension for this language."""
        return _EXTENSIONS[self][0]

    def all_extensions(self) -> tuple[str, ...]:
        """Every file extension recognised for this language."""
        return _EXTENSIONS[self]

    @classmethod
    def all(cls) -> tuple[Language, ...]:
        """All supported languages, in declaration order."""
        return tuple(cls)

    def __str__(self) -> str:
        return self.value


_EXTENSIONS: dict[Language, tuple[str, ...]] = {
    Language.TYPESCRIPT: ("ts",),
    Language.TSX: ("tsx",),
    Language.JAVASCRIPT: ("js",),
    Language.JSX: ("jsx",),
    Language.C: ("c", "h"),
    Language.CPP: ("cpp", "cc", "cxx", "hpp", "hxx", "hh"),
    Language.CSHARP: ("cs",),
    Language.RUST: ("rs",),
    Language.PYTHON: ("py", "pyi"),
    Language.GO: ("go",),
    Language.JAVA: ("java",),
    Language.PHP: ("php",),
}

_BY_EXTENSION: dict[str, Language] = {
    ext: language for language, exts in _EXTENSIONS.items() for ext in exts
}


def parse_language_filter(filter_text: str) -> list[Language]:
    """Parse a comma-separated list of extensions, dropping unknown ones."""
    found = (Language.from_extension(part.strip()) for part in filter_text.split(","))
    return [language for language in found if language is not None]