"""Language detection from a filename — fixed extension table."""

from __future__ import annotations

from enum import Enum
from pathlib import PurePosixPath
from typing import Dict, Tuple


class Language(str, Enum):
    RUST = "Rust"
    C_CPP = "C/C++"
    GO = "Go"
    PYTHON = "Python"
    JAVASCRIPT = "JavaScript"
    TYPESCRIPT = "TypeScript"
    JAVA = "Java"
    CMAKE = "CMake"
    SHELL = "Shell"
    RUBY = "Ruby"
    MARKDOWN = "Markdown"
    TEXT = "Text"
    DOTFILE = "Dotfiles"
    UNKNOWN = "Unknown"

    @property
    def display_name(self) -> str:
        return self.value

    @property
    def comment_prefixes(self) -> Tuple[str, ...]:
        """Whole-line comment markers; empty means every line is code."""
        return _COMMENT_PREFIXES[self]


_SLASH = ("//",)
_HASH = ("#",)

_COMMENT_PREFIXES: Dict[Language, Tuple[str, ...]] = {
    Language.RUST: _SLASH,
    Language.C_CPP: _SLASH,
    Language.GO: _SLASH,
    Language.JAVASCRIPT: _SLASH,
    Language.TYPESCRIPT: _SLASH,
    Language.JAVA: _SLASH,
    Language.UNKNOWN: _SLASH,
    Language.PYTHON: _HASH,
    Language.CMAKE: _HASH,
    Language.SHELL: _HASH,
    Language.RUBY: _HASH,
    Language.DOTFILE: _HASH,
    Language.MARKDOWN: (),
    Language.TEXT: (),
}

_EXTENSIONS: Dict[str, Language] = {
    "rs": Language.RUST,
    "c": Language.C_CPP,
    "h": Language.C_CPP,
    "cpp": Language.C_CPP,
    "cc": Language.C_CPP,
    "cxx": Language.C_CPP,
    "hpp": Language.C_CPP,
    "hxx": Language.C_CPP,
    "go": Language.GO,
    "py": Language.PYTHON,
    "js": Language.JAVASCRIPT,
    "jsx": Language.JAVASCRIPT,
    "ts": Language.TYPESCRIPT,
    "tsx": Language.TYPESCRIPT,
    "java": Language.JAVA,
    "cmake": Language.CMAKE,
    "sh": Language.SHELL,
    "bash": Language.SHELL,
    "rb": Language.RUBY,
    "md": Language.MARKDOWN,
    "markdown": Language.MARKDOWN,
    "txt": Language.TEXT,
}


def is_decodable(text: str) -> bool:
    """Return False for text carrying surrogate-escaped (undecodable) bytes."""
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def classify_language(filename: str) -> Language:
    """Map a bare filename (no directories) to a Language.

    ``CMakeLists.txt`` wins over the ``.txt`` extension, and a dotfile
    with no further extension (``.gitignore``) is its own category.
    """
    if filename.lower() == "cmakelists.txt":
        return Language.CMAKE

    if filename.startswith(".") and "." not in filename[1:]:
        return Language.DOTFILE

    if "." not in filename:
        return Language.UNKNOWN

    ext = filename.rsplit(".", 1)[1].lower()
    return _EXTENSIONS.get(ext, Language.UNKNOWN)


def language_for_path(file_path: str) -> Language:
    """Classify the final component of *file_path*."""
    name = PurePosixPath(file_path).name
    if not name or not is_decodable(name):
        return Language.UNKNOWN
    return classify_language(name)
