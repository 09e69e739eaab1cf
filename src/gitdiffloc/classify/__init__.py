"""Classifiers — language by filename, comment vs code, test vs production."""

from gitdiffloc.classify.language import Language, classify_language, language_for_path
from gitdiffloc.classify.lines import LineCategory, classify_line, is_blank
from gitdiffloc.classify.test_paths import is_test_path

__all__ = [
    "Language",
    "LineCategory",
    "classify_language",
    "classify_line",
    "is_blank",
    "is_test_path",
    "language_for_path",
]
