"""
Text helpers shared by the blog services.
"""

import re
import unicodedata

from models.constants import WORDS_PER_MINUTE


def fold_text(value: str) -> str:
    """
    Fold text for case-insensitive matching.

    Composes the string to NFC first so that decomposed Vietnamese diacritics
    ("e" + combining circumflex) compare equal to their precomposed form, then
    applies full Unicode case folding ("Đ" -> "đ", "Ệ" -> "ệ", "ß" -> "ss").
    """
    if not value:
        return ""
    return unicodedata.normalize('NFC', value).casefold()


def contains_folded(haystack: str, needle: str) -> bool:
    """Return True if needle occurs in haystack after folding both."""
    return fold_text(needle) in fold_text(haystack)


def calculate_reading_time(text: str) -> int:
    """
    Calculate estimated reading time based on word count.

    Args:
        text: Article content

    Returns:
        Estimated reading time in minutes (minimum 1)
    """
    words = len(re.findall(r'\w+', text or ''))
    return max(1, round(words / WORDS_PER_MINUTE))
