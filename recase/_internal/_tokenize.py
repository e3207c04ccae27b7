"""Splitting of mixed-convention identifiers and free text into lowercase words."""
from __future__ import annotations
import re
from functools import lru_cache
from typing import Pattern
_NON_WORD_UNICODE = re.compile(r'[^\w\s]|_')
_NON_WORD_ASCII = re.compile(r'[^A-Za-z0-9\s]')
_LETTER_DIGIT_BOUNDARY = re.compile(r'(?<=[^\W\d_])(?=\d)|(?<=\d)(?=[^\W\d_])')

@lru_cache(maxsize=128)
def _separator_pattern(separators: str) -> Pattern[str]:
    """Whitespace plus every character of `separators`, matched as a run."""
    return re.compile(rf'[\s{re.escape(separators)}]+')

def _split_case_transitions(text: str) -> str:
    """Insert a space at lower->upper transitions and at acronym boundaries.

    `str.isupper` and friends are used rather than `[A-Z]` so that any cased
    script splits, e.g. `'ПриветМир'` -> `'Привет Мир'` and
    `'XMLHttpRequest'` -> `'XML Http Request'`.
    """
    chars: list[str] = []
    last = len(text) - 1
    for i, char in enumerate(text):
        if i and char.isupper():
            prev = text[i - 1]
            if prev.islower() or prev.isdigit():
                chars.append(' ')
            elif prev.isupper() and i < last and text[i + 1].islower():
                chars.append(' ')
        chars.append(char)
    return ''.join(chars)

def tokenize(text: str, *, separators: str, split_case: bool, split_digits: bool, unicode: bool) -> list[str]:
    """Split `text` into lowercase words.

    Args:
        text: The string to split, it must already be known to be a `str`.
        separators: Characters that separate words in addition to whitespace.
        split_case: Whether lower->upper transitions and acronym boundaries start a new word.
        split_digits: Whether letter<->digit transitions start a new word.
        unicode: Whether any Unicode letter or number is kept, rather than only `[A-Za-z0-9]`.

    Returns:
        The words in order, lowercased, with empty words discarded.
    """
    if not text.strip():
        return []
    text = _separator_pattern(separators).sub(' ', text)
    # 'special@#Chars' -> 'specialChars', which case splitting then separates
    non_word = _NON_WORD_UNICODE if unicode else _NON_WORD_ASCII
    text = non_word.sub('', text)
    if split_case:
        text = _split_case_transitions(text)
    if split_digits:
        text = _LETTER_DIGIT_BOUNDARY.sub(' ', text)
    # lowercasing can add combining marks, e.g. 'İ' -> 'i\u0307'
    words = (non_word.sub('', word.lower()) for word in text.split())
    return [word for word in words if word]
