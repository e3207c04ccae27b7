"""Functions for converting strings between different capitalization conventions."""
from __future__ import annotations as _annotations
from typing import Any, Union
from ._internal._validate import validate_text
from .styles import CaseStyle, CaseStyleName, get_style
__all__ = ('convert', 'split_words', 'to_kebab', 'to_camel', 'to_dot', 'to_snake', 'to_pascal')

def convert(text: Any, style: Union[CaseStyleName, CaseStyle]) -> str:
    """Convert a string to the given case style.

    Args:
        text: The string to convert.
        style: The name of a built-in style (`'kebab'`, `'camel'`, `'dot'`, `'snake'`
            or `'pascal'`), or a custom `CaseStyle`.

    Returns:
        The converted string, or `''` if `text` is empty or only whitespace.

    Raises:
        InvalidInputTypeError: If `text` is not a `str`.
        UnknownCaseStyleError: If `style` is not a known style name.
    """
    text = validate_text(text)
    case_style = get_style(style)
    if not text.strip():
        return ''
    return case_style.convert(text)

def split_words(text: Any, style: Union[CaseStyleName, CaseStyle]='kebab') -> list[str]:
    """Split a string into the lowercase words a case style would join.

    Args:
        text: The string to split.
        style: The style whose splitting rules apply, `'kebab'` by default.

    Returns:
        The words, in order. Empty or whitespace-only text gives an empty list.
    """
    text = validate_text(text)
    return get_style(style).words(text)

def to_kebab(text: Any) -> str:
    """Convert a string to kebab-case.

    Spaces, hyphens and underscores separate words, and so do lower-to-upper
    transitions and acronym boundaries: `'XMLHttpRequest'` becomes
    `'xml-http-request'`. Letters of any script are kept.

    Args:
        text: The string to convert.

    Returns:
        The kebab-case string.
    """
    return convert(text, 'kebab')

def to_camel(text: Any) -> str:
    """Convert a string to camelCase.

    Spaces, hyphens, underscores and dots separate words. Existing camelCase is not
    split, so `'fooBar'` becomes `'foobar'`.

    Args:
        text: The string to convert.

    Returns:
        The converted camelCase string.
    """
    return convert(text, 'camel')

def to_dot(text: Any) -> str:
    """Convert a string to dot.case.

    Args:
        text: The string to convert.

    Returns:
        The converted dot.case string.
    """
    return convert(text, 'dot')

def to_snake(text: Any) -> str:
    """Convert a PascalCase, camelCase, kebab-case or space separated string to snake_case.

    Args:
        text: The string to convert.

    Returns:
        The converted string in snake_case.
    """
    return convert(text, 'snake')

def to_pascal(text: Any) -> str:
    """Convert a string to PascalCase.

    Args:
        text: The string to convert.

    Returns:
        The PascalCase string.
    """
    return convert(text, 'pascal')
