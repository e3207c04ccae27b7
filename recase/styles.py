"""Case style definitions.

Each style is a `CaseStyle`: a small, frozen description of how text is split into
words and how those words are joined back together. The built-in styles are kept in
`STYLES`, keyed by name.
"""
from __future__ import annotations as _annotations
import re
from dataclasses import dataclass
from typing import Callable, Dict, Union
from typing_extensions import Literal, TypeAlias, get_args
from ._internal._internal_dataclass import slots_true as _slots_true
from ._internal._tokenize import tokenize
from ._internal._validate import ChoiceValidator
from .errors import InvalidCaseStyleError
__all__ = ('CaseStyle', 'CaseStyleName', 'STYLES', 'get_style')
_slots_frozen = {**_slots_true, 'frozen': True}
CaseStyleName: TypeAlias = Literal['kebab', 'camel', 'dot', 'snake', 'pascal']
Casing = Literal['lower', 'camel', 'pascal']

def _invalid_casing(value: object, permitted: tuple[str, ...]) -> InvalidCaseStyleError:
    expected = ', '.join((repr(name) for name in permitted))
    return InvalidCaseStyleError(f'Invalid casing {value!r}, expected one of: {expected}')
_validate_casing = ChoiceValidator(get_args(Casing), error=_invalid_casing)

@dataclass(**_slots_frozen)
class CaseStyle:
    """A word-joining and letter-casing convention.

    Attributes:
        name: The name the style is registered under.
        joiner: The string placed between words in the output.
        casing: `'lower'` lowercases every word, `'camel'` capitalizes every word but the
            first and `'pascal'` capitalizes every word.
        separators: Characters which, like whitespace, separate words in the input.
        split_case: Whether an existing camelCase or PascalCase run is split into words.
            When `False`, `'fooBar'` is a single word, `'foobar'`.
        split_digits: Whether a letter followed by a digit, or a digit followed by a
            letter, starts a new word.
        unicode: Whether letters and digits of any script are kept. When `False` only
            ASCII letters and digits survive.
        transform: When set, the style is converted by applying this function to the
            raw text instead of splitting and joining words.
    """
    name: str
    joiner: str
    casing: Casing = 'lower'
    separators: str = '-_.'
    split_case: bool = False
    split_digits: bool = False
    unicode: bool = False
    transform: Callable[[str], str] | None = None

    def __post_init__(self) -> None:
        _validate_casing(self.casing)
        if self.transform is not None and not self.joiner:
            raise InvalidCaseStyleError(f'Case style {self.name!r} has a transform, so its joiner must not be empty')

    def words(self, text: str) -> list[str]:
        """Split `text` into lowercase words the way this style sees them."""
        if self.transform is not None:
            return [word for word in self.transform(text).split(self.joiner) if word]
        return tokenize(text, separators=self.separators, split_case=self.split_case, split_digits=self.split_digits, unicode=self.unicode)

    def assemble(self, words: list[str]) -> str:
        """Join already split words according to this style's casing."""
        if self.casing == 'lower':
            return self.joiner.join((word.lower() for word in words))
        if self.casing == 'pascal':
            return self.joiner.join((word.capitalize() for word in words))
        if self.casing == 'camel':
            if not words:
                return ''
            first, *rest = words
            return self.joiner.join([first.lower(), *(word.capitalize() for word in rest)])
        raise AssertionError(f'unexpected casing {self.casing!r}')

    def convert(self, text: str) -> str:
        """Convert `text`, which must already be known to be a `str`, to this style."""
        if self.transform is not None:
            return self.transform(text)
        return self.assemble(self.words(text))
_UPPERCASE_RUN = re.compile(r'([A-Z]+)')
_SNAKE_SEPARATORS = re.compile(r'[\s\-_]+')

def _snake(text: str) -> str:
    # Insert an underscore before every run of uppercase letters
    s = _UPPERCASE_RUN.sub(r'_\1', text)
    s = _SNAKE_SEPARATORS.sub('_', s.lower())
    return s.strip('_')
STYLES: Dict[str, CaseStyle] = {
    'kebab': CaseStyle('kebab', '-', separators='-_', split_case=True, unicode=True),
    'camel': CaseStyle('camel', '', casing='camel'),
    'dot': CaseStyle('dot', '.'),
    'snake': CaseStyle('snake', '_', transform=_snake),
    'pascal': CaseStyle('pascal', '', casing='pascal', split_case=True, unicode=True),
}
_validate_style_name = ChoiceValidator(STYLES)

def get_style(style: Union[CaseStyleName, CaseStyle]) -> CaseStyle:
    """Look up a built-in case style by name.

    Args:
        style: The name of a built-in style, or a `CaseStyle` which is returned unchanged.

    Returns:
        The matching `CaseStyle`.

    Raises:
        UnknownCaseStyleError: If `style` is not the name of a built-in style.
    """
    if isinstance(style, CaseStyle):
        return style
    return STYLES[_validate_style_name(style)]
