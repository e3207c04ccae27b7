"""Checks applied to arguments at the public boundary of recase."""
from __future__ import annotations
from typing import Any, Callable, Iterable, Tuple
from pydantic_core import SchemaValidator, ValidationError, core_schema
from ..errors import InvalidInputTypeError, UnknownCaseStyleError
_text_validator = SchemaValidator(core_schema.str_schema(strict=True))

def validate_text(value: Any) -> str:
    """Return `value` if it is a `str`, otherwise raise `InvalidInputTypeError`.

    Validation is strict, nothing is ever coerced to a string.
    """
    try:
        return _text_validator.validate_python(value)
    except ValidationError as exc:
        raise InvalidInputTypeError() from exc

class ChoiceValidator:
    """Strictly validate a value against a fixed set of names.

    `error` builds the exception raised for a value outside `choices`, it is given the
    rejected value and the permitted names.
    """
    __slots__ = ('choices', 'error', '_validator')

    def __init__(self, choices: Iterable[str], error: Callable[[Any, Tuple[str, ...]], Exception]=UnknownCaseStyleError) -> None:
        self.choices = tuple(choices)
        self.error = error
        self._validator = SchemaValidator(core_schema.literal_schema(list(self.choices)))

    def __call__(self, value: Any) -> str:
        try:
            return self._validator.validate_python(value, strict=True)
        except ValidationError as exc:
            raise self.error(value, self.choices) from exc
