"""Errors raised by recase's conversion functions."""
from __future__ import annotations as _annotations
from typing import Iterable
from typing_extensions import Literal
__all__ = ('RecaseError', 'InvalidInputTypeError', 'UnknownCaseStyleError', 'InvalidCaseStyleError')
RecaseErrorCodes = Literal['invalid-input-type', 'unknown-case-style', 'invalid-case-style']

class RecaseError:
    """A mixin class for common functionality shared by all recase-specific errors.

    Attributes:
        message: A message describing the error.
        code: An optional error code from RecaseErrorCodes enum.
    """

    def __init__(self, message: str, *, code: RecaseErrorCodes | None) -> None:
        self.message = message
        self.code = code
        super().__init__(message)

    def __str__(self) -> str:
        return self.message

class InvalidInputTypeError(RecaseError, TypeError):
    """Raised when a conversion function receives something other than a `str`.

    No coercion is ever attempted: `bytes`, numbers and `None` are all rejected.
    """

    def __init__(self, message: str='Input must be a string') -> None:
        super().__init__(message, code='invalid-input-type')

class UnknownCaseStyleError(RecaseError, ValueError):
    """Raised when a case style name is not one of the registered styles."""

    def __init__(self, style: object, permitted: Iterable[str]) -> None:
        expected = ', '.join((repr(name) for name in permitted))
        super().__init__(f'Unknown case style {style!r}, expected one of: {expected}', code='unknown-case-style')

class InvalidCaseStyleError(RecaseError, ValueError):
    """Raised when a `CaseStyle` is built with settings it cannot convert with."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code='invalid-case-style')
