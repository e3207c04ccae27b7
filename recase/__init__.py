from .case import convert, split_words, to_camel, to_dot, to_kebab, to_pascal, to_snake
from .errors import InvalidCaseStyleError, InvalidInputTypeError, RecaseError, UnknownCaseStyleError
from .styles import STYLES, CaseStyle, CaseStyleName, get_style
from .version import VERSION
__version__ = VERSION
__all__ = (
    # case
    'convert',
    'split_words',
    'to_camel',
    'to_dot',
    'to_kebab',
    'to_pascal',
    'to_snake',
    # styles
    'CaseStyle',
    'CaseStyleName',
    'STYLES',
    'get_style',
    # errors
    'RecaseError',
    'InvalidInputTypeError',
    'UnknownCaseStyleError',
    'InvalidCaseStyleError',
    # version
    '__version__',
    'VERSION',
)
