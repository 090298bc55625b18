"""Core domain logic for fluentext."""

from .errors import (
    DelimiterNotFoundError,
    InvalidArgumentError,
    InvalidElementError,
    InvalidInputError,
    InvalidPatternError,
    InvariantViolationError,
    LengthMismatchError,
    MethodNotSupportedError,
    NestedDelimitersUnsupportedError,
    NotFoundError,
    OutOfRangeError,
    TextError,
)
from .text import Text
from .collection import TextCollection
from .config import Config, load_config
from .dispatch import PassThroughMethod
from .formatter import Formatter
from .types import Stringable

__all__ = [
    "Config",
    "DelimiterNotFoundError",
    "Formatter",
    "InvalidArgumentError",
    "InvalidElementError",
    "InvalidInputError",
    "InvalidPatternError",
    "InvariantViolationError",
    "LengthMismatchError",
    "MethodNotSupportedError",
    "NestedDelimitersUnsupportedError",
    "NotFoundError",
    "OutOfRangeError",
    "PassThroughMethod",
    "Stringable",
    "Text",
    "TextCollection",
    "TextError",
    "load_config",
]
