"""fluentext - Immutable, chainable text values and text collections.

Slice, search, re-case and extract from strings without mutating them, and
apply the same operations across whole collections at once.
"""

from loguru import logger

from .core import (
    Config,
    Formatter,
    PassThroughMethod,
    Stringable,
    Text,
    TextCollection,
    TextError,
    load_config,
)
from .utils import pluralize_count, setup_logger

logger.disable(__name__)

__version__ = "0.1.0"
__all__ = [
    "Config",
    "Formatter",
    "PassThroughMethod",
    "Stringable",
    "Text",
    "TextCollection",
    "TextError",
    "load_config",
    "pluralize_count",
    "setup_logger",
]
