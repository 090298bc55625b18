"""Utility functions for fluentext."""

from fluentext.utils.constants import Constants
from fluentext.utils.helpers import (
    compile_pattern,
    escape_literal,
    expand_file_path,
    pluralize_count,
    regex_substitute,
)
from fluentext.utils.logging import setup_logger

__all__ = [
    "Constants",
    "compile_pattern",
    "escape_literal",
    "expand_file_path",
    "pluralize_count",
    "regex_substitute",
    "setup_logger",
]
