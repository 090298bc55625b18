"""Shared utility functions for fluentext."""

import functools
import os
import re
from re import Pattern

from fluentext.core.errors import InvalidPatternError


def escape_literal(text: str) -> str:
    """Escape every regex metacharacter so text matches literally.

    e.g., 'How does this work?' -> 'How does this work\\?'
    """
    return re.escape(text)


@functools.lru_cache(maxsize=256)
def compile_pattern(pattern: str, flags: int = 0) -> Pattern:
    """Compile a regex pattern, caching the result.

    The same handful of patterns (special characters, word starts, delimiter
    pairs) are compiled over and over when a collection dispatches a transform
    to every element, so the compiled objects are kept around.

    Args:
        pattern: Regex source in Python's re dialect
        flags: re flags to compile with

    Returns:
        Compiled pattern

    Raises:
        InvalidPatternError: If the pattern is malformed
    """
    try:
        return re.compile(pattern, flags)
    except re.error as e:
        raise InvalidPatternError(pattern, str(e)) from e


def regex_substitute(pattern: str, replacement: str, subject: str, count: int = 0) -> str:
    """Run a regex substitution with a replacement template.

    The template is parsed by re at substitution time, so a bad escape or a
    group reference the pattern does not define only fails here.

    Raises:
        InvalidPatternError: If the pattern or the replacement template is malformed
    """
    try:
        return compile_pattern(pattern).sub(replacement, subject, count=count)
    except re.error as e:
        raise InvalidPatternError(pattern, f"invalid replacement {replacement!r}: {e}") from e


def expand_file_path(filepath: str | None) -> str | None:
    """Expand user home directory in file path.

    Args:
        filepath: File path (may contain ~)

    Returns:
        Expanded file path string, or None if filepath is None
    """
    if not filepath:
        return None
    return os.path.expanduser(filepath)


def pluralize_count(count: int, singular: str, plural: str) -> str:
    """Format a count with the singular or plural noun.

    e.g., (1, 'row', 'rows') -> '1 row', (3, 'row', 'rows') -> '3 rows'
    """
    if count == 1:
        return f"{count} {singular}"
    return f"{count} {plural}"
