"""Regex building blocks for delimiter extraction, swapping and cleanup."""

import re

from fluentext.utils.constants import Constants
from fluentext.utils.helpers import compile_pattern, escape_literal


def between(left: str, right: str, subject: str) -> str | None:
    """Return the shortest text between the first left/right delimiter pair.

    e.g., ('[', ']', 'Something is [between] the braces.') -> 'between'

    Args:
        left: Left delimiter (literal)
        right: Right delimiter (literal)
        subject: Text to search

    Returns:
        The captured text (possibly empty), or None when no pair occurs
    """
    pattern = compile_pattern(f"{escape_literal(left)}(.*?){escape_literal(right)}", re.DOTALL)
    match = pattern.search(subject)
    if match is None:
        return None
    return match.group(1)


def swap(left: str, right: str, subject: str) -> str:
    """Exchange the first `left` with the first `right` that follows it.

    e.g., ('left', 'right', 'left/right') -> 'right/left'

    Args:
        left: Substring occurring first
        right: Substring occurring after it
        subject: Text to rewrite

    Returns:
        Rewritten text, or subject unchanged when no such pair exists
    """
    pattern = compile_pattern(
        f"^(.*?){escape_literal(left)}(.*?){escape_literal(right)}(.*)$", re.DOTALL
    )
    return pattern.sub(
        lambda m: f"{m.group(1)}{right}{m.group(2)}{left}{m.group(3)}", subject, count=1
    )


def replace_special_characters(
    subject: str, replacement: str = "", pattern: str = Constants.SPECIAL_CHARACTERS_PATTERN
) -> str:
    """Replace every character matched by pattern with replacement.

    e.g., 'This& is* a{ string' -> 'This is a string'
    """
    return compile_pattern(pattern).sub(lambda _: replacement, subject)


def uppercase_words(subject: str, at_start: bool = True) -> str:
    """Upper-case the first character of every whitespace-delimited word.

    Only the word-initial characters change, so 'tHIS iS' -> 'THIS IS'. With
    at_start=False the subject is treated as the tail of a longer string and
    its first character only changes when it follows whitespace.
    """
    pattern = Constants.WORD_START_PATTERN if at_start else Constants.INNER_WORD_START_PATTERN
    return compile_pattern(pattern).sub(
        lambda m: m.group(1) + m.group(2).upper(), subject
    )


def count_literal(needle: str, subject: str) -> int:
    """Count non-overlapping literal occurrences of needle in subject."""
    return len(compile_pattern(escape_literal(needle)).findall(subject))
