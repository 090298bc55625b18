"""Immutable string value with chainable manipulation methods."""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from loguru import logger

from fluentext.core import delimiters
from fluentext.core.errors import (
    DelimiterNotFoundError,
    InvalidArgumentError,
    InvalidInputError,
    InvariantViolationError,
    NestedDelimitersUnsupportedError,
    NotFoundError,
    OutOfRangeError,
)
from fluentext.core.types import Stringable
from fluentext.utils.constants import Constants
from fluentext.utils.helpers import compile_pattern, regex_substitute

if TYPE_CHECKING:
    from fluentext.core.collection import TextCollection


def coerce_to_string(value: Any) -> str | None:
    """Turn accepted raw input into its canonical string form.

    Stringable objects win over a plain __str__ override. None is passed
    through untouched so the Text constructor can reject it.

    Raises:
        InvalidInputError: For booleans, byte strings and objects with no string form
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise InvalidInputError("true and false are not acceptable input")
    if isinstance(value, (bytes, bytearray)):
        raise InvalidInputError("Byte strings must be decoded before use")
    if isinstance(value, (str, int, float)):
        return str(value)
    if isinstance(value, Stringable):
        return value.to_string()
    if type(value).__str__ is not object.__str__:
        return str(value)
    raise InvalidInputError('Input objects must have a "to_string()" or "__str__()" method')


class Text:
    """Immutable wrapper around a string.

    Every method that produces text returns a new Text; the wrapped value
    never changes after construction. Build instances with Text.create().
    """

    __slots__ = ("_value",)

    def __init__(self, value: str | None) -> None:
        if value is None:
            raise InvariantViolationError("Value should not be null")
        self._value = value

    @classmethod
    def create(cls, value: Any) -> Text:
        """Build a Text from a string, number or stringable object."""
        return cls(coerce_to_string(value))

    def clone(self) -> Text:
        """Return an equal, distinct copy."""
        return Text(self._value)

    # Query

    def to_string(self) -> str:
        return self._value

    def to_json(self) -> str:
        return json.dumps(self._value)

    def length(self) -> int:
        """Number of code points in the value."""
        return len(self._value)

    def contains(self, needle: str, case_sensitive: bool = True) -> bool:
        if not case_sensitive:
            return needle.lower() in self._value.lower()
        return needle in self._value

    def matches_regex(self, pattern: str) -> bool:
        """Return True if pattern matches anywhere in the value.

        Raises:
            InvalidPatternError: If pattern does not compile
        """
        return compile_pattern(pattern).search(self._value) is not None

    def starts_with(self, test: str) -> bool:
        return self._value.startswith(test)

    def ends_with(self, test: str) -> bool:
        return self._value.endswith(test)

    def position_of(self, needle: str) -> int:
        position = self._value.find(needle)
        if position == -1:
            raise NotFoundError(needle)
        return position

    def last_position_of(self, needle: str) -> int:
        position = self._value.rfind(needle)
        if position == -1:
            raise NotFoundError(needle)
        return position

    def character_at(self, position: int) -> str:
        if position < 0:
            raise OutOfRangeError("Position cannot be negative")
        if position >= self.length():
            raise OutOfRangeError("Position must be less than string length")
        return self._value[position]

    def count(self, needle: str) -> int:
        """Count non-overlapping occurrences of needle, taken literally."""
        return delimiters.count_literal(needle, self._value)

    def equals(self, other: Text) -> bool:
        return self._value == other._value

    # Slicing

    def first(self, chars: int) -> Text:
        if chars < 0:
            raise InvalidArgumentError("Chars cannot be negative")
        return Text(self._value[:chars])

    def last(self, chars: int) -> Text:
        if chars < 0:
            raise InvalidArgumentError("Chars cannot be negative")
        if chars == 0:
            return Text("")
        return Text(self._value[-chars:])

    def all_but_the_first(self, chars: int) -> Text:
        self._check_droppable(chars)
        return Text(self._value[chars:])

    def all_but_the_last(self, chars: int) -> Text:
        self._check_droppable(chars)
        return Text(self._value[: self.length() - chars])

    def _check_droppable(self, chars: int) -> None:
        if chars < 0:
            raise InvalidArgumentError("Chars cannot be negative")
        if chars > self.length():
            raise InvalidArgumentError("Chars must not be longer than string length")

    def before(self, needle: str) -> Text:
        """Text before the first occurrence of needle."""
        return Text(self._value[: self.position_of(needle)])

    def after(self, needle: str) -> Text:
        """Text after the first occurrence of needle."""
        return Text(self._value[self.position_of(needle) + len(needle) :])

    def trim(self) -> Text:
        return Text(self._value.strip())

    def left_pad(self, length: int, padding: str = Constants.DEFAULT_PADDING) -> Text:
        return Text(self._padding_for(length, padding) + self._value)

    def right_pad(self, length: int, padding: str = Constants.DEFAULT_PADDING) -> Text:
        return Text(self._value + self._padding_for(length, padding))

    def _padding_for(self, length: int, padding: str) -> str:
        if not padding:
            raise InvalidArgumentError("Padding must not be empty")
        needed = length - self.length()
        if needed <= 0:
            return ""
        repeats = -(-needed // len(padding))
        return (padding * repeats)[:needed]

    def concatenate(self, other: Text) -> Text:
        return Text(self._value + other._value)

    # Delimiter extraction

    def between(self, left: str, right: str, offset: int = 0) -> Text:
        """Return the text between the first left/right pair at or after offset.

        The delimiter checks run against the whole value, the match itself
        against the value with the first `offset` characters dropped.

        Args:
            left: Left delimiter
            right: Right delimiter
            offset: Number of leading characters to skip before matching

        Returns:
            The enclosed text; empty when the delimiters are adjacent or no
            pair remains after offset

        Raises:
            InvalidArgumentError: If left == right and it occurs only once, or
                distinct delimiters appear right-before-left
            DelimiterNotFoundError: If either delimiter is absent
        """
        found = self._between_or_none(left, right, offset)
        return Text(found if found is not None else "")

    def _between_or_none(self, left: str, right: str, offset: int) -> str | None:
        subject = self.all_but_the_first(offset).to_string()

        if left == right and self.count(left) <= 1:
            raise InvalidArgumentError("Only one delimiter exists")
        if left not in self._value:
            raise DelimiterNotFoundError(left, "left")
        if right not in self._value:
            raise DelimiterNotFoundError(right, "right")
        if left != right and self.position_of(left) >= self.position_of(right):
            raise InvalidArgumentError("Left delimiter must occur before right delimiter in text")

        return delimiters.between(left, right, subject)

    def between_many(self, left: str, right: str) -> TextCollection:
        """Return every text found between left/right pairs, left to right.

        Nested delimiters are not supported: a segment containing `left`
        raises instead of being parsed.

        Raises:
            NestedDelimitersUnsupportedError: If a segment contains `left`
            DelimiterNotFoundError: If either delimiter is absent
        """
        from fluentext.core.collection import TextCollection

        segments = TextCollection.empty()
        offset = 0
        last_right = self.last_position_of(right)
        while offset < last_right:
            found = self._between_or_none(left, right, offset)
            if found is None:
                break
            if left in found:
                raise NestedDelimitersUnsupportedError()

            segments.add(Text(found))
            enclosed = left + found + right
            offset = self._value.index(enclosed, offset) + len(found) + len(right) + 1

        logger.debug(f"between_many: {len(segments)} segment(s) between {left!r} and {right!r}")
        return segments

    # Case and format transforms

    def uppercase(self) -> Text:
        return Text(self._value.upper())

    def lowercase(self) -> Text:
        return Text(self._value.lower())

    def uppercase_words(self) -> Text:
        return Text(delimiters.uppercase_words(self._value))

    def lowercase_first(self) -> Text:
        """Lower-case the first character; capitalize the remaining words."""
        if not self._value:
            return self.clone()
        head, tail = self._value[0], self._value[1:]
        return Text(head.lower() + delimiters.uppercase_words(tail, at_start=head.isspace()))

    def title_case(self) -> Text:
        return self.uppercase_words()

    def camel_case(self) -> Text:
        return (
            self.uppercase_words()
            .replace_special_characters("")
            .replace_all(" ", "")
            .lowercase_first()
        )

    def pascal_case(self) -> Text:
        return self.uppercase_words().replace_special_characters("").replace_all(" ", "")

    def snake_case(self) -> Text:
        return self.lowercase().replace_all(" ", "_").replace_special_characters("")

    def slug(self) -> Text:
        return self.lowercase().replace_all(" ", "-").replace_special_characters("")

    def replace_special_characters(
        self, replacement: str = "", pattern: str = Constants.SPECIAL_CHARACTERS_PATTERN
    ) -> Text:
        """Replace characters outside [A-Za-z0-9 -_] (or matched by pattern)."""
        return Text(delimiters.replace_special_characters(self._value, replacement, pattern))

    # Replace and swap

    def replace_one(self, needle: str, replacement: str) -> Text:
        position = self.position_of(needle)
        return Text(self._value[:position] + replacement + self._value[position + len(needle) :])

    def replace_all(self, needle: str, replacement: str) -> Text:
        return Text(self._value.replace(needle, replacement))

    def regex_replace_one(self, replacement: str, pattern: str) -> Text:
        return Text(regex_substitute(pattern, replacement, self._value, count=1))

    def regex_replace_all(self, replacement: str, pattern: str) -> Text:
        return Text(regex_substitute(pattern, replacement, self._value))

    def swap(self, to_be_swapped: str, swap_with: str) -> Text:
        """Exchange the positions of two substrings.

        Whichever of the two occurs first is moved to where the other occurs
        (its first occurrence after the first one), and vice versa.

        Raises:
            NotFoundError: If either substring is absent
        """
        if to_be_swapped not in self._value:
            raise NotFoundError(to_be_swapped, '"to be swapped" value not found in string')
        if swap_with not in self._value:
            raise NotFoundError(swap_with, '"swap with" value not found in string')

        if self.position_of(to_be_swapped) < self.position_of(swap_with):
            left, right = to_be_swapped, swap_with
        else:
            left, right = swap_with, to_be_swapped
        return Text(delimiters.swap(left, right, self._value))

    # Bulk

    def split(self, separator: str) -> TextCollection:
        from fluentext.core.collection import TextCollection

        if not separator:
            raise InvalidArgumentError("Separator must not be empty")
        return TextCollection.wrap(self._value.split(separator))

    def mail_merge(
        self,
        tokens: Sequence[str],
        rows: Sequence[Sequence[Any]],
        left_delimiter: str,
        right_delimiter: str,
        verbose: bool = False,
    ) -> TextCollection:
        """Fill this template once per row, replacing each delimited token.

        e.g., '[name]' with tokens ['name'] and rows [['Joe'], ['Jane']]
        -> ['Joe', 'Jane']

        Raises:
            LengthMismatchError: If a row does not have one value per token
        """
        from fluentext.core.merge import merge_rows

        return merge_rows(self, tokens, rows, left_delimiter, right_delimiter, verbose)

    # Dunder protocol

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"Text({self._value!r})"

    def __len__(self) -> int:
        return len(self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Text):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(self._value)
