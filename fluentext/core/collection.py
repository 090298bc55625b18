"""Ordered collection of Text values with bulk and aggregate operations."""

from __future__ import annotations

import json
from collections.abc import Callable, Iterator, Mapping, Sequence, Set
from typing import Any

from loguru import logger

from fluentext.core.dispatch import PASS_THROUGH_NAMES, PassThroughMethod
from fluentext.core.errors import (
    InvalidArgumentError,
    InvalidElementError,
    InvalidInputError,
    MethodNotSupportedError,
)
from fluentext.core.merge import merge_rows
from fluentext.core.text import Text
from fluentext.utils.constants import Constants


def _is_container(value: Any) -> bool:
    """True for nested sequences/mappings/sets; strings count as scalars."""
    if isinstance(value, (str, bytes, bytearray)):
        return False
    return isinstance(value, (Sequence, Mapping, Set, TextCollection))


class TextCollection:
    """Ordered, index-addressable container of Text values.

    `add` is the only in-place mutation. Every other operation builds a new
    collection and leaves the receiver unchanged. Methods named in
    PassThroughMethod can be called directly on the collection and are
    forwarded to each element, e.g. `collection.uppercase()`.
    """

    __slots__ = ("_items",)

    def __init__(self, inputs: Sequence[Any] = ()) -> None:
        self._items: list[Text] = [Text.create(value) for value in inputs]

    @classmethod
    def wrap(cls, items: Sequence[Any] | Mapping[Any, Any]) -> TextCollection:
        """Build a collection from a sequence (or the values of a mapping).

        Mapping keys are dropped; values keep their iteration order.

        Raises:
            InvalidArgumentError: If items is neither a mapping nor a sequence
            InvalidElementError: If an element is itself a container
        """
        if isinstance(items, Mapping):
            pairs = list(items.items())
        elif isinstance(items, TextCollection) or (
            isinstance(items, Sequence) and not isinstance(items, (str, bytes, bytearray))
        ):
            pairs = list(enumerate(items))
        else:
            raise InvalidArgumentError("Input must be an array")

        for key, value in pairs:
            if _is_container(value):
                raise InvalidElementError(key)
        return cls([value for _, value in pairs])

    @classmethod
    def empty(cls) -> TextCollection:
        return cls()

    @staticmethod
    def mail_merge(
        template: Any,
        tokens: Sequence[str],
        rows: Sequence[Sequence[Any]],
        left_delimiter: str,
        right_delimiter: str,
        verbose: bool = False,
    ) -> TextCollection:
        """Fill template once per row, returning one Text per row.

        Raises:
            LengthMismatchError: If a row does not have one value per token
        """
        return merge_rows(
            Text.create(template), tokens, rows, left_delimiter, right_delimiter, verbose
        )

    def add(self, text: Text) -> None:
        """Append text in place."""
        if not isinstance(text, Text):
            raise InvalidInputError(f"Only Text instances can be added, got {type(text).__name__}")
        self._items.append(text)

    # Serialization

    def to_list(self) -> list[str]:
        return [item.to_string() for item in self._items]

    def to_json(self) -> str:
        return json.dumps(self.to_list())

    # Aggregate queries

    def count(self) -> int:
        return len(self._items)

    def lengths(self) -> list[int]:
        return [item.length() for item in self._items]

    def max_length(self) -> int:
        return max(self.lengths(), default=0)

    def any_element_equals(self, test: str) -> bool:
        return any(item.to_string() == test for item in self._items)

    def any_element_contains(self, test: str) -> bool:
        return any(item.contains(test) for item in self._items)

    def all_elements_contain(self, test: str) -> bool:
        return all(item.contains(test) for item in self._items)

    def any_element_matches_regex(self, pattern: str) -> bool:
        return any(item.matches_regex(pattern) for item in self._items)

    def all_elements_match_regex(self, pattern: str) -> bool:
        return all(item.matches_regex(pattern) for item in self._items)

    # Transforms

    def map(self, function: Callable[[Text], Any]) -> TextCollection:
        """Apply function to every element; results are coerced back to Text."""
        return TextCollection([function(item) for item in self._items])

    def filter(self, function: Callable[[Text], bool]) -> TextCollection:
        return TextCollection([item for item in self._items if function(item)])

    def sort(self) -> TextCollection:
        """Return the elements in lexicographic order of their strings."""
        return TextCollection(sorted(self.to_list()))

    def unique(self) -> TextCollection:
        """Drop repeated values, keeping the first occurrence of each."""
        return TextCollection(list(dict.fromkeys(self.to_list())))

    def join(self, separator: str) -> Text:
        return Text.create(separator.join(self.to_list()))

    def left_justify(self, padding: str = Constants.DEFAULT_PADDING) -> TextCollection:
        """Right-pad every element to the length of the longest."""
        pad_length = self.max_length()
        return self.map(lambda item: item.right_pad(pad_length, padding))

    def right_justify(self, padding: str = Constants.DEFAULT_PADDING) -> TextCollection:
        """Left-pad every element to the length of the longest."""
        pad_length = self.max_length()
        return self.map(lambda item: item.left_pad(pad_length, padding))

    # Pass-through dispatch

    def apply(self, method: str | PassThroughMethod, *args: Any, **kwargs: Any) -> TextCollection:
        """Call an allow-listed Text method on every element.

        Args:
            method: A PassThroughMethod or its name, e.g. "snake_case"
            *args: Positional arguments forwarded to each call
            **kwargs: Keyword arguments forwarded to each call

        Returns:
            A new collection holding each element's result, in order

        Raises:
            MethodNotSupportedError: If method is not on the allow-list
        """
        resolved = PassThroughMethod.from_name(method, type(self).__name__)
        logger.debug(f"Dispatching {resolved.value}() to {len(self._items)} element(s)")
        return TextCollection(
            [getattr(item, resolved.value)(*args, **kwargs) for item in self._items]
        )

    def __getattr__(self, name: str) -> Callable[..., TextCollection]:
        if name not in PASS_THROUGH_NAMES:
            raise MethodNotSupportedError(type(self).__name__, name)

        def forward(*args: Any, **kwargs: Any) -> TextCollection:
            return self.apply(name, *args, **kwargs)

        forward.__name__ = name
        return forward

    # Container protocol

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Text]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Text:
        return self._items[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TextCollection):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"TextCollection({self.to_list()!r})"
