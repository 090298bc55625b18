"""Config-bound entry points for the most common bulk operations."""

from collections.abc import Sequence
from typing import Any, Literal

from fluentext.core.collection import TextCollection
from fluentext.core.config import Config
from fluentext.core.errors import InvalidArgumentError
from fluentext.core.text import Text
from fluentext.utils.logging import setup_logger


class Formatter:
    """Runs collection and text operations with defaults taken from a Config.

    Attributes:
        config: Settings supplying delimiters, padding, the special-character
            pattern and verbosity
    """

    def __init__(self, config: Config | None = None) -> None:
        self.config = config or Config()

    def enable_logging(self) -> None:
        """Turn on fluentext log output at the level the config asks for."""
        setup_logger(verbose=self.config.verbose, debug=self.config.debug)

    def merge(
        self, template: Any, tokens: Sequence[str], rows: Sequence[Sequence[Any]]
    ) -> TextCollection:
        """Mail-merge rows into template using the configured delimiters."""
        return TextCollection.mail_merge(
            template,
            tokens,
            rows,
            self.config.left_delimiter,
            self.config.right_delimiter,
            verbose=self.config.verbose,
        )

    def justify(
        self, items: Sequence[Any], align: Literal["left", "right"] = "left"
    ) -> TextCollection:
        """Pad every item to the longest one with the configured padding."""
        collection = TextCollection.wrap(items)
        if align == "left":
            return collection.left_justify(self.config.padding)
        if align == "right":
            return collection.right_justify(self.config.padding)
        raise InvalidArgumentError(f"Invalid alignment: {align}")

    def clean(self, value: Any, replacement: str = "") -> Text:
        """Replace characters matched by the configured special-character pattern."""
        return Text.create(value).replace_special_characters(
            replacement, self.config.special_characters
        )
