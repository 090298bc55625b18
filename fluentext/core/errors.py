"""Exception types raised by Text and TextCollection.

Every error derives from TextError and from the builtin exception a caller
would reach for without knowing this library (TypeError for rejected input,
ValueError for bad arguments, IndexError for positions, AttributeError for
unsupported pass-through methods).
"""


class TextError(Exception):
    """Base class for all fluentext errors."""


class InvalidInputError(TextError, TypeError):
    """Input cannot be turned into a Text (booleans, objects with no string form)."""


class InvariantViolationError(TextError, ValueError):
    """An internal invariant was broken, e.g. a Text built around None."""


class InvalidArgumentError(TextError, ValueError):
    """An argument is outside the operation's contract."""


class NotFoundError(TextError, ValueError):
    """A required substring does not occur in the value."""

    def __init__(self, needle: str, message: str = "Given string does not appear") -> None:
        self.needle = needle
        super().__init__(f"{message}: {needle!r}")


class DelimiterNotFoundError(NotFoundError):
    """A delimiter passed to between() does not occur in the value."""

    def __init__(self, delimiter: str, side: str) -> None:
        self.side = side
        super().__init__(delimiter, f'"{side}" delimiter must exist in text')


class OutOfRangeError(TextError, IndexError):
    """A position is outside [0, length)."""


class InvalidElementError(InvalidArgumentError):
    """A collection input element is itself a container."""

    def __init__(self, index: object) -> None:
        self.index = index
        super().__init__(f"Value at index {index} must not be an array.")


class NestedDelimitersUnsupportedError(InvalidArgumentError):
    """between_many() found a left delimiter inside an extracted segment."""

    def __init__(self) -> None:
        super().__init__("Nested delimiters not supported")


class InvalidPatternError(TextError, ValueError):
    """A regular expression could not be compiled."""

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid regular expression {pattern!r}: {reason}")


class MethodNotSupportedError(TextError, AttributeError):
    """A pass-through call named a method outside the allow-list."""

    def __init__(self, class_name: str, method: str) -> None:
        self.class_name = class_name
        self.method = method
        super().__init__(f"No such method: {class_name}.{method}()")


class LengthMismatchError(InvalidArgumentError):
    """A mail merge row does not have one value per token."""

    def __init__(self, expected: int, actual: int, row: int) -> None:
        self.expected = expected
        self.actual = actual
        self.row = row
        super().__init__(
            f"Replacement arrays must be same length as token array "
            f"(row {row}: expected {expected}, got {actual})"
        )
