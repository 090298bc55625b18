"""Allow-list of Text methods a TextCollection forwards to its elements."""

from enum import Enum

from fluentext.core.errors import MethodNotSupportedError


class PassThroughMethod(Enum):
    """Text methods that may be called directly on a TextCollection."""

    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    SLUG = "slug"
    SNAKE_CASE = "snake_case"
    CAMEL_CASE = "camel_case"
    PASCAL_CASE = "pascal_case"
    TITLE_CASE = "title_case"
    REPLACE_SPECIAL_CHARACTERS = "replace_special_characters"
    TRIM = "trim"
    REPLACE_ALL = "replace_all"
    REGEX_REPLACE_ALL = "regex_replace_all"
    LEFT_PAD = "left_pad"
    RIGHT_PAD = "right_pad"
    FIRST = "first"
    LAST = "last"

    @classmethod
    def from_name(cls, name: "str | PassThroughMethod", class_name: str) -> "PassThroughMethod":
        """Resolve a method name to an allow-listed member.

        Args:
            name: Method name as received from the caller, or a member
            class_name: Name of the receiving collection type, for the error

        Returns:
            The matching PassThroughMethod

        Raises:
            MethodNotSupportedError: If name is not on the allow-list
        """
        if isinstance(name, cls):
            return name
        try:
            return cls(name)
        except ValueError:
            raise MethodNotSupportedError(class_name, str(name)) from None


PASS_THROUGH_NAMES = frozenset(method.value for method in PassThroughMethod)
