"""Constants used throughout the fluentext codebase."""


class Constants:
    """Centralized constants to avoid magic numbers and strings."""

    # Character classes
    SPECIAL_CHARACTERS_PATTERN = r"[^ A-Za-z0-9\-_]"
    """Anything outside letters, digits, space, hyphen and underscore."""

    WORD_START_PATTERN = r"(^|\s)(\S)"
    """First character of the string or of any whitespace-delimited word."""

    INNER_WORD_START_PATTERN = r"(\s)(\S)"
    """First character of a word that follows whitespace."""

    # Padding
    DEFAULT_PADDING = " "
    """Padding used by left_pad/right_pad and collection justification."""

    # Mail merge delimiters
    DEFAULT_LEFT_DELIMITER = "["
    """Left placeholder delimiter used by the config-bound formatter."""

    DEFAULT_RIGHT_DELIMITER = "]"
    """Right placeholder delimiter used by the config-bound formatter."""

    # Mail merge
    MERGE_PROGRESS_THRESHOLD = 100
    """Minimum number of rows before a verbose merge shows a progress bar."""

    # Logging
    LOGGER_NAME = "fluentext"
    """Package name passed to loguru's enable/disable."""
