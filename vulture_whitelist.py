"""Vulture whitelist for false positives.

This file contains code that vulture incorrectly flags as unused
but is actually used by frameworks (Pydantic) or reached through dynamic
dispatch that static analysis cannot detect.
"""
# pylint: disable=all
# Pydantic field validators - used by framework via @field_validator decorator
_.validate_special_characters  # noqa: F821  # unused method (fluentext/core/config.py:26)
_.validate_padding  # noqa: F821  # unused method (fluentext/core/config.py:36)

# Pydantic model validator - used by framework via @model_validator decorator
_.validate_delimiters  # noqa: F821  # unused method (fluentext/core/config.py:42)

# Text methods reached through TextCollection pass-through dispatch (getattr by name)
_.snake_case  # noqa: F821  # unused method (fluentext/core/text.py)
_.pascal_case  # noqa: F821  # unused method (fluentext/core/text.py)
_.regex_replace_all  # noqa: F821  # unused method (fluentext/core/text.py)

# Enum members only looked up by value in PassThroughMethod.from_name
UPPERCASE  # noqa: F821  # unused variable (fluentext/core/dispatch.py)
LOWERCASE  # noqa: F821  # unused variable (fluentext/core/dispatch.py)
SLUG  # noqa: F821  # unused variable (fluentext/core/dispatch.py)
TITLE_CASE  # noqa: F821  # unused variable (fluentext/core/dispatch.py)
TRIM  # noqa: F821  # unused variable (fluentext/core/dispatch.py)
LEFT_PAD  # noqa: F821  # unused variable (fluentext/core/dispatch.py)
RIGHT_PAD  # noqa: F821  # unused variable (fluentext/core/dispatch.py)
