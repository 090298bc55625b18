"""Configuration model and loading."""

import json

from loguru import logger
from pydantic import BaseModel, field_validator, model_validator

from fluentext.core.errors import InvalidPatternError
from fluentext.utils.constants import Constants
from fluentext.utils.helpers import compile_pattern, expand_file_path


class Config(BaseModel):
    """Settings shared by the Formatter and the logging setup."""

    verbose: bool = False
    debug: bool = False

    special_characters: str = Constants.SPECIAL_CHARACTERS_PATTERN
    padding: str = Constants.DEFAULT_PADDING
    left_delimiter: str = Constants.DEFAULT_LEFT_DELIMITER
    right_delimiter: str = Constants.DEFAULT_RIGHT_DELIMITER

    @field_validator("special_characters")
    @classmethod
    def validate_special_characters(cls, value: str) -> str:
        """Reject patterns the regex engine cannot compile."""
        try:
            compile_pattern(value)
        except InvalidPatternError as e:
            raise ValueError(e.reason) from e
        return value

    @field_validator("padding")
    @classmethod
    def validate_padding(cls, value: str) -> str:
        if not value:
            raise ValueError("padding must not be empty")
        return value

    @model_validator(mode="after")
    def validate_delimiters(self) -> "Config":
        """Both merge delimiters are required; an empty one would match everywhere."""
        if not self.left_delimiter or not self.right_delimiter:
            raise ValueError("left_delimiter and right_delimiter must not be empty")
        return self


def load_config(config_file: str | None = None, **overrides) -> Config:
    """Load configuration from a JSON file, then apply keyword overrides.

    Overrides set to None are ignored, so unset CLI-style values fall back to
    the file (and then to the model defaults).

    Args:
        config_file: Path to a JSON config file (may contain ~), or None
        **overrides: Field values taking precedence over the file

    Returns:
        Validated Config

    Raises:
        pydantic.ValidationError: If any value fails validation
    """
    data: dict = {}
    path = expand_file_path(config_file)
    if path:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        logger.debug(f"Loaded config from {path}: {sorted(data)}")

    data.update({key: value for key, value in overrides.items() if value is not None})
    return Config(**data)
