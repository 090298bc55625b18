"""Mail merge: fill a template once per data row."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from loguru import logger
from tqdm import tqdm

from fluentext.core.errors import LengthMismatchError
from fluentext.core.text import Text
from fluentext.utils.constants import Constants
from fluentext.utils.helpers import pluralize_count

if TYPE_CHECKING:
    from fluentext.core.collection import TextCollection


def merge_row(
    template: Text,
    tokens: Sequence[str],
    row: Sequence[Any],
    left_delimiter: str,
    right_delimiter: str,
    row_number: int = 0,
) -> Text:
    """Replace every `left + token + right` placeholder with the row's value.

    Args:
        template: Template to fill
        tokens: Placeholder names, in the same order as the row's values
        row: Replacement values (strings, numbers or stringable objects)
        left_delimiter: Opening placeholder delimiter
        right_delimiter: Closing placeholder delimiter
        row_number: Position of the row, reported on a length mismatch

    Returns:
        The filled template

    Raises:
        LengthMismatchError: If len(row) != len(tokens)
    """
    if len(row) != len(tokens):
        raise LengthMismatchError(len(tokens), len(row), row_number)

    merged = template.clone()
    for token, value in zip(tokens, row):
        placeholder = f"{left_delimiter}{token}{right_delimiter}"
        merged = merged.replace_all(placeholder, Text.create(value).to_string())
    return merged


def merge_rows(
    template: Text,
    tokens: Sequence[str],
    rows: Sequence[Sequence[Any]],
    left_delimiter: str,
    right_delimiter: str,
    verbose: bool = False,
) -> TextCollection:
    """Fill template once per row, collecting the results in row order.

    A mismatched row aborts the whole merge; nothing partial is returned.
    """
    from fluentext.core.collection import TextCollection

    if verbose:
        logger.info(f"  Merging {pluralize_count(len(rows), 'row', 'rows')}...")

    rows_iter: Any = rows
    if verbose and len(rows) >= Constants.MERGE_PROGRESS_THRESHOLD:
        rows_iter = tqdm(rows, desc="Merging rows", unit="row", leave=False)

    merged = TextCollection.empty()
    for row_number, row in enumerate(rows_iter):
        merged.add(merge_row(template, tokens, row, left_delimiter, right_delimiter, row_number))

    logger.debug(
        f"mail_merge: {len(tokens)} token(s) x {len(rows)} row(s) "
        f"with delimiters {left_delimiter!r}/{right_delimiter!r}"
    )
    return merged
