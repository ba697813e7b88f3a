"""Identifier validation for table and column names."""

import re
from typing import Any

# Lowercase words separated by single underscores: user_id, created_at, col1
SNAKE_CASE_PATTERN = re.compile(r"^[a-z][a-z0-9]*(?:_[a-z0-9]+)*$")


def is_snake_case(value: Any) -> bool:
    """Check whether a value is a snake_case identifier.

    Args:
        value: The value to check. Non-strings are never valid.

    Returns:
        True if the value is a non-empty snake_case string.
    """
    return isinstance(value, str) and SNAKE_CASE_PATTERN.match(value) is not None
