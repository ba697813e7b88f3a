"""Unit tests for snake_case identifier validation."""

import pytest

from tablegen.domain.services.identifier_validator import is_snake_case


@pytest.mark.parametrize("value", ["id", "user_id", "created_at", "col1", "test_table", "a_1_b"])
def test_valid_identifiers(value):
    assert is_snake_case(value) is True


@pytest.mark.parametrize(
    "value",
    ["", "-invalid-", "UserId", "user-id", "user id", "_id", "id_", "user__id", "1col", None, 42, []],
)
def test_invalid_identifiers(value):
    assert is_snake_case(value) is False
