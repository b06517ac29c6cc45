r"""Unit tests for the parameter validation."""

from __future__ import annotations

import pytest

from persevere.validation import validate_max_attempts, validate_operation


@pytest.mark.parametrize("max_attempts", [1, 2, 30])
def test_validate_max_attempts_valid(max_attempts: int) -> None:
    validate_max_attempts(max_attempts)


@pytest.mark.parametrize("max_attempts", [0, -3])
def test_validate_max_attempts_too_small(max_attempts: int) -> None:
    with pytest.raises(ValueError, match=r"max_attempts must be >= 1, got"):
        validate_max_attempts(max_attempts)


@pytest.mark.parametrize(
    ("max_attempts", "type_name"),
    [(2.0, "float"), ("3", "str"), (None, "NoneType"), (False, "bool"), (True, "bool")],
)
def test_validate_max_attempts_wrong_type(max_attempts: object, type_name: str) -> None:
    with pytest.raises(TypeError, match=rf"max_attempts must be an integer, got {type_name}"):
        validate_max_attempts(max_attempts)


def test_validate_operation_valid() -> None:
    validate_operation(lambda: None)


def test_validate_operation_invalid() -> None:
    with pytest.raises(TypeError, match=r"operation must be callable, got NoneType"):
        validate_operation(None)
