from __future__ import annotations

import math
from decimal import Decimal
from fractions import Fraction

import pytest

from preconditions import (
    IllegalNumberError,
    IndexOutOfBoundsError,
    MissingArgumentError,
    require_negative,
    require_positive,
    require_range,
    require_range_from,
    require_range_to,
)
from preconditions.models import Number


class _CustomError(RuntimeError):
    pass


@pytest.mark.parametrize("n", [0, 1, 2**63, 0.0, 1.5, Decimal("0"), Fraction(1, 3)])
def test_require_positive_accepts_zero_and_above(n: Number) -> None:
    require_positive(n)
    require_positive(n, "message")
    require_positive(n, _CustomError())


@pytest.mark.parametrize("n", [-1, -(2**63), -0.5, Decimal("-1"), Fraction(-1, 3)])
def test_require_positive_rejects_negative(n: Number) -> None:
    with pytest.raises(IllegalNumberError) as info:
        require_positive(n)
    assert str(info.value) == f"Number must be positive but {n} was given"


def test_require_positive_message_formats_decimal_and_float() -> None:
    with pytest.raises(
        IllegalNumberError, match=r"^Number must be positive but -42 was given$"
    ):
        require_positive(-42)
    with pytest.raises(IllegalNumberError, match=r"but -0\.25 was given$"):
        require_positive(-0.25)


def test_require_positive_custom_message_and_error() -> None:
    with pytest.raises(IllegalNumberError, match="^amount is negative$"):
        require_positive(-1, "amount is negative")
    err = _CustomError("custom")
    with pytest.raises(_CustomError) as info:
        require_positive(-1, err)
    assert info.value is err


def test_require_positive_none_error_fails_even_for_valid_number() -> None:
    with pytest.raises(MissingArgumentError):
        require_positive(5, None)


def test_require_positive_none_subject() -> None:
    with pytest.raises(MissingArgumentError):
        require_positive(None)


def test_nan_fails_both_sign_checks() -> None:
    with pytest.raises(IllegalNumberError, match="but nan was given"):
        require_positive(math.nan)
    with pytest.raises(IllegalNumberError, match="but nan was given"):
        require_negative(math.nan)


@pytest.mark.parametrize("n", [Decimal("NaN"), Decimal("-NaN"), Decimal("sNaN")])
def test_decimal_nan_fails_both_sign_checks(n: Decimal) -> None:
    with pytest.raises(IllegalNumberError, match=f"but {n} was given"):
        require_positive(n)
    with pytest.raises(IllegalNumberError, match=f"but {n} was given"):
        require_negative(n)


def test_nan_is_out_of_every_range() -> None:
    with pytest.raises(IndexOutOfBoundsError, match="Index NaN out-of-bounds"):
        require_range(Decimal("NaN"), Decimal("0"), Decimal("10"))
    with pytest.raises(IndexOutOfBoundsError):
        require_range(Decimal("5"), Decimal("NaN"), Decimal("10"))
    with pytest.raises(IndexOutOfBoundsError):
        require_range_to(Decimal("NaN"), Decimal("10"))
    with pytest.raises(IndexOutOfBoundsError):
        require_range_from(Decimal("1"), Decimal("sNaN"))
    with pytest.raises(IndexOutOfBoundsError, match="Index nan out-of-bounds"):
        require_range(math.nan, 0, 10)


@pytest.mark.parametrize("n", [-1, -(2**70), -0.001, Decimal("-0.1")])
def test_require_negative_accepts_below_zero(n: Number) -> None:
    require_negative(n)


@pytest.mark.parametrize("n", [0, 1, 0.0, 10**20])
def test_require_negative_rejects_zero_and_above(n: Number) -> None:
    with pytest.raises(IllegalNumberError) as info:
        require_negative(n)
    assert str(info.value) == f"Number must be negative but {n} was given"


def test_require_negative_custom_shapes() -> None:
    with pytest.raises(IllegalNumberError, match="^must be below zero$"):
        require_negative(0, "must be below zero")
    with pytest.raises(_CustomError):
        require_negative(0, _CustomError())
    with pytest.raises(MissingArgumentError):
        require_negative(-1, None)


def test_require_range_inclusive_bounds() -> None:
    require_range(9, 0, 10)
    require_range(0, 0, 10)
    require_range(10, 0, 10)
    require_range(-3, -5, -1)
    with pytest.raises(IndexOutOfBoundsError) as info:
        require_range(10, 0, 9)
    assert str(info.value) == (
        "Index 10 out-of-bounds for range from length 0 to length 9"
    )
    with pytest.raises(IndexOutOfBoundsError):
        require_range(-1, 0, 9)


def test_require_range_inverted_bounds_always_fail() -> None:
    for index in (-1, 0, 3, 5, 6):
        with pytest.raises(IndexOutOfBoundsError):
            require_range(index, 5, 0)


def test_require_range_custom_shapes() -> None:
    with pytest.raises(IndexOutOfBoundsError, match="^bad page$"):
        require_range(11, 1, 10, "bad page")
    err = _CustomError()
    with pytest.raises(_CustomError) as info:
        require_range(11, 1, 10, err)
    assert info.value is err
    with pytest.raises(MissingArgumentError):
        require_range(5, 1, 10, None)


def test_require_range_none_arguments() -> None:
    with pytest.raises(MissingArgumentError):
        require_range(None, 0, 1)
    with pytest.raises(MissingArgumentError):
        require_range(0, None, 1)
    with pytest.raises(MissingArgumentError, match="^index required$"):
        require_range(0, 0, None, "index required")


def test_require_range_to() -> None:
    require_range_to(0, 0)
    require_range_to(9, 10)
    require_range_to(10, 10)
    with pytest.raises(IndexOutOfBoundsError) as info:
        require_range_to(11, 10)
    assert str(info.value) == (
        "Index 11 out-of-bounds for range from length 0 to length 10"
    )
    with pytest.raises(IndexOutOfBoundsError):
        require_range_to(-1, 10)
    with pytest.raises(IndexOutOfBoundsError, match="^too far$"):
        require_range_to(11, 10, "too far")
    with pytest.raises(MissingArgumentError):
        require_range_to(1, 10, None)


def test_require_range_from() -> None:
    require_range_from(10, 9)
    require_range_from(9, 9)
    require_range_from(-1, -2)
    with pytest.raises(IndexOutOfBoundsError) as info:
        require_range_from(8, 9)
    assert str(info.value) == "Index 8 out-of-bounds for range from length 9"
    with pytest.raises(_CustomError):
        require_range_from(8, 9, _CustomError())
    with pytest.raises(MissingArgumentError):
        require_range_from(10, 9, None)


def test_range_accepts_mixed_real_types() -> None:
    require_range(1.5, 1, 2)
    require_range(Decimal("1.5"), Decimal("1"), Decimal("2"))
    with pytest.raises(IndexOutOfBoundsError, match="Index 2.5 out-of-bounds"):
        require_range(2.5, 1, 2)
