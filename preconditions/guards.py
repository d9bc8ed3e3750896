"""Guard functions that validate preconditions at the start of a call.

Every guard evaluates one predicate and either returns ``None`` or raises
exactly one exception. The trailing ``error`` argument selects what is
raised on failure:

- omitted: the category's default exception with its default message;
- a ``str``: the category's default exception carrying that message;
- an exception instance: raised verbatim.

An explicit ``error=None`` always raises :class:`MissingArgumentError`,
even when the predicate holds. The evaluation order is fixed: error object,
then subject presence, then the predicate.

>>> require_non_empty("")
Traceback (most recent call last):
    ...
preconditions.errors.IllegalSequenceError: String must not be blank
"""

from __future__ import annotations

from collections.abc import Collection
from decimal import Decimal
from typing import TypeVar

from preconditions.checks import DefaultError, check, check_present, resolve_error
from preconditions.errors import (
    IllegalArrayError,
    IllegalBooleanError,
    IllegalListError,
    IllegalMapError,
    IllegalNumberError,
    IllegalSequenceError,
    IllegalSetError,
    IndexOutOfBoundsError,
    MissingArgumentError,
    PreconditionError,
)
from preconditions.models import (
    DEFAULT,
    CollectionKind,
    ErrorSpec,
    Number,
    collection_kind,
    is_default,
    is_message,
)

T = TypeVar("T")

_COLLECTION_ERRORS: dict[CollectionKind, type[PreconditionError]] = {
    "List": IllegalListError,
    "Map": IllegalMapError,
    "Set": IllegalSetError,
    "Array": IllegalArrayError,
}


def _resolve(
    error: ErrorSpec, factory: DefaultError, default_message: str | None
) -> BaseException:
    exc = resolve_error(error, factory, default_message)
    if exc is None:
        raise MissingArgumentError("error must not be None")
    return exc


def _require_subject(value: T | None, error: ErrorSpec) -> T:
    # A caller message travels with the missing-argument failure too.
    message = error if is_message(error) else None
    if value is None:
        raise MissingArgumentError(message)
    return value


def _is_nan(number: Number) -> bool:
    # Decimal NaN comparisons signal InvalidOperation instead of returning False.
    if isinstance(number, Decimal):
        return number.is_nan()
    return number != number


def _comparable(*numbers: Number) -> bool:
    return not any(_is_nan(n) for n in numbers)


def require_non_null(value: object, error: ErrorSpec = DEFAULT) -> None:
    """Ensure ``value`` is not ``None``."""
    check_present(value, _resolve(error, MissingArgumentError, None))


def require_non_blank(string: str | None, error: ErrorSpec = DEFAULT) -> None:
    """Ensure ``string`` is not the empty string.

    Whitespace counts as content: ``" "`` passes. Use
    :func:`require_non_empty` when ``string`` may also be ``None``.
    """
    exc = _resolve(error, IllegalSequenceError, "String must not be blank")
    string = _require_subject(string, error)
    check(len(string) > 0, exc)


def require_non_empty(
    value: str | Collection[object] | None, error: ErrorSpec = DEFAULT
) -> None:
    """Ensure ``value`` is present and contains at least one element.

    Strings are checked for blankness and fail with
    :class:`IllegalSequenceError`. Lists, maps, sets and arrays (tuples and
    ``array.array``) fail with the matching :class:`IllegalCollectionError`
    subclass, e.g. ``"List must contain at least one or more elements"``.
    ``None`` always fails with :class:`MissingArgumentError` first, whatever
    the emptiness of the input would have been.
    """
    if isinstance(value, str) or value is None:
        exc = _resolve(error, IllegalSequenceError, "String must not be blank")
        value = _require_subject(value, error)
        check(len(value) > 0, exc)
        return

    kind = collection_kind(value)
    exc = _resolve(
        error,
        _COLLECTION_ERRORS[kind],
        f"{kind} must contain at least one or more elements",
    )
    check(len(value) > 0, exc)


def require_positive(number: Number | None, error: ErrorSpec = DEFAULT) -> None:
    """Ensure ``number`` is zero or greater.

    Zero is accepted. NaN is rejected, as every comparison with it is false.
    """
    exc = _resolve(
        error, IllegalNumberError, f"Number must be positive but {number} was given"
    )
    number = _require_subject(number, error)
    check(_comparable(number) and number >= 0, exc)


def require_negative(number: Number | None, error: ErrorSpec = DEFAULT) -> None:
    """Ensure ``number`` is strictly less than zero."""
    exc = _resolve(
        error, IllegalNumberError, f"Number must be negative but {number} was given"
    )
    number = _require_subject(number, error)
    check(_comparable(number) and number < 0, exc)


def require_range_to(
    index: Number | None, to: Number | None, error: ErrorSpec = DEFAULT
) -> None:
    """Ensure ``0 <= index <= to``."""
    exc = _resolve(
        error,
        IndexOutOfBoundsError,
        f"Index {index} out-of-bounds for range from length 0 to length {to}",
    )
    index = _require_subject(index, error)
    to = _require_subject(to, error)
    check(_comparable(index, to) and 0 <= index <= to, exc)


def require_range_from(
    index: Number | None, from_: Number | None, error: ErrorSpec = DEFAULT
) -> None:
    """Ensure ``index >= from_``."""
    exc = _resolve(
        error,
        IndexOutOfBoundsError,
        f"Index {index} out-of-bounds for range from length {from_}",
    )
    index = _require_subject(index, error)
    from_ = _require_subject(from_, error)
    check(_comparable(index, from_) and index >= from_, exc)


def require_range(
    index: Number | None,
    from_: Number | None,
    to: Number | None,
    error: ErrorSpec = DEFAULT,
) -> None:
    """Ensure ``from_ <= index <= to``, both bounds inclusive.

    The lower bound is compared first. Either violated bound raises the same
    error, and an inverted range (``from_ > to``) is not rejected on its own:
    no index can satisfy it, so every call fails.
    """
    exc = _resolve(
        error,
        IndexOutOfBoundsError,
        f"Index {index} out-of-bounds for range from length {from_} to length {to}",
    )
    index = _require_subject(index, error)
    from_ = _require_subject(from_, error)
    to = _require_subject(to, error)
    check(_comparable(index, from_, to) and from_ <= index and index <= to, exc)


def _starts_with(string: str, prefix: str, offset: int) -> bool:
    # Negative offsets never match; str.startswith would count from the end.
    if offset < 0 or offset > len(string):
        return False
    return string.startswith(prefix, offset)


def require_start_with(
    string: str | None,
    prefix: str | None,
    offset: int | str | BaseException | None = None,
    error: ErrorSpec = DEFAULT,
) -> None:
    """Ensure ``string`` contains ``prefix`` starting at ``offset``.

    ``offset`` defaults to 0. A message or exception given in place of the
    offset is taken as ``error``, so ``require_start_with(s, p, "message")``
    works like the other guards.
    """
    position: int | None
    if isinstance(offset, (str, BaseException)):
        if not is_default(error):
            raise TypeError("error given both positionally and by keyword")
        position, error = None, offset
    else:
        position = offset
    if position is None:
        default_message = (
            f"String must start with the {prefix} prefix, but {string} was given"
        )
    else:
        default_message = (
            f"String must start with the {prefix} prefix from {position} index, "
            f"but {string} was given"
        )
    exc = _resolve(error, IllegalSequenceError, default_message)
    string = _require_subject(string, error)
    prefix = _require_subject(prefix, error)
    check(_starts_with(string, prefix, position or 0), exc)


def require_end_with(
    string: str | None, suffix: str | None, error: ErrorSpec = DEFAULT
) -> None:
    exc = _resolve(
        error,
        IllegalSequenceError,
        f"String must end with the {suffix} suffix, but {string} was given",
    )
    string = _require_subject(string, error)
    suffix = _require_subject(suffix, error)
    check(string.endswith(suffix), exc)


def _format_boolean(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return repr(value)


def require_true(value: bool | None, error: ErrorSpec = DEFAULT) -> None:
    """Ensure ``value`` is ``True``; truthy non-bool values are rejected."""
    exc = _resolve(
        error,
        IllegalBooleanError,
        f"Boolean must be true, but {_format_boolean(value)} was given",
    )
    value = _require_subject(value, error)
    check(value is True, exc)


def require_false(value: bool | None, error: ErrorSpec = DEFAULT) -> None:
    """Ensure ``value`` is ``False``; falsy non-bool values are rejected."""
    exc = _resolve(
        error,
        IllegalBooleanError,
        f"Boolean must be false, but {_format_boolean(value)} was given",
    )
    value = _require_subject(value, error)
    check(value is False, exc)
