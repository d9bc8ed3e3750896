from __future__ import annotations

from collections.abc import Callable

from preconditions.errors import MissingArgumentError, PreconditionError
from preconditions.models import ErrorSpec, is_default, is_exception, is_message

DefaultError = Callable[[str | None], PreconditionError]


def check(condition: bool, error: BaseException | None) -> None:
    """Raise ``error`` unchanged when ``condition`` is false.

    The error object is validated before the condition is consulted: a
    ``None`` error raises :class:`MissingArgumentError` even when the
    condition holds.
    """
    if error is None:
        raise MissingArgumentError("error must not be None")
    if not condition:
        raise error


def check_present(value: object, error: BaseException | None) -> None:
    check(value is not None, error)


def resolve_error(
    error: ErrorSpec, factory: DefaultError, default_message: str | None = None
) -> BaseException | None:
    """Turn one of the three call shapes into the error object to raise.

    ``DEFAULT`` builds ``factory(default_message)``, a string builds
    ``factory(error)`` and an exception (or ``None``) passes through as is.
    """
    if is_default(error):
        return factory(default_message)
    if is_message(error):
        return factory(error)
    if error is None or is_exception(error):
        return error
    raise TypeError(
        f"error must be a message or an exception, not {type(error).__name__}"
    )
