from __future__ import annotations

from typing import ClassVar, Literal

ErrorCode = Literal[
    "PRECONDITION_FAILED",
    "MISSING_ARGUMENT",
    "ILLEGAL_SEQUENCE",
    "ILLEGAL_NUMBER",
    "INDEX_OUT_OF_BOUNDS",
    "ILLEGAL_COLLECTION",
    "ILLEGAL_LIST",
    "ILLEGAL_MAP",
    "ILLEGAL_SET",
    "ILLEGAL_ARRAY",
    "ILLEGAL_BOOLEAN",
]


class PreconditionError(Exception):
    """Base class for every failure raised by the default guard errors.

    ``message`` may be omitted, in which case the exception type alone
    describes the failure. ``cause`` is attached as ``__cause__`` so it shows
    up in tracebacks the same way ``raise ... from cause`` would.
    """

    code: ClassVar[ErrorCode] = "PRECONDITION_FAILED"

    def __init__(
        self, message: str | None = None, cause: BaseException | None = None
    ) -> None:
        if message is None:
            super().__init__()
        else:
            super().__init__(message)
        self.message = message
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause


class MissingArgumentError(PreconditionError, TypeError):
    """A required reference (subject or custom error object) was None."""

    code: ClassVar[ErrorCode] = "MISSING_ARGUMENT"


class IllegalSequenceError(PreconditionError, ValueError):
    code: ClassVar[ErrorCode] = "ILLEGAL_SEQUENCE"


class IllegalNumberError(PreconditionError, ValueError):
    code: ClassVar[ErrorCode] = "ILLEGAL_NUMBER"


class IndexOutOfBoundsError(PreconditionError, IndexError):
    code: ClassVar[ErrorCode] = "INDEX_OUT_OF_BOUNDS"


class IllegalCollectionError(PreconditionError, ValueError):
    code: ClassVar[ErrorCode] = "ILLEGAL_COLLECTION"


class IllegalListError(IllegalCollectionError):
    code: ClassVar[ErrorCode] = "ILLEGAL_LIST"


class IllegalMapError(IllegalCollectionError):
    code: ClassVar[ErrorCode] = "ILLEGAL_MAP"


class IllegalSetError(IllegalCollectionError):
    code: ClassVar[ErrorCode] = "ILLEGAL_SET"


class IllegalArrayError(IllegalCollectionError):
    code: ClassVar[ErrorCode] = "ILLEGAL_ARRAY"


class IllegalBooleanError(PreconditionError, ValueError):
    code: ClassVar[ErrorCode] = "ILLEGAL_BOOLEAN"
