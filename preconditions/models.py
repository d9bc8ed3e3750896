from __future__ import annotations

import array
import enum
from collections.abc import Mapping, Set
from decimal import Decimal
from fractions import Fraction
from typing import Final, Literal, TypeGuard


class _Default(enum.Enum):
    DEFAULT = "DEFAULT"

    def __repr__(self) -> str:
        return "DEFAULT"


# Marks an omitted ``error`` argument; an explicit ``None`` means the
# caller-supplied error object is absent.
DEFAULT: Final = _Default.DEFAULT

ErrorSpec = str | BaseException | None | _Default
Number = int | float | Decimal | Fraction
CollectionKind = Literal["List", "Map", "Set", "Array"]


def is_default(value: object) -> TypeGuard[_Default]:
    return value is DEFAULT


def is_message(value: object) -> TypeGuard[str]:
    return isinstance(value, str)


def is_exception(value: object) -> TypeGuard[BaseException]:
    return isinstance(value, BaseException)


def collection_kind(value: object) -> CollectionKind:
    """Return the kind name used in default collection messages.

    Strings are not collections here; callers dispatch them separately.
    Raises ``TypeError`` for objects that have no length.
    """
    if isinstance(value, (str, bytes)) or not hasattr(value, "__len__"):
        raise TypeError(
            f"Expected a list, map, set or array but {type(value).__name__} was given"
        )
    if isinstance(value, Mapping):
        return "Map"
    if isinstance(value, Set):
        return "Set"
    if isinstance(value, (tuple, array.array)):
        return "Array"
    return "List"
