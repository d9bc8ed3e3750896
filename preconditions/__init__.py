"""Precondition guards for validating arguments at the start of a call."""

from __future__ import annotations

from preconditions.checks import check
from preconditions.errors import (
    IllegalArrayError,
    IllegalBooleanError,
    IllegalCollectionError,
    IllegalListError,
    IllegalMapError,
    IllegalNumberError,
    IllegalSequenceError,
    IllegalSetError,
    IndexOutOfBoundsError,
    MissingArgumentError,
    PreconditionError,
)
from preconditions.guards import (
    require_end_with,
    require_false,
    require_negative,
    require_non_blank,
    require_non_empty,
    require_non_null,
    require_positive,
    require_range,
    require_range_from,
    require_range_to,
    require_start_with,
    require_true,
)
from preconditions.models import DEFAULT

__all__ = [
    "DEFAULT",
    "IllegalArrayError",
    "IllegalBooleanError",
    "IllegalCollectionError",
    "IllegalListError",
    "IllegalMapError",
    "IllegalNumberError",
    "IllegalSequenceError",
    "IllegalSetError",
    "IndexOutOfBoundsError",
    "MissingArgumentError",
    "PreconditionError",
    "check",
    "require_end_with",
    "require_false",
    "require_negative",
    "require_non_blank",
    "require_non_empty",
    "require_non_null",
    "require_positive",
    "require_range",
    "require_range_from",
    "require_range_to",
    "require_start_with",
    "require_true",
]
