from __future__ import annotations

import os
from dataclasses import dataclass

from preconditions import IllegalNumberError, check, require_range, require_true

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    require_true(
        value in _TRUE_VALUES or value in _FALSE_VALUES,
        f"{name} must be a boolean but {raw} was given",
    )
    return value in _TRUE_VALUES


@dataclass(frozen=True)
class Settings:
    """Boundary settings loaded from environment in a type-safe, framework-free way."""

    error_status: int
    include_details: bool
    log_level: str

    @staticmethod
    def from_env() -> Settings:
        prefix = "PRECONDITIONS_"
        raw_status = os.getenv(f"{prefix}ERROR_STATUS", "422").strip() or "422"
        check(
            raw_status.isdecimal(),
            IllegalNumberError(
                f"{prefix}ERROR_STATUS must be an HTTP error status but "
                f"{raw_status} was given"
            ),
        )
        error_status = int(raw_status)
        require_range(
            error_status,
            400,
            599,
            f"{prefix}ERROR_STATUS must be an HTTP error status but "
            f"{error_status} was given",
        )
        include_details = _parse_bool(
            f"{prefix}INCLUDE_DETAILS", os.getenv(f"{prefix}INCLUDE_DETAILS", "true")
        )
        log_level = os.getenv(f"{prefix}LOG_LEVEL", "INFO").strip() or "INFO"
        return Settings(
            error_status=error_status,
            include_details=include_details,
            log_level=log_level.upper(),
        )
