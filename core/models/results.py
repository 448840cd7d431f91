# =============================================================================
# core/models/results.py - Store Result Type
# =============================================================================
# Data services never raise on store failures; they return a StoreResult
# tagged with the outcome so callers pick the status code:
#
#   result = users.delete(7)
#   if result.outcome is StoreOutcome.NOT_FOUND: ...
# =============================================================================

from dataclasses import dataclass
from enum import Enum
from typing import Any


class StoreOutcome(str, Enum):
    """
    Outcome of a data-access call.

    - success: the operation ran and matched at least one row
    - not_found: the operation ran but matched nothing
    - store_error: the store rejected or failed the operation
    """
    SUCCESS = "success"
    NOT_FOUND = "not_found"
    STORE_ERROR = "store_error"


@dataclass(frozen=True)
class StoreResult:
    """Tagged result of a data-access call, with the rows it produced."""
    outcome: StoreOutcome
    data: Any = None
    error: str | None = None

    @classmethod
    def success(cls, data: Any = None) -> "StoreResult":
        return cls(StoreOutcome.SUCCESS, data)

    @classmethod
    def not_found(cls) -> "StoreResult":
        return cls(StoreOutcome.NOT_FOUND)

    @classmethod
    def store_error(cls, error: str) -> "StoreResult":
        return cls(StoreOutcome.STORE_ERROR, error=error)

    @property
    def ok(self) -> bool:
        return self.outcome is StoreOutcome.SUCCESS
