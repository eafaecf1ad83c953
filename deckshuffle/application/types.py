"""
Application layer types.

Query results wrap the value a service returns together with its status.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Generic, Optional, TypeVar

T = TypeVar('T')


class ResultStatus(Enum):
    """Outcome of a service call."""
    SUCCESS = auto()
    FAILURE = auto()
    VALIDATION_ERROR = auto()


@dataclass(frozen=True)
class QueryResult(Generic[T]):
    """Result of a read-only service call."""
    success: bool
    status: ResultStatus
    data: Optional[T] = None
    message: str = ""
    error_code: Optional[str] = None

    @classmethod
    def success_result(cls, data: T, message: str = "ok") -> 'QueryResult[T]':
        """Build a successful result."""
        return cls(
            success=True,
            status=ResultStatus.SUCCESS,
            data=data,
            message=message
        )

    @classmethod
    def failure_result(cls, message: str, error_code: Optional[str] = None,
                       status: ResultStatus = ResultStatus.FAILURE) -> 'QueryResult[T]':
        """Build a failed result."""
        return cls(
            success=False,
            status=status,
            message=message,
            error_code=error_code
        )
