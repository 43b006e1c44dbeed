"""Service Outcomes: tagged success/failure values returned by every service operation.

Invariants:
    - Ok wraps the success value, Err carries an ErrorKind and a human message
    - Err.validation_errors is only set for ErrorKind.VALIDATION
    - Both variants are immutable

Design Decisions:
    - Values, not exceptions: the HTTP layer matches on Ok/Err with `match`
      and the transaction boundary commits only on Ok
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from computer_keys.core import messages
from computer_keys.core.errors import ErrorKind

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome."""
    value: T


@dataclass(frozen=True)
class Err:
    """Failed outcome."""
    kind: ErrorKind
    message: str
    validation_errors: dict[str, str] | None = None

    @property
    def http_status(self) -> int:
        return self.kind.http_status


Outcome = Union[Ok[T], Err]


def validation_failure(
    errors: dict[str, str], message: str = messages.VALIDATION_FAILED,
) -> Err:
    """Build a VALIDATION failure with per-field messages."""
    return Err(ErrorKind.VALIDATION, message, validation_errors=errors)
