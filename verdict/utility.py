from typing import Any, TypeGuard

from .errors import OutcomeTypeError
from .result import Failure, Outcome, Success


def is_outcome(value: Any) -> TypeGuard[Outcome[Any, Any]]:
    return isinstance(value, (Success, Failure))


def check(value: Any) -> Outcome[Any, Any]:
    """Return `value` untouched if it is a `Success` or a `Failure`. Anything
    else is a programming error and raises `OutcomeTypeError`."""
    if is_outcome(value):
        return value
    raise OutcomeTypeError(value)
