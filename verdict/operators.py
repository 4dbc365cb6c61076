from collections.abc import Callable, Iterable
from typing import Any
import time

from .result import Failure, Outcome, Success
from .utility import check
from .logging import logger


log = logger()

DEFAULT_DELAY = 1000
"""Time between two attempts of `retry`, in milliseconds."""


def map[E, V, R](outcome: Outcome[E, V], f: Callable[[V], R]) -> Outcome[E, R]:
    match outcome:
        case Success(value):
            return Success(f(value))
        case _:
            return outcome


def map_error[E, V, R](outcome: Outcome[E, V], f: Callable[[E], R]) -> Outcome[R, V]:
    match outcome:
        case Failure(error):
            return Failure(f(error))
        case _:
            return outcome


def map2[E, A, B, R](
    outcome1: Outcome[E, A], outcome2: Outcome[E, B], f: Callable[[A, B], R]
) -> Outcome[E, R]:
    """Combine the values of two successful outcomes with `f`. If either of
    them failed, the first failure is returned."""
    match (outcome1, outcome2):
        case (Success(a), Success(b)):
            return Success(f(a, b))
        case (Failure(), _):
            return outcome1
        case _:
            return outcome2


def and_then[E, V, R](
    outcome: Outcome[E, V], f: Callable[[V], Outcome[E, R]]
) -> Outcome[E, R]:
    """Chain together a sequence of computations that may fail. The result
    of `f` is returned as is, it should be an outcome itself."""
    match outcome:
        case Success(value):
            return f(value)
        case _:
            return outcome


def and_then_x[E, R](
    outcomes: Iterable[Outcome[E, Any]], f: Callable[..., Outcome[E, R]]
) -> Outcome[E, R]:
    """Like `and_then`, but for a list of outcomes. When all of them
    succeeded, `f` is called with their values as positional arguments."""
    match fold(outcomes):
        case Success(values):
            return f(*values)
        case failed:
            return failed


def fold[E, V](outcomes: Iterable[Outcome[E, V]]) -> Outcome[E, list[V]]:
    """Collect the values of a sequence of outcomes into a single `Success`.
    The first `Failure` found is returned instead, the rest of the sequence is
    left alone."""
    values: list[V] = []
    for outcome in outcomes:
        match outcome:
            case Success(value):
                values.append(value)
            case _:
                return outcome
    return Success(values)


def perform[E, V](outcome: Outcome[E, V], f: Callable[[V], Any]) -> Outcome[E, V]:
    if isinstance(outcome, Success):
        f(outcome.value)
    return outcome


def with_default[E, V, D](outcome: Outcome[E, V], default: D) -> V | D:
    match outcome:
        case Success(value):
            return value
        case _:
            return default


def is_ok(outcome: Outcome[Any, Any]) -> bool:
    return isinstance(outcome, Success)


def is_error(outcome: Outcome[Any, Any]) -> bool:
    return isinstance(outcome, Failure)


def resolve[E, V](outcome: Outcome[E, Outcome[E, V]]) -> Outcome[E, V]:
    """Flatten one level of nested outcomes."""
    match outcome:
        case Success(inner):
            return inner
        case _:
            return outcome


def catch_error[E, V](
    outcome: Outcome[E, V], expected_error: E, f: Callable[[E], Outcome[Any, Any]]
) -> Outcome[Any, Any]:
    """Recover from one specific error. If `outcome` failed with an error equal
    to `expected_error`, it is replaced with the outcome returned by `f`. Any
    other outcome is passed on untouched.

    Raises `OutcomeTypeError` if `f` returns something that is not an outcome.
    """
    match outcome:
        case Failure(error) if error == expected_error:
            return check(f(error))
        case _:
            return outcome


def catch_all_errors[E, V](
    outcome: Outcome[E, V], f: Callable[[E], Outcome[Any, Any]]
) -> Outcome[Any, Any]:
    match outcome:
        case Failure(error):
            return check(f(error))
        case _:
            return outcome


def retry[E, V, R](
    outcome: Outcome[E, V],
    f: Callable[[V], Outcome[E, R]],
    max_attempts: int,
    delay: int = DEFAULT_DELAY,
) -> Outcome[E, R]:
    """Call `f` on the value of a successful `outcome`, and call it again with
    that same value for as long as it keeps failing, at most `max_attempts`
    more times. Between attempts we block for `delay` milliseconds.

    A failed `outcome` is returned right away, without calling `f`. Otherwise
    the first success is returned, or the last failure once the attempts are
    used up.
    """
    match outcome:
        case Success(seed):
            pass
        case _:
            return outcome

    result = f(seed)
    remaining = max_attempts
    while isinstance(result, Failure) and remaining > 0:
        attempt = max_attempts - remaining + 1
        log.debug(f"attempt failed with `{result.error!r}`, retry {attempt}/{max_attempts}")
        if delay > 0:
            time.sleep(delay / 1000)
        remaining -= 1
        result = f(seed)

    if isinstance(result, Failure) and max_attempts > 0:
        log.debug(f"giving up after {max_attempts} retries: `{result.error!r}`")
    return result
