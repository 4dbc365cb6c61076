from .result import Success, Failure, Outcome, success, failure
from .errors import OutcomeTypeError
from .utility import check, is_outcome
from .operators import (
    DEFAULT_DELAY,
    and_then,
    and_then_x,
    catch_all_errors,
    catch_error,
    fold,
    is_error,
    is_ok,
    map,
    map2,
    map_error,
    perform,
    resolve,
    retry,
    with_default,
)
from .calc import r_and, r_or, product, sum
from .version import __version__

ok = success
error = failure

__all__ = [
    "Success", "Failure", "Outcome", "success", "failure", "ok", "error",
    "OutcomeTypeError", "check", "is_outcome",
    "DEFAULT_DELAY", "and_then", "and_then_x", "catch_all_errors", "catch_error",
    "fold", "is_error", "is_ok", "map", "map2", "map_error", "perform", "resolve",
    "retry", "with_default",
    "r_and", "r_or", "product", "sum",
    "__version__",
]
