"""Boolean style combination of outcomes.

`r_and` and `r_or` combine two outcomes into one holding a list, `product`
and `sum` extend them over a whole sequence of outcomes by left folding.
"""

from collections.abc import Callable, Iterable
from typing import Any

from .result import Failure, Outcome, Success


def r_and[E, V](o1: Outcome[E, V], o2: Outcome[E, V]) -> Outcome[list[E], list[V]]:
    """Succeeds with both values if both succeeded, otherwise fails with the
    errors of the failed ones.

        r_and(Success(1), Success(2)) == Success([1, 2])
        r_and(Success(1), Failure(2)) == Failure([2])
        r_and(Failure(1), Success(2)) == Failure([1])
        r_and(Failure(1), Failure(2)) == Failure([1, 2])
    """
    match (o1, o2):
        case (Success(a), Success(b)):
            return Success([a, b])
        case (Success(), Failure(b)):
            return Failure([b])
        case (Failure(a), Success()):
            return Failure([a])
        case (Failure(a), Failure(b)):
            return Failure([a, b])
    raise TypeError(f"expected two outcomes, got: {o1!r}, {o2!r}")


def r_or[E, V](o1: Outcome[E, V], o2: Outcome[E, V]) -> Outcome[list[E], list[V]]:
    """Succeeds with the values of the successful ones if any succeeded,
    otherwise fails with both errors.

        r_or(Success(1), Success(2)) == Success([1, 2])
        r_or(Success(1), Failure(2)) == Success([1])
        r_or(Failure(1), Success(2)) == Success([2])
        r_or(Failure(1), Failure(2)) == Failure([1, 2])
    """
    match (o1, o2):
        case (Success(a), Success(b)):
            return Success([a, b])
        case (Success(a), Failure()):
            return Success([a])
        case (Failure(), Success(b)):
            return Success([b])
        case (Failure(a), Failure(b)):
            return Failure([a, b])
    raise TypeError(f"expected two outcomes, got: {o1!r}, {o2!r}")


type Combinator = Callable[[Outcome[Any, Any], Outcome[Any, Any]], Outcome[list[Any], list[Any]]]


def _accumulate(
    combine: Combinator, acc: Outcome[list[Any], list[Any]], outcome: Outcome[Any, Any]
) -> Outcome[list[Any], list[Any]]:
    result = combine(acc, outcome)
    # when the accumulator survives, its list is the first item: splice it in
    if isinstance(result, type(acc)):
        match result:
            case Success([head, *tail]):
                return Success(head + tail)
            case Failure([head, *tail]):
                return Failure(head + tail)
    return result


def _reduce(
    combine: Combinator, outcomes: Iterable[Outcome[Any, Any]], seed: Outcome[list[Any], list[Any]]
) -> Outcome[list[Any], list[Any]]:
    acc = seed
    for outcome in outcomes:
        acc = _accumulate(combine, acc, outcome)
    return acc


def product[E, V](outcomes: Iterable[Outcome[E, V]]) -> Outcome[list[E], list[V]]:
    """Left fold with `r_and`, starting from `Success([])`. Once a failure is
    met, values of later successes no longer count.

        product([Success(1), Success(2), Success(3)]) == Success([1, 2, 3])
        product([Failure(1), Success(2), Failure(3)]) == Failure([1, 3])
        product([]) == Success([])
    """
    return _reduce(r_and, outcomes, Success([]))


def sum[E, V](outcomes: Iterable[Outcome[E, V]]) -> Outcome[list[E], list[V]]:
    """Left fold with `r_or`, starting from `Failure([])`. Once a success is
    met, errors of later failures no longer count.

        sum([Failure(1), Success(2), Failure(3)]) == Success([2])
        sum([Failure(1), Failure(2)]) == Failure([1, 2])
        sum([]) == Failure([])
    """
    return _reduce(r_or, outcomes, Failure([]))
