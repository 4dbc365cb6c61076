from hypothesis import given
from hypothesis.strategies import booleans, builds, integers, lists

from verdict import Failure, Success, success, failure, r_and, r_or, product, sum


outcomes = builds(lambda b, i: Success(i) if b else Failure(i), booleans(), integers())


def test_r_and():
    assert r_and(success(1), success(2)) == success([1, 2])
    assert r_and(success(1), failure(2)) == failure([2])
    assert r_and(failure(1), success(2)) == failure([1])
    assert r_and(failure(1), failure(2)) == failure([1, 2])


def test_r_or():
    assert r_or(success(1), success(2)) == success([1, 2])
    assert r_or(success(1), failure(2)) == success([1])
    assert r_or(failure(1), success(2)) == success([2])
    assert r_or(failure(1), failure(2)) == failure([1, 2])


def test_product():
    assert product([success(1), success(2), success(3)]) == success([1, 2, 3])
    assert product([failure(1), success(2), failure(3)]) == failure([1, 3])
    assert product([failure(1)]) == failure([1])
    assert product([]) == success([])


def test_product_drops_values_after_failure():
    assert product([success(1), failure(2), success(3)]) == failure([2])


def test_sum():
    assert sum([success(1), success(2), success(3)]) == success([1, 2, 3])
    assert sum([failure(1), success(2), failure(3)]) == success([2])
    assert sum([failure(1), failure(2), failure(3)]) == failure([1, 2, 3])
    assert sum([failure(1)]) == failure([1])
    assert sum([]) == failure([])


def test_list_payloads_stay_intact():
    assert product([success([1]), success([2])]) == success([[1], [2]])
    assert product([failure([1])]) == failure([[1]])
    assert sum([failure([1]), failure([2])]) == failure([[1], [2]])
    assert sum([success([1])]) == success([[1]])


@given(lists(outcomes))
def test_product_collects(os):
    errors = [o.error for o in os if not o]
    if errors:
        assert product(os) == failure(errors)
    else:
        assert product(os) == success([o.value for o in os])


@given(lists(outcomes))
def test_sum_collects(os):
    values = [o.value for o in os if o]
    if values:
        assert sum(os) == success(values)
    else:
        assert sum(os) == failure([o.error for o in os])
