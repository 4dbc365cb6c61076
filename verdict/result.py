from dataclasses import dataclass


@dataclass(frozen=True)
class Success[V]:
    value: V

    def __bool__(self):
        return True


@dataclass(frozen=True)
class Failure[E]:
    error: E

    def __bool__(self):
        return False


type Outcome[E, V] = Failure[E] | Success[V]


def success[V](value: V) -> Success[V]:
    return Success(value)


def failure[E](error: E) -> Failure[E]:
    return Failure(error)
