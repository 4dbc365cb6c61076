from dataclasses import dataclass
from typing import Any


@dataclass
class OutcomeTypeError(TypeError):
    value: Any

    def __post_init__(self):
        TypeError.__init__(self, self.value)

    def __str__(self):
        return (
            "is not in Success(value) or Failure(error) format, "
            f"instead got: {self.value!r}"
        )
