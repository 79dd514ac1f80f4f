"""
Exceptions raised by the sorting strategies.

Every rejected input derives from `InvalidArgumentError`, which is itself a
`ValueError`, so callers can catch either.

    InvalidArgumentError
    ├── EmptySequenceError        any strategy, input has no elements
    ├── UnsupportedElementError   radix_sort, negative or non-integral element
    └── ComparatorMismatchError   radix_sort, `less` disagrees with numeric order
"""

from __future__ import annotations

__all__ = [
    "InvalidArgumentError",
    "EmptySequenceError",
    "UnsupportedElementError",
    "ComparatorMismatchError",
]


class InvalidArgumentError(ValueError):
    """Base class for inputs a strategy refuses to sort."""


class EmptySequenceError(InvalidArgumentError):
    def __init__(self, message: str = "sequence must not be empty") -> None:
        super().__init__(message)


class UnsupportedElementError(InvalidArgumentError):
    def __init__(self, index: int, value: object, reason: str) -> None:
        self.index = index
        self.value = value
        super().__init__(f"unsupported element at index {index} ({value!r}): {reason}")


class ComparatorMismatchError(InvalidArgumentError):
    def __init__(self, index: int, left: object, right: object) -> None:
        self.index = index
        self.left = left
        self.right = right
        super().__init__(
            "comparator disagrees with ascending numeric order at index "
            f"{index}: {left!r} then {right!r}"
        )
