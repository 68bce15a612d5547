import itertools
from collections.abc import Iterable
from typing import Any


class IncomparableKeyError(TypeError):
    def __init__(self, key: Any, other: Any) -> None:
        super().__init__(
            f"key {key!r} ({type(key).__name__}) cannot be ordered against "
            f"{other!r} ({type(other).__name__})"
        )
        self.key = key
        self.other = other


def key_less(key: Any, other: Any) -> bool:
    try:
        return bool(key < other)
    except TypeError as e:
        raise IncomparableKeyError(key, other) from e


def is_non_decreasing(keys: Iterable[Any]) -> bool:
    return all(not key_less(b, a) for a, b in itertools.pairwise(keys))
