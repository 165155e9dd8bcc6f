from typing import Callable, Optional, TypeVar

T = TypeVar("T")


def firstIndex(l: list[T], pred: Callable[[T], bool]) -> int:
    for i, item in enumerate(l):
        if pred(item):
            return i
    return -1


def first(l: list[T], pred: Callable[[T], bool]) -> Optional[T]:
    i = firstIndex(l, pred)
    if i < 0:
        return None
    return l[i]
