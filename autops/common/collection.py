"""A list whose equality and ordering come from a comparison function."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Callable, Generic, Iterable, Iterator, TypeVar

from autops.common.errors import ListIndexOutOfRangeError, ListNilComparatorError

T = TypeVar("T")

Compare = Callable[[T, T], int]


class ComparatorList(Generic[T]):
    """An ordered collection that uses ``compare(a, b)`` (negative, zero, positive) for equality and sorting."""

    def __init__(self, compare: Compare | None, items: Iterable[T] = ()) -> None:
        self._compare = compare
        self._items: list[T] = list(items or ())

    def _comparator(self) -> Compare:
        if self._compare is None:
            raise ListNilComparatorError()
        return self._compare

    def _index_of(self, item: T) -> int:
        compare = self._comparator()
        return next(
            (index for index, elem in enumerate(self._items) if compare(elem, item) == 0),
            -1,
        )

    def append(self, item: T) -> None:
        self._items.append(item)

    def remove(self, item: T) -> None:
        """Remove the first item equal to ``item``, if any."""
        index = self._index_of(item)
        if index != -1:
            del self._items[index]

    def remove_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise ListIndexOutOfRangeError()
        del self._items[index]

    def remove_all(self, item: T) -> None:
        compare = self._comparator()
        self._items = [elem for elem in self._items if compare(elem, item) != 0]

    def find(self, item: T) -> tuple[int, T] | None:
        """Return the index and the stored item equal to ``item``, or None."""
        index = self._index_of(item)
        if index == -1:
            return None
        return index, self._items[index]

    def items(self) -> list[T]:
        """A copy of the items."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __contains__(self, item: object) -> bool:
        return self._index_of(item) != -1  # type: ignore[arg-type]

    def sort(self) -> None:
        self._items.sort(key=cmp_to_key(self._comparator()))

    def clear(self) -> None:
        self._items.clear()

    def is_empty(self) -> bool:
        return not self._items

    def select_one(self, predicate: Callable[[T], bool]) -> T | None:
        """The first item matching ``predicate``, or None."""
        return next((item for item in self._items if predicate(item)), None)

    def select_all(self, predicate: Callable[[T], bool]) -> list[T]:
        """Every item matching ``predicate``, in order."""
        return [item for item in self._items if predicate(item)]