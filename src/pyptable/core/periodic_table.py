from typing import Iterator

from pyptable.core.elements import Element
from pyptable.data.constants import ElementConstants


class PeriodicTableIterator:
    """
    Lazy iterator over all elements in ascending atomic-number order.

    Elements can be taken from both ends: ``next()`` advances the front cursor and
    ``next_back()`` the back cursor. The iterator is exhausted once the cursors meet, and
    ``len()`` is always the number of elements not yet yielded from either end.
    """

    def __init__(self, count: int = ElementConstants.ELEMENT_COUNT) -> None:
        self._front = 0
        self._back = count

    def __iter__(self) -> "PeriodicTableIterator":
        return self

    def __next__(self) -> Element:
        if self._front >= self._back:
            raise StopIteration
        element = Element(self._front)
        self._front += 1
        return element

    def next_back(self) -> Element:
        if self._front >= self._back:
            raise StopIteration
        self._back -= 1
        return Element(self._back)

    def __reversed__(self) -> Iterator[Element]:
        while self._front < self._back:
            yield self.next_back()

    def __len__(self) -> int:
        return self._back - self._front


def periodic_table() -> PeriodicTableIterator:
    """A fresh iterator over every element; each call restarts from both ends."""
    return PeriodicTableIterator()
