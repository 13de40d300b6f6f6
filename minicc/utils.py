from typing import TypeVar, Generic, Iterator, Sequence, Self


T = TypeVar("T")


class Cursor(Generic[T], Iterator[T]):
    """Forward-only cursor over a sequence with a one-item peek.

    The underlying sequence is never modified.
    """

    def __init__(self, items: Sequence[T]):
        self._items = items
        self._position = 0

    def __iter__(self) -> Self:
        return self

    def __bool__(self) -> bool:
        return self._position < len(self._items)

    @property
    def position(self) -> int:
        return self._position

    def peek(self) -> T:
        if not self:
            raise StopIteration
        return self._items[self._position]

    def __next__(self) -> T:
        item = self.peek()
        self._position += 1
        return item
