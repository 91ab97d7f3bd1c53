"""Fixed-capacity, append-only record store."""

from typing import Generic, Iterator, TypeVar

from bank_intake.exceptions import CapacityError

T = TypeVar("T")


class BoundedStore(Generic[T]):
    """Append-only arena of pre-sized slots with an occupied-count cursor.

    The store never grows: appending to a full store raises
    ``full_error`` and leaves the contents unchanged. Insertion order is
    preserved.

    Parameters
    ----------
    capacity : int
        Number of slots.
    full_error : type[CapacityError]
        Exception raised when appending to a full store.
    """

    def __init__(self, capacity: int, full_error: type[CapacityError] = CapacityError) -> None:
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._slots: list[T | None] = [None] * capacity
        self._count = 0
        self._full_error = full_error

    @property
    def capacity(self) -> int:
        return len(self._slots)

    @property
    def remaining(self) -> int:
        return self.capacity - self._count

    @property
    def is_full(self) -> bool:
        return self._count >= self.capacity

    @property
    def is_empty(self) -> bool:
        return self._count == 0

    def append(self, item: T) -> int:
        """Store ``item`` in the next free slot and return its index."""
        if self.is_full:
            raise self._full_error(f"All {self.capacity} slots are occupied")
        index = self._count
        self._slots[index] = item
        self._count += 1
        return index

    def at(self, index: int) -> T:
        if not 0 <= index < self._count:
            raise IndexError(f"Slot {index} is not occupied (size {self._count})")
        return self._slots[index]

    def __getitem__(self, index: int) -> T:
        return self.at(index)

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        for index in range(self._count):
            yield self._slots[index]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self._count}, capacity={self.capacity})"
