"""Priority queue holding the active front of the fast marching method."""

import heapq
from typing import Iterable, Iterator

Entry = tuple[float, int, int]


class NarrowBand:
    """Min-priority queue of ``(distance, row, col)`` entries.

    Entries compare as tuples, so ties on distance are broken by row and then
    by column. This total order makes the visitation order, and therefore the
    output, reproducible. The queue does not deduplicate coordinates.
    """

    def __init__(self, entries: Iterable[Entry] = ()):
        self._heap: list[Entry] = [
            (float(d), int(r), int(c)) for d, r, c in entries
        ]
        heapq.heapify(self._heap)

    def push(self, distance: float, row: int, col: int) -> None:
        heapq.heappush(self._heap, (float(distance), int(row), int(col)))

    def pop(self) -> Entry:
        """Remove and return the smallest entry.

        Raises:
            IndexError: If the band is empty.
        """
        if not self._heap:
            raise IndexError("pop from an empty narrow band")
        return heapq.heappop(self._heap)

    def peek(self) -> Entry:
        if not self._heap:
            raise IndexError("peek into an empty narrow band")
        return self._heap[0]

    def clone(self) -> "NarrowBand":
        """Independent copy; pushing to or popping from it leaves ``self`` intact."""
        other = type(self).__new__(type(self))
        other._heap = list(self._heap)
        return other

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __iter__(self) -> Iterator[Entry]:
        """Iterate over the entries in pop order without consuming them."""
        return iter(sorted(self._heap))

    def __repr__(self) -> str:
        return f"NarrowBand({len(self._heap)} entries)"
