"""Display-position bookkeeping for ordered collections."""

from collections.abc import Sequence
from enum import Enum
from typing import Protocol


class Orderable(Protocol):
    position: int


class MoveDirection(str, Enum):
    UP = "up"
    DOWN = "down"


class OrderableService:
    def next_position(self, items: Sequence[Orderable]) -> int:
        """One past the highest position in use, 1 for an empty collection."""
        return max((item.position for item in items), default=0) + 1

    def move(self, items: Sequence[Orderable], item: Orderable, direction: MoveDirection) -> bool:
        """Swap ``item`` with its neighbour in ``direction``.

        Returns False when ``item`` is already first (up) or last (down).
        """
        ordered = sorted(items, key=lambda candidate: candidate.position)
        index = next(i for i, candidate in enumerate(ordered) if candidate is item)
        neighbour_index = index - 1 if direction is MoveDirection.UP else index + 1
        if neighbour_index < 0 or neighbour_index >= len(ordered):
            return False

        neighbour = ordered[neighbour_index]
        if neighbour.position == item.position:
            # equal positions cannot be swapped; spread the collection first
            for position, candidate in enumerate(ordered, start=1):
                candidate.position = position
        item.position, neighbour.position = neighbour.position, item.position
        return True
