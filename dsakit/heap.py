"""Binary heap that can be ordered as a min-heap or a max-heap."""

from __future__ import annotations

from typing import Any

__all__ = ["Heap"]


class Heap:
    """Array-backed binary heap; ``maximum`` selects a max-heap over a min-heap."""

    def __init__(self, maximum: bool = False) -> None:
        self.maximum = maximum
        self._items: list[Any] = []

    def _before(self, a: Any, b: Any) -> bool:
        return a > b if self.maximum else a < b

    def push(self, value: Any) -> None:
        """Add ``value`` and restore the heap order by sifting it up."""
        items = self._items
        items.append(value)
        index = len(items) - 1
        while index > 0:
            parent = (index - 1) // 2
            if not self._before(items[index], items[parent]):
                break
            items[index], items[parent] = items[parent], items[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while True:
            chosen = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and self._before(items[child], items[chosen]):
                    chosen = child
            if chosen == index:
                return
            items[chosen], items[index] = items[index], items[chosen]
            index = chosen

    def pop(self) -> Any:
        """Remove and return the root value."""
        if not self._items:
            raise IndexError("pop from an empty heap")
        root = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            self._sift_down(0)
        return root

    def peek(self) -> Any:
        """Return the root value without removing it."""
        if not self._items:
            raise IndexError("peek at an empty heap")
        return self._items[0]

    def as_list(self) -> list[Any]:
        """Return the heap's values in storage order."""
        return list(self._items)

    def render_tree(self) -> str:
        """Return the heap drawn sideways: right subtree above, four spaces per level."""
        lines: list[str] = []

        def walk(index: int, level: int) -> None:
            if index >= len(self._items):
                return
            walk(2 * index + 2, level + 1)
            lines.append("    " * level + str(self._items[index]) + "\n")
            walk(2 * index + 1, level + 1)

        walk(0, 0)
        return "".join(lines) + "\n"

    def __len__(self) -> int:
        return len(self._items)