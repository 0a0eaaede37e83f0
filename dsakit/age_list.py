"""Doubly ended list of named entries that can be kept sorted by age."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

__all__ = ["Entry", "AgeList"]


@dataclass
class Entry:
    """A name with an age."""

    name: str
    age: int


class AgeList:
    """Sequence of entries with pushes and pops at both ends."""

    def __init__(self) -> None:
        self._items: list[Entry] = []

    def push_head(self, name: str, age: int) -> Entry:
        """Insert an entry at the front."""
        entry = Entry(name, age)
        self._items.insert(0, entry)
        return entry

    def push_tail(self, name: str, age: int) -> Entry:
        """Append an entry at the back."""
        entry = Entry(name, age)
        self._items.append(entry)
        return entry

    def insert_sorted(self, name: str, age: int) -> Entry:
        """Insert an entry so that an age-sorted list stays sorted."""
        if not self._items or age < self._items[0].age:
            return self.push_head(name, age)
        if age > self._items[-1].age:
            return self.push_tail(name, age)
        entry = Entry(name, age)
        position = next(
            index
            for index in range(1, len(self._items))
            if self._items[index].age >= age
        )
        self._items.insert(position, entry)
        return entry

    def pop_head(self) -> Entry:
        """Remove and return the first entry."""
        if not self._items:
            raise IndexError("nothing to pop")
        return self._items.pop(0)

    def pop_tail(self) -> Entry:
        """Remove and return the last entry."""
        if not self._items:
            raise IndexError("nothing to pop")
        return self._items.pop()

    def clear(self) -> None:
        """Remove every entry."""
        self._items.clear()

    def find(self, age: int) -> Entry | None:
        """Return the first entry with ``age``, or None."""
        return next((entry for entry in self._items if entry.age == age), None)

    def remove_age(self, age: int) -> Entry:
        """Remove and return the first entry with ``age``."""
        for index, entry in enumerate(self._items):
            if entry.age == age:
                return self._items.pop(index)
        raise KeyError(age)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def render(self) -> str:
        """Return the entries as one arrow-joined line, or ``Empty``."""
        if not self._items:
            return "Empty"
        return "".join(
            f"Name : {entry.name}, Age: {entry.age} -> " for entry in self._items
        ) + "\n"