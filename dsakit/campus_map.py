"""Map of campuses linked in four compass directions."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["Campus", "render_map"]

_DIRECTIONS = (
    ("north", "North / Atas: "),
    ("east", "East / Kanan: "),
    ("south", "South / Bawah : "),
    ("west", "West / Kiri: "),
)


@dataclass(eq=False)
class Campus:
    """A campus with its student count and neighbours on each side."""

    name: str
    students: int
    north: Campus | None = field(default=None, repr=False)
    south: Campus | None = field(default=None, repr=False)
    east: Campus | None = field(default=None, repr=False)
    west: Campus | None = field(default=None, repr=False)

    def _link(self, side: str, back: str, name: str, students: int) -> Campus:
        if getattr(self, side) is not None:
            raise ValueError(f"there is already a campus {side} of {self.name}")
        neighbour = Campus(name, students)
        setattr(neighbour, back, self)
        setattr(self, side, neighbour)
        return neighbour

    def add_north(self, name: str, students: int) -> Campus:
        """Create a campus to the north and return it."""
        return self._link("north", "south", name, students)

    def add_south(self, name: str, students: int) -> Campus:
        """Create a campus to the south and return it."""
        return self._link("south", "north", name, students)

    def add_east(self, name: str, students: int) -> Campus:
        """Create a campus to the east and return it."""
        return self._link("east", "west", name, students)

    def add_west(self, name: str, students: int) -> Campus:
        """Create a campus to the west and return it."""
        return self._link("west", "east", name, students)


def render_map(root: Campus, max_level: int) -> str:
    """Return the map as an indented tree, expanding each campus once."""
    parts: list[str] = []
    visited: set[int] = set()

    def walk(campus: Campus | None, level: int) -> None:
        if level == 0:
            parts.append("City: ")
        elif campus is None:
            parts.append("-\n")
            return
        parts.append(f"{campus.name} ({campus.students} )\n")
        if id(campus) in visited or level > max_level:
            return
        visited.add(id(campus))
        indent = "   " * (level + 1)
        for side, label in _DIRECTIONS:
            parts.append(indent + label)
            walk(getattr(campus, side), level + 1)

    walk(root, 0)
    return "".join(parts)