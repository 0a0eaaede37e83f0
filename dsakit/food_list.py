"""People, each with a shopping list of foods, kept in insertion order."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import TypeVar

__all__ = ["Food", "FoodList", "Person", "PersonList"]

_T = TypeVar("_T")


def _remove_named(items: list[_T], name: str, key: Callable[[_T], str]) -> bool:
    """Remove one entry called ``name``: the head, else the tail, else the first match."""
    if not items:
        return False
    if key(items[0]) == name:
        del items[0]
        return True
    if key(items[-1]) == name:
        del items[-1]
        return True
    for index, item in enumerate(items):
        if key(item) == name:
            del items[index]
            return True
    return False


@dataclass
class Food:
    """A named food item with a price."""

    name: str
    price: int


class FoodList:
    """Ordered list of foods."""

    def __init__(self) -> None:
        self._items: list[Food] = []

    def add(self, name: str, price: int) -> Food:
        """Append a food to the end of the list and return it."""
        food = Food(name, price)
        self._items.append(food)
        return food

    def remove(self, name: str) -> bool:
        """Remove a food called ``name``; return whether one was removed."""
        return _remove_named(self._items, name, lambda food: food.name)

    def __iter__(self) -> Iterator[Food]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)


@dataclass(eq=False)
class Person:
    """A person and the foods on their list."""

    name: str
    foods: FoodList = field(default_factory=FoodList, repr=False)


class PersonList:
    """Ordered list of people, each owning a food list."""

    def __init__(self) -> None:
        self._people: list[Person] = []

    def add_person(self, name: str) -> Person:
        """Append a new person and return them."""
        person = Person(name)
        self._people.append(person)
        return person

    def remove_person(self, name: str) -> bool:
        """Remove a person called ``name``; return whether one was removed."""
        return _remove_named(self._people, name, lambda person: person.name)

    def find_person(self, name: str) -> Person | None:
        """Return the first person called ``name``, or None."""
        return next((person for person in self._people if person.name == name), None)

    def _require(self, name: str) -> Person:
        person = self.find_person(name)
        if person is None:
            raise KeyError(name)
        return person

    def add_food(self, person_name: str, name: str, price: int) -> Food:
        """Add a food to the named person's list."""
        return self._require(person_name).foods.add(name, price)

    def remove_food(self, person_name: str, name: str) -> bool:
        """Remove a food from the named person's list."""
        return self._require(person_name).foods.remove(name)

    def __iter__(self) -> Iterator[Person]:
        return iter(self._people)

    def view(self) -> str:
        """Return each person's name followed by their foods, one per line."""
        lines: list[str] = []
        for person in self._people:
            lines.append(f"{person.name}\n")
            lines.extend(f"{food.name} {food.price}\n" for food in person.foods)
        return "".join(lines)