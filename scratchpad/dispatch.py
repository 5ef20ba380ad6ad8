"""Polymorphic animals and type-labelled serialisation of simple values."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from typing import Sequence


class Animal(ABC):
    """An animal that can introduce itself."""

    def __init__(self, name: str) -> None:
        self.name = name

    @abstractmethod
    def speak(self) -> str:
        """Return the animal's greeting."""


class Cat(Animal):
    def speak(self) -> str:
        return f"Meow!! I am cat and my name is {self.name}"


class Dog(Animal):
    def speak(self) -> str:
        return f"Bark!! I am dog and my name is {self.name}"


class NumberKind(enum.Enum):
    """Integer types a number can be serialised as, with their width and signedness."""

    SIGNED_SHORT = "signed short"
    UNSIGNED_SHORT = "unsigned short"
    SIGNED_INT = "signed int"
    UNSIGNED_INT = "unsigned int"
    SIGNED_LONG = "signed long"
    UNSIGNED_LONG = "unsigned long"
    SIGNED_LONG_LONG = "signed long long"
    UNSIGNED_LONG_LONG = "unsigned long long"

    @property
    def signed(self) -> bool:
        return self.value.startswith("signed")

    @property
    def bits(self) -> int:
        if self.value.endswith("short"):
            return 16
        if self.value.endswith("int"):
            return 32
        return 64

    def bounds(self) -> tuple[int, int]:
        if self.signed:
            return -(1 << (self.bits - 1)), (1 << (self.bits - 1)) - 1
        return 0, (1 << self.bits) - 1


DEFAULT_LABEL = "default caught"


def serialize_cstring(text: str) -> str:
    """Return the quoted string with its label."""
    return f'cstring: "{text}"'


def serialize_number(value: int, kind: NumberKind | str | None = None) -> str:
    """Return ``value`` labelled with its integer kind; no kind gives the default label."""
    if kind is None:
        return DEFAULT_LABEL
    kind = NumberKind(kind)
    low, high = kind.bounds()
    if not low <= value <= high:
        raise ValueError(f"{value} does not fit in {kind.value}")
    return f"{kind.value}: {value}"


def serialize_animal(name: str, age: int) -> str:
    """Return the name and age of an animal, one labelled field per line."""
    return "\n".join(
        (serialize_cstring(name), serialize_number(age, NumberKind.UNSIGNED_LONG))
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Let a cat and a dog speak directly and as animals, then serialise an animal."""
    cat = Cat("Tim")
    dog = Dog("Bulldozer")
    print(cat.speak())
    print(dog.speak())
    animals: list[Animal] = [cat, dog]
    for animal in animals:
        print(animal.speak())
    print(serialize_animal("Bohr", 5))
    return 0