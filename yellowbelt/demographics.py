"""Median ages of groups of people."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum, auto


class Gender(Enum):
    FEMALE = auto()
    MALE = auto()


@dataclass(frozen=True)
class Person:
    age: int
    gender: Gender
    is_employed: bool


def compute_median_age(persons: Iterable[Person]) -> int:
    """The age at the middle position by age (the upper middle for even counts); 0 if none."""
    ordered = sorted(persons, key=lambda person: person.age)
    if not ordered:
        return 0
    return ordered[len(ordered) // 2].age


_GROUPS: list[tuple[str, Callable[[Person], bool]]] = [
    ("Median age for females = ", lambda p: p.gender is Gender.FEMALE),
    ("Median age for males = ", lambda p: p.gender is Gender.MALE),
    (
        "Median age for employed females = ",
        lambda p: p.gender is Gender.FEMALE and p.is_employed,
    ),
    (
        "Median age for unemployed females = ",
        lambda p: p.gender is Gender.FEMALE and not p.is_employed,
    ),
    (
        "Median age for employed males = ",
        lambda p: p.gender is Gender.MALE and p.is_employed,
    ),
    (
        "Median age for unemployed males = ",
        lambda p: p.gender is Gender.MALE and not p.is_employed,
    ),
]


def stats_report(persons: Iterable[Person]) -> str:
    """Median ages overall and for each gender and employment group, one per line."""
    people = list(persons)
    lines = [f"Median age = {compute_median_age(people)}"]
    lines.extend(
        f"{message}{compute_median_age(filter(predicate, people))}"
        for message, predicate in _GROUPS
    )
    return "".join(f"{line}\n" for line in lines)