"""People who walk around and do their jobs, and a barking dog."""

from __future__ import annotations

from collections.abc import Iterable


class Person:
    """Someone with a name and a profession."""

    def __init__(self, name: str, profession: str) -> None:
        self._name = name
        self._profession = profession

    @property
    def name(self) -> str:
        return self._name

    @property
    def profession(self) -> str:
        return self._profession

    def _say(self, text: str) -> None:
        print(f"{self._profession}: {self._name}{text}")

    def walk(self, destination: str) -> None:
        """Report walking to ``destination``."""
        self._say(f" walks to: {destination}")


class Teacher(Person):
    def __init__(self, name: str, subject: str) -> None:
        super().__init__(name, "Teacher")
        self.subject = subject

    def teach(self) -> None:
        self._say(f" teaches: {self.subject}")


class Policeman(Person):
    def __init__(self, name: str) -> None:
        super().__init__(name, "Policeman")

    def check(self, person: Person) -> None:
        """Report checking another person."""
        self._say(
            f" checks {person.profession}. "
            f"{person.profession}'s name is: {person.name}"
        )


class Student(Person):
    def __init__(self, name: str, favourite_song: str) -> None:
        super().__init__(name, "Student")
        self.favourite_song = favourite_song

    def walk(self, destination: str) -> None:
        super().walk(destination)
        self.sing_song()

    def learn(self) -> None:
        self._say(" learns")

    def sing_song(self) -> None:
        self._say(f" sings a song: {self.favourite_song}")


def visit_places(person: Person, places: Iterable[str]) -> None:
    """Have ``person`` walk to each place in turn."""
    for place in places:
        person.walk(place)


class Animal:
    """An animal with a fixed name."""

    def __init__(self, name: str) -> None:
        self._name = name

    @property
    def name(self) -> str:
        return self._name


class Dog(Animal):
    def bark(self) -> None:
        print(f"{self.name} barks: woof!")