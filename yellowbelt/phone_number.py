"""International phone numbers of the form ``+COUNTRY-CITY-LOCAL``."""

from __future__ import annotations


class PhoneNumber:
    """A phone number split into country code, city code and local number.

    The text must start with ``+``; the country code runs to the first ``-``,
    the city code to the second, and the local number is everything after
    that. None of the three parts may be empty; digits are not checked.
    """

    def __init__(self, international_number: str) -> None:
        if not international_number.startswith("+"):
            raise ValueError(f"phone number must start with '+': {international_number!r}")

        rest = international_number[1:]
        country, _, rest = rest.partition("-")
        city, _, rest = rest.partition("-")
        local = rest.split("\n", 1)[0]

        if not (country and city and local):
            raise ValueError(
                f"phone number needs country, city and local parts: {international_number!r}"
            )

        self._country_code = country
        self._city_code = city
        self._local_number = local

    @property
    def country_code(self) -> str:
        return self._country_code

    @property
    def city_code(self) -> str:
        return self._city_code

    @property
    def local_number(self) -> str:
        return self._local_number

    @property
    def international_number(self) -> str:
        return f"+{self._country_code}-{self._city_code}-{self._local_number}"

    def __str__(self) -> str:
        return self.international_number

    def __repr__(self) -> str:
        return f"PhoneNumber({self.international_number!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PhoneNumber):
            return NotImplemented
        return self.international_number == other.international_number

    def __hash__(self) -> int:
        return hash(self.international_number)