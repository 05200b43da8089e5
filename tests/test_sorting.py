import random

import pytest

from yellowbelt.sorting import merge_sort_halves, merge_sort_thirds


def test_halves_source_example():
    values = [8, 6, 4, 7, 6, 4, 4, 0, 1]
    assert merge_sort_halves(values) == sorted(values)


@pytest.mark.parametrize("length", [0, 1, 2, 5, 16, 33])
def test_halves_random(length):
    rng = random.Random(length)
    values = [rng.randint(-50, 50) for _ in range(length)]
    assert merge_sort_halves(values) == sorted(values)


def test_halves_does_not_mutate_input():
    values = [3, 1, 2]
    merge_sort_halves(values)
    assert values == [3, 1, 2]


def test_thirds_source_example():
    values = [6, 4, 7, 6, 4, 4, 0, 1, 5]
    assert merge_sort_thirds(values) == sorted(values)


@pytest.mark.parametrize("length", [0, 1, 3, 5, 9, 27])
def test_thirds_random(length):
    rng = random.Random(length + 100)
    values = [rng.randint(-50, 50) for _ in range(length)]
    assert merge_sort_thirds(values) == sorted(values)


def test_thirds_strings():
    words = ["pear", "apple", "fig"]
    assert merge_sort_thirds(words) == sorted(words)


@pytest.mark.parametrize("length", [2, 4, 6])
def test_thirds_rejects_parts_of_two(length):
    with pytest.raises(ValueError):
        merge_sort_thirds(list(range(length)))