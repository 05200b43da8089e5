import pytest

from yellowbelt.quadratic import distinct_real_root_count


@pytest.mark.parametrize(
    ("a", "b", "c", "expected"),
    [
        (0, 0, 1, 0),
        (0, 1, 0, 1),
        (1, 0, 0, 1),
    ],
)
def test_zero_coefficients(a, b, c, expected):
    assert distinct_real_root_count(a, b, c) == expected


@pytest.mark.parametrize(
    ("a", "b", "c", "expected"),
    [
        (1, 0, 1, 0),
        (0, 1, 1, 1),
        (1, 1, 0, 2),
    ],
)
def test_one_zero_coefficient(a, b, c, expected):
    assert distinct_real_root_count(a, b, c) == expected


@pytest.mark.parametrize(
    ("a", "b", "c"),
    [
        (1, 1, 1),
        (6, 23, 89),
        (58, 19, 66),
    ],
)
def test_negative_discriminant_has_no_roots(a, b, c):
    assert distinct_real_root_count(a, b, c) == 0


@pytest.mark.parametrize(
    ("a", "b", "c"),
    [
        (2, 4, 2),
        (0, 4, 3),
        (0, 77, 0),
    ],
)
def test_single_root(a, b, c):
    assert distinct_real_root_count(a, b, c) == 1


@pytest.mark.parametrize(
    ("a", "b", "c"),
    [
        (-36, -26, 14),
        (-6, 23, 89),
        (17, 71, -56),
    ],
)
def test_two_roots(a, b, c):
    assert distinct_real_root_count(a, b, c) == 2


@pytest.mark.parametrize(
    ("a", "b", "c"),
    [(1, 0, 1), (2, 4, 2), (17, 71, -56), (-6, 23, 89), (3, -5, 7)],
)
def test_sign_of_all_coefficients_does_not_matter(a, b, c):
    assert distinct_real_root_count(a, b, c) == distinct_real_root_count(-a, -b, -c)


@pytest.mark.parametrize(("r1", "r2"), [(1, 2), (-3, 5), (0.5, -0.25), (4, 4)])
def test_equation_built_from_roots(r1, r2):
    # (x - r1)(x - r2) = x**2 - (r1 + r2) x + r1 * r2
    expected = 1 if r1 == r2 else 2
    assert distinct_real_root_count(1, -(r1 + r2), r1 * r2) == expected