import pytest

from yellowbelt.palindrome import is_palindrome


def test_empty_string_is_palindrome():
    assert is_palindrome("") is True


def test_single_character_is_palindrome():
    assert is_palindrome("X") is True


@pytest.mark.parametrize("text", ["madam", "okololoko", "esse"])
def test_palindromes(text):
    assert is_palindrome(text) is True


@pytest.mark.parametrize(
    "text",
    ["gentleman", "batat", " madam", "madam ", "adam", "messe", "messes", "abcdba"],
)
def test_not_palindromes(text):
    assert is_palindrome(text) is False


@pytest.mark.parametrize("half", ["ab", "xyz", "a b", "Qq"])
def test_mirrored_text_is_palindrome(half):
    assert is_palindrome(half + half[::-1]) is True
    assert is_palindrome(half + "!" + half[::-1]) is True