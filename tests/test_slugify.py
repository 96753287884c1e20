import pytest

from mdextras.slugify import simple_slugify


def test_documented_example():
    assert simple_slugify("An example heading") == "an-example-heading"


def test_empty_input():
    assert simple_slugify("") == ""


@pytest.mark.parametrize(
    "text", ["Hello World", "a.b,c", "  Spaces  ", "MiXeD 123", "Ünïcode Ä"]
)
def test_length_is_preserved(text):
    assert len(simple_slugify(text)) == len(text)


@pytest.mark.parametrize("text", ["Hello World", "FOO-bar_BAZ", "x!Y?z"])
def test_idempotent(text):
    once = simple_slugify(text)
    assert simple_slugify(once) == once


def test_punctuation_and_spaces_become_dashes():
    assert set(simple_slugify(" !?.,_")) == {"-"}


def test_ascii_letters_are_lowercased():
    result = simple_slugify("ABCXYZ")
    assert result == "ABCXYZ".lower()


def test_digits_are_kept():
    assert simple_slugify("2024") == "2024"


def test_non_ascii_letters_are_not_lowercased():
    assert simple_slugify("Ä") == "Ä"