import pytest

from algokit.text import (
    is_anagram,
    is_balanced,
    is_valid_brackets,
    minimum_ternary_string,
    reverse_string,
    reverse_words,
)


def test_reverse_words_source_example():
    assert reverse_words("Ikl like this code") == "code this like Ikl"


@pytest.mark.parametrize("text", ["one two three", "  padded  words ", "single", ""])
def test_reverse_words_is_an_involution(text):
    assert reverse_words(reverse_words(text)) == text


def test_reverse_words_keeps_length_and_words():
    text = "alpha  beta gamma"
    result = reverse_words(text)
    assert len(result) == len(text)
    assert sorted(result.split()) == sorted(text.split())


@pytest.mark.parametrize("text", ["Pencil Programmer", "a", "", "racecar!"])
def test_reverse_string_is_an_involution(text):
    assert reverse_string(reverse_string(text)) == text


def test_reverse_string_swaps_concatenation():
    first, second = "Pencil ", "Programmer"
    assert reverse_string(first + second) == reverse_string(second) + reverse_string(first)


def test_reverse_string_ends():
    text = "Pencil Programmer"
    result = reverse_string(text)
    assert result[0] == text[-1]
    assert result[-1] == text[0]


@pytest.mark.parametrize(
    "first, second, expected",
    [
        ("listen", "silent", True),
        ("triangle", "integral", True),
        ("abc", "abd", False),
        ("abc", "abcc", False),
        ("", "", True),
    ],
)
def test_is_anagram(first, second, expected):
    assert is_anagram(first, second) is expected


def test_is_anagram_is_symmetric():
    assert is_anagram("aab", "aba") == is_anagram("aba", "aab")
    assert is_anagram("aab", "abb") == is_anagram("abb", "aab")


@pytest.mark.parametrize(
    "expression, expected",
    [
        ("()[]{}", True),
        ("()[}", False),
        ("{[()]}", True),
        ("((", False),
        (")", False),
        ("(]", False),
        ("(a)", True),
        ("a", False),
        ("", True),
    ],
)
def test_is_balanced(expression, expected):
    assert is_balanced(expression) is expected


@pytest.mark.parametrize(
    "expression, expected",
    [
        ("()[]{}", True),
        ("{[()]}", True),
        ("(]", False),
        ("((", False),
        (")(", False),
        ("a", True),
        ("x(y[z]w)v", True),
        ("", True),
    ],
)
def test_is_valid_brackets(expression, expected):
    assert is_valid_brackets(expression) is expected


def test_checkers_agree_on_pure_brackets():
    for expression in ["", "()", "([)]", "{{}}[", "[{}()]", "}{"]:
        assert is_balanced(expression) == is_valid_brackets(expression)


def test_minimum_ternary_string_example():
    assert minimum_ternary_string("100210") == "001120"


@pytest.mark.parametrize("digits", ["100210", "11222121", "20", "0121020", "2", "012"])
def test_minimum_ternary_string_invariants(digits):
    result = minimum_ternary_string(digits)
    assert sorted(result) == sorted(digits)
    assert result <= digits
    assert minimum_ternary_string(result) == result


def test_minimum_ternary_string_without_twos_sorts():
    digits = "1010110"
    result = minimum_ternary_string(digits)
    assert result == "0" * digits.count("0") + "1" * digits.count("1")


def test_minimum_ternary_string_keeps_order_of_zeros_and_twos():
    digits = "2102012"
    result = minimum_ternary_string(digits)
    assert result.replace("1", "") == digits.replace("1", "")


def test_minimum_ternary_string_rejects_other_characters():
    with pytest.raises(ValueError):
        minimum_ternary_string("0132")