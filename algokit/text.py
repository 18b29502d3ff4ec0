"""String utilities: reversal, anagrams, bracket balance and ternary minimisation."""

from __future__ import annotations

from collections import Counter

__all__ = [
    "reverse_words",
    "reverse_string",
    "is_anagram",
    "is_balanced",
    "is_valid_brackets",
    "minimum_ternary_string",
]

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_PAIRS.values())


def reverse_words(text: str) -> str:
    """Reverse the order of space-separated words, keeping every space."""
    return " ".join(reversed(text.split(" ")))


def reverse_string(text: str) -> str:
    """Return the characters of ``text`` in reverse order."""
    return text[::-1]


def is_anagram(first: str, second: str) -> bool:
    """Report whether both strings hold the same characters with the same counts."""
    return Counter(first) == Counter(second)


def is_balanced(expression: str) -> bool:
    """Check bracket balance, where any non-opening character needs an open bracket.

    A closing bracket must match the most recent open one; any other
    non-bracket character is accepted only while some bracket is open.
    """
    stack: list[str] = []
    for char in expression:
        if char in _OPENERS:
            stack.append(char)
            continue
        if not stack:
            return False
        if char in _PAIRS and stack.pop() != _PAIRS[char]:
            return False
    return not stack


def is_valid_brackets(expression: str) -> bool:
    """Check that every bracket is closed by its own kind in the right order.

    Characters other than brackets are ignored.
    """
    stack: list[str] = []
    for char in expression:
        if char in _OPENERS:
            stack.append(char)
        elif char in _PAIRS:
            if not stack or stack[-1] != _PAIRS[char]:
                return False
            stack.pop()
    return not stack


def minimum_ternary_string(digits: str) -> str:
    """Smallest string reachable by swapping adjacent "01"/"10" and "12"/"21" pairs.

    Raises ValueError if ``digits`` holds anything but 0, 1 and 2.
    """
    invalid = set(digits) - {"0", "1", "2"}
    if invalid:
        raise ValueError(f"unexpected characters: {''.join(sorted(invalid))!r}")
    ones = digits.count("1")
    first_two = digits.find("2")
    if first_two == -1:
        return "0" * digits.count("0") + "1" * ones
    head = digits[:first_two]
    tail = digits[first_two:].replace("1", "")
    return "0" * head.count("0") + "1" * ones + tail