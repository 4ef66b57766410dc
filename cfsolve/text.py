"""Solutions to the string-driven problems of the collection."""

from __future__ import annotations

import string

_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_UPPERCASE = frozenset(string.ascii_uppercase)
_LOWERCASE = frozenset(string.ascii_lowercase)

ABBREVIATION_LIMIT = 10


def petya_and_strings(s1: str, s2: str) -> int:
    """112A: compare two strings ignoring ASCII case; return -1, 0 or 1."""
    a = s1.translate(_TO_UPPER)
    b = s2.translate(_TO_UPPER)
    return (a > b) - (a < b)


def boy_or_girl(name: str) -> str:
    """236A: guess the gender from the parity of distinct letters in ``name``."""
    distinct_letters = len(set(name))
    if distinct_letters % 2 == 0:
        return "CHAT WITH HER!"
    return "IGNORE HIM!"


def stones_on_the_table(stones: str) -> int:
    """266A: stones to remove so that no two neighbours share a colour."""
    return sum(left == right for left, right in zip(stones, stones[1:]))


def capitalize_word(word: str) -> str:
    """281A: upper-case the first letter if it is a lower-case ASCII letter."""
    if word[:1] in _LOWERCASE:
        return word[0].upper() + word[1:]
    return word


def helpful_maths(expression: str) -> str:
    """339A: reorder the summands of ``expression`` in non-decreasing order.

    The summands are the characters at even positions.
    """
    summands = sorted(ord(ch) - ord("0") for ch in expression[::2])
    return "+".join(str(value) for value in summands)


def translation(original: str, translated: str) -> bool:
    """41A: whether ``translated`` is ``original`` spelled backwards."""
    return original[::-1] == translated


def word_case(word: str) -> str:
    """59A: change the word to the case most of its letters already have.

    Ties go to lower case.
    """
    upper = sum(ch in _UPPERCASE for ch in word)
    lower = len(word) - upper
    if upper > lower:
        return word.translate(_TO_UPPER)
    return word.translate(_TO_LOWER)


def abbreviate(word: str) -> str:
    """71A: shorten words longer than ten characters, as in ``l10n``."""
    if len(word) > ABBREVIATION_LIMIT:
        return f"{word[0]}{len(word) - 2}{word[-1]}"
    return word


def anton_and_danik(results: str) -> str:
    """734A: who won more games, given a string of ``A`` and ``D`` results."""
    anton = results.count("A")
    danik = results.count("D")
    if anton > danik:
        return "Anton"
    if anton < danik:
        return "Danik"
    return "Friendship"