"""Word, letter and case utilities for plain strings."""

from __future__ import annotations

import string
from collections.abc import Iterator, Sequence

_VOWELS = frozenset("aeiou")
_PUNCTUATION = frozenset(string.punctuation)


def _word_starts(sentence: str) -> Iterator[tuple[int, str]]:
    """Yield (index, char) for each non-space char that follows a space or the start."""
    after_space = True
    for index, char in enumerate(sentence):
        if char != " " and after_space:
            yield index, char
        after_space = char == " "


def _map_first_letters(sentence: str, transform) -> str:
    chars = list(sentence)
    for index, char in _word_starts(sentence):
        chars[index] = transform(char)
    return "".join(chars)


def first_letters(sentence: str) -> list[str]:
    """Return the first character of each space-separated word."""
    return [char for _, char in _word_starts(sentence)]


def upper_first_letters(sentence: str) -> str:
    """Upper-case the first character of each word, keeping all spacing."""
    return _map_first_letters(sentence, str.upper)


def lower_first_letters(sentence: str) -> str:
    """Lower-case the first character of each word, keeping all spacing."""
    return _map_first_letters(sentence, str.lower)


def invert_case(text: str) -> str:
    """Swap upper-case letters to lower case and lower-case letters to upper case."""
    return text.swapcase()


def count_upper(text: str) -> int:
    """Return the number of upper-case letters."""
    return sum(1 for char in text if char.isupper())


def count_lower(text: str) -> int:
    """Return the number of lower-case letters."""
    return sum(1 for char in text if char.islower())


def count_char(text: str, char: str, case_sensitive: bool = True) -> int:
    """Return how often ``char`` occurs in ``text``, optionally ignoring case."""
    if len(char) != 1:
        raise ValueError("expected a single character")
    if case_sensitive:
        return text.count(char)
    wanted = char.lower()
    return sum(1 for c in text if c.lower() == wanted)


def is_vowel(char: str) -> bool:
    """Return True for a, e, i, o, u in either case."""
    if len(char) != 1:
        raise ValueError("expected a single character")
    return char.lower() in _VOWELS


def vowels(text: str) -> list[str]:
    """Return the vowels of ``text`` in the order they appear."""
    return [char for char in text if is_vowel(char)]


def count_vowels(text: str) -> int:
    """Return the number of vowels in ``text``."""
    return len(vowels(text))


def split_words(sentence: str, delim: str = " ") -> list[str]:
    """Split on ``delim`` and drop the empty pieces."""
    if not delim:
        raise ValueError("delimiter must not be empty")
    return [word for word in sentence.split(delim) if word]


def count_words(sentence: str, delim: str = " ") -> int:
    """Return the number of non-empty pieces between delimiters."""
    return len(split_words(sentence, delim))


def ltrim(text: str) -> str:
    """Remove leading spaces."""
    return text.lstrip(" ")


def rtrim(text: str) -> str:
    """Remove trailing spaces."""
    return text.rstrip(" ")


def trim(text: str) -> str:
    """Remove leading and trailing spaces."""
    return rtrim(ltrim(text))


def join_words(words: Sequence[str], delim: str = " ", reverse: bool = False) -> str:
    """Join ``words`` with ``delim``, last word first when ``reverse`` is true."""
    return delim.join(reversed(words) if reverse else words)


def reverse_words(text: str, delim: str = " ") -> str:
    """Return the words of ``text`` in reverse order, joined by ``delim``."""
    return join_words(split_words(text, delim), delim, reverse=True)


def replace_all(text: str, old: str, new: str) -> str:
    """Replace every occurrence of the substring ``old`` with ``new``."""
    if not old:
        raise ValueError("text to replace must not be empty")
    return text.replace(old, new)


def replace_words(text: str, old: str, new: str, match_case: bool = True) -> str:
    """Replace whole space-separated words equal to ``old`` with ``new``.

    Runs of spaces collapse to single spaces in the result.
    """
    if match_case:
        matches = old.__eq__
    else:
        target = old.lower()

        def matches(word: str) -> bool:
            return word.lower() == target

    return join_words(
        [new if matches(word) else word for word in split_words(text, " ")], " "
    )


def remove_punctuation(text: str) -> str:
    """Drop ASCII punctuation characters."""
    return "".join(char for char in text if char not in _PUNCTUATION)