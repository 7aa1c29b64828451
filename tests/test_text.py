import string

import pytest

from drillkit.text import (
    count_char,
    count_lower,
    count_upper,
    count_vowels,
    count_words,
    first_letters,
    invert_case,
    is_vowel,
    join_words,
    lower_first_letters,
    ltrim,
    remove_punctuation,
    replace_all,
    replace_words,
    reverse_words,
    rtrim,
    split_words,
    trim,
    upper_first_letters,
    vowels,
)

SENTENCE = "  hi   i am    kareem   , free for palstine "


def test_first_letters_one_per_word():
    letters = first_letters(SENTENCE)
    assert letters == [word[0] for word in SENTENCE.split(" ") if word]


def test_first_letters_of_empty_text():
    assert first_letters("") == []


def test_upper_first_letters_keeps_layout_and_rest_of_words():
    result = upper_first_letters(SENTENCE)
    assert len(result) == len(SENTENCE)
    assert [c == " " for c in result] == [c == " " for c in SENTENCE]
    for original, changed in zip(SENTENCE.split(" "), result.split(" ")):
        if original:
            assert changed[0] == original[0].upper()
            assert changed[1:] == original[1:]


def test_lower_first_letters_undoes_upper_on_lowercase_text():
    assert lower_first_letters(upper_first_letters(SENTENCE)) == SENTENCE


def test_lower_first_letters_only_touches_word_starts():
    text = "  HI   I AM    KAREEM   , FREE FOR PALSTINE "
    result = lower_first_letters(text)
    assert first_letters(result) == [c.lower() for c in first_letters(text)]
    assert count_upper(result) == count_upper(text) - len(
        [c for c in first_letters(text) if c.isupper()]
    )


def test_invert_case_is_an_involution():
    text = "Hello World, Free For Palstine 123"
    assert invert_case(invert_case(text)) == text


def test_invert_case_swaps_counts():
    text = "Hi Kareem Alsayd"
    inverted = invert_case(text)
    assert count_upper(inverted) == count_lower(text)
    assert count_lower(inverted) == count_upper(text)


def test_invert_case_leaves_non_letters():
    assert invert_case("123 ,.") == "123 ,."


def test_upper_and_lower_counts_cover_all_letters():
    text = "HiKareemAlsayd"
    assert count_upper(text) + count_lower(text) == len(text)


def test_counts_ignore_non_letters():
    assert count_upper("  , 12 ") == 0
    assert count_lower("  , 12 ") == 0


def test_count_char_case_sensitive():
    assert count_char("Hi kareem, Hi", "H") == "Hi kareem, Hi".count("H")


def test_count_char_case_insensitive_adds_both_cases():
    text = "Hi kareem, Hi HHh"
    assert count_char(text, "h", case_sensitive=False) == count_char(
        text, "h"
    ) + count_char(text, "H")


def test_count_char_rejects_multiple_characters():
    with pytest.raises(ValueError):
        count_char("abc", "ab")


@pytest.mark.parametrize("char", ["a", "e", "i", "o", "u", "A", "E", "I", "O", "U"])
def test_is_vowel_true(char):
    assert is_vowel(char) is True


@pytest.mark.parametrize("char", ["b", "Z", "y", " ", "1", ","])
def test_is_vowel_false(char):
    assert is_vowel(char) is False


def test_is_vowel_requires_single_character():
    with pytest.raises(ValueError):
        is_vowel("ae")


def test_vowels_in_order_and_counted():
    found = vowels(SENTENCE)
    assert all(is_vowel(c) for c in found)
    assert count_vowels(SENTENCE) == len(found)
    assert "".join(found) == "".join(c for c in SENTENCE if c in "aeiouAEIOU")


def test_split_words_drops_empty_pieces():
    assert split_words("  hi   i am  ") == ["hi", "i", "am"]


def test_split_words_with_multi_character_delimiter():
    line = "a1#//#1234#//#kareem#//##//#500.4"
    words = split_words(line, "#//#")
    assert words == ["a1", "1234", "kareem", "500.4"]
    assert all("#//#" not in w for w in words)


def test_split_words_empty_text():
    assert split_words("", ",") == []


def test_split_words_rejects_empty_delimiter():
    with pytest.raises(ValueError):
        split_words("abc", "")


def test_count_words_matches_split():
    assert count_words(SENTENCE) == len(split_words(SENTENCE))
    assert count_words("a,,b,", ",") == 2


def test_trims():
    assert ltrim("  abc  ") == "abc  "
    assert rtrim("  abc  ") == "  abc"
    assert trim("  abc  ") == "abc"


def test_trim_only_removes_spaces():
    assert trim("\tx ") == "\tx"
    assert trim("   ") == ""


def test_join_words():
    assert join_words(["Hi", "Kareem", "Alsayd"], " ") == "Hi Kareem Alsayd"


def test_join_and_split_round_trip():
    words = ["Hi", "Kareem", "Alsayd"]
    assert split_words(join_words(words, "--"), "--") == words


def test_join_words_reverse_matches_reversed_input():
    words = ["Hi", "Kareem", "Alsayd"]
    assert join_words(words, ", ", reverse=True) == join_words(words[::-1], ", ")


def test_join_words_empty():
    assert join_words([], ",") == ""


def test_reverse_words_twice_normalises_spacing():
    assert reverse_words(reverse_words(SENTENCE)) == join_words(split_words(SENTENCE))


def test_reverse_words_order():
    result = reverse_words("one two three")
    assert split_words(result) == ["three", "two", "one"]


def test_replace_all_source_example():
    assert replace_all("Hi kareem, Hi", "Hi", "Hello") == "Hello kareem, Hello"


def test_replace_all_rejects_empty_target():
    with pytest.raises(ValueError):
        replace_all("abc", "", "x")


def test_replace_words_match_case():
    assert replace_words("Hi kareem hi", "hi", "Hello") == "Hi kareem Hello"


def test_replace_words_ignore_case():
    assert (
        replace_words("Hi kareem hi", "hi", "Hello", match_case=False)
        == "Hello kareem Hello"
    )


def test_replace_words_leaves_partial_matches():
    text = "this is his"
    assert replace_words(text, "is", "was") == "this was his"


def test_remove_punctuation_strips_all_punctuation():
    result = remove_punctuation("Hi, kareem! free; for: palstine?")
    assert not any(c in string.punctuation for c in result)
    assert result.split() == ["Hi", "kareem", "free", "for", "palstine"]


def test_remove_punctuation_keeps_plain_text():
    assert remove_punctuation("abc 123") == "abc 123"