import pytest

from dsakit.strings import (
    INT32_MAX,
    INT32_MIN,
    beauty_sum,
    frequency_sort,
    is_anagram,
    is_isomorphic,
    largest_odd,
    length_of_last_word,
    max_nesting_depth,
    my_atoi,
    remove_outer_parentheses,
    reverse_words,
    roman_to_int,
)


def test_length_of_last_word_example():
    assert length_of_last_word("   fly me   to   the moon  ") == len("moon")


def test_length_of_last_word_single_word():
    assert length_of_last_word("hello") == len("hello")
    assert length_of_last_word("   ") == length_of_last_word("")


@pytest.mark.parametrize("s, t", [("egg", "odd"), ("paper", "title"), ("", "")])
def test_isomorphic(s, t):
    assert is_isomorphic(s, t) is True
    assert is_isomorphic(t, s) is True


@pytest.mark.parametrize("s, t", [("foo", "bar"), ("badc", "baba"), ("ab", "a")])
def test_not_isomorphic(s, t):
    assert is_isomorphic(s, t) is False


def test_largest_odd_example_ends_odd():
    number = "239537672423884969653287101"
    assert largest_odd(number) == number


def test_largest_odd_prefix_and_empty():
    result = largest_odd("35427")
    assert result == "35427"
    trimmed = largest_odd("52468")
    assert "52468".startswith(trimmed) and trimmed[-1] in "13579"
    assert largest_odd("4206") == ""


def test_max_nesting_depth_example():
    assert max_nesting_depth("(1+(2*3)+((8)/4))+1") == 3


def test_max_nesting_depth_without_parentheses():
    assert max_nesting_depth("1+2") == max_nesting_depth("")


def test_remove_outer_parentheses_example():
    assert remove_outer_parentheses("(()())(())") == "()()()"


def test_remove_outer_parentheses_single_pairs_vanish():
    assert remove_outer_parentheses("()()") == ""


def test_reverse_words_example():
    result = reverse_words("   the sky is     blue   ")
    assert result.split(" ") == ["blue", "is", "sky", "the"]


def test_reverse_words_is_involution_on_normalised_text():
    text = "a good   example"
    assert reverse_words(reverse_words(text)) == " ".join(text.split())


def test_roman_to_int_symbols():
    assert roman_to_int("M") == 1000
    assert roman_to_int("D") == 500
    assert roman_to_int("C") == 100


def test_roman_to_int_additive_and_subtractive():
    assert roman_to_int("XII") == roman_to_int("X") + 2 * roman_to_int("I")
    assert roman_to_int("IV") == roman_to_int("V") - roman_to_int("I")
    assert roman_to_int("CM") == roman_to_int("M") - roman_to_int("C")


@pytest.mark.parametrize("text", ["baAb", "tree", "cccaaa", ""])
def test_frequency_sort_invariants(text):
    result = frequency_sort(text)
    assert sorted(result) == sorted(text)
    runs = []
    for ch in result:
        if runs and runs[-1][0] == ch:
            runs[-1][1] += 1
        else:
            runs.append([ch, 1])
    counts = [count for _, count in runs]
    assert counts == sorted(counts, reverse=True)
    assert len(runs) == len(set(text))


def test_my_atoi_clamps_high():
    assert my_atoi(" +9743764253581200415067431L") == INT32_MAX


def test_my_atoi_clamps_low():
    assert my_atoi("-91283472332") == INT32_MIN
    assert my_atoi("-2147483648") == INT32_MIN


def test_my_atoi_parses_leading_number():
    assert my_atoi("   -42abc") == -42
    assert my_atoi("+7") == 7
    assert my_atoi("words 987") == my_atoi("")


def test_beauty_sum_example():
    assert beauty_sum("aabcb") == 5


def test_beauty_sum_single_character_runs():
    assert beauty_sum("aaaa") == beauty_sum("")
    assert beauty_sum("ab") == beauty_sum("")


@pytest.mark.parametrize("s, t", [("anagram", "nagaram"), ("", "")])
def test_anagram(s, t):
    assert is_anagram(s, t) is True


@pytest.mark.parametrize("s, t", [("rat", "car"), ("ab", "abc")])
def test_not_anagram(s, t):
    assert is_anagram(s, t) is False