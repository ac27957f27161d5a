import pytest

from drillbook.text import describe_sum, is_palindrome, reverse_text, word_count


@pytest.mark.parametrize("text", ["", "a", "hello world", "racecar", "ab cd!"])
def test_reverse_twice_is_identity(text):
    assert reverse_text(reverse_text(text)) == text
    assert len(reverse_text(text)) == len(text)


def test_reverse_moves_first_to_last():
    text = "stack"
    assert reverse_text(text)[-1] == text[0]
    assert reverse_text(text)[0] == text[-1]


@pytest.mark.parametrize("text", ["racecar", "level", "a", "", "never odd or even"[::-1] + "never odd or even"])
def test_palindromes(text):
    assert is_palindrome(text) is True


@pytest.mark.parametrize("text", ["hello", "ab", "Racecar", "never odd or even"])
def test_non_palindromes(text):
    assert is_palindrome(text) is False


@pytest.mark.parametrize("words", [["one"], ["one", "two"], ["a", "b", "c", "d"]])
def test_word_count_matches_words(words):
    assert word_count(" ".join(words)) == len(words)


def test_word_count_empty():
    assert word_count("") == 0


def test_word_count_counts_every_space():
    assert word_count("a  b") == word_count("a b") + 1


def test_describe_sum_source_example():
    assert describe_sum(299, 10) == "299 + 10 = 309"


def test_describe_sum_parts():
    left, total = describe_sum(4, -4).split(" = ")
    assert left == "4 + -4"
    assert int(total) == 0