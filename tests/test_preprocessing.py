import pytest

from plagcheck.preprocessing import STOP_WORDS, remove_stop_words, tokenize


def test_tokenize_splits_on_punctuation_and_lowercases():
    assert tokenize("Hello, World! (Test)") == ["hello", "world", "test"]


@pytest.mark.parametrize("text", ["", "   ", ".,;:!?-'\"()[]{}", "\t\n\r\f\v"])
def test_tokenize_without_words_is_empty(text):
    assert tokenize(text) == []


def test_tokenize_apostrophe_and_hyphen_are_delimiters():
    assert tokenize("don't well-known") == ["don", "t", "well", "known"]


def test_tokenize_only_ascii_is_lowercased():
    assert tokenize("ÉCOLE") == ["École"]


def test_tokenize_keeps_digits_and_underscores():
    assert tokenize("abc_1 2x") == ["abc_1", "2x"]


def test_tokens_contain_no_delimiters():
    tokens = tokenize("A sentence; with: many (kinds) of [punctuation]!")
    for token in tokens:
        assert token
        assert not any(ch in " \t\n\r\f\v.,;:!?\"'()[]{}-" for ch in token)
        assert token == token.lower()


def test_remove_stop_words_keeps_order():
    assert remove_stop_words(["the", "cat", "and", "dog"]) == ["cat", "dog"]


def test_remove_stop_words_is_case_sensitive():
    assert remove_stop_words(["The", "AND"]) == ["The", "AND"]


def test_remove_stop_words_removes_every_stop_word():
    assert remove_stop_words(sorted(STOP_WORDS)) == []


def test_remove_stop_words_result_is_subsequence():
    tokens = tokenize("The quick fox is in the box with a sock")
    result = remove_stop_words(tokens)
    assert all(token not in STOP_WORDS for token in result)
    remaining = iter(tokens)
    assert all(any(token == t for t in remaining) for token in result)


def test_remove_stop_words_does_not_modify_input():
    tokens = ["a", "b"]
    remove_stop_words(tokens)
    assert tokens == ["a", "b"]