import pytest

from tagcloud.tokenizer import next_word_or_separator, tokenize, is_word


def test_word_run(separators):
    assert next_word_or_separator("The cat sat.", 0, separators) == "The"
    assert next_word_or_separator("The cat sat.", 4, separators) == "cat"


def test_separator_run(separators):
    assert next_word_or_separator("sat. The", 3, separators) == ". "


def test_run_reaches_end_of_text(separators):
    assert next_word_or_separator("dog", 1, separators) == "og"
    assert next_word_or_separator("end!?", 3, separators) == "!?"


@pytest.mark.parametrize("position", [-1, 3, 10])
def test_position_outside_text(separators, position):
    with pytest.raises(ValueError):
        next_word_or_separator("abc", position, separators)


@pytest.mark.parametrize("text", [
    "The cat sat. The dog sat.",
    "  leading and trailing  ",
    "don't (stop) - [now]; ok/no?\r\n",
    "\t\t",
    "word",
    "",
])
def test_runs_rebuild_text(separators, text):
    assert "".join(tokenize(text, separators)) == text


def test_runs_alternate(separators):
    tokens = list(tokenize("a, b;c  d", separators))
    assert tokens == ["a", ", ", "b", ";", "c", "  ", "d"]
    kinds = [is_word(t, separators) for t in tokens]
    assert all(kinds[i] != kinds[i + 1] for i in range(len(kinds) - 1))


def test_custom_separator_set():
    assert list(tokenize("a+b c", frozenset("+"))) == ["a", "+", "b c"]
