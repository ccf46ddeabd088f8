"""
tokenizer.py - Word / separator runs

Splits text into maximal runs of separator characters and maximal runs of
non-separator characters ("words"). Every character of the input belongs to
exactly one run, so joining the runs rebuilds the text.
"""


def make_separators(chars):
    """Build the immutable separator set from a string of characters."""
    return frozenset(chars)


def next_word_or_separator(text, position, separators):
    """
    Return the run of text starting at position.

    The run is all separators if text[position] is a separator, otherwise
    all non-separators, and is as long as possible.

    Runtime Complexity: O(k) where k is the length of the returned run.
    """
    if not 0 <= position < len(text):
        raise ValueError(f"position {position} outside text of length {len(text)}")

    separator = text[position] in separators
    end = position
    while end < len(text) and (text[end] in separators) == separator:
        end += 1
    return text[position:end]


def tokenize(text, separators):
    """
    Yield the successive runs of text from position 0 to the end.

    Runtime Complexity: O(n)
    where n is the number of characters in text.
    """
    position = 0
    while position < len(text):
        token = next_word_or_separator(text, position, separators)
        position += len(token)
        yield token


def is_word(token, separators):
    return bool(token) and token[0] not in separators
