"""
counter.py - Word frequency table

Feeds lines through the tokenizer and counts each word, lowercased.
"""

from tagcloud.tokenizer import tokenize, is_word


def gather_words(lines, separators, word_counts=None):
    """
    Count the words of every line into word_counts.

    Args:
        lines: Iterable of text lines
        separators: Set of separator characters
        word_counts: Existing table to extend (a new dict if None)

    Returns:
        The word -> count table

    Runtime Complexity: O(N) where N is the total number of characters.
    """
    if word_counts is None:
        word_counts = {}
    for line in lines:
        for token in tokenize(line, separators):
            if not is_word(token, separators):
                continue
            word = token.lower()
            if word in word_counts:
                word_counts[word] += 1
            else:
                word_counts[word] = 1
    return word_counts


def count_words_in_file(path, separators, encoding=None):
    """
    Count the words of a text file, read line by line.

    OSError from opening or reading the file propagates to the caller.
    """
    try:
        with open(path, "r", encoding=encoding) as file:
            return gather_words(file, separators)
    except UnicodeDecodeError as err:
        raise OSError(f"cannot decode {path}: {err.reason}") from err
