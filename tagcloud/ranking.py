"""
ranking.py - Top-N selection and display order

Orderings are key functions over (word, count) entries, so any of them can
be handed to sort_entries.
"""

from collections import namedtuple


Ranking = namedtuple("Ranking", ["entries", "max_count", "min_count"])


def alphabetical_order(entry):
    """Case-insensitive order; the capitalized variant sorts first on a tie."""
    word = entry[0]
    return (word.lower(), word)


def count_descending_order(entry):
    """Highest count first; equal counts fall back to alphabetical_order."""
    return (-entry[1],) + alphabetical_order(entry)


def sort_entries(entries, order):
    return sorted(entries, key=order)


def select_top_words(word_counts, num_words):
    """
    Pick the num_words most frequent words and order them for display.

    Args:
        word_counts: word -> count table
        num_words: How many words to keep (positive int)

    Returns:
        Ranking whose entries are alphabetical; max_count and min_count are
        the first and last counts of the selection in count order.

    Raises:
        ValueError: If num_words is not positive or the table is too small

    Runtime Complexity: O(n log n) where n is the number of distinct words.
    """
    if isinstance(num_words, bool) or not isinstance(num_words, int) or num_words <= 0:
        raise ValueError("Number of words must be a positive integer")
    if len(word_counts) < num_words:
        raise ValueError(
            f"Not enough words in input file: {len(word_counts)} distinct, "
            f"{num_words} requested")

    by_count = sort_entries(word_counts.items(), count_descending_order)
    selected = by_count[:num_words]
    max_count = selected[0][1]
    min_count = selected[-1][1]

    return Ranking(sort_entries(selected, alphabetical_order), max_count, min_count)
