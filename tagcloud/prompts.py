"""
prompts.py - Interactive run settings

Asks for the three values a run needs. The input function is injectable so
the pipeline can be driven without a real terminal.
"""

from collections import namedtuple


CloudRequest = namedtuple("CloudRequest", ["input_path", "output_path", "num_words"])


def prompt_request(input_func=input):
    """
    Prompt for input file, output file and number of words.

    Raises:
        ValueError: If the number of words is not an integer
    """
    input_path = input_func("Enter input file name: ").strip()
    output_path = input_func("Enter output file name: ").strip()
    raw_num_words = input_func("Enter number of words: ").strip()
    try:
        num_words = int(raw_num_words)
    except ValueError:
        raise ValueError(
            f"Number of words must be a positive integer, got {raw_num_words!r}") from None
    return CloudRequest(input_path, output_path, num_words)
