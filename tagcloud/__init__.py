"""
tagcloud/__init__.py - Tag Cloud Orchestrator

Runs one tag cloud generation:
- Counting the words of the input file
- Selecting the most frequent ones
- Rendering and writing the HTML document

Key role: Passes the word table and ranking between the pipeline stages
"""

from utils import get_logger
from tagcloud.tokenizer import make_separators
from tagcloud.counter import count_words_in_file
from tagcloud.ranking import select_top_words
from tagcloud.renderer import render_tag_cloud, write_tag_cloud


class TagCloudGenerator(object):
    """
    Turns a CloudRequest into an HTML tag cloud file.

    Nothing is written unless every check on the request and the input
    passes, so a failed run leaves no output file behind.
    """

    def __init__(self, config):
        """
        Initialize the generator.

        Args:
            config: Configuration object (separators, font sizes, stylesheets, etc.)
        """
        self.config = config
        self.logger = get_logger("TAGCLOUD", log_dir=config.log_dir)
        self.separators = make_separators(config.separators)

    def count(self, input_path):
        """Word -> count table of the input file."""
        try:
            word_counts = count_words_in_file(
                input_path, self.separators, self.config.encoding)
        except OSError as err:
            raise OSError(f"Error reading input file {input_path}: {err}") from err
        self.logger.info(
            f"Counted {sum(word_counts.values())} words "
            f"({len(word_counts)} distinct) in {input_path}.")
        return word_counts

    def render(self, input_name, ranking):
        return render_tag_cloud(
            input_name, ranking, self.config.stylesheets,
            self.config.min_font_size, self.config.max_font_size)

    def generate(self, request):
        """
        Produce the tag cloud described by request.

        Args:
            request: CloudRequest (input_path, output_path, num_words)

        Returns:
            The rendered document

        Raises:
            ValueError: Bad number of words, or too few distinct words
            OSError: Input unreadable or output unwritable
        """
        if request.num_words <= 0:
            raise ValueError("Number of words must be a positive integer")

        word_counts = self.count(request.input_path)
        ranking = select_top_words(word_counts, request.num_words)
        self.logger.info(
            f"Selected {len(ranking.entries)} words, counts "
            f"{ranking.min_count}..{ranking.max_count}.")

        # Render fully before opening the output file
        document = self.render(request.input_path, ranking)
        try:
            write_tag_cloud(request.output_path, document, self.config.encoding)
        except OSError as err:
            raise OSError(f"Error writing output file {request.output_path}: {err}") from err
        self.logger.info(f"Wrote tag cloud to {request.output_path}.")
        return document
