"""
launch.py - Tag Cloud Generator Entry Point

Loads configuration, asks for the input file, output file and number of
words, then writes the tag cloud.

Usage:
    python launch.py                    # Use config.ini
    python launch.py --config_file path # Use custom config file
"""

import sys
from configparser import ConfigParser
from argparse import ArgumentParser

from utils import get_logger
from utils.config import Config
from tagcloud import TagCloudGenerator
from tagcloud.prompts import prompt_request


def main(config_file, input_func=input):
    """
    Run one interactive tag cloud generation.

    Args:
        config_file: Path to configuration file (default: config.ini)
        input_func: Source of the prompted answers

    Returns:
        0 on success, 1 after a reported failure
    """
    cparser = ConfigParser()
    cparser.read(config_file)
    config = Config(cparser)
    logger = get_logger("TAGCLOUD", log_dir=config.log_dir)

    try:
        request = prompt_request(input_func)
        TagCloudGenerator(config).generate(request)
    except (ValueError, OSError) as err:
        logger.error(str(err))
        return 1
    return 0


def run():
    parser = ArgumentParser()
    parser.add_argument("--config_file", type=str, default="config.ini",
                        help="Path to configuration file")
    args = parser.parse_args()
    sys.exit(main(args.config_file))


if __name__ == "__main__":
    run()
