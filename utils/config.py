"""
config.py - Typed view over config.ini

Wraps a ConfigParser so the rest of the program reads plain attributes
instead of raw strings.
"""

import re

DEFAULT_SEPARATORS = " \t\n\r,-.!?[]';:/()"
DEFAULT_STYLESHEETS = (
    "https://cse22x1.engineering.osu.edu/2231/web-sw2/assignments/projects/"
    "tag-cloud-generator/data/tagcloud.css",
    "tagcloud.css",
)

ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "\\": "\\", '"': '"'}
ESCAPE_RE = re.compile(r"\\(.)")


def unquote(value):
    """
    Undo the quoting used for SEPARATORS in config.ini.

    A value wrapped in double quotes keeps its leading/trailing spaces and
    may use \\t, \\n, \\r, \\\\ and \\" escapes. Unquoted values are returned as is.
    """
    if len(value) >= 2 and value[0] == value[-1] == '"':
        return ESCAPE_RE.sub(
            lambda m: ESCAPES.get(m.group(1), m.group(0)), value[1:-1])
    return value


class Config(object):
    """Settings for one tag cloud run, read from a ConfigParser."""

    def __init__(self, config):
        separators = config.get("TAGCLOUD", "SEPARATORS", fallback=None)
        self.separators = DEFAULT_SEPARATORS if separators is None else unquote(separators)
        self.min_font_size = config.getint("TAGCLOUD", "MINFONTSIZE", fallback=11)
        self.max_font_size = config.getint("TAGCLOUD", "MAXFONTSIZE", fallback=48)

        stylesheets = config.get("TAGCLOUD", "STYLESHEETS", fallback="").strip()
        if stylesheets:
            self.stylesheets = [s.strip() for s in stylesheets.split(",") if s.strip()]
        else:
            self.stylesheets = list(DEFAULT_STYLESHEETS)

        self.encoding = config.get("LOCAL PROPERTIES", "ENCODING", fallback="").strip() or None
        self.log_dir = config.get("LOCAL PROPERTIES", "LOGDIR", fallback="").strip() or None

        if not self.separators:
            raise ValueError("SEPARATORS must name at least one character")
        if self.min_font_size > self.max_font_size:
            raise ValueError(
                f"MINFONTSIZE ({self.min_font_size}) must not exceed "
                f"MAXFONTSIZE ({self.max_font_size})")
