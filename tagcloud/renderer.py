"""
renderer.py - HTML tag cloud output

Maps counts onto font-size classes and writes the tag cloud document.
"""

from bs4.dammit import EntitySubstitution

from utils.config import DEFAULT_STYLESHEETS

MIN_FONT_SIZE = 11
MAX_FONT_SIZE = 48


def font_size(count, min_count, max_count, min_font=MIN_FONT_SIZE, max_font=MAX_FONT_SIZE):
    """
    Linear interpolation of count within [min_count, max_count] onto
    [min_font, max_font], truncated to an int.
    """
    if max_count == min_count:
        return min_font
    return min_font + (max_font - min_font) * (count - min_count) // (max_count - min_count)


def _escape(text):
    return EntitySubstitution.substitute_xml(text)


def render_tag_cloud(input_name, ranking, stylesheets=DEFAULT_STYLESHEETS,
                     min_font=MIN_FONT_SIZE, max_font=MAX_FONT_SIZE):
    """
    Build the complete tag cloud document.

    Args:
        input_name: Input file name, shown in the title and heading
        ranking: Ranking from select_top_words (entries in display order)
        stylesheets: hrefs of the stylesheet links, in order
        min_font: Font size of the least frequent selected word
        max_font: Font size of the most frequent selected word

    Returns:
        The HTML document as a string, one element per line
    """
    title = f"Top {len(ranking.entries)} words in {_escape(input_name)}"

    lines = [
        "<!DOCTYPE html>",
        '<html lang="en">',
        "  <head>",
        f"    <title>{title}</title>",
    ]
    for href in stylesheets:
        lines.append(f'    <link href="{_escape(href)}" rel="stylesheet" type="text/css">')
    lines += [
        "  </head>",
        "  <body>",
        f"    <h2>{title}</h2>",
        "    <hr>",
        '    <div class="cdiv">',
        '      <p class="cbox">',
    ]
    for word, count in ranking.entries:
        size = font_size(count, ranking.min_count, ranking.max_count, min_font, max_font)
        lines.append(
            f'        <span style="cursor:default" class="f{size}" '
            f'title="count: {count}">{_escape(word)}</span>')
    lines += [
        "      </p>",
        "    </div>",
        "  </body>",
        "</html>",
    ]
    return "\n".join(lines) + "\n"


def write_tag_cloud(path, document, encoding=None):
    with open(path, "w", encoding=encoding) as out:
        out.write(document)
