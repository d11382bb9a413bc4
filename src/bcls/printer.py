import itertools
import os
import re
import sys
from collections import namedtuple
from typing import Dict, List, Tuple

from prompt_toolkit import print_formatted_text
from prompt_toolkit.formatted_text import FormattedText

Column = namedtuple('Column', 'name max_width value_fnc colour_fnc')

_ANSI_COLORS = {'black', 'red', 'green', 'yellow', 'blue', 'magenta', 'cyan', 'gray', 'white'}


def _to_pt_style(style: str) -> str:
    """``"bold bright_red"`` -> ``"bold ansibrightred"``, tokens other than colour names are kept"""
    if not style:
        return style
    converted = []
    for token in style.split():
        if token in _ANSI_COLORS:
            converted.append('ansi' + token)
        elif token.startswith('bright_') and token[7:] in _ANSI_COLORS:
            converted.append('ansibright' + token[7:])
        else:
            converted.append(token)
    return ' '.join(converted)


def print_styled(*style_and_text: Tuple[str, str], file=None):
    """
    Print styled if printed to terminal.

    :param: style_and_text tuples of style and text to print
    """
    if sys.stdout.isatty():
        pt_pairs = [(_to_pt_style(style), text) for style, text in style_and_text]
        print_formatted_text(FormattedText(pt_pairs), file=file)
    else:
        print("".join(text for _, text in style_and_text), file=file)


def print_lines(values):
    """Plain output, one value per line, suitable for piping"""
    for value in values:
        print(value)


def print_table(items, columns: List[Column], *, show_header: bool):
    for line in output_gen(items, columns, show_header):
        print_styled(*line)


def output_gen(items, columns: List[Column], show_header: bool):
    """
    Yield the lines of the `--long` instance table as lists of (style, text) fragments.

    Every cell is padded by one space on both sides and the header is underlined by a row of dashes,
    one dash run per column. Widths are derived from the first 50 instances only, so the rest
    of the listing can be streamed.
    """
    items_iter = iter(items)
    first_fifty = list(itertools.islice(items_iter, 50))
    column_widths = _calc_widths(first_fifty, columns)
    column_formats = [" {:" + str(w - 1) + "} " for w in column_widths]

    if show_header:
        yield [('bold', f.format(c.name)) for c, f in zip(columns, column_formats)]
        separator_line = " ".join("-" * w for w in column_widths)
        yield [('bold', separator_line)]

    for item in itertools.chain(first_fifty, items_iter):
        yield [(c.colour_fnc(item), f.format(_limit_text(c.value_fnc(item), w - 2)))
               for c, w, f in zip(columns, column_widths, column_formats)]


def _calc_widths(items, columns: List[Column]):
    widths = [len(c.name) + 2 for c in columns]  # +2 for left and right padding
    for item in items:
        for i, column in enumerate(columns):
            widths[i] = max(widths[i], min(len(column.value_fnc(item)) + 2, column.max_width))

    # The last column (labels) takes what is left of the terminal width
    try:
        terminal_length = os.get_terminal_size().columns
    except OSError:
        return widths  # Output is piped, keep natural widths

    actual_length = sum(widths) + (len(columns) - 1)
    spare_length = (terminal_length - 1) - actual_length

    if spare_length > 0:
        max_length_in_last_column = \
            max(itertools.chain((len(columns[-1].value_fnc(i)) + 2 for i in items), (widths[-1],)))
        widths[-1] = min(max_length_in_last_column, widths[-1] + spare_length)
    elif spare_length < 0:
        widths[-1] = max(widths[-1] + spare_length, 4)

    return widths


def _limit_text(text, limit):
    if not text or len(text) <= limit:
        return text
    return text[:limit - 2] + '..'


def parse_table(output, columns) -> List[Dict[Column, str]]:
    """
    Read rows back from printed `--long` output, e.g. to check the listing in tests or scripts.

    Column boundaries are taken from the dash line under the header, so values may contain spaces.

    :param output: printed text which includes the header line and the dash line below it
    :param columns: columns the table was printed with, in the same order
    :return: one dict per instance row mapping column -> stripped cell text
    """
    lines = [line for line in output.splitlines() if line]
    header_idx = [i for i, line in enumerate(lines) if all(column.name in line for column in columns)]
    if not header_idx:
        raise ValueError('No instance table header found in the output')
    column_sep_line = lines[header_idx[0] + 1]
    sep_line_pattern = re.compile('-+')
    column_spans = [column.span() for column in sep_line_pattern.finditer(column_sep_line)]
    return [dict(zip(columns, (line[slice(*span)].strip() for span in column_spans)))
            for line in lines[header_idx[0] + 2:]]
