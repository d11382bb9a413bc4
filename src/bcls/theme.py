"""
Styles of the `--long` instance table, written as plain ANSI colour names (``green``, ``bright_red``, ...).
The printer translates them for prompt_toolkit when stdout is a terminal.
"""


class Theme:
    instance = 'bold'
    subtle = 'bright_black'
    status_running = 'green'
    status_transitional = 'yellow'
    status_stopped = 'bright_red'
    status_unknown = 'bright_black'
