import sys

import typer
from rich.console import Console
from rich.text import Text

from bcls.cmd import ls
from bcls.err import BclsException

console = Console(stderr=True)

app = typer.Typer(add_completion=False)
app.command()(ls.ls)


def run():
    main(None)


def main(args):
    """
    :param args: CLI arguments, `sys.argv` is used when None
    """
    try:
        app(args=args, prog_name="bcls")
    except BclsException as e:
        console.print(Text().append("User error: ", style="bold red").append(str(e)), soft_wrap=True)
        sys.exit(1)
