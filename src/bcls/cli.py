import typer

from bcls.log import LogLevel

ENV_OPTION_FIELD = typer.Option(..., "--env", "-e", envvar="BCLS_ENV", metavar="ENV",
                                help="Target environment (habitat), e.g. int, stg, prd")
PATTERN = typer.Argument(..., metavar="PATTERN", help="Search pattern matched against instance names, e.g. store-lb")
CONFIG_OPTION_FIELD = typer.Option(None, "--config", "-C", metavar="PATH",
                                   help="Config file to use instead of ~/.bcls/config.toml and ./config.toml")
SET_OPTION_FIELD = typer.Option(None, "--set", "-s", metavar="KEY=VALUE",
                                help="Override config value, e.g. --set int.project=my-project")
LOG_LEVEL_OPTION_FIELD = typer.Option(LogLevel.WARNING, "--log-level", case_sensitive=False,
                                      help="Logging level, records are written to stderr")
VERBOSE_OPTION_FIELD = typer.Option(False, "--verbose", "-v", help="Same as --log-level debug")
NO_COLOR_OPTION_FIELD = typer.Option(False, "--no-color", help="Do not use colors in the output")


def version_callback(value: bool):
    if value:
        from bcls import __version__
        print(f"bcls {__version__}")
        raise typer.Exit()


VERSION_OPTION_FIELD = typer.Option(None, "--version", callback=version_callback, is_eager=True,
                                    help="Show version and exit")
