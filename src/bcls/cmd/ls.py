import logging
import os
from typing import List, Optional

import typer

from bcls import cli, cliutil, config, env, printer
from bcls.compute import Compute, Gcloud
from bcls.log import LogLevel, setup as setup_logging
from bcls.matching import MatchingStrategy, filter_by_name
from bcls.view import DEFAULT_COLUMNS

log = logging.getLogger(__name__)


def ls(
        pattern: str = cli.PATTERN,
        env_id: str = cli.ENV_OPTION_FIELD,
        long: bool = typer.Option(False, "--long", "-l",
                                  help="Long output: IP, zone, machine type, CPU platform, status and labels"),
        ip: bool = typer.Option(False, "--ip", "-i", help="Show IPs only. Handy for piping to other commands"),
        match: MatchingStrategy = typer.Option(MatchingStrategy.PARTIAL, "--match", "-m", case_sensitive=False,
                                               help="How the pattern is matched against instance names"),
        ignore_case: bool = typer.Option(False, "--ignore-case", "-I", help="Case insensitive matching"),
        zones: Optional[List[str]] = typer.Option(None, "--zone", "-z", metavar="ZONE",
                                                  help="List only instances in the zone (repeatable)"),
        config_file: Optional[str] = cli.CONFIG_OPTION_FIELD,
        overrides: Optional[List[str]] = cli.SET_OPTION_FIELD,
        log_level: LogLevel = cli.LOG_LEVEL_OPTION_FIELD,
        verbose: bool = cli.VERBOSE_OPTION_FIELD,
        no_color: bool = cli.NO_COLOR_OPTION_FIELD,
        version: Optional[bool] = cli.VERSION_OPTION_FIELD,
):
    """List instances of the environment with names matching the pattern"""
    if long and ip:
        raise typer.BadParameter("--long and --ip cannot be used together")

    if no_color or 'NO_COLOR' in os.environ or 'BCLS_NO_COLOR' in os.environ:
        os.environ['PROMPT_TOOLKIT_COLOR_DEPTH'] = 'DEPTH_1_BIT'

    setup_logging(LogLevel.DEBUG if verbose else log_level)

    matches = match.matcher(pattern, ignore_case=ignore_case)
    configuration = config.load(config_file, overrides or ())
    habitat = env.resolve(env_id, configuration)
    log.debug("Environment %s resolved to project %s", habitat.id, habitat.project)

    compute = Compute(habitat.project, Gcloud(config.gcloud_executable(configuration)))
    instances = filter_by_name(compute.list_instances(zones or ()), matches)
    log.debug("%d instances matching pattern %r", len(instances), pattern)

    try:
        if long:
            if instances:
                printer.print_table(instances, DEFAULT_COLUMNS, show_header=True)
        elif ip:
            printer.print_lines(i.ip for i in instances)
        else:
            printer.print_lines(i.name for i in instances)
    except BrokenPipeError:
        cliutil.handle_broken_pipe(exit_code=1)
