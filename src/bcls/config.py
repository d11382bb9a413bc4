"""
Configuration of habitats and of the external tool.

The configuration is a TOML document where top-level tables are habitats and top-level
scalars are settings::

    gcloud = "/opt/google-cloud-sdk/bin/gcloud"

    [int]
    project = "integration-project"

Files are read in this order, later ones overriding earlier ones:
    1. built-in defaults (:data:`DEFAULTS`)
    2. ``~/.bcls/config.toml``
    3. ``./config.toml``

When a file is given explicitly, only that file is read on top of the defaults.
"""

import copy
import logging
import tomllib
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from bcls.err import ConfigFileNotFoundError, InvalidConfiguration

log = logging.getLogger(__name__)

CONFIG_FILE = 'config.toml'
GCLOUD_KEY = 'gcloud'

DEFAULTS = {
    GCLOUD_KEY: 'gcloud',
    'int': {'project': 'integration-project'},
    'stg': {'project': 'staging-project'},
    'prd': {'project': 'production-project'},
}


def search_path() -> List[Path]:
    return [Path.home() / '.bcls' / CONFIG_FILE, Path.cwd() / CONFIG_FILE]


def read_toml_file(path) -> dict:
    with open(path, 'rb') as f:
        try:
            return tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise InvalidConfiguration(f"Invalid config file `{path}`: {e}") from e


def load(config_file: Optional[str] = None, overrides: Iterable[str] = ()) -> dict:
    """
    Load configuration from the default location(s) or from the explicitly specified file.

    Args:
        config_file: explicit path to a config file, must exist when specified
        overrides: ``key=value`` strings with dotted keys applied on top of the loaded configuration

    Returns:
        dict: merged configuration

    Raises:
        ConfigFileNotFoundError: when the explicit config file does not exist
        InvalidConfiguration: when a file cannot be parsed or an override is malformed
    """
    configuration = copy.deepcopy(DEFAULTS)

    if config_file:
        path = Path(config_file).expanduser()
        try:
            update_nested_dict(configuration, read_toml_file(path))
        except FileNotFoundError:
            raise ConfigFileNotFoundError(config_file)
        log.debug("Loaded config file: %s", path)
    else:
        for path in search_path():
            if path.is_file():
                update_nested_dict(configuration, read_toml_file(path))
                log.debug("Loaded config file: %s", path)

    apply_overrides(configuration, split_params(overrides))
    return configuration


def split_params(params: Iterable[str]) -> Dict[str, object]:
    """
    Convert ``a.b=value`` strings to nested dictionaries: ``{'a': {'b': 'value'}}``
    """
    result = {}
    for param in params or ():
        key, sep, value = param.partition('=')
        key = key.strip()
        if not sep or not key:
            raise InvalidConfiguration(f"Invalid override `{param}`, expected format is KEY=VALUE")

        *parents, leaf = key.split('.')
        target = result
        for parent in parents:
            target = target.setdefault(parent, {})
            if not isinstance(target, dict):
                raise InvalidConfiguration(f"Conflicting override `{param}`")
        if isinstance(target.get(leaf), dict):
            raise InvalidConfiguration(f"Conflicting override `{param}`")
        target[leaf] = value.strip()

    return result


def update_nested_dict(original: dict, updates: dict) -> dict:
    for key, value in updates.items():
        if isinstance(value, dict) and isinstance(original.get(key), dict):
            update_nested_dict(original[key], value)
        else:
            original[key] = value
    return original


def apply_overrides(configuration: dict, overrides: dict, parents=()) -> dict:
    """
    Like :func:`update_nested_dict` but a table can be neither replaced by a value nor a value by a table.
    """
    for key, value in overrides.items():
        dotted_key = '.'.join((*parents, key))
        if key in configuration and isinstance(configuration[key], dict) != isinstance(value, dict):
            kind = 'table' if isinstance(configuration[key], dict) else 'value'
            raise InvalidConfiguration(f"Override of `{dotted_key}` conflicts with the configured {kind}")
        if isinstance(value, dict) and key in configuration:
            apply_overrides(configuration[key], value, (*parents, key))
        else:
            configuration[key] = value
    return configuration


def gcloud_executable(configuration) -> str:
    executable = configuration.get(GCLOUD_KEY)
    if not isinstance(executable, str) or not executable:
        raise InvalidConfiguration(f"`{GCLOUD_KEY}` must be a path to the gcloud executable")
    return executable
