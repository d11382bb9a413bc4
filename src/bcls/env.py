from dataclasses import dataclass
from typing import Dict

from bcls.err import InvalidConfiguration, UnknownEnvironment


@dataclass(frozen=True)
class Habitat:
    """Deployment environment mapped to a cloud project"""
    id: str
    project: str


def get_habitats(configuration) -> Dict[str, Habitat]:
    """
    Every top-level table of the configuration is a habitat.
    """
    habitats = {}
    for env_id, section in configuration.items():
        if not isinstance(section, dict):
            continue
        project = section.get('project')
        if not isinstance(project, str) or not project:
            raise InvalidConfiguration(f"Environment `{env_id}` must define a non-empty `project`")
        habitats[env_id] = Habitat(env_id, project)

    return habitats


def resolve(env_id, configuration) -> Habitat:
    habitats = get_habitats(configuration)
    try:
        return habitats[env_id]
    except KeyError:
        raise UnknownEnvironment(env_id, habitats.keys()) from None
