"""
Listing of Compute Engine instances through the `gcloud` command-line tool.

The tool is invoked in its JSON output mode::

    gcloud compute instances list --project=PROJECT --format=json

Authentication, pagination and API access are all handled by `gcloud` itself.
"""

import json
import logging
import subprocess
from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from bcls.err import ListFailed

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Instance:
    """Compute instance as returned by `gcloud compute instances list`"""
    name: str
    project: str
    zone: str = ''
    ip: str = ''
    machine_type: str = ''
    cpu_platform: str = ''
    status: str = ''
    labels: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_json(cls, project, data) -> 'Instance':
        """
        Create the instance from a single item of the JSON list printed by gcloud.

        Zone and machine type are given by gcloud as resource URLs, only their last segments are kept.

        Raises:
            ValueError: when the item is not an object or has no name
        """
        if not isinstance(data, dict):
            raise ValueError(f"Expected instance object but got: {data!r}")
        name = data.get('name')
        if not isinstance(name, str) or not name:
            raise ValueError(f"Missing or invalid 'name' field in: {data!r}")

        interfaces = data.get('networkInterfaces')
        nic = interfaces[0] if isinstance(interfaces, list) and interfaces and isinstance(interfaces[0], dict) else {}
        labels = data.get('labels') or {}
        if not isinstance(labels, dict):
            raise ValueError(f"Invalid 'labels' field of instance {name}: {labels!r}")
        return cls(
            name=name,
            project=project,
            zone=_last_segment(data.get('zone')),
            ip=nic.get('networkIP') or '',
            machine_type=_last_segment(data.get('machineType')),
            cpu_platform=data.get('cpuPlatform') or '',
            status=data.get('status') or '',
            labels={k: str(v) for k, v in labels.items()},
        )

    def labels_str(self) -> str:
        return ', '.join(f"{k}: {v}" for k, v in self.labels.items())


def _last_segment(value) -> str:
    if not value:
        return ''
    return str(value).rstrip('/').split('/')[-1]


class Gcloud:
    """Runs the gcloud executable and returns its completed process"""

    def __init__(self, executable='gcloud'):
        self.executable = executable

    def run(self, *args) -> subprocess.CompletedProcess:
        command = [self.executable, *args]
        log.debug("Executing: %s", ' '.join(command))
        return subprocess.run(command, capture_output=True, check=False)


class Compute:

    def __init__(self, project, gcloud=None):
        self.project = project
        self.gcloud = gcloud or Gcloud()

    def list_instances(self, zones: Sequence[str] = ()) -> List[Instance]:
        """
        List all instances of the project in the order printed by gcloud.

        Args:
            zones: restrict the listing to these zones, all zones when empty

        Raises:
            ListFailed: when gcloud cannot be executed, fails, or prints unexpected output
        """
        args = ['compute', 'instances', 'list', f'--project={self.project}', '--format=json']
        if zones:
            args.append(f"--zones={','.join(zones)}")

        try:
            completed = self.gcloud.run(*args)
        except FileNotFoundError as e:
            raise ListFailed(self.project, f"gcloud executable not found: {e.filename or self.gcloud.executable}")
        except OSError as e:
            raise ListFailed(self.project, f"Cannot execute gcloud `{self.gcloud.executable}`: {e.strerror or e}")

        if completed.returncode != 0:
            diagnostic = (completed.stderr or completed.stdout or b'').decode(errors='replace') \
                         or f"gcloud exited with code {completed.returncode}"
            raise ListFailed(self.project, diagnostic)

        instances = self._parse(completed.stdout)
        log.debug("Listed %d instances in project %s", len(instances), self.project)
        return instances

    def _parse(self, raw_output: bytes) -> List[Instance]:
        try:
            output = (raw_output or b'').decode('utf-8')
        except UnicodeDecodeError as e:
            raise ListFailed(self.project, f"gcloud output is not valid UTF-8 ({e})")

        try:
            items = json.loads(output or '[]')
        except json.JSONDecodeError as e:
            raise ListFailed(self.project, f"Unparseable gcloud output ({e}): {output}")

        if not isinstance(items, list):
            raise ListFailed(self.project, f"Expected JSON list in gcloud output: {output}")

        try:
            return [Instance.from_json(self.project, item) for item in items]
        except ValueError as e:
            raise ListFailed(self.project, str(e))
