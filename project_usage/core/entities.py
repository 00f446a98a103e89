"""
Read-only snapshots of a project's entity graph.

The loader copies database rows into these frozen dataclasses so the
aggregation steps never touch the ORM session and never mutate stored state.
Config maps are plain string-to-string dicts; device maps go from device
name to an attribute dict (e.g. {"root": {"type": "disk", "size": "10GB"}}).
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional
import enum


class InstanceType(str, enum.Enum):
    CONTAINER = "container"
    VM = "virtual-machine"


@dataclass(frozen=True)
class ProfileInfo:
    name: str
    config: Dict[str, str] = field(default_factory=dict)
    devices: Dict[str, Dict[str, str]] = field(default_factory=dict)


@dataclass(frozen=True)
class InstanceInfo:
    """
    One instance as stored, or after profile expansion.

    Attributes:
        name: Instance name, unique within the project
        type: Raw stored kind ("container", "virtual-machine", or anything
            else if the data is corrupt)
        config: Instance config; effective values after expansion
        devices: Instance devices; effective values after expansion
        profiles: Applied profile names, in application order
    """
    name: str
    type: str
    config: Dict[str, str] = field(default_factory=dict)
    devices: Dict[str, Dict[str, str]] = field(default_factory=dict)
    profiles: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class VolumeInfo:
    name: str
    config: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class ImageInfo:
    fingerprint: str
    size: int  # bytes


@dataclass(frozen=True)
class ProjectInfo:
    """Everything needed to compute one project's usage report."""
    project: str
    config: Dict[str, str] = field(default_factory=dict)
    instances: List[InstanceInfo] = field(default_factory=list)
    profiles: List[ProfileInfo] = field(default_factory=list)
    volumes: List[VolumeInfo] = field(default_factory=list)
    images: List[ImageInfo] = field(default_factory=list)

    def with_instances(self, instances: List[InstanceInfo]) -> "ProjectInfo":
        """Return a copy of this snapshot carrying the given instances."""
        return ProjectInfo(
            project=self.project,
            config=self.config,
            instances=list(instances),
            profiles=self.profiles,
            volumes=self.volumes,
            images=self.images,
        )


@dataclass(frozen=True)
class InstanceCounts:
    containers: int = 0
    virtual_machines: int = 0


def root_disk_size(instance: InstanceInfo) -> Optional[str]:
    """Return the size attribute of the instance's root device, if any."""
    root = instance.devices.get("root")
    if root is None:
        return None
    return root.get("size")
