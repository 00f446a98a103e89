"""
Profile expansion.

An instance inherits config and devices from its profiles. Profiles apply
in the order listed on the instance, each overriding the ones before it,
and the instance's own values override all of them. Config merges key by
key; devices merge by device name, so a device defined on the instance
replaces the profile's device with the same name entirely.
"""

from typing import Dict, List

from .entities import InstanceInfo, ProfileInfo


def expand_config(instance: InstanceInfo, profiles: List[ProfileInfo]) -> Dict[str, str]:
    config: Dict[str, str] = {}
    for profile in profiles:
        config.update(profile.config)
    config.update(instance.config)
    return config


def expand_devices(instance: InstanceInfo, profiles: List[ProfileInfo]) -> Dict[str, Dict[str, str]]:
    devices: Dict[str, Dict[str, str]] = {}
    for profile in profiles:
        for name, device in profile.devices.items():
            devices[name] = dict(device)
    for name, device in instance.devices.items():
        devices[name] = dict(device)
    return devices


class ProfileExpander:
    """Default ConfigExpander: resolves each instance's profiles by name."""

    def expand(self, instances: List[InstanceInfo], profiles: List[ProfileInfo]) -> List[InstanceInfo]:
        by_name = {profile.name: profile for profile in profiles}

        expanded = []
        for instance in instances:
            # Profiles missing from the project are skipped
            applied = [by_name[name] for name in instance.profiles if name in by_name]
            expanded.append(InstanceInfo(
                name=instance.name,
                type=instance.type,
                config=expand_config(instance, applied),
                devices=expand_devices(instance, applied),
                profiles=list(instance.profiles),
            ))
        return expanded
