"""
SQLAlchemy-backed entity graph loader.

Copies one project's rows into frozen snapshots (see entities.py) within the
caller's session. Nothing is written back.
"""

from typing import Dict, Optional

from sqlalchemy.orm import Session

from project_usage.config import settings
from project_usage.logger import logger
from project_usage.models.project import Project
from project_usage.models.instance import Instance
from project_usage.models.volume import StorageVolume, CUSTOM_VOLUME_TYPE
from project_usage.models.image import Image
from .entities import ImageInfo, InstanceInfo, ProfileInfo, ProjectInfo, VolumeInfo

TRUE_VALUES = ("true", "1", "yes", "on")


def is_true(value: Optional[str]) -> bool:
    return value is not None and str(value).lower() in TRUE_VALUES


def has_limits(config: Dict[str, str]) -> bool:
    """Whether the project config sets any limits.* key."""
    return any(key.startswith("limits.") for key in config)


def _string_map(values) -> Dict[str, str]:
    """Stringify a JSON object. Null values count as unset."""
    return {str(key): str(value) for key, value in (values or {}).items() if value is not None}


def _device_map(devices) -> Dict[str, Dict[str, str]]:
    return {str(name): _string_map(attrs) for name, attrs in (devices or {}).items()}


class DatabaseLoader:
    """
    Default EntityGraphLoader.

    Profiles are taken from the project itself when it is the default project
    or has "features.profiles" enabled; otherwise the default project's
    profiles apply. Only custom volumes are loaded.
    """

    def __init__(self, default_project: Optional[str] = None):
        self.default_project = default_project or settings.DEFAULT_PROJECT

    def load(self, session: Session, project_name: str, skip_if_no_limits: bool = False) -> Optional[ProjectInfo]:
        project = session.query(Project).filter(Project.name == project_name).first()
        if project is None:
            logger.debug(f"Project '{project_name}' not found")
            return None

        config = _string_map(project.config)
        if skip_if_no_limits and not has_limits(config):
            logger.debug(f"Project '{project_name}' has no limits, skipping")
            return None

        instances = session.query(Instance).filter(
            Instance.project_id == project.id
        ).order_by(Instance.name).all()

        volumes = session.query(StorageVolume).filter(
            StorageVolume.project_id == project.id,
            StorageVolume.type == CUSTOM_VOLUME_TYPE
        ).order_by(StorageVolume.name).all()

        profile_project = self._profile_source(session, project, config)
        profiles = sorted(profile_project.profiles, key=lambda p: p.name) if profile_project else []

        images = session.query(Image).filter(
            Image.project_id == project.id
        ).order_by(Image.fingerprint).all()

        info = ProjectInfo(
            project=project.name,
            config=config,
            instances=[
                InstanceInfo(
                    name=instance.name,
                    type=instance.type,
                    config=_string_map(instance.config),
                    devices=_device_map(instance.devices),
                    profiles=instance.profile_names,
                )
                for instance in instances
            ],
            profiles=[
                ProfileInfo(
                    name=profile.name,
                    config=_string_map(profile.config),
                    devices=_device_map(profile.devices),
                )
                for profile in profiles
            ],
            volumes=[VolumeInfo(name=volume.name, config=_string_map(volume.config)) for volume in volumes],
            images=[ImageInfo(fingerprint=image.fingerprint, size=image.size or 0) for image in images],
        )

        logger.debug(
            f"Loaded project '{project_name}': {len(info.instances)} instances, "
            f"{len(info.profiles)} profiles, {len(info.volumes)} volumes, {len(info.images)} images"
        )
        return info

    def _profile_source(self, session: Session, project: Project, config: Dict[str, str]) -> Optional[Project]:
        if project.name == self.default_project or is_true(config.get("features.profiles")):
            return project
        return session.query(Project).filter(Project.name == self.default_project).first()
