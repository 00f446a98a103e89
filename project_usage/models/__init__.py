from project_usage.models.database import Base, get_db, engine, SessionLocal
from project_usage.models.project import Project
from project_usage.models.profile import Profile
from project_usage.models.instance import Instance, InstanceProfile, InstanceType
from project_usage.models.volume import StorageVolume, CUSTOM_VOLUME_TYPE
from project_usage.models.image import Image

__all__ = [
    "Base", "get_db", "engine", "SessionLocal",
    "Project", "Profile", "Instance", "InstanceProfile", "InstanceType",
    "StorageVolume", "CUSTOM_VOLUME_TYPE", "Image"
]
