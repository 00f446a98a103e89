from sqlalchemy import Column, String, DateTime, JSON
from sqlalchemy.orm import relationship
from datetime import datetime
import uuid
from project_usage.models.database import Base

class Project(Base):
    """
    A tenant namespace grouping instances, profiles, volumes and images
    under a shared quota.

    `config` holds the project's own settings such as `features.profiles`
    and the `limits.*` keys.
    """
    __tablename__ = "projects"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String, unique=True, nullable=False)
    description = Column(String, default="")
    config = Column(JSON, nullable=False, default=dict)
    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    instances = relationship("Instance", back_populates="project", cascade="all, delete-orphan")
    profiles = relationship("Profile", back_populates="project", cascade="all, delete-orphan")
    volumes = relationship("StorageVolume", back_populates="project", cascade="all, delete-orphan")
    images = relationship("Image", back_populates="project", cascade="all, delete-orphan")
