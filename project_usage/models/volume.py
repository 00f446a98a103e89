from sqlalchemy import Column, String, ForeignKey, JSON, UniqueConstraint
from sqlalchemy.orm import relationship
import uuid
from project_usage.models.database import Base

CUSTOM_VOLUME_TYPE = "custom"

class StorageVolume(Base):
    """
    A storage allocation. Only `custom` volumes count towards project usage;
    instance and image volumes are accounted through root disks and images.
    """
    __tablename__ = "storage_volumes"
    __table_args__ = (
        UniqueConstraint('project_id', 'name', 'type', name='uq_project_volume_name'),
    )

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    project_id = Column(String, ForeignKey("projects.id"), nullable=False)
    name = Column(String, nullable=False)
    type = Column(String, nullable=False, default=CUSTOM_VOLUME_TYPE)
    config = Column(JSON, nullable=False, default=dict)  # expects a "size" key, e.g. "10GB"

    project = relationship("Project", back_populates="volumes")
