from sqlalchemy import Column, String, Integer, DateTime, ForeignKey, JSON, UniqueConstraint
from sqlalchemy.orm import relationship
from datetime import datetime
import uuid
from project_usage.models.database import Base
from project_usage.core.entities import InstanceType

class InstanceProfile(Base):
    """Ordered link between an instance and the profiles it inherits from."""
    __tablename__ = "instance_profiles"

    instance_id = Column(String, ForeignKey("instances.id"), primary_key=True)
    profile_id = Column(String, ForeignKey("profiles.id"), primary_key=True)
    apply_order = Column(Integer, nullable=False, default=0)

    profile = relationship("Profile")

class Instance(Base):
    __tablename__ = "instances"
    __table_args__ = (
        UniqueConstraint('project_id', 'name', name='uq_project_instance_name'),
    )

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    project_id = Column(String, ForeignKey("projects.id"), nullable=False)
    name = Column(String, nullable=False)
    # Plain string column: unknown kinds must survive loading so the
    # classifier can report them.
    type = Column(String, nullable=False, default=InstanceType.CONTAINER.value)
    config = Column(JSON, nullable=False, default=dict)
    devices = Column(JSON, nullable=False, default=dict)
    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    project = relationship("Project", back_populates="instances")
    profile_links = relationship(
        "InstanceProfile",
        order_by="InstanceProfile.apply_order",
        cascade="all, delete-orphan"
    )

    @property
    def profile_names(self):
        return [link.profile.name for link in self.profile_links]
