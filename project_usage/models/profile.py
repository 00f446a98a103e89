from sqlalchemy import Column, String, ForeignKey, JSON, UniqueConstraint
from sqlalchemy.orm import relationship
import uuid
from project_usage.models.database import Base

class Profile(Base):
    __tablename__ = "profiles"
    __table_args__ = (
        UniqueConstraint('project_id', 'name', name='uq_project_profile_name'),
    )

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    project_id = Column(String, ForeignKey("projects.id"), nullable=False)
    name = Column(String, nullable=False)
    description = Column(String, default="")
    config = Column(JSON, nullable=False, default=dict)
    devices = Column(JSON, nullable=False, default=dict)  # device name -> attributes

    project = relationship("Project", back_populates="profiles")
