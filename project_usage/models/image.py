from sqlalchemy import Column, String, BigInteger, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime
import uuid
from project_usage.models.database import Base

class Image(Base):
    __tablename__ = "images"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    project_id = Column(String, ForeignKey("projects.id"), nullable=False)
    fingerprint = Column(String, nullable=False)
    size = Column(BigInteger, nullable=False, default=0)  # bytes, as recorded at ingestion
    uploaded_at = Column(DateTime, default=datetime.utcnow)

    project = relationship("Project", back_populates="images")
