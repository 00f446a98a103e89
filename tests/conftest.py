"""
Pytest fixtures and configuration for project_usage tests.

Provides:
- Database setup/teardown
- Test client fixture with the database dependency overridden
- Seeding helpers for projects, profiles, instances, volumes and images
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from project_usage.main import app
from project_usage.models.database import Base, get_db
from project_usage.models import (
    Project, Profile, Instance, InstanceProfile, StorageVolume, Image
)


# Test database (separate from production)
TEST_DATABASE_URL = "sqlite:///./test.db"
test_engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


def override_get_db():
    """Provide test database session."""
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(scope="function")
def db_session():
    """Create fresh database for each test."""
    Base.metadata.create_all(bind=test_engine)
    session = TestingSessionLocal()
    yield session
    session.close()
    Base.metadata.drop_all(bind=test_engine)


@pytest.fixture(scope="function")
def client(db_session):
    """Test client with fresh database and isolated dependency override."""
    app.dependency_overrides[get_db] = override_get_db

    yield TestClient(app)

    app.dependency_overrides.clear()


# ============================================================
# Helper Functions
# ============================================================

def create_project(session, name="web", config=None):
    """Helper to create a project and return it."""
    project = Project(name=name, config=config or {})
    session.add(project)
    session.commit()
    return project


def create_profile(session, project, name="default", config=None, devices=None):
    profile = Profile(
        project_id=project.id,
        name=name,
        config=config or {},
        devices=devices or {},
    )
    session.add(profile)
    session.commit()
    return profile


def create_instance(session, project, name, type="container", config=None, devices=None, profiles=()):
    """Helper to create an instance with profiles applied in the given order."""
    instance = Instance(
        project_id=project.id,
        name=name,
        type=type,
        config=config or {},
        devices=devices or {},
    )
    session.add(instance)
    session.flush()
    for order, profile in enumerate(profiles):
        session.add(InstanceProfile(instance_id=instance.id, profile_id=profile.id, apply_order=order))
    session.commit()
    return instance


def create_volume(session, project, name, config=None, type="custom"):
    volume = StorageVolume(project_id=project.id, name=name, type=type, config=config or {})
    session.add(volume)
    session.commit()
    return volume


def create_image(session, project, fingerprint, size):
    image = Image(project_id=project.id, fingerprint=fingerprint, size=size)
    session.add(image)
    session.commit()
    return image


def root_disk(size=None, pool="default"):
    """Root disk device attributes, optionally sized."""
    device = {"type": "disk", "path": "/", "pool": pool}
    if size is not None:
        device["size"] = size
    return {"root": device}
