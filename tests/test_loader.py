"""
Tests for the SQLAlchemy-backed entity graph loader.

Tests:
- Unknown projects load as None
- Profile source (own profiles vs. default project)
- Volume filtering and snapshot contents
"""

from project_usage.core.entities import ImageInfo, VolumeInfo
from project_usage.core.loader import DatabaseLoader, has_limits, is_true
from project_usage.core.protocols import EntityGraphLoader
from tests.conftest import (
    create_project, create_profile, create_instance, create_volume, create_image, root_disk
)


class TestDatabaseLoader:

    def test_unknown_project_returns_none(self, db_session):
        assert DatabaseLoader().load(db_session, "missing") is None

    def test_loads_snapshot(self, db_session):
        project = create_project(db_session, "default")
        profile = create_profile(db_session, project, "default", devices=root_disk("10GB"))
        create_instance(db_session, project, "web2", type="virtual-machine", profiles=[profile])
        create_instance(db_session, project, "web1", config={"limits.cpu": "2"}, profiles=[profile])
        create_volume(db_session, project, "data", {"size": "3GB"})
        create_image(db_session, project, "abc123", 1024)

        info = DatabaseLoader().load(db_session, "default")

        assert info.project == "default"
        assert [i.name for i in info.instances] == ["web1", "web2"]
        assert info.instances[0].config == {"limits.cpu": "2"}
        assert info.instances[0].profiles == ["default"]
        assert info.instances[1].type == "virtual-machine"
        assert [p.name for p in info.profiles] == ["default"]
        assert info.volumes == [VolumeInfo("data", {"size": "3GB"})]
        assert info.images == [ImageInfo("abc123", 1024)]

    def test_only_custom_volumes_are_loaded(self, db_session):
        project = create_project(db_session, "default")
        create_volume(db_session, project, "data", {"size": "1GB"})
        create_volume(db_session, project, "web1", {"size": "9GB"}, type="container")

        info = DatabaseLoader().load(db_session, "default")

        assert [v.name for v in info.volumes] == ["data"]

    def test_profiles_from_default_project_without_feature(self, db_session):
        default = create_project(db_session, "default")
        create_profile(db_session, default, "default", config={"limits.cpu": "1"})
        other = create_project(db_session, "web")
        create_profile(db_session, other, "own")

        info = DatabaseLoader().load(db_session, "web")

        assert [p.name for p in info.profiles] == ["default"]

    def test_profiles_from_own_project_with_feature(self, db_session):
        default = create_project(db_session, "default")
        create_profile(db_session, default, "default")
        other = create_project(db_session, "web", config={"features.profiles": "true"})
        create_profile(db_session, other, "own")

        info = DatabaseLoader().load(db_session, "web")

        assert [p.name for p in info.profiles] == ["own"]

    def test_profiles_respect_configured_default_project(self, db_session):
        base = create_project(db_session, "base")
        create_profile(db_session, base, "shared")
        create_project(db_session, "web")

        info = DatabaseLoader(default_project="base").load(db_session, "web")

        assert [p.name for p in info.profiles] == ["shared"]

    def test_instance_profiles_keep_apply_order(self, db_session):
        project = create_project(db_session, "default")
        small = create_profile(db_session, project, "a-small")
        large = create_profile(db_session, project, "z-large")
        create_instance(db_session, project, "c1", profiles=[large, small])

        info = DatabaseLoader().load(db_session, "default")

        assert info.instances[0].profiles == ["z-large", "a-small"]

    def test_unknown_instance_type_is_preserved(self, db_session):
        project = create_project(db_session, "default")
        create_instance(db_session, project, "odd", type="unikernel")

        info = DatabaseLoader().load(db_session, "default")

        assert info.instances[0].type == "unikernel"

    def test_skip_if_no_limits(self, db_session):
        create_project(db_session, "plain")
        create_project(db_session, "limited", config={"limits.memory": "10GB"})

        loader = DatabaseLoader()

        assert loader.load(db_session, "plain", skip_if_no_limits=True) is None
        assert loader.load(db_session, "plain", skip_if_no_limits=False) is not None
        assert loader.load(db_session, "limited", skip_if_no_limits=True) is not None

    def test_loader_satisfies_protocol(self):
        assert isinstance(DatabaseLoader(), EntityGraphLoader)


def test_is_true():
    assert is_true("true")
    assert is_true("ON")
    assert not is_true("false")
    assert not is_true(None)


def test_has_limits():
    assert has_limits({"limits.cpu": "4"})
    assert not has_limits({"features.profiles": "true"})
