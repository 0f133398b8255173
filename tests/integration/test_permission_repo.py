"""Permission repository integration tests against a SQLite file database."""

import pytest

from clouddriver.infrastructure.persistence.repositories import PermissionRepository

pytestmark = pytest.mark.requires_db


@pytest.fixture
def repo(database) -> PermissionRepository:
    return PermissionRepository(database.session_factory)


def test_account_without_grants_has_no_groups(repo: PermissionRepository) -> None:
    assert repo.list_read_groups("cluster-a") == []
    assert repo.list_write_groups("cluster-a") == []


def test_read_groups_are_distinct(repo: PermissionRepository) -> None:
    repo.grant_read("cluster-a", "devs")
    repo.grant_read("cluster-a", "ops")
    repo.grant_read("cluster-a", "devs")
    repo.grant_read("cluster-b", "auditors")
    assert repo.list_read_groups("cluster-a") == ["devs", "ops"]
    assert repo.list_read_groups("cluster-b") == ["auditors"]


def test_read_and_write_are_independent(repo: PermissionRepository) -> None:
    repo.grant_read("cluster-a", "devs")
    repo.grant_write("cluster-a", "ops")
    repo.grant_write("cluster-a", "ops")
    assert repo.list_read_groups("cluster-a") == ["devs"]
    assert repo.list_write_groups("cluster-a") == ["ops"]
