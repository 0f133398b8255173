"""CatalogService delegates every operation to its repositories unchanged."""

from unittest.mock import Mock

import pytest

from clouddriver.application.dtos.provider import ProviderCreate, ProviderResult
from clouddriver.application.dtos.resource import ResourceResult
from clouddriver.application.services.catalog_service import CatalogService


@pytest.fixture
def repos() -> tuple[Mock, Mock, Mock]:
    return Mock(), Mock(), Mock()


@pytest.fixture
def service(repos) -> CatalogService:
    return CatalogService(*repos)


def test_provider_operations(service: CatalogService, repos) -> None:
    providers, _, _ = repos
    result = ProviderResult(name="a", host="h", ca_data="ca", bearer_token="t")
    providers.get_provider.return_value = result
    providers.list_providers.return_value = [result]
    create = ProviderCreate(name="a", host="h", ca_data="ca", bearer_token="t")

    service.register_provider(create)
    assert service.get_provider("a") is result
    assert service.list_providers() == [result]
    providers.register_provider.assert_called_once_with(create)
    providers.get_provider.assert_called_once_with("a")


def test_resource_operations(service: CatalogService, repos) -> None:
    _, resources, _ = repos
    rows = [ResourceResult(kind="Deployment")]
    resources.list_resources_by_fields.return_value = rows
    resources.list_accounts_by_application.return_value = ["acct"]
    resources.list_resources_by_task.return_value = []

    assert service.list_resources_by_fields("kind", "namespace") is rows
    assert service.list_accounts_by_application("app") == ["acct"]
    assert service.list_resources_by_task("t-1") == []
    resources.list_resources_by_fields.assert_called_once_with("kind", "namespace")
    resources.list_accounts_by_application.assert_called_once_with("app")


def test_permission_operations(service: CatalogService, repos) -> None:
    _, _, permissions = repos
    permissions.list_read_groups.return_value = ["readers"]
    permissions.list_write_groups.return_value = []

    service.grant_read("acct", "readers")
    service.grant_write("acct", "writers")
    assert service.list_read_groups("acct") == ["readers"]
    assert service.list_write_groups("acct") == []
    permissions.grant_read.assert_called_once_with("acct", "readers")
    permissions.grant_write.assert_called_once_with("acct", "writers")


def test_provider_token_hidden_from_repr() -> None:
    result = ProviderResult(name="a", host="h", ca_data="ca", bearer_token="secret")
    assert "secret" not in repr(result)
    assert "secret" not in repr(ProviderCreate(name="a", host="h", ca_data="", bearer_token="secret"))
