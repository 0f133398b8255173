"""End-to-end catalog scenarios through CatalogService on a real database."""

import pytest

from clouddriver.application.dtos.provider import ProviderCreate
from clouddriver.application.dtos.resource import ResourceCreate
from clouddriver.application.services.catalog_service import CatalogService

pytestmark = pytest.mark.requires_db


def test_provider_registration_scenario(catalog: CatalogService) -> None:
    catalog.register_provider(
        ProviderCreate(
            name="cluster-a", host="https://10.0.0.1", ca_data="...", bearer_token="secret"
        )
    )
    assert catalog.get_provider("cluster-a").bearer_token == "secret"
    listed = catalog.list_providers()
    assert [(p.name, p.bearer_token) for p in listed] == [("cluster-a", None)]


def test_deployment_then_authorization_scenario(catalog: CatalogService) -> None:
    """Record a deployment and its grants, then read back what authorization needs."""
    for kind, name in (("Deployment", "web"), ("Service", "web")):
        catalog.record_resource(
            ResourceCreate(
                account_name="cluster-a",
                spinnaker_app="shop",
                task_id="task-42",
                api_group="apps" if kind == "Deployment" else "",
                kind=kind,
                name=name,
                namespace="shop",
                resource_body="{}",
                version="v1",
            )
        )
    catalog.grant_read("cluster-a", "shop-devs")
    catalog.grant_write("cluster-a", "shop-deployers")

    assert catalog.list_accounts_by_application("shop") == ["cluster-a"]
    assert sorted(r.kind for r in catalog.list_resources_by_task("task-42")) == [
        "Deployment",
        "Service",
    ]
    assert [r.kind for r in catalog.list_resources_by_fields("kind")] == [
        "Deployment",
        "Service",
    ]
    assert catalog.list_read_groups("cluster-a") == ["shop-devs"]
    assert catalog.list_write_groups("cluster-a") == ["shop-deployers"]
    assert catalog.list_write_groups("cluster-b") == []
