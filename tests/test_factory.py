import pytest
from azure.identity.aio import ClientSecretCredential, DefaultAzureCredential

from arm_models.clients.rest_client import ArmRestClient
from arm_models.config import ArmSettings
from arm_models.cosmosdb.operations import CosmosDBManagementClient
from arm_models.errors import MissingAzureCredentialsError
from arm_models.factory import (
    ArmClientType,
    AzureAuthenticatorFactory,
    create_arm_client,
    create_rest_client,
)
from arm_models.oracle.operations import OracleDatabaseClient
from tests.conftest import _DummyCredential
from tests.helpers import SUBSCRIPTION_ID


def test_azure_authenticator_factory_requires_all_secret_parts() -> None:
    with pytest.raises(MissingAzureCredentialsError):
        AzureAuthenticatorFactory.create(tenant_id="", client_id="abc", client_secret="def")


def test_azure_authenticator_factory_client_secret() -> None:
    credential = AzureAuthenticatorFactory.create(
        tenant_id="tenant", client_id="client", client_secret="secret"
    )

    assert isinstance(credential, ClientSecretCredential)


def test_azure_authenticator_factory_defaults() -> None:
    credential = AzureAuthenticatorFactory.create(
        tenant_id=None, client_id=None, client_secret=None
    )

    assert isinstance(credential, DefaultAzureCredential)


def test_create_rest_client_uses_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        AzureAuthenticatorFactory, "create", staticmethod(lambda **_: _DummyCredential())
    )
    settings = ArmSettings(azure={"base_url": "https://management.usgovcloudapi.net/"})

    client = create_rest_client(settings)

    assert isinstance(client, ArmRestClient)
    assert client.scope == "https://management.usgovcloudapi.net/.default"


@pytest.mark.parametrize(
    "client_type,expected,api_version",
    [
        (ArmClientType.COSMOS_DB, CosmosDBManagementClient, "2021-04-01-preview"),
        (ArmClientType.ORACLE_DATABASE, OracleDatabaseClient, "2023-09-01-preview"),
    ],
)
def test_create_arm_client_returns_provider_client(
    monkeypatch: pytest.MonkeyPatch,
    client_type: ArmClientType,
    expected: type,
    api_version: str,
) -> None:
    monkeypatch.setattr(
        AzureAuthenticatorFactory, "create", staticmethod(lambda **_: _DummyCredential())
    )
    settings = ArmSettings(azure={"subscription_id": SUBSCRIPTION_ID})

    client = create_arm_client(settings, client_type)

    assert isinstance(client, expected)
    assert client.operations.api_version == api_version
    assert client.operations.subscription_id == SUBSCRIPTION_ID


def test_create_arm_client_requires_subscription() -> None:
    with pytest.raises(MissingAzureCredentialsError):
        create_arm_client(ArmSettings(), ArmClientType.COSMOS_DB)
