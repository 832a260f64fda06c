from enum import StrEnum
from typing import Any

from azure.core.credentials_async import AsyncTokenCredential
from azure.identity.aio import ClientSecretCredential, DefaultAzureCredential
from loguru import logger

from arm_models.clients.rest_client import ArmRestClient
from arm_models.config import ArmSettings
from arm_models.cosmosdb.operations import CosmosDBManagementClient
from arm_models.errors import MissingAzureCredentialsError
from arm_models.oracle.operations import OracleDatabaseClient


class ArmClientType(StrEnum):
    COSMOS_DB = "cosmos_db"
    ORACLE_DATABASE = "oracle_database"


class AzureAuthenticatorFactory:
    @staticmethod
    def create(
        tenant_id: str | None,
        client_id: str | None,
        client_secret: str | None,
    ) -> AsyncTokenCredential:
        parts = (tenant_id, client_id, client_secret)
        if all(parts):
            logger.info("Using client secret credential")
            return ClientSecretCredential(
                tenant_id=tenant_id,  # type: ignore[arg-type]
                client_id=client_id,  # type: ignore[arg-type]
                client_secret=client_secret,  # type: ignore[arg-type]
            )
        if any(parts):
            raise MissingAzureCredentialsError(
                "Missing Azure credentials: tenant_id, client_id, and client_secret are required together."
            )
        logger.info("No client secret configured, using DefaultAzureCredential")
        return DefaultAzureCredential()


def create_rest_client(settings: ArmSettings) -> ArmRestClient:
    azure = settings.azure
    credential = AzureAuthenticatorFactory.create(
        tenant_id=azure.tenant_id,
        client_id=azure.client_id,
        client_secret=(
            azure.client_secret.get_secret_value() if azure.client_secret else None
        ),
    )
    return ArmRestClient(
        credential=credential, base_url=azure.base_url, timeout=azure.timeout
    )


class ArmClientFactory:
    _clients: dict[ArmClientType, Any] = {
        ArmClientType.COSMOS_DB: CosmosDBManagementClient,
        ArmClientType.ORACLE_DATABASE: OracleDatabaseClient,
    }

    def __init__(self, settings: ArmSettings) -> None:
        self.settings = settings

    def get_client(
        self, client_type: ArmClientType
    ) -> CosmosDBManagementClient | OracleDatabaseClient:
        """Build the operation groups for one resource provider from the settings."""
        logger.info(f"Getting Azure {client_type.value} client")
        if client_type not in self._clients:
            raise ValueError(f"Invalid client type: {client_type}")
        if not self.settings.azure.subscription_id:
            raise MissingAzureCredentialsError(
                "Missing Azure subscription id: set azure.subscriptionId or ARM__AZURE__SUBSCRIPTION_ID."
            )
        api_version = (
            self.settings.cosmos_api_version
            if client_type == ArmClientType.COSMOS_DB
            else self.settings.oracle_api_version
        )
        client = self._clients[client_type](
            create_rest_client(self.settings),
            self.settings.azure.subscription_id,
            api_version,
        )
        logger.info(f"Created new Azure {client_type} client")
        return client


def create_arm_client(
    settings: ArmSettings, client_type: ArmClientType = ArmClientType.COSMOS_DB
) -> CosmosDBManagementClient | OracleDatabaseClient:
    return ArmClientFactory(settings).get_client(client_type)
