import json

import pytest
from pytest_httpx import HTTPXMock

from arm_models.clients.rest_client import ArmRestClient
from arm_models.cosmosdb import CosmosDBManagementClient
from arm_models.cosmosdb.enums import KeyKind
from arm_models.cosmosdb.models import (
    DatabaseAccountRegenerateKeyParameters,
    FailoverPolicies,
    FailoverPolicy,
    RegionForOnlineOffline,
    ThroughputSettingsResource,
    ThroughputSettingsUpdateParameters,
    ThroughputSettingsUpdateProperties,
)
from tests.helpers import COSMOS_API_VERSION, SUBSCRIPTION_ID, arm_url, collect

ACCOUNTS = (
    f"/subscriptions/{SUBSCRIPTION_ID}/resourceGroups/rg/providers/Microsoft.DocumentDB/databaseAccounts"
)
ACCOUNT = f"{ACCOUNTS}/acc"


@pytest.fixture
def cosmos(rest_client: ArmRestClient) -> CosmosDBManagementClient:
    return CosmosDBManagementClient(rest_client, SUBSCRIPTION_ID)


@pytest.mark.asyncio
async def test_get_database_account(
    cosmos: CosmosDBManagementClient, httpx_mock: HTTPXMock
) -> None:
    httpx_mock.add_response(
        url=arm_url(ACCOUNT, COSMOS_API_VERSION),
        json={"name": "acc", "location": "West US", "properties": {"provisioningState": "Succeeded"}},
    )

    account = await cosmos.database_accounts.get(resource_group="rg", account_name="acc")

    assert account is not None
    assert account.properties is not None
    assert account.properties.provisioning_state == "Succeeded"


@pytest.mark.asyncio
async def test_list_database_accounts_in_subscription(
    cosmos: CosmosDBManagementClient, httpx_mock: HTTPXMock
) -> None:
    httpx_mock.add_response(
        url=arm_url(
            f"/subscriptions/{SUBSCRIPTION_ID}/providers/Microsoft.DocumentDB/databaseAccounts",
            COSMOS_API_VERSION,
        ),
        json={"value": [{"name": "a"}, {"name": "b"}]},
    )

    accounts = await collect(cosmos.database_accounts.list_all())

    assert [account.name for account in accounts] == ["a", "b"]


@pytest.mark.asyncio
async def test_list_keys(cosmos: CosmosDBManagementClient, httpx_mock: HTTPXMock) -> None:
    httpx_mock.add_response(
        method="POST",
        url=arm_url(f"{ACCOUNT}/listKeys", COSMOS_API_VERSION),
        json={
            "primaryMasterKey": "pk",
            "secondaryMasterKey": "sk",
            "primaryReadonlyMasterKey": "prk",
            "secondaryReadonlyMasterKey": "srk",
        },
    )

    keys = await cosmos.database_accounts.list_keys(resource_group="rg", account_name="acc")

    assert keys.primary_master_key == "pk"
    assert keys.secondary_readonly_master_key == "srk"


@pytest.mark.asyncio
async def test_list_connection_strings(
    cosmos: CosmosDBManagementClient, httpx_mock: HTTPXMock
) -> None:
    httpx_mock.add_response(
        method="POST",
        url=arm_url(f"{ACCOUNT}/listConnectionStrings", COSMOS_API_VERSION),
        json={"connectionStrings": [{"connectionString": "mongodb://acc", "description": "Primary"}]},
    )

    result = await cosmos.database_accounts.list_connection_strings(
        resource_group="rg", account_name="acc"
    )

    assert result.connection_strings[0].description == "Primary"


@pytest.mark.asyncio
async def test_regenerate_key_posts_body(
    cosmos: CosmosDBManagementClient, httpx_mock: HTTPXMock
) -> None:
    httpx_mock.add_response(
        method="POST", url=arm_url(f"{ACCOUNT}/regenerateKey", COSMOS_API_VERSION), status_code=202
    )

    await cosmos.database_accounts.regenerate_key(
        DatabaseAccountRegenerateKeyParameters(key_kind=KeyKind.PRIMARY_READONLY),
        resource_group="rg",
        account_name="acc",
    )

    request = httpx_mock.get_request()
    assert request is not None
    assert json.loads(request.read()) == {"keyKind": "primaryReadonly"}


@pytest.mark.asyncio
async def test_failover_priority_change(
    cosmos: CosmosDBManagementClient, httpx_mock: HTTPXMock
) -> None:
    httpx_mock.add_response(method="POST", status_code=202)

    await cosmos.database_accounts.failover_priority_change(
        FailoverPolicies(failover_policies=[FailoverPolicy(location_name="eastus", failover_priority=0)]),
        resource_group="rg",
        account_name="acc",
    )

    request = httpx_mock.get_request()
    assert request is not None
    assert request.url.path == f"{ACCOUNT}/failoverPriorityChange"
    assert json.loads(request.read()) == {
        "failoverPolicies": [{"locationName": "eastus", "failoverPriority": 0}]
    }


@pytest.mark.asyncio
async def test_offline_region(cosmos: CosmosDBManagementClient, httpx_mock: HTTPXMock) -> None:
    httpx_mock.add_response(method="POST", url=arm_url(f"{ACCOUNT}/offlineRegion", COSMOS_API_VERSION))

    await cosmos.database_accounts.offline_region(
        RegionForOnlineOffline(region="North Europe"), resource_group="rg", account_name="acc"
    )


@pytest.mark.asyncio
async def test_list_sql_containers(
    cosmos: CosmosDBManagementClient, httpx_mock: HTTPXMock
) -> None:
    httpx_mock.add_response(
        url=arm_url(f"{ACCOUNT}/sqlDatabases/db/containers", COSMOS_API_VERSION),
        json={"value": [{"name": "c1", "properties": {"resource": {"id": "c1", "_rid": "x"}}}]},
    )

    pages = await collect(
        cosmos.sql_containers.list(resource_group="rg", account_name="acc", database_name="db")
    )

    assert pages[0].value[0].name == "c1"
    assert pages[0].continuation() is None


@pytest.mark.asyncio
async def test_update_sql_database_throughput(
    cosmos: CosmosDBManagementClient, httpx_mock: HTTPXMock
) -> None:
    httpx_mock.add_response(
        method="PUT",
        url=arm_url(f"{ACCOUNT}/sqlDatabases/db/throughputSettings/default", COSMOS_API_VERSION),
        json={"properties": {"resource": {"throughput": 400, "minimumThroughput": "400"}}},
    )

    settings = await cosmos.sql_databases.update_throughput(
        ThroughputSettingsUpdateParameters(
            properties=ThroughputSettingsUpdateProperties(
                resource=ThroughputSettingsResource(throughput=400)
            )
        ),
        resource_group="rg",
        account_name="acc",
        database_name="db",
    )

    assert settings.properties.resource.throughput == 400


@pytest.mark.asyncio
async def test_migrate_container_to_autoscale(
    cosmos: CosmosDBManagementClient, httpx_mock: HTTPXMock
) -> None:
    httpx_mock.add_response(
        method="POST",
        url=arm_url(
            f"{ACCOUNT}/sqlDatabases/db/containers/c1/throughputSettings/default/migrateToAutoscale",
            COSMOS_API_VERSION,
        ),
        json={"properties": {"resource": {"autoscaleSettings": {"maxThroughput": 4000}}}},
    )

    settings = await cosmos.sql_containers.migrate_to_autoscale(
        resource_group="rg", account_name="acc", database_name="db", container_name="c1"
    )

    assert settings.properties.resource.autoscale_settings.max_throughput == 4000


@pytest.mark.asyncio
async def test_cassandra_cluster_node_status(
    cosmos: CosmosDBManagementClient, httpx_mock: HTTPXMock
) -> None:
    httpx_mock.add_response(
        method="POST",
        url=arm_url(
            f"/subscriptions/{SUBSCRIPTION_ID}/resourceGroups/rg/providers/Microsoft.DocumentDB"
            "/cassandraClusters/cluster/fetchNodeStatus",
            COSMOS_API_VERSION,
        ),
        json={"nodes": [{"address": "10.0.0.4", "state": "Normal", "status": "Up"}]},
    )

    status = await cosmos.cassandra_clusters.fetch_node_status(
        resource_group="rg", cluster_name="cluster"
    )

    assert status.nodes[0]["address"] == "10.0.0.4"


@pytest.mark.asyncio
async def test_get_cassandra_backup_encodes_backup_id(
    cosmos: CosmosDBManagementClient, httpx_mock: HTTPXMock
) -> None:
    httpx_mock.add_response(
        method="GET",
        url=arm_url(
            f"/subscriptions/{SUBSCRIPTION_ID}/resourceGroups/rg/providers/Microsoft.DocumentDB"
            "/cassandraClusters/cluster/backups/daily%2F1",
            COSMOS_API_VERSION,
        ),
        json={"name": "daily/1", "properties": {"timestamp": "2021-04-01T00:00:00Z"}},
    )

    backup = await cosmos.cassandra_clusters.get_backup(
        "daily/1", resource_group="rg", cluster_name="cluster"
    )

    assert backup.name == "daily/1"
    assert httpx_mock.get_requests()[0].url.raw_path.split(b"?")[0].endswith(b"/backups/daily%2F1")


@pytest.mark.asyncio
async def test_list_restorable_accounts_by_location(
    cosmos: CosmosDBManagementClient, httpx_mock: HTTPXMock
) -> None:
    httpx_mock.add_response(
        url=arm_url(
            f"/subscriptions/{SUBSCRIPTION_ID}/providers/Microsoft.DocumentDB/locations/westus/restorableDatabaseAccounts",
            COSMOS_API_VERSION,
        ),
        json={"value": [{"name": "id1", "properties": {"accountName": "acc", "apiType": "Sql"}}]},
    )

    accounts = await collect(cosmos.restorable_database_accounts.list_all(location="westus"))

    assert accounts[0].properties.account_name == "acc"


@pytest.mark.asyncio
async def test_list_restorable_sql_resources(
    cosmos: CosmosDBManagementClient, httpx_mock: HTTPXMock
) -> None:
    httpx_mock.add_response(
        url=arm_url(
            f"/subscriptions/{SUBSCRIPTION_ID}/providers/Microsoft.DocumentDB/locations/westus"
            "/restorableDatabaseAccounts/id1/restorableSqlResources",
            COSMOS_API_VERSION,
            restoreLocation="westus",
            restoreTimestampInUtc="2020-10-13T04:56:42Z",
        ),
        json={"value": [{"databaseName": "db", "collectionNames": ["c1", "c2"]}]},
    )

    result = await cosmos.restorable_database_accounts.list_sql_resources(
        restore_location="westus",
        restore_timestamp_in_utc="2020-10-13T04:56:42Z",
        location="westus",
        instance_id="id1",
    )

    assert result.value[0].collection_names == ["c1", "c2"]


@pytest.mark.asyncio
async def test_list_operations(cosmos: CosmosDBManagementClient, httpx_mock: HTTPXMock) -> None:
    httpx_mock.add_response(
        url=arm_url("/providers/Microsoft.DocumentDB/operations", COSMOS_API_VERSION),
        json={"value": [{"name": "Microsoft.DocumentDB/databaseAccounts/read"}]},
    )

    operations = await collect(cosmos.operations.list_all())

    assert operations[0].name == "Microsoft.DocumentDB/databaseAccounts/read"
