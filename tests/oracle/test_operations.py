import json

import pytest
from pytest_httpx import HTTPXMock

from arm_models.clients.rest_client import ArmRestClient
from arm_models.errors import ArmApiError
from arm_models.oracle import OracleDatabaseClient
from arm_models.oracle.enums import DbNodeActionEnum, GenerateType
from arm_models.oracle.models import (
    AddRemoveDbNode,
    AutonomousDatabaseCloneProperties,
    DbNodeAction,
    GenerateAutonomousDatabaseWalletDetails,
    PeerDbDetails,
    PrivateIpAddressesFilter,
)
from tests.helpers import ORACLE_API_VERSION, SUBSCRIPTION_ID, arm_url, collect

PROVIDER = f"/subscriptions/{SUBSCRIPTION_ID}/resourceGroups/rg/providers/Oracle.Database"
SUBSCRIPTION_PROVIDER = f"/subscriptions/{SUBSCRIPTION_ID}/providers/Oracle.Database"


@pytest.fixture
def oracle(rest_client: ArmRestClient) -> OracleDatabaseClient:
    return OracleDatabaseClient(rest_client, SUBSCRIPTION_ID)


@pytest.mark.asyncio
async def test_list_autonomous_databases_follows_pages(
    oracle: OracleDatabaseClient, httpx_mock: HTTPXMock
) -> None:
    next_link = arm_url(f"{PROVIDER}/autonomousDatabases", ORACLE_API_VERSION, **{"$skiptoken": "2"})
    httpx_mock.add_response(
        url=arm_url(f"{PROVIDER}/autonomousDatabases", ORACLE_API_VERSION),
        json={
            "value": [{"name": "adb1", "location": "eastus", "properties": {"dataBaseType": "Regular"}}],
            "nextLink": next_link,
        },
    )
    httpx_mock.add_response(
        url=next_link,
        json={
            "value": [
                {
                    "name": "adb2",
                    "location": "eastus",
                    "properties": {"dataBaseType": "Clone", "sourceId": "adb1", "cloneType": "Metadata"},
                }
            ]
        },
    )

    databases = await collect(oracle.autonomous_databases.list_all(resource_group="rg"))

    assert [database.name for database in databases] == ["adb1", "adb2"]
    assert isinstance(databases[1].properties, AutonomousDatabaseCloneProperties)


@pytest.mark.asyncio
async def test_list_autonomous_databases_in_subscription(
    oracle: OracleDatabaseClient, httpx_mock: HTTPXMock
) -> None:
    httpx_mock.add_response(
        url=arm_url(f"{SUBSCRIPTION_PROVIDER}/autonomousDatabases", ORACLE_API_VERSION),
        json={"value": []},
    )

    assert await collect(oracle.autonomous_databases.list_all()) == []


@pytest.mark.asyncio
async def test_generate_wallet(oracle: OracleDatabaseClient, httpx_mock: HTTPXMock) -> None:
    httpx_mock.add_response(
        method="POST",
        url=arm_url(f"{PROVIDER}/autonomousDatabases/adb1/generateWallet", ORACLE_API_VERSION),
        json={"walletFiles": "UEsDBA=="},
    )

    wallet = await oracle.autonomous_databases.generate_wallet(
        GenerateAutonomousDatabaseWalletDetails(generate_type=GenerateType.SINGLE, password="pa55word"),
        resource_group="rg",
        autonomous_database_name="adb1",
    )

    assert wallet.wallet_files == "UEsDBA=="
    request = httpx_mock.get_request()
    assert request is not None
    assert json.loads(request.read()) == {"generateType": "Single", "password": "pa55word"}


@pytest.mark.asyncio
async def test_switchover(oracle: OracleDatabaseClient, httpx_mock: HTTPXMock) -> None:
    httpx_mock.add_response(
        method="POST",
        url=arm_url(f"{PROVIDER}/autonomousDatabases/adb1/switchover", ORACLE_API_VERSION),
        json={"name": "adb1", "location": "eastus", "properties": {"dataBaseType": "Regular", "role": "Standby"}},
    )

    database = await oracle.autonomous_databases.switchover(
        PeerDbDetails(peer_db_id="peer"), resource_group="rg", autonomous_database_name="adb1"
    )

    assert database.properties.role == "Standby"


@pytest.mark.asyncio
async def test_add_vms(oracle: OracleDatabaseClient, httpx_mock: HTTPXMock) -> None:
    httpx_mock.add_response(
        method="POST",
        url=arm_url(f"{PROVIDER}/cloudVmClusters/cluster1/addVms", ORACLE_API_VERSION),
        json={"name": "cluster1", "location": "eastus"},
    )

    cluster = await oracle.cloud_vm_clusters.add_vms(
        AddRemoveDbNode(db_servers=["ocid1.dbserver"]),
        resource_group="rg",
        cloud_vm_cluster_name="cluster1",
    )

    assert cluster.name == "cluster1"
    request = httpx_mock.get_request()
    assert request is not None
    assert json.loads(request.read()) == {"dbServers": ["ocid1.dbserver"]}


@pytest.mark.asyncio
async def test_list_private_ip_addresses(
    oracle: OracleDatabaseClient, httpx_mock: HTTPXMock
) -> None:
    httpx_mock.add_response(
        method="POST",
        url=arm_url(f"{PROVIDER}/cloudVmClusters/cluster1/listPrivateIpAddresses", ORACLE_API_VERSION),
        json=[
            {
                "displayName": "ip1",
                "hostnameLabel": "host",
                "ocid": "ocid1.ip",
                "ipAddress": "10.0.0.5",
                "subnetId": "ocid1.subnet",
            }
        ],
    )

    addresses = await oracle.cloud_vm_clusters.list_private_ip_addresses(
        PrivateIpAddressesFilter(subnet_id="ocid1.subnet", vnic_id="ocid1.vnic"),
        resource_group="rg",
        cloud_vm_cluster_name="cluster1",
    )

    assert [address.ip_address for address in addresses] == ["10.0.0.5"]


@pytest.mark.asyncio
async def test_db_node_action(oracle: OracleDatabaseClient, httpx_mock: HTTPXMock) -> None:
    httpx_mock.add_response(
        method="POST",
        url=arm_url(f"{PROVIDER}/cloudVmClusters/cluster1/dbNodes/node1/action", ORACLE_API_VERSION),
        json={"name": "node1", "properties": {"lifecycleState": "Stopping"}},
    )

    node = await oracle.db_nodes.node_action(
        DbNodeAction(action=DbNodeActionEnum.STOP),
        resource_group="rg",
        cloud_vm_cluster_name="cluster1",
        db_node_name="node1",
    )

    assert node.properties.lifecycle_state == "Stopping"


@pytest.mark.asyncio
async def test_list_gi_versions_by_location(
    oracle: OracleDatabaseClient, httpx_mock: HTTPXMock
) -> None:
    httpx_mock.add_response(
        url=arm_url(f"{SUBSCRIPTION_PROVIDER}/locations/eastus/giVersions", ORACLE_API_VERSION),
        json={"value": [{"name": "19.0.0.0", "properties": {"version": "19.0.0.0"}}]},
    )

    versions = await collect(oracle.gi_versions.list_all(location="eastus"))

    assert versions[0].properties.version == "19.0.0.0"


@pytest.mark.asyncio
async def test_oracle_subscription_activation_links(
    oracle: OracleDatabaseClient, httpx_mock: HTTPXMock
) -> None:
    httpx_mock.add_response(
        method="POST",
        url=arm_url(
            f"{SUBSCRIPTION_PROVIDER}/oracleSubscriptions/default/listActivationLinks",
            ORACLE_API_VERSION,
        ),
        json={"newCloudAccountActivationLink": "https://cloud.oracle.com/activate"},
    )

    links = await oracle.oracle_subscriptions.list_activation_links()

    assert links.new_cloud_account_activation_link == "https://cloud.oracle.com/activate"
    assert links.existing_cloud_account_activation_link is None


@pytest.mark.asyncio
async def test_get_missing_resource_raises(
    oracle: OracleDatabaseClient, httpx_mock: HTTPXMock
) -> None:
    httpx_mock.add_response(
        status_code=404,
        json={"error": {"code": "ResourceNotFound", "message": "The Resource was not found."}},
    )

    with pytest.raises(ArmApiError) as exc_info:
        await oracle.db_servers.get(
            resource_group="rg", cloud_exadata_infrastructure_name="infra", db_server_name="s1"
        )

    assert exc_info.value.code == "ResourceNotFound"
