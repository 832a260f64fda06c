from typing import Any

from arm_models.clients.operations import ResourceOperations
from arm_models.clients.rest_client import ArmRestClient
from arm_models.config import ORACLE_API_VERSION
from arm_models.oracle.models import (
    ActivationLinks,
    AddRemoveDbNode,
    AutonomousDatabase,
    AutonomousDatabaseBackup,
    AutonomousDatabaseBackupListResult,
    AutonomousDatabaseCharacterSet,
    AutonomousDatabaseCharacterSetListResult,
    AutonomousDatabaseListResult,
    AutonomousDatabaseNationalCharacterSet,
    AutonomousDatabaseNationalCharacterSetListResult,
    AutonomousDatabaseWalletFile,
    AutonomousDbVersion,
    AutonomousDbVersionListResult,
    CloudAccountDetails,
    CloudExadataInfrastructure,
    CloudExadataInfrastructureListResult,
    CloudVmCluster,
    CloudVmClusterListResult,
    DbNode,
    DbNodeAction,
    DbNodeListResult,
    DbServer,
    DbServerListResult,
    DbSystemShape,
    DbSystemShapeListResult,
    DnsPrivateView,
    DnsPrivateViewListResult,
    DnsPrivateZone,
    DnsPrivateZoneListResult,
    GenerateAutonomousDatabaseWalletDetails,
    GiVersion,
    GiVersionListResult,
    Operation,
    OperationListResult,
    OracleSubscription,
    OracleSubscriptionListResult,
    PeerDbDetails,
    PrivateIpAddressesFilter,
    PrivateIpAddressProperties,
    RestoreAutonomousDatabaseDetails,
    SaasSubscriptionDetails,
    SystemVersion,
    SystemVersionListResult,
    VirtualNetworkAddress,
    VirtualNetworkAddressListResult,
)

PROVIDER = "/subscriptions/{subscription_id}/resourceGroups/{resource_group}/providers/Oracle.Database"
SUBSCRIPTION_PROVIDER = "/subscriptions/{subscription_id}/providers/Oracle.Database"
LOCATION = SUBSCRIPTION_PROVIDER + "/locations/{location}"
AUTONOMOUS_DATABASE = PROVIDER + "/autonomousDatabases/{autonomous_database_name}"
EXADATA_INFRASTRUCTURE = (
    PROVIDER + "/cloudExadataInfrastructures/{cloud_exadata_infrastructure_name}"
)
VM_CLUSTER = PROVIDER + "/cloudVmClusters/{cloud_vm_cluster_name}"


class AutonomousDatabaseOperations(
    ResourceOperations[AutonomousDatabase, AutonomousDatabaseListResult]
):
    resource_path = AUTONOMOUS_DATABASE
    subscription_collection_path = SUBSCRIPTION_PROVIDER + "/autonomousDatabases"
    model = AutonomousDatabase
    list_model = AutonomousDatabaseListResult

    async def generate_wallet(
        self, body: GenerateAutonomousDatabaseWalletDetails, **segments: Any
    ) -> AutonomousDatabaseWalletFile:
        return await self.action(
            "generateWallet", body, AutonomousDatabaseWalletFile, **segments
        )

    async def restore(
        self, body: RestoreAutonomousDatabaseDetails, **segments: Any
    ) -> AutonomousDatabase:
        return await self.action("restore", body, AutonomousDatabase, **segments)

    async def failover(self, body: PeerDbDetails, **segments: Any) -> AutonomousDatabase:
        return await self.action("failover", body, AutonomousDatabase, **segments)

    async def switchover(self, body: PeerDbDetails, **segments: Any) -> AutonomousDatabase:
        return await self.action("switchover", body, AutonomousDatabase, **segments)


class AutonomousDatabaseBackupOperations(
    ResourceOperations[AutonomousDatabaseBackup, AutonomousDatabaseBackupListResult]
):
    resource_path = AUTONOMOUS_DATABASE + "/autonomousDatabaseBackups/{backup_name}"
    model = AutonomousDatabaseBackup
    list_model = AutonomousDatabaseBackupListResult


class AutonomousDatabaseCharacterSetOperations(
    ResourceOperations[AutonomousDatabaseCharacterSet, AutonomousDatabaseCharacterSetListResult]
):
    resource_path = LOCATION + "/autonomousDatabaseCharacterSets/{character_set_name}"
    model = AutonomousDatabaseCharacterSet
    list_model = AutonomousDatabaseCharacterSetListResult


class AutonomousDatabaseNationalCharacterSetOperations(
    ResourceOperations[
        AutonomousDatabaseNationalCharacterSet,
        AutonomousDatabaseNationalCharacterSetListResult,
    ]
):
    resource_path = (
        LOCATION + "/autonomousDatabaseNationalCharacterSets/{national_character_set_name}"
    )
    model = AutonomousDatabaseNationalCharacterSet
    list_model = AutonomousDatabaseNationalCharacterSetListResult


class AutonomousDbVersionOperations(
    ResourceOperations[AutonomousDbVersion, AutonomousDbVersionListResult]
):
    resource_path = LOCATION + "/autonomousDbVersions/{version}"
    model = AutonomousDbVersion
    list_model = AutonomousDbVersionListResult


class CloudExadataInfrastructureOperations(
    ResourceOperations[CloudExadataInfrastructure, CloudExadataInfrastructureListResult]
):
    resource_path = EXADATA_INFRASTRUCTURE
    subscription_collection_path = SUBSCRIPTION_PROVIDER + "/cloudExadataInfrastructures"
    model = CloudExadataInfrastructure
    list_model = CloudExadataInfrastructureListResult

    async def add_storage_capacity(self, **segments: Any) -> CloudExadataInfrastructure:
        return await self.action(
            "addStorageCapacity", None, CloudExadataInfrastructure, **segments
        )


class DbServerOperations(ResourceOperations[DbServer, DbServerListResult]):
    resource_path = EXADATA_INFRASTRUCTURE + "/dbServers/{db_server_name}"
    model = DbServer
    list_model = DbServerListResult


class CloudVmClusterOperations(ResourceOperations[CloudVmCluster, CloudVmClusterListResult]):
    resource_path = VM_CLUSTER
    subscription_collection_path = SUBSCRIPTION_PROVIDER + "/cloudVmClusters"
    model = CloudVmCluster
    list_model = CloudVmClusterListResult

    async def add_vms(self, body: AddRemoveDbNode, **segments: Any) -> CloudVmCluster:
        return await self.action("addVms", body, CloudVmCluster, **segments)

    async def remove_vms(self, body: AddRemoveDbNode, **segments: Any) -> CloudVmCluster:
        return await self.action("removeVms", body, CloudVmCluster, **segments)

    async def list_private_ip_addresses(
        self, body: PrivateIpAddressesFilter, **segments: Any
    ) -> list[PrivateIpAddressProperties]:
        return await self.action(
            "listPrivateIpAddresses",
            body,
            list[PrivateIpAddressProperties],
            **segments,
        ) or []


class DbNodeOperations(ResourceOperations[DbNode, DbNodeListResult]):
    resource_path = VM_CLUSTER + "/dbNodes/{db_node_name}"
    model = DbNode
    list_model = DbNodeListResult

    async def node_action(self, body: DbNodeAction, **segments: Any) -> DbNode:
        """Start, stop, soft-reset or reset a node of the VM cluster."""
        return await self.action("action", body, DbNode, **segments)


class VirtualNetworkAddressOperations(
    ResourceOperations[VirtualNetworkAddress, VirtualNetworkAddressListResult]
):
    resource_path = VM_CLUSTER + "/virtualNetworkAddresses/{virtual_network_address_name}"
    model = VirtualNetworkAddress
    list_model = VirtualNetworkAddressListResult


class DbSystemShapeOperations(ResourceOperations[DbSystemShape, DbSystemShapeListResult]):
    resource_path = LOCATION + "/dbSystemShapes/{db_system_shape_name}"
    model = DbSystemShape
    list_model = DbSystemShapeListResult


class DnsPrivateViewOperations(ResourceOperations[DnsPrivateView, DnsPrivateViewListResult]):
    resource_path = LOCATION + "/dnsPrivateViews/{dns_private_view_ocid}"
    model = DnsPrivateView
    list_model = DnsPrivateViewListResult


class DnsPrivateZoneOperations(ResourceOperations[DnsPrivateZone, DnsPrivateZoneListResult]):
    resource_path = LOCATION + "/dnsPrivateZones/{dns_private_zone_name}"
    model = DnsPrivateZone
    list_model = DnsPrivateZoneListResult


class GiVersionOperations(ResourceOperations[GiVersion, GiVersionListResult]):
    resource_path = LOCATION + "/giVersions/{gi_version_name}"
    model = GiVersion
    list_model = GiVersionListResult


class SystemVersionOperations(ResourceOperations[SystemVersion, SystemVersionListResult]):
    resource_path = LOCATION + "/systemVersions/{system_version_name}"
    model = SystemVersion
    list_model = SystemVersionListResult


class OracleSubscriptionOperations(
    ResourceOperations[OracleSubscription, OracleSubscriptionListResult]
):
    # one subscription-scoped singleton named "default"
    resource_path = SUBSCRIPTION_PROVIDER + "/oracleSubscriptions/default"
    model = OracleSubscription
    list_model = OracleSubscriptionListResult

    async def list_activation_links(self) -> ActivationLinks:
        return await self.action("listActivationLinks", None, ActivationLinks)

    async def list_cloud_account_details(self) -> CloudAccountDetails:
        return await self.action("listCloudAccountDetails", None, CloudAccountDetails)

    async def list_saas_subscription_details(self) -> SaasSubscriptionDetails:
        return await self.action(
            "listSaasSubscriptionDetails", None, SaasSubscriptionDetails
        )


class OperationOperations(ResourceOperations[Operation, OperationListResult]):
    resource_path = "/providers/Oracle.Database/operations/{name}"
    collection_path = "/providers/Oracle.Database/operations"
    model = Operation
    list_model = OperationListResult


class OracleDatabaseClient:
    """Operation groups of the Oracle.Database resource provider for one subscription."""

    def __init__(
        self,
        client: ArmRestClient,
        subscription_id: str,
        api_version: str = ORACLE_API_VERSION,
    ) -> None:
        self.client = client
        args = (client, subscription_id, api_version)
        self.autonomous_databases = AutonomousDatabaseOperations(*args)
        self.autonomous_database_backups = AutonomousDatabaseBackupOperations(*args)
        self.autonomous_database_character_sets = AutonomousDatabaseCharacterSetOperations(*args)
        self.autonomous_database_national_character_sets = (
            AutonomousDatabaseNationalCharacterSetOperations(*args)
        )
        self.autonomous_database_versions = AutonomousDbVersionOperations(*args)
        self.cloud_exadata_infrastructures = CloudExadataInfrastructureOperations(*args)
        self.db_servers = DbServerOperations(*args)
        self.cloud_vm_clusters = CloudVmClusterOperations(*args)
        self.db_nodes = DbNodeOperations(*args)
        self.virtual_network_addresses = VirtualNetworkAddressOperations(*args)
        self.db_system_shapes = DbSystemShapeOperations(*args)
        self.dns_private_views = DnsPrivateViewOperations(*args)
        self.dns_private_zones = DnsPrivateZoneOperations(*args)
        self.gi_versions = GiVersionOperations(*args)
        self.system_versions = SystemVersionOperations(*args)
        self.oracle_subscriptions = OracleSubscriptionOperations(*args)
        self.operations = OperationOperations(*args)

    async def close(self) -> None:
        await self.client.close()

    async def __aenter__(self) -> "OracleDatabaseClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()
