from datetime import datetime

from pydantic import Field

from arm_models.core.base import ArmModel, DefaultList, ListResult, tagged_union
from arm_models.cosmosdb.enums import (
    BackupPolicyType,
    BackupStorageRedundancy,
    ConnectorOffer,
    CreateMode,
    DatabaseAccountKind,
    DatabaseAccountOfferType,
    DefaultConsistencyLevel,
    KeyKind,
    NetworkAclBypass,
    PublicNetworkAccess,
    RestoreMode,
    ServerVersion,
)
from arm_models.cosmosdb.models.common import (
    ArmProxyResource,
    ArmResourceProperties,
    Capability,
    ManagedServiceIdentity,
    SystemData,
    Tags,
)
from arm_models.cosmosdb.models.services import PrivateEndpointConnection


class ApiProperties(ArmModel):
    server_version: ServerVersion | None = None


class ConsistencyPolicy(ArmModel):
    default_consistency_level: DefaultConsistencyLevel
    max_staleness_prefix: int | None = None
    max_interval_in_seconds: int | None = None


class CorsPolicy(ArmModel):
    allowed_origins: str
    allowed_methods: str | None = None
    allowed_headers: str | None = None
    exposed_headers: str | None = None
    max_age_in_seconds: int | None = None


class Location(ArmModel):
    id: str | None = None
    location_name: str | None = None
    document_endpoint: str | None = None
    provisioning_state: str | None = None
    failover_priority: int | None = None
    is_zone_redundant: bool | None = None


class FailoverPolicy(ArmModel):
    id: str | None = None
    location_name: str | None = None
    failover_priority: int | None = None


class FailoverPolicies(ArmModel):
    failover_policies: list[FailoverPolicy]


class IpAddressOrRange(ArmModel):
    ip_address_or_range: str | None = None


IpRules = list[IpAddressOrRange]


class VirtualNetworkRule(ArmModel):
    id: str | None = None
    ignore_missing_v_net_service_endpoint: bool | None = Field(
        None, alias="ignoreMissingVNetServiceEndpoint"
    )


class DatabaseRestoreResource(ArmModel):
    database_name: str | None = None
    collection_names: DefaultList[str] = Field(default_factory=list)


class RestoreParameters(ArmModel):
    restore_mode: RestoreMode | None = None
    restore_source: str | None = None
    restore_timestamp_in_utc: datetime | None = None
    databases_to_restore: DefaultList[DatabaseRestoreResource] = Field(default_factory=list)


class PeriodicModeProperties(ArmModel):
    backup_interval_in_minutes: int | None = None
    backup_retention_interval_in_hours: int | None = None
    backup_storage_redundancy: BackupStorageRedundancy | None = None


class BackupPolicy(ArmModel):
    """
    Account backup policy, discriminated by `type`.

    Periodic and Continuous policies decode to their own classes; a type this
    package does not know about decodes here and keeps its tag.
    """

    type: BackupPolicyType


class PeriodicModeBackupPolicy(BackupPolicy):
    type: BackupPolicyType = BackupPolicyType.PERIODIC
    periodic_mode_properties: PeriodicModeProperties | None = None


class ContinuousModeBackupPolicy(BackupPolicy):
    type: BackupPolicyType = BackupPolicyType.CONTINUOUS


BackupPolicyUnion = tagged_union(
    "type",
    "type",
    {
        BackupPolicyType.PERIODIC.value: PeriodicModeBackupPolicy,
        BackupPolicyType.CONTINUOUS.value: ContinuousModeBackupPolicy,
    },
    fallback=BackupPolicy,
)


class ContinuousBackupInformation(ArmModel):
    latest_restorable_timestamp: str | None = None


class BackupInformation(ArmModel):
    continuous_backup_information: ContinuousBackupInformation | None = None


class ContinuousBackupRestoreLocation(ArmModel):
    location: str | None = None


class DatabaseAccountCreateUpdateProperties(ArmModel):
    consistency_policy: ConsistencyPolicy | None = None
    locations: list[Location]
    database_account_offer_type: DatabaseAccountOfferType
    ip_rules: IpRules | None = None
    is_virtual_network_filter_enabled: bool | None = None
    enable_automatic_failover: bool | None = None
    capabilities: DefaultList[Capability] = Field(default_factory=list)
    virtual_network_rules: DefaultList[VirtualNetworkRule] = Field(default_factory=list)
    enable_multiple_write_locations: bool | None = None
    enable_cassandra_connector: bool | None = None
    connector_offer: ConnectorOffer | None = None
    disable_key_based_metadata_write_access: bool | None = None
    key_vault_key_uri: str | None = None
    default_identity: str | None = None
    public_network_access: PublicNetworkAccess | None = None
    enable_free_tier: bool | None = None
    api_properties: ApiProperties | None = None
    enable_analytical_storage: bool | None = None
    create_mode: CreateMode = CreateMode.DEFAULT
    backup_policy: BackupPolicyUnion | None = None
    cors: DefaultList[CorsPolicy] = Field(default_factory=list)
    network_acl_bypass: NetworkAclBypass | None = None
    network_acl_bypass_resource_ids: DefaultList[str] = Field(default_factory=list)


class DefaultRequestDatabaseAccountCreateUpdateProperties(DatabaseAccountCreateUpdateProperties):
    create_mode: CreateMode = CreateMode.DEFAULT


class RestoreRequestDatabaseAccountCreateUpdateProperties(DatabaseAccountCreateUpdateProperties):
    create_mode: CreateMode = CreateMode.RESTORE
    restore_parameters: RestoreParameters | None = None


DatabaseAccountCreateUpdatePropertiesUnion = tagged_union(
    "create_mode",
    "createMode",
    {
        CreateMode.DEFAULT.value: DefaultRequestDatabaseAccountCreateUpdateProperties,
        CreateMode.RESTORE.value: RestoreRequestDatabaseAccountCreateUpdateProperties,
    },
    fallback=DatabaseAccountCreateUpdateProperties,
)


class DatabaseAccountCreateUpdateParameters(ArmResourceProperties):
    kind: DatabaseAccountKind | None = None
    properties: DatabaseAccountCreateUpdatePropertiesUnion


class DatabaseAccountGetProperties(ArmModel):
    provisioning_state: str | None = None
    document_endpoint: str | None = None
    database_account_offer_type: DatabaseAccountOfferType | None = None
    ip_rules: IpRules | None = None
    is_virtual_network_filter_enabled: bool | None = None
    enable_automatic_failover: bool | None = None
    consistency_policy: ConsistencyPolicy | None = None
    capabilities: DefaultList[Capability] = Field(default_factory=list)
    write_locations: DefaultList[Location] = Field(default_factory=list)
    read_locations: DefaultList[Location] = Field(default_factory=list)
    locations: DefaultList[Location] = Field(default_factory=list)
    failover_policies: DefaultList[FailoverPolicy] = Field(default_factory=list)
    virtual_network_rules: DefaultList[VirtualNetworkRule] = Field(default_factory=list)
    private_endpoint_connections: DefaultList[PrivateEndpointConnection] = Field(default_factory=list)
    enable_multiple_write_locations: bool | None = None
    enable_cassandra_connector: bool | None = None
    connector_offer: ConnectorOffer | None = None
    disable_key_based_metadata_write_access: bool | None = None
    key_vault_key_uri: str | None = None
    default_identity: str | None = None
    public_network_access: PublicNetworkAccess | None = None
    enable_free_tier: bool | None = None
    api_properties: ApiProperties | None = None
    enable_analytical_storage: bool | None = None
    instance_id: str | None = None
    create_mode: CreateMode | None = None
    restore_parameters: RestoreParameters | None = None
    backup_policy: BackupPolicyUnion | None = None
    cors: DefaultList[CorsPolicy] = Field(default_factory=list)
    network_acl_bypass: NetworkAclBypass | None = None
    network_acl_bypass_resource_ids: DefaultList[str] = Field(default_factory=list)


class DatabaseAccountGetResults(ArmResourceProperties):
    kind: DatabaseAccountKind | None = None
    properties: DatabaseAccountGetProperties | None = None
    system_data: SystemData | None = None


class DatabaseAccountsListResult(ListResult):
    value: DefaultList[DatabaseAccountGetResults] = Field(default_factory=list)


class DatabaseAccountUpdateProperties(ArmModel):
    consistency_policy: ConsistencyPolicy | None = None
    locations: DefaultList[Location] = Field(default_factory=list)
    ip_rules: IpRules | None = None
    is_virtual_network_filter_enabled: bool | None = None
    enable_automatic_failover: bool | None = None
    capabilities: DefaultList[Capability] = Field(default_factory=list)
    virtual_network_rules: DefaultList[VirtualNetworkRule] = Field(default_factory=list)
    enable_multiple_write_locations: bool | None = None
    enable_cassandra_connector: bool | None = None
    connector_offer: ConnectorOffer | None = None
    disable_key_based_metadata_write_access: bool | None = None
    key_vault_key_uri: str | None = None
    default_identity: str | None = None
    public_network_access: PublicNetworkAccess | None = None
    enable_free_tier: bool | None = None
    api_properties: ApiProperties | None = None
    enable_analytical_storage: bool | None = None
    backup_policy: BackupPolicyUnion | None = None
    cors: DefaultList[CorsPolicy] = Field(default_factory=list)
    network_acl_bypass: NetworkAclBypass | None = None
    network_acl_bypass_resource_ids: DefaultList[str] = Field(default_factory=list)


class DatabaseAccountUpdateParameters(ArmModel):
    tags: Tags | None = None
    location: str | None = None
    properties: DatabaseAccountUpdateProperties | None = None
    identity: ManagedServiceIdentity | None = None


class DatabaseAccountListReadOnlyKeysResult(ArmModel):
    primary_readonly_master_key: str | None = None
    secondary_readonly_master_key: str | None = None


class DatabaseAccountListKeysResult(DatabaseAccountListReadOnlyKeysResult):
    primary_master_key: str | None = None
    secondary_master_key: str | None = None


class DatabaseAccountConnectionString(ArmModel):
    connection_string: str | None = None
    description: str | None = None


class DatabaseAccountListConnectionStringsResult(ArmModel):
    connection_strings: DefaultList[DatabaseAccountConnectionString] = Field(default_factory=list)


class DatabaseAccountRegenerateKeyParameters(ArmModel):
    key_kind: KeyKind


class RegionForOnlineOffline(ArmModel):
    region: str


class BackupResourceProperties(ArmModel):
    timestamp: datetime | None = None


class BackupResource(ArmProxyResource):
    properties: BackupResourceProperties | None = None


class ListBackups(ListResult):
    value: DefaultList[BackupResource] = Field(default_factory=list)
