from datetime import datetime

from pydantic import Field

from arm_models.core.base import ArmModel, DefaultList, ListResult, tagged_union
from arm_models.oracle.enums import (
    AutonomousDatabaseBackupLifecycleState,
    AutonomousDatabaseBackupType,
    AutonomousDatabaseLifecycleState,
    AutonomousMaintenanceScheduleType,
    AzureResourceProvisioningState,
    CloneType,
    ComputeModel,
    ConsumerGroup,
    DataBaseType,
    DataSafeStatusType,
    DatabaseEditionType,
    DisasterRecoveryType,
    GenerateType,
    HostFormatType,
    LicenseModel,
    OpenModeType,
    OperationsInsightsStatusType,
    PermissionLevelType,
    ProtocolType,
    RefreshableModelType,
    RefreshableStatusType,
    RepeatCadenceType,
    RoleType,
    SessionModeType,
    SourceType,
    SyntaxFormatType,
    TlsAuthenticationType,
    WorkloadType,
)
from arm_models.oracle.models.common import (
    CustomerContact,
    DayOfWeek,
    DayOfWeekUpdate,
    ProxyResource,
    TrackedResource,
)


class AllConnectionStringType(ArmModel):
    high: str | None = None
    low: str | None = None
    medium: str | None = None


class ProfileType(ArmModel):
    consumer_group: ConsumerGroup | None = None
    display_name: str
    host_format: HostFormatType
    is_regional: bool | None = None
    protocol: ProtocolType
    session_mode: SessionModeType
    syntax_format: SyntaxFormatType
    tls_authentication: TlsAuthenticationType | None = None
    value: str


class ConnectionStringType(ArmModel):
    all_connection_strings: AllConnectionStringType | None = None
    dedicated: str | None = None
    high: str | None = None
    low: str | None = None
    medium: str | None = None
    profiles: DefaultList[ProfileType] = Field(default_factory=list)


class ConnectionUrlType(ArmModel):
    apex_url: str | None = None
    database_transforms_url: str | None = None
    graph_studio_url: str | None = None
    machine_learning_notebook_url: str | None = None
    mongo_db_url: str | None = None
    ords_url: str | None = None
    sql_dev_web_url: str | None = None


class ApexDetailsType(ArmModel):
    apex_version: str | None = None
    ords_version: str | None = None


class AutonomousDatabaseStandbySummary(ArmModel):
    lag_time_in_seconds: int | None = None
    lifecycle_state: AutonomousDatabaseLifecycleState | None = None
    lifecycle_details: str | None = None
    time_data_guard_role_changed: str | None = None
    time_disaster_recovery_role_changed: str | None = None


class LongTermBackUpScheduleDetails(ArmModel):
    repeat_cadence: RepeatCadenceType | None = None
    time_of_backup: datetime | None = None
    retention_period_in_days: int | None = None
    is_disabled: bool | None = None


class ScheduledOperationsType(ArmModel):
    day_of_week: DayOfWeek
    scheduled_start_time: str | None = None
    scheduled_stop_time: str | None = None


class ScheduledOperationsTypeUpdate(ArmModel):
    day_of_week: DayOfWeekUpdate | None = None
    scheduled_start_time: str | None = None
    scheduled_stop_time: str | None = None


class AutonomousDatabaseBaseProperties(ArmModel):
    """
    Properties shared by every autonomous database flavour.

    `data_base_type` selects the concrete shape: `Regular` decodes to
    AutonomousDatabaseProperties, `Clone` to AutonomousDatabaseCloneProperties.
    Any other tag stays on this class and is encoded back unchanged.
    """

    data_base_type: DataBaseType | None = None
    admin_password: str | None = None
    autonomous_maintenance_schedule_type: AutonomousMaintenanceScheduleType | None = None
    character_set: str | None = None
    compute_count: float | None = None
    compute_model: ComputeModel | None = None
    cpu_core_count: int | None = None
    customer_contacts: DefaultList[CustomerContact] = Field(default_factory=list)
    data_storage_size_in_tbs: int | None = None
    data_storage_size_in_gbs: int | None = None
    db_version: str | None = None
    db_workload: WorkloadType | None = None
    display_name: str | None = None
    is_auto_scaling_enabled: bool | None = None
    is_auto_scaling_for_storage_enabled: bool | None = None
    peer_db_ids: DefaultList[str] = Field(default_factory=list)
    peer_db_id: str | None = None
    is_local_data_guard_enabled: bool | None = None
    is_remote_data_guard_enabled: bool | None = None
    local_disaster_recovery_type: DisasterRecoveryType | None = None
    local_standby_db: AutonomousDatabaseStandbySummary | None = None
    failed_data_recovery_in_seconds: int | None = None
    is_mtls_connection_required: bool | None = None
    is_preview_version_with_service_terms_accepted: bool | None = None
    license_model: LicenseModel | None = None
    ncharacter_set: str | None = None
    lifecycle_details: str | None = None
    provisioning_state: AzureResourceProvisioningState | None = None
    lifecycle_state: AutonomousDatabaseLifecycleState | None = None
    scheduled_operations: ScheduledOperationsType | None = None
    private_endpoint_ip: str | None = None
    private_endpoint_label: str | None = None
    oci_url: str | None = None
    subnet_id: str | None = None
    vnet_id: str | None = None
    time_created: datetime | None = None
    time_maintenance_begin: datetime | None = None
    time_maintenance_end: datetime | None = None
    actual_used_data_storage_size_in_tbs: float | None = None
    allocated_storage_size_in_tbs: float | None = None
    apex_details: ApexDetailsType | None = None
    available_upgrade_versions: DefaultList[str] = Field(default_factory=list)
    connection_strings: ConnectionStringType | None = None
    connection_urls: ConnectionUrlType | None = None
    data_safe_status: DataSafeStatusType | None = None
    database_edition: DatabaseEditionType | None = None
    autonomous_database_id: str | None = None
    in_memory_area_in_gbs: int | None = None
    next_long_term_backup_time_stamp: datetime | None = None
    long_term_backup_schedule: LongTermBackUpScheduleDetails | None = None
    is_preview: bool | None = None
    local_adg_auto_failover_max_data_loss_limit: int | None = None
    memory_per_oracle_compute_unit_in_gbs: int | None = None
    open_mode: OpenModeType | None = None
    operations_insights_status: OperationsInsightsStatusType | None = None
    permission_level: PermissionLevelType | None = None
    private_endpoint: str | None = None
    provisionable_cpus: DefaultList[int] = Field(default_factory=list)
    role: RoleType | None = None
    service_console_url: str | None = None
    sql_web_developer_url: str | None = None
    supported_regions_to_clone_to: DefaultList[str] = Field(default_factory=list)
    time_data_guard_role_changed: str | None = None
    time_deletion_of_free_autonomous_database: str | None = None
    time_local_data_guard_enabled: str | None = None
    time_of_last_failover: str | None = None
    time_of_last_refresh: str | None = None
    time_of_last_refresh_point: str | None = None
    time_of_last_switchover: str | None = None
    time_reclamation_of_free_autonomous_database: str | None = None
    used_data_storage_size_in_gbs: int | None = None
    used_data_storage_size_in_tbs: int | None = None
    ocid: str | None = None
    backup_retention_period_in_days: int | None = None
    whitelisted_ips: DefaultList[str] = Field(default_factory=list)


class AutonomousDatabaseProperties(AutonomousDatabaseBaseProperties):
    data_base_type: DataBaseType = DataBaseType.REGULAR


class AutonomousDatabaseCloneProperties(AutonomousDatabaseBaseProperties):
    data_base_type: DataBaseType = DataBaseType.CLONE
    source: SourceType | None = None
    source_id: str
    clone_type: CloneType
    is_reconnect_clone_enabled: bool | None = None
    is_refreshable_clone: bool | None = None
    refreshable_model: RefreshableModelType | None = None
    refreshable_status: RefreshableStatusType | None = None
    time_until_reconnect_clone_enabled: str | None = None


AutonomousDatabaseBasePropertiesUnion = tagged_union(
    "data_base_type",
    "dataBaseType",
    {
        DataBaseType.REGULAR.value: AutonomousDatabaseProperties,
        DataBaseType.CLONE.value: AutonomousDatabaseCloneProperties,
    },
    fallback=AutonomousDatabaseBaseProperties,
)


class AutonomousDatabase(TrackedResource):
    properties: AutonomousDatabaseBasePropertiesUnion | None = None


class AutonomousDatabaseListResult(ListResult):
    value: list[AutonomousDatabase]
    next_link: str | None = None


class AutonomousDatabaseUpdateProperties(ArmModel):
    admin_password: str | None = None
    autonomous_maintenance_schedule_type: AutonomousMaintenanceScheduleType | None = None
    compute_count: float | None = None
    cpu_core_count: int | None = None
    customer_contacts: DefaultList[CustomerContact] = Field(default_factory=list)
    data_storage_size_in_tbs: int | None = None
    data_storage_size_in_gbs: int | None = None
    display_name: str | None = None
    is_auto_scaling_enabled: bool | None = None
    is_auto_scaling_for_storage_enabled: bool | None = None
    peer_db_id: str | None = None
    is_local_data_guard_enabled: bool | None = None
    is_mtls_connection_required: bool | None = None
    license_model: LicenseModel | None = None
    scheduled_operations: ScheduledOperationsTypeUpdate | None = None
    database_edition: DatabaseEditionType | None = None
    long_term_backup_schedule: LongTermBackUpScheduleDetails | None = None
    local_adg_auto_failover_max_data_loss_limit: int | None = None
    open_mode: OpenModeType | None = None
    permission_level: PermissionLevelType | None = None
    role: RoleType | None = None
    backup_retention_period_in_days: int | None = None
    whitelisted_ips: DefaultList[str] = Field(default_factory=list)


class AutonomousDatabaseUpdate(ArmModel):
    tags: dict[str, str] | None = None
    properties: AutonomousDatabaseUpdateProperties | None = None


class AutonomousDatabaseWalletFile(ArmModel):
    wallet_files: str


class GenerateAutonomousDatabaseWalletDetails(ArmModel):
    generate_type: GenerateType | None = None
    is_regional: bool | None = None
    password: str


class RestoreAutonomousDatabaseDetails(ArmModel):
    timestamp: datetime


class PeerDbDetails(ArmModel):
    peer_db_id: str | None = None


class AutonomousDatabaseBackupProperties(ArmModel):
    autonomous_database_ocid: str | None = None
    database_size_in_tbs: float | None = None
    db_version: str | None = None
    display_name: str | None = None
    ocid: str | None = None
    is_automatic: bool | None = None
    is_restorable: bool | None = None
    lifecycle_details: str | None = None
    lifecycle_state: AutonomousDatabaseBackupLifecycleState | None = None
    retention_period_in_days: int | None = None
    size_in_tbs: float | None = None
    time_available_til: datetime | None = None
    time_started: str | None = None
    time_ended: str | None = None
    backup_type: AutonomousDatabaseBackupType | None = None
    provisioning_state: AzureResourceProvisioningState | None = None


class AutonomousDatabaseBackup(ProxyResource):
    properties: AutonomousDatabaseBackupProperties | None = None


class AutonomousDatabaseBackupListResult(ListResult):
    value: list[AutonomousDatabaseBackup]
    next_link: str | None = None


class AutonomousDatabaseBackupUpdateProperties(ArmModel):
    retention_period_in_days: int | None = None


class AutonomousDatabaseBackupUpdate(ArmModel):
    properties: AutonomousDatabaseBackupUpdateProperties | None = None


class AutonomousDatabaseCharacterSetProperties(ArmModel):
    character_set: str | None = None


class AutonomousDatabaseCharacterSet(ProxyResource):
    properties: AutonomousDatabaseCharacterSetProperties | None = None


class AutonomousDatabaseCharacterSetListResult(ListResult):
    value: list[AutonomousDatabaseCharacterSet]
    next_link: str | None = None


class AutonomousDatabaseNationalCharacterSetProperties(ArmModel):
    character_set: str | None = None


class AutonomousDatabaseNationalCharacterSet(ProxyResource):
    properties: AutonomousDatabaseNationalCharacterSetProperties | None = None


class AutonomousDatabaseNationalCharacterSetListResult(ListResult):
    value: list[AutonomousDatabaseNationalCharacterSet]
    next_link: str | None = None


class AutonomousDbVersionProperties(ArmModel):
    version: str | None = None
    db_workload: WorkloadType | None = None
    is_default_for_free: bool | None = None
    is_default_for_paid: bool | None = None
    is_free_tier_enabled: bool | None = None
    is_paid_enabled: bool | None = None


class AutonomousDbVersion(ProxyResource):
    properties: AutonomousDbVersionProperties | None = None


class AutonomousDbVersionListResult(ListResult):
    value: list[AutonomousDbVersion]
    next_link: str | None = None
