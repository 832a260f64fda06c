from datetime import datetime

from pydantic import Field

from arm_models.core.base import ArmModel, DefaultList, ListResult
from arm_models.oracle.enums import (
    AzureResourceManagerResourceProvisioningState,
    AzureResourceProvisioningState,
    CloudExadataInfrastructureLifecycleState,
    CloudVmClusterLifecycleState,
    DbNodeActionEnum,
    DbNodeMaintenanceType,
    DbNodeProvisioningState,
    DbServerPatchingStatus,
    DbServerProvisioningState,
    DiskRedundancy,
    IormLifecycleState,
    LicenseModel,
    Objective,
)
from arm_models.oracle.models.common import (
    CustomerContact,
    EstimatedPatchingTime,
    MaintenanceWindow,
    ProxyResource,
    TrackedResource,
)


class CloudExadataInfrastructureProperties(ArmModel):
    ocid: str | None = None
    compute_count: int | None = None
    storage_count: int | None = None
    total_storage_size_in_gbs: int | None = None
    available_storage_size_in_gbs: int | None = None
    time_created: str | None = None
    lifecycle_details: str | None = None
    maintenance_window: MaintenanceWindow | None = None
    estimated_patching_time: EstimatedPatchingTime | None = None
    customer_contacts: DefaultList[CustomerContact] = Field(default_factory=list)
    provisioning_state: AzureResourceProvisioningState | None = None
    lifecycle_state: CloudExadataInfrastructureLifecycleState | None = None
    shape: str
    oci_url: str | None = None
    cpu_count: int | None = None
    max_cpu_count: int | None = None
    memory_size_in_gbs: int | None = None
    max_memory_in_gbs: int | None = None
    db_node_storage_size_in_gbs: int | None = None
    max_db_node_storage_size_in_gbs: int | None = None
    data_storage_size_in_tbs: float | None = None
    max_data_storage_in_tbs: float | None = None
    db_server_version: str | None = None
    storage_server_version: str | None = None
    activated_storage_count: int | None = None
    additional_storage_count: int | None = None
    display_name: str
    last_maintenance_run_id: str | None = None
    next_maintenance_run_id: str | None = None
    monthly_db_server_version: str | None = None
    monthly_storage_server_version: str | None = None


class CloudExadataInfrastructure(TrackedResource):
    properties: CloudExadataInfrastructureProperties | None = None
    zones: list[str]


class CloudExadataInfrastructureListResult(ListResult):
    value: list[CloudExadataInfrastructure]
    next_link: str | None = None


class CloudExadataInfrastructureUpdateProperties(ArmModel):
    compute_count: int | None = None
    storage_count: int | None = None
    maintenance_window: MaintenanceWindow | None = None
    customer_contacts: DefaultList[CustomerContact] = Field(default_factory=list)
    display_name: str | None = None


class CloudExadataInfrastructureUpdate(ArmModel):
    zones: DefaultList[str] = Field(default_factory=list)
    tags: dict[str, str] | None = None
    properties: CloudExadataInfrastructureUpdateProperties | None = None


class DataCollectionOptions(ArmModel):
    is_diagnostics_events_enabled: bool | None = None
    is_health_monitoring_enabled: bool | None = None
    is_incident_logs_enabled: bool | None = None


class DbIormConfig(ArmModel):
    db_name: str | None = None
    flash_cache_limit: str | None = None
    share: int | None = None


class ExadataIormConfig(ArmModel):
    db_plans: DefaultList[DbIormConfig] = Field(default_factory=list)
    lifecycle_details: str | None = None
    lifecycle_state: IormLifecycleState | None = None
    objective: Objective | None = None


class PortRange(ArmModel):
    min: int
    max: int


class NsgCidr(ArmModel):
    source: str
    destination_port_range: PortRange | None = None


class CloudVmClusterProperties(ArmModel):
    ocid: str | None = None
    listener_port: int | None = None
    node_count: int | None = None
    storage_size_in_gbs: int | None = None
    data_storage_size_in_tbs: float | None = None
    db_node_storage_size_in_gbs: int | None = None
    memory_size_in_gbs: int | None = None
    time_created: datetime | None = None
    lifecycle_details: str | None = None
    time_zone: str | None = None
    zone_id: str | None = None
    hostname: str
    domain: str | None = None
    cpu_core_count: int
    ocpu_count: float | None = None
    cluster_name: str | None = None
    data_storage_percentage: int | None = None
    is_local_backup_enabled: bool | None = None
    cloud_exadata_infrastructure_id: str
    is_sparse_diskgroup_enabled: bool | None = None
    system_version: str | None = None
    ssh_public_keys: list[str]
    license_model: LicenseModel | None = None
    disk_redundancy: DiskRedundancy | None = None
    scan_ip_ids: DefaultList[str] = Field(default_factory=list)
    vip_ids: DefaultList[str] = Field(default_factory=list)
    scan_dns_name: str | None = None
    scan_listener_port_tcp: int | None = None
    scan_listener_port_tcp_ssl: int | None = None
    scan_dns_record_id: str | None = None
    shape: str | None = None
    provisioning_state: AzureResourceProvisioningState | None = None
    lifecycle_state: CloudVmClusterLifecycleState | None = None
    vnet_id: str
    gi_version: str
    oci_url: str | None = None
    nsg_url: str | None = None
    subnet_id: str
    backup_subnet_cidr: str | None = None
    nsg_cidrs: DefaultList[NsgCidr] = Field(default_factory=list)
    data_collection_options: DataCollectionOptions | None = None
    display_name: str
    compute_nodes: DefaultList[str] = Field(default_factory=list)
    iorm_config_cache: ExadataIormConfig | None = None
    last_update_history_entry_id: str | None = None
    db_servers: DefaultList[str] = Field(default_factory=list)
    compartment_id: str | None = None
    subnet_ocid: str | None = None


class CloudVmCluster(TrackedResource):
    properties: CloudVmClusterProperties | None = None


class CloudVmClusterListResult(ListResult):
    value: list[CloudVmCluster]
    next_link: str | None = None


class CloudVmClusterUpdateProperties(ArmModel):
    storage_size_in_gbs: int | None = None
    data_storage_size_in_tbs: float | None = None
    db_node_storage_size_in_gbs: int | None = None
    memory_size_in_gbs: int | None = None
    cpu_core_count: int | None = None
    ocpu_count: float | None = None
    ssh_public_keys: DefaultList[str] = Field(default_factory=list)
    license_model: LicenseModel | None = None
    data_collection_options: DataCollectionOptions | None = None
    display_name: str | None = None
    compute_nodes: DefaultList[str] = Field(default_factory=list)


class CloudVmClusterUpdate(ArmModel):
    tags: dict[str, str] | None = None
    properties: CloudVmClusterUpdateProperties | None = None


class AddRemoveDbNode(ArmModel):
    db_servers: list[str]


class PrivateIpAddressesFilter(ArmModel):
    subnet_id: str
    vnic_id: str


class PrivateIpAddressProperties(ArmModel):
    display_name: str
    hostname_label: str
    ocid: str
    ip_address: str
    subnet_id: str


class DbServerPatchingDetails(ArmModel):
    estimated_patch_duration: int | None = None
    patching_status: DbServerPatchingStatus | None = None
    time_patching_ended: datetime | None = None
    time_patching_started: datetime | None = None


class DbServerProperties(ArmModel):
    ocid: str | None = None
    display_name: str | None = None
    compartment_id: str | None = None
    exadata_infrastructure_id: str | None = None
    cpu_core_count: int | None = None
    db_server_patching_details: DbServerPatchingDetails | None = None
    max_memory_in_gbs: int | None = None
    db_node_storage_size_in_gbs: int | None = None
    vm_cluster_ids: DefaultList[str] = Field(default_factory=list)
    db_node_ids: DefaultList[str] = Field(default_factory=list)
    lifecycle_details: str | None = None
    lifecycle_state: DbServerProvisioningState | None = None
    max_cpu_count: int | None = None
    autonomous_vm_cluster_ids: DefaultList[str] = Field(default_factory=list)
    autonomous_virtual_machine_ids: DefaultList[str] = Field(default_factory=list)
    max_db_node_storage_in_gbs: int | None = None
    memory_size_in_gbs: int | None = None
    shape: str | None = None
    time_created: datetime | None = None
    provisioning_state: AzureResourceManagerResourceProvisioningState | None = None


class DbServer(ProxyResource):
    properties: DbServerProperties | None = None


class DbServerListResult(ListResult):
    value: list[DbServer]
    next_link: str | None = None


class DbNodeProperties(ArmModel):
    ocid: str | None = None
    additional_details: str | None = None
    backup_ip_id: str | None = None
    backup_vnic2_id: str | None = Field(None, alias="backupVnic2Id")
    backup_vnic_id: str | None = None
    cpu_core_count: int | None = None
    db_node_storage_size_in_gbs: int | None = None
    db_server_id: str | None = None
    db_system_id: str | None = None
    fault_domain: str | None = None
    host_ip_id: str | None = None
    hostname: str | None = None
    lifecycle_state: DbNodeProvisioningState | None = None
    lifecycle_details: str | None = None
    maintenance_type: DbNodeMaintenanceType | None = None
    memory_size_in_gbs: int | None = None
    software_storage_size_in_gb: int | None = None
    time_created: datetime | None = None
    time_maintenance_window_end: datetime | None = None
    time_maintenance_window_start: datetime | None = None
    vnic2_id: str | None = Field(None, alias="vnic2Id")
    vnic_id: str | None = None
    provisioning_state: AzureResourceManagerResourceProvisioningState | None = None


class DbNode(ProxyResource):
    properties: DbNodeProperties | None = None


class DbNodeListResult(ListResult):
    value: list[DbNode]
    next_link: str | None = None


class DbNodeAction(ArmModel):
    action: DbNodeActionEnum


class DbSystemShapeProperties(ArmModel):
    shape_family: str | None = None
    available_core_count: int | None = None
    minimum_core_count: int | None = None
    runtime_minimum_core_count: int | None = None
    core_count_increment: int | None = None
    min_storage_count: int | None = None
    max_storage_count: int | None = None
    available_data_storage_per_server_in_tbs: float | None = None
    available_memory_per_node_in_gbs: int | None = None
    available_db_node_per_node_in_gbs: int | None = None
    min_core_count_per_node: int | None = None
    available_memory_in_gbs: int | None = None
    min_memory_per_node_in_gbs: int | None = None
    available_db_node_storage_in_gbs: int | None = None
    min_db_node_storage_per_node_in_gbs: int | None = None
    available_data_storage_in_tbs: int | None = None
    min_data_storage_in_tbs: int | None = None
    minimum_node_count: int | None = None
    maximum_node_count: int | None = None
    available_core_count_per_node: int | None = None


class DbSystemShape(ProxyResource):
    properties: DbSystemShapeProperties | None = None


class DbSystemShapeListResult(ListResult):
    value: list[DbSystemShape]
    next_link: str | None = None


class GiVersionProperties(ArmModel):
    version: str | None = None


class GiVersion(ProxyResource):
    properties: GiVersionProperties | None = None


class GiVersionListResult(ListResult):
    value: list[GiVersion]
    next_link: str | None = None


class SystemVersionProperties(ArmModel):
    system_version: str | None = None


class SystemVersion(ProxyResource):
    properties: SystemVersionProperties | None = None


class SystemVersionListResult(ListResult):
    value: list[SystemVersion]
    next_link: str | None = None


class SystemVersionsFilter(ArmModel):
    gi_version: str
    shape: str
    is_latest_version: bool | None = None
