from .common import (
    AclString,
    AutonomousDatabaseId,
    CloudExadataInfrastructureId,
    CustomerContact,
    DayOfWeek,
    DayOfWeekUpdate,
    ErrorAdditionalInfo,
    ErrorDetail,
    ErrorResponse,
    EstimatedPatchingTime,
    MaintenanceWindow,
    Month,
    Ocid,
    Operation,
    OperationDisplay,
    OperationListResult,
    Password,
    Plan,
    PlanUpdate,
    ProxyResource,
    Resource,
    RetentionPeriod,
    SubnetId,
    SystemData,
    TrackedResource,
    ValidationError,
    ValidationResult,
    VnetId,
)
from .autonomous_database import (
    AllConnectionStringType,
    ApexDetailsType,
    AutonomousDatabase,
    AutonomousDatabaseBackup,
    AutonomousDatabaseBackupListResult,
    AutonomousDatabaseBackupProperties,
    AutonomousDatabaseBackupUpdate,
    AutonomousDatabaseBackupUpdateProperties,
    AutonomousDatabaseBaseProperties,
    AutonomousDatabaseBasePropertiesUnion,
    AutonomousDatabaseCharacterSet,
    AutonomousDatabaseCharacterSetListResult,
    AutonomousDatabaseCharacterSetProperties,
    AutonomousDatabaseCloneProperties,
    AutonomousDatabaseListResult,
    AutonomousDatabaseNationalCharacterSet,
    AutonomousDatabaseNationalCharacterSetListResult,
    AutonomousDatabaseNationalCharacterSetProperties,
    AutonomousDatabaseProperties,
    AutonomousDatabaseStandbySummary,
    AutonomousDatabaseUpdate,
    AutonomousDatabaseUpdateProperties,
    AutonomousDatabaseWalletFile,
    AutonomousDbVersion,
    AutonomousDbVersionListResult,
    AutonomousDbVersionProperties,
    ConnectionStringType,
    ConnectionUrlType,
    GenerateAutonomousDatabaseWalletDetails,
    LongTermBackUpScheduleDetails,
    PeerDbDetails,
    ProfileType,
    RestoreAutonomousDatabaseDetails,
    ScheduledOperationsType,
    ScheduledOperationsTypeUpdate,
)
from .exadata import (
    AddRemoveDbNode,
    CloudExadataInfrastructure,
    CloudExadataInfrastructureListResult,
    CloudExadataInfrastructureProperties,
    CloudExadataInfrastructureUpdate,
    CloudExadataInfrastructureUpdateProperties,
    CloudVmCluster,
    CloudVmClusterListResult,
    CloudVmClusterProperties,
    CloudVmClusterUpdate,
    CloudVmClusterUpdateProperties,
    DataCollectionOptions,
    DbIormConfig,
    DbNode,
    DbNodeAction,
    DbNodeListResult,
    DbNodeProperties,
    DbServer,
    DbServerListResult,
    DbServerPatchingDetails,
    DbServerProperties,
    DbSystemShape,
    DbSystemShapeListResult,
    DbSystemShapeProperties,
    ExadataIormConfig,
    GiVersion,
    GiVersionListResult,
    GiVersionProperties,
    NsgCidr,
    PortRange,
    PrivateIpAddressProperties,
    PrivateIpAddressesFilter,
    SystemVersion,
    SystemVersionListResult,
    SystemVersionProperties,
    SystemVersionsFilter,
)
from .network import (
    DnsPrivateView,
    DnsPrivateViewListResult,
    DnsPrivateViewProperties,
    DnsPrivateZone,
    DnsPrivateZoneListResult,
    DnsPrivateZoneProperties,
    VirtualNetworkAddress,
    VirtualNetworkAddressListResult,
    VirtualNetworkAddressProperties,
)
from .subscription import (
    ActivationLinks,
    CloudAccountDetails,
    OracleSubscription,
    OracleSubscriptionListResult,
    OracleSubscriptionProperties,
    OracleSubscriptionUpdate,
    OracleSubscriptionUpdateProperties,
    SaasSubscriptionDetails,
)

__all__ = [
    "AclString",
    "ActivationLinks",
    "AddRemoveDbNode",
    "AllConnectionStringType",
    "ApexDetailsType",
    "AutonomousDatabase",
    "AutonomousDatabaseBackup",
    "AutonomousDatabaseBackupListResult",
    "AutonomousDatabaseBackupProperties",
    "AutonomousDatabaseBackupUpdate",
    "AutonomousDatabaseBackupUpdateProperties",
    "AutonomousDatabaseBaseProperties",
    "AutonomousDatabaseBasePropertiesUnion",
    "AutonomousDatabaseCharacterSet",
    "AutonomousDatabaseCharacterSetListResult",
    "AutonomousDatabaseCharacterSetProperties",
    "AutonomousDatabaseCloneProperties",
    "AutonomousDatabaseId",
    "AutonomousDatabaseListResult",
    "AutonomousDatabaseNationalCharacterSet",
    "AutonomousDatabaseNationalCharacterSetListResult",
    "AutonomousDatabaseNationalCharacterSetProperties",
    "AutonomousDatabaseProperties",
    "AutonomousDatabaseStandbySummary",
    "AutonomousDatabaseUpdate",
    "AutonomousDatabaseUpdateProperties",
    "AutonomousDatabaseWalletFile",
    "AutonomousDbVersion",
    "AutonomousDbVersionListResult",
    "AutonomousDbVersionProperties",
    "CloudAccountDetails",
    "CloudExadataInfrastructure",
    "CloudExadataInfrastructureId",
    "CloudExadataInfrastructureListResult",
    "CloudExadataInfrastructureProperties",
    "CloudExadataInfrastructureUpdate",
    "CloudExadataInfrastructureUpdateProperties",
    "CloudVmCluster",
    "CloudVmClusterListResult",
    "CloudVmClusterProperties",
    "CloudVmClusterUpdate",
    "CloudVmClusterUpdateProperties",
    "ConnectionStringType",
    "ConnectionUrlType",
    "CustomerContact",
    "DataCollectionOptions",
    "DayOfWeek",
    "DayOfWeekUpdate",
    "DbIormConfig",
    "DbNode",
    "DbNodeAction",
    "DbNodeListResult",
    "DbNodeProperties",
    "DbServer",
    "DbServerListResult",
    "DbServerPatchingDetails",
    "DbServerProperties",
    "DbSystemShape",
    "DbSystemShapeListResult",
    "DbSystemShapeProperties",
    "DnsPrivateView",
    "DnsPrivateViewListResult",
    "DnsPrivateViewProperties",
    "DnsPrivateZone",
    "DnsPrivateZoneListResult",
    "DnsPrivateZoneProperties",
    "ErrorAdditionalInfo",
    "ErrorDetail",
    "ErrorResponse",
    "EstimatedPatchingTime",
    "ExadataIormConfig",
    "GenerateAutonomousDatabaseWalletDetails",
    "GiVersion",
    "GiVersionListResult",
    "GiVersionProperties",
    "LongTermBackUpScheduleDetails",
    "MaintenanceWindow",
    "Month",
    "NsgCidr",
    "Ocid",
    "Operation",
    "OperationDisplay",
    "OperationListResult",
    "OracleSubscription",
    "OracleSubscriptionListResult",
    "OracleSubscriptionProperties",
    "OracleSubscriptionUpdate",
    "OracleSubscriptionUpdateProperties",
    "Password",
    "PeerDbDetails",
    "Plan",
    "PlanUpdate",
    "PortRange",
    "PrivateIpAddressProperties",
    "PrivateIpAddressesFilter",
    "ProfileType",
    "ProxyResource",
    "Resource",
    "RestoreAutonomousDatabaseDetails",
    "RetentionPeriod",
    "SaasSubscriptionDetails",
    "ScheduledOperationsType",
    "ScheduledOperationsTypeUpdate",
    "SubnetId",
    "SystemData",
    "SystemVersion",
    "SystemVersionListResult",
    "SystemVersionProperties",
    "SystemVersionsFilter",
    "TrackedResource",
    "ValidationError",
    "ValidationResult",
    "VirtualNetworkAddress",
    "VirtualNetworkAddressListResult",
    "VirtualNetworkAddressProperties",
    "VnetId",
]
