from arm_models.core.enums import OpenEnum


class ActionType(OpenEnum):
    INTERNAL = "Internal"


class AutonomousDatabaseBackupLifecycleState(OpenEnum):
    CREATING = "Creating"
    ACTIVE = "Active"
    DELETING = "Deleting"
    FAILED = "Failed"
    UPDATING = "Updating"


class AutonomousDatabaseBackupType(OpenEnum):
    INCREMENTAL = "Incremental"
    FULL = "Full"
    LONG_TERM = "LongTerm"


class AutonomousDatabaseLifecycleState(OpenEnum):
    PROVISIONING = "Provisioning"
    AVAILABLE = "Available"
    STOPPING = "Stopping"
    STOPPED = "Stopped"
    STARTING = "Starting"
    TERMINATING = "Terminating"
    TERMINATED = "Terminated"
    UNAVAILABLE = "Unavailable"
    RESTORE_IN_PROGRESS = "RestoreInProgress"
    RESTORE_FAILED = "RestoreFailed"
    BACKUP_IN_PROGRESS = "BackupInProgress"
    SCALE_IN_PROGRESS = "ScaleInProgress"
    AVAILABLE_NEEDS_ATTENTION = "AvailableNeedsAttention"
    UPDATING = "Updating"
    MAINTENANCE_IN_PROGRESS = "MaintenanceInProgress"
    RESTARTING = "Restarting"
    RECREATING = "Recreating"
    ROLE_CHANGE_IN_PROGRESS = "RoleChangeInProgress"
    UPGRADING = "Upgrading"
    INACCESSIBLE = "Inaccessible"
    STANDBY = "Standby"


class AutonomousMaintenanceScheduleType(OpenEnum):
    EARLY = "Early"
    REGULAR = "Regular"


class AzureResourceManagerResourceProvisioningState(OpenEnum):
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    CANCELED = "Canceled"


class AzureResourceProvisioningState(OpenEnum):
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    CANCELED = "Canceled"
    PROVISIONING = "Provisioning"


class CloneType(OpenEnum):
    FULL = "Full"
    METADATA = "Metadata"


class CloudAccountProvisioningState(OpenEnum):
    PENDING = "Pending"
    PROVISIONING = "Provisioning"
    AVAILABLE = "Available"


class CloudExadataInfrastructureLifecycleState(OpenEnum):
    PROVISIONING = "Provisioning"
    AVAILABLE = "Available"
    UPDATING = "Updating"
    TERMINATING = "Terminating"
    TERMINATED = "Terminated"
    MAINTENANCE_IN_PROGRESS = "MaintenanceInProgress"
    FAILED = "Failed"


class CloudVmClusterLifecycleState(OpenEnum):
    PROVISIONING = "Provisioning"
    AVAILABLE = "Available"
    UPDATING = "Updating"
    TERMINATING = "Terminating"
    TERMINATED = "Terminated"
    MAINTENANCE_IN_PROGRESS = "MaintenanceInProgress"
    FAILED = "Failed"


class ComputeModel(OpenEnum):
    ECPU = "ECPU"
    OCPU = "OCPU"


class ConsumerGroup(OpenEnum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"
    TP = "Tp"
    TPURGENT = "Tpurgent"


class CreatedByType(OpenEnum):
    USER = "User"
    APPLICATION = "Application"
    MANAGED_IDENTITY = "ManagedIdentity"
    KEY = "Key"


class DataBaseType(OpenEnum):
    REGULAR = "Regular"
    CLONE = "Clone"


class DataSafeStatusType(OpenEnum):
    REGISTERING = "Registering"
    REGISTERED = "Registered"
    DEREGISTERING = "Deregistering"
    NOT_REGISTERED = "NotRegistered"
    FAILED = "Failed"


class DatabaseEditionType(OpenEnum):
    STANDARD_EDITION = "StandardEdition"
    ENTERPRISE_EDITION = "EnterpriseEdition"


class DayOfWeekName(OpenEnum):
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"


class DbNodeActionEnum(OpenEnum):
    START = "Start"
    STOP = "Stop"
    SOFT_RESET = "SoftReset"
    RESET = "Reset"


class DbNodeMaintenanceType(OpenEnum):
    VMDB_REBOOT_MIGRATION = "VmdbRebootMigration"


class DbNodeProvisioningState(OpenEnum):
    PROVISIONING = "Provisioning"
    AVAILABLE = "Available"
    UPDATING = "Updating"
    STOPPING = "Stopping"
    STOPPED = "Stopped"
    STARTING = "Starting"
    TERMINATING = "Terminating"
    TERMINATED = "Terminated"
    FAILED = "Failed"


class DbServerPatchingStatus(OpenEnum):
    SCHEDULED = "Scheduled"
    MAINTENANCE_IN_PROGRESS = "MaintenanceInProgress"
    FAILED = "Failed"
    COMPLETE = "Complete"


class DbServerProvisioningState(OpenEnum):
    CREATING = "Creating"
    AVAILABLE = "Available"
    UNAVAILABLE = "Unavailable"
    DELETING = "Deleting"
    DELETED = "Deleted"
    MAINTENANCE_IN_PROGRESS = "MaintenanceInProgress"


class DisasterRecoveryType(OpenEnum):
    ADG = "Adg"
    BACKUP_BASED = "BackupBased"


class DiskRedundancy(OpenEnum):
    HIGH = "High"
    NORMAL = "Normal"


class DnsPrivateViewsLifecycleState(OpenEnum):
    ACTIVE = "Active"
    DELETED = "Deleted"
    DELETING = "Deleting"
    UPDATING = "Updating"


class DnsPrivateZonesLifecycleState(OpenEnum):
    ACTIVE = "Active"
    CREATING = "Creating"
    DELETED = "Deleted"
    DELETING = "Deleting"
    UPDATING = "Updating"


class GenerateType(OpenEnum):
    SINGLE = "Single"
    ALL = "All"


class HostFormatType(OpenEnum):
    FQDN = "Fqdn"
    IP = "Ip"


class Intent(OpenEnum):
    RETAIN = "Retain"
    RESET = "Reset"


class IormLifecycleState(OpenEnum):
    BOOT_STRAPPING = "BootStrapping"
    ENABLED = "Enabled"
    DISABLED = "Disabled"
    UPDATING = "Updating"
    FAILED = "Failed"


class LicenseModel(OpenEnum):
    LICENSE_INCLUDED = "LicenseIncluded"
    BRING_YOUR_OWN_LICENSE = "BringYourOwnLicense"


class MonthName(OpenEnum):
    JANUARY = "January"
    FEBRUARY = "February"
    MARCH = "March"
    APRIL = "April"
    MAY = "May"
    JUNE = "June"
    JULY = "July"
    AUGUST = "August"
    SEPTEMBER = "September"
    OCTOBER = "October"
    NOVEMBER = "November"
    DECEMBER = "December"


class Objective(OpenEnum):
    LOW_LATENCY = "LowLatency"
    HIGH_THROUGHPUT = "HighThroughput"
    BALANCED = "Balanced"
    AUTO = "Auto"
    BASIC = "Basic"


class OpenModeType(OpenEnum):
    READ_ONLY = "ReadOnly"
    READ_WRITE = "ReadWrite"


class OperationsInsightsStatusType(OpenEnum):
    ENABLING = "Enabling"
    ENABLED = "Enabled"
    DISABLING = "Disabling"
    NOT_ENABLED = "NotEnabled"
    FAILED_ENABLING = "FailedEnabling"
    FAILED_DISABLING = "FailedDisabling"


class OracleSubscriptionProvisioningState(OpenEnum):
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    CANCELED = "Canceled"


class Origin(OpenEnum):
    USER = "user"
    SYSTEM = "system"
    USER_SYSTEM = "user,system"


class PatchingMode(OpenEnum):
    ROLLING = "Rolling"
    NON_ROLLING = "NonRolling"


class PermissionLevelType(OpenEnum):
    RESTRICTED = "Restricted"
    UNRESTRICTED = "Unrestricted"


class Preference(OpenEnum):
    NO_PREFERENCE = "NoPreference"
    CUSTOM_PREFERENCE = "CustomPreference"


class ProtocolType(OpenEnum):
    TCP = "TCP"
    TCPS = "TCPS"


class RefreshableModelType(OpenEnum):
    AUTOMATIC = "Automatic"
    MANUAL = "Manual"


class RefreshableStatusType(OpenEnum):
    REFRESHING = "Refreshing"
    NOT_REFRESHING = "NotRefreshing"


class RepeatCadenceType(OpenEnum):
    ONE_TIME = "OneTime"
    WEEKLY = "Weekly"
    MONTHLY = "Monthly"
    YEARLY = "Yearly"


class RoleType(OpenEnum):
    PRIMARY = "Primary"
    STANDBY = "Standby"
    DISABLED_STANDBY = "DisabledStandby"
    BACKUP_COPY = "BackupCopy"
    SNAPSHOT_STANDBY = "SnapshotStandby"


class SessionModeType(OpenEnum):
    DIRECT = "Direct"
    REDIRECT = "Redirect"


class SourceType(OpenEnum):
    NONE = "None"
    DATABASE = "Database"
    BACKUP_FROM_ID = "BackupFromId"
    BACKUP_FROM_TIMESTAMP = "BackupFromTimestamp"
    CLONE_TO_REFRESHABLE = "CloneToRefreshable"
    CROSS_REGION_DATAGUARD = "CrossRegionDataguard"
    CROSS_REGION_DISASTER_RECOVERY = "CrossRegionDisasterRecovery"


class SyntaxFormatType(OpenEnum):
    LONG = "Long"
    EZCONNECT = "Ezconnect"
    EZCONNECTPLUS = "Ezconnectplus"


class TlsAuthenticationType(OpenEnum):
    SERVER = "Server"
    MUTUAL = "Mutual"


class UpdateAction(OpenEnum):
    ROLLING_APPLY = "RollingApply"
    NON_ROLLING_APPLY = "NonRollingApply"
    PRE_CHECK = "PreCheck"
    ROLL_BACK = "RollBack"


class ValidationStatus(OpenEnum):
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"


class VirtualNetworkAddressLifecycleState(OpenEnum):
    PROVISIONING = "Provisioning"
    AVAILABLE = "Available"
    TERMINATING = "Terminating"
    TERMINATED = "Terminated"
    FAILED = "Failed"


class WorkloadType(OpenEnum):
    OLTP = "OLTP"
    DW = "DW"
    AJD = "AJD"
    APEX = "APEX"


class ZoneType(OpenEnum):
    PRIMARY = "Primary"
    SECONDARY = "Secondary"
