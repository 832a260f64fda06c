from enum import StrEnum

from arm_models.core.enums import OpenEnum


class ApiType(OpenEnum):
    MONGO_DB = "MongoDB"
    GREMLIN = "Gremlin"
    CASSANDRA = "Cassandra"
    TABLE = "Table"
    SQL = "Sql"
    GREMLIN_V2 = "GremlinV2"


class AuthenticationMethod(OpenEnum):
    NONE = "None"
    CASSANDRA = "Cassandra"


class BackupPolicyType(OpenEnum):
    PERIODIC = "Periodic"
    CONTINUOUS = "Continuous"


class BackupStorageRedundancy(OpenEnum):
    GEO = "Geo"
    LOCAL = "Local"
    ZONE = "Zone"


class CompositePathSortOrder(OpenEnum):
    ASCENDING = "ascending"
    DESCENDING = "descending"


class ConflictResolutionMode(OpenEnum):
    LAST_WRITER_WINS = "LastWriterWins"
    CUSTOM = "Custom"


class ConnectorOffer(OpenEnum):
    SMALL = "Small"


class CreateMode(OpenEnum):
    DEFAULT = "Default"
    RESTORE = "Restore"


class CreatedByType(OpenEnum):
    USER = "User"
    APPLICATION = "Application"
    MANAGED_IDENTITY = "ManagedIdentity"
    KEY = "Key"


class DataType(OpenEnum):
    STRING = "String"
    NUMBER = "Number"
    POINT = "Point"
    POLYGON = "Polygon"
    LINE_STRING = "LineString"
    MULTI_POLYGON = "MultiPolygon"


class DatabaseAccountKind(OpenEnum):
    GLOBAL_DOCUMENT_DB = "GlobalDocumentDB"
    MONGO_DB = "MongoDB"
    PARSE = "Parse"


class IndexKind(OpenEnum):
    HASH = "Hash"
    RANGE = "Range"
    SPATIAL = "Spatial"


class IndexingMode(OpenEnum):
    CONSISTENT = "consistent"
    LAZY = "lazy"
    NONE = "none"


class KeyKind(OpenEnum):
    PRIMARY = "primary"
    SECONDARY = "secondary"
    PRIMARY_READONLY = "primaryReadonly"
    SECONDARY_READONLY = "secondaryReadonly"


class ManagedCassandraProvisioningState(OpenEnum):
    CREATING = "Creating"
    UPDATING = "Updating"
    DELETING = "Deleting"
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    CANCELED = "Canceled"


class OperationType(OpenEnum):
    CREATE = "Create"
    REPLACE = "Replace"
    DELETE = "Delete"
    SYSTEM_OPERATION = "SystemOperation"


class PartitionKind(OpenEnum):
    HASH = "Hash"
    RANGE = "Range"
    MULTI_HASH = "MultiHash"


class PrimaryAggregationType(OpenEnum):
    NONE = "None"
    AVERAGE = "Average"
    TOTAL = "Total"
    MINIMUM = "Minimum"
    MAXIMUM = "Maximum"
    LAST = "Last"


class PublicNetworkAccess(OpenEnum):
    ENABLED = "Enabled"
    DISABLED = "Disabled"


class RestoreMode(OpenEnum):
    POINT_IN_TIME = "PointInTime"


class ServerVersion(OpenEnum):
    V3_2 = "3.2"
    V3_6 = "3.6"
    V4_0 = "4.0"


class SpatialType(OpenEnum):
    POINT = "Point"
    LINE_STRING = "LineString"
    POLYGON = "Polygon"
    MULTI_POLYGON = "MultiPolygon"


class TriggerOperation(OpenEnum):
    ALL = "All"
    CREATE = "Create"
    UPDATE = "Update"
    DELETE = "Delete"
    REPLACE = "Replace"


class TriggerType(OpenEnum):
    PRE = "Pre"
    POST = "Post"


class UnitType(OpenEnum):
    COUNT = "Count"
    BYTES = "Bytes"
    SECONDS = "Seconds"
    PERCENT = "Percent"
    COUNT_PER_SECOND = "CountPerSecond"
    BYTES_PER_SECOND = "BytesPerSecond"
    MILLISECONDS = "Milliseconds"


# Closed sets: values outside these fail validation.


class DatabaseAccountOfferType(StrEnum):
    STANDARD = "Standard"


class DefaultConsistencyLevel(StrEnum):
    EVENTUAL = "Eventual"
    SESSION = "Session"
    BOUNDED_STALENESS = "BoundedStaleness"
    STRONG = "Strong"
    CONSISTENT_PREFIX = "ConsistentPrefix"


class NetworkAclBypass(StrEnum):
    NONE = "None"
    AZURE_SERVICES = "AzureServices"


class ResourceIdentityType(StrEnum):
    SYSTEM_ASSIGNED = "SystemAssigned"
    USER_ASSIGNED = "UserAssigned"
    SYSTEM_ASSIGNED_USER_ASSIGNED = "SystemAssigned,UserAssigned"
    NONE = "None"


class RoleDefinitionType(StrEnum):
    BUILT_IN_ROLE = "BuiltInRole"
    CUSTOM_ROLE = "CustomRole"
