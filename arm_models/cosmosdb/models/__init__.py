from .common import (
    ArmProxyResource,
    ArmResourceProperties,
    Capability,
    CloudError,
    CollectionName,
    ErrorResponse,
    ExtendedResourceProperties,
    Key,
    ManagedServiceIdentity,
    Operation,
    OperationDisplay,
    OperationListResult,
    Path,
    ProvisioningState,
    ProxyResource,
    Resource,
    SystemData,
    Tags,
)
from .services import (
    LocationGetResult,
    LocationListResult,
    LocationProperties,
    NotebookWorkspace,
    NotebookWorkspaceConnectionInfoResult,
    NotebookWorkspaceCreateUpdateParameters,
    NotebookWorkspaceListResult,
    NotebookWorkspaceProperties,
    PrivateEndpointConnection,
    PrivateEndpointConnectionListResult,
    PrivateEndpointConnectionProperties,
    PrivateEndpointProperty,
    PrivateLinkResource,
    PrivateLinkResourceListResult,
    PrivateLinkResourceProperties,
    PrivateLinkServiceConnectionStateProperty,
)
from .database_account import (
    ApiProperties,
    BackupInformation,
    BackupPolicy,
    BackupPolicyUnion,
    BackupResource,
    BackupResourceProperties,
    ConsistencyPolicy,
    ContinuousBackupInformation,
    ContinuousBackupRestoreLocation,
    ContinuousModeBackupPolicy,
    CorsPolicy,
    DatabaseAccountConnectionString,
    DatabaseAccountCreateUpdateParameters,
    DatabaseAccountCreateUpdateProperties,
    DatabaseAccountCreateUpdatePropertiesUnion,
    DatabaseAccountGetProperties,
    DatabaseAccountGetResults,
    DatabaseAccountListConnectionStringsResult,
    DatabaseAccountListKeysResult,
    DatabaseAccountListReadOnlyKeysResult,
    DatabaseAccountRegenerateKeyParameters,
    DatabaseAccountUpdateParameters,
    DatabaseAccountUpdateProperties,
    DatabaseAccountsListResult,
    DatabaseRestoreResource,
    DefaultRequestDatabaseAccountCreateUpdateProperties,
    FailoverPolicies,
    FailoverPolicy,
    IpAddressOrRange,
    IpRules,
    ListBackups,
    Location,
    PeriodicModeBackupPolicy,
    PeriodicModeProperties,
    RegionForOnlineOffline,
    RestoreParameters,
    RestoreRequestDatabaseAccountCreateUpdateProperties,
    VirtualNetworkRule,
)
from .resources import (
    AutoUpgradePolicyResource,
    AutoscaleSettings,
    AutoscaleSettingsResource,
    CassandraKeyspaceCreateUpdateParameters,
    CassandraKeyspaceCreateUpdateProperties,
    CassandraKeyspaceGetProperties,
    CassandraKeyspaceGetPropertiesResource,
    CassandraKeyspaceGetResults,
    CassandraKeyspaceListResult,
    CassandraKeyspaceResource,
    CassandraPartitionKey,
    CassandraSchema,
    CassandraTableCreateUpdateParameters,
    CassandraTableCreateUpdateProperties,
    CassandraTableGetProperties,
    CassandraTableGetPropertiesResource,
    CassandraTableGetResults,
    CassandraTableListResult,
    CassandraTableResource,
    ClusterKey,
    Column,
    CompositePath,
    CompositePathList,
    ConflictResolutionPolicy,
    ContainerPartitionKey,
    CreateUpdateOptions,
    ExcludedPath,
    GremlinDatabaseCreateUpdateParameters,
    GremlinDatabaseCreateUpdateProperties,
    GremlinDatabaseGetProperties,
    GremlinDatabaseGetPropertiesResource,
    GremlinDatabaseGetResults,
    GremlinDatabaseListResult,
    GremlinDatabaseResource,
    GremlinGraphCreateUpdateParameters,
    GremlinGraphCreateUpdateProperties,
    GremlinGraphGetProperties,
    GremlinGraphGetPropertiesResource,
    GremlinGraphGetResults,
    GremlinGraphListResult,
    GremlinGraphResource,
    IncludedPath,
    Indexes,
    IndexingPolicy,
    MongoDbCollectionCreateUpdateParameters,
    MongoDbCollectionCreateUpdateProperties,
    MongoDbCollectionGetProperties,
    MongoDbCollectionGetPropertiesResource,
    MongoDbCollectionGetResults,
    MongoDbCollectionListResult,
    MongoDbCollectionResource,
    MongoDbDatabaseCreateUpdateParameters,
    MongoDbDatabaseCreateUpdateProperties,
    MongoDbDatabaseGetProperties,
    MongoDbDatabaseGetPropertiesResource,
    MongoDbDatabaseGetResults,
    MongoDbDatabaseListResult,
    MongoDbDatabaseResource,
    MongoIndex,
    MongoIndexKeys,
    MongoIndexOptions,
    OptionsResource,
    Permission,
    ShardKeys,
    SpatialSpec,
    SqlContainerCreateUpdateParameters,
    SqlContainerCreateUpdateProperties,
    SqlContainerGetProperties,
    SqlContainerGetPropertiesResource,
    SqlContainerGetResults,
    SqlContainerListResult,
    SqlContainerResource,
    SqlDatabaseCreateUpdateParameters,
    SqlDatabaseCreateUpdateProperties,
    SqlDatabaseGetProperties,
    SqlDatabaseGetPropertiesResource,
    SqlDatabaseGetResults,
    SqlDatabaseListResult,
    SqlDatabaseResource,
    SqlRoleAssignmentCreateUpdateParameters,
    SqlRoleAssignmentGetResults,
    SqlRoleAssignmentListResult,
    SqlRoleAssignmentResource,
    SqlRoleDefinitionCreateUpdateParameters,
    SqlRoleDefinitionGetResults,
    SqlRoleDefinitionListResult,
    SqlRoleDefinitionResource,
    SqlStoredProcedureCreateUpdateParameters,
    SqlStoredProcedureCreateUpdateProperties,
    SqlStoredProcedureGetProperties,
    SqlStoredProcedureGetPropertiesResource,
    SqlStoredProcedureGetResults,
    SqlStoredProcedureListResult,
    SqlStoredProcedureResource,
    SqlTriggerCreateUpdateParameters,
    SqlTriggerCreateUpdateProperties,
    SqlTriggerGetProperties,
    SqlTriggerGetPropertiesResource,
    SqlTriggerGetResults,
    SqlTriggerListResult,
    SqlTriggerResource,
    SqlUserDefinedFunctionCreateUpdateParameters,
    SqlUserDefinedFunctionCreateUpdateProperties,
    SqlUserDefinedFunctionGetProperties,
    SqlUserDefinedFunctionGetPropertiesResource,
    SqlUserDefinedFunctionGetResults,
    SqlUserDefinedFunctionListResult,
    SqlUserDefinedFunctionResource,
    TableCreateUpdateParameters,
    TableCreateUpdateProperties,
    TableGetProperties,
    TableGetPropertiesResource,
    TableGetResults,
    TableListResult,
    TableResource,
    ThroughputPolicyResource,
    ThroughputSettingsGetProperties,
    ThroughputSettingsGetPropertiesResource,
    ThroughputSettingsGetResults,
    ThroughputSettingsResource,
    ThroughputSettingsUpdateParameters,
    ThroughputSettingsUpdateProperties,
    UniqueKey,
    UniqueKeyPolicy,
)
from .cassandra_cluster import (
    Certificate,
    ClusterNodeStatus,
    ClusterResource,
    ClusterResourceProperties,
    DataCenterResource,
    DataCenterResourceProperties,
    ListClusters,
    ListDataCenters,
    RepairPostBody,
    SeedNode,
)
from .metrics import (
    Metric,
    MetricAvailability,
    MetricDefinition,
    MetricDefinitionsListResult,
    MetricListResult,
    MetricName,
    MetricValue,
    PartitionMetric,
    PartitionMetricListResult,
    PartitionUsage,
    PartitionUsagesResult,
    PercentileMetric,
    PercentileMetricListResult,
    PercentileMetricValue,
    Usage,
    UsagesResult,
)
from .restorable import (
    RestorableDatabaseAccountGetResult,
    RestorableDatabaseAccountProperties,
    RestorableDatabaseAccountsListResult,
    RestorableEventResource,
    RestorableLocationResource,
    RestorableMongodbCollectionGetResult,
    RestorableMongodbCollectionProperties,
    RestorableMongodbCollectionsListResult,
    RestorableMongodbDatabaseGetResult,
    RestorableMongodbDatabaseProperties,
    RestorableMongodbDatabasesListResult,
    RestorableMongodbResourcesListResult,
    RestorableSqlContainer,
    RestorableSqlContainerGetResult,
    RestorableSqlContainerProperties,
    RestorableSqlContainerPropertiesResource,
    RestorableSqlContainersListResult,
    RestorableSqlDatabase,
    RestorableSqlDatabaseGetResult,
    RestorableSqlDatabaseProperties,
    RestorableSqlDatabasePropertiesResource,
    RestorableSqlDatabasesListResult,
    RestorableSqlResourcesListResult,
)

__all__ = [
    "ApiProperties",
    "ArmProxyResource",
    "ArmResourceProperties",
    "AutoUpgradePolicyResource",
    "AutoscaleSettings",
    "AutoscaleSettingsResource",
    "BackupInformation",
    "BackupPolicy",
    "BackupPolicyUnion",
    "BackupResource",
    "BackupResourceProperties",
    "Capability",
    "CassandraKeyspaceCreateUpdateParameters",
    "CassandraKeyspaceCreateUpdateProperties",
    "CassandraKeyspaceGetProperties",
    "CassandraKeyspaceGetPropertiesResource",
    "CassandraKeyspaceGetResults",
    "CassandraKeyspaceListResult",
    "CassandraKeyspaceResource",
    "CassandraPartitionKey",
    "CassandraSchema",
    "CassandraTableCreateUpdateParameters",
    "CassandraTableCreateUpdateProperties",
    "CassandraTableGetProperties",
    "CassandraTableGetPropertiesResource",
    "CassandraTableGetResults",
    "CassandraTableListResult",
    "CassandraTableResource",
    "Certificate",
    "CloudError",
    "ClusterKey",
    "ClusterNodeStatus",
    "ClusterResource",
    "ClusterResourceProperties",
    "CollectionName",
    "Column",
    "CompositePath",
    "CompositePathList",
    "ConflictResolutionPolicy",
    "ConsistencyPolicy",
    "ContainerPartitionKey",
    "ContinuousBackupInformation",
    "ContinuousBackupRestoreLocation",
    "ContinuousModeBackupPolicy",
    "CorsPolicy",
    "CreateUpdateOptions",
    "DataCenterResource",
    "DataCenterResourceProperties",
    "DatabaseAccountConnectionString",
    "DatabaseAccountCreateUpdateParameters",
    "DatabaseAccountCreateUpdateProperties",
    "DatabaseAccountCreateUpdatePropertiesUnion",
    "DatabaseAccountGetProperties",
    "DatabaseAccountGetResults",
    "DatabaseAccountListConnectionStringsResult",
    "DatabaseAccountListKeysResult",
    "DatabaseAccountListReadOnlyKeysResult",
    "DatabaseAccountRegenerateKeyParameters",
    "DatabaseAccountUpdateParameters",
    "DatabaseAccountUpdateProperties",
    "DatabaseAccountsListResult",
    "DatabaseRestoreResource",
    "DefaultRequestDatabaseAccountCreateUpdateProperties",
    "ErrorResponse",
    "ExcludedPath",
    "ExtendedResourceProperties",
    "FailoverPolicies",
    "FailoverPolicy",
    "GremlinDatabaseCreateUpdateParameters",
    "GremlinDatabaseCreateUpdateProperties",
    "GremlinDatabaseGetProperties",
    "GremlinDatabaseGetPropertiesResource",
    "GremlinDatabaseGetResults",
    "GremlinDatabaseListResult",
    "GremlinDatabaseResource",
    "GremlinGraphCreateUpdateParameters",
    "GremlinGraphCreateUpdateProperties",
    "GremlinGraphGetProperties",
    "GremlinGraphGetPropertiesResource",
    "GremlinGraphGetResults",
    "GremlinGraphListResult",
    "GremlinGraphResource",
    "IncludedPath",
    "Indexes",
    "IndexingPolicy",
    "IpAddressOrRange",
    "IpRules",
    "Key",
    "ListBackups",
    "ListClusters",
    "ListDataCenters",
    "Location",
    "LocationGetResult",
    "LocationListResult",
    "LocationProperties",
    "ManagedServiceIdentity",
    "Metric",
    "MetricAvailability",
    "MetricDefinition",
    "MetricDefinitionsListResult",
    "MetricListResult",
    "MetricName",
    "MetricValue",
    "MongoDbCollectionCreateUpdateParameters",
    "MongoDbCollectionCreateUpdateProperties",
    "MongoDbCollectionGetProperties",
    "MongoDbCollectionGetPropertiesResource",
    "MongoDbCollectionGetResults",
    "MongoDbCollectionListResult",
    "MongoDbCollectionResource",
    "MongoDbDatabaseCreateUpdateParameters",
    "MongoDbDatabaseCreateUpdateProperties",
    "MongoDbDatabaseGetProperties",
    "MongoDbDatabaseGetPropertiesResource",
    "MongoDbDatabaseGetResults",
    "MongoDbDatabaseListResult",
    "MongoDbDatabaseResource",
    "MongoIndex",
    "MongoIndexKeys",
    "MongoIndexOptions",
    "NotebookWorkspace",
    "NotebookWorkspaceConnectionInfoResult",
    "NotebookWorkspaceCreateUpdateParameters",
    "NotebookWorkspaceListResult",
    "NotebookWorkspaceProperties",
    "Operation",
    "OperationDisplay",
    "OperationListResult",
    "OptionsResource",
    "PartitionMetric",
    "PartitionMetricListResult",
    "PartitionUsage",
    "PartitionUsagesResult",
    "Path",
    "PercentileMetric",
    "PercentileMetricListResult",
    "PercentileMetricValue",
    "PeriodicModeBackupPolicy",
    "PeriodicModeProperties",
    "Permission",
    "PrivateEndpointConnection",
    "PrivateEndpointConnectionListResult",
    "PrivateEndpointConnectionProperties",
    "PrivateEndpointProperty",
    "PrivateLinkResource",
    "PrivateLinkResourceListResult",
    "PrivateLinkResourceProperties",
    "PrivateLinkServiceConnectionStateProperty",
    "ProvisioningState",
    "ProxyResource",
    "RegionForOnlineOffline",
    "RepairPostBody",
    "Resource",
    "RestorableDatabaseAccountGetResult",
    "RestorableDatabaseAccountProperties",
    "RestorableDatabaseAccountsListResult",
    "RestorableEventResource",
    "RestorableLocationResource",
    "RestorableMongodbCollectionGetResult",
    "RestorableMongodbCollectionProperties",
    "RestorableMongodbCollectionsListResult",
    "RestorableMongodbDatabaseGetResult",
    "RestorableMongodbDatabaseProperties",
    "RestorableMongodbDatabasesListResult",
    "RestorableMongodbResourcesListResult",
    "RestorableSqlContainer",
    "RestorableSqlContainerGetResult",
    "RestorableSqlContainerProperties",
    "RestorableSqlContainerPropertiesResource",
    "RestorableSqlContainersListResult",
    "RestorableSqlDatabase",
    "RestorableSqlDatabaseGetResult",
    "RestorableSqlDatabaseProperties",
    "RestorableSqlDatabasePropertiesResource",
    "RestorableSqlDatabasesListResult",
    "RestorableSqlResourcesListResult",
    "RestoreParameters",
    "RestoreRequestDatabaseAccountCreateUpdateProperties",
    "SeedNode",
    "ShardKeys",
    "SpatialSpec",
    "SqlContainerCreateUpdateParameters",
    "SqlContainerCreateUpdateProperties",
    "SqlContainerGetProperties",
    "SqlContainerGetPropertiesResource",
    "SqlContainerGetResults",
    "SqlContainerListResult",
    "SqlContainerResource",
    "SqlDatabaseCreateUpdateParameters",
    "SqlDatabaseCreateUpdateProperties",
    "SqlDatabaseGetProperties",
    "SqlDatabaseGetPropertiesResource",
    "SqlDatabaseGetResults",
    "SqlDatabaseListResult",
    "SqlDatabaseResource",
    "SqlRoleAssignmentCreateUpdateParameters",
    "SqlRoleAssignmentGetResults",
    "SqlRoleAssignmentListResult",
    "SqlRoleAssignmentResource",
    "SqlRoleDefinitionCreateUpdateParameters",
    "SqlRoleDefinitionGetResults",
    "SqlRoleDefinitionListResult",
    "SqlRoleDefinitionResource",
    "SqlStoredProcedureCreateUpdateParameters",
    "SqlStoredProcedureCreateUpdateProperties",
    "SqlStoredProcedureGetProperties",
    "SqlStoredProcedureGetPropertiesResource",
    "SqlStoredProcedureGetResults",
    "SqlStoredProcedureListResult",
    "SqlStoredProcedureResource",
    "SqlTriggerCreateUpdateParameters",
    "SqlTriggerCreateUpdateProperties",
    "SqlTriggerGetProperties",
    "SqlTriggerGetPropertiesResource",
    "SqlTriggerGetResults",
    "SqlTriggerListResult",
    "SqlTriggerResource",
    "SqlUserDefinedFunctionCreateUpdateParameters",
    "SqlUserDefinedFunctionCreateUpdateProperties",
    "SqlUserDefinedFunctionGetProperties",
    "SqlUserDefinedFunctionGetPropertiesResource",
    "SqlUserDefinedFunctionGetResults",
    "SqlUserDefinedFunctionListResult",
    "SqlUserDefinedFunctionResource",
    "SystemData",
    "TableCreateUpdateParameters",
    "TableCreateUpdateProperties",
    "TableGetProperties",
    "TableGetPropertiesResource",
    "TableGetResults",
    "TableListResult",
    "TableResource",
    "Tags",
    "ThroughputPolicyResource",
    "ThroughputSettingsGetProperties",
    "ThroughputSettingsGetPropertiesResource",
    "ThroughputSettingsGetResults",
    "ThroughputSettingsResource",
    "ThroughputSettingsUpdateParameters",
    "ThroughputSettingsUpdateProperties",
    "UniqueKey",
    "UniqueKeyPolicy",
    "Usage",
    "UsagesResult",
    "VirtualNetworkRule",
]
