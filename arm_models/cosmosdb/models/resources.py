"""Data-plane resources managed through the account: databases, containers, keyspaces, graphs, tables."""

from pydantic import Field

from arm_models.core.base import ArmModel, DefaultList, ListResult
from arm_models.cosmosdb.enums import (
    CompositePathSortOrder,
    ConflictResolutionMode,
    DataType,
    IndexingMode,
    IndexKind,
    PartitionKind,
    RoleDefinitionType,
    SpatialType,
    TriggerOperation,
    TriggerType,
)
from arm_models.cosmosdb.models.common import (
    ArmProxyResource,
    ArmResourceProperties,
    ExtendedResourceProperties,
)


class AutoscaleSettings(ArmModel):
    max_throughput: int | None = None


class CreateUpdateOptions(ArmModel):
    throughput: int | None = None
    autoscale_settings: AutoscaleSettings | None = None


class OptionsResource(ArmModel):
    throughput: int | None = None
    autoscale_settings: AutoscaleSettings | None = None


class ThroughputPolicyResource(ArmModel):
    is_enabled: bool | None = None
    increment_percent: int | None = None


class AutoUpgradePolicyResource(ArmModel):
    throughput_policy: ThroughputPolicyResource | None = None


class AutoscaleSettingsResource(ArmModel):
    max_throughput: int
    auto_upgrade_policy: AutoUpgradePolicyResource | None = None
    target_max_throughput: int | None = None


class ThroughputSettingsResource(ArmModel):
    throughput: int | None = None
    autoscale_settings: AutoscaleSettingsResource | None = None
    minimum_throughput: str | None = None
    offer_replace_pending: str | None = None


class ThroughputSettingsGetPropertiesResource(ThroughputSettingsResource, ExtendedResourceProperties):
    pass


class ThroughputSettingsGetProperties(ArmModel):
    resource: ThroughputSettingsGetPropertiesResource | None = None


class ThroughputSettingsGetResults(ArmResourceProperties):
    properties: ThroughputSettingsGetProperties | None = None


class ThroughputSettingsUpdateProperties(ArmModel):
    resource: ThroughputSettingsResource


class ThroughputSettingsUpdateParameters(ArmResourceProperties):
    properties: ThroughputSettingsUpdateProperties


# indexing and partitioning


class Indexes(ArmModel):
    data_type: DataType | None = None
    precision: int | None = None
    kind: IndexKind | None = None


class IncludedPath(ArmModel):
    path: str | None = None
    indexes: DefaultList[Indexes] = Field(default_factory=list)


class ExcludedPath(ArmModel):
    path: str | None = None


class CompositePath(ArmModel):
    path: str | None = None
    order: CompositePathSortOrder | None = None


CompositePathList = list[CompositePath]


class SpatialSpec(ArmModel):
    path: str | None = None
    types: DefaultList[SpatialType] = Field(default_factory=list)


class IndexingPolicy(ArmModel):
    automatic: bool | None = None
    indexing_mode: IndexingMode | None = None
    included_paths: DefaultList[IncludedPath] = Field(default_factory=list)
    excluded_paths: DefaultList[ExcludedPath] = Field(default_factory=list)
    composite_indexes: DefaultList[CompositePathList] = Field(default_factory=list)
    spatial_indexes: DefaultList[SpatialSpec] = Field(default_factory=list)


class ContainerPartitionKey(ArmModel):
    paths: DefaultList[str] = Field(default_factory=list)
    kind: PartitionKind | None = None
    version: int | None = None
    system_key: bool | None = None


class UniqueKey(ArmModel):
    paths: DefaultList[str] = Field(default_factory=list)


class UniqueKeyPolicy(ArmModel):
    unique_keys: DefaultList[UniqueKey] = Field(default_factory=list)


class ConflictResolutionPolicy(ArmModel):
    mode: ConflictResolutionMode | None = None
    conflict_resolution_path: str | None = None
    conflict_resolution_procedure: str | None = None


# SQL API


class SqlDatabaseResource(ArmModel):
    id: str


class SqlDatabaseGetPropertiesResource(SqlDatabaseResource, ExtendedResourceProperties):
    colls: str | None = Field(None, alias="_colls")
    users: str | None = Field(None, alias="_users")


class SqlDatabaseGetProperties(ArmModel):
    resource: SqlDatabaseGetPropertiesResource | None = None
    options: OptionsResource | None = None


class SqlDatabaseGetResults(ArmResourceProperties):
    properties: SqlDatabaseGetProperties | None = None


class SqlDatabaseCreateUpdateProperties(ArmModel):
    resource: SqlDatabaseResource
    options: CreateUpdateOptions | None = None


class SqlDatabaseCreateUpdateParameters(ArmResourceProperties):
    properties: SqlDatabaseCreateUpdateProperties


class SqlDatabaseListResult(ListResult):
    value: DefaultList[SqlDatabaseGetResults] = Field(default_factory=list)


class SqlContainerResource(ArmModel):
    id: str
    indexing_policy: IndexingPolicy | None = None
    partition_key: ContainerPartitionKey | None = None
    default_ttl: int | None = None
    unique_key_policy: UniqueKeyPolicy | None = None
    conflict_resolution_policy: ConflictResolutionPolicy | None = None
    analytical_storage_ttl: int | None = None


class SqlContainerGetPropertiesResource(SqlContainerResource, ExtendedResourceProperties):
    pass


class SqlContainerGetProperties(ArmModel):
    resource: SqlContainerGetPropertiesResource | None = None
    options: OptionsResource | None = None


class SqlContainerGetResults(ArmResourceProperties):
    properties: SqlContainerGetProperties | None = None


class SqlContainerCreateUpdateProperties(ArmModel):
    resource: SqlContainerResource
    options: CreateUpdateOptions | None = None


class SqlContainerCreateUpdateParameters(ArmResourceProperties):
    properties: SqlContainerCreateUpdateProperties


class SqlContainerListResult(ListResult):
    value: DefaultList[SqlContainerGetResults] = Field(default_factory=list)


class SqlStoredProcedureResource(ArmModel):
    id: str
    body: str | None = None


class SqlStoredProcedureGetPropertiesResource(SqlStoredProcedureResource, ExtendedResourceProperties):
    pass


class SqlStoredProcedureGetProperties(ArmModel):
    resource: SqlStoredProcedureGetPropertiesResource | None = None


class SqlStoredProcedureGetResults(ArmResourceProperties):
    properties: SqlStoredProcedureGetProperties | None = None


class SqlStoredProcedureCreateUpdateProperties(ArmModel):
    resource: SqlStoredProcedureResource
    options: CreateUpdateOptions | None = None


class SqlStoredProcedureCreateUpdateParameters(ArmResourceProperties):
    properties: SqlStoredProcedureCreateUpdateProperties


class SqlStoredProcedureListResult(ListResult):
    value: DefaultList[SqlStoredProcedureGetResults] = Field(default_factory=list)


class SqlTriggerResource(ArmModel):
    id: str
    body: str | None = None
    trigger_type: TriggerType | None = None
    trigger_operation: TriggerOperation | None = None


class SqlTriggerGetPropertiesResource(SqlTriggerResource, ExtendedResourceProperties):
    pass


class SqlTriggerGetProperties(ArmModel):
    resource: SqlTriggerGetPropertiesResource | None = None


class SqlTriggerGetResults(ArmResourceProperties):
    properties: SqlTriggerGetProperties | None = None


class SqlTriggerCreateUpdateProperties(ArmModel):
    resource: SqlTriggerResource
    options: CreateUpdateOptions | None = None


class SqlTriggerCreateUpdateParameters(ArmResourceProperties):
    properties: SqlTriggerCreateUpdateProperties


class SqlTriggerListResult(ListResult):
    value: DefaultList[SqlTriggerGetResults] = Field(default_factory=list)


class SqlUserDefinedFunctionResource(ArmModel):
    id: str
    body: str | None = None


class SqlUserDefinedFunctionGetPropertiesResource(SqlUserDefinedFunctionResource, ExtendedResourceProperties):
    pass


class SqlUserDefinedFunctionGetProperties(ArmModel):
    resource: SqlUserDefinedFunctionGetPropertiesResource | None = None


class SqlUserDefinedFunctionGetResults(ArmResourceProperties):
    properties: SqlUserDefinedFunctionGetProperties | None = None


class SqlUserDefinedFunctionCreateUpdateProperties(ArmModel):
    resource: SqlUserDefinedFunctionResource
    options: CreateUpdateOptions | None = None


class SqlUserDefinedFunctionCreateUpdateParameters(ArmResourceProperties):
    properties: SqlUserDefinedFunctionCreateUpdateProperties


class SqlUserDefinedFunctionListResult(ListResult):
    value: DefaultList[SqlUserDefinedFunctionGetResults] = Field(default_factory=list)


class Permission(ArmModel):
    data_actions: DefaultList[str] = Field(default_factory=list)
    not_data_actions: DefaultList[str] = Field(default_factory=list)


class SqlRoleDefinitionResource(ArmModel):
    role_name: str | None = None
    type: RoleDefinitionType | None = None
    assignable_scopes: DefaultList[str] = Field(default_factory=list)
    permissions: DefaultList[Permission] = Field(default_factory=list)


class SqlRoleDefinitionCreateUpdateParameters(ArmModel):
    properties: SqlRoleDefinitionResource | None = None


class SqlRoleDefinitionGetResults(ArmProxyResource):
    properties: SqlRoleDefinitionResource | None = None


class SqlRoleDefinitionListResult(ListResult):
    value: DefaultList[SqlRoleDefinitionGetResults] = Field(default_factory=list)


class SqlRoleAssignmentResource(ArmModel):
    role_definition_id: str | None = None
    scope: str | None = None
    principal_id: str | None = None


class SqlRoleAssignmentCreateUpdateParameters(ArmModel):
    properties: SqlRoleAssignmentResource | None = None


class SqlRoleAssignmentGetResults(ArmProxyResource):
    properties: SqlRoleAssignmentResource | None = None


class SqlRoleAssignmentListResult(ListResult):
    value: DefaultList[SqlRoleAssignmentGetResults] = Field(default_factory=list)


# MongoDB API


class MongoIndexKeys(ArmModel):
    keys: DefaultList[str] = Field(default_factory=list)


class MongoIndexOptions(ArmModel):
    expire_after_seconds: int | None = None
    unique: bool | None = None


class MongoIndex(ArmModel):
    key: MongoIndexKeys | None = None
    options: MongoIndexOptions | None = None


ShardKeys = dict[str, str]


class MongoDbDatabaseResource(ArmModel):
    id: str


class MongoDbDatabaseGetPropertiesResource(MongoDbDatabaseResource, ExtendedResourceProperties):
    pass


class MongoDbDatabaseGetProperties(ArmModel):
    resource: MongoDbDatabaseGetPropertiesResource | None = None
    options: OptionsResource | None = None


class MongoDbDatabaseGetResults(ArmResourceProperties):
    properties: MongoDbDatabaseGetProperties | None = None


class MongoDbDatabaseCreateUpdateProperties(ArmModel):
    resource: MongoDbDatabaseResource
    options: CreateUpdateOptions | None = None


class MongoDbDatabaseCreateUpdateParameters(ArmResourceProperties):
    properties: MongoDbDatabaseCreateUpdateProperties


class MongoDbDatabaseListResult(ListResult):
    value: DefaultList[MongoDbDatabaseGetResults] = Field(default_factory=list)


class MongoDbCollectionResource(ArmModel):
    id: str
    shard_key: ShardKeys | None = None
    indexes: DefaultList[MongoIndex] = Field(default_factory=list)
    analytical_storage_ttl: int | None = None


class MongoDbCollectionGetPropertiesResource(MongoDbCollectionResource, ExtendedResourceProperties):
    pass


class MongoDbCollectionGetProperties(ArmModel):
    resource: MongoDbCollectionGetPropertiesResource | None = None
    options: OptionsResource | None = None


class MongoDbCollectionGetResults(ArmResourceProperties):
    properties: MongoDbCollectionGetProperties | None = None


class MongoDbCollectionCreateUpdateProperties(ArmModel):
    resource: MongoDbCollectionResource
    options: CreateUpdateOptions | None = None


class MongoDbCollectionCreateUpdateParameters(ArmResourceProperties):
    properties: MongoDbCollectionCreateUpdateProperties


class MongoDbCollectionListResult(ListResult):
    value: DefaultList[MongoDbCollectionGetResults] = Field(default_factory=list)


# Cassandra API


class Column(ArmModel):
    name: str | None = None
    type: str | None = None


class CassandraPartitionKey(ArmModel):
    name: str | None = None


class ClusterKey(ArmModel):
    name: str | None = None
    order_by: str | None = None


class CassandraSchema(ArmModel):
    columns: DefaultList[Column] = Field(default_factory=list)
    partition_keys: DefaultList[CassandraPartitionKey] = Field(default_factory=list)
    cluster_keys: DefaultList[ClusterKey] = Field(default_factory=list)


class CassandraKeyspaceResource(ArmModel):
    id: str


class CassandraKeyspaceGetPropertiesResource(CassandraKeyspaceResource, ExtendedResourceProperties):
    pass


class CassandraKeyspaceGetProperties(ArmModel):
    resource: CassandraKeyspaceGetPropertiesResource | None = None
    options: OptionsResource | None = None


class CassandraKeyspaceGetResults(ArmResourceProperties):
    properties: CassandraKeyspaceGetProperties | None = None


class CassandraKeyspaceCreateUpdateProperties(ArmModel):
    resource: CassandraKeyspaceResource
    options: CreateUpdateOptions | None = None


class CassandraKeyspaceCreateUpdateParameters(ArmResourceProperties):
    properties: CassandraKeyspaceCreateUpdateProperties


class CassandraKeyspaceListResult(ListResult):
    value: DefaultList[CassandraKeyspaceGetResults] = Field(default_factory=list)


class CassandraTableResource(ArmModel):
    id: str
    default_ttl: int | None = None
    table_schema: CassandraSchema | None = Field(None, alias="schema")
    analytical_storage_ttl: int | None = None


class CassandraTableGetPropertiesResource(CassandraTableResource, ExtendedResourceProperties):
    pass


class CassandraTableGetProperties(ArmModel):
    resource: CassandraTableGetPropertiesResource | None = None
    options: OptionsResource | None = None


class CassandraTableGetResults(ArmResourceProperties):
    properties: CassandraTableGetProperties | None = None


class CassandraTableCreateUpdateProperties(ArmModel):
    resource: CassandraTableResource
    options: CreateUpdateOptions | None = None


class CassandraTableCreateUpdateParameters(ArmResourceProperties):
    properties: CassandraTableCreateUpdateProperties


class CassandraTableListResult(ListResult):
    value: DefaultList[CassandraTableGetResults] = Field(default_factory=list)


# Gremlin API


class GremlinDatabaseResource(ArmModel):
    id: str


class GremlinDatabaseGetPropertiesResource(GremlinDatabaseResource, ExtendedResourceProperties):
    pass


class GremlinDatabaseGetProperties(ArmModel):
    resource: GremlinDatabaseGetPropertiesResource | None = None
    options: OptionsResource | None = None


class GremlinDatabaseGetResults(ArmResourceProperties):
    properties: GremlinDatabaseGetProperties | None = None


class GremlinDatabaseCreateUpdateProperties(ArmModel):
    resource: GremlinDatabaseResource
    options: CreateUpdateOptions | None = None


class GremlinDatabaseCreateUpdateParameters(ArmResourceProperties):
    properties: GremlinDatabaseCreateUpdateProperties


class GremlinDatabaseListResult(ListResult):
    value: DefaultList[GremlinDatabaseGetResults] = Field(default_factory=list)


class GremlinGraphResource(ArmModel):
    id: str
    indexing_policy: IndexingPolicy | None = None
    partition_key: ContainerPartitionKey | None = None
    default_ttl: int | None = None
    unique_key_policy: UniqueKeyPolicy | None = None
    conflict_resolution_policy: ConflictResolutionPolicy | None = None


class GremlinGraphGetPropertiesResource(GremlinGraphResource, ExtendedResourceProperties):
    pass


class GremlinGraphGetProperties(ArmModel):
    resource: GremlinGraphGetPropertiesResource | None = None
    options: OptionsResource | None = None


class GremlinGraphGetResults(ArmResourceProperties):
    properties: GremlinGraphGetProperties | None = None


class GremlinGraphCreateUpdateProperties(ArmModel):
    resource: GremlinGraphResource
    options: CreateUpdateOptions | None = None


class GremlinGraphCreateUpdateParameters(ArmResourceProperties):
    properties: GremlinGraphCreateUpdateProperties


class GremlinGraphListResult(ListResult):
    value: DefaultList[GremlinGraphGetResults] = Field(default_factory=list)


# Table API


class TableResource(ArmModel):
    id: str


class TableGetPropertiesResource(TableResource, ExtendedResourceProperties):
    pass


class TableGetProperties(ArmModel):
    resource: TableGetPropertiesResource | None = None
    options: OptionsResource | None = None


class TableGetResults(ArmResourceProperties):
    properties: TableGetProperties | None = None


class TableCreateUpdateProperties(ArmModel):
    resource: TableResource
    options: CreateUpdateOptions | None = None


class TableCreateUpdateParameters(ArmResourceProperties):
    properties: TableCreateUpdateProperties


class TableListResult(ListResult):
    value: DefaultList[TableGetResults] = Field(default_factory=list)
