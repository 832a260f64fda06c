from typing import Any
from urllib.parse import quote

from arm_models.clients.operations import ResourceOperations, ThroughputOperationsMixin
from arm_models.clients.rest_client import ArmRestClient
from arm_models.config import COSMOS_API_VERSION
from arm_models.cosmosdb.models import (
    BackupResource,
    CassandraKeyspaceGetResults,
    CassandraKeyspaceListResult,
    CassandraTableGetResults,
    CassandraTableListResult,
    ClusterNodeStatus,
    ClusterResource,
    DataCenterResource,
    DatabaseAccountGetResults,
    DatabaseAccountListConnectionStringsResult,
    DatabaseAccountListKeysResult,
    DatabaseAccountListReadOnlyKeysResult,
    DatabaseAccountRegenerateKeyParameters,
    DatabaseAccountsListResult,
    FailoverPolicies,
    GremlinDatabaseGetResults,
    GremlinDatabaseListResult,
    GremlinGraphGetResults,
    GremlinGraphListResult,
    ListBackups,
    ListClusters,
    ListDataCenters,
    LocationGetResult,
    LocationListResult,
    MetricDefinitionsListResult,
    MetricListResult,
    MongoDbCollectionGetResults,
    MongoDbCollectionListResult,
    MongoDbDatabaseGetResults,
    MongoDbDatabaseListResult,
    NotebookWorkspace,
    NotebookWorkspaceConnectionInfoResult,
    NotebookWorkspaceListResult,
    Operation,
    OperationListResult,
    PrivateEndpointConnection,
    PrivateEndpointConnectionListResult,
    PrivateLinkResource,
    PrivateLinkResourceListResult,
    RegionForOnlineOffline,
    RepairPostBody,
    RestorableDatabaseAccountGetResult,
    RestorableDatabaseAccountsListResult,
    RestorableMongodbCollectionsListResult,
    RestorableMongodbDatabasesListResult,
    RestorableMongodbResourcesListResult,
    RestorableSqlContainersListResult,
    RestorableSqlDatabasesListResult,
    RestorableSqlResourcesListResult,
    SqlContainerGetResults,
    SqlContainerListResult,
    SqlDatabaseGetResults,
    SqlDatabaseListResult,
    SqlRoleAssignmentGetResults,
    SqlRoleAssignmentListResult,
    SqlRoleDefinitionGetResults,
    SqlRoleDefinitionListResult,
    SqlStoredProcedureGetResults,
    SqlStoredProcedureListResult,
    SqlTriggerGetResults,
    SqlTriggerListResult,
    SqlUserDefinedFunctionGetResults,
    SqlUserDefinedFunctionListResult,
    TableGetResults,
    TableListResult,
    ThroughputSettingsGetResults,
    UsagesResult,
)

PROVIDER = "/subscriptions/{subscription_id}/resourceGroups/{resource_group}/providers/Microsoft.DocumentDB"
SUBSCRIPTION_PROVIDER = "/subscriptions/{subscription_id}/providers/Microsoft.DocumentDB"
ACCOUNT = PROVIDER + "/databaseAccounts/{account_name}"
CLUSTER = PROVIDER + "/cassandraClusters/{cluster_name}"
RESTORABLE_ACCOUNT = (
    SUBSCRIPTION_PROVIDER + "/locations/{location}/restorableDatabaseAccounts/{instance_id}"
)


class DatabaseAccountOperations(
    ResourceOperations[DatabaseAccountGetResults, DatabaseAccountsListResult]
):
    resource_path = ACCOUNT
    subscription_collection_path = SUBSCRIPTION_PROVIDER + "/databaseAccounts"
    model = DatabaseAccountGetResults
    list_model = DatabaseAccountsListResult

    async def list_keys(self, **segments: Any) -> DatabaseAccountListKeysResult:
        return await self.action("listKeys", None, DatabaseAccountListKeysResult, **segments)

    async def list_read_only_keys(
        self, **segments: Any
    ) -> DatabaseAccountListReadOnlyKeysResult:
        return await self.action(
            "readonlykeys", None, DatabaseAccountListReadOnlyKeysResult, **segments
        )

    async def list_connection_strings(
        self, **segments: Any
    ) -> DatabaseAccountListConnectionStringsResult:
        return await self.action(
            "listConnectionStrings",
            None,
            DatabaseAccountListConnectionStringsResult,
            **segments,
        )

    async def regenerate_key(
        self, body: DatabaseAccountRegenerateKeyParameters, **segments: Any
    ) -> None:
        await self.action("regenerateKey", body, **segments)

    async def failover_priority_change(
        self, body: FailoverPolicies, **segments: Any
    ) -> None:
        await self.action("failoverPriorityChange", body, **segments)

    async def offline_region(self, body: RegionForOnlineOffline, **segments: Any) -> None:
        await self.action("offlineRegion", body, **segments)

    async def online_region(self, body: RegionForOnlineOffline, **segments: Any) -> None:
        await self.action("onlineRegion", body, **segments)

    async def list_usages(
        self, filter: str | None = None, **segments: Any
    ) -> UsagesResult:
        params = {"$filter": filter} if filter else None
        return await self.action("usages", None, UsagesResult, "GET", params, **segments)

    async def list_metrics(self, filter: str, **segments: Any) -> MetricListResult:
        return await self.action(
            "metrics", None, MetricListResult, "GET", {"$filter": filter}, **segments
        )

    async def list_metric_definitions(
        self, **segments: Any
    ) -> MetricDefinitionsListResult:
        return await self.action(
            "metricDefinitions", None, MetricDefinitionsListResult, "GET", **segments
        )


class SqlDatabaseOperations(
    ThroughputOperationsMixin,
    ResourceOperations[SqlDatabaseGetResults, SqlDatabaseListResult],
):
    resource_path = ACCOUNT + "/sqlDatabases/{database_name}"
    model = SqlDatabaseGetResults
    list_model = SqlDatabaseListResult
    throughput_model = ThroughputSettingsGetResults


class SqlContainerOperations(
    ThroughputOperationsMixin,
    ResourceOperations[SqlContainerGetResults, SqlContainerListResult],
):
    resource_path = ACCOUNT + "/sqlDatabases/{database_name}/containers/{container_name}"
    model = SqlContainerGetResults
    list_model = SqlContainerListResult
    throughput_model = ThroughputSettingsGetResults


class SqlStoredProcedureOperations(
    ResourceOperations[SqlStoredProcedureGetResults, SqlStoredProcedureListResult]
):
    resource_path = (
        ACCOUNT
        + "/sqlDatabases/{database_name}/containers/{container_name}"
        + "/storedProcedures/{stored_procedure_name}"
    )
    model = SqlStoredProcedureGetResults
    list_model = SqlStoredProcedureListResult


class SqlTriggerOperations(ResourceOperations[SqlTriggerGetResults, SqlTriggerListResult]):
    resource_path = (
        ACCOUNT
        + "/sqlDatabases/{database_name}/containers/{container_name}/triggers/{trigger_name}"
    )
    model = SqlTriggerGetResults
    list_model = SqlTriggerListResult


class SqlUserDefinedFunctionOperations(
    ResourceOperations[SqlUserDefinedFunctionGetResults, SqlUserDefinedFunctionListResult]
):
    resource_path = (
        ACCOUNT
        + "/sqlDatabases/{database_name}/containers/{container_name}"
        + "/userDefinedFunctions/{function_name}"
    )
    model = SqlUserDefinedFunctionGetResults
    list_model = SqlUserDefinedFunctionListResult


class SqlRoleDefinitionOperations(
    ResourceOperations[SqlRoleDefinitionGetResults, SqlRoleDefinitionListResult]
):
    resource_path = ACCOUNT + "/sqlRoleDefinitions/{role_definition_id}"
    model = SqlRoleDefinitionGetResults
    list_model = SqlRoleDefinitionListResult


class SqlRoleAssignmentOperations(
    ResourceOperations[SqlRoleAssignmentGetResults, SqlRoleAssignmentListResult]
):
    resource_path = ACCOUNT + "/sqlRoleAssignments/{role_assignment_id}"
    model = SqlRoleAssignmentGetResults
    list_model = SqlRoleAssignmentListResult


class MongoDbDatabaseOperations(
    ThroughputOperationsMixin,
    ResourceOperations[MongoDbDatabaseGetResults, MongoDbDatabaseListResult],
):
    resource_path = ACCOUNT + "/mongodbDatabases/{database_name}"
    model = MongoDbDatabaseGetResults
    list_model = MongoDbDatabaseListResult
    throughput_model = ThroughputSettingsGetResults


class MongoDbCollectionOperations(
    ThroughputOperationsMixin,
    ResourceOperations[MongoDbCollectionGetResults, MongoDbCollectionListResult],
):
    resource_path = ACCOUNT + "/mongodbDatabases/{database_name}/collections/{collection_name}"
    model = MongoDbCollectionGetResults
    list_model = MongoDbCollectionListResult
    throughput_model = ThroughputSettingsGetResults


class CassandraKeyspaceOperations(
    ThroughputOperationsMixin,
    ResourceOperations[CassandraKeyspaceGetResults, CassandraKeyspaceListResult],
):
    resource_path = ACCOUNT + "/cassandraKeyspaces/{keyspace_name}"
    model = CassandraKeyspaceGetResults
    list_model = CassandraKeyspaceListResult
    throughput_model = ThroughputSettingsGetResults


class CassandraTableOperations(
    ThroughputOperationsMixin,
    ResourceOperations[CassandraTableGetResults, CassandraTableListResult],
):
    resource_path = ACCOUNT + "/cassandraKeyspaces/{keyspace_name}/tables/{table_name}"
    model = CassandraTableGetResults
    list_model = CassandraTableListResult
    throughput_model = ThroughputSettingsGetResults


class GremlinDatabaseOperations(
    ThroughputOperationsMixin,
    ResourceOperations[GremlinDatabaseGetResults, GremlinDatabaseListResult],
):
    resource_path = ACCOUNT + "/gremlinDatabases/{database_name}"
    model = GremlinDatabaseGetResults
    list_model = GremlinDatabaseListResult
    throughput_model = ThroughputSettingsGetResults


class GremlinGraphOperations(
    ThroughputOperationsMixin,
    ResourceOperations[GremlinGraphGetResults, GremlinGraphListResult],
):
    resource_path = ACCOUNT + "/gremlinDatabases/{database_name}/graphs/{graph_name}"
    model = GremlinGraphGetResults
    list_model = GremlinGraphListResult
    throughput_model = ThroughputSettingsGetResults


class TableOperations(
    ThroughputOperationsMixin,
    ResourceOperations[TableGetResults, TableListResult],
):
    resource_path = ACCOUNT + "/tables/{table_name}"
    model = TableGetResults
    list_model = TableListResult
    throughput_model = ThroughputSettingsGetResults


class NotebookWorkspaceOperations(
    ResourceOperations[NotebookWorkspace, NotebookWorkspaceListResult]
):
    # the service only accepts the "default" workspace name
    resource_path = ACCOUNT + "/notebookWorkspaces/default"
    model = NotebookWorkspace
    list_model = NotebookWorkspaceListResult

    async def list_connection_info(
        self, **segments: Any
    ) -> NotebookWorkspaceConnectionInfoResult:
        return await self.action(
            "listConnectionInfo", None, NotebookWorkspaceConnectionInfoResult, **segments
        )

    async def regenerate_auth_token(self, **segments: Any) -> None:
        await self.action("regenerateAuthToken", **segments)

    async def start(self, **segments: Any) -> None:
        await self.action("start", **segments)


class PrivateEndpointConnectionOperations(
    ResourceOperations[PrivateEndpointConnection, PrivateEndpointConnectionListResult]
):
    resource_path = ACCOUNT + "/privateEndpointConnections/{private_endpoint_connection_name}"
    model = PrivateEndpointConnection
    list_model = PrivateEndpointConnectionListResult


class PrivateLinkResourceOperations(
    ResourceOperations[PrivateLinkResource, PrivateLinkResourceListResult]
):
    resource_path = ACCOUNT + "/privateLinkResources/{group_name}"
    model = PrivateLinkResource
    list_model = PrivateLinkResourceListResult


class CassandraClusterOperations(ResourceOperations[ClusterResource, ListClusters]):
    resource_path = CLUSTER
    subscription_collection_path = SUBSCRIPTION_PROVIDER + "/cassandraClusters"
    model = ClusterResource
    list_model = ListClusters

    async def request_repair(self, body: RepairPostBody, **segments: Any) -> None:
        await self.action("repair", body, **segments)

    async def fetch_node_status(self, **segments: Any) -> ClusterNodeStatus:
        return await self.action("fetchNodeStatus", None, ClusterNodeStatus, **segments)

    async def list_backups(self, **segments: Any) -> ListBackups:
        return await self.action("backups", None, ListBackups, "GET", **segments)

    async def get_backup(self, backup_id: str, **segments: Any) -> BackupResource:
        return await self.action(
            f"backups/{quote(backup_id, safe='')}", None, BackupResource, "GET", **segments
        )


class CassandraDataCenterOperations(ResourceOperations[DataCenterResource, ListDataCenters]):
    resource_path = CLUSTER + "/dataCenters/{data_center_name}"
    model = DataCenterResource
    list_model = ListDataCenters


class RestorableDatabaseAccountOperations(
    ResourceOperations[RestorableDatabaseAccountGetResult, RestorableDatabaseAccountsListResult]
):
    """Restorable accounts and the databases/containers/collections they can restore."""

    resource_path = RESTORABLE_ACCOUNT
    collection_path = SUBSCRIPTION_PROVIDER + "/locations/{location}/restorableDatabaseAccounts"
    subscription_collection_path = SUBSCRIPTION_PROVIDER + "/restorableDatabaseAccounts"
    scope_segment = "location"
    model = RestorableDatabaseAccountGetResult
    list_model = RestorableDatabaseAccountsListResult

    async def list_sql_databases(self, **segments: Any) -> RestorableSqlDatabasesListResult:
        return await self.action(
            "restorableSqlDatabases", None, RestorableSqlDatabasesListResult, "GET", **segments
        )

    async def list_sql_containers(
        self,
        restorable_sql_database_rid: str | None = None,
        start_time: str | None = None,
        end_time: str | None = None,
        **segments: Any,
    ) -> RestorableSqlContainersListResult:
        params = {
            key: value
            for key, value in {
                "restorableSqlDatabaseRid": restorable_sql_database_rid,
                "startTime": start_time,
                "endTime": end_time,
            }.items()
            if value
        }
        return await self.action(
            "restorableSqlContainers",
            None,
            RestorableSqlContainersListResult,
            "GET",
            params,
            **segments,
        )

    async def list_sql_resources(
        self,
        restore_location: str | None = None,
        restore_timestamp_in_utc: str | None = None,
        **segments: Any,
    ) -> RestorableSqlResourcesListResult:
        return await self.action(
            "restorableSqlResources",
            None,
            RestorableSqlResourcesListResult,
            "GET",
            _restore_point_params(restore_location, restore_timestamp_in_utc),
            **segments,
        )

    async def list_mongodb_databases(
        self, **segments: Any
    ) -> RestorableMongodbDatabasesListResult:
        return await self.action(
            "restorableMongodbDatabases",
            None,
            RestorableMongodbDatabasesListResult,
            "GET",
            **segments,
        )

    async def list_mongodb_collections(
        self, restorable_mongodb_database_rid: str | None = None, **segments: Any
    ) -> RestorableMongodbCollectionsListResult:
        params = (
            {"restorableMongodbDatabaseRid": restorable_mongodb_database_rid}
            if restorable_mongodb_database_rid
            else None
        )
        return await self.action(
            "restorableMongodbCollections",
            None,
            RestorableMongodbCollectionsListResult,
            "GET",
            params,
            **segments,
        )

    async def list_mongodb_resources(
        self,
        restore_location: str | None = None,
        restore_timestamp_in_utc: str | None = None,
        **segments: Any,
    ) -> RestorableMongodbResourcesListResult:
        return await self.action(
            "restorableMongodbResources",
            None,
            RestorableMongodbResourcesListResult,
            "GET",
            _restore_point_params(restore_location, restore_timestamp_in_utc),
            **segments,
        )


def _restore_point_params(
    restore_location: str | None, restore_timestamp_in_utc: str | None
) -> dict[str, str]:
    params = {}
    if restore_location:
        params["restoreLocation"] = restore_location
    if restore_timestamp_in_utc:
        params["restoreTimestampInUtc"] = restore_timestamp_in_utc
    return params


class LocationOperations(ResourceOperations[LocationGetResult, LocationListResult]):
    resource_path = SUBSCRIPTION_PROVIDER + "/locations/{location}"
    model = LocationGetResult
    list_model = LocationListResult


class OperationOperations(ResourceOperations[Operation, OperationListResult]):
    resource_path = "/providers/Microsoft.DocumentDB/operations/{name}"
    collection_path = "/providers/Microsoft.DocumentDB/operations"
    model = Operation
    list_model = OperationListResult


class CosmosDBManagementClient:
    """Operation groups of the Microsoft.DocumentDB resource provider for one subscription."""

    def __init__(
        self,
        client: ArmRestClient,
        subscription_id: str,
        api_version: str = COSMOS_API_VERSION,
    ) -> None:
        self.client = client
        args = (client, subscription_id, api_version)
        self.database_accounts = DatabaseAccountOperations(*args)
        self.sql_databases = SqlDatabaseOperations(*args)
        self.sql_containers = SqlContainerOperations(*args)
        self.sql_stored_procedures = SqlStoredProcedureOperations(*args)
        self.sql_triggers = SqlTriggerOperations(*args)
        self.sql_user_defined_functions = SqlUserDefinedFunctionOperations(*args)
        self.sql_role_definitions = SqlRoleDefinitionOperations(*args)
        self.sql_role_assignments = SqlRoleAssignmentOperations(*args)
        self.mongodb_databases = MongoDbDatabaseOperations(*args)
        self.mongodb_collections = MongoDbCollectionOperations(*args)
        self.cassandra_keyspaces = CassandraKeyspaceOperations(*args)
        self.cassandra_tables = CassandraTableOperations(*args)
        self.gremlin_databases = GremlinDatabaseOperations(*args)
        self.gremlin_graphs = GremlinGraphOperations(*args)
        self.tables = TableOperations(*args)
        self.notebook_workspaces = NotebookWorkspaceOperations(*args)
        self.private_endpoint_connections = PrivateEndpointConnectionOperations(*args)
        self.private_link_resources = PrivateLinkResourceOperations(*args)
        self.cassandra_clusters = CassandraClusterOperations(*args)
        self.cassandra_data_centers = CassandraDataCenterOperations(*args)
        self.restorable_database_accounts = RestorableDatabaseAccountOperations(*args)
        self.locations = LocationOperations(*args)
        self.operations = OperationOperations(*args)

    async def close(self) -> None:
        await self.client.close()

    async def __aenter__(self) -> "CosmosDBManagementClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()
