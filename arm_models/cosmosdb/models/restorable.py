"""Deleted or point-in-time restorable accounts and the resources inside them."""

from datetime import datetime

from pydantic import Field

from arm_models.core.base import ArmModel, DefaultList, ListResult
from arm_models.cosmosdb.enums import ApiType, OperationType
from arm_models.cosmosdb.models.database_account import DatabaseRestoreResource
from arm_models.cosmosdb.models.resources import (
    SqlContainerGetPropertiesResource,
    SqlDatabaseGetPropertiesResource,
)


class RestorableLocationResource(ArmModel):
    location_name: str | None = None
    regional_database_account_instance_id: str | None = None
    creation_time: datetime | None = None
    deletion_time: datetime | None = None


class RestorableDatabaseAccountProperties(ArmModel):
    account_name: str | None = None
    creation_time: datetime | None = None
    deletion_time: datetime | None = None
    api_type: ApiType | None = None
    restorable_locations: DefaultList[RestorableLocationResource] = Field(default_factory=list)


class RestorableDatabaseAccountGetResult(ArmModel):
    properties: RestorableDatabaseAccountProperties | None = None
    id: str | None = None
    name: str | None = None
    type: str | None = None
    location: str | None = None


class RestorableDatabaseAccountsListResult(ListResult):
    value: DefaultList[RestorableDatabaseAccountGetResult] = Field(default_factory=list)


class RestorableEventResource(ArmModel):
    """Change feed event of a restorable database or container."""

    rid: str | None = Field(None, alias="_rid")
    operation_type: OperationType | None = None
    event_timestamp: str | None = None
    owner_id: str | None = None
    owner_resource_id: str | None = None


class RestorableSqlDatabase(SqlDatabaseGetPropertiesResource):
    self_link: str | None = Field(None, alias="_self")


class RestorableSqlDatabasePropertiesResource(RestorableEventResource):
    database: RestorableSqlDatabase | None = None


class RestorableSqlDatabaseProperties(ArmModel):
    resource: RestorableSqlDatabasePropertiesResource | None = None


class RestorableSqlDatabaseGetResult(ArmModel):
    properties: RestorableSqlDatabaseProperties | None = None
    id: str | None = None
    name: str | None = None
    type: str | None = None


class RestorableSqlDatabasesListResult(ListResult):
    value: DefaultList[RestorableSqlDatabaseGetResult] = Field(default_factory=list)


class RestorableSqlContainer(SqlContainerGetPropertiesResource):
    self_link: str | None = Field(None, alias="_self")


class RestorableSqlContainerPropertiesResource(RestorableEventResource):
    container: RestorableSqlContainer | None = None


class RestorableSqlContainerProperties(ArmModel):
    resource: RestorableSqlContainerPropertiesResource | None = None


class RestorableSqlContainerGetResult(ArmModel):
    properties: RestorableSqlContainerProperties | None = None
    id: str | None = None
    name: str | None = None
    type: str | None = None


class RestorableSqlContainersListResult(ListResult):
    value: DefaultList[RestorableSqlContainerGetResult] = Field(default_factory=list)


class RestorableMongodbDatabaseProperties(ArmModel):
    resource: RestorableEventResource | None = None


class RestorableMongodbDatabaseGetResult(ArmModel):
    properties: RestorableMongodbDatabaseProperties | None = None
    id: str | None = None
    name: str | None = None
    type: str | None = None


class RestorableMongodbDatabasesListResult(ListResult):
    value: DefaultList[RestorableMongodbDatabaseGetResult] = Field(default_factory=list)


class RestorableMongodbCollectionProperties(ArmModel):
    resource: RestorableEventResource | None = None


class RestorableMongodbCollectionGetResult(ArmModel):
    properties: RestorableMongodbCollectionProperties | None = None
    id: str | None = None
    name: str | None = None
    type: str | None = None


class RestorableMongodbCollectionsListResult(ListResult):
    value: DefaultList[RestorableMongodbCollectionGetResult] = Field(default_factory=list)


class RestorableSqlResourcesListResult(ListResult):
    value: DefaultList[DatabaseRestoreResource] = Field(default_factory=list)


class RestorableMongodbResourcesListResult(ListResult):
    value: DefaultList[DatabaseRestoreResource] = Field(default_factory=list)
