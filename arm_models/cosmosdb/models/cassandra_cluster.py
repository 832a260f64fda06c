"""Managed Cassandra clusters (Microsoft.DocumentDB/cassandraClusters)."""

from typing import Any

from pydantic import Field

from arm_models.core.base import ArmModel, DefaultList, ListResult
from arm_models.cosmosdb.enums import AuthenticationMethod, ManagedCassandraProvisioningState
from arm_models.cosmosdb.models.common import ArmProxyResource, ArmResourceProperties


class SeedNode(ArmModel):
    ip_address: str | None = None


class Certificate(ArmModel):
    pem: str | None = None


class ClusterResourceProperties(ArmModel):
    provisioning_state: ManagedCassandraProvisioningState | None = None
    restore_from_backup_id: str | None = None
    delegated_management_subnet_id: str | None = None
    cassandra_version: str | None = None
    cluster_name_override: str | None = None
    authentication_method: AuthenticationMethod | None = None
    initial_cassandra_admin_password: str | None = None
    hours_between_backups: int | None = None
    prometheus_endpoint: SeedNode | None = None
    repair_enabled: bool | None = None
    client_certificates: DefaultList[Certificate] = Field(default_factory=list)
    external_gossip_certificates: DefaultList[Certificate] = Field(default_factory=list)
    gossip_certificates: DefaultList[Certificate] = Field(default_factory=list)
    external_seed_nodes: DefaultList[SeedNode] = Field(default_factory=list)
    seed_nodes: DefaultList[SeedNode] = Field(default_factory=list)


class ClusterResource(ArmResourceProperties):
    properties: ClusterResourceProperties | None = None


class ListClusters(ListResult):
    value: DefaultList[ClusterResource] = Field(default_factory=list)


class DataCenterResourceProperties(ArmModel):
    provisioning_state: ManagedCassandraProvisioningState | None = None
    data_center_location: str | None = None
    delegated_subnet_id: str | None = None
    node_count: int | None = None
    seed_nodes: DefaultList[SeedNode] = Field(default_factory=list)
    base64_encoded_cassandra_yaml_fragment: str | None = Field(
        None, alias="base64EncodedCassandraYamlFragment"
    )


class DataCenterResource(ArmProxyResource):
    properties: DataCenterResourceProperties | None = None


class ListDataCenters(ListResult):
    value: DefaultList[DataCenterResource] = Field(default_factory=list)


class ClusterNodeStatus(ArmModel):
    nodes: DefaultList[dict[str, Any]] = Field(default_factory=list)


class RepairPostBody(ArmModel):
    keyspace: str
    tables: DefaultList[str] = Field(default_factory=list)
