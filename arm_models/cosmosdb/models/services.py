from pydantic import Field

from arm_models.core.base import ArmModel, DefaultList, ListResult
from arm_models.cosmosdb.enums import BackupStorageRedundancy
from arm_models.cosmosdb.models.common import ArmProxyResource, ProxyResource


class PrivateEndpointProperty(ArmModel):
    id: str | None = None


class PrivateLinkServiceConnectionStateProperty(ArmModel):
    status: str | None = None
    description: str | None = None
    actions_required: str | None = None


class PrivateEndpointConnectionProperties(ArmModel):
    private_endpoint: PrivateEndpointProperty | None = None
    private_link_service_connection_state: PrivateLinkServiceConnectionStateProperty | None = None
    group_id: str | None = None
    provisioning_state: str | None = None


class PrivateEndpointConnection(ProxyResource):
    properties: PrivateEndpointConnectionProperties | None = None


class PrivateEndpointConnectionListResult(ListResult):
    value: DefaultList[PrivateEndpointConnection] = Field(default_factory=list)


class PrivateLinkResourceProperties(ArmModel):
    group_id: str | None = None
    required_members: DefaultList[str] = Field(default_factory=list)
    required_zone_names: DefaultList[str] = Field(default_factory=list)


class PrivateLinkResource(ArmProxyResource):
    properties: PrivateLinkResourceProperties | None = None


class PrivateLinkResourceListResult(ListResult):
    value: DefaultList[PrivateLinkResource] = Field(default_factory=list)


class NotebookWorkspaceProperties(ArmModel):
    notebook_server_endpoint: str | None = None
    status: str | None = None


class NotebookWorkspace(ArmProxyResource):
    properties: NotebookWorkspaceProperties | None = None


class NotebookWorkspaceCreateUpdateParameters(ArmProxyResource):
    pass


class NotebookWorkspaceListResult(ListResult):
    value: DefaultList[NotebookWorkspace] = Field(default_factory=list)


class NotebookWorkspaceConnectionInfoResult(ArmModel):
    auth_token: str | None = None
    notebook_server_endpoint: str | None = None


class LocationProperties(ArmModel):
    status: str | None = None
    supports_availability_zone: bool | None = None
    is_residency_restricted: bool | None = None
    backup_storage_redundancies: DefaultList[BackupStorageRedundancy] = Field(default_factory=list)


class LocationGetResult(ArmProxyResource):
    properties: LocationProperties | None = None


class LocationListResult(ListResult):
    value: DefaultList[LocationGetResult] = Field(default_factory=list)
