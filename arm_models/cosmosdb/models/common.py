from datetime import datetime
from typing import Any

from pydantic import Field

from arm_models.core.base import ArmModel, DefaultList, ListResult
from arm_models.cosmosdb.enums import CreatedByType, ResourceIdentityType

Tags = dict[str, str]
ProvisioningState = str
CollectionName = str
Key = str
Path = str


class SystemData(ArmModel):
    created_by: str | None = None
    created_by_type: CreatedByType | None = None
    created_at: datetime | None = None
    last_modified_by: str | None = None
    last_modified_by_type: CreatedByType | None = None
    last_modified_at: datetime | None = None


class ManagedServiceIdentity(ArmModel):
    principal_id: str | None = None
    tenant_id: str | None = None
    type: ResourceIdentityType | None = None
    user_assigned_identities: dict[str, Any] | None = None


class ArmProxyResource(ArmModel):
    id: str | None = None
    name: str | None = None
    type: str | None = None


class ArmResourceProperties(ArmModel):
    id: str | None = None
    name: str | None = None
    type: str | None = None
    location: str | None = None
    tags: Tags | None = None
    identity: ManagedServiceIdentity | None = None


class Resource(ArmModel):
    id: str | None = None
    name: str | None = None
    type: str | None = None


class ProxyResource(Resource):
    pass


class ExtendedResourceProperties(ArmModel):
    """System generated properties returned next to a resource body."""

    rid: str | None = Field(None, alias="_rid")
    ts: float | None = Field(None, alias="_ts")
    etag: str | None = Field(None, alias="_etag")


class ErrorResponse(ArmModel):
    code: str | None = None
    message: str | None = None


class CloudError(ArmModel):
    error: ErrorResponse | None = None


class OperationDisplay(ArmModel):
    provider: str | None = Field(None, alias="Provider")
    resource: str | None = Field(None, alias="Resource")
    operation: str | None = Field(None, alias="Operation")
    description: str | None = Field(None, alias="Description")


class Operation(ArmModel):
    name: str | None = None
    display: OperationDisplay | None = None


class OperationListResult(ListResult):
    value: DefaultList[Operation] = Field(default_factory=list)
    next_link: str | None = None


class Capability(ArmModel):
    name: str | None = None
