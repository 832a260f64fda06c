from datetime import datetime
from typing import Any

from pydantic import Field

from arm_models.core.base import ArmModel, DefaultList, ListResult
from arm_models.oracle.enums import (
    ActionType,
    CreatedByType,
    DayOfWeekName,
    MonthName,
    Origin,
    PatchingMode,
    Preference,
    ValidationStatus,
)

Ocid = str
Password = str
SubnetId = str
VnetId = str
AutonomousDatabaseId = str
CloudExadataInfrastructureId = str
AclString = str
RetentionPeriod = int


class SystemData(ArmModel):
    created_by: str | None = None
    created_by_type: CreatedByType | None = None
    created_at: datetime | None = None
    last_modified_by: str | None = None
    last_modified_by_type: CreatedByType | None = None
    last_modified_at: datetime | None = None


class Resource(ArmModel):
    id: str | None = None
    name: str | None = None
    type: str | None = None
    system_data: SystemData | None = None


class ProxyResource(Resource):
    pass


class TrackedResource(Resource):
    tags: dict[str, str] | None = None
    location: str


class ErrorAdditionalInfo(ArmModel):
    type: str | None = None
    info: dict[str, Any] | None = None


class ErrorDetail(ArmModel):
    code: str | None = None
    message: str | None = None
    target: str | None = None
    details: DefaultList["ErrorDetail"] = Field(default_factory=list)
    additional_info: DefaultList[ErrorAdditionalInfo] = Field(default_factory=list)


class ErrorResponse(ArmModel):
    error: ErrorDetail | None = None


class OperationDisplay(ArmModel):
    provider: str | None = None
    resource: str | None = None
    operation: str | None = None
    description: str | None = None


class Operation(ArmModel):
    name: str | None = None
    is_data_action: bool | None = None
    display: OperationDisplay | None = None
    origin: Origin | None = None
    action_type: ActionType | None = None


class OperationListResult(ListResult):
    value: DefaultList[Operation] = Field(default_factory=list)
    next_link: str | None = None


class Plan(ArmModel):
    name: str
    publisher: str
    product: str
    promotion_code: str | None = None
    version: str | None = None


class PlanUpdate(ArmModel):
    name: str | None = None
    publisher: str | None = None
    product: str | None = None
    promotion_code: str | None = None
    version: str | None = None


class ValidationError(ArmModel):
    code: str
    message: str


class ValidationResult(ArmModel):
    status: ValidationStatus
    error: ValidationError


class CustomerContact(ArmModel):
    email: str


class DayOfWeek(ArmModel):
    name: DayOfWeekName


class DayOfWeekUpdate(ArmModel):
    name: DayOfWeekName | None = None


class Month(ArmModel):
    name: MonthName


class MaintenanceWindow(ArmModel):
    preference: Preference | None = None
    months: DefaultList[Month] = Field(default_factory=list)
    weeks_of_month: DefaultList[int] = Field(default_factory=list)
    days_of_week: DefaultList[DayOfWeek] = Field(default_factory=list)
    hours_of_day: DefaultList[int] = Field(default_factory=list)
    lead_time_in_weeks: int | None = None
    patching_mode: PatchingMode | None = None
    custom_action_timeout_in_mins: int | None = None
    is_custom_action_timeout_enabled: bool | None = None
    is_monthly_patching_enabled: bool | None = None


class EstimatedPatchingTime(ArmModel):
    estimated_db_server_patching_time: int | None = None
    estimated_network_switches_patching_time: int | None = None
    estimated_storage_server_patching_time: int | None = None
    total_estimated_patching_time: int | None = None
