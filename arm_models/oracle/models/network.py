from datetime import datetime

from pydantic import Field

from arm_models.core.base import ArmModel, ListResult
from arm_models.oracle.enums import (
    AzureResourceManagerResourceProvisioningState,
    AzureResourceProvisioningState,
    DnsPrivateViewsLifecycleState,
    DnsPrivateZonesLifecycleState,
    VirtualNetworkAddressLifecycleState,
    ZoneType,
)
from arm_models.oracle.models.common import ProxyResource


class DnsPrivateViewProperties(ArmModel):
    ocid: str | None = None
    display_name: str | None = None
    is_protected: bool | None = None
    lifecycle_state: DnsPrivateViewsLifecycleState | None = None
    self_link: str | None = Field(None, alias="self")
    time_created: datetime | None = None
    time_updated: datetime | None = None
    provisioning_state: AzureResourceManagerResourceProvisioningState | None = None


class DnsPrivateView(ProxyResource):
    properties: DnsPrivateViewProperties | None = None


class DnsPrivateViewListResult(ListResult):
    value: list[DnsPrivateView]
    next_link: str | None = None


class DnsPrivateZoneProperties(ArmModel):
    ocid: str | None = None
    is_protected: bool | None = None
    lifecycle_state: DnsPrivateZonesLifecycleState | None = None
    self_link: str | None = Field(None, alias="self")
    serial: int | None = None
    version: str | None = None
    view_id: str | None = None
    zone_type: ZoneType | None = None
    time_created: datetime | None = None
    provisioning_state: AzureResourceManagerResourceProvisioningState | None = None


class DnsPrivateZone(ProxyResource):
    properties: DnsPrivateZoneProperties | None = None


class DnsPrivateZoneListResult(ListResult):
    value: list[DnsPrivateZone]
    next_link: str | None = None


class VirtualNetworkAddressProperties(ArmModel):
    ip_address: str | None = None
    vm_ocid: str | None = None
    ocid: str | None = None
    domain: str | None = None
    lifecycle_details: str | None = None
    provisioning_state: AzureResourceProvisioningState | None = None
    lifecycle_state: VirtualNetworkAddressLifecycleState | None = None
    time_assigned: datetime | None = None


class VirtualNetworkAddress(ProxyResource):
    properties: VirtualNetworkAddressProperties | None = None


class VirtualNetworkAddressListResult(ListResult):
    value: list[VirtualNetworkAddress]
    next_link: str | None = None
