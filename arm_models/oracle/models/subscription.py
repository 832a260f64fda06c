from datetime import datetime

from arm_models.core.base import ArmModel, ListResult
from arm_models.oracle.enums import (
    CloudAccountProvisioningState,
    Intent,
    OracleSubscriptionProvisioningState,
)
from arm_models.oracle.models.common import Plan, PlanUpdate, ProxyResource


class ActivationLinks(ArmModel):
    new_cloud_account_activation_link: str | None = None
    existing_cloud_account_activation_link: str | None = None


class CloudAccountDetails(ArmModel):
    cloud_account_name: str | None = None
    cloud_account_home_region: str | None = None


class SaasSubscriptionDetails(ArmModel):
    id: str | None = None
    subscription_name: str | None = None
    time_created: datetime | None = None
    offer_id: str | None = None
    plan_id: str | None = None
    saas_subscription_status: str | None = None
    publisher_id: str | None = None
    purchaser_email_id: str | None = None
    purchaser_tenant_id: str | None = None
    term_unit: str | None = None
    is_auto_renew: bool | None = None
    is_free_trial: bool | None = None


class OracleSubscriptionProperties(ArmModel):
    provisioning_state: OracleSubscriptionProvisioningState | None = None
    saas_subscription_id: str | None = None
    cloud_account_id: str | None = None
    cloud_account_state: CloudAccountProvisioningState | None = None
    term_unit: str | None = None
    product_code: str | None = None
    intent: Intent | None = None


class OracleSubscription(ProxyResource):
    properties: OracleSubscriptionProperties | None = None
    plan: Plan | None = None


class OracleSubscriptionListResult(ListResult):
    value: list[OracleSubscription]
    next_link: str | None = None


class OracleSubscriptionUpdateProperties(ArmModel):
    product_code: str | None = None
    intent: Intent | None = None


class OracleSubscriptionUpdate(ArmModel):
    plan: PlanUpdate | None = None
    properties: OracleSubscriptionUpdateProperties | None = None
