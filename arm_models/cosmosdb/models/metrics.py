from datetime import datetime

from pydantic import Field

from arm_models.core.base import ArmModel, DefaultList, ListResult
from arm_models.cosmosdb.enums import PrimaryAggregationType, UnitType


class MetricName(ArmModel):
    value: str | None = None
    localized_value: str | None = None


class MetricValue(ArmModel):
    count: float | None = Field(None, alias="_count")
    average: float | None = None
    maximum: float | None = None
    minimum: float | None = None
    timestamp: datetime | None = None
    total: float | None = None


class Metric(ArmModel):
    start_time: datetime | None = None
    end_time: datetime | None = None
    time_grain: str | None = None
    unit: UnitType | None = None
    name: MetricName | None = None
    metric_values: DefaultList[MetricValue] = Field(default_factory=list)


class MetricListResult(ListResult):
    value: DefaultList[Metric] = Field(default_factory=list)


class MetricAvailability(ArmModel):
    time_grain: str | None = None
    retention: str | None = None


class MetricDefinition(ArmModel):
    metric_availabilities: DefaultList[MetricAvailability] = Field(default_factory=list)
    primary_aggregation_type: PrimaryAggregationType | None = None
    unit: UnitType | None = None
    resource_uri: str | None = None
    name: MetricName | None = None


class MetricDefinitionsListResult(ListResult):
    value: DefaultList[MetricDefinition] = Field(default_factory=list)


class PartitionMetric(Metric):
    partition_id: str | None = None
    partition_key_range_id: str | None = None


class PartitionMetricListResult(ListResult):
    value: DefaultList[PartitionMetric] = Field(default_factory=list)


class PercentileMetricValue(MetricValue):
    p10: float | None = Field(None, alias="P10")
    p25: float | None = Field(None, alias="P25")
    p50: float | None = Field(None, alias="P50")
    p75: float | None = Field(None, alias="P75")
    p90: float | None = Field(None, alias="P90")
    p95: float | None = Field(None, alias="P95")
    p99: float | None = Field(None, alias="P99")


class PercentileMetric(ArmModel):
    start_time: datetime | None = None
    end_time: datetime | None = None
    time_grain: str | None = None
    unit: UnitType | None = None
    name: MetricName | None = None
    metric_values: DefaultList[PercentileMetricValue] = Field(default_factory=list)


class PercentileMetricListResult(ListResult):
    value: DefaultList[PercentileMetric] = Field(default_factory=list)


class Usage(ArmModel):
    unit: UnitType | None = None
    name: MetricName | None = None
    quota_period: str | None = None
    limit: int | None = None
    current_value: int | None = None


class UsagesResult(ListResult):
    value: DefaultList[Usage] = Field(default_factory=list)


class PartitionUsage(Usage):
    partition_id: str | None = None
    partition_key_range_id: str | None = None


class PartitionUsagesResult(ListResult):
    value: DefaultList[PartitionUsage] = Field(default_factory=list)
