from typing import Any

from humps import decamelize
from pydantic import BaseModel, Field, SecretStr, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

from arm_models.logger_setup import LogLevelType

DEFAULT_MANAGEMENT_URL = "https://management.azure.com"
COSMOS_API_VERSION = "2021-04-01-preview"
ORACLE_API_VERSION = "2023-09-01-preview"


def decamelize_config(settings_model: type[BaseModel] | None, config: dict[str, Any]) -> dict[str, Any]:
    """
    Normalize the config yaml file to snake_case keys.

    Only keys of declared nested models are recursed into; values of plain
    dict fields keep their keys as written.
    """
    result = {}
    for key, value in config.items():
        decamelized_key = decamelize(key)
        field = settings_model.model_fields.get(decamelized_key) if settings_model else None
        annotation = field.annotation if field else None
        if (
            isinstance(value, dict)
            and isinstance(annotation, type)
            and issubclass(annotation, BaseModel)
        ):
            result[decamelized_key] = decamelize_config(annotation, value)
        else:
            result[decamelized_key] = value
    return result


class CamelCaseYamlConfigSource(YamlConfigSettingsSource):
    """`config.yaml` source that accepts camelCase keys."""

    def __call__(self) -> dict[str, Any]:
        return decamelize_config(self.settings_cls, super().__call__())


class AzureSettings(BaseModel):
    base_url: str = DEFAULT_MANAGEMENT_URL
    tenant_id: str | None = None
    client_id: str | None = None
    client_secret: SecretStr | None = None
    subscription_id: str | None = None
    timeout: float = 60

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


class ServiceBusSettings(BaseModel):
    connection_string: SecretStr | None = None
    fully_qualified_namespace: str | None = None
    queue_name: str = "arm-models-example"


class ArmSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="ARM__",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        yaml_file="config.yaml",
        yaml_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: LogLevelType = "INFO"
    azure: AzureSettings = Field(default_factory=AzureSettings)
    cosmos_api_version: str = COSMOS_API_VERSION
    oracle_api_version: str = ORACLE_API_VERSION
    servicebus: ServiceBusSettings = Field(default_factory=ServiceBusSettings)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            CamelCaseYamlConfigSource(settings_cls),
        )

    def get_sensitive_fields_data(self) -> set[str]:
        secrets = (self.azure.client_secret, self.servicebus.connection_string)
        return {secret.get_secret_value() for secret in secrets if secret}
