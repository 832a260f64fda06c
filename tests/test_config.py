import warnings
from pathlib import Path

import pytest

from arm_models.config import (
    COSMOS_API_VERSION,
    DEFAULT_MANAGEMENT_URL,
    ArmSettings,
    decamelize_config,
)


def test_defaults() -> None:
    settings = ArmSettings()

    assert settings.log_level == "INFO"
    assert settings.azure.base_url == DEFAULT_MANAGEMENT_URL
    assert settings.azure.subscription_id is None
    assert settings.cosmos_api_version == COSMOS_API_VERSION
    assert settings.servicebus.queue_name == "arm-models-example"
    assert settings.get_sensitive_fields_data() == set()


def test_nested_environment_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ARM__LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("ARM__AZURE__SUBSCRIPTION_ID", "sub-from-env")
    monkeypatch.setenv("ARM__SERVICEBUS__QUEUE_NAME", "orders")

    settings = ArmSettings()

    assert settings.log_level == "DEBUG"
    assert settings.azure.subscription_id == "sub-from-env"
    assert settings.servicebus.queue_name == "orders"


def test_yaml_file_with_camel_case_keys(tmp_path: Path) -> None:
    (tmp_path / "config.yaml").write_text(
        "logLevel: WARNING\n"
        "azure:\n"
        "  subscriptionId: sub-from-yaml\n"
        "  baseUrl: https://management.usgovcloudapi.net/\n"
        "  clientSecret: s3cr3t\n"
        "servicebus:\n"
        "  connectionString: Endpoint=sb://ns/;SharedAccessKey=abc\n"
    )

    settings = ArmSettings()

    assert settings.log_level == "WARNING"
    assert settings.azure.subscription_id == "sub-from-yaml"
    assert settings.azure.base_url == "https://management.usgovcloudapi.net"
    assert settings.get_sensitive_fields_data() == {
        "s3cr3t",
        "Endpoint=sb://ns/;SharedAccessKey=abc",
    }


def test_environment_overrides_yaml(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "config.yaml").write_text("azure:\n  subscriptionId: sub-from-yaml\n")
    monkeypatch.setenv("ARM__AZURE__SUBSCRIPTION_ID", "sub-from-env")

    assert ArmSettings().azure.subscription_id == "sub-from-env"


def test_secrets_are_hidden_in_repr() -> None:
    settings = ArmSettings(azure={"client_secret": "s3cr3t"})

    assert "s3cr3t" not in repr(settings)
    assert settings.azure.client_secret is not None
    assert settings.azure.client_secret.get_secret_value() == "s3cr3t"


def test_decamelize_keeps_plain_dict_keys() -> None:
    config = decamelize_config(
        ArmSettings, {"azure": {"tenantId": "t"}, "unknownSection": {"keepMe": 1}}
    )

    assert config == {"azure": {"tenant_id": "t"}, "unknown_section": {"keepMe": 1}}


def test_yaml_source_is_registered_without_warnings(tmp_path: Path) -> None:
    (tmp_path / "config.yaml").write_text("azure:\n  tenantId: t\n")

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        settings = ArmSettings()

    assert settings.azure.tenant_id == "t"
    assert not [warning for warning in caught if "yaml" in str(warning.message).lower()]
