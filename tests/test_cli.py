from typing import Any, AsyncIterator

import pytest
from click.testing import CliRunner

from arm_models import __version__, cli
from arm_models.cosmosdb.models import DatabaseAccountGetResults
from arm_models.errors import MissingAzureCredentialsError
from arm_models.factory import ArmClientType


class _FakeGroup:
    def __init__(self, items: list[Any]) -> None:
        self.items = items
        self.calls: list[dict[str, Any]] = []

    async def list_all(self, **segments: Any) -> AsyncIterator[Any]:
        self.calls.append(segments)
        for item in self.items:
            yield item


class _FakeClient:
    def __init__(self, **groups: _FakeGroup) -> None:
        for name, group in groups.items():
            setattr(self, name, group)
        self.closed = False

    async def __aenter__(self) -> "_FakeClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        self.closed = True


@pytest.fixture(autouse=True)
def quiet_logger(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli, "setup_logger", lambda *args: None)


def test_version() -> None:
    runner = CliRunner()

    short = runner.invoke(cli.cli_start, ["version", "-s"])
    full = runner.invoke(cli.cli_start, ["version"])

    assert short.exit_code == 0
    assert short.output.strip() == __version__
    assert f"arm-models version: {__version__}" in full.output


def test_list_accounts(monkeypatch: pytest.MonkeyPatch) -> None:
    accounts = _FakeGroup(
        [
            DatabaseAccountGetResults.from_wire(
                {
                    "name": "ddb1",
                    "location": "West US",
                    "kind": "GlobalDocumentDB",
                    "properties": {"provisioningState": "Succeeded"},
                }
            )
        ]
    )
    client = _FakeClient(database_accounts=accounts)
    requested: list[ArmClientType] = []

    def _create(settings: Any, client_type: ArmClientType) -> _FakeClient:
        requested.append(client_type)
        return client

    monkeypatch.setattr(cli, "create_arm_client", _create)

    result = CliRunner().invoke(cli.cli_start, ["cosmos", "list-accounts", "-g", "rg1"])

    assert result.exit_code == 0, result.output
    assert "ddb1" in result.output
    assert "Succeeded" in result.output
    assert requested == [ArmClientType.COSMOS_DB]
    assert accounts.calls == [{"resource_group": "rg1"}]
    assert client.closed


def test_list_autonomous_databases_whole_subscription(monkeypatch: pytest.MonkeyPatch) -> None:
    databases = _FakeGroup([])
    monkeypatch.setattr(
        cli, "create_arm_client", lambda settings, client_type: _FakeClient(autonomous_databases=databases)
    )

    result = CliRunner().invoke(cli.cli_start, ["oracle", "list-autonomous-databases"])

    assert result.exit_code == 0, result.output
    assert databases.calls == [{}]


def test_errors_exit_with_status_one(monkeypatch: pytest.MonkeyPatch) -> None:
    def _fail(settings: Any, client_type: ArmClientType) -> None:
        raise MissingAzureCredentialsError("Missing Azure subscription id")

    monkeypatch.setattr(cli, "create_arm_client", _fail)

    result = CliRunner().invoke(cli.cli_start, ["cosmos", "list-accounts"])

    assert result.exit_code == 1
    assert "MissingAzureCredentialsError" in result.output


def test_queue_example(monkeypatch: pytest.MonkeyPatch) -> None:
    received: dict[str, Any] = {}

    async def _run_example(settings: Any, queue_name: str | None, body: str) -> list[str]:
        received.update(queue_name=queue_name, body=body)
        return [body]

    monkeypatch.setattr(cli, "run_queue_example", _run_example)

    result = CliRunner().invoke(cli.cli_start, ["queue-example", "-q", "orders", "-b", "ping"])

    assert result.exit_code == 0, result.output
    assert received == {"queue_name": "orders", "body": "ping"}
    assert "Completed message: ping" in result.output


def test_queue_example_without_messages(monkeypatch: pytest.MonkeyPatch) -> None:
    async def _run_example(*args: Any) -> list[str]:
        return []

    monkeypatch.setattr(cli, "run_queue_example", _run_example)

    result = CliRunner().invoke(cli.cli_start, ["queue-example"])

    assert result.exit_code == 0, result.output
    assert "No message was received." in result.output
