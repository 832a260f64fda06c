import asyncio
import sys
from typing import Any, Awaitable

import click
from rich.console import Console
from rich.table import Table

from arm_models import __version__
from arm_models.config import ArmSettings
from arm_models.errors import ArmModelsError
from arm_models.factory import ArmClientType, create_arm_client
from arm_models.logger_setup import LogLevelType, setup_logger
from arm_models.messaging.example import DEFAULT_BODY, run_queue_example

console = Console()


def _run(coroutine: Awaitable[Any]) -> Any:
    try:
        return asyncio.run(coroutine)  # type: ignore[arg-type]
    except ArmModelsError as e:
        console.print(f"[bold red]{type(e).__name__}:[/bold red] {e}")
        sys.exit(1)


def _scope(resource_group: str | None) -> dict[str, str]:
    return {"resource_group": resource_group} if resource_group else {}


@click.group
@click.option(
    "-l",
    "--log-level",
    "log_level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    default=None,
    help="""Set the logging level. If not specified, the configured
            log level is used (INFO by default).""",
)
@click.pass_context
def cli_start(ctx: click.Context, log_level: LogLevelType | None) -> None:
    # arm-models root command
    settings = ArmSettings()
    setup_logger(log_level or settings.log_level, *settings.get_sensitive_fields_data())
    ctx.obj = settings


@cli_start.command()
@click.option(
    "-s",
    "--short",
    "short",
    default=False,
    is_flag=True,
    required=False,
    help="Display only the short version number.",
)
def version(short: bool) -> None:
    """
    Displays the version of the arm-models package.
    """
    if short:
        console.print(__version__)
    else:
        console.print(f"arm-models version: {__version__}")


@cli_start.group()
def cosmos() -> None:
    """Azure Cosmos DB resource provider commands."""


@cosmos.command(name="list-accounts")
@click.option(
    "-g",
    "--resource-group",
    "resource_group",
    default=None,
    help="Only list accounts of this resource group. Lists the whole subscription if omitted.",
)
@click.pass_obj
def list_accounts(settings: ArmSettings, resource_group: str | None) -> None:
    """
    List the Cosmos DB database accounts of the configured subscription.
    """

    async def _list() -> None:
        table = Table("Name", "Location", "Kind", "Provisioning state")
        async with create_arm_client(settings, ArmClientType.COSMOS_DB) as client:
            async for account in client.database_accounts.list_all(
                **_scope(resource_group)
            ):
                properties = account.properties
                table.add_row(
                    account.name,
                    account.location,
                    account.kind,
                    properties.provisioning_state if properties else None,
                )
        console.print(table)

    _run(_list())


@cli_start.group()
def oracle() -> None:
    """Oracle Database@Azure resource provider commands."""


@oracle.command(name="list-autonomous-databases")
@click.option(
    "-g",
    "--resource-group",
    "resource_group",
    default=None,
    help="Only list databases of this resource group. Lists the whole subscription if omitted.",
)
@click.pass_obj
def list_autonomous_databases(settings: ArmSettings, resource_group: str | None) -> None:
    """
    List the Autonomous Databases of the configured subscription.
    """

    async def _list() -> None:
        table = Table("Name", "Location", "Type", "Lifecycle state")
        async with create_arm_client(settings, ArmClientType.ORACLE_DATABASE) as client:
            async for database in client.autonomous_databases.list_all(
                **_scope(resource_group)
            ):
                properties = database.properties
                table.add_row(
                    database.name,
                    database.location,
                    properties.data_base_type if properties else None,
                    properties.lifecycle_state if properties else None,
                )
        console.print(table)

    _run(_list())


@cli_start.command(name="queue-example")
@click.option(
    "-q",
    "--queue",
    "queue_name",
    default=None,
    help="Queue to use. Defaults to the configured servicebus.queueName.",
)
@click.option("-b", "--body", "body", default=DEFAULT_BODY, help="Message body to send.")
@click.pass_obj
def queue_example(settings: ArmSettings, queue_name: str | None, body: str) -> None:
    """
    Send a message to a Service Bus queue, receive it back and complete it.
    """
    completed = _run(run_queue_example(settings, queue_name, body))
    if not completed:
        console.print("[yellow]No message was received.[/yellow]")
        return
    for message in completed:
        console.print(f"Completed message: [bold]{message}[/bold]")
