from loguru import logger

from arm_models.config import ArmSettings
from arm_models.errors import MessagingError
from arm_models.factory import AzureAuthenticatorFactory
from arm_models.messaging.options import ReceiveMessageOptions, ReceiveMode
from arm_models.messaging.queue_client import QueueClient

DEFAULT_BODY = "Hello, Service Bus!"


def create_queue_client(settings: ArmSettings) -> QueueClient:
    servicebus = settings.servicebus
    if servicebus.connection_string:
        return QueueClient.from_connection_string(
            servicebus.connection_string.get_secret_value()
        )
    if servicebus.fully_qualified_namespace:
        azure = settings.azure
        credential = AzureAuthenticatorFactory.create(
            tenant_id=azure.tenant_id,
            client_id=azure.client_id,
            client_secret=(
                azure.client_secret.get_secret_value() if azure.client_secret else None
            ),
        )
        return QueueClient.from_namespace(servicebus.fully_qualified_namespace, credential)
    raise MessagingError(
        "Service Bus is not configured: set servicebus.connectionString or servicebus.fullyQualifiedNamespace"
    )


async def run_queue_example(
    settings: ArmSettings,
    queue_name: str | None = None,
    body: str = DEFAULT_BODY,
    options: ReceiveMessageOptions | None = None,
) -> list[str]:
    """
    Send one message to a queue, receive it back in peek-lock mode and
    complete it. Returns the bodies of the completed messages.
    """
    queue_name = queue_name or settings.servicebus.queue_name
    completed: list[str] = []

    async with create_queue_client(settings) as client:
        sender = client.create_sender(queue_name)
        try:
            await sender.send_message(body)
        finally:
            await sender.close()

        receiver = client.create_receiver(queue_name, ReceiveMode.PEEK_LOCK)
        try:
            message = await receiver.receive_message(options)
            if message is None:
                logger.warning(f"No message arrived on {queue_name}")
            else:
                received = str(message)
                logger.info(f"Received message: {received}")
                await receiver.complete_message(message)
                completed.append(received)
        finally:
            await receiver.close()

    return completed
