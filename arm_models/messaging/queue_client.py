from types import TracebackType
from typing import Any, Iterable, Self

from azure.core.credentials_async import AsyncTokenCredential
from azure.servicebus import ServiceBusMessage, ServiceBusMessageBatch, ServiceBusReceivedMessage
from azure.servicebus.aio import ServiceBusClient, ServiceBusReceiver, ServiceBusSender
from loguru import logger

from arm_models.errors import MessageSettlementError, MessagingError, ReceiverClosedError
from arm_models.messaging.options import (
    AbandonMessageOptions,
    DeadLetterMessageOptions,
    DeferMessageOptions,
    PeekMessagesOptions,
    ReceiveMessageOptions,
    ReceiveMode,
)


def _reject_property_changes(operation: str, properties: dict[str, Any] | None) -> None:
    # the Python SDK settles messages without modified application properties
    if properties:
        raise MessagingError(
            f"{operation} with properties_to_modify is not supported by azure-servicebus"
        )


class MessageSender:
    def __init__(self, sender: ServiceBusSender, entity_name: str) -> None:
        self._sender = sender
        self.entity_name = entity_name

    async def send_message(
        self,
        message: str | bytes | ServiceBusMessage,
        application_properties: dict[str, Any] | None = None,
    ) -> None:
        if not isinstance(message, ServiceBusMessage):
            message = ServiceBusMessage(message, application_properties=application_properties)
        elif application_properties:
            message.application_properties = {
                **(message.application_properties or {}),
                **application_properties,
            }
        logger.info(f"Sending message to {self.entity_name}")
        await self._sender.send_messages(message)

    async def send_messages(
        self, messages: Iterable[str | bytes | ServiceBusMessage] | ServiceBusMessageBatch
    ) -> None:
        if not isinstance(messages, ServiceBusMessageBatch):
            messages = [
                m if isinstance(m, ServiceBusMessage) else ServiceBusMessage(m)
                for m in messages
            ]
        logger.info(f"Sending message batch to {self.entity_name}")
        await self._sender.send_messages(messages)

    async def close(self) -> None:
        await self._sender.close()


class MessageReceiver:
    """
    Receiver bound to a queue or a topic subscription.

    In peek-lock mode received messages stay locked until they are completed,
    abandoned, dead-lettered or deferred. In receive-and-delete mode they are
    removed on delivery and settlement calls raise `MessageSettlementError`.
    """

    def __init__(
        self,
        receiver: ServiceBusReceiver,
        entity_name: str,
        receive_mode: ReceiveMode = ReceiveMode.PEEK_LOCK,
        subscription_name: str | None = None,
    ) -> None:
        self._receiver = receiver
        self.entity_name = entity_name
        self.receive_mode = receive_mode
        self.subscription_name = subscription_name
        self._closed = False

    def _ensure_open(self) -> None:
        if self._closed:
            raise ReceiverClosedError(f"Receiver for {self.entity_name} is closed")

    def _ensure_settleable(self, operation: str) -> None:
        self._ensure_open()
        if self.receive_mode is ReceiveMode.RECEIVE_AND_DELETE:
            raise MessageSettlementError(
                f"Cannot {operation} a message received in {self.receive_mode} mode"
            )

    async def receive_messages(
        self, options: ReceiveMessageOptions | None = None
    ) -> list[ServiceBusReceivedMessage]:
        self._ensure_open()
        options = options or ReceiveMessageOptions()
        messages = await self._receiver.receive_messages(
            max_message_count=options.max_message_count,
            max_wait_time=options.wait_seconds(),
        )
        logger.info(f"Received {len(messages)} messages from {self.entity_name}")
        return messages

    async def receive_message(
        self, options: ReceiveMessageOptions | None = None
    ) -> ServiceBusReceivedMessage | None:
        options = (options or ReceiveMessageOptions()).model_copy(
            update={"max_message_count": 1}
        )
        messages = await self.receive_messages(options)
        return messages[0] if messages else None

    async def receive_deferred_messages(
        self, sequence_numbers: int | list[int]
    ) -> list[ServiceBusReceivedMessage]:
        self._ensure_open()
        return await self._receiver.receive_deferred_messages(sequence_numbers)

    async def peek_messages(
        self, max_count: int = 1, options: PeekMessagesOptions | None = None
    ) -> list[ServiceBusReceivedMessage]:
        self._ensure_open()
        options = options or PeekMessagesOptions()
        kwargs: dict[str, Any] = {}
        if options.from_sequence_number is not None:
            kwargs["sequence_number"] = options.from_sequence_number
        return await self._receiver.peek_messages(max_message_count=max_count, **kwargs)

    async def complete_message(self, message: ServiceBusReceivedMessage) -> None:
        self._ensure_settleable("complete")
        await self._receiver.complete_message(message)
        logger.debug(f"Completed message {message.message_id} on {self.entity_name}")

    async def abandon_message(
        self,
        message: ServiceBusReceivedMessage,
        options: AbandonMessageOptions | None = None,
    ) -> None:
        self._ensure_settleable("abandon")
        _reject_property_changes("abandon", options and options.properties_to_modify)
        await self._receiver.abandon_message(message)

    async def dead_letter_message(
        self,
        message: ServiceBusReceivedMessage,
        options: DeadLetterMessageOptions | None = None,
    ) -> None:
        self._ensure_settleable("dead-letter")
        options = options or DeadLetterMessageOptions()
        _reject_property_changes("dead-letter", options.properties_to_modify)
        await self._receiver.dead_letter_message(
            message, reason=options.reason, error_description=options.error_description
        )

    async def defer_message(
        self,
        message: ServiceBusReceivedMessage,
        options: DeferMessageOptions | None = None,
    ) -> None:
        self._ensure_settleable("defer")
        _reject_property_changes("defer", options and options.properties_to_modify)
        await self._receiver.defer_message(message)

    async def renew_message_lock(self, message: ServiceBusReceivedMessage) -> Any:
        self._ensure_settleable("renew the lock of")
        return await self._receiver.renew_message_lock(message)

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        await self._receiver.close()


class QueueClient:
    """Entry point to a Service Bus namespace."""

    def __init__(
        self, client: ServiceBusClient, credential: AsyncTokenCredential | None = None
    ) -> None:
        self._client = client
        # set when the client was built from a namespace; closed with the client
        self.credential = credential

    @classmethod
    def from_connection_string(cls, connection_string: str) -> "QueueClient":
        return cls(ServiceBusClient.from_connection_string(connection_string))

    @classmethod
    def from_namespace(
        cls, fully_qualified_namespace: str, credential: AsyncTokenCredential
    ) -> "QueueClient":
        return cls(
            ServiceBusClient(
                fully_qualified_namespace=fully_qualified_namespace, credential=credential
            ),
            credential,
        )

    def create_sender(self, queue_or_topic: str) -> MessageSender:
        # a queue sender and a topic sender talk to the same entity path
        return MessageSender(self._client.get_queue_sender(queue_or_topic), queue_or_topic)

    def create_receiver(
        self,
        queue_or_topic: str,
        receive_mode: ReceiveMode = ReceiveMode.PEEK_LOCK,
        subscription_name: str | None = None,
    ) -> MessageReceiver:
        if subscription_name is None:
            receiver = self._client.get_queue_receiver(
                queue_or_topic, receive_mode=receive_mode.to_sdk()
            )
        else:
            receiver = self._client.get_subscription_receiver(
                queue_or_topic, subscription_name, receive_mode=receive_mode.to_sdk()
            )
        return MessageReceiver(receiver, queue_or_topic, receive_mode, subscription_name)

    async def close(self) -> None:
        await self._client.close()
        close_credential = getattr(self.credential, "close", None)
        if close_credential is not None:
            await close_credential()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()
