from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest
from azure.servicebus import ServiceBusMessage, ServiceBusReceiveMode

from arm_models.errors import MessageSettlementError, MessagingError, ReceiverClosedError
from arm_models.messaging import (
    AbandonMessageOptions,
    DeadLetterMessageOptions,
    MessageReceiver,
    PeekMessagesOptions,
    QueueClient,
    ReceiveMessageOptions,
    ReceiveMode,
)
from tests.conftest import _DummyCredential


def _sdk_receiver(messages: list[MagicMock] | None = None) -> MagicMock:
    receiver = MagicMock()
    receiver.receive_messages = AsyncMock(return_value=messages or [])
    receiver.peek_messages = AsyncMock(return_value=messages or [])
    receiver.receive_deferred_messages = AsyncMock(return_value=messages or [])
    receiver.complete_message = AsyncMock()
    receiver.abandon_message = AsyncMock()
    receiver.dead_letter_message = AsyncMock()
    receiver.defer_message = AsyncMock()
    receiver.renew_message_lock = AsyncMock()
    receiver.close = AsyncMock()
    return receiver


@pytest.fixture
def sdk_client() -> MagicMock:
    client = MagicMock()
    client.close = AsyncMock()
    sender = MagicMock()
    sender.send_messages = AsyncMock()
    sender.close = AsyncMock()
    client.get_queue_sender.return_value = sender
    client.get_queue_receiver.return_value = _sdk_receiver()
    client.get_subscription_receiver.return_value = _sdk_receiver()
    return client


def test_receive_options_defaults() -> None:
    options = ReceiveMessageOptions()

    assert options.max_message_count == 1
    assert options.max_wait_time == timedelta(seconds=60)
    assert options.wait_seconds() == 60
    assert ReceiveMessageOptions(max_wait_time=None).wait_seconds() is None


def test_receive_mode_maps_to_sdk() -> None:
    assert ReceiveMode.PEEK_LOCK.to_sdk() == ServiceBusReceiveMode.PEEK_LOCK
    assert ReceiveMode.RECEIVE_AND_DELETE.to_sdk() == ServiceBusReceiveMode.RECEIVE_AND_DELETE


@pytest.mark.asyncio
async def test_sender_wraps_body_in_message(sdk_client: MagicMock) -> None:
    sender = QueueClient(sdk_client).create_sender("orders")

    await sender.send_message("hello", application_properties={"kind": "greeting"})

    sdk_client.get_queue_sender.assert_called_once_with("orders")
    sent = sdk_client.get_queue_sender.return_value.send_messages.await_args.args[0]
    assert isinstance(sent, ServiceBusMessage)
    assert str(sent) == "hello"
    assert sent.application_properties == {"kind": "greeting"}


@pytest.mark.asyncio
async def test_sender_sends_batches(sdk_client: MagicMock) -> None:
    sender = QueueClient(sdk_client).create_sender("orders")

    await sender.send_messages(["a", ServiceBusMessage("b")])

    sent = sdk_client.get_queue_sender.return_value.send_messages.await_args.args[0]
    assert [str(message) for message in sent] == ["a", "b"]


def test_queue_and_subscription_receivers(sdk_client: MagicMock) -> None:
    client = QueueClient(sdk_client)

    queue_receiver = client.create_receiver("orders", ReceiveMode.RECEIVE_AND_DELETE)
    topic_receiver = client.create_receiver("events", subscription_name="audit")

    sdk_client.get_queue_receiver.assert_called_once_with(
        "orders", receive_mode=ServiceBusReceiveMode.RECEIVE_AND_DELETE
    )
    sdk_client.get_subscription_receiver.assert_called_once_with(
        "events", "audit", receive_mode=ServiceBusReceiveMode.PEEK_LOCK
    )
    assert queue_receiver.receive_mode is ReceiveMode.RECEIVE_AND_DELETE
    assert queue_receiver.subscription_name is None
    assert topic_receiver.entity_name == "events"
    assert topic_receiver.subscription_name == "audit"


@pytest.mark.asyncio
async def test_receive_message_returns_first_or_none() -> None:
    message = MagicMock()
    sdk_receiver = _sdk_receiver([message])
    receiver = MessageReceiver(sdk_receiver, "orders")

    assert await receiver.receive_message(ReceiveMessageOptions(max_message_count=5)) is message
    sdk_receiver.receive_messages.assert_awaited_once_with(max_message_count=1, max_wait_time=60)

    empty = MessageReceiver(_sdk_receiver(), "orders")
    assert await empty.receive_message() is None


@pytest.mark.asyncio
async def test_settlement_in_peek_lock_mode() -> None:
    message = MagicMock()
    sdk_receiver = _sdk_receiver([message])
    receiver = MessageReceiver(sdk_receiver, "orders")

    await receiver.complete_message(message)
    await receiver.abandon_message(message)
    await receiver.dead_letter_message(
        message, DeadLetterMessageOptions(reason="poison", error_description="bad payload")
    )
    await receiver.defer_message(message)

    sdk_receiver.complete_message.assert_awaited_once_with(message)
    sdk_receiver.abandon_message.assert_awaited_once_with(message)
    sdk_receiver.dead_letter_message.assert_awaited_once_with(
        message, reason="poison", error_description="bad payload"
    )
    sdk_receiver.defer_message.assert_awaited_once_with(message)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "operation", ["complete_message", "abandon_message", "dead_letter_message", "defer_message", "renew_message_lock"]
)
async def test_settlement_refused_in_receive_and_delete_mode(operation: str) -> None:
    sdk_receiver = _sdk_receiver()
    receiver = MessageReceiver(sdk_receiver, "orders", ReceiveMode.RECEIVE_AND_DELETE)

    with pytest.raises(MessageSettlementError):
        await getattr(receiver, operation)(MagicMock())

    getattr(sdk_receiver, operation).assert_not_awaited()


@pytest.mark.asyncio
async def test_property_changes_not_supported() -> None:
    receiver = MessageReceiver(_sdk_receiver(), "orders")

    with pytest.raises(MessagingError):
        await receiver.abandon_message(
            MagicMock(), AbandonMessageOptions(properties_to_modify={"attempt": 2})
        )


@pytest.mark.asyncio
async def test_peek_from_sequence_number() -> None:
    sdk_receiver = _sdk_receiver()
    receiver = MessageReceiver(sdk_receiver, "orders")

    await receiver.peek_messages(10, PeekMessagesOptions(from_sequence_number=42))
    await receiver.peek_messages()

    assert sdk_receiver.peek_messages.await_args_list[0].kwargs == {
        "max_message_count": 10,
        "sequence_number": 42,
    }
    assert sdk_receiver.peek_messages.await_args_list[1].kwargs == {"max_message_count": 1}


@pytest.mark.asyncio
async def test_receive_deferred_messages() -> None:
    sdk_receiver = _sdk_receiver()
    receiver = MessageReceiver(sdk_receiver, "orders")

    await receiver.receive_deferred_messages([1, 2])

    sdk_receiver.receive_deferred_messages.assert_awaited_once_with([1, 2])


@pytest.mark.asyncio
async def test_close_is_idempotent_and_blocks_use() -> None:
    sdk_receiver = _sdk_receiver()
    receiver = MessageReceiver(sdk_receiver, "orders")

    await receiver.close()
    await receiver.close()

    sdk_receiver.close.assert_awaited_once()
    with pytest.raises(ReceiverClosedError):
        await receiver.receive_messages()


@pytest.mark.asyncio
async def test_queue_client_context_manager_closes(sdk_client: MagicMock) -> None:
    async with QueueClient(sdk_client) as client:
        client.create_sender("orders")

    sdk_client.close.assert_awaited_once()


@pytest.mark.asyncio
async def test_namespace_client_closes_its_credential(dummy_credential: _DummyCredential) -> None:
    client = QueueClient.from_namespace("ns.servicebus.windows.net", dummy_credential)

    assert client.credential is dummy_credential
    await client.close()

    assert dummy_credential.closed


@pytest.mark.asyncio
async def test_close_without_credential(sdk_client: MagicMock) -> None:
    client = QueueClient(sdk_client)

    await client.close()

    assert client.credential is None
    sdk_client.close.assert_awaited_once()
