from datetime import timedelta
from enum import StrEnum
from typing import Any

from azure.servicebus import ServiceBusReceiveMode
from pydantic import BaseModel


class ReceiveMode(StrEnum):
    PEEK_LOCK = "PeekLock"
    RECEIVE_AND_DELETE = "ReceiveAndDelete"

    def to_sdk(self) -> ServiceBusReceiveMode:
        if self is ReceiveMode.RECEIVE_AND_DELETE:
            return ServiceBusReceiveMode.RECEIVE_AND_DELETE
        return ServiceBusReceiveMode.PEEK_LOCK


class ReceiveMessageOptions(BaseModel):
    max_message_count: int = 1
    # None waits until at least one message arrives
    max_wait_time: timedelta | None = timedelta(seconds=60)

    def wait_seconds(self) -> float | None:
        if self.max_wait_time is None:
            return None
        return self.max_wait_time.total_seconds()


class PeekMessagesOptions(BaseModel):
    from_sequence_number: int | None = None


class AbandonMessageOptions(BaseModel):
    properties_to_modify: dict[str, Any] | None = None


class DeadLetterMessageOptions(BaseModel):
    reason: str | None = None
    error_description: str | None = None
    properties_to_modify: dict[str, Any] | None = None


class DeferMessageOptions(BaseModel):
    properties_to_modify: dict[str, Any] | None = None
