from .example import create_queue_client, run_queue_example
from .options import (
    AbandonMessageOptions,
    DeadLetterMessageOptions,
    DeferMessageOptions,
    PeekMessagesOptions,
    ReceiveMessageOptions,
    ReceiveMode,
)
from .queue_client import MessageReceiver, MessageSender, QueueClient

__all__ = [
    "AbandonMessageOptions",
    "DeadLetterMessageOptions",
    "DeferMessageOptions",
    "MessageReceiver",
    "MessageSender",
    "PeekMessagesOptions",
    "QueueClient",
    "ReceiveMessageOptions",
    "ReceiveMode",
    "create_queue_client",
    "run_queue_example",
]
