from typing import Any


class ArmModelsError(Exception):
    pass


class ArmClientError(ArmModelsError):
    pass


class ArmApiError(ArmClientError):
    """The resource provider answered with a non-success status."""

    def __init__(
        self,
        status_code: int,
        code: str | None,
        message: str | None,
        body: Any = None,
    ) -> None:
        self.status_code = status_code
        self.code = code
        self.message = message
        self.body = body
        super().__init__(f"{status_code} {code or 'UnknownError'}: {message or ''}".rstrip())


class ArmTransportError(ArmClientError):
    pass


class ArmAuthenticationError(ArmClientError):
    """The credential could not issue a token for the management endpoint."""


class MissingAzureCredentialsError(ArmClientError):
    pass


class MessagingError(ArmModelsError):
    pass


class MessageSettlementError(MessagingError):
    pass


class ReceiverClosedError(MessagingError):
    pass
