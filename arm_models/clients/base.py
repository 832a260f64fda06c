from abc import ABC, abstractmethod
from typing import Any, AsyncIterator, TypeVar

from azure.core.credentials_async import AsyncTokenCredential
from pydantic import BaseModel, ConfigDict, Field

from arm_models.core.base import ListResult

ListT = TypeVar("ListT", bound=ListResult)


class ArmRequest(BaseModel):
    method: str = "GET"
    endpoint: str
    params: dict[str, Any] = Field(default_factory=dict)
    json_body: Any = None
    api_version: str | None = None
    ignored_errors: list[dict[str, Any]] | None = None

    model_config = ConfigDict(extra="forbid")


class AbstractArmClient(ABC):
    """Abstract base for resource manager clients."""

    def __init__(
        self,
        credential: AsyncTokenCredential,
        base_url: str,
        **kwargs: Any,
    ) -> None: ...

    @abstractmethod
    async def make_request(self, request: ArmRequest) -> Any:
        """
        Perform a single ARM request and return the decoded JSON body.

        Statuses listed in `request.ignored_errors` resolve to an empty dict
        instead of raising.
        """
        ...

    @abstractmethod
    def iter_pages(
        self, request: ArmRequest, list_model: type[ListT]
    ) -> AsyncIterator[ListT]:
        """Yield decoded list pages, following each page's continuation link."""
        ...
