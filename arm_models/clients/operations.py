from typing import Any, AsyncIterator, ClassVar, Generic, TypeVar
from urllib.parse import quote

from loguru import logger

from arm_models.clients.base import ArmRequest
from arm_models.clients.rest_client import ArmRestClient
from arm_models.core.base import ArmModel, ListResult

ModelT = TypeVar("ModelT", bound=ArmModel)
ListT = TypeVar("ListT", bound=ListResult)


class ResourceOperations(Generic[ModelT, ListT]):
    """
    CRUD and action calls for one resource type, addressed by a path template.

    `resource_path` names a single resource, e.g.
    ``/subscriptions/{subscription_id}/resourceGroups/{resource_group}/providers/Oracle.Database/cloudVmClusters/{cloud_vm_cluster_name}``.
    The collection path defaults to the template without its last segment.
    When `subscription_collection_path` is set, `list()` called without the
    `scope_segment` placeholder (a resource group by default) lists across the
    whole subscription.

    `subscription_id` is filled in from the client; every other placeholder is
    passed as a keyword argument and percent-encoded.
    """

    resource_path: ClassVar[str]
    collection_path: ClassVar[str | None] = None
    subscription_collection_path: ClassVar[str | None] = None
    scope_segment: ClassVar[str] = "resource_group"
    model: ClassVar[type[ArmModel]]
    list_model: ClassVar[type[ListResult]]

    def __init__(
        self, client: ArmRestClient, subscription_id: str, api_version: str
    ) -> None:
        self.client = client
        self.subscription_id = subscription_id
        self.api_version = api_version

    def _format(self, template: str, segments: dict[str, Any]) -> str:
        values = {
            "subscription_id": self.subscription_id,
            **{key: value for key, value in segments.items() if value is not None},
        }
        try:
            return template.format(
                **{key: quote(str(value), safe="") for key, value in values.items()}
            )
        except KeyError as e:
            raise ValueError(
                f"Missing path segment {e} for {type(self).__name__}"
            ) from None

    def path(self, **segments: Any) -> str:
        return self._format(self.resource_path, segments)

    def _list_path(self, segments: dict[str, Any]) -> str:
        if self.subscription_collection_path and segments.get(self.scope_segment) is None:
            return self._format(self.subscription_collection_path, segments)
        template = self.collection_path or self.resource_path.rsplit("/", 1)[0]
        return self._format(template, segments)

    def _request(
        self, method: str, endpoint: str, body: ArmModel | None = None, **kwargs: Any
    ) -> ArmRequest:
        return ArmRequest(
            method=method,
            endpoint=endpoint,
            json_body=body.to_wire() if body is not None else None,
            api_version=self.api_version,
            **kwargs,
        )

    async def get(self, **segments: Any) -> ModelT | None:
        return await self.client.get_model(
            self._request("GET", self.path(**segments)), self.model
        )

    def list(self, params: dict[str, Any] | None = None, **segments: Any) -> AsyncIterator[ListT]:
        request = self._request("GET", self._list_path(segments), params=params or {})
        return self.client.iter_pages(request, self.list_model)

    async def list_all(
        self, params: dict[str, Any] | None = None, **segments: Any
    ) -> AsyncIterator[Any]:
        async for page in self.list(params, **segments):
            for item in page.value:
                yield item

    async def create_or_update(self, body: ArmModel, **segments: Any) -> ModelT | None:
        logger.info(f"Creating or updating {self.model.__name__} {segments}")
        return await self.client.get_model(
            self._request("PUT", self.path(**segments), body), self.model
        )

    async def update(self, body: ArmModel, **segments: Any) -> ModelT | None:
        logger.info(f"Updating {self.model.__name__} {segments}")
        return await self.client.get_model(
            self._request("PATCH", self.path(**segments), body), self.model
        )

    async def delete(self, **segments: Any) -> None:
        logger.info(f"Deleting {self.model.__name__} {segments}")
        await self.client.make_request(self._request("DELETE", self.path(**segments)))

    async def action(
        self,
        name: str,
        body: ArmModel | None = None,
        response_model: Any = None,
        method: str = "POST",
        params: dict[str, Any] | None = None,
        **segments: Any,
    ) -> Any:
        """
        Call a child action of the resource (``<resource path>/<name>``).

        Returns the body decoded as `response_model` (any type pydantic can
        validate, e.g. ``list[PrivateIpAddressProperties]``), the raw body when
        no model is given, or None for an empty body.
        """
        request = self._request(
            method, f"{self.path(**segments)}/{name}", body, params=params or {}
        )
        if response_model is None:
            return await self.client.make_request(request) or None
        return await self.client.get_model(request, response_model)


class ThroughputOperationsMixin:
    """Throughput settings of a database-level or container-level Cosmos resource."""

    throughput_model: ClassVar[type[ArmModel]]

    async def get_throughput(self: Any, **segments: Any) -> Any:
        return await self.action(
            "throughputSettings/default", None, self.throughput_model, "GET", **segments
        )

    async def update_throughput(self: Any, body: ArmModel, **segments: Any) -> Any:
        return await self.action(
            "throughputSettings/default", body, self.throughput_model, "PUT", **segments
        )

    async def migrate_to_autoscale(self: Any, **segments: Any) -> Any:
        return await self.action(
            "throughputSettings/default/migrateToAutoscale",
            None,
            self.throughput_model,
            **segments,
        )

    async def migrate_to_manual_throughput(self: Any, **segments: Any) -> Any:
        return await self.action(
            "throughputSettings/default/migrateToManualThroughput",
            None,
            self.throughput_model,
            **segments,
        )
