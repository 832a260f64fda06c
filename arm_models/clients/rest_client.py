from types import TracebackType
from typing import Any, AsyncIterator, Self, TypeVar

import httpx
from azure.core.credentials_async import AsyncTokenCredential
from azure.core.exceptions import ClientAuthenticationError
from loguru import logger
from pydantic import TypeAdapter

from arm_models.clients.base import AbstractArmClient, ArmRequest, ListT
from arm_models.config import DEFAULT_MANAGEMENT_URL
from arm_models.errors import ArmApiError, ArmAuthenticationError, ArmTransportError

T = TypeVar("T")

DEFAULT_HTTP_REQUEST_TIMEOUT = 60


class ArmRestClient(AbstractArmClient):
    """Async Azure Resource Manager REST client with bearer auth and nextLink pagination."""

    def __init__(
        self,
        credential: AsyncTokenCredential,
        base_url: str = DEFAULT_MANAGEMENT_URL,
        timeout: float = DEFAULT_HTTP_REQUEST_TIMEOUT,
        http_client: httpx.AsyncClient | None = None,
        **kwargs: Any,
    ) -> None:
        self.credential: AsyncTokenCredential = credential
        self.base_url: str = base_url.rstrip("/")
        self._client = http_client or httpx.AsyncClient(timeout=timeout)

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client

    @property
    def scope(self) -> str:
        """Token scope of the management endpoint, `<base_url>/.default`."""
        return self.base_url + "/.default"

    async def get_headers(self) -> dict[str, str]:
        try:
            token = (await self.credential.get_token(self.scope)).token
        except ClientAuthenticationError as e:
            logger.error(f"Failed to acquire a token for {self.scope}: {e.message}")
            raise ArmAuthenticationError(f"Token request for {self.scope} failed: {e.message}") from e
        return {
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
        }

    def _build_url(self, endpoint: str) -> str:
        if endpoint.startswith(("http://", "https://")):
            return endpoint
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    async def make_request(self, request: ArmRequest) -> Any:
        """Make a request to the ARM API, translating failures into package errors."""
        url = self._build_url(request.endpoint)
        params = dict(request.params)
        if request.api_version and "api-version" not in params and "api-version=" not in url:
            params["api-version"] = request.api_version

        logger.info(f"Making {request.method} request to {url}")
        logger.debug(f"Request params for {url}: {params}")
        try:
            headers = await self.get_headers()
            response = await self.client.request(
                method=request.method,
                url=url,
                params=params or None,
                json=request.json_body,
                headers=headers,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            if self._should_ignore_error(e, url, request.ignored_errors):
                return {}
            logger.error(
                f"Azure API error for '{url}': "
                f"Status {e.response.status_code}, Response: {e.response.text}"
            )
            raise self._to_api_error(e.response) from e
        except httpx.HTTPError as e:
            logger.error(f"Transport error calling {url}: {e}")
            raise ArmTransportError(f"{request.method} {url} failed: {e}") from e

        logger.info(f"{request.method} {url} returned {response.status_code}")
        logger.debug(f"Response headers for {url}: {response.headers}")
        if not response.content:
            return {}
        return response.json()

    async def get_model(self, request: ArmRequest, model: type[T]) -> T | None:
        """Decode the response body as `model`; None when the status was ignored or the body empty."""
        payload = await self.make_request(request)
        if payload in ({}, None):
            return None
        return TypeAdapter(model).validate_python(payload)

    async def iter_pages(
        self, request: ArmRequest, list_model: type[ListT]
    ) -> AsyncIterator[ListT]:
        current = request
        while True:
            payload = await self.make_request(current)
            if not payload:
                break

            page = list_model.from_wire(payload)
            logger.info(f"Retrieved page of {len(page.value)} items from {current.endpoint}")
            yield page

            next_link = page.continuation()
            if next_link is None:
                break
            logger.debug(f"Next URL: {next_link}")
            # nextLink is absolute and already carries its query string
            current = current.model_copy(
                update={"endpoint": next_link, "params": {}, "method": "GET", "json_body": None}
            )

    async def iter_items(
        self, request: ArmRequest, list_model: type[ListT]
    ) -> AsyncIterator[Any]:
        async for page in self.iter_pages(request, list_model):
            for item in page.value:
                yield item

    async def close(self) -> None:
        await self._client.aclose()
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

    def _should_ignore_error(
        self,
        error: httpx.HTTPStatusError,
        url: str,
        ignored_errors: list[dict[str, Any]] | None = None,
    ) -> bool:
        for entry in ignored_errors or []:
            if str(error.response.status_code) == str(entry["status"]):
                logger.warning(
                    f"Ignored {error.response.status_code} from {url}: {entry.get('message', '')}"
                )
                return True
        return False

    @staticmethod
    def _to_api_error(response: httpx.Response) -> ArmApiError:
        try:
            body: Any = response.json()
        except ValueError:
            body = response.text
        error = body.get("error") if isinstance(body, dict) else None
        if not isinstance(error, dict):
            # some providers return the envelope without the "error" wrapper
            error = body if isinstance(body, dict) else {}
        return ArmApiError(
            status_code=response.status_code,
            code=error.get("code"),
            message=error.get("message") or (body if isinstance(body, str) else None),
            body=body,
        )
