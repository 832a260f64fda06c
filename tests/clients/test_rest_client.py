import json

import httpx
import pytest
from azure.core.exceptions import ClientAuthenticationError
from pydantic import Field
from pytest_httpx import HTTPXMock

from arm_models.clients.base import ArmRequest
from arm_models.clients.rest_client import ArmRestClient
from arm_models.core.base import ArmModel, DefaultList, ListResult
from arm_models.errors import (
    ArmApiError,
    ArmAuthenticationError,
    ArmClientError,
    ArmTransportError,
)
from tests.conftest import _DummyCredential
from tests.helpers import BASE_URL, collect

API_VERSION = "2021-04-01-preview"


class _Item(ArmModel):
    name: str


class _ItemPage(ListResult):
    value: DefaultList[_Item] = Field(default_factory=list)
    next_link: str | None = None


def test_scope_uses_base_url(dummy_credential: _DummyCredential) -> None:
    client = ArmRestClient(credential=dummy_credential, base_url=f"{BASE_URL}/")

    assert client.base_url == BASE_URL
    assert client.scope == "https://management.azure.com/.default"


@pytest.mark.asyncio
async def test_make_request_sends_bearer_and_api_version(
    rest_client: ArmRestClient, dummy_credential: _DummyCredential, httpx_mock: HTTPXMock
) -> None:
    httpx_mock.add_response(
        method="GET",
        url=f"{BASE_URL}/subscriptions/sub/resources?api-version={API_VERSION}",
        json={"ok": True},
    )

    data = await rest_client.make_request(
        ArmRequest(endpoint="/subscriptions/sub/resources", api_version=API_VERSION)
    )

    assert data == {"ok": True}
    request = httpx_mock.get_request()
    assert request is not None
    assert request.headers["Authorization"] == "Bearer dummy-token"
    assert dummy_credential.scopes == ["https://management.azure.com/.default"]


@pytest.mark.asyncio
async def test_make_request_keeps_api_version_of_endpoint(
    rest_client: ArmRestClient, httpx_mock: HTTPXMock
) -> None:
    httpx_mock.add_response(
        url=f"{BASE_URL}/subscriptions/sub/resources?api-version=2020-01-01", json={}
    )

    await rest_client.make_request(
        ArmRequest(
            endpoint=f"{BASE_URL}/subscriptions/sub/resources?api-version=2020-01-01",
            api_version=API_VERSION,
        )
    )

    request = httpx_mock.get_request()
    assert request is not None
    assert request.url.params.get_list("api-version") == ["2020-01-01"]


@pytest.mark.asyncio
async def test_make_request_sends_json_body(
    rest_client: ArmRestClient, httpx_mock: HTTPXMock
) -> None:
    httpx_mock.add_response(method="PUT", json={"name": "a"})

    await rest_client.make_request(
        ArmRequest(method="PUT", endpoint="/things/a", json_body={"name": "a"})
    )

    request = httpx_mock.get_request()
    assert request is not None
    assert request.method == "PUT"
    assert json.loads(request.read()) == {"name": "a"}


@pytest.mark.asyncio
async def test_make_request_empty_body_returns_empty_dict(
    rest_client: ArmRestClient, httpx_mock: HTTPXMock
) -> None:
    httpx_mock.add_response(method="DELETE", status_code=204)

    data = await rest_client.make_request(ArmRequest(method="DELETE", endpoint="/things/a"))

    assert data == {}


@pytest.mark.asyncio
async def test_make_request_ignored_status_returns_empty(
    rest_client: ArmRestClient, httpx_mock: HTTPXMock
) -> None:
    httpx_mock.add_response(status_code=404, json={"error": {"code": "NotFound"}})

    data = await rest_client.make_request(
        ArmRequest(
            endpoint="/things/a",
            ignored_errors=[{"status": 404, "message": "thing does not exist"}],
        )
    )

    assert data == {}


@pytest.mark.asyncio
async def test_make_request_raises_api_error_from_envelope(
    rest_client: ArmRestClient, httpx_mock: HTTPXMock
) -> None:
    httpx_mock.add_response(
        status_code=409,
        json={"error": {"code": "Conflict", "message": "Account is being updated"}},
    )

    with pytest.raises(ArmApiError) as exc_info:
        await rest_client.make_request(ArmRequest(endpoint="/things/a"))

    error = exc_info.value
    assert error.status_code == 409
    assert error.code == "Conflict"
    assert error.message == "Account is being updated"
    assert error.body == {"error": {"code": "Conflict", "message": "Account is being updated"}}
    assert str(error) == "409 Conflict: Account is being updated"


@pytest.mark.asyncio
async def test_make_request_raises_api_error_for_plain_text(
    rest_client: ArmRestClient, httpx_mock: HTTPXMock
) -> None:
    httpx_mock.add_response(status_code=500, text="upstream failure")

    with pytest.raises(ArmApiError) as exc_info:
        await rest_client.make_request(ArmRequest(endpoint="/things/a"))

    assert exc_info.value.code is None
    assert exc_info.value.message == "upstream failure"


@pytest.mark.asyncio
async def test_make_request_transport_error(
    rest_client: ArmRestClient, httpx_mock: HTTPXMock
) -> None:
    httpx_mock.add_exception(httpx.ConnectError("connection refused"))

    with pytest.raises(ArmTransportError):
        await rest_client.make_request(ArmRequest(endpoint="/things/a"))


@pytest.mark.asyncio
async def test_get_model_decodes_body(
    rest_client: ArmRestClient, httpx_mock: HTTPXMock
) -> None:
    httpx_mock.add_response(json={"name": "a", "extra": 1})

    item = await rest_client.get_model(ArmRequest(endpoint="/things/a"), _Item)

    assert item == _Item(name="a")


@pytest.mark.asyncio
async def test_get_model_ignored_status_returns_none(
    rest_client: ArmRestClient, httpx_mock: HTTPXMock
) -> None:
    httpx_mock.add_response(status_code=404)

    item = await rest_client.get_model(
        ArmRequest(endpoint="/things/a", ignored_errors=[{"status": 404}]), _Item
    )

    assert item is None


@pytest.mark.asyncio
async def test_iter_pages_follows_next_link(
    rest_client: ArmRestClient, httpx_mock: HTTPXMock
) -> None:
    next_link = f"{BASE_URL}/things?api-version={API_VERSION}&%24skiptoken=abc"
    httpx_mock.add_response(
        url=f"{BASE_URL}/things?api-version={API_VERSION}",
        json={"value": [{"name": "a"}, {"name": "b"}], "nextLink": next_link},
    )
    httpx_mock.add_response(
        url=f"{BASE_URL}/things?api-version={API_VERSION}&%24skiptoken=abc",
        json={"value": [{"name": "c"}], "nextLink": ""},
    )

    pages = await collect(
        rest_client.iter_pages(ArmRequest(endpoint="/things", api_version=API_VERSION), _ItemPage)
    )

    assert [len(page.value) for page in pages] == [2, 1]
    second = httpx_mock.get_requests()[1]
    assert second.url.params["$skiptoken"] == "abc"
    assert second.url.params.get_list("api-version") == [API_VERSION]


@pytest.mark.asyncio
async def test_iter_items_flattens_pages(
    rest_client: ArmRestClient, httpx_mock: HTTPXMock
) -> None:
    httpx_mock.add_response(
        url=f"{BASE_URL}/things",
        json={"value": [{"name": "a"}], "nextLink": f"{BASE_URL}/things?page=2"},
    )
    httpx_mock.add_response(url=f"{BASE_URL}/things?page=2", json={"value": [{"name": "b"}]})

    items = await collect(rest_client.iter_items(ArmRequest(endpoint="/things"), _ItemPage))

    assert [item.name for item in items] == ["a", "b"]


@pytest.mark.asyncio
async def test_iter_pages_follows_next_link_verbatim(
    rest_client: ArmRestClient, httpx_mock: HTTPXMock
) -> None:
    next_link = "https://other.example/p2?api-version=x&$skipToken=&a=1&a=2"
    httpx_mock.add_response(
        url=f"{BASE_URL}/things?api-version={API_VERSION}",
        json={"value": [{"name": "a"}], "nextLink": next_link},
    )
    httpx_mock.add_response(url=next_link, json={"value": [{"name": "b"}]})

    items = await collect(
        rest_client.iter_items(ArmRequest(endpoint="/things", api_version=API_VERSION), _ItemPage)
    )

    assert [item.name for item in items] == ["a", "b"]
    second = httpx_mock.get_requests()[1].url
    assert second.host == "other.example"
    assert second.path == "/p2"
    assert second.params.get_list("api-version") == ["x"]
    assert second.params.get_list("a") == ["1", "2"]
    assert second.params["$skipToken"] == ""


@pytest.mark.asyncio
async def test_make_request_wraps_credential_failure(rest_client: ArmRestClient) -> None:
    async def _fail(*scopes: str, **kwargs: object) -> None:
        raise ClientAuthenticationError("DefaultAzureCredential failed to retrieve a token")

    rest_client.credential.get_token = _fail  # type: ignore[method-assign]

    with pytest.raises(ArmAuthenticationError, match="failed to retrieve a token") as exc_info:
        await rest_client.make_request(ArmRequest(endpoint="/things", api_version=API_VERSION))

    assert isinstance(exc_info.value, ArmClientError)
    assert isinstance(exc_info.value.__cause__, ClientAuthenticationError)


@pytest.mark.asyncio
async def test_context_manager_closes_credential(dummy_credential: _DummyCredential) -> None:
    async with ArmRestClient(credential=dummy_credential) as client:
        assert not client.client.is_closed

    assert client.client.is_closed
    assert dummy_credential.closed
