import os
from typing import Any

import pytest
from azure.core.credentials import AccessToken
from azure.core.credentials_async import AsyncTokenCredential

from arm_models.clients.rest_client import ArmRestClient
from tests.helpers import BASE_URL


class _DummyCredential(AsyncTokenCredential):
    def __init__(self) -> None:
        self.scopes: list[str] = []
        self.closed = False

    async def get_token(self, *scopes: str, **kwargs: Any) -> AccessToken:
        self.scopes.extend(scopes)
        return AccessToken("dummy-token", 9999999999)

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def dummy_credential() -> _DummyCredential:
    return _DummyCredential()


@pytest.fixture
def rest_client(dummy_credential: _DummyCredential) -> ArmRestClient:
    return ArmRestClient(credential=dummy_credential, base_url=BASE_URL)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Any) -> None:
    # keep ArmSettings away from the developer's config.yaml, .env and ARM__ variables
    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.startswith("ARM__"):
            monkeypatch.delenv(key)
