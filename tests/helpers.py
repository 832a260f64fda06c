from typing import Any, AsyncIterator, TypeVar

T = TypeVar("T")

BASE_URL = "https://management.azure.com"
SUBSCRIPTION_ID = "00000000-0000-0000-0000-000000000000"
COSMOS_API_VERSION = "2021-04-01-preview"
ORACLE_API_VERSION = "2023-09-01-preview"


def arm_url(path: str, api_version: str, **params: Any) -> str:
    query = "&".join(
        [f"api-version={api_version}"] + [f"{key}={value}" for key, value in params.items()]
    )
    return f"{BASE_URL}{path}?{query}"


async def collect(iterator: AsyncIterator[T]) -> list[T]:
    return [item async for item in iterator]
