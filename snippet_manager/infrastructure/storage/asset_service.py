"""Asset service blob store implementation.

Snippet code bodies are kept by the asset service, one object per snippet,
under ``/v1/asset/{container}/{key}``.
"""

import time

import httpx

from snippet_manager.config import Settings
from snippet_manager.domain.errors import (
    BlobStoreError,
    BlobStoreTimeoutError,
    BlobStoreUnavailableError,
)
from snippet_manager.infrastructure.telemetry.logging import get_logger
from snippet_manager.infrastructure.telemetry.metrics import record_blob_request

logger = get_logger(__name__)


class AssetServiceBlobStore:
    """BlobStore backed by the asset service REST API."""

    def __init__(self, settings: Settings):
        self.base_url = settings.asset_service_url.rstrip("/")
        self.container = settings.asset_container
        self.timeout = settings.asset_timeout_seconds
        self._client: httpx.AsyncClient | None = None

    @property
    def provider_name(self) -> str:
        return "asset_service"

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                headers={"Content-Type": "text/plain; charset=utf-8"},
                timeout=self.timeout,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def _path(self, key: str) -> str:
        return f"/v1/asset/{self.container}/{key}"

    async def put(self, key: str, content: str) -> None:
        """Store ``content`` under ``key``."""
        logger.debug(
            "Uploading snippet code",
            extra={"key": key, "size": len(content)},
        )
        try:
            body = content.encode("utf-8")
        except UnicodeEncodeError as e:
            raise BlobStoreError(
                message=f"Snippet code is not valid UTF-8: {e.reason}",
                provider=self.provider_name,
                operation="put",
                key=key,
                details={"position": e.start},
            ) from e
        await self._request("put", key, content=body)

    async def delete(self, key: str) -> None:
        """Remove the object under ``key``; a missing object is not an error."""
        logger.debug("Deleting snippet code", extra={"key": key})
        await self._request("delete", key)

    async def _request(self, operation: str, key: str, content: bytes | None = None) -> None:
        start = time.perf_counter()
        try:
            if operation == "put":
                response = await self.client.put(self._path(key), content=content)
            else:
                response = await self.client.delete(self._path(key))
        except httpx.TimeoutException as e:
            record_blob_request(operation, "timeout", time.perf_counter() - start)
            raise BlobStoreTimeoutError(
                message=f"Asset service {operation} timed out",
                provider=self.provider_name,
                operation=operation,
                key=key,
            ) from e
        except httpx.HTTPError as e:
            record_blob_request(operation, "transport_error", time.perf_counter() - start)
            raise BlobStoreUnavailableError(
                message=f"Asset service {operation} failed: {e}",
                provider=self.provider_name,
                operation=operation,
                key=key,
            ) from e

        record_blob_request(operation, str(response.status_code), time.perf_counter() - start)

        if operation == "delete" and response.status_code == 404:
            return

        if response.status_code >= 500:
            raise BlobStoreUnavailableError(
                message=f"Asset service error: {response.status_code}",
                provider=self.provider_name,
                operation=operation,
                key=key,
                details={"status_code": response.status_code},
            )

        if response.status_code >= 400:
            raise BlobStoreError(
                message=f"Asset service rejected {operation}: {response.status_code}",
                provider=self.provider_name,
                operation=operation,
                key=key,
                details={"status_code": response.status_code, "body": response.text[:500]},
            )
