"""Tests for the asset service blob store client."""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from snippet_manager.domain.errors import (
    BlobStoreError,
    BlobStoreTimeoutError,
    BlobStoreUnavailableError,
)
from snippet_manager.infrastructure.storage import AssetServiceBlobStore


def _response(status_code: int, text: str = "") -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    return response


class TestAssetServiceBlobStore:
    @pytest.fixture
    def store(self, settings):
        return AssetServiceBlobStore(settings)

    def test_provider_name(self, store):
        assert store.provider_name == "asset_service"

    @pytest.mark.asyncio
    async def test_put_uploads_code_under_container_path(self, store):
        with patch("httpx.AsyncClient") as mock_client:
            mock_client_instance = AsyncMock()
            mock_client_instance.put = AsyncMock(return_value=_response(201))
            mock_client.return_value = mock_client_instance

            await store.put("7", "let x = 1;")

            args, kwargs = mock_client_instance.put.call_args
            assert args[0] == "/v1/asset/snippets/7"
            assert kwargs["content"] == "let x = 1;".encode("utf-8")

            _, client_kwargs = mock_client.call_args
            assert client_kwargs["base_url"] == "http://assets.test"

    @pytest.mark.asyncio
    async def test_put_unencodable_code_raises_blob_store_error(self, store):
        with patch("httpx.AsyncClient") as mock_client:
            mock_client_instance = AsyncMock()
            mock_client.return_value = mock_client_instance

            with pytest.raises(BlobStoreError) as exc_info:
                await store.put("7", "let x = '\ud800';")

            assert isinstance(exc_info.value.__cause__, UnicodeEncodeError)
            assert exc_info.value.operation == "put"
            assert exc_info.value.key == "7"
            mock_client_instance.put.assert_not_called()

    @pytest.mark.asyncio
    async def test_delete_missing_object_succeeds(self, store):
        with patch("httpx.AsyncClient") as mock_client:
            mock_client_instance = AsyncMock()
            mock_client_instance.delete = AsyncMock(return_value=_response(404))
            mock_client.return_value = mock_client_instance

            await store.delete("7")

            args, _ = mock_client_instance.delete.call_args
            assert args[0] == "/v1/asset/snippets/7"

    @pytest.mark.asyncio
    async def test_put_server_error_is_unavailable(self, store):
        with patch("httpx.AsyncClient") as mock_client:
            mock_client_instance = AsyncMock()
            mock_client_instance.put = AsyncMock(return_value=_response(503))
            mock_client.return_value = mock_client_instance

            with pytest.raises(BlobStoreUnavailableError) as exc_info:
                await store.put("7", "code")

            error = exc_info.value
            assert error.retryable is True
            assert error.operation == "put"
            assert error.key == "7"
            assert error.details["status_code"] == 503

    @pytest.mark.asyncio
    async def test_put_client_error_is_not_retryable(self, store):
        with patch("httpx.AsyncClient") as mock_client:
            mock_client_instance = AsyncMock()
            mock_client_instance.put = AsyncMock(return_value=_response(400, "bad key"))
            mock_client.return_value = mock_client_instance

            with pytest.raises(BlobStoreError) as exc_info:
                await store.put("7", "code")

            assert type(exc_info.value) is BlobStoreError
            assert exc_info.value.retryable is False
            assert exc_info.value.details["body"] == "bad key"

    @pytest.mark.asyncio
    async def test_delete_client_error_raises(self, store):
        with patch("httpx.AsyncClient") as mock_client:
            mock_client_instance = AsyncMock()
            mock_client_instance.delete = AsyncMock(return_value=_response(403))
            mock_client.return_value = mock_client_instance

            with pytest.raises(BlobStoreError):
                await store.delete("7")

    @pytest.mark.asyncio
    async def test_timeout_is_wrapped(self, store):
        with patch("httpx.AsyncClient") as mock_client:
            mock_client_instance = AsyncMock()
            mock_client_instance.put = AsyncMock(side_effect=httpx.ReadTimeout("slow"))
            mock_client.return_value = mock_client_instance

            with pytest.raises(BlobStoreTimeoutError) as exc_info:
                await store.put("7", "code")

            assert isinstance(exc_info.value.__cause__, httpx.ReadTimeout)

    @pytest.mark.asyncio
    async def test_transport_error_is_unavailable(self, store):
        with patch("httpx.AsyncClient") as mock_client:
            mock_client_instance = AsyncMock()
            mock_client_instance.delete = AsyncMock(
                side_effect=httpx.ConnectError("refused")
            )
            mock_client.return_value = mock_client_instance

            with pytest.raises(BlobStoreUnavailableError):
                await store.delete("7")

    @pytest.mark.asyncio
    async def test_close_releases_client(self, store):
        with patch("httpx.AsyncClient") as mock_client:
            mock_client_instance = AsyncMock()
            mock_client.return_value = mock_client_instance
            _ = store.client

            await store.close()

            mock_client_instance.aclose.assert_awaited_once()
            assert store._client is None
