"""Blob storage implementations."""

from snippet_manager.infrastructure.storage.asset_service import AssetServiceBlobStore

__all__ = ["AssetServiceBlobStore"]
