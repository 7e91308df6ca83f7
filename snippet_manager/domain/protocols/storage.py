"""Storage protocols - abstract interfaces for object storage."""

from typing import Protocol


class BlobStore(Protocol):
    """Keyed object store holding snippet code bodies.

    Both operations either succeed or raise; there are no partial writes.
    Deleting a missing key succeeds.
    """

    async def put(self, key: str, content: str) -> None:
        """Store ``content`` under ``key``, replacing any previous object."""
        ...

    async def delete(self, key: str) -> None:
        """Remove the object stored under ``key``."""
        ...
