"""Base repository with common CRUD operations."""

from typing import Any, Generic, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from snippet_manager.infrastructure.database.models.base import Base

ModelType = TypeVar("ModelType", bound=Base)
EntityType = TypeVar("EntityType")


class BaseRepository(Generic[ModelType, EntityType]):
    """Base repository providing common CRUD operations.

    Subclasses should set:
    - model_class: The SQLAlchemy model class
    - Implement to_entity and from_entity on the model
    """

    model_class: type[ModelType]

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, id: Any) -> EntityType | None:
        """Get entity by primary key."""
        result = await self.session.get(self.model_class, id)
        if result is None:
            return None
        return result.to_entity()

    async def create(self, entity: EntityType) -> EntityType:
        """Insert a new entity and return it with generated columns filled."""
        model = self.model_class.from_entity(entity)
        self.session.add(model)
        await self.session.flush()
        await self.session.refresh(model)
        return model.to_entity()

    async def update(self, entity: EntityType) -> EntityType:
        """Update an existing entity."""
        model = self.model_class.from_entity(entity)
        merged = await self.session.merge(model)
        await self.session.flush()
        await self.session.refresh(merged)
        return merged.to_entity()

    async def delete(self, id: Any) -> bool:
        """Delete entity by ID."""
        result = await self.session.get(self.model_class, id)
        if result is None:
            return False
        await self.session.delete(result)
        await self.session.flush()
        return True
