"""Snippet and snippet status database models."""

from sqlalchemy import BigInteger, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from snippet_manager.domain.entities.snippet import ReviewStatus, Snippet, SnippetStatus
from snippet_manager.infrastructure.database.models.base import Base, TimestampMixin


class SnippetModel(Base, TimestampMixin):
    """SQLAlchemy model for snippets table."""

    __tablename__ = "snippets"

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    language: Mapped[str] = mapped_column(String(50), nullable=False)
    author: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    # Relationships
    statuses = relationship(
        "SnippetStatusModel",
        back_populates="snippet",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def to_entity(self) -> Snippet:
        """Convert to domain entity."""
        return Snippet(
            id=self.id,
            name=self.name,
            language=self.language,
            author=self.author,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

    @classmethod
    def from_entity(cls, entity: Snippet) -> "SnippetModel":
        """Create from domain entity."""
        return cls(
            id=entity.id,
            name=entity.name,
            language=entity.language,
            author=entity.author,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )


class SnippetStatusModel(Base, TimestampMixin):
    """SQLAlchemy model for snippet_statuses table."""

    __tablename__ = "snippet_statuses"

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=True)
    snippet_id: Mapped[int] = mapped_column(
        BigInteger,
        ForeignKey("snippets.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    status: Mapped[str] = mapped_column(
        String(32), nullable=False, default=ReviewStatus.PENDING.value
    )

    # Relationships
    snippet = relationship("SnippetModel", back_populates="statuses")

    __table_args__ = (
        UniqueConstraint("snippet_id", "user_email", name="snippet_status_user_unique"),
    )

    def to_entity(self) -> SnippetStatus:
        """Convert to domain entity."""
        return SnippetStatus(
            id=self.id,
            snippet_id=self.snippet_id,
            user_email=self.user_email,
            status=ReviewStatus(self.status),
            updated_at=self.updated_at,
        )

    @classmethod
    def from_entity(cls, entity: SnippetStatus) -> "SnippetStatusModel":
        """Create from domain entity."""
        return cls(
            id=entity.id,
            snippet_id=entity.snippet_id,
            user_email=entity.user_email,
            status=entity.status.value,
            updated_at=entity.updated_at,
        )
