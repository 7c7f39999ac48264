"""SQLAlchemy model for the coin_collections table."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from coincollector.infrastructure.persistence.database import Base


class CollectionModel(Base):
    """SQLAlchemy model for the coin_collections table.

    Attributes:
        id: Primary key (UUID string).
        name: Collection name.
        group_id: ID of the owning group (no database foreign key).
    """

    __tablename__ = "coin_collections"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, comment="Collection ID (UUID)")
    name: Mapped[str] = mapped_column(String(200), nullable=False, comment="Collection name")
    group_id: Mapped[str] = mapped_column(
        String(36),
        nullable=False,
        comment="ID of the owning group",
    )

    def __repr__(self) -> str:
        return f"<Collection(id={self.id}, name={self.name}, group_id={self.group_id})>"
