"""SQLAlchemy model for the coin_groups table."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from coincollector.infrastructure.persistence.database import Base


class GroupModel(Base):
    """SQLAlchemy model for the coin_groups table.

    ``owner_id`` references a user but is deliberately not a database
    foreign key: ownership is resolved by the services.

    Attributes:
        id: Primary key (UUID string).
        name: Group name.
        owner_id: ID of the owning user.
    """

    __tablename__ = "coin_groups"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, comment="Group ID (UUID)")
    name: Mapped[str] = mapped_column(String(200), nullable=False, comment="Group name")
    owner_id: Mapped[str] = mapped_column(
        String(36),
        nullable=False,
        comment="ID of the owning user",
    )

    def __repr__(self) -> str:
        return f"<Group(id={self.id}, name={self.name}, owner_id={self.owner_id})>"
