"""User entity."""

import uuid
from dataclasses import dataclass


@dataclass
class User:
    """A registered user owning coin groups.

    Attributes:
        id: Unique identifier (UUID string).
        username: Unique login name.
    """

    id: str
    username: str

    def __post_init__(self) -> None:
        """Validate user data after initialization."""
        if not self.id or not self.id.strip():
            raise ValueError("User ID is required")
        if not self.username or not self.username.strip():
            raise ValueError("Username is required")

    @classmethod
    def create(cls, username: str) -> "User":
        return cls(id=str(uuid.uuid4()), username=username.strip())
