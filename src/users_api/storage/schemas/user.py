"""User storage schema."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class UserSchema:
    """Stored representation of an application user."""

    id: int
    name: str
    email: str
    created_at: datetime
    updated_at: datetime
