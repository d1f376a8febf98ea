from typing import Optional

from app.models.base import TimestampedRecord


class User(TimestampedRecord):
    """Registered account. `hashed_password` never leaves the API layer."""

    username: str
    email: str
    full_name: str
    hashed_password: str
    bio: Optional[str] = None
    is_active: bool = True
