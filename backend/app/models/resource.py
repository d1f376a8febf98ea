from typing import Optional

from app.models.base import Record


class Resource(Record):
    """Library entry. A null `industry` means the resource applies to every industry."""

    category: str
    title: str
    description: Optional[str] = None
    content: str
    format: str = "markdown"
    industry: Optional[str] = None
