from app.models.base import TimestampedRecord


class Startup(TimestampedRecord):
    """Startup model. `progress` is derived from the planning sections."""

    user_id: int
    name: str
    description: str
    industry: str
    stage: str
    progress: int = 0
