import enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.models.base import StartupScopedRecord


class MilestoneStatus(str, enum.Enum):
    PLANNED = "planned"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    DELAYED = "delayed"


class MilestoneTask(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    title: str
    completed: bool = False


class Milestone(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    title: str
    description: Optional[str] = None
    target_date: Optional[str] = None
    status: MilestoneStatus = MilestoneStatus.PLANNED
    tasks: List[MilestoneTask] = Field(default_factory=list)


class Roadmap(StartupScopedRecord):
    title: str
    description: Optional[str] = None
    milestones: List[Milestone] = Field(default_factory=list)


class FeatureDocument(StartupScopedRecord):
    """Free-form planning artifact; `content` is owned by the client page"""

    title: str
    description: Optional[str] = None
    content: Dict[str, Any] = Field(default_factory=dict)


class FundingStrategy(FeatureDocument):
    pass


class ScalabilityPlan(FeatureDocument):
    pass


class LaunchToolkit(FeatureDocument):
    pass


class LegalPack(FeatureDocument):
    pass


class MarketingPlan(FeatureDocument):
    pass


class BrandingKit(FeatureDocument):
    pass
