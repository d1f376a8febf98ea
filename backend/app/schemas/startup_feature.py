from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Optional

from app.models.startup_feature import Milestone, MilestoneStatus


class FeatureInput(BaseModel):
    model_config = ConfigDict(extra="ignore")


class RoadmapCreate(FeatureInput):
    startup_id: int
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    milestones: List[Milestone] = Field(default_factory=list)


class RoadmapUpdate(FeatureInput):
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    milestones: Optional[List[Milestone]] = None


class FeatureDocumentCreate(FeatureInput):
    startup_id: int
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    content: Dict[str, Any] = Field(default_factory=dict)


class FeatureDocumentUpdate(FeatureInput):
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    content: Optional[Dict[str, Any]] = None


class MilestoneStatusUpdate(BaseModel):
    status: MilestoneStatus


class MilestoneTaskUpdate(BaseModel):
    completed: bool
