from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Optional, Any
from datetime import datetime


class StartupCreate(BaseModel):
    """New startup; `user_id` comes from the token and `progress` starts at 0"""
    name: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    industry: str = Field(..., min_length=1)
    stage: str = Field(..., min_length=1)


class StartupUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, min_length=1)
    industry: Optional[str] = Field(None, min_length=1)
    stage: Optional[str] = Field(None, min_length=1)


class StartupResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    name: str
    description: str
    industry: str
    stage: str
    progress: int
    created_at: datetime
    updated_at: Optional[datetime] = None


class SectionStatus(BaseModel):
    key: str
    label: str
    completed: bool


class StartupProgressResponse(BaseModel):
    startup_id: int
    progress: int
    completed_sections: int
    total_sections: int
    sections: List[SectionStatus]


class StartupExport(BaseModel):
    """Everything recorded for one startup, as shown on the export page"""
    startup: StartupResponse
    sections: Dict[str, Optional[Dict[str, Any]]]
    features: Dict[str, Optional[Dict[str, Any]]]
    tasks: List[Dict[str, Any]]
    exported_at: datetime
