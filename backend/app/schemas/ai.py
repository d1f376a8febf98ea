from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict


class AIRequest(BaseModel):
    """Accepts both snake_case and the camelCase keys the web client sends"""
    model_config = ConfigDict(populate_by_name=True)


class AnalyzeIdeaRequest(AIRequest):
    idea: str = Field(..., min_length=1)
    industry: str = Field(..., min_length=1)


class BusinessModelRequest(AIRequest):
    idea: str = Field(..., min_length=1)
    industry: str = Field(..., min_length=1)
    target_audience: str = Field(..., min_length=1, alias="targetAudience")


class PitchDeckRequest(AIRequest):
    startup_name: str = Field(..., min_length=1, alias="startupName")
    idea: str = Field(..., min_length=1)
    industry: str = Field(..., min_length=1)
    target_audience: str = Field(..., min_length=1, alias="targetAudience")
    business_model: str = Field(..., min_length=1, alias="businessModel")


class AIResponse(BaseModel):
    success: bool = True
    data: Dict[str, Any]
