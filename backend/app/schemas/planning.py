"""
Request bodies for the six planning sections.

A POST body is always validated in full. When the section already exists
only the fields the client actually sent are merged into it.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

from app.models.planning import (
    BuyingBehavior,
    CompetitorEntry,
    CostItem,
    Demographics,
    FinancialProjections,
    MvpFeature,
    MvpMilestone,
    Psychographics,
    RevenueStream,
    SuccessCriterion,
    SwotAnalysis,
)


class SectionInput(BaseModel):
    model_config = ConfigDict(extra="ignore")


class StartupIdeaInput(SectionInput):
    problem_statement: str = Field(..., min_length=1)
    solution: str = Field(..., min_length=1)
    unique_value_proposition: str = Field(..., min_length=1)
    target_industry: str = Field(..., min_length=1)
    target_market_size: Optional[str] = None
    challenges_and_opportunities: Optional[str] = None


class TargetAudienceInput(SectionInput):
    demographics: Demographics
    psychographics: Psychographics
    buying_behavior: BuyingBehavior
    summary: Optional[str] = None


class BusinessModelInput(SectionInput):
    model_type: str = Field(..., min_length=1)
    key_resources: List[str] = Field(default_factory=list)
    key_activities: List[str] = Field(default_factory=list)
    value_proposition: Optional[str] = None
    customer_relationships: Optional[str] = None
    channels: List[str] = Field(default_factory=list)
    cost_structure: List[CostItem] = Field(default_factory=list)


class CompetitorInput(SectionInput):
    competitor_data: List[CompetitorEntry] = Field(default_factory=list)
    swot_analysis: SwotAnalysis = Field(default_factory=SwotAnalysis)
    market_positioning: Optional[str] = None


class RevenueModelInput(SectionInput):
    revenue_streams: List[RevenueStream] = Field(default_factory=list)
    pricing_strategy: Optional[str] = None
    financial_projections: FinancialProjections = Field(default_factory=FinancialProjections)


class MvpInput(SectionInput):
    features: List[MvpFeature] = Field(default_factory=list)
    timeline: List[MvpMilestone] = Field(default_factory=list)
    resources: List[str] = Field(default_factory=list)
    success_criteria: List[SuccessCriterion] = Field(default_factory=list)
