"""
Planning section records - the six wizard steps of a startup plan.

Each section holds at most one row per startup. Nested JSON documents
are typed sub-models whose fields are all optional, so partially filled
wizard pages still validate.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.models.base import StartupScopedRecord


class Document(BaseModel):
    """Nested JSON document inside a section"""

    model_config = ConfigDict(extra="ignore")


# ==================== Idea ====================

class StartupIdea(StartupScopedRecord):
    problem_statement: str
    solution: str
    unique_value_proposition: str
    target_industry: str
    target_market_size: Optional[str] = None
    challenges_and_opportunities: Optional[str] = None


# ==================== Audience ====================

class Demographics(Document):
    age_range: Optional[str] = None
    genders: List[str] = Field(default_factory=list)
    income_level: Optional[str] = None
    education_level: Optional[str] = None
    location: Optional[str] = None
    occupation: Optional[str] = None


class Psychographics(Document):
    interests: List[str] = Field(default_factory=list)
    values: List[str] = Field(default_factory=list)
    goals: Optional[str] = None
    pain_points: Optional[str] = None


class BuyingBehavior(Document):
    purchase_channels: List[str] = Field(default_factory=list)
    decision_factors: List[str] = Field(default_factory=list)
    budget_range: Optional[str] = None
    purchase_frequency: Optional[str] = None


class TargetAudience(StartupScopedRecord):
    demographics: Demographics
    psychographics: Psychographics
    buying_behavior: BuyingBehavior
    summary: Optional[str] = None


# ==================== Business Model ====================

class CostItem(Document):
    item: Optional[str] = None
    description: Optional[str] = None


class BusinessModel(StartupScopedRecord):
    model_type: str
    key_resources: List[str] = Field(default_factory=list)
    key_activities: List[str] = Field(default_factory=list)
    value_proposition: Optional[str] = None
    customer_relationships: Optional[str] = None
    channels: List[str] = Field(default_factory=list)
    cost_structure: List[CostItem] = Field(default_factory=list)


# ==================== Competition ====================

class CompetitorEntry(Document):
    name: Optional[str] = None
    strengths: Optional[str] = None
    weaknesses: Optional[str] = None
    market_share: Optional[str] = None
    key_differentiator: Optional[str] = None


class SwotAnalysis(Document):
    strengths: List[str] = Field(default_factory=list)
    weaknesses: List[str] = Field(default_factory=list)
    opportunities: List[str] = Field(default_factory=list)
    threats: List[str] = Field(default_factory=list)


class Competitor(StartupScopedRecord):
    competitor_data: List[CompetitorEntry] = Field(default_factory=list)
    swot_analysis: SwotAnalysis = Field(default_factory=SwotAnalysis)
    market_positioning: Optional[str] = None


# ==================== Revenue ====================

class RevenueStream(Document):
    name: Optional[str] = None
    description: Optional[str] = None
    estimated_percentage: Optional[float] = None
    pricing_model: Optional[str] = None


class FinancialProjections(Document):
    initial_investment: Optional[float] = None
    monthly_expenses: Optional[float] = None
    projected_revenue_year1: Optional[float] = None
    projected_revenue_year2: Optional[float] = None
    projected_revenue_year3: Optional[float] = None
    target_margin: Optional[float] = None
    breakeven_timeline: Optional[str] = None
    notes: Optional[str] = None


class RevenueModel(StartupScopedRecord):
    revenue_streams: List[RevenueStream] = Field(default_factory=list)
    pricing_strategy: Optional[str] = None
    financial_projections: FinancialProjections = Field(default_factory=FinancialProjections)


# ==================== MVP ====================

class MvpFeature(Document):
    name: Optional[str] = None
    description: Optional[str] = None
    priority: Optional[str] = None
    status: Optional[str] = None


class MvpMilestone(Document):
    milestone: Optional[str] = None
    delivery_date: Optional[str] = None
    description: Optional[str] = None


class SuccessCriterion(Document):
    criterion: Optional[str] = None
    metric: Optional[str] = None
    target: Optional[str] = None


class Mvp(StartupScopedRecord):
    features: List[MvpFeature] = Field(default_factory=list)
    timeline: List[MvpMilestone] = Field(default_factory=list)
    resources: List[str] = Field(default_factory=list)
    success_criteria: List[SuccessCriterion] = Field(default_factory=list)
