import enum
from typing import Dict, Tuple, Type

from app.models.base import Record
from app.models.forum import ForumComment, ForumPost
from app.models.notification import Notification
from app.models.planning import (
    BusinessModel,
    Competitor,
    Mvp,
    RevenueModel,
    StartupIdea,
    TargetAudience,
)
from app.models.resource import Resource
from app.models.startup import Startup
from app.models.startup_feature import (
    BrandingKit,
    FundingStrategy,
    LaunchToolkit,
    LegalPack,
    MarketingPlan,
    Roadmap,
    ScalabilityPlan,
)
from app.models.task import Task
from app.models.user import User


class EntityKind(str, enum.Enum):
    """Every collection the entity store knows about"""
    USER = "user"
    STARTUP = "startup"
    STARTUP_IDEA = "startup_idea"
    TARGET_AUDIENCE = "target_audience"
    BUSINESS_MODEL = "business_model"
    COMPETITOR = "competitor"
    REVENUE_MODEL = "revenue_model"
    MVP = "mvp"
    ROADMAP = "roadmap"
    FUNDING_STRATEGY = "funding_strategy"
    SCALABILITY_PLAN = "scalability_plan"
    LAUNCH_TOOLKIT = "launch_toolkit"
    LEGAL_PACK = "legal_pack"
    MARKETING_PLAN = "marketing_plan"
    BRANDING_KIT = "branding_kit"
    TASK = "task"
    RESOURCE = "resource"
    FORUM_POST = "forum_post"
    FORUM_COMMENT = "forum_comment"
    NOTIFICATION = "notification"

    @property
    def label(self) -> str:
        """Human readable name used in error messages"""
        return _LABELS.get(self, self.value.replace("_", " ").capitalize())


_LABELS = {
    EntityKind.COMPETITOR: "Competition analysis",
    EntityKind.MVP: "MVP",
    EntityKind.FORUM_POST: "Forum post",
    EntityKind.FORUM_COMMENT: "Comment",
}


KIND_MODELS: Dict[EntityKind, Type[Record]] = {
    EntityKind.USER: User,
    EntityKind.STARTUP: Startup,
    EntityKind.STARTUP_IDEA: StartupIdea,
    EntityKind.TARGET_AUDIENCE: TargetAudience,
    EntityKind.BUSINESS_MODEL: BusinessModel,
    EntityKind.COMPETITOR: Competitor,
    EntityKind.REVENUE_MODEL: RevenueModel,
    EntityKind.MVP: Mvp,
    EntityKind.ROADMAP: Roadmap,
    EntityKind.FUNDING_STRATEGY: FundingStrategy,
    EntityKind.SCALABILITY_PLAN: ScalabilityPlan,
    EntityKind.LAUNCH_TOOLKIT: LaunchToolkit,
    EntityKind.LEGAL_PACK: LegalPack,
    EntityKind.MARKETING_PLAN: MarketingPlan,
    EntityKind.BRANDING_KIT: BrandingKit,
    EntityKind.TASK: Task,
    EntityKind.RESOURCE: Resource,
    EntityKind.FORUM_POST: ForumPost,
    EntityKind.FORUM_COMMENT: ForumComment,
    EntityKind.NOTIFICATION: Notification,
}

# The six wizard steps that drive startup progress, in wizard order
CORE_SECTION_KINDS: Tuple[EntityKind, ...] = (
    EntityKind.STARTUP_IDEA,
    EntityKind.TARGET_AUDIENCE,
    EntityKind.BUSINESS_MODEL,
    EntityKind.COMPETITOR,
    EntityKind.REVENUE_MODEL,
    EntityKind.MVP,
)

# One-per-startup artifacts outside the progress calculation
FEATURE_KINDS: Tuple[EntityKind, ...] = (
    EntityKind.ROADMAP,
    EntityKind.FUNDING_STRATEGY,
    EntityKind.SCALABILITY_PLAN,
    EntityKind.LAUNCH_TOOLKIT,
    EntityKind.LEGAL_PACK,
    EntityKind.MARKETING_PLAN,
    EntityKind.BRANDING_KIT,
)

# Kinds that hold at most one row per startup
SINGLETON_KINDS = frozenset(CORE_SECTION_KINDS + FEATURE_KINDS)


def model_for(kind: EntityKind) -> Type[Record]:
    return KIND_MODELS[EntityKind(kind)]
