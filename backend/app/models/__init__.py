# Re-export all models for convenient imports
from app.models.base import Record, TimestampedRecord, StartupScopedRecord
from app.models.user import User
from app.models.startup import Startup
from app.models.planning import (
    StartupIdea,
    TargetAudience,
    BusinessModel,
    Competitor,
    RevenueModel,
    Mvp,
)
from app.models.startup_feature import (
    Roadmap,
    Milestone,
    MilestoneTask,
    MilestoneStatus,
    FundingStrategy,
    ScalabilityPlan,
    LaunchToolkit,
    LegalPack,
    MarketingPlan,
    BrandingKit,
)
from app.models.task import Task, TaskStatus, TaskPriority
from app.models.resource import Resource
from app.models.forum import ForumPost, ForumComment
from app.models.notification import Notification, NotificationType
from app.models.kinds import (
    EntityKind,
    KIND_MODELS,
    CORE_SECTION_KINDS,
    FEATURE_KINDS,
    SINGLETON_KINDS,
    model_for,
)

__all__ = [
    "Record",
    "TimestampedRecord",
    "StartupScopedRecord",
    # Accounts
    "User",
    "Startup",
    # Planning sections
    "StartupIdea",
    "TargetAudience",
    "BusinessModel",
    "Competitor",
    "RevenueModel",
    "Mvp",
    # Extended artifacts
    "Roadmap",
    "Milestone",
    "MilestoneTask",
    "MilestoneStatus",
    "FundingStrategy",
    "ScalabilityPlan",
    "LaunchToolkit",
    "LegalPack",
    "MarketingPlan",
    "BrandingKit",
    # Planner / library / community
    "Task",
    "TaskStatus",
    "TaskPriority",
    "Resource",
    "ForumPost",
    "ForumComment",
    "Notification",
    "NotificationType",
    # Registry
    "EntityKind",
    "KIND_MODELS",
    "CORE_SECTION_KINDS",
    "FEATURE_KINDS",
    "SINGLETON_KINDS",
    "model_for",
]
