# Pydantic request/response schemas
from app.schemas.auth import (
    UserRegister,
    UserLogin,
    UserUpdate,
    UserResponse,
    Token,
    LoginResponse,
    RefreshTokenRequest,
)
from app.schemas.startup import (
    StartupCreate,
    StartupUpdate,
    StartupResponse,
    StartupProgressResponse,
    StartupExport,
)
from app.schemas.planning import (
    StartupIdeaInput,
    TargetAudienceInput,
    BusinessModelInput,
    CompetitorInput,
    RevenueModelInput,
    MvpInput,
)
from app.schemas.task import TaskCreate, TaskUpdate
from app.schemas.forum import (
    PostCreate,
    PostUpdate,
    PostResponse,
    PostDetailResponse,
    CommentCreate,
    CommentUpdate,
    CommentResponse,
)
from app.schemas.notification import NotificationResponse, MarkAllReadResponse
from app.schemas.startup_feature import (
    RoadmapCreate,
    RoadmapUpdate,
    FeatureDocumentCreate,
    FeatureDocumentUpdate,
    MilestoneStatusUpdate,
    MilestoneTaskUpdate,
)
from app.schemas.ai import (
    AnalyzeIdeaRequest,
    BusinessModelRequest,
    PitchDeckRequest,
    AIResponse,
)

__all__ = [
    # Auth
    "UserRegister",
    "UserLogin",
    "UserUpdate",
    "UserResponse",
    "Token",
    "LoginResponse",
    "RefreshTokenRequest",
    # Startups
    "StartupCreate",
    "StartupUpdate",
    "StartupResponse",
    "StartupProgressResponse",
    "StartupExport",
    # Planning sections
    "StartupIdeaInput",
    "TargetAudienceInput",
    "BusinessModelInput",
    "CompetitorInput",
    "RevenueModelInput",
    "MvpInput",
    # Tasks
    "TaskCreate",
    "TaskUpdate",
    # Forum
    "PostCreate",
    "PostUpdate",
    "PostResponse",
    "PostDetailResponse",
    "CommentCreate",
    "CommentUpdate",
    "CommentResponse",
    # Notifications
    "NotificationResponse",
    "MarkAllReadResponse",
    # Extended artifacts
    "RoadmapCreate",
    "RoadmapUpdate",
    "FeatureDocumentCreate",
    "FeatureDocumentUpdate",
    "MilestoneStatusUpdate",
    "MilestoneTaskUpdate",
    # AI
    "AnalyzeIdeaRequest",
    "BusinessModelRequest",
    "PitchDeckRequest",
    "AIResponse",
]
