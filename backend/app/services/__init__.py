from app.services.ai_service import AIService, get_ai_service
from app.services.progress_service import compute_progress, recalculate_progress, section_statuses
from app.services.startup_export import StartupExportService, render_business_plan

# Community services
from app.services.notification_service import notify, notify_post_comment

__all__ = [
    # Core services
    "AIService",
    "get_ai_service",
    "compute_progress",
    "recalculate_progress",
    "section_statuses",
    "StartupExportService",
    "render_business_plan",
    # Community services
    "notify",
    "notify_post_comment",
]
