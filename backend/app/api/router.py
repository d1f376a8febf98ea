from fastapi import APIRouter
from app.api.endpoints import (
    ai,
    auth,
    forum,
    health,
    notifications,
    planning,
    resources,
    startup_features,
    startups,
    tasks,
)

api_router = APIRouter()

api_router.include_router(health.router)
api_router.include_router(auth.router, tags=["Authentication"])

# Startup CRUD and the wizard sections share the /startups prefix
api_router.include_router(startups.router, prefix="/startups", tags=["Startups"])
api_router.include_router(planning.router, prefix="/startups", tags=["Planning"])

# Tasks span /startups/{id}/tasks and /tasks/{id}
api_router.include_router(tasks.router, tags=["Tasks"])

api_router.include_router(startup_features.router, prefix="/startup-features", tags=["Startup Features"])
api_router.include_router(resources.router, prefix="/resources", tags=["Resources"])
api_router.include_router(forum.router, prefix="/forum", tags=["Forum"])
api_router.include_router(notifications.router, prefix="/notifications", tags=["Notifications"])
api_router.include_router(ai.router, prefix="/ai", tags=["AI"])
