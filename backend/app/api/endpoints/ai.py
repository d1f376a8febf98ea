"""
AI assistance endpoints.

Each call forwards the form fields to the completion service and returns
{"success": true, "data": {...}}. Upstream failures and unparseable
output come back as 502 {"success": false, "error": "..."}.
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from app.core.exceptions import AIServiceError
from app.core.logging_config import logger
from app.core.rate_limiter import ai_operation_rate_limit
from app.models.user import User
from app.modules.auth.dependencies import get_current_user
from app.schemas.ai import AIResponse, AnalyzeIdeaRequest, BusinessModelRequest, PitchDeckRequest
from app.services.ai_service import AIService, get_ai_service

router = APIRouter()


def _failure(operation: str, error: AIServiceError) -> JSONResponse:
    logger.warning(f"[AI] {operation} failed: {error.message}")
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={"success": False, "error": error.message},
    )


@router.post("/analyze-idea", response_model=AIResponse)
@ai_operation_rate_limit()
async def analyze_idea(
    request: Request,
    payload: AnalyzeIdeaRequest,
    current_user: User = Depends(get_current_user),
    ai_service: AIService = Depends(get_ai_service),
):
    """Strengths, weaknesses and recommendations for a startup idea"""
    try:
        data = await ai_service.analyze_idea(payload.idea, payload.industry)
    except AIServiceError as e:
        return _failure("analyze_idea", e)
    return AIResponse(data=data)


@router.post("/business-model", response_model=AIResponse)
@ai_operation_rate_limit()
async def suggest_business_model(
    request: Request,
    payload: BusinessModelRequest,
    current_user: User = Depends(get_current_user),
    ai_service: AIService = Depends(get_ai_service),
):
    """Business models that suit the idea and audience"""
    try:
        data = await ai_service.suggest_business_models(
            payload.idea, payload.industry, payload.target_audience,
        )
    except AIServiceError as e:
        return _failure("business_model", e)
    return AIResponse(data=data)


@router.post("/pitch-deck", response_model=AIResponse)
@ai_operation_rate_limit()
async def outline_pitch_deck(
    request: Request,
    payload: PitchDeckRequest,
    current_user: User = Depends(get_current_user),
    ai_service: AIService = Depends(get_ai_service),
):
    """Slide-by-slide pitch deck outline"""
    try:
        data = await ai_service.outline_pitch_deck(
            payload.startup_name,
            payload.idea,
            payload.industry,
            payload.target_audience,
            payload.business_model,
        )
    except AIServiceError as e:
        return _failure("pitch_deck", e)
    return AIResponse(data=data)
