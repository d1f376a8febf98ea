"""
AI Service - startup advice through the completion client.

Each operation sends one system + user prompt asking for a JSON object
and returns the parsed object. Failures surface as AIServiceError so the
endpoint can answer {"success": false, "error": ...}.
"""

import json
import re
from typing import Any, Dict, Optional

from app.core.config import settings
from app.core.exceptions import AIServiceError, AIResponseParseError
from app.core.logging_config import logger
from app.utils.claude_client import get_claude_client

_CODE_FENCE = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL)

JSON_ONLY = "Respond with a single JSON object and nothing else."

IDEA_ADVISOR_PROMPT = (
    "You are a startup advisor specialized in helping entrepreneurs refine their ideas. "
    "Provide concise, actionable advice. " + JSON_ONLY
)

BUSINESS_MODEL_PROMPT = (
    "You are a business model expert who helps startups identify the most suitable "
    "revenue strategies. " + JSON_ONLY
)

PITCH_DECK_PROMPT = (
    "You are a pitch deck expert who helps startups create compelling presentations "
    "for investors. " + JSON_ONLY
)


def parse_json_object(content: str) -> Dict[str, Any]:
    """Parse completion text into a dict, tolerating a surrounding ```json fence"""
    text = (content or "").strip()
    fenced = _CODE_FENCE.match(text)
    if fenced:
        text = fenced.group(1)

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise AIResponseParseError(f"AI response was not valid JSON: {e.msg}")

    if not isinstance(data, dict):
        raise AIResponseParseError("AI response was not a JSON object")
    return data


class AIService:
    """Prompt builders around an injected completion client"""

    def __init__(self, client):
        self.client = client

    async def _complete(self, operation: str, system_prompt: str, prompt: str,
                        max_tokens: Optional[int] = None) -> Dict[str, Any]:
        try:
            result = await self.client.generate(
                prompt=prompt,
                system_prompt=system_prompt,
                max_tokens=max_tokens or settings.AI_MAX_TOKENS,
                temperature=settings.AI_TEMPERATURE,
            )
        except AIServiceError:
            raise
        except Exception as e:
            logger.log_error_with_context(e, context=f"ai.{operation}")
            raise AIServiceError(f"AI service request failed for {operation}")

        data = parse_json_object(result.get("content", ""))
        logger.log_ai_event(operation, "completed", tokens_used=result.get("total_tokens", 0))
        return data

    async def analyze_idea(self, idea: str, industry: str) -> Dict[str, Any]:
        prompt = (
            f"I'm thinking of creating a startup in the {industry} industry. "
            f"My idea is: {idea}. Please provide a brief analysis and recommendations. "
            "Provide JSON with: analysis (string), strengths (array), weaknesses (array) "
            "and recommendations (array)."
        )
        return await self._complete("analyze_idea", IDEA_ADVISOR_PROMPT, prompt)

    async def suggest_business_models(self, idea: str, industry: str, target_audience: str) -> Dict[str, Any]:
        prompt = (
            "Please suggest business models for my startup:\n"
            f"Industry: {industry}\n"
            f"Idea: {idea}\n"
            f"Target audience: {target_audience}\n"
            "Provide JSON with: suitableModels (array), description (string) and reasoning (string)."
        )
        return await self._complete("business_model", BUSINESS_MODEL_PROMPT, prompt)

    async def outline_pitch_deck(self, startup_name: str, idea: str, industry: str,
                                 target_audience: str, business_model: str) -> Dict[str, Any]:
        prompt = (
            "Create a pitch deck outline for my startup:\n"
            f"Name: {startup_name}\n"
            f"Industry: {industry}\n"
            f"Idea: {idea}\n"
            f"Target audience: {target_audience}\n"
            f"Business model: {business_model}\n"
            "Provide JSON with a slides array containing title and content fields for each slide."
        )
        return await self._complete(
            "pitch_deck", PITCH_DECK_PROMPT, prompt,
            max_tokens=settings.AI_PITCH_DECK_MAX_TOKENS,
        )


def get_ai_service() -> AIService:
    """FastAPI dependency; tests override it with a mock client"""
    return AIService(get_claude_client())
