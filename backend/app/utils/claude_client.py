from anthropic import AsyncAnthropic, APIStatusError, APIError, APIConnectionError, APITimeoutError
from typing import Optional, Dict, Any
import asyncio
import random
import httpx
from app.core.config import settings
from app.core.logging_config import logger

# Retry configuration - loaded from settings
MAX_RETRIES = settings.AI_MAX_RETRIES
BASE_DELAY = settings.AI_RETRY_BASE_DELAY
MAX_DELAY = settings.AI_RETRY_MAX_DELAY
REQUEST_TIMEOUT = float(settings.AI_REQUEST_TIMEOUT)
RETRYABLE_ERRORS = ['overloaded_error', 'rate_limit_error', 'api_error']


class ClaudeClient:
    """Claude API client wrapper for single-shot completions"""

    def __init__(self, api_key: Optional[str] = None, base_url: Optional[str] = None):
        client_kwargs: Dict[str, Any] = {"api_key": api_key or settings.ANTHROPIC_API_KEY}

        base_url = base_url if base_url is not None else settings.ANTHROPIC_BASE_URL
        if base_url and base_url.strip():
            client_kwargs["base_url"] = base_url.strip()
            logger.info(f"Using custom Claude API base URL: {base_url}")

        client_kwargs["timeout"] = httpx.Timeout(REQUEST_TIMEOUT)
        # Retries are handled below so they show up in our logs
        client_kwargs["max_retries"] = 0

        self.async_client = AsyncAnthropic(**client_kwargs)
        self.model = settings.AI_MODEL

        logger.info(f"Claude client initialized: timeout={REQUEST_TIMEOUT}s, model={self.model}")

    def _is_retryable_error(self, error: Exception) -> bool:
        """Overload, rate limit and network failures are worth another attempt"""
        if isinstance(error, (APIConnectionError, APITimeoutError)):
            return True

        if isinstance(error, (httpx.ConnectError, httpx.TimeoutException, httpx.NetworkError)):
            return True

        if isinstance(error, APIStatusError):
            if isinstance(error.body, dict):
                error_type = error.body.get('error', {}).get('type', '')
                if error_type in RETRYABLE_ERRORS:
                    return True
            return error.status_code in (429, 500, 502, 503, 529)

        return False

    def _calculate_retry_delay(self, attempt: int) -> float:
        """Exponential backoff with up to 25% jitter"""
        delay = min(BASE_DELAY * (2 ** attempt), MAX_DELAY)
        return delay + delay * random.uniform(0, 0.25)

    async def generate(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
    ) -> Dict[str, Any]:
        """
        Generate a completion (non-streaming)

        Returns:
            Dict with content, model and token usage
        """
        if max_tokens is None:
            max_tokens = settings.AI_MAX_TOKENS
        if temperature is None:
            temperature = settings.AI_TEMPERATURE

        logger.info(f"Claude API: model={self.model}, max_tokens={max_tokens}, prompt_len={len(prompt)}")

        last_error: Optional[Exception] = None
        for attempt in range(MAX_RETRIES + 1):
            try:
                response = await self.async_client.messages.create(
                    model=self.model,
                    max_tokens=max_tokens,
                    temperature=temperature,
                    system=system_prompt or "",
                    messages=[{"role": "user", "content": prompt}],
                )

                content = response.content[0].text if response.content else ""
                result = {
                    "content": content,
                    "model": self.model,
                    "input_tokens": response.usage.input_tokens,
                    "output_tokens": response.usage.output_tokens,
                    "total_tokens": response.usage.input_tokens + response.usage.output_tokens,
                    "stop_reason": response.stop_reason,
                    "id": response.id,
                }

                logger.info(f"Claude API response: id={response.id}, tokens={result['total_tokens']}, stop={response.stop_reason}")
                return result

            except (APIError, httpx.HTTPError) as e:
                last_error = e
                error_type = type(e).__name__
                if self._is_retryable_error(e) and attempt < MAX_RETRIES:
                    delay = self._calculate_retry_delay(attempt)
                    logger.warning(
                        f"Claude API error [{error_type}] (attempt {attempt + 1}/{MAX_RETRIES + 1}), retrying in {delay:.1f}s...",
                        extra={
                            "event_type": "claude_api_retry",
                            "error_type": error_type,
                            "attempt": attempt + 1,
                            "retry_delay": delay,
                        }
                    )
                    await asyncio.sleep(delay)
                else:
                    logger.error(
                        f"Claude API error (non-retryable or max retries exceeded): {error_type}: {e}",
                        extra={
                            "event_type": "claude_api_error",
                            "error_type": error_type,
                            "attempt": attempt + 1,
                        }
                    )
                    raise

        raise last_error

    async def close(self) -> None:
        await self.async_client.close()


_claude_client: Optional[ClaudeClient] = None


def get_claude_client() -> ClaudeClient:
    """Lazily create the shared client on first use"""
    global _claude_client
    if _claude_client is None:
        _claude_client = ClaudeClient()
    return _claude_client
