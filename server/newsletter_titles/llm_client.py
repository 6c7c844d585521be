# server/newsletter_titles/llm_client.py
import json
import logging
from typing import Any, Dict, List, Optional

import httpx

from newsletter_titles.config import Settings
from newsletter_titles.errors import ConfigurationError, QuotaExceededError, UpstreamError
from newsletter_titles.parsing import parse_titles

logger = logging.getLogger("newsletter-titles.llm")

SYSTEM_PROMPT = (
    "You are a creative newsletter title generator. "
    "Generate 20 engaging, creative newsletter titles based on the provided context. "
    "Return them as a numbered list, with each title on a new line."
)
USER_PROMPT = "Generate 20 newsletter titles for a newsletter about: {context}"

QUOTA_ERROR_TYPES = ("insufficient_quota",)


def build_messages(context: str) -> List[Dict[str, str]]:
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": USER_PROMPT.format(context=context)},
    ]


def _error_body(resp: httpx.Response) -> Any:
    try:
        return resp.json()
    except ValueError:
        return resp.text


def is_quota_error(error: Any) -> bool:
    """True when an upstream error body says the account ran out of quota."""
    if not isinstance(error, dict):
        return False
    detail = error.get("error")
    if not isinstance(detail, dict):
        return False
    return detail.get("type") in QUOTA_ERROR_TYPES or detail.get("code") in QUOTA_ERROR_TYPES


async def call_openai_raw(
    messages: List[Dict[str, str]],
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Dict[str, Any]:
    """
    Send one chat-completion request and return the parsed JSON reply.
    Raises ConfigurationError without a key, QuotaExceededError / UpstreamError on a failed reply.
    """
    if not settings.OPENAI_API_KEY:
        logger.error("OpenAI API key not found")
        raise ConfigurationError("OpenAI API key not configured")

    url = settings.OPENAI_BASE_URL.rstrip("/") + "/chat/completions"
    headers = {
        "Authorization": f"Bearer {settings.OPENAI_API_KEY}",
        "Content-Type": "application/json",
    }
    payload = {
        "model": settings.OPENAI_MODEL,
        "messages": messages,
    }

    logger.info("Making request to OpenAI API...")
    async with httpx.AsyncClient(timeout=settings.OPENAI_TIMEOUT, transport=transport) as client:
        resp = await client.post(url, json=payload, headers=headers)

    if resp.is_error:
        error = _error_body(resp)
        logger.error("OpenAI API error: %s %s", resp.status_code, error)
        if is_quota_error(error):
            raise QuotaExceededError()
        raise UpstreamError(f"OpenAI API error: {json.dumps(error)}")

    return resp.json()


def extract_completion_text(resp: Any) -> str:
    """Pull choices[0].message.content out of a chat-completion reply."""
    try:
        content = resp["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError) as e:
        raise UpstreamError(f"Unexpected OpenAI response shape: {e!r}") from e
    return content or ""


async def generate_titles(
    context: str,
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> List[str]:
    raw_resp = await call_openai_raw(build_messages(context), settings, transport=transport)
    logger.info("OpenAI response received")
    titles = parse_titles(extract_completion_text(raw_resp))
    logger.info("Processed titles: %s", titles)
    return titles
