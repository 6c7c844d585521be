# server/newsletter_titles/client.py
import logging
from typing import List, Optional

import requests

from newsletter_titles.errors import GENERIC_FAILURE, QuotaExceededError, TitleGenerationError

logger = logging.getLogger("newsletter-titles.client")

DEFAULT_BASE_URL = "http://127.0.0.1:8000"
GENERATE_PATH = "/api/generate-titles"


def _error_message(resp) -> str:
    try:
        body = resp.json()
    except ValueError:
        return resp.text or GENERIC_FAILURE
    if isinstance(body, dict) and isinstance(body.get("error"), str):
        return body["error"] or GENERIC_FAILURE
    return resp.text or GENERIC_FAILURE


class TitleClient:
    """
    Calls the generate-titles handler.
    One request per call; no timeout, no retries.
    """

    def __init__(self, base_url: str = DEFAULT_BASE_URL, access_token: Optional[str] = None, http=None):
        self.base_url = base_url.rstrip("/")
        self.access_token = access_token
        self.http = http if http is not None else requests.Session()

    def generate_titles(self, context: str) -> List[str]:
        headers = {"Content-Type": "application/json"}
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"

        resp = self.http.post(self.base_url + GENERATE_PATH, json={"context": context}, headers=headers)
        if resp.status_code == 200:
            try:
                titles = resp.json()["titles"]
            except (ValueError, KeyError, TypeError):
                logger.error("generate-titles replied 200 without a titles list: %s", resp.text)
                raise TitleGenerationError(GENERIC_FAILURE)
            return list(titles)

        message = _error_message(resp)
        logger.error("generate-titles failed: %s %s", resp.status_code, message)
        if resp.status_code == 402 or "quota exceeded" in message.lower():
            raise QuotaExceededError(message)
        raise TitleGenerationError(message, resp.status_code)
