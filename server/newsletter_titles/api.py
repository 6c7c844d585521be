# server/newsletter_titles/api.py
import logging
from typing import List, Optional

import httpx
from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from newsletter_titles.config import Settings, get_settings
from newsletter_titles.errors import GENERIC_FAILURE, TitleGenerationError
from newsletter_titles.llm_client import generate_titles

logger = logging.getLogger("newsletter-titles.api")

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}

router = APIRouter()


class GenerateTitlesReq(BaseModel):
    context: str


class GenerateTitlesResp(BaseModel):
    titles: List[str]


class ErrorResp(BaseModel):
    error: str


def get_transport() -> Optional[httpx.AsyncBaseTransport]:
    """Transport for the outbound client; None means httpx's default network transport."""
    return None


def error_response(message: str, status_code: int = 500) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=CORS_HEADERS)


@router.options("/generate-titles")
async def generate_titles_preflight():
    return Response(headers=CORS_HEADERS)


@router.post(
    "/generate-titles",
    response_model=GenerateTitlesResp,
    responses={402: {"model": ErrorResp}, 500: {"model": ErrorResp}},
)
async def generate(
    req: GenerateTitlesReq,
    settings: Settings = Depends(get_settings),
    transport: Optional[httpx.AsyncBaseTransport] = Depends(get_transport),
):
    logger.info("Received context: %s", req.context)
    try:
        titles = await generate_titles(req.context, settings, transport=transport)
    except TitleGenerationError as e:
        logger.error("Error in generate-titles: %s", e.message)
        return error_response(e.message, e.status_code)
    except Exception as e:
        logger.exception("Error in generate-titles: %s", e)
        return error_response(str(e) or GENERIC_FAILURE)
    return JSONResponse(content={"titles": titles}, headers=CORS_HEADERS)
