# server/newsletter_titles/main.py
"""
Newsletter title service.

Run with:
    uvicorn newsletter_titles.main:app --reload
or:
    newsletter-titles-server
"""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from newsletter_titles import __version__
from newsletter_titles.api import error_response, router
from newsletter_titles.config import settings

# ---------------------------
# Logging
# ---------------------------
logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
logger = logging.getLogger("newsletter-titles")

# ---------------------------
# FastAPI
# ---------------------------
app = FastAPI(
    title="Newsletter Title Generator",
    version=__version__,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
)
app.include_router(router, prefix="/api", tags=["Titles"])


@app.exception_handler(RequestValidationError)
async def invalid_request(request: Request, exc: RequestValidationError):
    logger.warning("Rejected request body on %s: %s", request.url.path, exc.errors())
    return error_response("Request body must be JSON with a string 'context'", 400)


# ---------------------------
# Endpoints
# ---------------------------
@app.get("/")
async def root():
    return {"message": "Newsletter title generator running"}


@app.get("/health")
async def health_check():
    """Liveness probe."""
    return {"status": "ok", "version": __version__}


def run():
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
