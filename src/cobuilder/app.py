"""FastAPI application with lifespan, health endpoint, and routers."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from cobuilder.admin.router import router as admin_router
from cobuilder.config import get_settings
from cobuilder.db.engine import dispose_engine, init_db
from cobuilder.framework import build_asset_reference
from cobuilder.llm import MessageClassifier
from cobuilder.logging_config import configure_logging
from cobuilder.slack.errors import SlackRequestError
from cobuilder.slack.router import router as slack_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: configure logging, build the classifier, manage the DB engine."""
    settings = get_settings()
    configure_logging(settings.log_level)
    app.state.settings = settings
    app.state.classifier = MessageClassifier(
        build_asset_reference(),
        model=settings.gemini_model,
        fallback_on_parse_error=settings.classification_fallback,
    )
    if settings.auto_create_tables:
        await init_db()
    yield
    await dispose_engine()


app = FastAPI(
    title="Co-Builder",
    lifespan=lifespan,
)
app.include_router(slack_router)
app.include_router(admin_router)


@app.exception_handler(SlackRequestError)
async def slack_request_error_handler(request: Request, exc: SlackRequestError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.get("/health")
async def health():
    """Health check endpoint for Cloud Run and local development."""
    return {
        "status": "ok",
        "service": "cobuilder",
        "version": "0.1.0",
    }
