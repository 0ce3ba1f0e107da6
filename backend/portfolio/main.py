from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import os

from core import config
from core.logger import log_event
from portfolio.api.connectors import router as connectors_router
from portfolio.api.resume import router as resume_router
from portfolio.assistant import (
    AssistantConfigurationError,
    AssistantStrategy,
    AssistantUpstreamError,
    build_assistant,
)
from portfolio.schemas import ChatRequest, ChatResponse, ErrorResponse

app = FastAPI(title="Portfolio API")
logger = logging.getLogger("portfolio.main")


def _get_allowed_origins() -> list[str]:
    raw = os.getenv("CORS_ALLOW_ORIGINS", "").strip()
    if not raw:
        return [
            "http://localhost:5173",
            "http://127.0.0.1:5173",
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ]
    return [item.strip() for item in raw.split(",") if item.strip()]


_allowed_origins = _get_allowed_origins()

app.add_middleware(
    CORSMiddleware,
    allow_origins=_allowed_origins,
    allow_methods=["*"],
    allow_headers=["*"],
    allow_credentials=False,
)

app.include_router(resume_router, prefix="/api")
app.include_router(connectors_router, prefix="/api")


def _error(status_code: int, message: str, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return _error(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.info("rejected request | path=%s errors=%s", request.url.path, len(exc.errors()))
    if request.url.path == "/api/chat":
        return _error(400, "Messages array is required")
    return _error(400, "Invalid request")


@app.exception_handler(AssistantConfigurationError)
async def assistant_config_error_handler(request: Request, exc: AssistantConfigurationError):
    logger.error("assistant unavailable | path=%s err=%s", request.url.path, exc)
    return _error(500, str(exc))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("unhandled error | path=%s", request.url.path)
    return _error(500, "Internal server error")


@app.on_event("startup")
async def startup_banner():
    logger.info("[SYSTEM] CORS allow_origins=%s", _allowed_origins)
    logger.info(
        "[SYSTEM] assistant strategy=%s model=%s connector_style=%s",
        config.ASSISTANT_STRATEGY,
        config.MODEL_NAME,
        config.CONNECTOR_STYLE,
    )


def get_assistant() -> AssistantStrategy:
    return build_assistant(config.ASSISTANT_STRATEGY)


@app.get("/healthz")
async def healthz():
    return {"status": "ok", "service": "portfolio"}


@app.post(
    "/api/chat",
    response_model=ChatResponse,
    responses={400: {"model": ErrorResponse}, 405: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def chat(req: ChatRequest, assistant: AssistantStrategy = Depends(get_assistant)):
    turns = [turn.model_dump() for turn in req.messages]
    log_event("api", "chat_request", messages=turns, strategy=type(assistant).__name__)
    try:
        reply = await assistant.answer(turns)
    except AssistantConfigurationError as exc:
        logger.error("chat unavailable | err=%s", exc)
        return _error(500, str(exc))
    except AssistantUpstreamError as exc:
        log_event("api", "chat_failed", status_code=exc.status_code)
        return _error(exc.status_code, str(exc))
    except Exception:
        logger.exception("chat failed")
        return _error(500, "Internal server error")

    log_event("api", "chat_response", content=reply.content, skills=reply.skills, experiences=reply.experiences)
    return reply.to_dict()
