from __future__ import annotations

from functools import lru_cache
from typing import Any, List

from fastapi import Depends, FastAPI, HTTPException, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging
from pydantic import BaseModel, ConfigDict, Field, StrictStr
from starlette.exceptions import HTTPException as StarletteHTTPException

from config.settings import get_settings
from enhancer import PromptEnhancer
from enhancer.errors import CompletionParseError, EnhancementError, UpstreamError
from storage import PromptRecord, PromptStore, create_store


def resolve_log_level(name: str) -> int:
    level = logging.getLevelName((name or "").strip().upper())
    return level if isinstance(level, int) else logging.INFO


settings = get_settings()
logging.basicConfig(
    level=resolve_log_level(settings.log_level),
    format="[%(asctime)s] %(levelname)s - %(message)s",
)
logger = logging.getLogger("promptcraft")

app = FastAPI(title="Promptcraft JSON Prompt Enhancer", version="1.0.0")

# CORS: allow local frontend themes during development
if settings.app_env.lower() in {"dev", "development", "local"}:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


class EnhanceRequest(BaseModel):
    raw_prompt: StrictStr = Field(
        ..., alias="rawPrompt", min_length=1, description="User's free-text description"
    )


class EnhanceResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    enhanced_prompt: Any = Field(..., alias="enhancedPrompt")


@lru_cache(maxsize=1)
def get_store() -> PromptStore:
    return create_store(get_settings().prompt_store)


def get_enhancer() -> PromptEnhancer:
    return PromptEnhancer(get_settings())


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _error(exc.status_code, str(exc.detail))


@app.exception_handler(EnhancementError)
async def enhancement_error_handler(request: Request, exc: EnhancementError) -> JSONResponse:
    # raised while building dependencies, before the endpoint body runs
    logger.error("Request setup failed for %s: %s", request.url.path, exc)
    return _error(500, str(exc))


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    problems = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err.get("loc", ()) if part not in ("body", "query"))
        problems.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    logger.info("Rejected request to %s: %s", request.url.path, problems)
    return _error(400, "Invalid request: " + "; ".join(problems))


@app.post("/api/enhance-prompt", response_model=EnhanceResponse)
def enhance_prompt(
    req: EnhanceRequest,
    store: PromptStore = Depends(get_store),
    enhancer: PromptEnhancer = Depends(get_enhancer),
) -> EnhanceResponse:
    logger.info("Incoming enhance request: raw_len=%s", len(req.raw_prompt))
    try:
        enhanced = enhancer.enhance(req.raw_prompt)
        record = store.create(req.raw_prompt, enhanced)
    except CompletionParseError as e:
        logger.error("Failed to parse completion (variant=%s): %s", enhancer.variant.name, e.raw)
        raise HTTPException(status_code=500, detail=str(e))
    except UpstreamError as e:
        logger.error("Upstream model call failed (status=%s): %s", e.status_code, e)
        raise HTTPException(status_code=500, detail=str(e))
    except Exception as e:
        logger.exception("Error enhancing prompt: %s", e)
        raise HTTPException(status_code=500, detail=str(e) or "Failed to enhance prompt")

    return EnhanceResponse(id=record.id, enhanced_prompt=record.enhanced_prompt)


@app.get("/api/prompts", response_model=List[PromptRecord])
def list_prompts(
    limit: int = Query(10, ge=0),
    store: PromptStore = Depends(get_store),
) -> List[PromptRecord]:
    try:
        return store.list(limit)
    except Exception as e:
        logger.exception("Error fetching prompts: %s", e)
        raise HTTPException(status_code=500, detail=str(e) or "Failed to fetch prompts")


@app.get("/health")
def health():
    return {"status": "ok"}
