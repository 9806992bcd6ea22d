"""FastAPI application exposing the typography helpers over HTTP.

WHY: Front-end builds and CMS hooks written in other languages need the
same non-breaking space pass and Figma style conversion as Python code.
A tiny HTTP API gives them one shared implementation.

HOW: POST /prepare runs prepare_string() with the configured dictionary,
optionally extended per request. POST /style runs text_style_from_figma()
and returns the attributes, paragraph attributes and inline CSS.
GET /health is a liveness check.

RULES:
- The dictionary is resolved once per process, at startup, and get_words()
  can be replaced in tests with app.dependency_overrides
- A broken words file or empty dictionary fails startup; if it still
  reaches a request it is a 500 with an ErrorResponse detail
- Blank extra_words entries are rejected with 400
- Request validation errors are FastAPI's standard 422
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import Annotated, FrozenSet

from fastapi import Depends, FastAPI, HTTPException

from ui_typography import __version__
from ui_typography.config import (
    API_HOST,
    API_PORT,
    LOG_LEVEL,
    normalize_words,
    resolve_log_level,
    resolve_words,
)
from ui_typography.css import attrs_to_css, to_inline_style
from ui_typography.markup import render_text
from ui_typography.server.models import (
    AttributeModel,
    ErrorResponse,
    HealthResponse,
    PrepareRequest,
    PrepareResponse,
    StyleRequest,
    StyleResponse,
)
from ui_typography.style import (
    StyleProps,
    attribute_to_dict,
    paragraph_attrs,
    style_to_dict,
    text_style_from_figma,
)
from ui_typography.text import prepare_string

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _configured_words() -> FrozenSet[str]:
    words = resolve_words()
    logger.info("Dictionary loaded with %d words", len(words))
    return words


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Resolve the dictionary before serving so bad configuration fails fast."""
    _configured_words()
    yield


app = FastAPI(
    lifespan=lifespan,
    title="UI Typography API",
    description=(
        "Insert non-breaking spaces after short words in UI copy and "
        "convert Figma text styles into style attributes and CSS."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)


def get_words() -> FrozenSet[str]:
    """Dictionary from the environment.

    Raises:
        HTTPException: 500 if the words file is missing or the dictionary
            is empty.
    """
    try:
        return _configured_words()
    except (OSError, ValueError) as e:
        logger.error("Dictionary configuration error: %s", e)
        raise HTTPException(status_code=500, detail="Dictionary configuration error: {}".format(e))


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------


@app.post(
    "/prepare",
    response_model=PrepareResponse,
    tags=["text"],
    summary="Insert non-breaking spaces",
    responses={
        400: {"model": ErrorResponse, "description": "Blank extra word."},
        500: {"model": ErrorResponse, "description": "Dictionary misconfigured."},
    },
)
async def prepare(
    request: PrepareRequest,
    words: Annotated[FrozenSet[str], Depends(get_words)],
) -> PrepareResponse:
    if request.extra_words is not None:
        if any(not w.strip() for w in request.extra_words):
            raise HTTPException(status_code=400, detail="extra_words must not contain blank entries")
        words = words | normalize_words(request.extra_words)

    prepared = prepare_string(request.text, words)
    logger.info("Prepared %d chars", len(request.text))
    return PrepareResponse(text=prepared, html=render_text(prepared))


@app.post(
    "/style",
    response_model=StyleResponse,
    tags=["style"],
    summary="Convert a Figma text style",
)
async def style(request: StyleRequest) -> StyleResponse:
    props = StyleProps(
        font_family=request.font_family,
        font_weight=request.font_weight,
        font_size_px=request.font_size_px,
        line_height_px=request.line_height_px,
        letter_spacing_percent=request.letter_spacing_percent,
        region=request.region,
    )
    text_style = text_style_from_figma(props)
    combined = paragraph_attrs(text_style)
    data = style_to_dict(text_style)
    logger.info("Converted style for %s", request.font_family[0])

    return StyleResponse(
        attrs=[AttributeModel(**a) for a in data["attrs"]],
        paragraph_spacing=AttributeModel(**data["paragraph_spacing"]),
        paragraph_attrs=[AttributeModel(**attribute_to_dict(a)) for a in combined],
        css=to_inline_style(attrs_to_css(combined)),
    )


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["health"],
    summary="Health check",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


def run_api():
    """Entry point for the ui-typography-api console script."""
    import uvicorn

    logging.basicConfig(
        level=resolve_log_level(LOG_LEVEL),
        format="%(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(app, host=API_HOST, port=API_PORT)
