"""FastAPI application exposing the wrapper over HTTP.

WHY: Other tools (editor plugins, n8n flows, curl scripts) need to rewrap
subtitle text without shelling out to the CLI. FastAPI provides request
validation and OpenAPI docs for free.

HOW: A single FastAPI app with four endpoints: wrap plain text, wrap the
selected cues of SRT content, list modes, and health. Wrapping is pure
and fast, so every request is answered synchronously.

RULES:
- Missing mode / CPL fields fall back to subwrap.config at request time
- Pydantic validation errors return 422; SRT parse and selection errors
  return 400 with the ErrorResponse schema
- run_api() is the entry point for the subwrap-api console script
- Python 3.9+ compatible (no match/case, no PEP 604 unions)
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from fastapi import FastAPI, HTTPException

from autowrap import MODE_DESCRIPTIONS, MODES, InvalidArgument, WrapMode, wrap_lines
from subwrap import __version__
from subwrap.config import (
    configure_logging,
    load_api_bind,
    load_default_mode,
    load_max_characters_per_line,
)
from subwrap.core.srt import SubtitleParseError, generate_srt, parse_srt
from subwrap.core.wrapping import wrap_subtitles
from subwrap.server.models import (
    ErrorResponse,
    HealthResponse,
    ModeInfo,
    ModeName,
    WrapSubtitlesRequest,
    WrapSubtitlesResponse,
    WrapTextRequest,
    WrapTextResponse,
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Subtitle Wrapper API",
    description=(
        "REST API for reflowing subtitle text to a maximum number of "
        "characters per line, either packing lines as full as possible "
        "(wide) or balancing their lengths (evenly)."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _resolve_settings(
    mode: Optional[ModeName],
    max_characters_per_line: Optional[int],
) -> Tuple[WrapMode, int]:
    """Fill in missing request settings from the server configuration."""
    try:
        resolved_mode = WrapMode(mode.value) if mode is not None else load_default_mode()
        maxcpl = (
            max_characters_per_line
            if max_characters_per_line is not None
            else load_max_characters_per_line()
        )
    except ValueError as exc:
        logger.error("Invalid server configuration: %s", exc)
        raise HTTPException(status_code=500, detail="Server misconfigured: {}".format(exc))
    return resolved_mode, maxcpl


# ---------------------------------------------------------------------------
# Endpoints: Wrapping
# ---------------------------------------------------------------------------


@app.post(
    "/wrap",
    response_model=WrapTextResponse,
    tags=["wrap"],
    summary="Wrap plain text",
    description=(
        "Reflow text so that no line exceeds the maximum characters per "
        "line, breaking only at spaces and newlines. A word longer than "
        "the limit is kept whole on a line of its own."
    ),
    responses={
        422: {"description": "Invalid request body"},
    },
)
async def wrap_plain_text(request: WrapTextRequest) -> WrapTextResponse:
    mode, maxcpl = _resolve_settings(request.mode, request.max_characters_per_line)
    try:
        lines = wrap_lines(request.text, maxcpl, mode)
    except InvalidArgument as exc:
        raise HTTPException(status_code=422, detail=str(exc))

    return WrapTextResponse(
        text="\n".join(lines),
        lines=lines,
        mode=ModeName(mode.value),
        max_characters_per_line=maxcpl,
    )


@app.post(
    "/subtitles/wrap",
    response_model=WrapSubtitlesResponse,
    tags=["wrap"],
    summary="Wrap selected SRT cues",
    description=(
        "Rewrap the text of the selected cues of SRT content. Counters and "
        "timecodes are returned unchanged. Omit 'selection' to wrap every cue."
    ),
    responses={
        400: {"model": ErrorResponse, "description": "Invalid SRT or selection"},
        422: {"description": "Invalid request body"},
    },
)
async def wrap_srt(request: WrapSubtitlesRequest) -> WrapSubtitlesResponse:
    mode, maxcpl = _resolve_settings(request.mode, request.max_characters_per_line)

    try:
        document = parse_srt(request.srt)
    except SubtitleParseError as exc:
        raise HTTPException(status_code=400, detail="Invalid SRT: {}".format(exc))

    try:
        result = wrap_subtitles(document, request.selection, maxcpl, mode)
    except InvalidArgument as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    return WrapSubtitlesResponse(
        srt=generate_srt(result.document),
        wrapped=result.selected,
        changed=result.changed,
        mode=ModeName(mode.value),
        max_characters_per_line=maxcpl,
    )


# ---------------------------------------------------------------------------
# Endpoints: Modes
# ---------------------------------------------------------------------------


@app.get(
    "/modes",
    response_model=List[ModeInfo],
    tags=["modes"],
    summary="List available wrap modes",
    description="Returns the wrap modes with their descriptions and accepted aliases.",
)
async def list_modes() -> List[ModeInfo]:
    result = []
    for mode in WrapMode:
        aliases = sorted(
            name for name, member in MODES.items()
            if member is mode and name != mode.value
        )
        result.append(ModeInfo(
            key=ModeName(mode.value),
            description=MODE_DESCRIPTIONS[mode],
            aliases=aliases,
        ))
    return result


# ---------------------------------------------------------------------------
# Endpoints: Health
# ---------------------------------------------------------------------------


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["health"],
    summary="Health check",
    description="Liveness and readiness check for load balancers and orchestrators.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


def run_api():
    """Entry point for the subwrap-api console script."""
    import uvicorn

    configure_logging()
    host, port = load_api_bind()
    logger.info("Starting subtitle wrapper API on %s:%d", host, port)
    uvicorn.run(app, host=host, port=port)
