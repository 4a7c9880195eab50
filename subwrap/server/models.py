"""Pydantic request/response models for the HTTP API.

WHY: The FastAPI endpoints need typed schemas for request validation,
response serialization, and automatic OpenAPI documentation. Pydantic
models enforce field types at runtime and generate JSON Schema that
appears in the /docs UI.

HOW: Each endpoint has its own request and response model. ModeName is
the closed set of canonical mode names. All fields carry descriptions
for the OpenAPI docs.

RULES:
- All models use Field(description=...) for OpenAPI documentation
- Optional CPL / mode fields fall back to subwrap.config defaults
- max_characters_per_line is validated >= 1 here as well as in autowrap
- Python 3.9+ compatible (no PEP 604 unions, use Optional from typing)
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class ModeName(str, Enum):
    """Canonical wrap mode names accepted by the API.

    RULES:
    - Values match autowrap.WrapMode values exactly
    """

    wide = "wide"
    evenly = "evenly"


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class WrapTextRequest(BaseModel):
    """Plain text to wrap."""

    text: str = Field(
        description="Text to reflow. Spaces and newlines separate words.",
    )
    max_characters_per_line: Optional[int] = Field(
        default=None,
        ge=1,
        description="Maximum characters per line. Defaults to the server setting.",
    )
    mode: Optional[ModeName] = Field(
        default=None,
        description="Wrap mode. Defaults to the server setting.",
    )


class WrapSubtitlesRequest(BaseModel):
    """SRT content with an optional cue selection."""

    srt: str = Field(
        description="Complete SRT file content.",
    )
    selection: Optional[List[int]] = Field(
        default=None,
        description="1-based cue positions to wrap. Omit to wrap every cue.",
    )
    max_characters_per_line: Optional[int] = Field(
        default=None,
        ge=1,
        description="Maximum characters per line. Defaults to the server setting.",
    )
    mode: Optional[ModeName] = Field(
        default=None,
        description="Wrap mode. Defaults to the server setting.",
    )


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class WrapTextResponse(BaseModel):
    """Result of wrapping plain text."""

    text: str = Field(description="The wrapped text (same length as the input).")
    lines: List[str] = Field(description="The wrapped text split into lines.")
    mode: ModeName = Field(description="Mode that was applied.")
    max_characters_per_line: int = Field(description="Limit that was applied.")


class WrapSubtitlesResponse(BaseModel):
    """Result of wrapping a selection of SRT cues."""

    srt: str = Field(description="The SRT content with selected cues rewrapped.")
    wrapped: List[int] = Field(description="1-based positions of the cues that were wrapped.")
    changed: List[int] = Field(description="1-based positions whose text changed.")
    mode: ModeName = Field(description="Mode that was applied.")
    max_characters_per_line: int = Field(description="Limit that was applied.")


class ModeInfo(BaseModel):
    """Description of one wrap mode."""

    key: ModeName = Field(description="Mode identifier used in requests.")
    description: str = Field(description="What the mode does.")
    aliases: List[str] = Field(description="Other names accepted by the CLI.")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service status ('ok').")
    version: str = Field(description="Application version.")


class ErrorResponse(BaseModel):
    """Consistent error response body."""

    detail: str = Field(description="Human-readable error message.")
