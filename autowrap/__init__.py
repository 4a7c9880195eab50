"""Line-wrapping library for subtitle text.

WHY: Subtitle editors need to reflow cue text so that no line is longer
than the maximum characters per line (CPL), breaking only at spaces and
newlines. This package is the wrapping engine on its own, with no editor,
file format or configuration attached, so every caller (CLI, HTTP API,
subtitle documents) shares one implementation.

HOW: The single public entry point is wrap_text(text, max_characters_per_line,
mode). It validates the arguments, tokenizes the text, packs words into
lines, optionally balances them, and rebuilds the text with new line breaks.

RULES:
- wrap_text() is the public API; the stage functions in core are exposed
  for testing and for callers that need the intermediate segments.
- Mode names: "wide" (default), "evenly", plus aliases (see modes.MODES).
- The CPL is always passed in — the library never reads configuration.
- Output always has the same length as the input.
"""

from typing import List, Union

from .core import balance, line_length, pack, rebuild, tokenize
from .models import LineSegment, Word
from .modes import MODE_DESCRIPTIONS, MODES, InvalidArgument, WrapMode, resolve_mode

__all__ = [
    "wrap_text",
    "wrap_lines",
    "validate_max_characters_per_line",
    "InvalidArgument",
    "WrapMode",
    "MODES",
    "MODE_DESCRIPTIONS",
    "Word",
    "LineSegment",
    "tokenize",
    "pack",
    "balance",
    "rebuild",
    "line_length",
]


def validate_max_characters_per_line(max_characters_per_line: int) -> int:
    """Return the CPL if it is a positive integer, else raise InvalidArgument."""
    if isinstance(max_characters_per_line, bool) or not isinstance(max_characters_per_line, int):
        raise InvalidArgument(
            "max_characters_per_line must be an integer, got {!r}".format(
                max_characters_per_line
            )
        )
    if max_characters_per_line < 1:
        raise InvalidArgument(
            "max_characters_per_line must be at least 1, got {}".format(
                max_characters_per_line
            )
        )
    return max_characters_per_line


def wrap_text(
    text: str,
    max_characters_per_line: int,
    mode: Union[WrapMode, str] = WrapMode.WIDE,
) -> str:
    """Reflow text into lines of at most max_characters_per_line characters.

    WHY: This is the single operation the rest of the application needs —
    given cue text and a CPL, produce the rewrapped cue text.

    HOW: tokenize() -> pack() -> [balance() for EVENLY] -> rebuild().

    RULES:
    - Lines break only where the input had a space or newline.
    - A word longer than the limit stays whole on a line of its own.
    - Empty text returns empty text.
    - Deterministic and free of shared state; safe to call concurrently.

    Args:
        text: The text to wrap.
        max_characters_per_line: Maximum line length in code points (>= 1).
        mode: WrapMode or mode name. Default: WrapMode.WIDE.

    Returns:
        The wrapped text, same length as the input.

    Raises:
        InvalidArgument: If the CPL is not a positive integer or the mode
            is unknown.
    """
    maxcpl = validate_max_characters_per_line(max_characters_per_line)
    resolved = resolve_mode(mode)

    if not text:
        return ""

    words = tokenize(text)
    lines = pack(words, maxcpl)
    if resolved is WrapMode.EVENLY:
        balance(lines, words, maxcpl)
    return rebuild(text, words, lines)


def wrap_lines(
    text: str,
    max_characters_per_line: int,
    mode: Union[WrapMode, str] = WrapMode.WIDE,
) -> List[str]:
    """Wrap text and return the resulting lines (empty text gives no lines)."""
    wrapped = wrap_text(text, max_characters_per_line, mode)
    if not wrapped:
        return []
    return wrapped.split("\n")
