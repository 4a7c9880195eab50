"""Wrapping the selected cues of a subtitle document.

WHY: Editors rarely rewrap a whole file — they pick a handful of cues and
ask for "Wrap Text Wide" or "Wrap Text Evenly". This module is that loop:
resolve a selection, run the wrapping engine on each selected cue, and
hand back a new document.

HOW: parse_selection() turns "1,3-5" into sorted 1-based positions.
wrap_subtitles() validates the selection, wraps each selected cue's text
with autowrap.wrap_text() and builds a new document from copies of the
cues. Cues are independent of each other, so order does not matter; they
are processed sequentially.

RULES:
- selection=None means every cue; an empty selection is an error
  ("Please select at least one subtitle.")
- Positions are 1-based document positions, not SRT counter values
- The input document is never mutated
- Only cue text changes; counters and timecodes are copied as-is
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Iterable, List, Optional, Union

from autowrap import WrapMode, validate_max_characters_per_line, wrap_text
from autowrap.modes import resolve_mode
from subwrap.core.ir import SubtitleDocument

logger = logging.getLogger(__name__)

NO_SELECTION_MESSAGE = "Please select at least one subtitle."


class NoSelectionError(ValueError):
    """Raised when a wrap is requested with no cues selected."""

    def __init__(self, message: str = NO_SELECTION_MESSAGE) -> None:
        super().__init__(message)


@dataclass
class WrapResult:
    """Outcome of wrapping a selection of cues.

    Attributes:
        document: The new document with the selected cues rewrapped.
        selected: 1-based positions that were wrapped.
        changed: 1-based positions whose text actually changed.
    """

    document: SubtitleDocument
    selected: List[int] = field(default_factory=list)
    changed: List[int] = field(default_factory=list)


def parse_selection(text: str) -> List[int]:
    """Parse a selection string like "1,3-5" into sorted 1-based positions.

    Whitespace is ignored, duplicates are dropped and ranges are inclusive.

    Raises:
        ValueError: On empty parts, non-numeric parts, positions < 1 or
            reversed ranges.
    """
    positions = set()
    for part in text.split(","):
        part = part.strip()
        if not part:
            raise ValueError("Invalid selection '{}': empty item".format(text))
        if "-" in part:
            lo_raw, hi_raw = part.split("-", 1)
            lo_raw, hi_raw = lo_raw.strip(), hi_raw.strip()
            if not (lo_raw.isdigit() and hi_raw.isdigit()):
                raise ValueError("Invalid selection range '{}'".format(part))
            lo, hi = int(lo_raw), int(hi_raw)
            if lo > hi:
                raise ValueError("Invalid selection range '{}': start after end".format(part))
            positions.update(range(lo, hi + 1))
        else:
            if not part.isdigit():
                raise ValueError("Invalid selection item '{}'".format(part))
            positions.add(int(part))

    if 0 in positions:
        raise ValueError("Invalid selection '{}': positions start at 1".format(text))
    return sorted(positions)


def _resolve_selection(document: SubtitleDocument, selection: Optional[Iterable[int]]) -> List[int]:
    if selection is None:
        positions = list(range(1, len(document) + 1))
    else:
        positions = sorted(set(selection))

    if not positions:
        raise NoSelectionError()

    out_of_range = [p for p in positions if p < 1 or p > len(document)]
    if out_of_range:
        raise ValueError(
            "Selection {} outside the document (cues 1-{})".format(
                ", ".join(str(p) for p in out_of_range), len(document)
            )
        )
    return positions


def wrap_subtitles(
    document: SubtitleDocument,
    selection: Optional[Iterable[int]],
    max_characters_per_line: int,
    mode: Union[WrapMode, str] = WrapMode.WIDE,
) -> WrapResult:
    """Rewrap the text of the selected cues of a document.

    Args:
        document: The parsed subtitle document (left untouched).
        selection: 1-based cue positions, or None for every cue.
        max_characters_per_line: Maximum line length in characters (>= 1).
        mode: WrapMode or mode name.

    Returns:
        WrapResult with the new document and the wrapped/changed positions.

    Raises:
        NoSelectionError: If selection is empty (or the document is empty).
        ValueError: If a position lies outside the document.
        autowrap.InvalidArgument: If the CPL or mode is invalid.
    """
    maxcpl = validate_max_characters_per_line(max_characters_per_line)
    resolved = resolve_mode(mode)
    positions = _resolve_selection(document, selection)

    selected = set(positions)
    new_subtitles = []
    changed = []  # type: List[int]

    for pos, sub in enumerate(document.subtitles, 1):
        if pos not in selected:
            new_subtitles.append(replace(sub))
            continue

        text = wrap_text(sub.text, maxcpl, resolved)
        if text != sub.text:
            changed.append(pos)
        logger.debug("Wrapped cue %d (#%d): %d chars", pos, sub.number, len(text))
        new_subtitles.append(replace(sub, text=text))

    logger.info(
        "Wrapped %d cue(s), %d changed (%s mode, max %d chars per line)",
        len(positions), len(changed), resolved.value, maxcpl,
    )

    return WrapResult(
        document=SubtitleDocument(
            subtitles=new_subtitles,
            source_filename=document.source_filename,
        ),
        selected=positions,
        changed=changed,
    )
