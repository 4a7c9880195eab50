"""Intermediate representation dataclasses for subtitle documents.

WHY: Wrapping only rewrites cue text, but a subtitle file also carries
numbering and timing that must come back out unchanged. The IR holds a
parsed document in a form the wrapping loop, the CLI and the HTTP API can
all share.

HOW: Two dataclasses:
  Subtitle         — one cue: counter, start/end timecodes, text
  SubtitleDocument — ordered cues plus the name of the file they came from

RULES:
- Timecodes are kept as the exact strings read from the file, so an
  unwrapped cue round-trips byte for byte
- Subtitle.text may contain newlines (multi-line cues)
- Cue positions for selection are 1-based and follow document order,
  which need not match the counter values written in the file
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

SRT_TIME_RE = re.compile(r"^(\d+):(\d{2}):(\d{2})[,.](\d{1,3})$")


def srt_time_to_seconds(ts: str) -> float:
    """Convert an SRT timestamp (HH:MM:SS,mmm) to seconds.

    Raises:
        ValueError: If the timestamp is malformed.
    """
    match = SRT_TIME_RE.match(ts.strip())
    if not match:
        raise ValueError("Invalid SRT timestamp '{}'".format(ts))
    hours, minutes, secs, millis = match.groups()
    return (
        int(hours) * 3600
        + int(minutes) * 60
        + int(secs)
        + int(millis.ljust(3, "0")) / 1000.0
    )


def seconds_to_srt_time(seconds: float) -> str:
    """Convert seconds to SRT timestamp format: HH:MM:SS,mmm"""
    total_ms = int(round(seconds * 1000))
    hours, rest = divmod(total_ms, 3600 * 1000)
    minutes, rest = divmod(rest, 60 * 1000)
    secs, millis = divmod(rest, 1000)
    return "{:02d}:{:02d}:{:02d},{:03d}".format(hours, minutes, secs, millis)


@dataclass
class Subtitle:
    """A single cue of a subtitle document.

    Attributes:
        number: The counter written above the cue in the file.
        start: Start timecode, as written in the file.
        end: End timecode, as written in the file.
        text: Cue text; lines are separated by "\\n".
    """

    number: int
    start: str
    end: str
    text: str

    @property
    def start_seconds(self) -> float:
        return srt_time_to_seconds(self.start)

    @property
    def end_seconds(self) -> float:
        return srt_time_to_seconds(self.end)


@dataclass
class SubtitleDocument:
    """An ordered list of cues read from one subtitle file."""

    subtitles: list[Subtitle] = field(default_factory=list)
    source_filename: str = ""

    def __len__(self) -> int:
        return len(self.subtitles)
