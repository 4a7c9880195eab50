"""SRT reading and writing for the subtitle IR.

WHY: SRT is the format editors hand around, and the wrapping loop needs
it parsed into cues and written back without disturbing anything but the
cue text.

HOW: parse_srt() normalizes line endings, splits the file into blocks on
blank lines and reads each block as counter line, timecode line and text
lines. generate_srt() writes the blocks back in the same layout.

RULES:
- A block must have a numeric counter and a "start --> end" timecode
  line; anything else raises SubtitleParseError naming the block
- A cue may have no text lines (empty text)
- Output uses "\\n" line endings and ends every block with a blank line
"""

from __future__ import annotations

import re

from subwrap.core.ir import SRT_TIME_RE, Subtitle, SubtitleDocument

TIMECODE_LINE_RE = re.compile(r"^\s*(\S+)\s*-->\s*(\S+)(?:\s.*)?$")
BLOCK_SPLIT_RE = re.compile(r"\n[ \t]*\n")


class SubtitleParseError(ValueError):
    """Raised when SRT content cannot be read as subtitle blocks."""


def parse_srt(raw: str, source_filename: str = "") -> SubtitleDocument:
    """Parse SRT content into a SubtitleDocument.

    Args:
        raw: The SRT file content.
        source_filename: Name recorded on the document (informational).

    Returns:
        Document with one Subtitle per block, in file order.

    Raises:
        SubtitleParseError: If a block is missing its counter or timecodes.
    """
    raw = raw.lstrip("\ufeff").replace("\r\n", "\n").replace("\r", "\n")
    document = SubtitleDocument(source_filename=source_filename)

    stripped = raw.strip("\n")
    if not stripped.strip():
        return document

    for block_no, block in enumerate(BLOCK_SPLIT_RE.split(stripped), 1):
        lines = block.strip("\n").split("\n")
        if not lines or not lines[0].strip():
            continue

        counter = lines[0].strip()
        if not counter.isdigit():
            raise SubtitleParseError(
                "Block {}: expected a cue number, got '{}'".format(block_no, counter)
            )

        if len(lines) < 2:
            raise SubtitleParseError(
                "Block {} (cue {}): missing timecode line".format(block_no, counter)
            )
        match = TIMECODE_LINE_RE.match(lines[1])
        if not match or not all(SRT_TIME_RE.match(ts) for ts in match.groups()):
            raise SubtitleParseError(
                "Block {} (cue {}): invalid timecode line '{}'".format(
                    block_no, counter, lines[1].strip()
                )
            )

        start, end = match.groups()
        document.subtitles.append(Subtitle(
            number=int(counter),
            start=start,
            end=end,
            text="\n".join(lines[2:]),
        ))

    return document


def generate_srt(document: SubtitleDocument) -> str:
    """Generate SRT content from a document.

    Counters are written as stored on each cue; nothing is renumbered.
    """
    lines = []
    for sub in document.subtitles:
        lines.append(str(sub.number))
        lines.append("{} --> {}".format(sub.start, sub.end))
        if sub.text:
            lines.append(sub.text)
        lines.append("")

    if not lines:
        return ""
    return "\n".join(lines) + "\n"
