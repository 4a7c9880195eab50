"""Core wrapping logic: tokenizing, line packing, balancing, and rebuilding.

WHY: Subtitle text has to fit a maximum number of characters per line
(CPL), and editors want two flavors: lines as full as possible, or lines
of a similar width. Both share one pipeline; the "evenly" flavor only adds
a refinement pass.

HOW: The pipeline has four stages:
  1. tokenize() — find the words, as offset ranges into the original text.
  2. pack() — greedy single pass that assigns words to lines under the CPL.
  3. balance() — optional; moves the last word of a line down to the next
     line while that does not increase the length difference between them.
  4. rebuild() — rewrites separators: spaces inside lines, a newline at the
     end of every line. The output has exactly the length of the input.

RULES:
- ALL functions take maxcpl as an explicit parameter — no config lookups.
- Only ' ' and '\\n' separate words. Everything else is word content.
- A word longer than maxcpl is never split; it gets a line of its own.
- Lengths are code-point counts.
"""

import logging
from typing import List

from .models import LineSegment, Word

logger = logging.getLogger(__name__)

SEPARATORS = " \n"


# =============================================================================
# Tokenizing
# =============================================================================

def tokenize(text: str) -> List[Word]:
    """Split text into words, recording each word's offsets.

    Runs of separators (and leading/trailing separators) produce no empty
    words. An empty or all-separator text yields an empty list.
    """
    words = []  # type: List[Word]
    start = None
    for pos, ch in enumerate(text):
        if ch in SEPARATORS:
            if start is not None:
                words.append(Word(start, pos))
                start = None
        elif start is None:
            start = pos

    if start is not None:
        words.append(Word(start, len(text)))
    return words


def line_length(line: LineSegment, words: List[Word]) -> int:
    """Return the length of a line: its words plus one space between each pair."""
    if line.length <= 0:
        return 0
    total = sum(words[i].length() for i in range(line.index, line.end))
    return total + line.length - 1


# =============================================================================
# Greedy packing
# =============================================================================

def pack(words: List[Word], maxcpl: int) -> List[LineSegment]:
    """Arrange words into lines of no more than maxcpl characters.

    WHY: This is the "wide" layout — each line takes as many words as fit.
    It is also the starting point for balancing.

    HOW: One left-to-right pass keeping the running length of the current
    line. A word that lands the line exactly on maxcpl is accepted and
    closes the line. A word that would overflow closes the line without
    it and is retried at the start of the next line. A word that overflows
    an empty line is placed alone anyway.

    RULES:
    - Every word ends up in exactly one segment, in order.
    - No segment is empty; no words means no segments.
    - Multi-word lines never exceed maxcpl; single-word lines may.

    Args:
        words: Word list from tokenize().
        maxcpl: Maximum characters per line (>= 1).

    Returns:
        List of LineSegment objects covering all words.
    """
    lines = []  # type: List[LineSegment]
    if not words:
        return lines

    current_len = 0
    first = 0
    i = 0

    while i < len(words):
        candidate = current_len + words[i].length() + (1 if current_len > 0 else 0)

        if candidate < maxcpl:
            current_len = candidate
            i += 1
            continue

        if candidate > maxcpl and i > first:
            # Close the line before this word, retry it on a fresh line
            lines.append(LineSegment(first, i - first))
        else:
            # Exact fit, or a lone word that is too long on its own
            lines.append(LineSegment(first, i - first + 1))
            i += 1
        first = i
        current_len = 0

    if first < len(words):
        lines.append(LineSegment(first, len(words) - first))

    return lines


# =============================================================================
# Balancing
# =============================================================================

def _move_words_down(lines: List[LineSegment], words: List[Word], maxcpl: int) -> bool:
    """Run one bottom-up pass over adjacent line pairs.

    For each (top, bottom) pair where the top line is longer, the last word
    of the top line moves to the start of the bottom line if the length
    difference does not grow and the bottom line stays within maxcpl.

    Returns:
        True if any word was moved.
    """
    moved = False
    li = len(lines) - 1
    bottom_len = line_length(lines[li], words)

    while li > 0:
        top = lines[li - 1]
        bottom = lines[li]
        top_len = line_length(top, words)
        diff = top_len - bottom_len

        if diff > 0:
            word_len = words[top.end - 1].length()
            new_bottom = bottom_len + word_len + (1 if bottom_len > 0 else 0)
            new_top = top_len - word_len - (1 if top.length > 1 else 0)

            if abs(new_top - new_bottom) <= diff and new_bottom <= maxcpl:
                top.length -= 1
                bottom.index -= 1
                bottom.length += 1
                top_len = new_top
                moved = True

        bottom_len = top_len
        li -= 1

    return moved


def balance(lines: List[LineSegment], words: List[Word], maxcpl: int) -> List[LineSegment]:
    """Even out line lengths by moving words down until nothing moves.

    WHY: Greedy packing tends to leave a short last line under long ones.
    Moving trailing words downward spreads the text more evenly without
    ever breaking the maxcpl cap.

    HOW: Repeats bottom-up passes until a pass moves no word. Words only
    ever move down, so the number of productive passes is bounded by
    words * lines; that bound is enforced as a guard.

    RULES:
    - Refines the segments in place and returns the same list.
    - Fewer than two lines is a no-op.
    - A move never increases the difference of the pair it is applied to.

    Args:
        lines: Segments from pack(); modified in place.
        words: Word list the segments refer to.
        maxcpl: Maximum characters per line.

    Returns:
        The balanced segment list.
    """
    if len(lines) < 2:
        return lines

    max_passes = len(words) * len(lines) + 1
    passes = 0
    while _move_words_down(lines, words, maxcpl):
        passes += 1
        if passes >= max_passes:
            logger.warning(
                "Line balancing stopped after %d passes (%d words, %d lines)",
                passes, len(words), len(lines),
            )
            break

    return lines


# =============================================================================
# Rebuilding
# =============================================================================

def rebuild(text: str, words: List[Word], lines: List[LineSegment]) -> str:
    """Rewrite the separators of text according to the line segments.

    Every character outside a word becomes a space. The character right
    after the last word of each line becomes a newline, unless that word
    ends the text. The result has the same length as the input.
    """
    chars = [" "] * len(text)
    for word in words:
        chars[word.start:word.end] = text[word.start:word.end]

    for line in lines:
        if line.length <= 0:
            continue
        last = words[line.end - 1]
        if last.end < len(text):
            chars[last.end] = "\n"

    return "".join(chars)
