"""Data models for the line-wrapping engine.

WHY: Wrapping works on two layers of ranges — words over the source text,
and lines over the word sequence. Keeping both as plain integer ranges
(rather than slices or live cursors) means the text can be rewritten
without invalidating anything, and the balancer can shift line boundaries
by simple index arithmetic.

HOW: Word is a half-open [start, end) range of code points in the source
text. LineSegment is a half-open [index, index + length) range of words
that make up one output line.

RULES:
- Words never overlap, are stored left to right, and are never empty.
- Segments are contiguous and together cover every word exactly once.
- Both are transient — created fresh on every wrap call and discarded.
- Lengths are code-point counts (len() of a str), not display widths.
"""

from dataclasses import dataclass


@dataclass
class Word:
    """A run of non-separator characters in the source text.

    Attributes:
        start: Offset of the first character of the word.
        end: Offset one past the last character of the word.
    """
    start: int
    end: int

    def length(self) -> int:
        return self.end - self.start


@dataclass
class LineSegment:
    """A contiguous run of words assigned to one output line.

    Attributes:
        index: Position of the first word of the line in the word list.
        length: Number of words on the line.
    """
    index: int
    length: int

    @property
    def end(self) -> int:
        """Index one past the last word of the line."""
        return self.index + self.length
