"""Subtitle text wrapper — rewrap SRT cues to a characters-per-line limit.

WHY: Subtitle cues must fit a maximum line length, and reflowing them by
hand is tedious. This package applies the autowrap engine to the selected
cues of SRT documents, from the command line or over HTTP.

HOW: Three layers — SRT parsing into a small IR (core), the selection
loop that wraps cues (core.wrapping), and the entry points (cli, server).

RULES:
- All text reflowing goes through autowrap.wrap_text()
- Configuration is read only by the entry points (config.py)
"""

__version__ = "0.1.0"
