"""Subtitle document handling for the wrapping application.

WHY: The wrapping engine works on plain strings; editors work on subtitle
files made of numbered, timed cues. The core package connects the two.

HOW: ir.py defines the document dataclasses, srt.py reads and writes SRT,
wrapping.py runs the engine over a selection of cues.

RULES:
- IR dataclasses are the contract between the CLI, the API and the loop
- Only cue text is ever rewritten
"""
