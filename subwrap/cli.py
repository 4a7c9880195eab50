"""Command-line interface for wrapping subtitle files.

WHY: Editors need to rewrap the cues of an SRT file from the terminal or a
batch script — the same "Wrap Text Wide" / "Wrap Text Evenly" actions a
subtitle editor offers, applied to a selection of cues.

HOW: Uses argparse to accept an SRT file, the wrap mode, the maximum
characters per line, an optional cue selection and an output target.
Defaults for mode and CPL come from subwrap.config (environment / .env).
Status messages go to stderr; the wrapped SRT goes to stdout unless
--output or --in-place is given.

RULES:
- Positional argument: input SRT file path ("-" reads stdin)
- --select "1,3-5" picks cues by 1-based position; default is every cue
- --output and --in-place are mutually exclusive
- Exit code 1 with "Error: ..." on stderr for any invalid input
- Python 3.9 compatible — no match/case, no X | Y unions
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from autowrap.modes import MODES, resolve_mode
from subwrap.config import (
    configure_logging,
    load_default_mode,
    load_max_characters_per_line,
)
from subwrap.core.srt import generate_srt, parse_srt
from subwrap.core.wrapping import parse_selection, wrap_subtitles

logger = logging.getLogger(__name__)


def _status(msg: str) -> None:
    """Print a status message to stderr so stdout stays pipeable."""
    print(msg, file=sys.stderr, flush=True)


def _fail(msg: str) -> None:
    _status("Error: {}".format(msg))
    sys.exit(1)


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    RULES:
    - Positional: input_file (required)
    - Optional: --mode, --max-cpl, --select, --output / --in-place
    """
    parser = argparse.ArgumentParser(
        prog="subwrap",
        description="Rewrap the text of SRT subtitle cues to a maximum number "
                    "of characters per line.",
    )

    parser.add_argument(
        "input_file",
        help="Path to the SRT file to wrap ('-' reads standard input).",
    )

    parser.add_argument(
        "--mode",
        default=None,
        help="Wrap mode: {}. Default: SUBWRAP_DEFAULT_MODE or wide.".format(
            ", ".join(MODES.keys())
        ),
    )

    parser.add_argument(
        "--max-cpl",
        type=int,
        default=None,
        help="Maximum characters per line. "
             "Default: SUBWRAP_MAX_CHARACTERS_PER_LINE or 40.",
    )

    parser.add_argument(
        "--select",
        default=None,
        help="Cues to wrap by 1-based position, e.g. '1,3-5'. Default: all cues.",
    )

    target = parser.add_mutually_exclusive_group()
    target.add_argument(
        "--output",
        default=None,
        help="Write the wrapped SRT to this file (default: stdout).",
    )
    target.add_argument(
        "--in-place",
        action="store_true",
        help="Overwrite the input file with the wrapped SRT.",
    )

    return parser


def run(args: argparse.Namespace) -> int:
    """Wrap the file described by parsed arguments; returns an exit code."""
    try:
        mode = resolve_mode(args.mode) if args.mode else load_default_mode()
        max_cpl = args.max_cpl if args.max_cpl is not None else load_max_characters_per_line()
        selection = parse_selection(args.select) if args.select else None
    except ValueError as exc:
        _fail(str(exc))

    if args.input_file == "-" and args.in_place:
        _fail("--in-place cannot be used when reading standard input")

    try:
        if args.input_file == "-":
            raw = sys.stdin.read()
            source_name = "<stdin>"
        else:
            path = Path(args.input_file)
            if not path.is_file():
                _fail("File not found: {}".format(path))
            raw = path.read_text(encoding="utf-8")
            source_name = path.name
    except OSError as exc:
        _fail("Cannot read '{}': {}".format(args.input_file, exc.strerror))
    except UnicodeDecodeError:
        _fail("Cannot read '{}': not valid UTF-8".format(args.input_file))

    try:
        document = parse_srt(raw, source_filename=source_name)
        logger.debug("Read %d cues from %s", len(document), source_name)
        result = wrap_subtitles(document, selection, max_cpl, mode)
    except ValueError as exc:
        _fail(str(exc))

    content = generate_srt(result.document)

    output_path = None  # type: Optional[Path]
    if args.in_place:
        output_path = Path(args.input_file)
    elif args.output:
        output_path = Path(args.output)

    if output_path is None:
        sys.stdout.write(content)
    else:
        try:
            output_path.write_text(content, encoding="utf-8")
        except OSError as exc:
            _fail("Cannot write '{}': {}".format(output_path, exc.strerror))
        _status("Wrapped {} of {} cues ({} changed, {} mode, max {} chars) -> {}".format(
            len(result.selected), len(document), len(result.changed),
            mode.value, max_cpl, output_path,
        ))
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)
    sys.exit(run(args))


if __name__ == "__main__":
    main()
