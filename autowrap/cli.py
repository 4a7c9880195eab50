"""CLI wrapper for the line-wrapping library.

WHY: Wrapping a snippet of text from a shell or an editor filter should not
require an SRT file. This module wraps plain text read from a file or stdin
and supports `python -m autowrap`.

HOW: Parses argv for input path, output path, --max-cpl and --mode, then
delegates to wrap_text().

RULES:
- Usage:
    python -m autowrap input.txt output.txt --max-cpl 32 --mode evenly
    python -m autowrap input.txt            (outputs to stdout)
    cat input.txt | python -m autowrap - --max-cpl 20
- --max-cpl defaults to 40; --mode defaults to wide.
- Exit codes: 0 = success, 1 = error.
- Errors go to stderr; wrapped text goes to stdout (if no output file).
"""

import sys
from typing import List, Optional

from . import InvalidArgument, wrap_text
from .modes import MODES, resolve_mode

DEFAULT_MAX_CPL = 40

HELP_TEXT = """autowrap — reflow text to a maximum number of characters per line

Usage:
    python -m autowrap input.txt output.txt
    python -m autowrap input.txt output.txt --max-cpl 32 --mode evenly
    python -m autowrap input.txt  # outputs to stdout
    cat input.txt | python -m autowrap - --max-cpl 20

Options:
    --max-cpl N     Maximum characters per line (default: 40)
    --mode wide     (default) fit as many words on each line as possible
    --mode evenly   lines of a similar width, still within --max-cpl
"""


def _fail(message: str) -> None:
    print("Error: {}".format(message), file=sys.stderr)
    sys.exit(1)


def main(argv: Optional[List[str]] = None) -> None:
    """Run the plain-text wrapping CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:]).
    """
    if argv is None:
        argv = sys.argv[1:]

    args = list(argv)

    if args and args[0] in ("-h", "--help"):
        print(HELP_TEXT)
        print("Available modes: {}".format(", ".join(MODES.keys())))
        sys.exit(0)

    mode_name = "wide"
    max_cpl_raw = str(DEFAULT_MAX_CPL)
    filtered_args = []  # type: List[str]
    i = 0
    while i < len(args):
        if args[i] in ("--mode", "--max-cpl") and i + 1 < len(args):
            if args[i] == "--mode":
                mode_name = args[i + 1]
            else:
                max_cpl_raw = args[i + 1]
            i += 2
        elif args[i].startswith("--mode="):
            mode_name = args[i].split("=", 1)[1]
            i += 1
        elif args[i].startswith("--max-cpl="):
            max_cpl_raw = args[i].split("=", 1)[1]
            i += 1
        else:
            filtered_args.append(args[i])
            i += 1

    try:
        mode = resolve_mode(mode_name)
    except InvalidArgument as e:
        _fail(str(e))

    try:
        max_cpl = int(max_cpl_raw)
    except ValueError:
        _fail("--max-cpl must be an integer, got '{}'".format(max_cpl_raw))

    input_path = filtered_args[0] if filtered_args else "-"
    output_path = filtered_args[1] if len(filtered_args) > 1 else None

    try:
        if input_path == "-":
            raw = sys.stdin.read()
        else:
            with open(input_path, "r", encoding="utf-8") as f:
                raw = f.read()
    except OSError as e:
        _fail("Cannot read '{}': {}".format(input_path, e.strerror))
    except UnicodeDecodeError:
        _fail("Cannot read '{}': not valid UTF-8".format(input_path))

    try:
        wrapped = wrap_text(raw, max_cpl, mode)
    except InvalidArgument as e:
        _fail(str(e))

    if output_path:
        try:
            with open(output_path, "w", encoding="utf-8") as f:
                f.write(wrapped)
        except OSError as e:
            _fail("Cannot write '{}': {}".format(output_path, e.strerror))
        print(
            "Wrapped {} lines ({} mode, max {} chars) to {}".format(
                wrapped.count("\n") + 1 if wrapped else 0,
                mode.value, max_cpl, output_path,
            ),
            file=sys.stderr,
        )
    else:
        sys.stdout.write(wrapped)


if __name__ == "__main__":
    main()
