"""Package entry point for ``python -m subwrap``.

WHY: Users run the wrapper as ``python -m subwrap input.srt`` for CLI mode,
or ``python -m subwrap --api`` to start the HTTP API.

HOW: Checks sys.argv for the ``--api`` flag. If present, starts the
FastAPI server. Otherwise, delegates to the CLI's main() function.
"""

import sys

if __name__ == "__main__":
    if "--api" in sys.argv:
        from subwrap.server.app import run_api
        run_api()
    else:
        from subwrap.cli import main
        main()
