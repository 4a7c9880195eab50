"""Package entry point for ``python -m autowrap``."""

from autowrap.cli import main

if __name__ == "__main__":
    main()
