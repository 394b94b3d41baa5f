"""Module entrypoint for ``python -m jsonview``.

Argument parsing, document loading and runtime setup happen in ``jsonview.cli``.
"""

from .cli import main


if __name__ == "__main__":
    raise SystemExit(main())
