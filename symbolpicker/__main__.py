"""Module entrypoint for ``python -m symbolpicker``.

This keeps module-mode execution behavior identical to the CLI script.
All argument parsing and catalog setup happen in ``symbolpicker.cli``.
"""

from .cli import main


if __name__ == "__main__":
    raise SystemExit(main())
