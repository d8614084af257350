"""Module entrypoint for running bookseg as ``python -m bookseg``."""

from __future__ import annotations

from bookseg.cli import main


if __name__ == "__main__":
    main()
