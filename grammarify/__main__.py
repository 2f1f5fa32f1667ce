"""Module entrypoint for running Grammarify as ``python -m grammarify``."""

from __future__ import annotations

from grammarify.cli import main


if __name__ == "__main__":
    main()
