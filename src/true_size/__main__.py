"""Module entry point allowing ``python -m true_size``."""

from __future__ import annotations

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    main()
