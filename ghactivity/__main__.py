"""Allow ``python -m ghactivity``."""

from __future__ import annotations

from ghactivity.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
