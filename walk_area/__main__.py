"""Module entry point: python -m walk_area ..."""

from __future__ import annotations

from walk_area.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
