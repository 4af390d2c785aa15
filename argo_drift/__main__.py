"""Module entry point: python -m argo_drift ..."""

from __future__ import annotations

from argo_drift.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
