#!/usr/bin/env python3
"""Local entrypoint to run the report from a source checkout.

Usage:
  python scripts/report.py versions.xlsx ../repo-a ../repo-b

This calls the same ``npm_drift.cli.main`` used by the ``npm-drift`` console
script.
"""

from __future__ import annotations

from npm_drift.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
