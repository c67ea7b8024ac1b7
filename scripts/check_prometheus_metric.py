#!/usr/bin/env python3
"""Nagios plugin wrapper for checking Prometheus metrics.

Drop-in launcher for plugin directories where the package is not
installed as a console script. Exits 0/1/2/3 for OK/WARNING/CRITICAL/UNKNOWN.
"""

from __future__ import annotations

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

from checks.cli import main  # noqa: E402

if __name__ == "__main__":
    raise SystemExit(main())

# Commit-message checklist:
# - [ ] type is accurate (feat, fix, test)
# - [ ] scope is clear (plugin)
# - [ ] summary is concise and imperative
