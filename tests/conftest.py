"""Pytest configuration shared by every suite.

What:
  Establish project import paths so tests resolve ``pressurelid`` from the
  source tree.

Why:
  Running the suite straight from a checkout must exercise the code under
  ``pressurelid/src`` rather than an installed wheel that may be stale.

How:
  Compute the project root relative to this file and prepend the source
  directory to ``sys.path`` when it exists.

Invariants & Safety:
  - The path injection runs once at import time and only when the source tree
    is present, avoiding pollution when the package is installed.
"""

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "pressurelid" / "src"
if SRC_DIR.exists():
    sys.path.insert(0, str(SRC_DIR))
