"""Test package for teamgen."""

from __future__ import annotations

import sys
from pathlib import Path


# Let ``pytest`` import teamgen straight from src/ when the project has not
# been installed.
SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if SRC_ROOT.exists() and str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))
