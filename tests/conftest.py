"""Pytest configuration: import the package from ``src/`` without installing it."""

import os
import sys
from pathlib import Path

_SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(_SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(_SRC_ROOT))

# Keep scheduling policy at its defaults regardless of the developer's shell.
os.environ.pop("SRS_CLAMP_QUALITY", None)
os.environ.setdefault("SRS_ENVIRONMENT", "test")
