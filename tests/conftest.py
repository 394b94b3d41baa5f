"""Make ``import jsonview`` resolve to this checkout.

The ``pytest`` console script may start with a ``sys.path`` that does not
include the repository root.
"""

from __future__ import annotations

import sys
from pathlib import Path

ROOT = str(Path(__file__).resolve().parent.parent)

if ROOT not in sys.path:
    sys.path.insert(0, ROOT)
