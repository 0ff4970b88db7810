"""Make ``youtrack_app`` and the shared ``fakes`` module importable without an install.

Tests never touch the network: remote collections and the HTTP session are
replaced by the in-memory doubles in ``fakes.py``.
"""

from __future__ import annotations

import sys
from pathlib import Path

TESTS_DIR = Path(__file__).resolve().parent
for path in (TESTS_DIR.parent, TESTS_DIR):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))
