"""Pytest configuration.

Ensures 'src' directory (src layout) is on sys.path for imports.
"""

import sys
from pathlib import Path

_src = Path(__file__).resolve().parents[1] / "src"
if str(_src) not in sys.path:
    sys.path.insert(0, str(_src))
