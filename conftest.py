"""Root conftest.py: makes the local httpdiff package importable without installing it."""

from __future__ import annotations

import sys
from pathlib import Path

# Insert the project root at the front of sys.path so that
# `import httpdiff` resolves to this source tree, even if another
# httpdiff is installed in the environment.
_root = str(Path(__file__).parent)
if _root not in sys.path:
    sys.path.insert(0, _root)
