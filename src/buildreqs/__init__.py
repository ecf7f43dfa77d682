"""buildreqs: check the host prerequisites for a native OS X build."""

from __future__ import annotations

__version__ = "0.1.0"
