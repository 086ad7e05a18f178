"""ExtCheck: Manifest validation and permission analysis for browser extensions."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"
