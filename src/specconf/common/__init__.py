from __future__ import annotations

from .logging import configure_logging
from .text import join_and

__all__ = ["configure_logging", "join_and"]
