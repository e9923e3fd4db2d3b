from __future__ import annotations

from .diagnostics import Diagnostic, DiagnosticCollector, DiagnosticLevel, DiagnosticSink
from .model import (
    GROUP_KEY,
    SUPERSEDED_OPTIONS,
    AggregatedGroupDetails,
    ConfigObject,
    GroupDetails,
)

__all__ = [
    "GROUP_KEY",
    "SUPERSEDED_OPTIONS",
    "AggregatedGroupDetails",
    "ConfigObject",
    "Diagnostic",
    "DiagnosticCollector",
    "DiagnosticLevel",
    "DiagnosticSink",
    "GroupDetails",
]
