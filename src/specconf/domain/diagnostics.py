"""Diagnostics raised by configuration plugins.

Plugins never abort the document pipeline. Problems are reported as
:class:`Diagnostic` records published to a sink that the caller passes in, and
the caller decides what to do with them once processing is complete.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterator

log = getLogger(__name__)


class DiagnosticLevel(StrEnum):
    WARN = "warn"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    level: DiagnosticLevel
    message: str
    plugin: str
    hint: str | None = None

    def __str__(self) -> str:
        text = f"[{self.plugin}] {self.message}"
        if self.hint:
            text = f"{text} {self.hint}"
        return text


@runtime_checkable
class DiagnosticSink(Protocol):
    """Port receiving diagnostics from plugins."""

    def publish(self, diagnostic: Diagnostic) -> None: ...


DiagnosticListener = Callable[[Diagnostic], None]


@dataclass(slots=True)
class DiagnosticCollector:
    """Collects diagnostics in publication order and mirrors them to the log."""

    diagnostics: list[Diagnostic] = field(default_factory=list)
    _listeners: list[DiagnosticListener] = field(default_factory=list)

    def publish(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)
        if diagnostic.level is DiagnosticLevel.ERROR:
            log.error("%s", diagnostic)
        else:
            log.warning("%s", diagnostic)
        for listener in self._listeners:
            listener(diagnostic)

    def warn(self, message: str, *, plugin: str, hint: str | None = None) -> None:
        self.publish(Diagnostic(DiagnosticLevel.WARN, message, plugin, hint))

    def error(self, message: str, *, plugin: str, hint: str | None = None) -> None:
        self.publish(Diagnostic(DiagnosticLevel.ERROR, message, plugin, hint))

    def subscribe(self, listener: DiagnosticListener) -> Callable[[], None]:
        """Register a listener; the returned callable unsubscribes it."""

        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    @property
    def warnings(self) -> list[Diagnostic]:
        return [item for item in self.diagnostics if item.level is DiagnosticLevel.WARN]

    @property
    def errors(self) -> list[Diagnostic]:
        return [item for item in self.diagnostics if item.level is DiagnosticLevel.ERROR]

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.diagnostics)

    def __len__(self) -> int:
        return len(self.diagnostics)
