"""Dispatch table of reporters keyed by operation kind."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from pkgreport.decision import DecisionResolver
from pkgreport.errors import UnknownOperationKind, UnknownReportEvent
from pkgreport.output.protocol import OutputChannelProtocol
from pkgreport.reporters.base import OperationReporter
from pkgreport.reporters.download import DownloadReporter
from pkgreport.reporters.install import InstallReporter
from pkgreport.reporters.message import MessageReporter
from pkgreport.reporters.remove import RemoveReporter
from pkgreport.reporters.scan import ScanDatabaseReporter
from pkgreport.reporters.script import ScriptReporter
from pkgreport_logging import get_logger

logger = get_logger(__name__)

DEFAULT_REPORTERS: tuple[type[OperationReporter], ...] = (
    MessageReporter,
    ScriptReporter,
    ScanDatabaseReporter,
    RemoveReporter,
    InstallReporter,
    DownloadReporter,
)


class ReportReceivers:
    """One reporter per operation kind, sharing a channel and a resolver.

    The engine (or an adapter in front of it) looks reporters up by kind::

        receivers = ReportReceivers(output, resolver)
        receivers.dispatch("install-resolvable", "start", resolvable)
        action = receivers["install-resolvable"].problem(res, error, text, level)

    Parameters
    ----------
    output : OutputChannelProtocol
        Channel shared by all reporters
    resolver : DecisionResolver
        Resolver shared by all reporters
    reporters : Iterable[type[OperationReporter]]
        Reporter classes to instantiate
    """

    def __init__(
        self,
        output: OutputChannelProtocol,
        resolver: DecisionResolver,
        reporters: Iterable[type[OperationReporter]] = DEFAULT_REPORTERS,
    ) -> None:
        self.output = output
        self.resolver = resolver
        self._reporters: dict[str, OperationReporter] = {}
        for reporter_cls in reporters:
            self.register(reporter_cls(output, resolver))

    def register(self, reporter: OperationReporter) -> None:
        """Add or replace the reporter for ``reporter.kind``."""
        if not reporter.kind:
            msg = f"{type(reporter).__name__} does not declare an operation kind"
            raise ValueError(msg)
        if reporter.kind in self._reporters:
            logger.debug("Replacing reporter for %s", reporter.kind)
        self._reporters[reporter.kind] = reporter

    def kinds(self) -> list[str]:
        """Registered operation kinds, in registration order."""
        return list(self._reporters)

    def __getitem__(self, kind: str) -> OperationReporter:
        try:
            return self._reporters[kind]
        except KeyError:
            raise UnknownOperationKind(kind) from None

    def __contains__(self, kind: object) -> bool:
        return kind in self._reporters

    def __iter__(self) -> Iterator[OperationReporter]:
        return iter(self._reporters.values())

    def __len__(self) -> int:
        return len(self._reporters)

    def dispatch(self, kind: str, event: str, *args: Any, **kwargs: Any) -> Any:
        """Invoke lifecycle ``event`` on the reporter for ``kind``.

        Raises
        ------
        UnknownOperationKind
            If no reporter handles ``kind``
        UnknownReportEvent
            If the reporter does not expose ``event``
        """
        reporter = self[kind]
        if event not in reporter.events:
            raise UnknownReportEvent(kind, event)
        return getattr(reporter, event)(*args, **kwargs)
