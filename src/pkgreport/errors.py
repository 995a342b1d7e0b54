"""Exceptions raised by the reporting layer.

Engine failures never appear here: they reach the reporters as ``ErrorCode`` values.
These exceptions only signal misuse of the reporting API itself.
"""


class ReportingError(Exception):
    """Base class for reporting layer errors."""


class UnknownOperationKind(ReportingError, KeyError):
    """No reporter is registered for an operation kind."""

    def __init__(self, kind: str) -> None:
        super().__init__(f"No reporter registered for operation kind {kind!r}")
        self.kind = kind

    def __str__(self) -> str:
        return self.args[0]


class UnknownReportEvent(ReportingError):
    """A reporter does not handle the requested lifecycle event."""

    def __init__(self, kind: str, event: str) -> None:
        super().__init__(f"Reporter {kind!r} has no lifecycle event {event!r}")
        self.kind = kind
        self.event = event
