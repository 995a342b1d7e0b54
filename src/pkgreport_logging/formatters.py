"""Log formatters."""

import logging


class SafeFormatter(logging.Formatter):
    """Formatter that never raises on bad ``%`` arguments.

    A record whose message cannot be interpolated is rendered with its raw message and
    arguments instead of breaking the handler.
    """

    DEFAULT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

    def __init__(self, fmt: str | None = None, datefmt: str | None = None) -> None:
        super().__init__(fmt or self.DEFAULT_FORMAT, datefmt)

    def format(self, record: logging.LogRecord) -> str:
        try:
            return super().format(record)
        except (TypeError, ValueError):
            record.msg = f"{record.msg} {record.args!r}"
            record.args = ()
            return super().format(record)
