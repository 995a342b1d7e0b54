"""Formatting helpers shared by the output channels."""

_RATE_UNITS = ("B/s", "KiB/s", "MiB/s", "GiB/s")


def format_rate(rate: int) -> str:
    """Format a transfer rate in bytes per second.

    Parameters
    ----------
    rate : int
        Bytes per second, or ``-1`` when unknown

    Returns
    -------
    str
        Human readable rate (``"1.5 KiB/s"``), empty when unknown
    """
    if rate < 0:
        return ""
    value = float(rate)
    for unit in _RATE_UNITS:
        if value < 1024 or unit == _RATE_UNITS[-1]:
            if unit == "B/s":
                return f"{int(value)} {unit}"
            return f"{value:.1f} {unit}"
        value /= 1024
    return ""


def format_percent(value: int) -> str:
    """Format a progress value; ``-1`` renders as ``"?"``."""
    if value < 0:
        return "?"
    return f"{min(value, 100)}%"


def exception_report(exc: BaseException) -> list[str]:
    """Describe an exception and the chain of exceptions that caused it.

    Walks ``__cause__`` and, unless suppressed, ``__context__``.

    Parameters
    ----------
    exc : BaseException
        The failure to describe

    Returns
    -------
    list[str]
        One line for the exception itself followed by one ``Caused by`` line per
        underlying exception, outermost first
    """
    lines = [_describe(exc)]
    seen = {id(exc)}
    current = _next_in_chain(exc)
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        lines.append(f"Caused by {_describe(current)}")
        current = _next_in_chain(current)
    return lines


def _describe(exc: BaseException) -> str:
    message = str(exc)
    name = type(exc).__name__
    return f"{name}: {message}" if message else name


def _next_in_chain(exc: BaseException) -> BaseException | None:
    if exc.__cause__ is not None:
        return exc.__cause__
    if exc.__suppress_context__:
        return None
    return exc.__context__
