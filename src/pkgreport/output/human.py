"""Human-readable output channel."""

from __future__ import annotations

import sys

import click

from pkgreport.output.channel import OutputChannel
from pkgreport.output.formatting import format_percent, format_rate
from pkgreport.output.verbosity import OutputType, Verbosity


class HumanOutput(OutputChannel):
    """Text output for a terminal or a log-friendly stream.

    On a TTY, progress spans rewrite a single line in place with ``\\r``; anywhere
    else each percentage update is its own line. A tick span prints its label once
    and then only turns the alive cursor in place, on any stream.
    Errors go to stderr, everything else to stdout.

    Parameters
    ----------
    verbosity : Verbosity
        Initial verbosity level
    is_tty : bool | None
        Whether stdout is a TTY (auto-detected if None)
    color : bool
        Whether to style messages with ANSI colors
    """

    output_type = OutputType.NORMAL

    def __init__(
        self,
        verbosity: Verbosity = Verbosity.NORMAL,
        is_tty: bool | None = None,
        color: bool = True,
    ) -> None:
        super().__init__(verbosity)
        self._is_tty = is_tty if is_tty is not None else self._detect_tty()
        self._color = color
        # "progress" while a \r-rewritten line is open, "text" while verbatim
        # output lacks its trailing newline.
        self._open_line: str | None = None

    @property
    def is_tty(self) -> bool:
        """Whether output is to a TTY."""
        return self._is_tty

    def _emit(
        self,
        message: str,
        *,
        err: bool = False,
        nl: bool = True,
        style: dict | None = None,
    ) -> None:
        """Emit text, first terminating any open line.

        Parameters
        ----------
        message : str
            Text to emit
        err : bool
            Whether to write to stderr
        nl : bool
            Whether to append a newline
        style : dict | None
            Click style kwargs (fg, bold, etc.)
        """
        self._end_line()
        rendered = click.style(message, **style) if style and self._color else message
        click.echo(rendered, err=err, nl=nl)

    def _end_line(self, keep: str | None = None) -> None:
        if self._open_line is not None and self._open_line != keep:
            click.echo("")
            self._open_line = None

    def _rewrite(self, text: str, *, final: bool) -> None:
        self._end_line(keep="progress")
        click.echo(f"\r{text}", nl=final)
        self._open_line = None if final else "progress"

    def _render_info(self, message: str, *, newline: bool) -> None:
        if newline:
            self._emit(message)
            return
        self._end_line(keep="text")
        click.echo(message, nl=False)
        self._open_line = "text" if message and not message.endswith("\n") else None

    def _render_warning(self, message: str) -> None:
        self._emit(f"Warning: {message}", style={"fg": "yellow"})

    def _render_error(self, problem_desc: str, details: list[str], hint: str) -> None:
        self._emit(problem_desc, err=True, style={"fg": "red", "bold": True})
        for line in details:
            self._emit(f"  {line}", err=True)
        if hint:
            self._emit(hint, err=True)

    def _render_progress_start(self, progress_id: str, label: str, is_tick: bool) -> None:
        if is_tick:
            self._emit(label)
        elif self._is_tty:
            self._emit(f"{label} [...]", nl=False)
            self._open_line = "progress"

    def _render_progress(self, progress_id: str, label: str, value: int) -> None:
        text = f"{label} [{format_percent(value)}]"
        if self._is_tty:
            self._rewrite(text, final=False)
        else:
            self._emit(text)

    def _render_tick(self, progress_id: str, label: str, cursor: str) -> None:
        self._rewrite(cursor, final=False)

    def _render_progress_end(self, progress_id: str, label: str, is_error: bool) -> None:
        text = f"{label} [{'error' if is_error else 'done'}]"
        if self._is_tty:
            self._rewrite(text, final=True)
        else:
            self._emit(text)

    def _render_download_start(self, uri: str) -> None:
        if self._is_tty:
            self._emit(f"Retrieving: {uri} [starting]", nl=False)
            self._open_line = "progress"

    def _render_download_progress(self, uri: str, value: int, rate: int) -> None:
        status = format_percent(value)
        rate_text = format_rate(rate)
        if rate_text:
            status = f"{status} ({rate_text})"
        text = f"Retrieving: {uri} [{status}]"
        if self._is_tty:
            self._rewrite(text, final=False)
        else:
            self._emit(text)

    def _render_download_end(self, uri: str, rate: int, is_error: bool) -> None:
        status = "error" if is_error else "done"
        rate_text = format_rate(rate)
        if rate_text and not is_error:
            status = f"{status} ({rate_text})"
        text = f"Retrieving: {uri} [{status}]"
        if self._is_tty:
            self._rewrite(text, final=True)
        else:
            self._emit(text)

    def _render_prompt(
        self,
        prompt_id: int,
        text: str,
        answer_hint: str,
        default_answer: str,
    ) -> None:
        default = f" ({default_answer})" if default_answer else ""
        self._emit(f"{text} [{answer_hint}]{default}: ", nl=False)

    @staticmethod
    def _detect_tty() -> bool:
        """Detect if stdout is a TTY."""
        return sys.stdout.isatty()
