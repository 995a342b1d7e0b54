"""Machine-readable (XML) output channel.

Each event is one self-contained element on stdout::

    <message type="info">Reading installed packages</message>
    <progress id="install-resolvable" name="Installing: foo-1.0" value="42"/>
    <progress id="run-script" name="Running: ..." value="-1"/>
    <progress id="install-resolvable" name="Installing: foo-1.0" done="1"/>
    <download url="http://host/foo.rpm" rate="2048" done="1"/>
    <prompt id="1"><text>Abort, retry, ignore?</text>...</prompt>
"""

from __future__ import annotations

from xml.sax.saxutils import escape, quoteattr

import click

from pkgreport.output.channel import OutputChannel
from pkgreport.output.verbosity import OutputType


def _attrs(**values: object) -> str:
    return "".join(
        f" {name}={quoteattr(str(value))}" for name, value in values.items() if value is not None
    )


class XmlOutput(OutputChannel):
    """Structured output for front ends that parse the stream."""

    output_type = OutputType.XML

    def _emit(self, element: str) -> None:
        click.echo(element)

    def _message(self, kind: str, text: str) -> None:
        self._emit(f'<message type="{kind}">{escape(text)}</message>')

    def _render_info(self, message: str, *, newline: bool) -> None:
        self._message("info", message)

    def _render_warning(self, message: str) -> None:
        self._message("warning", message)

    def _render_error(self, problem_desc: str, details: list[str], hint: str) -> None:
        text = "\n".join([problem_desc, *details, *([hint] if hint else [])])
        self._message("error", text)

    def _render_progress_start(self, progress_id: str, label: str, is_tick: bool) -> None:
        self._emit(f"<progress{_attrs(id=progress_id, name=label)}/>")

    def _render_progress(self, progress_id: str, label: str, value: int) -> None:
        self._emit(f"<progress{_attrs(id=progress_id, name=label, value=value)}/>")

    def _render_tick(self, progress_id: str, label: str, cursor: str) -> None:
        self._emit(f"<progress{_attrs(id=progress_id, name=label, value=-1)}/>")

    def _render_progress_end(self, progress_id: str, label: str, is_error: bool) -> None:
        error = 1 if is_error else None
        self._emit(f"<progress{_attrs(id=progress_id, name=label, done=1, error=error)}/>")

    def _render_download_start(self, uri: str) -> None:
        self._emit(f"<download{_attrs(url=uri)}/>")

    def _render_download_progress(self, uri: str, value: int, rate: int) -> None:
        # Start and end only; intermediate updates would flood the stream.
        return

    def _render_download_end(self, uri: str, rate: int, is_error: bool) -> None:
        error = 1 if is_error else None
        rate_value = rate if rate >= 0 else None
        self._emit(f"<download{_attrs(url=uri, rate=rate_value, done=1, error=error)}/>")

    def _render_prompt(
        self,
        prompt_id: int,
        text: str,
        answer_hint: str,
        default_answer: str,
    ) -> None:
        options = []
        for answer in filter(None, answer_hint.split("/")):
            default = "1" if answer == default_answer else None
            options.append(f"<option{_attrs(value=answer, default=default)}/>")
        self._emit(
            f'<prompt id="{int(prompt_id)}"><text>{escape(text)}</text>'
            f"{''.join(options)}</prompt>",
        )
