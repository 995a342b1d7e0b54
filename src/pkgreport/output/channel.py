"""Base output channel: filtering and progress-span bookkeeping.

Subclasses decide how an event looks; this class decides whether it is shown at
all. The rules are:

========  ===========================================  ===========
Event     Shown when                                   Debounced
========  ===========================================  ===========
info      verbosity >= event level and type in mask    No
warning   verbosity >= event level and type in mask    No
error     always                                       No
progress  span is open and progress is not filtered    Yes
download  span is open and progress is not filtered    Yes
prompt    always                                       No
========  ===========================================  ===========
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from pkgreport.output.cursor import AliveCursor
from pkgreport.output.formatting import exception_report
from pkgreport.output.verbosity import OutputType, Verbosity
from pkgreport_logging import get_logger

logger = get_logger(__name__)

UNKNOWN = -1


@dataclass
class ProgressSpan:
    """State of one open progress span."""

    label: str
    is_tick: bool = False
    last_value: int | None = None
    last_rate: int | None = None
    cursor: AliveCursor = field(default_factory=AliveCursor)


class OutputChannel(ABC):
    """Verbosity- and type-filtered sink for reporting events.

    Parameters
    ----------
    verbosity : Verbosity
        Initial verbosity level
    """

    output_type: OutputType = OutputType.NORMAL

    def __init__(self, verbosity: Verbosity = Verbosity.NORMAL) -> None:
        self._verbosity = verbosity
        self._spans: dict[str, ProgressSpan] = {}
        self._downloads: dict[str, ProgressSpan] = {}

    @property
    def verbosity(self) -> Verbosity:
        """Current verbosity level."""
        return self._verbosity

    def set_verbosity(self, verbosity: Verbosity) -> None:
        """Change the verbosity for events rendered from now on."""
        self._verbosity = verbosity

    @property
    def type(self) -> OutputType:
        """Output type of this channel."""
        return self.output_type

    def mine(self, mask: OutputType) -> bool:
        """Whether an event with ``mask`` is intended for this channel."""
        return bool(self.output_type & mask)

    def progress_filter(self) -> bool:
        """Whether progress reporting is currently suppressed."""
        return self._verbosity < Verbosity.NORMAL

    def is_open(self, progress_id: str) -> bool:
        """Whether a progress span with ``progress_id`` is open."""
        return progress_id in self._spans

    def _visible(self, verbosity: Verbosity, mask: OutputType) -> bool:
        return self._verbosity >= verbosity and self.mine(mask)

    # Messages

    def info(
        self,
        message: str,
        verbosity: Verbosity = Verbosity.NORMAL,
        mask: OutputType = OutputType.ALL,
        *,
        newline: bool = True,
    ) -> None:
        """Show an info message.

        Parameters
        ----------
        message : str
            Text to show
        verbosity : Verbosity
            Minimal verbosity at which the message is shown; QUIET means always
        mask : OutputType
            Output types the message is intended for
        newline : bool
            Whether to terminate the message with a newline; ``False`` renders the
            text verbatim
        """
        if self._visible(verbosity, mask):
            self._render_info(message, newline=newline)

    def warning(
        self,
        message: str,
        verbosity: Verbosity = Verbosity.NORMAL,
        mask: OutputType = OutputType.ALL,
    ) -> None:
        """Show a warning; filtered exactly like :meth:`info`."""
        if self._visible(verbosity, mask):
            self._render_warning(message)

    def error(
        self,
        problem_desc: str,
        hint: str = "",
        *,
        cause: BaseException | None = None,
    ) -> None:
        """Show an error regardless of verbosity and output type.

        Parameters
        ----------
        problem_desc : str
            What happened
        hint : str
            What the user can do about it
        cause : BaseException | None
            Exception behind the problem; its message and cause chain are rendered
            between the description and the hint
        """
        details = exception_report(cause) if cause is not None else []
        self._render_error(problem_desc, details, hint)

    # Progress

    def progress_start(self, progress_id: str, label: str, is_tick: bool = False) -> None:
        """Open a progress span.

        Parameters
        ----------
        progress_id : str
            Key of the span
        label : str
            Text shown next to the progress indicator
        is_tick : bool
            Whether the span shows activity without a known percentage
        """
        if progress_id in self._spans:
            logger.debug("Progress span %r restarted without end", progress_id)
        self._spans[progress_id] = ProgressSpan(label=label, is_tick=is_tick)
        if not self.progress_filter():
            self._render_progress_start(progress_id, label, is_tick)

    def progress(self, progress_id: str, label: str, value: int = UNKNOWN) -> None:
        """Update an open span.

        Tick spans advance their cursor on every call. Percentage spans render only
        when ``value`` differs from the last value shown.
        """
        span = self._spans.get(progress_id)
        if span is None:
            logger.debug("Progress for unknown span %r ignored", progress_id)
            return
        if self.progress_filter():
            return

        span.label = label
        if span.is_tick:
            self._render_tick(progress_id, label, span.cursor.advance())
            return

        if value == span.last_value:
            return
        span.last_value = value
        self._render_progress(progress_id, label, value)

    def progress_end(self, progress_id: str, label: str, is_error: bool = False) -> None:
        """Close a span, marking it done or failed."""
        span = self._spans.pop(progress_id, None)
        if span is None:
            logger.debug("End of unknown progress span %r ignored", progress_id)
            return
        if not self.progress_filter():
            self._render_progress_end(progress_id, label, is_error)

    # Download progress

    def download_progress_start(self, uri: str) -> None:
        """Open a download span keyed by ``uri``."""
        if uri in self._downloads:
            logger.debug("Download span %r restarted without end", uri)
        self._downloads[uri] = ProgressSpan(label=uri)
        if not self.progress_filter():
            self._render_download_start(uri)

    def download_progress(self, uri: str, value: int = UNKNOWN, rate: int = UNKNOWN) -> None:
        """Update a download span.

        Parameters
        ----------
        uri : str
            File being downloaded
        value : int
            Percent done, ``-1`` if unknown
        rate : int
            Bytes per second, ``-1`` if unknown
        """
        span = self._downloads.get(uri)
        if span is None:
            logger.debug("Download progress for unknown uri %r ignored", uri)
            return
        if self.progress_filter():
            return
        if value == span.last_value and rate == span.last_rate:
            return
        span.last_value = value
        span.last_rate = rate
        self._render_download_progress(uri, value, rate)

    def download_progress_end(
        self,
        uri: str,
        rate: int = UNKNOWN,
        is_error: bool = False,
    ) -> None:
        """Close a download span with the final rate."""
        span = self._downloads.pop(uri, None)
        if span is None:
            logger.debug("End of unknown download %r ignored", uri)
            return
        if not self.progress_filter():
            self._render_download_end(uri, rate, is_error)

    # Prompt

    def prompt(
        self,
        prompt_id: int,
        text: str,
        answer_hint: str,
        default_answer: str = "",
    ) -> None:
        """Show an interactive question; collecting the answer is up to the caller.

        Parameters
        ----------
        prompt_id : int
            Stable identifier of the decision point
        text : str
            The question
        answer_hint : str
            Accepted answers separated by ``/`` (``"a/r/i"``)
        default_answer : str
            Answer taken when the user gives none
        """
        self._render_prompt(prompt_id, text, answer_hint, default_answer)

    # Rendering

    @abstractmethod
    def _render_info(self, message: str, *, newline: bool) -> None: ...

    @abstractmethod
    def _render_warning(self, message: str) -> None: ...

    @abstractmethod
    def _render_error(self, problem_desc: str, details: list[str], hint: str) -> None: ...

    @abstractmethod
    def _render_progress_start(self, progress_id: str, label: str, is_tick: bool) -> None: ...

    @abstractmethod
    def _render_progress(self, progress_id: str, label: str, value: int) -> None: ...

    @abstractmethod
    def _render_tick(self, progress_id: str, label: str, cursor: str) -> None: ...

    @abstractmethod
    def _render_progress_end(self, progress_id: str, label: str, is_error: bool) -> None: ...

    @abstractmethod
    def _render_download_start(self, uri: str) -> None: ...

    @abstractmethod
    def _render_download_progress(self, uri: str, value: int, rate: int) -> None: ...

    @abstractmethod
    def _render_download_end(self, uri: str, rate: int, is_error: bool) -> None: ...

    @abstractmethod
    def _render_prompt(
        self,
        prompt_id: int,
        text: str,
        answer_hint: str,
        default_answer: str,
    ) -> None: ...
