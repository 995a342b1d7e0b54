"""Protocol definition for output channels (for testing/mocking)."""

from typing import Protocol, runtime_checkable

from pkgreport.output.verbosity import OutputType, Verbosity


@runtime_checkable
class OutputChannelProtocol(Protocol):
    """Interface the reporters render through.

    | Method    | Shown when                              | Masked |
    |-----------|-----------------------------------------|--------|
    | error     | always                                  | No     |
    | prompt    | always                                  | No     |
    | info      | verbosity >= message level              | Yes    |
    | warning   | verbosity >= message level              | Yes    |
    | progress  | verbosity >= NORMAL, span open          | No     |
    """

    @property
    def verbosity(self) -> Verbosity:
        """Current verbosity level."""
        ...

    @property
    def type(self) -> OutputType:
        """Output type of the channel."""
        ...

    def set_verbosity(self, verbosity: Verbosity) -> None: ...

    def info(
        self,
        message: str,
        verbosity: Verbosity = Verbosity.NORMAL,
        mask: OutputType = OutputType.ALL,
        *,
        newline: bool = True,
    ) -> None: ...

    def warning(
        self,
        message: str,
        verbosity: Verbosity = Verbosity.NORMAL,
        mask: OutputType = OutputType.ALL,
    ) -> None: ...

    def error(
        self,
        problem_desc: str,
        hint: str = "",
        *,
        cause: BaseException | None = None,
    ) -> None: ...

    def progress_start(self, progress_id: str, label: str, is_tick: bool = False) -> None: ...

    def progress(self, progress_id: str, label: str, value: int = -1) -> None: ...

    def progress_end(self, progress_id: str, label: str, is_error: bool = False) -> None: ...

    def download_progress_start(self, uri: str) -> None: ...

    def download_progress(self, uri: str, value: int = -1, rate: int = -1) -> None: ...

    def download_progress_end(self, uri: str, rate: int = -1, is_error: bool = False) -> None: ...

    def prompt(
        self,
        prompt_id: int,
        text: str,
        answer_hint: str,
        default_answer: str = "",
    ) -> None: ...
