"""Reporter for file transfers done by the transport collaborator."""

from pkgreport.constants import Labels, OperationKind
from pkgreport.models import Action, ErrorCode, PromptId
from pkgreport.reporters.base import OperationReporter


class DownloadReporter(OperationReporter):
    """Forwards transfer progress to the channel's download spans."""

    kind = OperationKind.DOWNLOAD

    def start(self, uri: str) -> None:
        self.output.download_progress_start(uri)

    def progress(self, uri: str, value: int = -1, rate: int = -1) -> bool:
        self.output.download_progress(uri, value, rate)
        return True

    def problem(self, uri: str, error: ErrorCode, description: str) -> Action:
        failed = Labels.DOWNLOAD_FAILED.format(uri=uri)
        self.output.error(f"{failed} {self.format_error(error, description)}")
        if self.resolver is None:
            return Action.ABORT
        return self.resolver.resolve(
            PromptId.ARI_DOWNLOAD_PROBLEM,
            Labels.ARI_QUESTION,
            Action.ABORT,
        )

    def finish(
        self,
        uri: str,
        rate: int = -1,
        error: ErrorCode = ErrorCode.NO_ERROR,
        reason: str = "",
    ) -> None:
        self.output.download_progress_end(uri, rate, is_error=bool(error))
        self.display_error(error, reason)
