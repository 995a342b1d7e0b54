"""Reporter for package scripts run by the engine."""

from pkgreport.constants import Labels, OperationKind
from pkgreport.models import Action, Resolvable, ScriptNotify, ScriptTask
from pkgreport.output.verbosity import Verbosity
from pkgreport.reporters.base import OperationReporter


class ScriptReporter(OperationReporter):
    """Reports script execution.

    A quiet script makes the engine send PING notifications; each one advances a
    liveness cursor on the script's span, shown from HIGH verbosity on. OUTPUT
    notifications carry script output, rendered verbatim.
    """

    kind = OperationKind.RUN_SCRIPT

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._label = ""

    def start(self, script: Resolvable, path: str, task: ScriptTask) -> None:
        self._label = Labels.RUNNING_SCRIPT.format(script=script, task=task, path=path)
        self.output.progress_start(self.kind, self._label, is_tick=True)

    def progress(self, notify: ScriptNotify, output: str = "") -> bool:
        """Render a notification; never asks for an abort.

        Interrupting a script is up to whoever owns its signal channel.
        """
        if notify is ScriptNotify.PING:
            if self.output.verbosity >= Verbosity.HIGH:
                self.output.progress(self.kind, self._label)
        elif output:
            self.output.info(output, newline=False)
        return True

    def problem(self, description: str) -> Action:
        self.output.progress_end(self.kind, self._label, is_error=True)
        self.output.error(description)
        return Action.ABORT

    def finish(self) -> None:
        self.output.progress_end(self.kind, self._label)
