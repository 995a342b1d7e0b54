"""Reporter for message resolvables."""

from pkgreport.constants import OperationKind
from pkgreport.models import Message
from pkgreport.output.verbosity import OutputType, Verbosity
from pkgreport.reporters.base import OperationReporter


class MessageReporter(OperationReporter):
    """Shows the text a package asks to be displayed. No retry logic."""

    kind = OperationKind.MESSAGE
    events = ("show",)

    def show(self, message: Message) -> None:
        """Render a message; the resolvable itself only at HIGH in human mode."""
        self.output.info(str(message), Verbosity.HIGH, OutputType.NORMAL)
        self.output.info(message.text)
