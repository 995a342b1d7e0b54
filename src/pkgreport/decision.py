"""Turn a reported problem into an ``Action``, asking the operator when allowed."""

from __future__ import annotations

from collections.abc import Iterable

import click

from pkgreport.models import Action, PromptId
from pkgreport.output.protocol import OutputChannelProtocol
from pkgreport.output.verbosity import Verbosity
from pkgreport_logging import get_logger

logger = get_logger(__name__)

DEFAULT_ACTIONS: tuple[Action, ...] = (Action.ABORT, Action.RETRY, Action.IGNORE)


class DecisionResolver:
    """Resolve decision points to actions.

    Interactive mode renders the prompt through the output channel and reads one
    answer. Accepted answers are the action name or its first letter, in any case.
    Empty, unrecognized, and missing (end of input) answers select the default, so
    resolution always terminates after a single read.

    Non-interactive mode never reads input: it notes the question and the selected
    default at NORMAL verbosity and returns the default.

    Parameters
    ----------
    output : OutputChannelProtocol
        Channel used to render prompts
    interactive : bool
        Whether an operator may be asked
    """

    def __init__(self, output: OutputChannelProtocol, interactive: bool = True) -> None:
        self.output = output
        self.interactive = interactive

    def resolve(
        self,
        prompt_id: PromptId,
        text: str,
        default: Action = Action.ABORT,
        allowed: Iterable[Action] | None = None,
    ) -> Action:
        """Return the action for a decision point.

        Parameters
        ----------
        prompt_id : PromptId
            Which decision is being made
        text : str
            Question shown to the operator
        default : Action
            Action taken without a usable answer
        allowed : Iterable[Action] | None
            Actions the operator may choose; all three when None

        Returns
        -------
        Action
            The chosen action, always one of ``allowed`` or ``default``
        """
        choices = tuple(allowed) if allowed is not None else DEFAULT_ACTIONS
        if default not in choices:
            choices = (default, *choices)
        hint = "/".join(action.answer for action in choices)

        if not self.interactive:
            self.output.info(f"{text} [{hint}] ({default.answer}): {default.answer}")
            logger.debug("Prompt %s answered with default %s", prompt_id.name, default.name)
            return default

        self.output.prompt(prompt_id, text, hint, default.answer)
        answer = self._read_answer()
        action = self.parse_answer(answer, choices)
        if action is None:
            if answer:
                self.output.info(
                    f"Unrecognized answer {answer!r}, using {default.value}",
                    Verbosity.HIGH,
                )
            action = default
        logger.debug("Prompt %s resolved to %s", prompt_id.name, action.name)
        return action

    @staticmethod
    def parse_answer(answer: str | None, choices: Iterable[Action] = DEFAULT_ACTIONS) -> Action | None:
        """Map an answer to one of ``choices``; None when it matches none."""
        if not answer:
            return None
        normalized = answer.strip().lower()
        for action in choices:
            if normalized in (action.value, action.answer):
                return action
        return None

    def _read_answer(self) -> str | None:
        """Read one line of operator input; None on end of input."""
        try:
            return click.prompt(
                "",
                default="",
                show_default=False,
                prompt_suffix="",
            )
        except click.Abort:
            logger.debug("End of input while waiting for an answer")
            return None
