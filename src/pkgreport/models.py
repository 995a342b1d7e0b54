"""Value types exchanged between the transaction engine and the reporters."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


class ErrorCode(Enum):
    """Engine error codes as seen by this layer.

    Only the distinction between ``NO_ERROR`` and everything else matters for
    control flow; the description is what gets shown.
    """

    NO_ERROR = "no error"
    NOT_FOUND = "not found"
    IO = "I/O error"
    INVALID = "invalid object"

    @property
    def description(self) -> str:
        return self.value

    def __bool__(self) -> bool:
        return self is not ErrorCode.NO_ERROR


class Action(Enum):
    """Outcome handed back to the engine when a problem is reported."""

    ABORT = "abort"
    RETRY = "retry"
    IGNORE = "ignore"

    @property
    def answer(self) -> str:
        """Single-letter answer used at prompts."""
        return self.value[0]


class ExecutionLevel(IntEnum):
    """How much the engine relaxed its checks for an install attempt."""

    PLAIN = 0
    NODEPS = 1
    NODEPS_FORCE = 2

    @property
    def annotation(self) -> str:
        """Suffix shown next to failures at this level."""
        return _LEVEL_ANNOTATIONS[self]

    @property
    def is_final(self) -> bool:
        """Whether no more permissive level exists."""
        return self is ExecutionLevel.NODEPS_FORCE


_LEVEL_ANNOTATIONS = {
    ExecutionLevel.PLAIN: "",
    ExecutionLevel.NODEPS: "(with --nodeps)",
    ExecutionLevel.NODEPS_FORCE: "(with --nodeps --force)",
}


class ScriptTask(Enum):
    """Whether a script runs on install (DO) or on removal (UNDO)."""

    DO = "DO"
    UNDO = "UNDO"

    def __str__(self) -> str:
        return self.value


class ScriptNotify(Enum):
    """Kind of a script progress notification."""

    OUTPUT = "output"
    PING = "ping"


class PromptId(IntEnum):
    """Identifiers of interactive decision points."""

    ARI_RPM_INSTALL_PROBLEM = 1
    ARI_RPM_REMOVE_PROBLEM = 2
    ARI_DOWNLOAD_PROBLEM = 3


@dataclass(frozen=True)
class Resolvable:
    """Read-only view of a package-like record owned by the engine."""

    name: str
    version: str
    release: str = ""
    kind: str = "package"

    @property
    def edition(self) -> str:
        """``version-release``, or just the version without a release."""
        return f"{self.version}-{self.release}" if self.release else self.version

    def __str__(self) -> str:
        return f"{self.name}-{self.edition}"


@dataclass(frozen=True)
class Message:
    """A message resolvable: text the package wants shown to the operator."""

    resolvable: Resolvable
    text: str

    def __str__(self) -> str:
        return f"[message]{self.resolvable}"


@dataclass(frozen=True)
class OperationSubject:
    """What a progress span is about.

    Attributes
    ----------
    kind : str
        Stable operation id, also the span id
    label : str
        Human text shown with the span
    resolvable : Resolvable | None
        Record behind the operation, when there is one
    """

    kind: str
    label: str
    resolvable: Resolvable | None = None
