"""pkgreport: progress reporting and failure escalation for package transactions.

The transaction engine drives one reporter per operation kind through its
lifecycle; reporters render through an output channel and, on problems, decide
the ``Action`` handed back to the engine.

Usage
-----
>>> from pkgreport import ReportingConfig, create_receivers
>>> from pkgreport.models import ErrorCode, ExecutionLevel, Resolvable
>>>
>>> receivers = create_receivers(ReportingConfig(non_interactive=True))
>>> install = receivers["install-resolvable"]
>>> install.problem(Resolvable("foo", "1.0"), ErrorCode.IO, "boom", ExecutionLevel.PLAIN)
<Action.ABORT: 'abort'>
"""

from pkgreport.decision import DecisionResolver
from pkgreport.factory import configure_logging, create_output, create_receivers
from pkgreport.models import (
    Action,
    ErrorCode,
    ExecutionLevel,
    Message,
    OperationSubject,
    PromptId,
    Resolvable,
    ScriptNotify,
    ScriptTask,
)
from pkgreport.output import HumanOutput, OutputChannel, OutputType, Verbosity, XmlOutput
from pkgreport.reporters import ReportReceivers
from pkgreport_common.config import ReportingConfig, load_reporting_config

__version__ = "0.1.0"

__all__ = [
    "Action",
    "DecisionResolver",
    "ErrorCode",
    "ExecutionLevel",
    "HumanOutput",
    "Message",
    "OperationSubject",
    "OutputChannel",
    "OutputType",
    "PromptId",
    "ReportReceivers",
    "ReportingConfig",
    "Resolvable",
    "ScriptNotify",
    "ScriptTask",
    "Verbosity",
    "XmlOutput",
    "configure_logging",
    "create_output",
    "create_receivers",
    "load_reporting_config",
    "__version__",
]
