"""Per-operation reporters and their dispatch table."""

from pkgreport.reporters.base import OperationReporter
from pkgreport.reporters.download import DownloadReporter
from pkgreport.reporters.install import InstallReporter
from pkgreport.reporters.message import MessageReporter
from pkgreport.reporters.registry import DEFAULT_REPORTERS, ReportReceivers
from pkgreport.reporters.remove import RemoveReporter
from pkgreport.reporters.scan import ScanDatabaseReporter, engine_default_policy
from pkgreport.reporters.script import ScriptReporter

__all__ = [
    "DEFAULT_REPORTERS",
    "DownloadReporter",
    "InstallReporter",
    "MessageReporter",
    "OperationReporter",
    "RemoveReporter",
    "ReportReceivers",
    "ScanDatabaseReporter",
    "ScriptReporter",
    "engine_default_policy",
]
