"""Output channels with verbosity and output-type contracts.

========  =========  ===========================================
Level     Flag       User Sees
========  =========  ===========================================
QUIET     -q         Results and errors only, no progress
NORMAL    (default)  + Progress, messages, script output
HIGH      -v         + Details, liveness indicators
DEBUG     -vv        + Diagnostic traces (silent retries)
========  =========  ===========================================

Usage
-----
>>> from pkgreport.output import HumanOutput, Verbosity
>>>
>>> out = HumanOutput(verbosity=Verbosity.HIGH)
>>> out.info("Reading installed packages")
>>> out.info("Retry details", Verbosity.DEBUG)  # Hidden below DEBUG
"""

from pkgreport.output.channel import OutputChannel
from pkgreport.output.human import HumanOutput
from pkgreport.output.protocol import OutputChannelProtocol
from pkgreport.output.verbosity import OutputType, Verbosity
from pkgreport.output.xml import XmlOutput

__all__ = [
    "HumanOutput",
    "OutputChannel",
    "OutputChannelProtocol",
    "OutputType",
    "Verbosity",
    "XmlOutput",
]
