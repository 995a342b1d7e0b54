"""Build channels, resolvers, and reporters from a ``ReportingConfig``."""

from __future__ import annotations

from pkgreport.decision import DecisionResolver
from pkgreport.output.channel import OutputChannel
from pkgreport.output.human import HumanOutput
from pkgreport.output.verbosity import Verbosity
from pkgreport.output.xml import XmlOutput
from pkgreport.reporters.registry import ReportReceivers
from pkgreport_common.config import ReportingConfig
from pkgreport_logging import configure_logger, get_logger

logger = get_logger(__name__)

LOGGING_PACKAGES = ("pkgreport", "pkgreport_common")


def create_output(config: ReportingConfig, is_tty: bool | None = None) -> OutputChannel:
    """Create the output channel selected by ``config``.

    Parameters
    ----------
    config : ReportingConfig
        Effective configuration
    is_tty : bool | None
        TTY override for human output (auto-detected if None)

    Returns
    -------
    OutputChannel
        ``XmlOutput`` in machine-readable mode, ``HumanOutput`` otherwise
    """
    verbosity = Verbosity.from_name(config.verbosity)
    if config.machine_readable:
        return XmlOutput(verbosity=verbosity)
    return HumanOutput(verbosity=verbosity, is_tty=is_tty, color=config.color)


def create_receivers(
    config: ReportingConfig,
    output: OutputChannel | None = None,
) -> ReportReceivers:
    """Create the reporter dispatch table for ``config``.

    Machine-readable mode implies non-interactive prompts: a parsing front end
    cannot be expected to answer on stdin.
    """
    output = output if output is not None else create_output(config)
    interactive = not (config.non_interactive or config.machine_readable)
    resolver = DecisionResolver(output, interactive=interactive)
    return ReportReceivers(output, resolver)


def configure_logging(config: ReportingConfig) -> None:
    """Configure the package loggers from ``config``."""
    for pkg_name in LOGGING_PACKAGES:
        configure_logger(
            pkg_name,
            level=config.log_level,
            to_console=False,
            log_file=config.log_file,
        )
    logger.debug("Logging configured at %s", config.log_level)
