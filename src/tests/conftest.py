"""Root pytest configuration and shared fixtures for the pkgreport test suite."""

import logging
import sys
from collections.abc import Generator
from pathlib import Path

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from pkgreport.decision import DecisionResolver  # noqa: E402
from pkgreport.models import Resolvable  # noqa: E402
from pkgreport.output import HumanOutput, Verbosity, XmlOutput  # noqa: E402


@pytest.fixture(autouse=True)
def propagate_package_logs() -> Generator[None, None, None]:
    """Let pkgreport log records reach caplog regardless of earlier configuration."""
    loggers = [logging.getLogger(name) for name in ("pkgreport", "pkgreport_common")]
    previous = [(lg.propagate, lg.level) for lg in loggers]
    for lg in loggers:
        lg.propagate = True
        lg.setLevel(logging.DEBUG)
    yield
    for lg, (propagate, level) in zip(loggers, previous):
        lg.propagate = propagate
        lg.setLevel(level)


@pytest.fixture
def foo() -> Resolvable:
    """Package ``foo-1.0``."""
    return Resolvable("foo", "1.0")


@pytest.fixture
def bar() -> Resolvable:
    """Package ``bar-2.0``."""
    return Resolvable("bar", "2.0")


@pytest.fixture
def human() -> HumanOutput:
    """Human output at NORMAL verbosity, not a TTY, no colors."""
    return HumanOutput(verbosity=Verbosity.NORMAL, is_tty=False, color=False)


@pytest.fixture
def xml() -> XmlOutput:
    """XML output at NORMAL verbosity."""
    return XmlOutput(verbosity=Verbosity.NORMAL)


@pytest.fixture
def scripted(human: HumanOutput) -> DecisionResolver:
    """Non-interactive resolver on the human channel."""
    return DecisionResolver(human, interactive=False)
