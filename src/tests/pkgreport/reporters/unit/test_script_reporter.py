"""Unit tests for ScriptReporter."""

import pytest

from pkgreport.models import Action, Resolvable, ScriptNotify, ScriptTask
from pkgreport.output import HumanOutput, OutputChannel, Verbosity
from pkgreport.reporters import ScriptReporter

SCRIPT = Resolvable("foo-postinstall", "1.0", kind="script")
LABEL = "Running: foo-postinstall-1.0  (DO, /var/adm/scripts/foo)"


def _run_pings(out: OutputChannel, count: int) -> ScriptReporter:
    reporter = ScriptReporter(out)
    reporter.start(SCRIPT, "/var/adm/scripts/foo", ScriptTask.DO)
    for _ in range(count):
        assert reporter.progress(ScriptNotify.PING) is True
    return reporter


class TestScriptPing:
    """Tests for liveness pings."""

    @pytest.mark.parametrize("is_tty", [True, False])
    def test_pings_at_high_advance_one_line(self, capsys, is_tty):
        """Test five pings give five in-place cursor renders on any stream."""
        out = HumanOutput(verbosity=Verbosity.HIGH, is_tty=is_tty, color=False)
        _run_pings(out, 5)
        captured = capsys.readouterr().out
        assert captured.count("\r") == 5
        assert captured.count("\n") == 1  # only the "Running:" line
        assert captured.startswith(f"{LABEL}\n")
        assert captured.count(LABEL) == 1

    def test_pings_in_xml(self, capsys, xml):
        """Test every ping at HIGH is one tick element."""
        xml.set_verbosity(Verbosity.HIGH)
        _run_pings(xml, 5)
        assert capsys.readouterr().out.count('value="-1"') == 5

    def test_pings_at_quiet_render_nothing(self, capsys):
        """Test quiet mode shows neither pings nor the start line."""
        out = HumanOutput(verbosity=Verbosity.QUIET, is_tty=True, color=False)
        _run_pings(out, 5)
        assert capsys.readouterr().out == ""

    def test_pings_hidden_at_normal(self, capsys):
        """Test pings need HIGH verbosity."""
        out = HumanOutput(verbosity=Verbosity.NORMAL, is_tty=True, color=False)
        _run_pings(out, 3)
        assert "\r" not in capsys.readouterr().out


class TestScriptOutput:
    """Tests for script output and completion."""

    def test_start_line(self, capsys, human):
        """Test start names the script, task, and path."""
        ScriptReporter(human).start(SCRIPT, "/var/adm/scripts/foo", ScriptTask.DO)
        assert capsys.readouterr().out == f"{LABEL}\n"

    def test_output_not_overwritten_by_ping(self, capsys):
        """Test a ping after unterminated output moves to the next line."""
        out = HumanOutput(verbosity=Verbosity.HIGH, is_tty=True, color=False)
        reporter = ScriptReporter(out)
        reporter.start(SCRIPT, "/var/adm/scripts/foo", ScriptTask.DO)
        reporter.progress(ScriptNotify.OUTPUT, "Updating config...")
        reporter.progress(ScriptNotify.PING)
        assert capsys.readouterr().out == f"{LABEL}\nUpdating config...\n\r/"

    def test_output_rendered_verbatim(self, capsys, human):
        """Test OUTPUT text is passed through unchanged."""
        reporter = ScriptReporter(human)
        reporter.start(SCRIPT, "/p", ScriptTask.UNDO)
        capsys.readouterr()
        assert reporter.progress(ScriptNotify.OUTPUT, "line one\nline ") is True
        assert reporter.progress(ScriptNotify.OUTPUT, "two\n") is True
        assert capsys.readouterr().out == "line one\nline two\n"

    @pytest.mark.parametrize("verbosity", [Verbosity.NORMAL, Verbosity.HIGH])
    def test_output_does_not_tick(self, capsys, verbosity):
        """Test OUTPUT never renders the liveness cursor."""
        out = HumanOutput(verbosity=verbosity, is_tty=True, color=False)
        reporter = ScriptReporter(out)
        reporter.start(SCRIPT, "/p", ScriptTask.DO)
        reporter.progress(ScriptNotify.OUTPUT, "hello\n")
        assert "\r" not in capsys.readouterr().out

    def test_problem_closes_span_and_shows_error(self, capsys, human):
        """Test a script problem ends the span and renders the description."""
        reporter = ScriptReporter(human)
        reporter.start(SCRIPT, "/p", ScriptTask.DO)
        assert reporter.problem("exit status 1") is Action.ABORT
        captured = capsys.readouterr()
        assert captured.out.splitlines()[-1].endswith("[error]")
        assert captured.err == "exit status 1\n"

    def test_finish_closes_span(self, capsys, human):
        """Test finish marks the span done."""
        reporter = ScriptReporter(human)
        reporter.start(SCRIPT, "/p", ScriptTask.DO)
        reporter.finish()
        assert capsys.readouterr().out.splitlines()[-1].endswith("[done]")

    def test_finish_without_start_is_safe(self, capsys, human):
        """Test finish alone renders nothing."""
        ScriptReporter(human).finish()
        assert capsys.readouterr().out == ""
