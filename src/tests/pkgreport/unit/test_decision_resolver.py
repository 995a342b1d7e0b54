"""Unit tests for DecisionResolver."""

import io
from unittest.mock import Mock, patch

import pytest

from pkgreport.decision import DecisionResolver
from pkgreport.models import Action, PromptId
from pkgreport.output import HumanOutput, Verbosity


class TestNonInteractive:
    """Tests for scripted (non-interactive) resolution."""

    @pytest.mark.parametrize("default", list(Action))
    def test_returns_default_without_reading(self, default, human):
        """Test the default is returned and no input is read."""
        resolver = DecisionResolver(human, interactive=False)
        with patch("pkgreport.decision.click.prompt") as mock_prompt:
            action = resolver.resolve(PromptId.ARI_RPM_REMOVE_PROBLEM, "Abort, retry, ignore?", default)
        assert action is default
        mock_prompt.assert_not_called()

    def test_notes_auto_selected_answer(self, capsys, scripted):
        """Test the question and chosen answer are rendered as info."""
        scripted.resolve(PromptId.ARI_RPM_INSTALL_PROBLEM, "Abort, retry, ignore?", Action.ABORT)
        assert capsys.readouterr().out == "Abort, retry, ignore? [a/r/i] (a): a\n"

    def test_never_prompts_on_channel(self):
        """Test the channel prompt is not used without an operator."""
        output = Mock()
        DecisionResolver(output, interactive=False).resolve(
            PromptId.ARI_RPM_INSTALL_PROBLEM,
            "Abort, retry, ignore?",
        )
        output.prompt.assert_not_called()


class TestInteractive:
    """Tests for interactive resolution."""

    @pytest.mark.parametrize(
        ("answer", "expected"),
        [
            ("a", Action.ABORT),
            ("r", Action.RETRY),
            ("i", Action.IGNORE),
            ("RETRY", Action.RETRY),
            ("  Ignore ", Action.IGNORE),
        ],
    )
    def test_recognized_answers(self, answer, expected, human):
        """Test recognized answers map to actions."""
        resolver = DecisionResolver(human)
        with patch("pkgreport.decision.click.prompt", return_value=answer):
            assert resolver.resolve(PromptId.ARI_RPM_INSTALL_PROBLEM, "Q?") is expected

    @pytest.mark.parametrize("answer", ["", "x", "maybe"])
    def test_unrecognized_answer_yields_default(self, answer, human):
        """Test empty or unknown answers select the default."""
        resolver = DecisionResolver(human)
        with patch("pkgreport.decision.click.prompt", return_value=answer):
            assert resolver.resolve(PromptId.ARI_RPM_INSTALL_PROBLEM, "Q?", Action.IGNORE) is Action.IGNORE

    def test_renders_prompt_through_channel(self):
        """Test the question is rendered by the output channel."""
        output = Mock()
        resolver = DecisionResolver(output)
        with patch("pkgreport.decision.click.prompt", return_value="r"):
            resolver.resolve(PromptId.ARI_RPM_REMOVE_PROBLEM, "Abort, retry, ignore?")
        output.prompt.assert_called_once_with(
            PromptId.ARI_RPM_REMOVE_PROBLEM,
            "Abort, retry, ignore?",
            "a/r/i",
            "a",
        )

    def test_end_of_input_yields_default(self, monkeypatch, human):
        """Test a closed input stream does not block and selects the default."""
        monkeypatch.setattr("sys.stdin", io.StringIO(""))
        resolver = DecisionResolver(human)
        assert resolver.resolve(PromptId.ARI_RPM_INSTALL_PROBLEM, "Q?") is Action.ABORT

    def test_reads_answer_from_stdin(self, monkeypatch, human):
        """Test a typed answer is read from standard input."""
        monkeypatch.setattr("sys.stdin", io.StringIO("i\n"))
        resolver = DecisionResolver(human)
        assert resolver.resolve(PromptId.ARI_RPM_INSTALL_PROBLEM, "Q?") is Action.IGNORE

    def test_answer_outside_allowed_yields_default(self, human):
        """Test restricting the choices rejects other answers."""
        resolver = DecisionResolver(human)
        with patch("pkgreport.decision.click.prompt", return_value="i"):
            action = resolver.resolve(
                PromptId.ARI_DOWNLOAD_PROBLEM,
                "Abort, retry?",
                Action.ABORT,
                allowed=(Action.ABORT, Action.RETRY),
            )
        assert action is Action.ABORT

    def test_unrecognized_answer_noted_at_high(self, capsys):
        """Test the fallback to the default is explained at HIGH verbosity."""
        out = HumanOutput(verbosity=Verbosity.HIGH, is_tty=False, color=False)
        with patch("pkgreport.decision.click.prompt", return_value="x"):
            DecisionResolver(out).resolve(PromptId.ARI_RPM_INSTALL_PROBLEM, "Q?")
        assert "Unrecognized answer 'x', using abort" in capsys.readouterr().out


class TestParseAnswer:
    """Tests for DecisionResolver.parse_answer()."""

    def test_none_and_empty(self):
        """Test missing answers parse to None."""
        assert DecisionResolver.parse_answer(None) is None
        assert DecisionResolver.parse_answer("") is None

    def test_full_words(self):
        """Test full action names are accepted."""
        assert DecisionResolver.parse_answer("abort") is Action.ABORT
