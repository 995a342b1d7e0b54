"""Unit tests for XmlOutput rendering."""

from pkgreport.output import OutputType, Verbosity, XmlOutput


class TestXmlMessages:
    """Tests for message elements."""

    def test_info_element(self, capsys, xml):
        """Test info() renders an escaped message element."""
        xml.info("a < b & c")
        assert capsys.readouterr().out == '<message type="info">a &lt; b &amp; c</message>\n'

    def test_warning_element(self, capsys, xml):
        """Test warning() uses the warning type."""
        xml.warning("outdated")
        assert capsys.readouterr().out == '<message type="warning">outdated</message>\n'

    def test_error_element_to_stdout(self, capsys, xml):
        """Test errors are elements on the same stream as everything else."""
        xml.error("broken", hint="retry later")
        captured = capsys.readouterr()
        assert captured.out == '<message type="error">broken\nretry later</message>\n'
        assert captured.err == ""

    def test_human_only_message_skipped(self, capsys, xml):
        """Test a NORMAL-masked message is not rendered as XML."""
        xml.info("[message]foo-1.0", Verbosity.QUIET, OutputType.NORMAL)
        assert capsys.readouterr().out == ""


class TestXmlProgress:
    """Tests for progress elements."""

    def test_progress_span(self, capsys, xml):
        """Test start, update, and end elements."""
        xml.progress_start("remove-resolvable", "Removing bar-2.0")
        xml.progress("remove-resolvable", "Removing bar-2.0", 42)
        xml.progress_end("remove-resolvable", "Removing bar-2.0")
        assert capsys.readouterr().out.splitlines() == [
            '<progress id="remove-resolvable" name="Removing bar-2.0"/>',
            '<progress id="remove-resolvable" name="Removing bar-2.0" value="42"/>',
            '<progress id="remove-resolvable" name="Removing bar-2.0" done="1"/>',
        ]

    def test_failed_span(self, capsys, xml):
        """Test a failed span carries an error attribute."""
        xml.progress_start("x", "Working")
        xml.progress_end("x", "Working", is_error=True)
        lines = capsys.readouterr().out.splitlines()
        assert lines[-1] == '<progress id="x" name="Working" done="1" error="1"/>'

    def test_ticks_rendered_with_unknown_value(self, capsys, xml):
        """Test each liveness tick is an element with value -1."""
        xml.progress_start("run-script", "Running", is_tick=True)
        xml.progress("run-script", "Running")
        assert capsys.readouterr().out.splitlines() == [
            '<progress id="run-script" name="Running"/>',
            '<progress id="run-script" name="Running" value="-1"/>',
        ]


class TestXmlDownload:
    """Tests for download elements."""

    def test_only_start_and_end_rendered(self, capsys, xml):
        """Test intermediate download updates are suppressed."""
        xml.download_progress_start("http://repo/foo.rpm")
        xml.download_progress("http://repo/foo.rpm", 10, 100)
        xml.download_progress("http://repo/foo.rpm", 90, 100)
        xml.download_progress_end("http://repo/foo.rpm", 100)
        assert capsys.readouterr().out.splitlines() == [
            '<download url="http://repo/foo.rpm"/>',
            '<download url="http://repo/foo.rpm" rate="100" done="1"/>',
        ]

    def test_unknown_rate_omitted(self, capsys, xml):
        """Test -1 rate is left out of the end element."""
        xml.download_progress_start("u")
        xml.download_progress_end("u", is_error=True)
        assert capsys.readouterr().out.splitlines()[-1] == '<download url="u" done="1" error="1"/>'


class TestXmlPrompt:
    """Tests for prompt elements."""

    def test_prompt_options(self, capsys, xml):
        """Test each answer becomes an option and the default is marked."""
        xml.prompt(2, "Abort, retry, ignore?", "a/r/i", "a")
        assert capsys.readouterr().out == (
            '<prompt id="2"><text>Abort, retry, ignore?</text>'
            '<option value="a" default="1"/><option value="r"/><option value="i"/>'
            "</prompt>\n"
        )

    def test_xml_and_human_never_both(self, capsys):
        """Test an XML channel emits no human-formatted text."""
        out = XmlOutput()
        out.info("hello")
        out.progress_start("x", "Working")
        out.progress("x", "Working", 5)
        captured = capsys.readouterr().out
        for line in captured.splitlines():
            assert line.startswith("<")
