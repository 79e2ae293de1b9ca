import yaml
from rich.console import Console

from fontcheck.models.diagnostic import Diagnostic, ExpectedRange, Level, MetricOutOfRange, MissingTable
from fontcheck.models.report import FontReport, RunReport
from fontcheck.reporting import (
    export_report,
    filter_diagnostics,
    format_diagnostic_line,
    print_font_report,
    print_summary,
    report_lines,
)

ASCENT = Diagnostic(
    level=Level.FAIL,
    error=MetricOutOfRange(field="usWinAscent", expected=ExpectedRange(lower=1000, upper=2000), actual=500),
)
INFO = Diagnostic(level=Level.INFO, error=MissingTable(name="kern"))


def make_run():
    return RunReport.from_fonts(
        [
            FontReport(source="a.ttf", diagnostics=[INFO, ASCENT]),
            FontReport(source="b.ttf", error="b.ttf: not a readable font"),
        ]
    )


class TestLines:
    def test_line_format(self):
        assert format_diagnostic_line("fonts/a.ttf", ASCENT) == (
            "fonts/a.ttf: Fail: OS/2.usWinAscent value should be in the range [1000, 2000], but got 500"
        )

    def test_filter_by_min_level(self):
        assert filter_diagnostics([INFO, ASCENT], Level.WARNING) == [ASCENT]
        assert filter_diagnostics([INFO, ASCENT]) == [INFO, ASCENT]

    def test_report_lines(self):
        run = make_run()

        assert report_lines(run.fonts[0], Level.FAIL) == [(format_diagnostic_line("a.ttf", ASCENT), "red")]
        assert report_lines(run.fonts[1]) == [("b.ttf: error: b.ttf: not a readable font", "red")]

    def test_report_lines_style_by_level(self):
        assert [style for _, style in report_lines(make_run().fonts[0])] == ["blue", "red"]

    def test_message_brackets_are_not_markup(self):
        console = Console(record=True, width=200)
        report = FontReport(source="[weird].ttf", diagnostics=[ASCENT])

        print_font_report(console, report)

        assert "[weird].ttf: Fail:" in console.export_text()


class TestSummary:
    def test_counts(self):
        run = make_run()

        assert run.summary == {"skip": 0, "info": 1, "warning": 0, "fail": 1, "fonts": 2, "unreadable": 1}
        assert run.fail_count == 1
        assert run.unreadable_count == 1


class TestConsoleOutput:
    def test_print_font_report(self):
        console = Console(record=True, width=200)

        print_font_report(console, make_run().fonts[0])

        text = console.export_text()
        assert "a.ttf: Info: Cannot read kern table" in text
        assert "a.ttf: Fail: OS/2.usWinAscent value should be in the range [1000, 2000], but got 500" in text

    def test_print_unreadable(self):
        console = Console(record=True, width=200)

        print_font_report(console, make_run().fonts[1])

        assert "b.ttf: error:" in console.export_text()

    def test_print_summary(self):
        console = Console(record=True, width=200)

        print_summary(console, make_run())

        text = console.export_text()
        assert "Font Check Summary" in text
        assert "Unreadable" in text


class TestExport:
    def test_export_yaml(self, tmp_path):
        path = tmp_path / "report.yaml"

        export_report(make_run(), path)

        data = yaml.safe_load(path.read_text())
        assert data["summary"]["fail"] == 1
        first = data["fonts"][0]
        assert first["source"] == "a.ttf"
        assert first["diagnostics"][1]["level"] == "Fail"
        assert first["diagnostics"][1]["error"]["expected"] == {"lower": 1000, "upper": 2000}
        assert data["fonts"][1]["error"] == "b.ttf: not a readable font"

    def test_export_non_ascii_source(self, tmp_path):
        path = tmp_path / "report.yaml"
        run = RunReport.from_fonts([FontReport(source="fonts/Schrift-Größe.ttf", diagnostics=[ASCENT])])

        export_report(run, path)

        data = yaml.safe_load(path.read_text(encoding="utf-8"))
        assert data["fonts"][0]["source"] == "fonts/Schrift-Größe.ttf"
