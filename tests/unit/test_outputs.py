# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
import io
import json

from authorlint.model import Location
from authorlint.outputs import GccAnalysisOutput, JsonAnalysisOutput, build_output


def test_out_001_json_output_streams_a_valid_array() -> None:
    stdout = io.StringIO()
    output = JsonAnalysisOutput(stdout=stdout)

    output.write_start()
    output.write_info("ignored")
    output.write_warning("passive voice", Location("doc.md", 2, 4, 2, 9))
    output.write_error("misspelled [word]", Location("doc.md", 5, 0, 6, 1))
    output.write_end()

    lines = stdout.getvalue().splitlines()
    assert lines[0] == "["
    assert lines[1].startswith("{")
    assert lines[2].startswith(",{")
    assert lines[-1] == "]"
    payload = json.loads(stdout.getvalue())
    assert payload == [
        {
            "type": "warning",
            "text": "passive voice",
            "filePath": "doc.md",
            "range": [[2, 4], [2, 9]],
        },
        {
            "type": "error",
            "text": "misspelled [word]",
            "filePath": "doc.md",
            "range": [[5, 0], [6, 1]],
        },
    ]


def test_out_002_json_output_resets_first_flag_on_start() -> None:
    stdout = io.StringIO()
    output = JsonAnalysisOutput(stdout=stdout)

    output.write_start()
    output.write_error("one", Location.at("a.md"))
    output.write_end()
    output.write_start()
    output.write_error("two", Location.at("b.md"))
    output.write_end()

    lines = stdout.getvalue().splitlines()
    assert lines == [
        "[",
        lines[1],
        "]",
        "[",
        lines[4],
        "]",
    ]
    assert not lines[4].startswith(",")


def test_out_003_json_output_serializes_missing_location_as_null() -> None:
    stdout = io.StringIO()
    output = JsonAnalysisOutput(stdout=stdout)

    output.write_start()
    output.write_warning("general", None)
    output.write_end()

    assert json.loads(stdout.getvalue()) == [
        {"type": "warning", "text": "general", "filePath": None, "range": None}
    ]


def test_out_004_gcc_output_writes_one_based_prefix_to_stderr() -> None:
    stdout = io.StringIO()
    stderr = io.StringIO()
    output = GccAnalysisOutput(stdout=stdout, stderr=stderr)

    output.write_start()
    output.write_warning("passive voice", Location("doc.md", 2, 4, 2, 9))
    output.write_error("bad :smile: [b]x[/b]", Location.at("doc.md"))
    output.write_end()

    assert stdout.getvalue() == ""
    assert stderr.getvalue().splitlines() == [
        "doc.md:3:5: WARN: passive voice",
        "doc.md:1:1: ERROR: bad :smile: [b]x[/b]",
    ]


def test_out_005_gcc_output_without_location_uses_bare_prefix() -> None:
    stderr = io.StringIO()
    output = GccAnalysisOutput(stdout=io.StringIO(), stderr=stderr)

    output.write_warning("careful")
    output.write_error("broken")

    assert stderr.getvalue().splitlines() == ["WARN: careful", "ERROR: broken"]


def test_out_006_gcc_output_writes_info_verbatim_to_stdout() -> None:
    stdout = io.StringIO()
    stderr = io.StringIO()
    output = GccAnalysisOutput(stdout=stdout, stderr=stderr)

    output.write_info("Running analysis: spell")

    assert stdout.getvalue() == "Running analysis: spell\n"
    assert stderr.getvalue() == ""


def test_out_007_build_output_selects_variant_by_format() -> None:
    assert isinstance(build_output("json"), JsonAnalysisOutput)
    assert isinstance(build_output("gcc"), GccAnalysisOutput)
    assert isinstance(build_output("anything"), GccAnalysisOutput)


def test_out_008_gcc_output_keeps_tabs_in_plugin_text() -> None:
    stdout = io.StringIO()
    stderr = io.StringIO()
    output = GccAnalysisOutput(stdout=stdout, stderr=stderr)

    output.write_info("col1\tcol2")
    output.write_error("found\tword", Location("doc.md", 0, 0, 0, 4))
    output.write_warning("\tindented")

    assert stdout.getvalue() == "col1\tcol2\n"
    assert stderr.getvalue() == "doc.md:1:1: ERROR: found\tword\nWARN: \tindented\n"


def test_out_009_gcc_output_defaults_to_process_streams(capsys) -> None:
    output = GccAnalysisOutput()

    output.write_info("a\tb")
    output.write_error("c\td")

    captured = capsys.readouterr()
    assert captured.out == "a\tb\n"
    assert captured.err == "ERROR: c\td\n"
