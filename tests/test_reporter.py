import json
from source_format.reporter import (
    format_detailed_report,
    format_json_report,
    get_exit_code,
    get_summary,
)
from source_format.types import Result, ResultSet, Violation


def _result_set() -> ResultSet:
    return ResultSet(
        results=[
            Result(
                name="JavaStylingCheck",
                violations=[
                    Violation(file_name="src/Foo.java", message="Missing blank line", line_number=12),
                    Violation(file_name="src/Bar.java", message="Bad import", line_number=-1),
                ],
            ),
            Result(
                name="XMLBuildFileCheck",
                violations=[Violation(file_name="build.xml", message="Sort targets", line_number=0)],
            ),
        ],
        modified_file_names=["src/Foo.java"],
        violations_count=3,
    )


def test_format_detailed_report_no_violations():
    """Test the success message."""
    assert format_detailed_report(ResultSet()) == "No violations found 🌱"


def test_format_detailed_report_zero_count_ignores_checks():
    """Test a zero violation count wins over listed checks."""
    result_set = ResultSet(results=[Result(name="JavaStylingCheck")], violations_count=0)

    assert format_detailed_report(result_set) == "No violations found 🌱"
    assert get_exit_code(result_set) == 0


def test_format_detailed_report_lists_all_checks():
    """Test every check and violation is rendered."""
    report = format_detailed_report(_result_set())

    assert report.splitlines() == [
        "Number of violations: 3",
        "",
        "Check: JavaStylingCheck",
        "\tsrc/Foo.java: Missing blank line (line: 12)",
        "\tsrc/Bar.java: Bad import",
        "Check: XMLBuildFileCheck",
        "\tbuild.xml: Sort targets (line: 0)",
    ]


def test_format_detailed_report_stop_after_first_check():
    """Test rendering can stop after the first check."""
    report = format_detailed_report(_result_set(), stop_after_first_check=True)

    assert "Check: JavaStylingCheck" in report
    assert "XMLBuildFileCheck" not in report


def test_format_json_report():
    """Test JSON output keeps the formatter's keys."""
    data = json.loads(format_json_report(_result_set()))

    assert data["violationsCount"] == 3
    assert data["checks"][0]["violations"][0]["fileName"] == "src/Foo.java"
    assert data["checks"][0]["violations"][1]["lineNumber"] == -1
    assert data["modifiedFileNames"] == ["src/Foo.java"]
    assert data["summary"]["checks_with_violations"] == 2


def test_reporter_get_exit_code():
    """Test getting exit code based on results."""
    assert get_exit_code(ResultSet()) == 0
    assert get_exit_code(_result_set()) == 1


def test_get_summary():
    """Test summary statistics."""
    result_set = _result_set()
    result_set.results.append(Result(name="EmptyCheck"))

    summary = get_summary(result_set)

    assert summary == {
        "total_checks": 3,
        "checks_with_violations": 2,
        "total_violations": 3,
        "modified_files": 1,
    }
