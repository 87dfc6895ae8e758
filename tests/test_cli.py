import json
from pathlib import Path
from unittest.mock import patch
from click.testing import CliRunner
from source_format.cli import main
from source_format.types import Result, ResultSet, Violation


def _violations() -> ResultSet:
    return ResultSet(
        results=[
            Result(
                name="JavaStylingCheck",
                violations=[Violation(file_name="Foo.java", message="Bad", line_number=4)],
            ),
            Result(
                name="GradleImportsCheck",
                violations=[Violation(file_name="build.gradle", message="Unsorted")],
            ),
        ],
        violations_count=2,
    )


@patch("source_format.cli.run_source_format")
def test_cli_no_violations(mock_run):
    """Test a clean run exits 0."""
    runner = CliRunner()

    with runner.isolated_filesystem():
        mock_run.return_value = ResultSet()

        result = runner.invoke(main, [])

        assert result.exit_code == 0
        assert "No violations found" in result.output
        options = mock_run.call_args[0][0]
        assert options.base_dir == "./"


@patch("source_format.cli.run_source_format")
def test_cli_exit_code_on_violations(mock_run):
    """Test violations are listed and exit 1."""
    runner = CliRunner()

    with runner.isolated_filesystem():
        mock_run.return_value = _violations()

        result = runner.invoke(main, ["."])

        assert result.exit_code == 1
        assert "Number of violations: 2" in result.output
        assert "Check: JavaStylingCheck" in result.output
        assert "\tFoo.java: Bad (line: 4)" in result.output
        assert "\tbuild.gradle: Unsorted\n" in result.output
        assert "Check: GradleImportsCheck" in result.output


@patch("source_format.cli.run_source_format")
def test_cli_first_check_only(mock_run):
    """Test rendering stops after the first check on request."""
    runner = CliRunner()

    with runner.isolated_filesystem():
        mock_run.return_value = _violations()

        result = runner.invoke(main, ["--first-check-only"])

        assert result.exit_code == 1
        assert "GradleImportsCheck" not in result.output
        assert mock_run.call_args[0][1].stop_after_first_check is True


@patch("source_format.cli.run_source_format")
def test_cli_options(mock_run):
    """Test flags are turned into options."""
    runner = CliRunner()

    with runner.isolated_filesystem():
        Path("code").mkdir()
        mock_run.return_value = ResultSet()

        result = runner.invoke(
            main,
            [
                "code",
                "--only=GradleDependenciesCheck,GradleImportsCheck",
                "--filetypes",
                "java,xml",
                "--skip=JavaStylingCheck",
                "--generated",
                "--subrepositories",
                "--no-progress",
            ],
        )

        assert result.exit_code == 0
        options, settings = mock_run.call_args[0]
        assert options.base_dir == "code"
        assert options.checks == ("GradleDependenciesCheck", "GradleImportsCheck")
        assert options.filetypes == ("java", "xml")
        assert options.skip_checks == ("JavaStylingCheck",)
        assert options.format_generated is True
        assert options.format_subrepositories is True
        assert settings.show_progress is False


@patch("source_format.cli.run_source_format")
def test_cli_json_output(mock_run):
    """Test CLI with JSON output format."""
    runner = CliRunner()

    with runner.isolated_filesystem():
        mock_run.return_value = _violations()

        result = runner.invoke(main, ["--json"])

        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["violationsCount"] == 2
        assert data["summary"]["total_checks"] == 2


@patch("source_format.cli.run_source_format")
def test_cli_reads_config_file(mock_run):
    """Test settings are loaded from .source-format.json."""
    runner = CliRunner()

    with runner.isolated_filesystem():
        Path(".source-format.json").write_text('{"jar_version": "1.0.7"}')
        mock_run.return_value = ResultSet()

        result = runner.invoke(main, [])

        assert result.exit_code == 0
        assert mock_run.call_args[0][1].jar_version == "1.0.7"


@patch("source_format.cli.run_source_format")
def test_cli_too_many_arguments(mock_run):
    """Test more than one directory is rejected before any work."""
    runner = CliRunner()

    with runner.isolated_filesystem():
        Path("a").mkdir()
        Path("b").mkdir()

        result = runner.invoke(main, ["a", "b"])

        assert result.exit_code == 2
        mock_run.assert_not_called()


@patch("source_format.cli.run_source_format")
def test_cli_missing_directory(mock_run):
    """Test a nonexistent directory is rejected before any work."""
    runner = CliRunner()

    with runner.isolated_filesystem():
        result = runner.invoke(main, ["missing"])

        assert result.exit_code == 2
        assert "missing does not exist" in result.output
        mock_run.assert_not_called()
        assert not Path("missing").exists()


def test_cli_version():
    """Test --version prints the build version."""
    result = CliRunner().invoke(main, ["--version"])

    assert result.exit_code == 0
    assert "0.0.1" in result.output


def test_cli_help_lists_examples():
    """Test usage examples are shown in --help."""
    result = CliRunner().invoke(main, ["--help"])

    assert result.exit_code == 0
    assert '--skip="JavaStylingCheck"' in result.output
