"""Run the Liferay source formatter jar and collect its results."""
import os
import shutil
import subprocess
import tempfile
from pathlib import Path

from source_format.logging_config import get_logger
from source_format.types import Options, ResultSet

logger = get_logger(__name__)


def validate_options(options: Options | None) -> None:
    """Validate formatter options.

    Args:
        options: Options to validate

    Raises:
        ValueError: If options are missing or have no base directory
    """
    if options is None:
        raise ValueError("format options cannot be None")
    if not options.base_dir:
        raise ValueError("specify base directory")


def build_command_args(options: Options, jar_path: Path, output_path: Path) -> list[str]:
    """Build the java arguments for a source formatter run.

    Args:
        options: Run options
        jar_path: Path to the source formatter jar
        output_path: File the formatter writes its JSON results to

    Returns:
        Argument list, without the java executable
    """
    args = [
        "-jar",
        str(jar_path),
        f"source.base.dir={options.base_dir}",
        f"output.file.name={output_path}",
    ]

    if options.checks:
        args.append(f"source.check.names={','.join(options.checks)}")
    if options.filetypes:
        args.append(f"source.file.extensions={','.join(options.filetypes)}")
    if options.skip_checks:
        args.append(f"skip.check.names={','.join(options.skip_checks)}")
    if options.format_generated:
        args.append("include.generated.files=true")
    if options.format_subrepositories:
        args.append("include.subrepositories=true")

    return args


def find_java(executable: str = "java") -> str:
    """Locate the java launcher.

    Args:
        executable: Executable name or path

    Returns:
        Absolute path to the executable

    Raises:
        FileNotFoundError: If it is not on PATH
    """
    path = shutil.which(executable)
    if path is None:
        raise FileNotFoundError(f"{executable}: executable file not found in $PATH")
    return path


def parse_result_set(text: str) -> ResultSet:
    """Parse the formatter's JSON output.

    Args:
        text: File content; may be empty

    Returns:
        ResultSet, empty if text is empty

    Raises:
        pydantic.ValidationError: If the JSON is malformed or does not match the schema
    """
    if not text.strip():
        return ResultSet()
    return ResultSet.model_validate_json(text)


def parse_result_file(path: Path) -> ResultSet:
    return parse_result_set(path.read_text(encoding="utf-8"))


def format_source(options: Options, jar_path: Path, java_executable: str = "java") -> ResultSet:
    """Run the source formatter once against options.base_dir.

    The formatter rewrites files under the base directory in place.

    Args:
        options: Run options
        jar_path: Path to the source formatter jar
        java_executable: Java launcher name or path

    Returns:
        Parsed result set

    Raises:
        ValueError: If options are invalid or the output cannot be decoded
        FileNotFoundError: If java cannot be found
        RuntimeError: If the formatter fails without writing results
    """
    validate_options(options)

    fd, tmp_name = tempfile.mkstemp(prefix="temp-", suffix=".json")
    os.close(fd)
    output_path = Path(tmp_name)

    try:
        cmd = [find_java(java_executable), *build_command_args(options, jar_path, output_path)]
        logger.info(f"Running {' '.join(cmd)}")

        completed = subprocess.run(cmd, capture_output=True, text=True, check=False)

        if completed.stdout:
            logger.info(completed.stdout)
        if completed.stderr:
            logger.info(completed.stderr)

        text = output_path.read_text(encoding="utf-8")

        if completed.returncode != 0:
            if not text.strip():
                message = (
                    f"Source formatter exited with status {completed.returncode} "
                    "and produced no results"
                )
                stderr_lines = completed.stderr.strip().splitlines() if completed.stderr else []
                if stderr_lines:
                    message += f": {stderr_lines[-1]}"
                raise RuntimeError(message)
            logger.info(f"Source formatter exited with status {completed.returncode}")

        return parse_result_set(text)
    finally:
        output_path.unlink(missing_ok=True)
