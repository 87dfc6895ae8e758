"""Command-line interface for source-format."""
import sys
from pathlib import Path

import click
import requests

from source_format.__version__ import __version__
from source_format.config import CONFIG_FILE_NAME, load_settings
from source_format.logging_config import get_logger, setup_logging
from source_format.orchestrator import run_source_format
from source_format.reporter import format_detailed_report, format_json_report, get_exit_code
from source_format.types import Options
from source_format.validation import parse_name_list, validate_base_dir

EXAMPLES = """\b
Examples:
  # Run SF on directory '~/code'
  $ source-format ~/code

  # Run only 'GradleDependenciesCheck' and 'GradleImportsCheck'
  $ source-format --only="GradleDependenciesCheck,GradleImportsCheck"

  # Run only on Java and XML files
  $ source-format --filetypes="java,xml"

  # Skip running 'JavaStylingCheck'
  $ source-format --skip="JavaStylingCheck"
"""


@click.command(epilog=EXAMPLES)
@click.version_option(version=__version__, prog_name="source-format")
@click.argument("directory", required=False, default="./")
@click.option("--only", multiple=True, help="Only run specified checks")
@click.option("--filetypes", multiple=True, help="Run checks only specified filetypes")
@click.option("--skip", multiple=True, help="Skip specified checks")
@click.option("--generated", is_flag=True, help="Format generated files")
@click.option("--subrepositories", is_flag=True, help="Format subrepositories")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
@click.option("--first-check-only", is_flag=True, help="Only list the first failing check")
@click.option("--no-progress", is_flag=True, help="Hide the download progress bar")
@click.option("--verbose", is_flag=True, help="Enable verbose logging")
@click.option("--quiet", is_flag=True, help="Suppress warnings (errors only)")
@click.option("--config", type=click.Path(exists=True), help="Path to config file")
def main(
    directory: str,
    only: tuple[str, ...],
    filetypes: tuple[str, ...],
    skip: tuple[str, ...],
    generated: bool,
    subrepositories: bool,
    output_json: bool,
    first_check_only: bool,
    no_progress: bool,
    verbose: bool,
    quiet: bool,
    config: str | None,
) -> None:
    """Run Liferay Source Formatter as a CLI."""
    setup_logging(verbose=verbose, quiet=quiet)

    try:
        validate_base_dir(Path(directory))
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)

    options = Options(
        base_dir=directory,
        checks=parse_name_list(only),
        filetypes=parse_name_list(filetypes),
        skip_checks=parse_name_list(skip),
        format_generated=generated,
        format_subrepositories=subrepositories,
    )

    try:
        config_path = Path(config) if config else Path.cwd() / CONFIG_FILE_NAME
        settings = load_settings(config_path)

        overrides = {}
        if no_progress:
            overrides["show_progress"] = False
        if first_check_only:
            overrides["stop_after_first_check"] = True
        if overrides:
            settings = settings.model_copy(update=overrides)

        result_set = run_source_format(options, settings)

        if output_json:
            output = format_json_report(result_set)
        else:
            output = format_detailed_report(
                result_set, stop_after_first_check=settings.stop_after_first_check
            )

        click.echo(output)

        sys.exit(get_exit_code(result_set))

    except KeyboardInterrupt:
        click.echo("\nOperation cancelled by user", err=True)
        sys.exit(130)
    except (ValueError, FileNotFoundError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)
    except requests.RequestException as e:
        click.echo(f"Error: failed to download source formatter: {e}", err=True)
        sys.exit(2)
    except (RuntimeError, OSError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)
    except Exception as e:
        logger = get_logger(__name__)
        logger.exception("Unexpected error during execution")
        click.echo(
            f"An unexpected error occurred: {e}\n" "Run with --verbose for details.", err=True
        )
        sys.exit(2)


if __name__ == "__main__":
    main()
