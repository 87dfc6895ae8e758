"""Main orchestrator coordinating all components."""
from source_format.config import Settings
from source_format.formatter import format_source, validate_options
from source_format.jar_cache import ensure_jar
from source_format.logging_config import get_logger
from source_format.types import Options, ResultSet

logger = get_logger(__name__)


def run_source_format(options: Options, settings: Settings) -> ResultSet:
    """Install the source formatter if needed and run it.

    Args:
        options: Run options
        settings: Runtime settings

    Returns:
        Results of the formatter run

    Raises:
        ValueError: If options are invalid
    """
    validate_options(options)

    jar_path = ensure_jar(settings)
    result_set = format_source(options, jar_path, java_executable=settings.java_executable)

    logger.info(
        f"{result_set.violations_count} violation(s) in {len(result_set.results)} check(s), "
        f"{len(result_set.modified_file_names)} file(s) modified"
    )
    return result_set
