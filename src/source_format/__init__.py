"""source-format: Liferay Source Formatter as a CLI."""

from source_format.__version__ import __version__
from source_format.config import Settings, get_default_settings, load_settings
from source_format.orchestrator import run_source_format
from source_format.types import Options, Result, ResultSet, Violation

__all__ = [
    "__version__",
    "Settings",
    "load_settings",
    "get_default_settings",
    "run_source_format",
    "Options",
    "ResultSet",
    "Result",
    "Violation",
]
