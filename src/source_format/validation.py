"""Input validation functions."""
from pathlib import Path
from typing import Iterable


def validate_base_dir(base_dir: Path) -> None:
    """Validate the directory to format exists.

    Args:
        base_dir: Path to validate

    Raises:
        ValueError: If path does not exist or is not a directory
    """
    if not base_dir.exists():
        raise ValueError(f"{base_dir} does not exist")

    if not base_dir.is_dir():
        raise ValueError(f"{base_dir} is not a directory")


def parse_name_list(values: Iterable[str]) -> tuple[str, ...]:
    """Split comma separated option values.

    Args:
        values: Raw option values, e.g. ('java,xml', 'ftl')

    Returns:
        Tuple of non-empty, stripped names in order
    """
    names = []
    for value in values:
        names.extend(name.strip() for name in value.split(",") if name.strip())
    return tuple(names)
