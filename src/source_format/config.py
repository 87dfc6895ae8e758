"""Configuration management for source-format."""
import json
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from source_format.nexus import PUBLIC_REPOS_URL

DEFAULT_JAR_VERSION = "1.0.2"
CONFIG_FILE_NAME = ".source-format.json"


class Settings(BaseModel):
    """Runtime settings for source-format with validation."""

    jar_version: str = Field(
        default=DEFAULT_JAR_VERSION, min_length=1, description="Source formatter jar version"
    )
    repository_url: str = Field(
        default=PUBLIC_REPOS_URL, min_length=1, description="Maven repository base URL"
    )
    cache_dir: Path | None = Field(
        default=None, description="Jar cache directory (defaults to ~/.local/share/liferay)"
    )
    jar_sha256: str | None = Field(
        default=None, description="Expected SHA256 of a freshly downloaded jar"
    )
    java_executable: str = Field(default="java", min_length=1, description="Java launcher")
    show_progress: bool = Field(default=True, description="Show download progress bar")
    stop_after_first_check: bool = Field(
        default=False, description="Only render the first check of a failing result set"
    )
    connect_timeout_seconds: float = Field(
        default=30.0, gt=0, le=600, description="HTTP connect timeout in seconds"
    )

    @field_validator("repository_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("cache_dir")
    @classmethod
    def expand_cache_dir(cls, v: Path | None) -> Path | None:
        return v.expanduser() if v is not None else None

    @field_validator("jar_sha256")
    @classmethod
    def validate_sha256(cls, v: str | None) -> str | None:
        """Ensure the digest looks like a SHA256 hex string."""
        if v is None:
            return v
        v = v.strip().lower()
        if len(v) != 64 or any(c not in "0123456789abcdef" for c in v):
            raise ValueError("jar_sha256 must be a 64 character hex digest")
        return v


def get_default_settings() -> Settings:
    """Return default settings.

    Returns:
        Settings with default values
    """
    return Settings()


def load_settings(config_path: Path) -> Settings:
    """Load settings from file or return defaults.

    Supports both snake_case (preferred) and camelCase keys.

    Args:
        config_path: Path to .source-format.json file

    Returns:
        Settings object with loaded or default values

    Raises:
        ValueError: If configuration values are invalid
    """
    if not config_path.exists():
        return get_default_settings()

    with config_path.open(encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"{config_path} must contain a JSON object")

    defaults = get_default_settings()

    settings_data = {
        "jar_version": data.get("jar_version", data.get("jarVersion", defaults.jar_version)),
        "repository_url": data.get(
            "repository_url", data.get("repositoryUrl", defaults.repository_url)
        ),
        "cache_dir": data.get("cache_dir", data.get("cacheDir", defaults.cache_dir)),
        "jar_sha256": data.get("jar_sha256", data.get("jarSha256")),
        "java_executable": data.get(
            "java_executable", data.get("javaExecutable", defaults.java_executable)
        ),
        "show_progress": data.get(
            "show_progress", data.get("showProgress", defaults.show_progress)
        ),
        "stop_after_first_check": data.get(
            "stop_after_first_check",
            data.get("stopAfterFirstCheck", defaults.stop_after_first_check),
        ),
        "connect_timeout_seconds": data.get(
            "connect_timeout_seconds",
            data.get("connectTimeoutSeconds", defaults.connect_timeout_seconds),
        ),
    }

    return Settings(**settings_data)
