"""Local cache of source formatter jars downloaded from Nexus."""
import os
from contextlib import closing
from pathlib import Path
from typing import Callable, Iterator

import requests

from source_format.config import Settings
from source_format.file_utils import atomic_write_chunks, compute_file_hash
from source_format.logging_config import get_logger
from source_format.nexus import get_liferay_jar_file_url

logger = get_logger(__name__)

SOURCE_FORMATTER_ARTIFACT = "com.liferay.source.formatter.standalone"
JAR_FILE_PREFIX = "com.liferay.source.formatter"
DEFAULT_CACHE_SUBDIR = Path(".local") / "share" / "liferay"
CHUNK_SIZE = 8192


def get_cache_dir(settings: Settings) -> Path:
    """Resolve the jar cache directory.

    Args:
        settings: Runtime settings

    Returns:
        Configured cache dir, or ~/.local/share/liferay

    Raises:
        RuntimeError: If the home directory cannot be determined
    """
    if settings.cache_dir is not None:
        return settings.cache_dir

    try:
        home = Path.home()
    except RuntimeError as e:
        raise RuntimeError(f"Cannot determine home directory: {e}") from e

    return home / DEFAULT_CACHE_SUBDIR


def get_jar_file_name(version: str) -> str:
    return f"{JAR_FILE_PREFIX}-{version}.jar"


def get_jar_path(cache_dir: Path, version: str) -> Path:
    return cache_dir / get_jar_file_name(version)


def sha256_verifier(expected: str) -> Callable[[Path], None]:
    """Build a verification hook comparing a file's SHA256 digest.

    Args:
        expected: Expected hex digest

    Returns:
        Callable raising ValueError on mismatch
    """
    expected = expected.lower()

    def verify(path: Path) -> None:
        actual = compute_file_hash(path)
        if actual != expected:
            raise ValueError(
                f"Checksum mismatch for downloaded jar: expected {expected}, got {actual}"
            )

    return verify


def _iter_with_progress(
    response: requests.Response, description: str, show_progress: bool
) -> Iterator[bytes]:
    content_length = response.headers.get("Content-Length")
    total = int(content_length) if content_length and content_length.isdigit() else None

    if not show_progress:
        yield from response.iter_content(chunk_size=CHUNK_SIZE)
        return

    from rich.console import Console
    from rich.progress import (
        BarColumn,
        DownloadColumn,
        Progress,
        SpinnerColumn,
        TextColumn,
        TransferSpeedColumn,
    )

    with Progress(
        SpinnerColumn(),
        TextColumn("[bold blue]{task.description}"),
        BarColumn(bar_width=16),
        DownloadColumn(),
        TransferSpeedColumn(),
        console=Console(stderr=True),
        transient=True,
    ) as progress:
        task = progress.add_task(description, total=total)
        for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
            yield chunk
            progress.update(task, advance=len(chunk))


def download_jar(
    url: str,
    destination: Path,
    show_progress: bool = True,
    verify: Callable[[Path], None] | None = None,
    connect_timeout: float = 30.0,
) -> int:
    """Download a jar to the destination path.

    The body is streamed to a temporary file which is renamed onto the
    destination only after a complete, verified download.

    Args:
        url: Jar URL
        destination: Final jar path
        show_progress: Show a progress bar on stderr
        verify: Optional hook run on the downloaded file before it is kept
        connect_timeout: Connect timeout in seconds; reading is unbounded

    Returns:
        Number of bytes downloaded

    Raises:
        requests.RequestException: If the request cannot be sent or the connection fails
        RuntimeError: If the server does not answer 200 OK
        OSError: If the file cannot be written
    """
    logger.info(f"Downloading {url}")

    with requests.get(url, stream=True, timeout=(connect_timeout, None)) as response:
        if response.status_code != requests.codes.ok:
            raise RuntimeError(
                f"received HTTP status code: {response.status_code} {response.reason}"
            )

        with closing(
            _iter_with_progress(response, f"Installing {destination.name}", show_progress)
        ) as chunks:
            written = atomic_write_chunks(chunks, destination, verify=verify)

    logger.info(f"Saved {written} bytes to {destination}")
    return written


def ensure_jar(settings: Settings, verify: Callable[[Path], None] | None = None) -> Path:
    """Make sure the configured source formatter jar is in the local cache.

    Args:
        settings: Runtime settings
        verify: Optional verification hook for a fresh download; defaults to a
            SHA256 check when settings.jar_sha256 is set

    Returns:
        Path to the cached jar
    """
    cache_dir = get_cache_dir(settings)
    cache_dir.mkdir(mode=0o700, parents=True, exist_ok=True)

    jar_path = get_jar_path(cache_dir, settings.jar_version)
    if jar_path.exists():
        logger.info(f"Using cached {jar_path}")
        return jar_path

    if verify is None and settings.jar_sha256:
        verify = sha256_verifier(settings.jar_sha256)

    show_progress = settings.show_progress and not os.environ.get("SOURCE_FORMAT_NO_PROGRESS")

    url = get_liferay_jar_file_url(
        SOURCE_FORMATTER_ARTIFACT, settings.jar_version, settings.repository_url
    )
    download_jar(
        url,
        jar_path,
        show_progress=show_progress,
        verify=verify,
        connect_timeout=settings.connect_timeout_seconds,
    )
    return jar_path
