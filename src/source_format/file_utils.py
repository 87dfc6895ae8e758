"""File operation utilities."""
import hashlib
import os
import tempfile
from pathlib import Path
from typing import Callable, Iterable

PART_SUFFIX = ".part"


def atomic_write_chunks(
    chunks: Iterable[bytes],
    target_path: Path,
    verify: Callable[[Path], None] | None = None,
) -> int:
    """Write a byte stream atomically to prevent a corrupt target.

    Chunks are written to a uniquely named sibling ``.part`` file which
    replaces the target only once the whole stream was written and ``verify``
    (if any) accepted it. The temporary file is removed on every failure,
    including KeyboardInterrupt.

    Args:
        chunks: Byte chunks to write, in order
        target_path: Target file path
        verify: Optional callable run on the temporary file before the rename;
            it should raise to reject the file

    Returns:
        Number of bytes written

    Raises:
        OSError: If write or rename fails
    """
    fd, tmp_name = tempfile.mkstemp(
        prefix=f"{target_path.name}.", suffix=PART_SUFFIX, dir=target_path.parent
    )
    tmp_path = Path(tmp_name)
    written = 0
    done = False

    try:
        with os.fdopen(fd, "wb") as f:
            for chunk in chunks:
                if chunk:
                    f.write(chunk)
                    written += len(chunk)

        if verify is not None:
            verify(tmp_path)

        # POSIX guarantees atomicity
        tmp_path.replace(target_path)
        done = True
    finally:
        if not done:
            tmp_path.unlink(missing_ok=True)

    return written


def compute_file_hash(file_path: Path) -> str:
    """Compute SHA256 hash of file content.

    Args:
        file_path: Path to file

    Returns:
        Hex digest of file content hash
    """
    hash_obj = hashlib.sha256()
    with file_path.open("rb") as f:
        for chunk in iter(lambda: f.read(65536), b""):
            hash_obj.update(chunk)
    return hash_obj.hexdigest()
