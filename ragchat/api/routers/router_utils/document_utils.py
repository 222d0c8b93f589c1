"""
Document router utility functions.

Temporary storage and cleanup for uploaded files.

Dependencies: tempfile, shutil
System role: Document upload utilities
"""

import logging
import shutil
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

logger = logging.getLogger(__name__)

TEMP_DIR_PREFIX = "ragchat_"


def cleanup_temp_file(file_path: str) -> None:
    """
    Safely remove temporary file and its parent temp directory.

    Args:
        file_path: Path to file to remove
    """
    try:
        path = Path(file_path)
        parent_dir = path.parent

        if path.exists():
            path.unlink()
            logger.debug("Cleaned up temp file", extra={"file_path": file_path})

        # Only directories created by temporary_upload are removed
        if parent_dir.exists() and parent_dir.name.startswith(TEMP_DIR_PREFIX):
            shutil.rmtree(parent_dir, ignore_errors=True)
            logger.debug("Cleaned up temp directory", extra={"temp_dir": str(parent_dir)})

    except Exception as e:
        logger.warning(
            "Failed to cleanup temp file",
            extra={"file_path": file_path, "error": str(e)},
        )


@contextmanager
def temporary_upload(content: bytes, filename: str | None = None) -> Iterator[str]:
    """
    Write upload bytes to a private temp directory for the duration of the block.

    The file and its directory are removed on exit, whether or not the block
    raised.

    Yields:
        str: Path of the written file
    """
    temp_dir = tempfile.mkdtemp(prefix=TEMP_DIR_PREFIX)
    safe_name = Path(filename).name if filename else "upload.pdf"
    file_path = str(Path(temp_dir) / safe_name)
    try:
        with open(file_path, "wb") as f:
            f.write(content)
        yield file_path
    finally:
        cleanup_temp_file(file_path)
