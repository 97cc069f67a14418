"""Atomic file writing for exported rankings.

Writes go to a temporary sibling file which is then renamed over the
target, so readers never see a partially written file.
"""

import hashlib
from pathlib import Path

import structlog
from pydantic import BaseModel, ConfigDict, Field

from pairrank.constants import COMPONENT_WRITER


logger = structlog.get_logger()


class GeneratedFile(BaseModel):
    """Information about a written file.

    Attributes:
        path: Path relative to the writer's base directory.
        absolute_path: Absolute path of the file.
        bytes_written: Size of the content in bytes.
        sha256: SHA-256 of the content.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    path: str
    absolute_path: str
    bytes_written: int = Field(ge=0)
    sha256: str


class AtomicWriter:
    """Provides atomic file writing operations."""

    def __init__(self, base_dir: Path, session_id: str | None = None) -> None:
        """Initialize the atomic writer.

        Args:
            base_dir: Base directory for relative path calculation.
            session_id: Optional session ID for logging context.
        """
        self._base_dir = base_dir
        self._log = logger.bind(component=COMPONENT_WRITER)
        if session_id:
            self._log = self._log.bind(session_id=session_id)

    def write(self, path: Path, content: str) -> GeneratedFile:
        """Write content to file with atomic semantics.

        Args:
            path: Target file path.
            content: Content to write (encoded as UTF-8).

        Returns:
            GeneratedFile with path, checksum, and size information.
        """
        content_bytes = content.encode("utf-8")
        sha256 = hashlib.sha256(content_bytes).hexdigest()

        path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            temp_path.write_bytes(content_bytes)
            temp_path.replace(path)
        except OSError:
            temp_path.unlink(missing_ok=True)
            raise

        try:
            relative_path = str(path.relative_to(self._base_dir))
        except ValueError:
            relative_path = str(path)

        self._log.debug(
            "file_written",
            path=relative_path,
            bytes=len(content_bytes),
            sha256=sha256[:12],
        )

        return GeneratedFile(
            path=relative_path,
            absolute_path=str(path.resolve()),
            bytes_written=len(content_bytes),
            sha256=sha256,
        )
