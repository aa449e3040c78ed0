"""
File store for generated resume PDFs.
"""

import logging
import time
import uuid
from pathlib import Path
from typing import Union

from .exceptions import ArtifactNotFoundError

logger = logging.getLogger(__name__)


class ArtifactStore:
    """Writes PDFs under unique names and looks them up by exact name."""

    def __init__(self, directory: Union[str, Path] = "resumes"):
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)

    def _new_name(self) -> str:
        return f"{int(time.time() * 1000)}_{uuid.uuid4()}.pdf"

    def save(self, data: bytes) -> str:
        """Store the bytes and return the generated file name."""
        file_name = self._new_name()
        (self.directory / file_name).write_bytes(data)
        logger.info(f"Stored resume {file_name} ({len(data)} bytes)")
        return file_name

    def path_for(self, file_name: str) -> Path:
        """Path of a stored file. Raises ArtifactNotFoundError for unknown names."""
        if not file_name or "/" in file_name or "\\" in file_name or ".." in file_name:
            raise ArtifactNotFoundError(file_name)

        path = self.directory / file_name
        if not path.is_file():
            raise ArtifactNotFoundError(file_name)
        return path
