"""Filesystem storage for uploaded files."""
import uuid
from pathlib import Path

from core.utils.logger import logger


class UploadStorage:
    """Writes uploads under a single directory using random file names."""

    def __init__(self, upload_dir: str):
        self.upload_dir = Path(upload_dir)

    def new_filename(self) -> str:
        return uuid.uuid4().hex

    def path_for(self, filename: str) -> Path:
        return self.upload_dir / filename

    def write(self, filename: str, data: bytes) -> Path:
        """Write data to the upload directory, creating it on first use."""
        self.upload_dir.mkdir(parents=True, exist_ok=True)
        path = self.path_for(filename)
        path.write_bytes(data)
        logger.debug(f"Wrote {len(data)} bytes to {path}")
        return path

    def remove(self, file_path: str) -> bool:
        """Remove a stored file; returns False when it was already gone."""
        path = Path(file_path)
        if not path.exists():
            return False
        path.unlink()
        return True
