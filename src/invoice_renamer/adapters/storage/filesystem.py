"""Storage adapter using local filesystem."""

import logging
import os
import shutil
from pathlib import Path

from ...ports.storage import StoragePort

logger = logging.getLogger(__name__)


class FilesystemAdapter(StoragePort):
    """Storage implementation using local filesystem."""

    def exists(self, path: Path) -> bool:
        try:
            os.stat(path)
        except FileNotFoundError:
            return False
        return True

    def ensure_dir(self, path: Path) -> None:
        path.mkdir(parents=True, exist_ok=True)

    def list_files(self, directory: Path) -> list[Path]:
        files = []
        with os.scandir(directory) as entries:
            for entry in entries:
                if entry.is_file(follow_symlinks=False):
                    files.append(Path(entry.path))
        return files

    def read_bytes(self, path: Path) -> bytes:
        return path.read_bytes()

    def write_bytes(self, path: Path, data: bytes) -> None:
        path.write_bytes(data)
        logger.debug(f"Wrote {len(data)} bytes: {path.name}")

    def move(self, src: Path, dest: Path) -> Path:
        """Move file, falling back to copy+delete across devices."""
        shutil.move(str(src), dest)
        logger.debug(f"Moved: {src.name} -> {dest}")
        return dest
