"""Storage port - interface for file storage."""

from abc import ABC, abstractmethod
from pathlib import Path


class StoragePort(ABC):
    """Interface for the file operations the pipeline needs."""

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Check whether path exists.

        Only "not found" yields False; other errors propagate.
        """
        pass

    @abstractmethod
    def ensure_dir(self, path: Path) -> None:
        """Create directory (and parents) if missing."""
        pass

    @abstractmethod
    def list_files(self, directory: Path) -> list[Path]:
        """Return regular files directly inside directory."""
        pass

    @abstractmethod
    def read_bytes(self, path: Path) -> bytes:
        pass

    @abstractmethod
    def write_bytes(self, path: Path, data: bytes) -> None:
        pass

    @abstractmethod
    def move(self, src: Path, dest: Path) -> Path:
        """Move src to dest.

        Returns path to moved file.
        """
        pass
