"""Shared test fixtures."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from invoice_renamer.domain.models import ExtractionResult
from invoice_renamer.ports.extraction import ExtractionPort
from invoice_renamer.ports.storage import StoragePort


class InMemoryStorage(StoragePort):
    """Dict-backed storage for tests that should not touch disk."""

    def __init__(self, files: dict[Path, bytes] | None = None) -> None:
        self.files: dict[Path, bytes] = dict(files or {})
        self.dirs: set[Path] = set()
        self.failing: dict[Path, OSError] = {}

    def exists(self, path: Path) -> bool:
        if path in self.failing:
            raise self.failing[path]
        return path in self.files or path in self.dirs

    def ensure_dir(self, path: Path) -> None:
        self.dirs.add(path)

    def list_files(self, directory: Path) -> list[Path]:
        return [p for p in self.files if p.parent == directory]

    def read_bytes(self, path: Path) -> bytes:
        try:
            return self.files[path]
        except KeyError:
            raise FileNotFoundError(path) from None

    def write_bytes(self, path: Path, data: bytes) -> None:
        self.files[path] = data

    def move(self, src: Path, dest: Path) -> Path:
        self.files[dest] = self.files.pop(src)
        return dest


@pytest.fixture
def sample_extraction() -> ExtractionResult:
    """Sample extraction result for testing."""
    return ExtractionResult(issue_date="250615", issuer_name="Shell Polska Sp. z o.o.")


@pytest.fixture
def mock_extractor(sample_extraction: ExtractionResult) -> MagicMock:
    """Mock extraction port."""
    mock = MagicMock(spec=ExtractionPort)
    mock.extract.return_value = sample_extraction
    return mock


@pytest.fixture
def memory_storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Remove credentials from the environment and run outside any .env."""
    for name in (
        "INVOICE_RENAMER_API_KEY",
        "INVOICE_RENAMER_PROMPT_EXAMPLES",
        "ANTHROPIC_API_KEY",
        "OPENAI_API_KEY",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
