"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from diet_ledger.config import Settings
from diet_ledger.containers import AppContainer
from diet_ledger.services.foods import FoodCatalogService
from diet_ledger.services.ledger import BlobStore, LedgerService, LedgerStore


@dataclass
class InMemoryBlobStore(BlobStore):
    """In-memory blob store for tests."""

    blobs: dict[str, str] = field(default_factory=dict)
    writes: list[str] = field(default_factory=list)

    def read(self, key: str) -> str | None:
        return self.blobs.get(key)

    def write(self, key: str, value: str) -> None:
        self.writes.append(key)
        self.blobs[key] = value


@dataclass
class FailingBlobStore(BlobStore):
    """Blob store whose reads and writes raise OSError."""

    def read(self, key: str) -> str | None:
        raise OSError("disk unavailable")

    def write(self, key: str, value: str) -> None:
        raise OSError("disk full")


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(data_dir=str(tmp_path / "ledger"), environment="test")


@pytest.fixture
def blob_store() -> InMemoryBlobStore:
    return InMemoryBlobStore()


@pytest.fixture
def failing_blob_store() -> FailingBlobStore:
    return FailingBlobStore()


@pytest.fixture
def ledger_service(blob_store: InMemoryBlobStore) -> LedgerService:
    return LedgerService.load(LedgerStore(blob_store))


@pytest.fixture
def container(settings: Settings, ledger_service: LedgerService) -> AppContainer:
    return AppContainer(
        settings=settings,
        ledger_service=ledger_service,
        food_catalog_service=FoodCatalogService(),
    )
