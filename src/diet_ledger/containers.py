"""Dependency container wiring for the application."""

from dataclasses import dataclass
from pathlib import Path

from diet_ledger.adapters.file_blob_store import FileBlobStore
from diet_ledger.config import Settings
from diet_ledger.services.foods import FoodCatalogService
from diet_ledger.services.ledger import LedgerService, LedgerStore


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    ledger_service: LedgerService
    food_catalog_service: FoodCatalogService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    blob_store = FileBlobStore(Path(resolved_settings.data_dir))
    ledger_service = LedgerService.load(LedgerStore(blob_store))
    return AppContainer(
        settings=resolved_settings,
        ledger_service=ledger_service,
        food_catalog_service=FoodCatalogService(),
    )
