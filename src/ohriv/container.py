"""Dependency injection container for the evaluation core."""

from __future__ import annotations

from dependency_injector import containers, providers

from .schemas.config import AppConfig
from .scoring import FileStorage, KSAScoreStore, MemoryStorage
from .stages import StagePipeline


class OhrivContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    config = providers.Configuration()

    storage = providers.Singleton(FileStorage, path=config.storage.path)

    ksa_store = providers.Singleton(
        KSAScoreStore,
        storage=storage,
        key=config.storage.key,
    )

    stage_pipeline = providers.Factory(StagePipeline)


def create_container(*, settings: dict | None = None) -> OhrivContainer:
    """Instantiate container with defaults merged with optional overrides."""

    container = OhrivContainer()
    container.config.from_dict(AppConfig().to_settings())

    if not settings:
        return container

    container.config.override(AppConfig.model_validate(settings).to_settings())

    storage_settings = settings.get("storage", {}) if isinstance(settings, dict) else {}
    if storage_settings.get("backend") == "memory":
        container.storage.override(providers.Singleton(MemoryStorage))

    return container
