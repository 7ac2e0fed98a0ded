"""Wire the repository registry from settings."""

from loguru import logger

from storage.config import Settings
from storage.repository import memory_repositories, set_repositories, sql_repositories


def configure_storage(settings: Settings) -> None:
    if settings.storage_backend == "memory":
        set_repositories(memory_repositories())
    elif settings.storage_backend == "sql":
        from storage.database.base import init_db
        init_db(settings.database_url)
        set_repositories(sql_repositories())
    else:
        raise ValueError(f"Unknown storage backend: {settings.storage_backend}")
    logger.info("Storage backend: {}", settings.storage_backend)
