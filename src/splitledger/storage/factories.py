"""Store factory functions."""

from typing import Optional

from splitledger.config import Settings
from splitledger.storage.base import LedgerStore
from splitledger.storage.json_file import JsonFileStore
from splitledger.storage.remote import FallbackStore, RemoteSheetStore
from splitledger.storage.sqlalchemy_store import SQLAlchemyStore


def create_sqlite_store(database_path: str) -> SQLAlchemyStore:
    """Create a SQLAlchemy store backed by a SQLite file."""
    return SQLAlchemyStore(f"sqlite:///{database_path}")


def create_store(settings: Optional[Settings] = None) -> LedgerStore:
    """Create the store selected by settings.

    Args:
        settings: Settings to use. If None, reads SPLITLEDGER_* environment
            variables.

    Returns:
        JsonFileStore, SQLAlchemyStore, or a FallbackStore wrapping the
        remote proxy with a local JSON copy

    Raises:
        ValueError: If the remote backend is selected without a URL
    """
    if settings is None:
        settings = Settings.from_env()

    path = settings.resolved_data_path()
    if settings.backend == "sqlite":
        path.parent.mkdir(parents=True, exist_ok=True)
        return create_sqlite_store(str(path))

    local = JsonFileStore(path)
    if settings.backend == "remote":
        if not settings.remote_url:
            raise ValueError(
                "Remote backend requires a URL (--remote-url or SPLITLEDGER_REMOTE_URL)"
            )
        remote = RemoteSheetStore(settings.remote_url, timeout=settings.remote_timeout)
        return FallbackStore(remote, local)

    return local
