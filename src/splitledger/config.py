"""Runtime settings read from the environment."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

BACKENDS = ("json", "sqlite", "remote")

DEFAULT_DIR = Path.home() / ".splitledger"


@dataclass(frozen=True)
class Settings:
    """Which store to use and where it keeps its data."""

    backend: str = "json"
    data_path: Optional[Path] = None
    remote_url: Optional[str] = None
    remote_timeout: float = 10.0

    @classmethod
    def from_env(
        cls,
        backend: Optional[str] = None,
        data_path: Optional[str] = None,
        remote_url: Optional[str] = None,
        remote_timeout: Optional[float] = None,
    ) -> "Settings":
        """Build settings from arguments, falling back to SPLITLEDGER_* variables.

        Raises:
            ValueError: If the backend is unknown or the timeout is not a number
        """
        backend = (backend or os.environ.get("SPLITLEDGER_BACKEND") or "json").strip().lower()
        if backend not in BACKENDS:
            raise ValueError(f"Unknown backend '{backend}'. Supported backends: {', '.join(BACKENDS)}")

        if data_path is None:
            data_path = os.environ.get("SPLITLEDGER_DATA_PATH")
        if remote_url is None:
            remote_url = os.environ.get("SPLITLEDGER_REMOTE_URL")
        if remote_timeout is None:
            raw_timeout = os.environ.get("SPLITLEDGER_REMOTE_TIMEOUT")
            try:
                remote_timeout = float(raw_timeout) if raw_timeout else 10.0
            except ValueError:
                raise ValueError(f"SPLITLEDGER_REMOTE_TIMEOUT must be a number, got '{raw_timeout}'") from None

        return cls(
            backend=backend,
            data_path=Path(data_path).expanduser() if data_path else None,
            remote_url=remote_url or None,
            remote_timeout=remote_timeout,
        )

    def resolved_data_path(self) -> Path:
        """Data file path, defaulting to ~/.splitledger/ledger.json (or .db for sqlite)."""
        if self.data_path is not None:
            return self.data_path
        suffix = ".db" if self.backend == "sqlite" else ".json"
        return DEFAULT_DIR / f"ledger{suffix}"
