"""
Runtime settings read from the environment.

Call load_env() before Settings.from_env() so values from a .env file are visible.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


_STORE_KINDS = {"sql", "memory"}


@dataclass(frozen=True)
class Settings:
    """Where invoices are kept and how the app logs."""
    data_dir: Path
    db_url: str
    store_kind: str = "sql"
    debug: bool = False

    @property
    def log_dir(self) -> Path:
        return self.data_dir / "logs"

    @classmethod
    def from_env(cls) -> "Settings":
        data_dir = Path(os.getenv("INVOICE_BUILDER_DATA_DIR", "./data"))
        db_url = os.getenv("INVOICE_BUILDER_DB_URL", "").strip()
        if not db_url:
            db_url = f"sqlite:///{data_dir / 'invoices.db'}"
        store_kind = os.getenv("INVOICE_BUILDER_STORE", "sql").strip().lower() or "sql"
        if store_kind not in _STORE_KINDS:
            raise ValueError(f"Unknown INVOICE_BUILDER_STORE '{store_kind}'")
        return cls(
            data_dir=data_dir,
            db_url=db_url,
            store_kind=store_kind,
            debug=os.getenv("IB_DEBUG") == "1",
        )
