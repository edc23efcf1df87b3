from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


def _path_from_env(name: str) -> Path | None:
    raw = os.getenv(name, "").strip()
    return Path(raw) if raw else None


@dataclass(frozen=True)
class CafeConfig:
    """
    Where the café registry comes from.

    ``data_path`` points at a CSV with ``city`` and ``name`` columns. When it
    is unset the built-in dataset is served.
    """

    data_path: Path | None = _path_from_env("CAFE_DATA_PATH")


DEFAULT_CAFE_CONFIG = CafeConfig()
