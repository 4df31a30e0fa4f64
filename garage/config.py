"""Settings for the command line UI, read from the environment."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

PROJECT_DIR = Path(__file__).parent.parent


@dataclass
class Settings:
    data_dir: Path
    backend_url: str
    catalog_file: Path

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            data_dir=Path(env.get("GARAGE_DATA_DIR") or Path.home() / ".virtual-garage"),
            backend_url=env.get("GARAGE_BACKEND_URL") or "http://localhost:3001",
            catalog_file=Path(env.get("GARAGE_CATALOG_FILE") or PROJECT_DIR / "data" / "catalog.json"),
        )
