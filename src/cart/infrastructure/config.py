"""Runtime settings for the CLI and the persistence layer."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

# <repo>/data for a source checkout or an editable install.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"
DEFAULT_LOG_LEVEL = "WARNING"
DATA_FILE_NAME = "cart.json"


@dataclass(frozen=True)
class Settings:

    data_dir: Path = DEFAULT_DATA_DIR
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def data_file(self) -> Path:
        return self.data_dir / DATA_FILE_NAME
