from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

_SAMPLE_CSV = Path(__file__).resolve().parent.parent / "data" / "venues.csv"


@dataclass(frozen=True)
class VenueStoreConfig:
    csv_path: Path = Path(os.getenv("VENUES_CSV", str(_SAMPLE_CSV)))


DEFAULT_VENUE_STORE_CONFIG = VenueStoreConfig()
