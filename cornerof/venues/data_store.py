from __future__ import annotations

from pathlib import Path

import pandas as pd

from ..matching.models import Venue
from .config import DEFAULT_VENUE_STORE_CONFIG

_REQUIRED_COLUMNS = {"name", "neighborhood"}


class VenueStoreError(RuntimeError):
    """The venue list could not be read."""


class CsvVenueStore:
    """Admin-curated venues loaded from a CSV file on first use."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self._venues: list[Venue] | None = None

    def _load(self) -> list[Venue]:
        try:
            df = pd.read_csv(self.path, dtype=str, keep_default_na=False)
        except (OSError, ValueError) as exc:
            raise VenueStoreError(f"Could not read venues from {self.path}") from exc

        missing = _REQUIRED_COLUMNS - set(df.columns)
        if missing:
            raise VenueStoreError(f"Venue file {self.path} is missing columns: {sorted(missing)}")

        for col in df.columns:
            df[col] = df[col].str.strip()

        # Rows without an id fall back to their position in the file
        row_ids = pd.Series([f"row-{i}" for i in df.index], index=df.index, dtype=object)
        if "id" in df.columns:
            df["id"] = df["id"].where(df["id"] != "", row_ids)
        else:
            df["id"] = row_ids

        df = df[(df["name"] != "") & (df["neighborhood"] != "")]

        duplicated = sorted(set(df.loc[df["id"].duplicated(), "id"]))
        if duplicated:
            raise VenueStoreError(f"Venue file {self.path} has duplicate ids: {duplicated}")

        return [
            Venue(
                id=row["id"],
                name=row["name"],
                neighborhood=row["neighborhood"],
                description=row.get("description") or None,
                url=row.get("url") or None,
            )
            for _, row in df.iterrows()
        ]

    def list_venues(self) -> list[Venue]:
        if self._venues is None:
            self._venues = self._load()
        return list(self._venues)

    def reload(self) -> None:
        self._venues = None


class InMemoryVenueStore:
    def __init__(self, venues: list[Venue] | None = None) -> None:
        self._venues = list(venues or [])

    def list_venues(self) -> list[Venue]:
        return list(self._venues)


_default_store: CsvVenueStore | None = None


def get_venue_store() -> CsvVenueStore:
    """Return the process-wide venue store, creating it on first call."""
    global _default_store
    if _default_store is None:
        _default_store = CsvVenueStore(DEFAULT_VENUE_STORE_CONFIG.csv_path)
    return _default_store
