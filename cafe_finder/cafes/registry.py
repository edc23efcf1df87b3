from __future__ import annotations

from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Mapping

import pandas as pd

SEPARATOR = ","

CSV_COLUMNS = ["city", "name"]

DEFAULT_CAFES: dict[str, list[str]] = {
    "moscow": [
        "Мир кофе",
        "Сладкоежка",
        "Кофе и завтраки",
        "Сытый студент",
        "Ложка и вилка",
    ],
    "tula": [
        "Тульский пряник",
        "Самовар",
        "Оружейная кофейня",
    ],
}


class CityRegistry:
    """Read-only mapping of city key -> ordered tuple of café names.

    City keys are matched exactly (case-sensitive). Both the city order and
    the café order of the source mapping are kept.
    """

    def __init__(self, cafes_by_city: Mapping[str, Iterable[str]]) -> None:
        frozen: dict[str, tuple[str, ...]] = {}
        for city, cafes in cafes_by_city.items():
            if not city:
                raise ValueError("city key must not be empty")
            names = tuple(cafes)
            for name in names:
                if SEPARATOR in name:
                    raise ValueError(
                        f"cafe name {name!r} in {city!r} contains the separator {SEPARATOR!r}"
                    )
            frozen[city] = names
        self._cafes = MappingProxyType(frozen)

    def lookup(self, city: str) -> tuple[str, ...] | None:
        """Return the city's cafés, or ``None`` if the city is unknown."""
        return self._cafes.get(city)

    def cities(self) -> list[str]:
        return list(self._cafes)

    def __contains__(self, city: object) -> bool:
        return city in self._cafes

    def __len__(self) -> int:
        return len(self._cafes)

    def __repr__(self) -> str:
        return f"CityRegistry(cities={self.cities()!r})"


def load_registry_csv(path: Path) -> CityRegistry:
    """Build a registry from a ``city,name`` CSV, one café per row.

    Rows keep their file order within each city; cities appear in the order
    of their first row.
    """
    df = pd.read_csv(path, dtype=str, keep_default_na=False)

    missing = [c for c in CSV_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"{path}: missing column(s) {', '.join(missing)}")

    df["city"] = df["city"].str.strip()
    df["name"] = df["name"].str.strip()
    df = df[(df["city"] != "") & (df["name"] != "")]

    grouped = df.groupby("city", sort=False)["name"].apply(list)
    return CityRegistry(grouped.to_dict())


def default_registry() -> CityRegistry:
    return CityRegistry(DEFAULT_CAFES)
