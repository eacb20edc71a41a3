from __future__ import annotations

from pathlib import Path
from typing import Callable

import pandas as pd
import pytest

from distillery_backend.catalog.builder import build_catalog
from distillery_backend.catalog.config import SOURCE_COLUMNS
from distillery_backend.catalog.models import Catalog

# The real data file starts with its own column labels, read as row 1.
HEADER_ROW = {col: col for col in SOURCE_COLUMNS}


def _row(bourbon: str, distillery: str, **fields: object) -> dict[str, object]:
    """Source row with all flavors at 0 and the given overrides.

    Keyword names use underscores for spaces, e.g. ``Charred_Oak=4``.
    """
    row: dict[str, object] = {col: "" for col in SOURCE_COLUMNS}
    row.update({"Bourbon": bourbon, "Distillery": distillery})
    for key, value in fields.items():
        row[key.replace("_", " ")] = value
    return row


@pytest.fixture
def make_row() -> Callable[..., dict[str, object]]:
    return _row


@pytest.fixture
def make_catalog() -> Callable[[list[dict[str, object]]], Catalog]:
    def _make(rows: list[dict[str, object]]) -> Catalog:
        return build_catalog(pd.DataFrame([HEADER_ROW, *rows], columns=SOURCE_COLUMNS))

    return _make


@pytest.fixture
def sample_rows() -> list[dict[str, object]]:
    """Rows for ids 2..9 (id 1 is the header row)."""
    return [
        _row("Angel's Envy", "Angel's Envy", Peaty=4, Woody=5, Citrus=1,
             Adress="500 E Main St\nLouisville, KY 40202",
             Amenitie1="Tours", Amenitie3="Gift Shop",
             ExtraInfo="Military Discount on tours",
             WebsiteLink=" https://www.angelsenvy.com "),
        _row("Old Forester 1920", "Old Forester", Citrus=3, Spicy=4),
        _row("Rabbit Hole Cavehill", "Rabbit Hole", Peaty=3, Citrus=4, Floral=5),
        _row("Angel's Envy Cask Strength", "Angel's Envy", Grassy=5),
        _row("", "Copper & Kings", Woody=3),
        _row("Mystery Barrel", "", Peaty=9),
        _row("Michter's US*1", "Michter's", Cereal=1),
        _row("Peat and Citrus", "Limestone Branch", Peaty=3, Citrus=3),
    ]


@pytest.fixture
def catalog(make_catalog, sample_rows) -> Catalog:
    return make_catalog(sample_rows)


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[[list[dict[str, object]]], Path]:
    def _write(rows: list[dict[str, object]], name: str = "bourbons.csv") -> Path:
        path = tmp_path / name
        frame = pd.DataFrame([HEADER_ROW, *rows], columns=SOURCE_COLUMNS).fillna("")
        frame.to_csv(path, header=False, index=False)
        return path

    return _write
