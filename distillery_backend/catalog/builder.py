from __future__ import annotations

import logging
import re

import numpy as np
import pandas as pd

from .config import (
    AMENITY_COLUMNS,
    FLAVOR_ATTRIBUTES,
    MILITARY_DISCOUNT_MARKER,
    SOURCE_COLUMNS,
)
from .models import BourbonRecord, Catalog, DistilleryInfo

logger = logging.getLogger(__name__)

_NEWLINES = re.compile(r"\r?\n")


def coerce_intensity(values: pd.Series) -> pd.Series:
    """
    Parse flavor intensities as decimals, defaulting to 0.

    Blank, non-numeric and non-finite cells all become 0.0; negative
    numbers are kept as parsed. This is the only place raw flavor text
    is turned into numbers.
    """
    numeric = pd.to_numeric(values.astype(str).str.strip(), errors="coerce").astype(float)
    return numeric.where(np.isfinite(numeric), 0.0)


def _normalize_address(raw: str) -> str:
    return _NEWLINES.sub(", ", raw).strip()


def _collect_amenities(row: dict[str, str]) -> tuple[str, ...]:
    cleaned = (row.get(col, "").strip() for col in AMENITY_COLUMNS)
    return tuple(a for a in cleaned if a)


def _has_military_discount(extra_info: str) -> bool:
    return MILITARY_DISCOUNT_MARKER in extra_info.lower()


def build_catalog(table: pd.DataFrame) -> Catalog:
    """
    Turn the raw source table into an immutable Catalog.

    Rows are processed in table order and each one becomes a record whose
    id is its 1-based position. Columns missing from ``table`` are treated
    as blank.
    """
    text = table.reindex(columns=SOURCE_COLUMNS).fillna("").astype(str)
    flavors = pd.DataFrame(
        {attr: coerce_intensity(text[attr]) for attr in FLAVOR_ATTRIBUTES},
        index=text.index,
    )

    records: list[BourbonRecord] = []
    rows = zip(text.to_dict("records"), flavors.to_dict("records"))
    for position, (row, profile) in enumerate(rows, start=1):
        discount = _has_military_discount(row["ExtraInfo"])
        distillery = DistilleryInfo(
            name=row["Distillery"].strip(),
            address=_normalize_address(row["Adress"]),
            website=row["WebsiteLink"].strip(),
            amenities=_collect_amenities(row),
            military_discount=discount,
        )
        records.append(BourbonRecord(
            id=position,
            name=row["Bourbon"].strip(),
            flavor_profile={attr: float(profile[attr]) for attr in FLAVOR_ATTRIBUTES},
            distillery=distillery,
            has_military_discount=discount,
        ))

    catalog = Catalog(records)
    distilleries = {r.distillery.name for r in catalog if r.distillery.name}
    logger.info(
        "Built catalog with %d bourbons across %d distilleries",
        len(catalog),
        len(distilleries),
    )
    return catalog
