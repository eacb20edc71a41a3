from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from .config import FLAVOR_ATTRIBUTES, TAG_THRESHOLD


class DistilleryInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = ""
    address: str = ""
    website: str = ""
    amenities: tuple[str, ...] = ()
    military_discount: bool = False


class BourbonRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., ge=1, description="1-based position in the source table")
    name: str = ""
    flavor_profile: Mapping[str, float]
    distillery: DistilleryInfo
    has_military_discount: bool = False

    @field_validator("flavor_profile", mode="after")
    @classmethod
    def freeze_profile(cls, value: Mapping[str, float]) -> Mapping[str, float]:
        # Read-only: tags and the catalog flavor matrix are derived from it
        return MappingProxyType(dict(value))

    @field_serializer("flavor_profile")
    def dump_profile(self, value: Mapping[str, float]) -> dict[str, float]:
        return dict(value)

    @property
    def tags(self) -> tuple[str, ...]:
        """Flavor attributes at or above the tag threshold, in attribute order."""
        return tuple(
            attr
            for attr in FLAVOR_ATTRIBUTES
            if self.flavor_profile.get(attr, 0.0) >= TAG_THRESHOLD
        )


class Catalog:
    """Read-only set of bourbon records built once at startup.

    ``flavor_matrix`` holds one row per record (same order as ``records``)
    and one column per entry of ``FLAVOR_ATTRIBUTES``.
    """

    def __init__(self, records: Iterable[BourbonRecord]) -> None:
        self._records: tuple[BourbonRecord, ...] = tuple(records)
        self._by_id: dict[int, BourbonRecord] = {r.id: r for r in self._records}
        if len(self._by_id) != len(self._records):
            raise ValueError("Bourbon ids must be unique within a catalog")

        matrix = np.array(
            [[r.flavor_profile[attr] for attr in FLAVOR_ATTRIBUTES] for r in self._records],
            dtype=float,
        ).reshape(len(self._records), len(FLAVOR_ATTRIBUTES))
        matrix.setflags(write=False)
        self._flavor_matrix = matrix

    @property
    def records(self) -> tuple[BourbonRecord, ...]:
        return self._records

    @property
    def flavor_matrix(self) -> np.ndarray:
        return self._flavor_matrix

    def get(self, bourbon_id: int) -> BourbonRecord | None:
        return self._by_id.get(bourbon_id)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[BourbonRecord]:
        return iter(self._records)
