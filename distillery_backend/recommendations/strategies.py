"""
Distillery scoring strategies.

Two historical variants of the recommender ranked distilleries in
materially different ways, and neither was retired. Both are kept behind
the same ``Recommender`` interface and the active one is chosen by
configuration:

* ``tag_overlap`` counts how many of the selection's flavor tags a
  distillery's representative bourbon shares. Every distillery with at
  least one shared tag is returned.
* ``flavor_similarity`` averages the selection's flavor profiles and ranks
  distilleries by ``1 / (1 + rms_distance)`` to that average. Only the top
  few are returned.

A distillery is represented by the first bourbon (in catalog order) that
carries its name; bourbons without a distillery name are never ranked.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from enum import Enum
from typing import Any

import numpy as np

from ..catalog.config import FLAVOR_ATTRIBUTES, HEADER_ROW_ID
from ..catalog.models import BourbonRecord, Catalog
from .errors import InvalidInputError
from .models import DistilleryOut, SimilarDistilleryOut

logger = logging.getLogger(__name__)

DEFAULT_SIMILARITY_TOP_N = 4


class StrategyName(str, Enum):
    tag_overlap = "tag_overlap"
    flavor_similarity = "flavor_similarity"


def validate_bourbon_ids(value: Any) -> list[int]:
    """Return ``value`` as a list of ints, or raise ``InvalidInputError``."""
    if not isinstance(value, (list, tuple)):
        raise InvalidInputError()
    for item in value:
        # bool is an int subclass but never a valid id
        if isinstance(item, bool) or not isinstance(item, int):
            raise InvalidInputError()
    return list(value)


def _representatives(
    indexed_records: Iterable[tuple[int, BourbonRecord]],
) -> list[tuple[int, BourbonRecord]]:
    """First-seen record per distillery name, in encounter order."""
    seen: set[str] = set()
    reps: list[tuple[int, BourbonRecord]] = []
    for idx, record in indexed_records:
        name = record.distillery.name
        if not name or name in seen:
            continue
        seen.add(name)
        reps.append((idx, record))
    return reps


def _distillery_out(record: BourbonRecord) -> DistilleryOut:
    info = record.distillery
    return DistilleryOut(
        name=info.name,
        address=info.address,
        website=info.website,
        amenities=list(info.amenities),
        military_discount=info.military_discount,
    )


class Recommender(ABC):
    """Ranks distilleries for a selection of bourbon ids."""

    name: StrategyName

    def __init__(self, catalog: Catalog) -> None:
        self.catalog = catalog

    @abstractmethod
    def recommend(self, bourbon_ids: Sequence[int]) -> list[DistilleryOut]:
        ...


class TagOverlapRecommender(Recommender):
    name = StrategyName.tag_overlap

    def match_scores(self, bourbon_ids: Sequence[int]) -> list[tuple[int, BourbonRecord]]:
        """(match score, representative) pairs with score > 0, best first."""
        requested = set(validate_bourbon_ids(bourbon_ids))

        selected_tags: set[str] = set()
        for bourbon_id in requested:
            record = self.catalog.get(bourbon_id)
            if record is not None:
                selected_tags.update(record.tags)
        logger.info("Selected tag union: %s", sorted(selected_tags))

        scored: list[tuple[int, BourbonRecord]] = []
        for _, rep in _representatives(enumerate(self.catalog.records)):
            score = len(selected_tags.intersection(rep.tags))
            if score > 0:
                scored.append((score, rep))

        # list.sort is stable, so ties keep catalog order
        scored.sort(key=lambda item: item[0], reverse=True)
        return scored

    def recommend(self, bourbon_ids: Sequence[int]) -> list[DistilleryOut]:
        scored = self.match_scores(bourbon_ids)
        logger.info("%d distilleries share at least one tag", len(scored))
        return [_distillery_out(rep) for _, rep in scored]


class FlavorSimilarityRecommender(Recommender):
    name = StrategyName.flavor_similarity

    def __init__(self, catalog: Catalog, top_n: int = DEFAULT_SIMILARITY_TOP_N) -> None:
        super().__init__(catalog)
        if top_n < 1:
            raise ValueError("top_n must be at least 1")
        self.top_n = top_n

    def average_profile(self, bourbon_ids: Sequence[int]) -> np.ndarray:
        """Mean flavor vector of the usable selected bourbons (zeros if none)."""
        requested = set(validate_bourbon_ids(bourbon_ids))
        selected = [
            idx
            for idx, record in enumerate(self.catalog.records)
            if record.id in requested and record.id != HEADER_ROW_ID and record.name
        ]

        for idx in selected:
            record = self.catalog.records[idx]
            logger.info("Selected bourbon %r flavor profile: %s", record.name, dict(record.flavor_profile))

        if not selected:
            return np.zeros(len(FLAVOR_ATTRIBUTES))
        return self.catalog.flavor_matrix[selected].mean(axis=0)

    def recommend(self, bourbon_ids: Sequence[int]) -> list[SimilarDistilleryOut]:
        requested = set(validate_bourbon_ids(bourbon_ids))
        average = self.average_profile(bourbon_ids)
        logger.info(
            "Average flavor profile: %s",
            {attr: round(float(v), 4) for attr, v in zip(FLAVOR_ATTRIBUTES, average)},
        )

        candidates = _representatives(
            (idx, record)
            for idx, record in enumerate(self.catalog.records)
            if record.id not in requested and record.id != HEADER_ROW_ID
        )
        if not candidates:
            return []

        rows = [idx for idx, _ in candidates]
        diffs = self.catalog.flavor_matrix[rows] - average
        distances = np.sqrt(np.mean(diffs ** 2, axis=1))
        scores = 1.0 / (1.0 + distances)

        order = np.argsort(-scores, kind="stable")[: self.top_n]

        results: list[SimilarDistilleryOut] = []
        for pos in order:
            rep = candidates[pos][1]
            score = float(scores[pos])
            logger.info(
                "Recommended distillery %r (bourbon %r) similarity %.4f",
                rep.distillery.name,
                rep.name,
                score,
            )
            info = rep.distillery
            results.append(SimilarDistilleryOut(
                name=info.name,
                bourbon=rep.name,
                address=info.address,
                website=info.website,
                amenities=list(info.amenities),
                military_discount=info.military_discount,
                similarity_score=score,
                flavor_profile=dict(rep.flavor_profile),
            ))
        return results


def build_recommender(
    catalog: Catalog,
    strategy: str | StrategyName = StrategyName.flavor_similarity,
    similarity_top_n: int = DEFAULT_SIMILARITY_TOP_N,
) -> Recommender:
    """Return the recommender for the configured strategy name."""
    try:
        name = StrategyName(strategy)
    except ValueError:
        choices = ", ".join(s.value for s in StrategyName)
        raise ValueError(f"Unknown recommender strategy {strategy!r} (expected one of: {choices})") from None

    if name is StrategyName.tag_overlap:
        return TagOverlapRecommender(catalog)
    return FlavorSimilarityRecommender(catalog, top_n=similarity_top_n)
