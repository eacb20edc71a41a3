from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictInt
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RecommendRequest(_CamelModel):
    bourbon_ids: list[StrictInt] = Field(..., description="Ids of the bourbons the user picked")


class DistilleryOut(_CamelModel):
    name: str
    address: str
    website: str
    amenities: list[str]
    military_discount: bool


class SimilarDistilleryOut(DistilleryOut):
    bourbon: str = Field(..., description="Bourbon whose profile represented the distillery")
    similarity_score: float = Field(..., ge=0.0, le=1.0)
    flavor_profile: dict[str, float]


class ErrorResponse(BaseModel):
    error: str
