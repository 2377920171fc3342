"""
Request and response bodies for the studio service.

Request fields are all optional at the model level so that a missing
size_system/size can be answered with its own message instead of a generic
validation error.  Numeric JSON values are accepted for string fields
(``"size": 12``).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from sewstudio.schemas.inference import GarmentInference


class InferenceRequest(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    description: str | None = None
    size_system: str | None = None
    size: str | None = None
    garment_type_override: str | None = None


class Recommendation(BaseModel):
    """GarmentInference as JSON, with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    garment_type: str
    fabric_type: str
    fabric_quantity_m: float
    needle_type: str
    needle_size: str
    stitch_types: list[str]
    tension_range: str
    seam_allowance_mm: int
    difficulty: str
    notions: list[str]
    interfacing: str
    thread: str

    @classmethod
    def from_inference(cls, inference: GarmentInference) -> Recommendation:
        return cls(
            garment_type=inference.garment_type,
            fabric_type=inference.fabric_type,
            fabric_quantity_m=inference.fabric_quantity_m,
            needle_type=inference.needle_type,
            needle_size=inference.needle_size,
            stitch_types=list(inference.stitch_types),
            tension_range=inference.tension_range,
            seam_allowance_mm=inference.seam_allowance_mm,
            difficulty=inference.difficulty.value,
            notions=list(inference.notions),
            interfacing=inference.interfacing,
            thread=inference.thread,
        )


class GenerateResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    project_id: str
    garment_type: str
    recommendations: Recommendation
    pdf_pack_url: str | None = None
