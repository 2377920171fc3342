"""
Inference Engine: (garment_type, size_system, size) → GarmentInference.

DeterministicInferenceEngine runs the ordered rule table in
sewstudio.inference.rules and freezes the accumulator into a
GarmentInference.  It is total: unmatched garment types fall through to the
accumulator defaults ("Cotton Poplin", "Beginner", …).  Identical inputs
always yield an identical record.

The size value is carried for the record and for callers; no rule reads it.
Only the size system influences the derivation.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from sewstudio.inference.rules import GarmentTraits, apply_rules
from sewstudio.schemas.inference import GarmentInference, SizeSystem

logger = logging.getLogger("sewstudio-inference")

THREAD_RECOMMENDATION = "Polyester all-purpose thread — colour-matched"


def round_to_tenth(value: float) -> float:
    """Round half-up to one decimal place (0.85 → 0.9, not banker's rounding)."""
    return math.floor(value * 10 + 0.5) / 10


@dataclass(frozen=True)
class InferenceInput:
    """Inputs to the Inference Engine."""

    garment_type: str
    size_system: SizeSystem
    size: str


@runtime_checkable
class InferenceEngine(Protocol):
    """Protocol for Inference Engine implementations."""

    def infer(self, inference_input: InferenceInput) -> GarmentInference: ...


class DeterministicInferenceEngine:
    """
    Rule-table Inference Engine.

    No I/O and no hidden state; safe to share a single instance.
    """

    def infer(self, ii: InferenceInput) -> GarmentInference:
        """
        Derive a GarmentInference for the given garment and size.

        Parameters
        ----------
        ii:
            Garment type label, size system, and size.

        Returns
        -------
        GarmentInference
            The frozen recommendation record.
        """
        traits = GarmentTraits.from_inputs(ii.garment_type, ii.size_system)
        acc, fired = apply_rules(traits)
        logger.debug(
            "Inferred %r (%s, size %s); rules fired: %s",
            ii.garment_type,
            ii.size_system.value,
            ii.size,
            ", ".join(fired) or "none",
        )
        return GarmentInference(
            garment_type=ii.garment_type,
            fabric_type=acc.fabric_type,
            fabric_quantity_m=round_to_tenth(acc.base_m),
            needle_type=acc.needle_type,
            needle_size=acc.needle_size,
            stitch_types=tuple(acc.stitch_types),
            tension_range=acc.tension_range,
            seam_allowance_mm=acc.seam_allowance_mm,
            difficulty=acc.difficulty,
            notions=tuple(acc.notions),
            interfacing=acc.interfacing,
            thread=THREAD_RECOMMENDATION,
        )


def infer_from_garment(garment_type: str, size_system: SizeSystem, size: str) -> GarmentInference:
    """Convenience wrapper around DeterministicInferenceEngine.infer()."""
    return DeterministicInferenceEngine().infer(
        InferenceInput(garment_type=garment_type, size_system=size_system, size=size)
    )
