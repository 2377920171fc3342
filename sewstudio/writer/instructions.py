"""
Construction instruction generation.

generate_instructions() walks a curated construction sequence:

  prepare fabric → print/assemble pattern → cut → [apply interfacing]
  → sew main seams → [insert closure] → finish seams → hem → final press

Bracketed steps are included only when the garment type contains one of
their keywords (case-insensitive).  The order is fixed by the sequence
table, never sorted.
"""

from __future__ import annotations

from sewstudio.schemas.inference import GarmentInference, InstructionStep
from sewstudio.writer.templates import StepKey, render_step

# (step, keywords); keywords None means the step is always emitted.
_SEQUENCE: tuple[tuple[StepKey, tuple[str, ...] | None], ...] = (
    (StepKey.PREPARE_FABRIC, None),
    (StepKey.PRINT_PATTERN, None),
    (StepKey.CUT_PIECES, None),
    (StepKey.APPLY_INTERFACING, ("dress", "blouse", "jacket")),
    (StepKey.SEW_MAIN_SEAMS, None),
    (StepKey.INSERT_CLOSURE, ("dress", "skirt", "pants")),
    (StepKey.FINISH_SEAMS, None),
    (StepKey.HEM_DETAILS, None),
    (StepKey.FINAL_PRESS, None),
)


def step_keys_for(garment_type: str) -> tuple[StepKey, ...]:
    """Return the ordered step keys that apply to *garment_type*."""
    gt = garment_type.lower()
    return tuple(
        key
        for key, keywords in _SEQUENCE
        if keywords is None or any(k in gt for k in keywords)
    )


def generate_instructions(inference: GarmentInference) -> tuple[InstructionStep, ...]:
    """Return the ordered construction steps for *inference*."""
    return tuple(render_step(key, inference) for key in step_keys_for(inference.garment_type))
