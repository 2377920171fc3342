"""
Construction step templates for the InstructionWriter.

render_step converts a step key and a GarmentInference into an
InstructionStep.  Stitches are read through the GarmentInference accessors
(main_stitch, finish_stitch, hem_stitch), which follow the positional order
of stitch_types.
"""

from __future__ import annotations

from enum import Enum

from sewstudio.schemas.inference import GarmentInference, InstructionStep


class StepKey(str, Enum):
    PREPARE_FABRIC = "prepare_fabric"
    PRINT_PATTERN = "print_pattern"
    CUT_PIECES = "cut_pieces"
    APPLY_INTERFACING = "apply_interfacing"
    SEW_MAIN_SEAMS = "sew_main_seams"
    INSERT_CLOSURE = "insert_closure"
    FINISH_SEAMS = "finish_seams"
    HEM_DETAILS = "hem_details"
    FINAL_PRESS = "final_press"


def render_step(key: StepKey, inf: GarmentInference) -> InstructionStep:
    """Render one construction step for *inf*."""
    match key:
        case StepKey.PREPARE_FABRIC:
            return InstructionStep(
                step="Prepare your fabric",
                detail=(
                    f"Pre-wash and press {inf.fabric_type}. "
                    "Fold fabric with selvedges together, right sides facing."
                ),
            )
        case StepKey.PRINT_PATTERN:
            return InstructionStep(
                step="Print and assemble pattern",
                detail=(
                    "Print all pages at 100% scale. Verify the 5cm calibration square. "
                    "Tape pages together matching labels (1A→1B, etc)."
                ),
            )
        case StepKey.CUT_PIECES:
            return InstructionStep(
                step="Cut pattern pieces",
                detail=(
                    "Pin pattern to fabric, aligning grainline arrows with selvedge. "
                    f"Cut with {inf.seam_allowance_mm}mm seam allowance included. "
                    "Transfer all notch marks."
                ),
            )
        case StepKey.APPLY_INTERFACING:
            return InstructionStep(
                step="Apply interfacing",
                detail=(
                    f"{inf.interfacing}. "
                    "Fuse with iron on medium heat, pressing for 10–15 seconds per section."
                ),
            )
        case StepKey.SEW_MAIN_SEAMS:
            return InstructionStep(
                step="Sew main seams",
                detail=(
                    f"Using {inf.main_stitch} at tension {inf.tension_range}, "
                    "join main body pieces. Match notches for alignment. "
                    f"Use {inf.needle_type} needle ({inf.needle_size})."
                ),
            )
        case StepKey.INSERT_CLOSURE:
            return InstructionStep(
                step="Insert closure",
                detail=(
                    "Install zipper using a zipper foot. "
                    "For invisible zippers, sew close to the coil with teeth unfolded."
                ),
            )
        case StepKey.FINISH_SEAMS:
            return InstructionStep(
                step="Finish seams",
                detail=(
                    f"Finish raw edges with {inf.finish_stitch} or serger. "
                    "Press seams open or to one side as directed."
                ),
            )
        case StepKey.HEM_DETAILS:
            return InstructionStep(
                step="Hem and final details",
                detail=(
                    f"Fold and press hem. Stitch using {inf.hem_stitch}. "
                    "Attach any buttons, snaps, or hardware."
                ),
            )
        case StepKey.FINAL_PRESS:
            return InstructionStep(
                step="Final pressing and fitting",
                detail=(
                    "Give the finished garment a thorough press. "
                    "Try on and make any final adjustments to fit."
                ),
            )
    raise KeyError(f"Unknown step key: {key!r}")
