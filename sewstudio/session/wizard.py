"""
Wizard steps for the configurable-parameters workflow, plus the studio screen.

  1. create_project()    — title, category, size, garment, notes → Project
  2. apply_parameters()  — stretch, seam allowance, markings → Project + PrintGuide
  3. require_output()    — the Project and PrintGuide to render, or an
                           empty-state error prompting a restart

Each step takes the SessionState explicitly.  Validation failures raise a
WizardError subclass whose message is shown to the user as-is.
"""

from __future__ import annotations

import dataclasses
import logging
import uuid

from sewstudio.catalog import get_catalog
from sewstudio.compositor import (
    CompositorOutput,
    GuideInput,
    PackInput,
    PatternPackCompositor,
    PrintGuideCompositor,
)
from sewstudio.inference import infer_from_garment, infer_type
from sewstudio.schemas.inference import GarmentInference, SizeSystem
from sewstudio.schemas.project import Category, PrintGuide, Project
from sewstudio.session.state import (
    InvalidFieldError,
    MissingFieldError,
    MissingSessionStateError,
    SessionState,
)
from sewstudio.writer import generate_instructions, generate_print_guide

logger = logging.getLogger("sewstudio-session")

MISSING_FIELDS_MESSAGE = "Please fill in all required fields."
NO_PROJECT_MESSAGE = "No project found. Please start from the beginning."
NO_OUTPUT_MESSAGE = "No generated pattern found."

TITLE_MAX_LENGTH = 100
NOTES_MAX_LENGTH = 500
SIZE_RANGE = (1, 200)
STRETCH_RANGE_PCT = (0, 100)
SEAM_ALLOWANCE_RANGE_MM = (3, 30)


def _check_range(field: str, value: float, bounds: tuple[float, float], unit: str = "") -> None:
    low, high = bounds
    if not low <= value <= high:
        raise InvalidFieldError(field, f"{field} must be between {low}{unit} and {high}{unit}.")


def _parse_number(field: str, raw: str | float) -> float:
    try:
        return float(raw)
    except (TypeError, ValueError):
        raise InvalidFieldError(field, f"{field} must be a number.") from None


# ── Step 1 ─────────────────────────────────────────────────────────────────────


def create_project(
    state: SessionState,
    title: str,
    category: str,
    size: str | float,
    garment_type: str,
    notes: str = "",
) -> Project:
    """
    Validate the step-1 form and store a new Project in *state*.

    Any print guide from an earlier project is dropped.

    Raises
    ------
    MissingFieldError
        If title, category, size, or garment type is blank.
    InvalidFieldError
        If a field is out of range or the garment is not offered for the category.
    """
    if not title.strip() or not category or size in ("", None) or not garment_type:
        raise MissingFieldError(MISSING_FIELDS_MESSAGE)

    title = title.strip()
    if len(title) > TITLE_MAX_LENGTH:
        raise InvalidFieldError(
            "Title", f"Title must be at most {TITLE_MAX_LENGTH} characters."
        )
    if len(notes) > NOTES_MAX_LENGTH:
        raise InvalidFieldError(
            "Notes", f"Notes must be at most {NOTES_MAX_LENGTH} characters."
        )
    try:
        cat = Category(category)
    except ValueError:
        raise InvalidFieldError("Category", f"Unknown category: {category!r}.") from None

    numeric_size = _parse_number("Size", size)
    _check_range("Size", numeric_size, SIZE_RANGE)

    if garment_type not in get_catalog().get_garment_options(cat):
        raise InvalidFieldError(
            "Garment type", f"{garment_type!r} is not offered for {cat.value}."
        )

    project = Project(
        id=str(uuid.uuid4()),
        title=title,
        category=cat,
        size=numeric_size,
        garment_type=garment_type,
        notes=notes,
    )
    state.project = project
    state.print_guide = None
    logger.info("Created project %r", project.title, extra={"project_id": project.id})
    return project


# ── Step 2 ─────────────────────────────────────────────────────────────────────


def apply_parameters(
    state: SessionState,
    fabric_stretch_pct: float,
    seam_allowance_mm: float,
    include_notches: bool,
    include_grainline: bool,
) -> tuple[Project, PrintGuide]:
    """
    Replace the session Project with the step-2 parameters and derive its PrintGuide.

    Raises
    ------
    MissingSessionStateError
        If step 1 has not been completed.
    InvalidFieldError
        If stretch or seam allowance is out of range.
    """
    if state.project is None:
        raise MissingSessionStateError(NO_PROJECT_MESSAGE)

    stretch = _parse_number("Fabric stretch", fabric_stretch_pct)
    seam = _parse_number("Seam allowance", seam_allowance_mm)
    _check_range("Fabric stretch", stretch, STRETCH_RANGE_PCT, "%")
    _check_range("Seam allowance", seam, SEAM_ALLOWANCE_RANGE_MM, "mm")

    project = dataclasses.replace(
        state.project,
        fabric_stretch_pct=stretch,
        seam_allowance_mm=seam,
        include_notches=include_notches,
        include_grainline=include_grainline,
    )
    guide = generate_print_guide(project)
    state.project = project
    state.print_guide = guide
    logger.info("Applied parameters", extra={"project_id": project.id})
    return project, guide


# ── Step 3 ─────────────────────────────────────────────────────────────────────


def require_output(state: SessionState) -> tuple[Project, PrintGuide]:
    """Return the Project and PrintGuide to render.  Raises MissingSessionStateError."""
    if state.project is None or state.print_guide is None:
        raise MissingSessionStateError(NO_OUTPUT_MESSAGE)
    return state.project, state.print_guide


def render_print_guide(state: SessionState) -> CompositorOutput:
    """Compose the print-guide PDF for the session's current output."""
    project, guide = require_output(state)
    return PrintGuideCompositor().compose(GuideInput(project=project, guide=guide))


# ── Studio ─────────────────────────────────────────────────────────────────────


def resolve_garment(description: str, garment_override: str = "") -> str:
    """Override if given, else inferred from a non-blank description, else ""."""
    if garment_override:
        return garment_override
    if description.strip():
        return infer_type(description)
    return ""


def studio_recommendation(
    description: str,
    size_system: SizeSystem | str | None,
    size: str,
    garment_override: str = "",
    state: SessionState | None = None,
) -> GarmentInference | None:
    """
    Live recommendation for the studio screen.

    Returns None until a garment can be resolved and both a size system and
    a size are chosen.  When *state* is given the result is stored as its
    latest recommendation.
    """
    garment = resolve_garment(description, garment_override)
    if not garment or not size_system or not size:
        return None
    recommendation = infer_from_garment(garment, SizeSystem(size_system), size)
    if state is not None:
        state.recommendation = recommendation
    return recommendation


def generate_pattern_pack(
    recommendation: GarmentInference, size_system: SizeSystem, size: str
) -> CompositorOutput:
    """Compose the pattern pack for a studio recommendation."""
    return PatternPackCompositor().compose(
        PackInput(
            garment_type=recommendation.garment_type,
            size_system=size_system,
            size=size,
            recommendations=recommendation,
            instructions=generate_instructions(recommendation),
        )
    )
