"""
Page geometry, palette, and instruction pagination.

All measurements are millimetres on an A4 page (210 × 297), y growing down.

Instruction pagination is greedy: steps are placed top to bottom, and before a
step is placed the remaining space is compared against its footprint (at
least STEP_MIN_FOOTPRINT_MM).  If it does not fit, the step starts the next
page.  A step's title, detail text, and diagram are never split across pages;
detail text is capped at MAX_DETAIL_LINES so a block always fits on one page.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from sewstudio.compositor.canvas import split_text
from sewstudio.schemas.inference import InstructionStep

STUDIO_NAME = "Signature Sewing Studio"

PAGE_W = 210.0
PAGE_H = 297.0
MARGIN = 20.0
CONTENT_W = PAGE_W - MARGIN * 2

FOOTER_Y = PAGE_H - 12
CONTENT_TOP = 35.0
CONTENT_BOTTOM = PAGE_H - 30

# Couture palette
LAVENDER = (178, 160, 210)
ROSE = (210, 130, 155)
CORAL = (220, 150, 120)
DARK = (35, 35, 42)
GRAY = (120, 120, 130)
WHITE = (255, 255, 255)
SKETCH_FILL = (250, 248, 252)
DIAGRAM_FILL = (252, 250, 255)

# Calibration square: 5 cm with ticks every 10 mm.  Must print at exactly
# this size; users verify print scale by measuring it.
CALIBRATION_SIZE_MM = 50.0
CALIBRATION_TICK_SPACING_MM = 10.0
CALIBRATION_TICK_LENGTH_MM = 2.0

# Instruction step block
STEP_INDENT = 14.0
STEP_TITLE_H = 8.0
DETAIL_FONT_SIZE = 9.0
DETAIL_LINE_H = 4.5
DETAIL_WIDTH = CONTENT_W - STEP_INDENT
DIAGRAM_OFFSET = 2.0
DIAGRAM_W = 50.0
DIAGRAM_H = 25.0
STEP_TAIL_H = 35.0  # diagram offset + diagram + spacing before the next step
STEP_MIN_FOOTPRINT_MM = 50.0

# The first instructions page starts below its heading and divider.
INSTRUCTIONS_FIRST_Y = CONTENT_TOP + 24

# Longest detail text a block may carry and still fit below the first-page heading.
MAX_DETAIL_LINES = int(
    (CONTENT_BOTTOM - INSTRUCTIONS_FIRST_Y - STEP_TITLE_H - STEP_TAIL_H) // DETAIL_LINE_H
)


@dataclass(frozen=True)
class StepBlock:
    """An instruction step with its detail text already wrapped."""

    number: int
    step: InstructionStep
    detail_lines: tuple[str, ...]

    @property
    def height(self) -> float:
        return STEP_TITLE_H + len(self.detail_lines) * DETAIL_LINE_H + STEP_TAIL_H

    @property
    def footprint(self) -> float:
        """Space required before the block may start on the current page."""
        return max(STEP_MIN_FOOTPRINT_MM, self.height)


@dataclass(frozen=True)
class PlacedStep:
    """A StepBlock positioned at vertical offset y on its page."""

    block: StepBlock
    y: float

    @property
    def bottom(self) -> float:
        return self.y + self.block.height


@dataclass(frozen=True)
class InstructionPage:
    """The step blocks laid out on one instructions page."""

    placements: tuple[PlacedStep, ...]


def _wrap_detail(detail: str) -> tuple[str, ...]:
    lines = split_text(detail, DETAIL_WIDTH, DETAIL_FONT_SIZE)
    if len(lines) <= MAX_DETAIL_LINES:
        return tuple(lines)
    kept = lines[:MAX_DETAIL_LINES]
    kept[-1] = kept[-1].rsplit(" ", 1)[0] + " …"
    return tuple(kept)


def build_step_blocks(instructions: Sequence[InstructionStep]) -> tuple[StepBlock, ...]:
    """
    Number the steps and wrap each detail to the instruction column width.

    Detail text longer than MAX_DETAIL_LINES is cut short and ends with an
    ellipsis, so every block fits on a single page.
    """
    return tuple(
        StepBlock(
            number=i + 1,
            step=step,
            detail_lines=_wrap_detail(step.detail),
        )
        for i, step in enumerate(instructions)
    )


def plan_instruction_pages(
    blocks: tuple[StepBlock, ...],
    first_y: float = INSTRUCTIONS_FIRST_Y,
    top_y: float = CONTENT_TOP,
    bottom_y: float = CONTENT_BOTTOM,
) -> tuple[InstructionPage, ...]:
    """
    Pack step blocks into pages.

    Parameters
    ----------
    blocks:
        Step blocks in construction order.
    first_y:
        Starting offset on the first page (below the section heading).
    top_y:
        Starting offset on continuation pages.
    bottom_y:
        Lowest offset a block footprint may reach.

    Returns
    -------
    tuple[InstructionPage, ...]
        At least one page; only the first can be empty, and only when there
        are no blocks.  A block whose footprint exceeds the space left is placed
        alone at the top of a fresh page.
    """
    pages: list[InstructionPage] = []
    current: list[PlacedStep] = []
    y = first_y
    for block in blocks:
        if current and y + block.footprint > bottom_y:
            pages.append(InstructionPage(placements=tuple(current)))
            current = []
            y = top_y
        current.append(PlacedStep(block=block, y=y))
        y += block.height
    pages.append(InstructionPage(placements=tuple(current)))
    return tuple(pages)
