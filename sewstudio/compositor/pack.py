"""
PatternPackCompositor — lays out a garment's pattern pack as a printable PDF.

Page sequence:
  1. Title page: studio name, garment, size label, sketch placeholder, difficulty.
  2. Materials page: labelled material list, stitch list, tension.
  3. Instructions pages: one numbered block per step, greedily paginated by
     sewstudio.compositor.layout.plan_instruction_pages().
  4. Pattern template pages 1A, 1B, 2A, 2B: outline, grainline, notches,
     seam/size annotation, and the 5 cm calibration square.

Every page carries the footer from draw_footer().  Output is deterministic:
the same PackInput always produces the same bytes.
"""

from __future__ import annotations

import logging
import re
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, runtime_checkable

from sewstudio.catalog import get_catalog
from sewstudio.compositor.canvas import MmCanvas
from sewstudio.compositor.layout import (
    CALIBRATION_SIZE_MM,
    CONTENT_TOP,
    CONTENT_W,
    DARK,
    DETAIL_FONT_SIZE,
    DETAIL_LINE_H,
    DIAGRAM_FILL,
    DIAGRAM_H,
    DIAGRAM_OFFSET,
    DIAGRAM_W,
    GRAY,
    LAVENDER,
    MARGIN,
    PAGE_W,
    ROSE,
    SKETCH_FILL,
    STEP_INDENT,
    STEP_TITLE_H,
    STUDIO_NAME,
    WHITE,
    PlacedStep,
    build_step_blocks,
    plan_instruction_pages,
)
from sewstudio.compositor.marks import (
    draw_border,
    draw_calibration_square,
    draw_footer,
    draw_grainline,
    draw_heading,
    draw_notches,
    notch_positions,
)
from sewstudio.config import get_settings
from sewstudio.schemas.inference import GarmentInference, InstructionStep, SizeSystem

logger = logging.getLogger("sewstudio-compositor")

# (page label, pattern piece) in print order.
PATTERN_PIECES: tuple[tuple[str, str], ...] = (
    ("1A", "Front Bodice"),
    ("1B", "Back Bodice"),
    ("2A", "Sleeve"),
    ("2B", "Collar / Facing"),
)

# Pattern page geometry.  The calibration square and its labels must stay
# above the footer, so the outline is shortened to make room.
_OUTLINE_TOP = 40.0
_OUTLINE_H = 160.0
_GRAIN_TOP = 60.0
_GRAIN_BOTTOM = 180.0
_ANNOTATION_Y = 208.0
_SQUARE_X = PAGE_W - MARGIN - CALIBRATION_SIZE_MM
_SQUARE_Y = 215.0

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]")


def pattern_pack_filename(garment_type: str, size: str) -> str:
    """
    ``"Dog Coat", "M"`` → ``"dog-coat-M-pattern-pack.pdf"``.

    Only the garment is lowercased.  Any character outside ``[A-Za-z0-9._-]``
    in either part becomes ``-``, so the name is safe as a single path
    component and as a quoted HTTP header value.
    """
    slug = re.sub(r"\s+", "-", garment_type).lower()
    slug = _UNSAFE_FILENAME_CHARS.sub("-", slug)
    safe_size = _UNSAFE_FILENAME_CHARS.sub("-", size)
    return f"{slug}-{safe_size}-pattern-pack.pdf"


@dataclass(frozen=True)
class PackInput:
    """Everything the pattern pack shows."""

    garment_type: str
    size_system: SizeSystem
    size: str
    recommendations: GarmentInference
    instructions: tuple[InstructionStep, ...]


@dataclass(frozen=True)
class CompositorOutput:
    """A finished PDF document."""

    filename: str
    content: bytes
    page_labels: tuple[str, ...]  # footer label of each page, in order

    @property
    def page_count(self) -> int:
        return len(self.page_labels)

    def save(self, directory: str | Path | None = None) -> Path:
        """Write the PDF into *directory* (default: Settings.output_dir) under its filename."""
        directory = Path(directory if directory is not None else get_settings().output_dir)
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / self.filename
        path.write_bytes(self.content)
        return path


@runtime_checkable
class DocumentCompositor(Protocol):
    """Protocol for pattern-pack compositors."""

    def compose(self, pack_input: PackInput) -> CompositorOutput: ...


class PatternPackCompositor:
    """
    ReportLab pattern-pack compositor.

    Stateless; each compose() call builds a fresh canvas.
    """

    def compose(self, pi: PackInput) -> CompositorOutput:
        """
        Lay out the full pattern pack.

        Parameters
        ----------
        pi:
            Garment, size, recommendations, and construction steps.

        Returns
        -------
        CompositorOutput
            PDF bytes, filename, and the label of every page.
        """
        started = time.perf_counter()
        cv = MmCanvas(
            title=f"{pi.garment_type} — {pi.size}",
            author=STUDIO_NAME,
            subject="Pattern pack",
        )
        labels: list[str] = []

        self._title_page(cv, pi)
        labels.append("Title")
        cv.new_page()

        self._materials_page(cv, pi.recommendations, pi.garment_type)
        labels.append("Materials")
        cv.new_page()

        labels.extend(self._instruction_pages(cv, pi.instructions, pi.garment_type))

        for label, piece in PATTERN_PIECES:
            cv.new_page()
            self._pattern_page(cv, label, piece, pi)
            labels.append(label)

        content = cv.finish()
        output = CompositorOutput(
            filename=pattern_pack_filename(pi.garment_type, pi.size),
            content=content,
            page_labels=tuple(labels),
        )
        logger.info(
            "Composed pattern pack %s",
            output.filename,
            extra={
                "page_count": output.page_count,
                "duration_ms": round((time.perf_counter() - started) * 1000, 1),
            },
        )
        return output

    # ── Pages ──────────────────────────────────────────────────────────────────

    def _title_page(self, cv: MmCanvas, pi: PackInput) -> None:
        draw_border(cv)
        centre = PAGE_W / 2

        cv.set_fill(DARK)
        cv.set_font(10)
        cv.text(centre, 50, STUDIO_NAME.upper(), align="center")
        cv.set_font(36, bold=True)
        cv.text(centre, 80, pi.garment_type, align="center")

        system_label = get_catalog().get_size_system(pi.size_system).label
        cv.set_font(14)
        cv.set_fill(GRAY)
        cv.text(centre, 92, f"Size {pi.size} · {system_label}", align="center")

        cv.set_stroke(LAVENDER)
        cv.set_line_width(0.3)
        cv.set_fill(SKETCH_FILL)
        cv.rounded_rect(55, 110, 100, 130, 4, fill=True)
        cv.set_font(10)
        cv.set_fill(GRAY)
        cv.text(centre, 178, "[ Fashion Sketch ]", align="center")

        cv.set_fill(ROSE)
        cv.set_font(9)
        cv.text(centre, 255, f"Difficulty: {pi.recommendations.difficulty.value}", align="center")

        draw_footer(cv, "Title", pi.garment_type)

    def _materials_page(self, cv: MmCanvas, rec: GarmentInference, title: str) -> None:
        draw_border(cv)
        y = draw_heading(cv, "Materials & Supplies", CONTENT_TOP, 60) + 10

        items = [
            ("Primary Fabric", f"{rec.fabric_type} — {rec.fabric_quantity_m:g}m"),
            ("Thread", rec.thread),
            ("Needle", f"{rec.needle_type} ({rec.needle_size})"),
            ("Interfacing", rec.interfacing),
            *(("Notion", notion) for notion in rec.notions),
        ]
        for label, value in items:
            cv.set_font(8)
            cv.set_fill(ROSE)
            cv.text(MARGIN, y, label.upper())
            cv.set_font(10)
            cv.set_fill(DARK)
            cv.text(MARGIN, y + 5, value)
            y += 14

        y += 10
        cv.set_font(8)
        cv.set_fill(GRAY)
        cv.text(MARGIN, y, "STITCH TYPES")
        y += 5
        cv.set_font(10)
        cv.set_fill(DARK)
        for stitch in rec.stitch_types:
            cv.text(MARGIN + 2, y, f"• {stitch}")
            y += 6

        y += 6
        cv.set_font(8)
        cv.set_fill(GRAY)
        cv.text(MARGIN, y, "TENSION")
        y += 5
        cv.set_font(10)
        cv.set_fill(DARK)
        cv.text(MARGIN, y, rec.tension_range)

        draw_footer(cv, "Materials", title)

    def _instruction_pages(
        self, cv: MmCanvas, instructions: tuple[InstructionStep, ...], title: str
    ) -> list[str]:
        pages = plan_instruction_pages(build_step_blocks(instructions))
        labels: list[str] = []
        for i, page in enumerate(pages):
            if i:
                cv.new_page()
            draw_border(cv)
            if i == 0:
                draw_heading(cv, "Construction Instructions", CONTENT_TOP, 80)
            for placed in page.placements:
                self._step_block(cv, placed)
            draw_footer(cv, "Instructions", title)
            labels.append("Instructions")
        logger.debug("Laid out %d instruction steps on %d pages", len(instructions), len(pages))
        return labels

    def _step_block(self, cv: MmCanvas, placed: PlacedStep) -> None:
        block, y = placed.block, placed.y
        x = MARGIN + STEP_INDENT

        cv.set_fill(LAVENDER)
        cv.circle(MARGIN + 5, y + 1, 4)
        cv.set_font(9, bold=True)
        cv.set_fill(WHITE)
        cv.text(MARGIN + 5, y + 2, str(block.number), align="center")

        cv.set_fill(DARK)
        cv.set_font(11, bold=True)
        cv.text(x, y + 2, block.step.step)
        y += STEP_TITLE_H

        cv.set_font(DETAIL_FONT_SIZE)
        cv.set_fill(GRAY)
        cv.text_lines(list(block.detail_lines), x, y, DETAIL_LINE_H)
        y += len(block.detail_lines) * DETAIL_LINE_H

        cv.set_stroke(LAVENDER)
        cv.set_line_width(0.2)
        cv.set_fill(DIAGRAM_FILL)
        cv.rounded_rect(x, y + DIAGRAM_OFFSET, DIAGRAM_W, DIAGRAM_H, 2, fill=True)
        cv.set_font(7)
        cv.set_fill(GRAY)
        cv.text(x + DIAGRAM_W / 2, y + 16, "[ Diagram ]", align="center")

    def _pattern_page(self, cv: MmCanvas, label: str, piece: str, pi: PackInput) -> None:
        cv.set_font(28, bold=True)
        cv.set_fill(LAVENDER)
        cv.text(MARGIN, 30, label)
        cv.set_font(12)
        cv.set_fill(DARK)
        cv.text(MARGIN + 30, 28, piece)

        cv.set_stroke((30, 30, 40))
        cv.set_line_width(0.5)
        cv.rect(MARGIN, _OUTLINE_TOP, CONTENT_W, _OUTLINE_H)

        draw_grainline(cv, PAGE_W / 2, _GRAIN_TOP, _GRAIN_BOTTOM)
        draw_notches(
            cv,
            MARGIN,
            MARGIN + CONTENT_W,
            notch_positions(_OUTLINE_TOP, _OUTLINE_TOP + _OUTLINE_H),
        )

        cv.set_font(7)
        cv.set_fill(GRAY)
        cv.text(
            MARGIN,
            _ANNOTATION_Y,
            f"Seam allowance: {pi.recommendations.seam_allowance_mm}mm (included)",
        )
        cv.text(MARGIN + 80, _ANNOTATION_Y, f"Size: {pi.size}")

        draw_calibration_square(cv, _SQUARE_X, _SQUARE_Y)
        draw_footer(cv, label, pi.garment_type)


def compose_pattern_pack(
    garment_type: str,
    size_system: SizeSystem,
    size: str,
    recommendations: GarmentInference,
    instructions: tuple[InstructionStep, ...] | list[InstructionStep],
) -> bytes:
    """Convenience wrapper around PatternPackCompositor.compose() returning the PDF bytes."""
    return (
        PatternPackCompositor()
        .compose(
            PackInput(
                garment_type=garment_type,
                size_system=size_system,
                size=size,
                recommendations=recommendations,
                instructions=tuple(instructions),
            )
        )
        .content
    )
