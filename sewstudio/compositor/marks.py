"""
Reusable page furniture: borders, footers, headings, and pattern markings.

Every draw function takes an MmCanvas and millimetre coordinates from the
top-left of the page.
"""

from __future__ import annotations

from sewstudio.compositor.canvas import MmCanvas
from sewstudio.compositor.layout import (
    CALIBRATION_SIZE_MM,
    CALIBRATION_TICK_LENGTH_MM,
    CALIBRATION_TICK_SPACING_MM,
    DARK,
    FOOTER_Y,
    GRAY,
    LAVENDER,
    MARGIN,
    PAGE_H,
    PAGE_W,
    ROSE,
    STUDIO_NAME,
)

NOTCH_DEPTH_MM = 4.0


def draw_border(cv: MmCanvas) -> None:
    """Double lavender/rose frame used on the title, materials, and instruction pages."""
    cv.set_stroke(LAVENDER)
    cv.set_line_width(0.5)
    cv.rect(12, 12, PAGE_W - 24, PAGE_H - 24)
    cv.set_stroke(ROSE)
    cv.set_line_width(0.3)
    cv.rect(13, 13, PAGE_W - 26, PAGE_H - 26)


def draw_footer(cv: MmCanvas, page_label: str, title: str) -> None:
    """Page label (left), studio/title (centre), running page number (right)."""
    cv.set_font(7)
    cv.set_fill(GRAY)
    cv.text(MARGIN, FOOTER_Y, page_label)
    cv.text(PAGE_W / 2, FOOTER_Y, f"{STUDIO_NAME} — {title}", align="center")
    cv.text(PAGE_W - MARGIN, FOOTER_Y, f"Page {cv.page_number}", align="right")


def draw_heading(cv: MmCanvas, text: str, y: float, rule_width: float) -> float:
    """Section heading with a short lavender rule beneath.  Returns the next free y."""
    cv.set_fill(DARK)
    cv.set_font(22, bold=True)
    cv.text(MARGIN, y, text)
    y += 12
    cv.set_stroke(LAVENDER)
    cv.set_line_width(0.4)
    cv.line(MARGIN, y, MARGIN + rule_width, y)
    return y


def draw_calibration_square(cv: MmCanvas, x: float, y: float) -> None:
    """
    Draw the 5 cm print-scale check with its top-left corner at (x, y).

    Ticks mark every 10 mm along all four edges.  The caption sits above the
    square and the "5 cm" labels below and to the left, so the square needs
    CALIBRATION_SIZE_MM + 6 mm of vertical space including labels.
    """
    size = CALIBRATION_SIZE_MM
    tick = CALIBRATION_TICK_LENGTH_MM
    cv.set_stroke(ROSE)
    cv.set_line_width(0.5)
    cv.rect(x, y, size, size)

    cv.set_line_width(0.2)
    offset = CALIBRATION_TICK_SPACING_MM
    while offset < size:
        cv.line(x + offset, y, x + offset, y + tick)
        cv.line(x + offset, y + size - tick, x + offset, y + size)
        cv.line(x, y + offset, x + tick, y + offset)
        cv.line(x + size - tick, y + offset, x + size, y + offset)
        offset += CALIBRATION_TICK_SPACING_MM

    cv.set_font(7)
    cv.set_fill(ROSE)
    cv.text(x + size / 2, y + size + 5, "5 cm", align="center")
    cv.text(x - 3, y + size / 2, "5 cm", angle=90)
    cv.text(x, y - 3, "CALIBRATION SQUARE — Print at 100%")


def draw_grainline(cv: MmCanvas, x: float, top: float, bottom: float) -> None:
    """Vertical grainline arrow from *bottom* up to *top* with an arrowhead at the top."""
    cv.set_stroke(DARK)
    cv.set_line_width(0.4)
    cv.line(x, top, x, bottom)
    cv.line(x - 3, top + 5, x, top)
    cv.line(x + 3, top + 5, x, top)
    cv.set_font(7)
    cv.set_fill(GRAY)
    cv.text(x + 4, (top + bottom) / 2, "GRAINLINE", angle=90)


def notch_positions(top: float, bottom: float, count: int = 4) -> tuple[float, ...]:
    """Evenly spaced notch offsets strictly between *top* and *bottom*."""
    spacing = (bottom - top) / (count + 1)
    return tuple(top + spacing * (i + 1) for i in range(count))


def draw_notches(cv: MmCanvas, left: float, right: float, positions: tuple[float, ...]) -> None:
    """Short inward ticks on both side edges of an outline at each position."""
    cv.set_stroke(DARK)
    cv.set_line_width(0.3)
    for ny in positions:
        cv.line(left, ny, left + NOTCH_DEPTH_MM, ny)
        cv.line(right - NOTCH_DEPTH_MM, ny, right, ny)
