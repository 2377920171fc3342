"""
MmCanvas — a ReportLab canvas addressed in millimetres from the top-left.

Page layout in this package is written in millimetres with y growing down
the page, the way a printed pattern is measured.  MmCanvas converts every
call to ReportLab's bottom-left point space, so a 50 mm rectangle drawn here
is exactly 50 * reportlab.lib.units.mm points in the output PDF.

Colours are (r, g, b) tuples of 0–255 ints.  Graphics state is set per call;
ReportLab resets it on every showPage().
"""

from __future__ import annotations

import io

from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.lib.utils import simpleSplit
from reportlab.pdfgen import canvas as rl_canvas

RGB = tuple[int, int, int]

_FONTS: dict[bool, str] = {False: "Helvetica", True: "Helvetica-Bold"}


def font_name(bold: bool = False) -> str:
    return _FONTS[bold]


def split_text(text: str, width_mm: float, size: float, bold: bool = False) -> list[str]:
    """Word-wrap *text* to *width_mm* at the given font size."""
    return simpleSplit(text, font_name(bold), size, width_mm * mm)


class MmCanvas:
    """Thin top-left/millimetre adapter over reportlab.pdfgen.canvas.Canvas."""

    def __init__(self, title: str = "", author: str = "", subject: str = "") -> None:
        self._buffer = io.BytesIO()
        # invariant=1 drops timestamps and random IDs so equal input gives equal bytes.
        self._c = rl_canvas.Canvas(self._buffer, pagesize=A4, invariant=1)
        self.page_w_mm = A4[0] / mm
        self.page_h_mm = A4[1] / mm
        if title:
            self._c.setTitle(title)
        if author:
            self._c.setAuthor(author)
        if subject:
            self._c.setSubject(subject)

    def _x(self, x: float) -> float:
        return x * mm

    def _y(self, y: float) -> float:
        return (self.page_h_mm - y) * mm

    # ── State ──────────────────────────────────────────────────────────────────

    @property
    def page_number(self) -> int:
        return self._c.getPageNumber()

    def set_stroke(self, rgb: RGB) -> None:
        self._c.setStrokeColorRGB(*(v / 255 for v in rgb))

    def set_fill(self, rgb: RGB) -> None:
        self._c.setFillColorRGB(*(v / 255 for v in rgb))

    def set_line_width(self, width_mm: float) -> None:
        self._c.setLineWidth(width_mm * mm)

    def set_font(self, size: float, bold: bool = False) -> None:
        self._c.setFont(font_name(bold), size)

    # ── Text ───────────────────────────────────────────────────────────────────

    def text(self, x: float, y: float, s: str, align: str = "left", angle: float = 0) -> None:
        """Draw *s* with its baseline at (x, y); align is left, center, or right."""
        if angle:
            self._c.saveState()
            self._c.translate(self._x(x), self._y(y))
            self._c.rotate(angle)
            self._c.drawString(0, 0, s)
            self._c.restoreState()
            return
        match align:
            case "center":
                self._c.drawCentredString(self._x(x), self._y(y), s)
            case "right":
                self._c.drawRightString(self._x(x), self._y(y), s)
            case _:
                self._c.drawString(self._x(x), self._y(y), s)

    def text_lines(self, lines: list[str], x: float, y: float, leading: float) -> None:
        """Draw pre-wrapped *lines* starting at baseline y, *leading* mm apart."""
        for i, line in enumerate(lines):
            self._c.drawString(self._x(x), self._y(y + i * leading), line)

    # ── Shapes ─────────────────────────────────────────────────────────────────

    def line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self._c.line(self._x(x1), self._y(y1), self._x(x2), self._y(y2))

    def rect(self, x: float, y: float, w: float, h: float, fill: bool = False) -> None:
        """Rectangle with top-left corner (x, y), w × h millimetres."""
        self._c.rect(self._x(x), self._y(y + h), w * mm, h * mm, stroke=1, fill=int(fill))

    def rounded_rect(
        self, x: float, y: float, w: float, h: float, radius: float, fill: bool = False
    ) -> None:
        self._c.roundRect(
            self._x(x), self._y(y + h), w * mm, h * mm, radius * mm, stroke=1, fill=int(fill)
        )

    def circle(self, cx: float, cy: float, r: float, fill: bool = True) -> None:
        self._c.circle(self._x(cx), self._y(cy), r * mm, stroke=0 if fill else 1, fill=int(fill))

    # ── Pages ──────────────────────────────────────────────────────────────────

    def new_page(self) -> None:
        self._c.showPage()

    def finish(self) -> bytes:
        """Close the document and return the PDF bytes."""
        self._c.save()
        return self._buffer.getvalue()
