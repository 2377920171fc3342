"""
PrintGuideCompositor — the print guide for a wizard Project.

Simpler than the pattern pack: a title block, the settings table, the 5 cm
calibration square, and numbered materials and assembly steps.  Pagination
tracks a single running y offset; whenever the next line would pass
CONTENT_BOTTOM the guide continues on a fresh page.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from sewstudio.compositor.canvas import MmCanvas, split_text
from sewstudio.compositor.layout import (
    CALIBRATION_SIZE_MM,
    CONTENT_BOTTOM,
    CONTENT_TOP,
    CONTENT_W,
    DARK,
    GRAY,
    LAVENDER,
    MARGIN,
    ROSE,
    STUDIO_NAME,
    WHITE,
)
from sewstudio.compositor.marks import draw_border, draw_calibration_square, draw_footer
from sewstudio.compositor.pack import CompositorOutput
from sewstudio.schemas.project import PrintGuide, Project
from sewstudio.writer.print_guide import format_number

logger = logging.getLogger("sewstudio-compositor")

_PAGE_LABEL = "Print Guide"
_SETTINGS_ROW_H = 11.0
_ITEM_INDENT = 9.0
_ITEM_FONT_SIZE = 10.0
_ITEM_LINE_H = 5.0
_ITEM_GAP = 3.0
_SECTION_GAP = 8.0


def print_guide_filename(project: Project) -> str:
    """``Project(title="Summer Dress", size=12)`` → ``"summer-dress-12-print-guide.pdf"``."""
    slug = re.sub(r"[^a-z0-9]+", "-", project.title.lower()).strip("-") or "project"
    return f"{slug}-{format_number(project.size)}-print-guide.pdf"


@dataclass(frozen=True)
class GuideInput:
    """A Project and the PrintGuide derived from it."""

    project: Project
    guide: PrintGuide


class _Cursor:
    """Running y offset that starts a new bordered page when space runs out."""

    def __init__(self, cv: MmCanvas, title: str) -> None:
        self.cv = cv
        self.title = title
        self.y = CONTENT_TOP
        self.pages = 1
        draw_border(cv)

    def ensure(self, height: float) -> None:
        if self.y + height > CONTENT_BOTTOM:
            draw_footer(self.cv, _PAGE_LABEL, self.title)
            self.cv.new_page()
            draw_border(self.cv)
            self.pages += 1
            self.y = CONTENT_TOP

    def close(self) -> None:
        draw_footer(self.cv, _PAGE_LABEL, self.title)


class PrintGuideCompositor:
    """ReportLab print-guide compositor."""

    def compose(self, gi: GuideInput) -> CompositorOutput:
        project, guide = gi.project, gi.guide
        cv = MmCanvas(title=project.title, author=STUDIO_NAME, subject=_PAGE_LABEL)
        cursor = _Cursor(cv, project.title)

        self._title_block(cursor, project)
        self._settings_table(cursor, guide)
        self._calibration(cursor)
        self._numbered_list(cursor, "Materials Needed", guide.materials, LAVENDER)
        self._numbered_list(cursor, "Assembly Steps", guide.steps, ROSE)
        cursor.close()

        output = CompositorOutput(
            filename=print_guide_filename(project),
            content=cv.finish(),
            page_labels=(_PAGE_LABEL,) * cursor.pages,
        )
        logger.info(
            "Composed print guide %s",
            output.filename,
            extra={"project_id": project.id, "page_count": output.page_count},
        )
        return output

    def _title_block(self, cursor: _Cursor, project: Project) -> None:
        cv = cursor.cv
        cv.set_fill(GRAY)
        cv.set_font(9)
        cv.text(MARGIN, cursor.y, f"{STUDIO_NAME.upper()} · PRINT GUIDE")
        cursor.y += 10
        cv.set_fill(DARK)
        cv.set_font(22, bold=True)
        for line in split_text(project.title, CONTENT_W, 22, bold=True):
            cursor.ensure(10)
            cv.text(MARGIN, cursor.y, line)
            cursor.y += 10
        cv.set_stroke(LAVENDER)
        cv.set_line_width(0.4)
        cv.line(MARGIN, cursor.y, MARGIN + 60, cursor.y)
        cursor.y += _SECTION_GAP

    def _settings_table(self, cursor: _Cursor, guide: PrintGuide) -> None:
        cv = cursor.cv
        self._section_title(cursor, "Project Settings")
        column_w = CONTENT_W / 2
        items = list(guide.settings.items())
        for row in range(0, len(items), 2):
            cursor.ensure(_SETTINGS_ROW_H)
            for col, (key, value) in enumerate(items[row : row + 2]):
                x = MARGIN + col * column_w
                cv.set_font(8)
                cv.set_fill(GRAY)
                cv.text(x, cursor.y, key)
                cv.set_font(10, bold=True)
                cv.set_fill(DARK)
                fitted = split_text(value, column_w - 4, 10, bold=True) or [""]
                cv.text(x, cursor.y + 5, fitted[0])
            cursor.y += _SETTINGS_ROW_H
        cursor.y += _SECTION_GAP

    def _calibration(self, cursor: _Cursor) -> None:
        # caption 3 mm above the square, "5 cm" label 5 mm below it
        cursor.ensure(CALIBRATION_SIZE_MM + 14)
        draw_calibration_square(cursor.cv, MARGIN + 5, cursor.y + 4)
        cursor.y += CALIBRATION_SIZE_MM + 14 + _SECTION_GAP

    def _numbered_list(
        self, cursor: _Cursor, heading: str, items: tuple[str, ...], marker: tuple[int, int, int]
    ) -> None:
        cv = cursor.cv
        self._section_title(cursor, heading)
        for i, item in enumerate(items):
            lines = split_text(item, CONTENT_W - _ITEM_INDENT, _ITEM_FONT_SIZE)
            for j, line in enumerate(lines):
                cursor.ensure(_ITEM_LINE_H)
                if j == 0:
                    cv.set_fill(marker)
                    cv.circle(MARGIN + 3, cursor.y - 1.2, 3)
                    cv.set_font(7, bold=True)
                    cv.set_fill(WHITE)
                    cv.text(MARGIN + 3, cursor.y, str(i + 1), align="center")
                cv.set_font(_ITEM_FONT_SIZE)
                cv.set_fill(DARK)
                cv.text(MARGIN + _ITEM_INDENT, cursor.y, line)
                cursor.y += _ITEM_LINE_H
            cursor.y += _ITEM_GAP
        cursor.y += _SECTION_GAP

    def _section_title(self, cursor: _Cursor, text: str) -> None:
        cursor.ensure(10)
        cursor.cv.set_font(14, bold=True)
        cursor.cv.set_fill(DARK)
        cursor.cv.text(MARGIN, cursor.y, text)
        cursor.y += 9


def compose_print_guide(project: Project, guide: PrintGuide) -> bytes:
    """Convenience wrapper around PrintGuideCompositor.compose() returning the PDF bytes."""
    return PrintGuideCompositor().compose(GuideInput(project=project, guide=guide)).content
