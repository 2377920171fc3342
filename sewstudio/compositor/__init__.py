"""compositor — ReportLab layout of pattern packs and print guides."""

from sewstudio.compositor.guide import (
    GuideInput,
    PrintGuideCompositor,
    compose_print_guide,
    print_guide_filename,
)
from sewstudio.compositor.pack import (
    CompositorOutput,
    DocumentCompositor,
    PackInput,
    PatternPackCompositor,
    compose_pattern_pack,
    pattern_pack_filename,
)

__all__ = [
    "CompositorOutput",
    "DocumentCompositor",
    "GuideInput",
    "PackInput",
    "PatternPackCompositor",
    "PrintGuideCompositor",
    "compose_pattern_pack",
    "compose_print_guide",
    "pattern_pack_filename",
    "print_guide_filename",
]
