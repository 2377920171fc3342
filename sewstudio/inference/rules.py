"""
Ordered rule table for garment inference.

Garment classification is not mutually exclusive: "Hoodie" is both a knit
and outerwear, "Dog Coat" is outerwear in the animal size system.  Each rule
is a (predicate, field, action, value) entry applied in sequence to a mutable
accumulator.  For scalar fields the LAST matching rule wins, so the order of
RULES is the precedence order.  List fields only grow (APPEND); duplicates are
kept.

The accumulator starts from the woven, adult, non-outerwear defaults; every
other outcome is an override.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from sewstudio.schemas.inference import Difficulty, SizeSystem

KNIT_KEYWORDS: tuple[str, ...] = ("t-shirt", "tank top", "hoodie", "romper")
OUTERWEAR_KEYWORDS: tuple[str, ...] = ("jacket", "coat", "hoodie", "cardigan")

_KNIT_STITCHES: tuple[str, ...] = ("Stretch stitch", "Zigzag", "Twin needle hem")
_WOVEN_STITCHES: tuple[str, ...] = ("Straight stitch", "Zigzag (finishing)", "Topstitch")

# Kids sizes use 60 % of the adult fabric quantity.
SMALL_SIZE_FACTOR: float = 0.6


@dataclass(frozen=True)
class GarmentTraits:
    """Lowercased garment text plus the derived classification flags."""

    text: str
    is_knit: bool
    is_outerwear: bool
    is_dog: bool
    is_small: bool

    @classmethod
    def from_inputs(cls, garment_type: str, size_system: SizeSystem) -> GarmentTraits:
        text = garment_type.lower()
        return cls(
            text=text,
            is_knit=any(k in text for k in KNIT_KEYWORDS),
            is_outerwear=any(k in text for k in OUTERWEAR_KEYWORDS),
            is_dog=size_system.is_animal,
            is_small=size_system.is_small,
        )

    def has(self, *keywords: str) -> bool:
        """True if any keyword is a substring of the garment text."""
        return any(k in self.text for k in keywords)


@dataclass
class Accumulator:
    """Mutable working state the rules write into."""

    fabric_type: str = "Cotton Poplin"
    base_m: float = 1.5
    needle_type: str = "Universal"
    needle_size: str = "80/12"
    stitch_types: list[str] = field(default_factory=lambda: list(_WOVEN_STITCHES))
    tension_range: str = "4–5"
    seam_allowance_mm: int = 15
    difficulty: Difficulty = Difficulty.BEGINNER
    notions: list[str] = field(default_factory=lambda: ["Matching thread"])
    interfacing: str = "None required"


class RuleAction(str, Enum):
    """How a rule writes its value into the accumulator."""

    SET = "set"  # replace the field (last match wins)
    APPEND = "append"  # extend a list field with the value's items
    SCALE = "scale"  # multiply a numeric field by the value


Predicate = Callable[[GarmentTraits], bool]


@dataclass(frozen=True)
class Rule:
    """One entry of the rule table."""

    name: str
    when: Predicate
    field: str
    action: RuleAction
    value: Any

    def apply(self, traits: GarmentTraits, acc: Accumulator) -> bool:
        """Apply the rule if its predicate holds.  Returns True if it fired."""
        if not self.when(traits):
            return False
        match self.action:
            case RuleAction.SET:
                value = list(self.value) if isinstance(self.value, tuple) else self.value
                setattr(acc, self.field, value)
            case RuleAction.APPEND:
                getattr(acc, self.field).extend(self.value)
            case RuleAction.SCALE:
                setattr(acc, self.field, getattr(acc, self.field) * self.value)
        return True


# ── Predicate helpers ──────────────────────────────────────────────────────────


def _contains(*keywords: str) -> Predicate:
    return lambda t: t.has(*keywords)


def _knit(t: GarmentTraits) -> bool:
    return t.is_knit


def _outerwear(t: GarmentTraits) -> bool:
    return t.is_outerwear


def _dog(t: GarmentTraits) -> bool:
    return t.is_dog


def _small(t: GarmentTraits) -> bool:
    return t.is_small


# ── Rule table ─────────────────────────────────────────────────────────────────

FABRIC_RULES: tuple[Rule, ...] = (
    Rule("knit fabric", _knit, "fabric_type", RuleAction.SET, "Cotton Jersey"),
    Rule("outerwear fabric", _outerwear, "fabric_type", RuleAction.SET, "Wool Blend Suiting"),
    Rule("dress/blouse fabric", _contains("dress", "blouse"), "fabric_type", RuleAction.SET, "Cotton Lawn"),
    Rule("skirt fabric", _contains("skirt"), "fabric_type", RuleAction.SET, "Cotton Twill"),
    Rule(
        "dog bandana fabric",
        lambda t: t.is_dog and t.has("bandana"),
        "fabric_type",
        RuleAction.SET,
        "Cotton Quilting",
    ),
    Rule(
        "dog fabric",
        lambda t: t.is_dog and not t.has("bandana"),
        "fabric_type",
        RuleAction.SET,
        "Polar Fleece",
    ),
)

QUANTITY_RULES: tuple[Rule, ...] = (
    Rule("outerwear quantity", _outerwear, "base_m", RuleAction.SET, 2.8),
    Rule("dress/jumpsuit quantity", _contains("dress", "jumpsuit"), "base_m", RuleAction.SET, 2.5),
    Rule("pants quantity", _contains("pants", "trousers"), "base_m", RuleAction.SET, 2.0),
    Rule("shorts/skirt quantity", _contains("shorts", "skirt"), "base_m", RuleAction.SET, 1.2),
    Rule("blouse/t-shirt quantity", _contains("blouse", "t-shirt"), "base_m", RuleAction.SET, 1.5),
    Rule("tank quantity", _contains("tank"), "base_m", RuleAction.SET, 1.0),
    Rule("vest quantity", _contains("vest"), "base_m", RuleAction.SET, 1.2),
    Rule(
        "dog bandana quantity",
        lambda t: t.is_dog and t.has("bandana"),
        "base_m",
        RuleAction.SET,
        0.3,
    ),
    Rule(
        "dog quantity",
        lambda t: t.is_dog and not t.has("bandana"),
        "base_m",
        RuleAction.SET,
        0.5,
    ),
    Rule(
        "kids size scaling",
        lambda t: t.is_small and not t.is_dog,
        "base_m",
        RuleAction.SCALE,
        SMALL_SIZE_FACTOR,
    ),
)

NEEDLE_RULES: tuple[Rule, ...] = (
    Rule("knit needle", _knit, "needle_type", RuleAction.SET, "Ballpoint / Jersey"),
    Rule("small needle size", _small, "needle_size", RuleAction.SET, "70/10"),
)

STITCH_RULES: tuple[Rule, ...] = (
    Rule("knit stitches", _knit, "stitch_types", RuleAction.SET, _KNIT_STITCHES),
    Rule("outerwear blind hem", _outerwear, "stitch_types", RuleAction.APPEND, ("Blind hem",)),
)

TENSION_RULES: tuple[Rule, ...] = (
    Rule("knit tension", _knit, "tension_range", RuleAction.SET, "3–4"),
)

SEAM_ALLOWANCE_RULES: tuple[Rule, ...] = (
    Rule("animal seam allowance", _dog, "seam_allowance_mm", RuleAction.SET, 8),
)

DIFFICULTY_RULES: tuple[Rule, ...] = (
    Rule(
        "dress/pants difficulty",
        _contains("dress", "pants"),
        "difficulty",
        RuleAction.SET,
        Difficulty.INTERMEDIATE,
    ),
    Rule(
        "outerwear/jumpsuit difficulty",
        lambda t: t.is_outerwear or t.has("jumpsuit"),
        "difficulty",
        RuleAction.SET,
        Difficulty.ADVANCED,
    ),
)

NOTION_RULES: tuple[Rule, ...] = (
    Rule("zipper", _contains("pants", "skirt"), "notions", RuleAction.APPEND, ("1× Zipper (20cm)",)),
    Rule(
        "invisible zipper",
        _contains("dress"),
        "notions",
        RuleAction.APPEND,
        ("1× Invisible zipper (55cm)",),
    ),
    Rule(
        "outerwear notions",
        _outerwear,
        "notions",
        RuleAction.APPEND,
        ("5× Buttons", "1× Shoulder pads (optional)"),
    ),
    Rule(
        "hoodie notions",
        _contains("hoodie"),
        "notions",
        RuleAction.APPEND,
        ("1× Drawcord (120cm)", "2× Cord stops"),
    ),
    Rule(
        "bandana closure",
        lambda t: t.is_dog and t.has("bandana"),
        "notions",
        RuleAction.APPEND,
        ("1× Snap button or velcro strip",),
    ),
)

INTERFACING_RULES: tuple[Rule, ...] = (
    Rule(
        "outerwear interfacing",
        _outerwear,
        "interfacing",
        RuleAction.SET,
        "Medium-weight fusible — collars, cuffs, front facing",
    ),
    Rule(
        "blouse/dress interfacing",
        _contains("blouse", "dress"),
        "interfacing",
        RuleAction.SET,
        "Lightweight fusible — collar and facing",
    ),
)

RULES: tuple[Rule, ...] = (
    *FABRIC_RULES,
    *QUANTITY_RULES,
    *NEEDLE_RULES,
    *STITCH_RULES,
    *TENSION_RULES,
    *SEAM_ALLOWANCE_RULES,
    *DIFFICULTY_RULES,
    *NOTION_RULES,
    *INTERFACING_RULES,
)


def apply_rules(
    traits: GarmentTraits, rules: tuple[Rule, ...] = RULES
) -> tuple[Accumulator, tuple[str, ...]]:
    """
    Run *rules* in order over a fresh accumulator.

    Returns
    -------
    tuple[Accumulator, tuple[str, ...]]
        The final accumulator and the names of the rules that fired, in
        firing order.
    """
    acc = Accumulator()
    fired = tuple(rule.name for rule in rules if rule.apply(traits, acc))
    return acc, fired
