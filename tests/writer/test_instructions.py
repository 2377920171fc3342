"""
Tests for sewstudio/writer/instructions.py and templates.py.

Covers:
  - Fixed sequence and conditional steps (interfacing, closure)
  - Templated details pull fields from the GarmentInference positionally
"""

from __future__ import annotations

import pytest

from sewstudio.inference import infer_from_garment
from sewstudio.schemas.inference import InstructionStep, SizeSystem
from sewstudio.writer import generate_instructions, step_keys_for
from sewstudio.writer.templates import StepKey

_ALWAYS = [
    "Prepare your fabric",
    "Print and assemble pattern",
    "Cut pattern pieces",
    "Sew main seams",
    "Finish seams",
    "Hem and final details",
    "Final pressing and fitting",
]


def _titles(garment: str, system: SizeSystem = SizeSystem.AU_WOMEN) -> list[str]:
    return [s.step for s in generate_instructions(infer_from_garment(garment, system, "12"))]


class TestSequence:
    def test_t_shirt_has_no_conditional_steps(self):
        assert _titles("T-Shirt") == _ALWAYS

    def test_dress_has_interfacing_and_closure(self):
        titles = _titles("Dress")
        assert len(titles) == 9
        assert titles.index("Apply interfacing") < titles.index("Sew main seams")
        assert titles.index("Sew main seams") < titles.index("Insert closure")
        assert titles.index("Insert closure") < titles.index("Finish seams")

    def test_jacket_has_interfacing_only(self):
        titles = _titles("Jacket")
        assert "Apply interfacing" in titles
        assert "Insert closure" not in titles

    @pytest.mark.parametrize("garment", ["Skirt", "Pants"])
    def test_closure_only(self, garment):
        titles = _titles(garment)
        assert "Insert closure" in titles
        assert "Apply interfacing" not in titles

    def test_blouse_has_interfacing(self):
        assert "Apply interfacing" in _titles("Blouse")

    def test_always_steps_keep_their_order(self):
        titles = _titles("Dress")
        assert [t for t in titles if t in _ALWAYS] == _ALWAYS

    def test_step_keys_match_case_insensitively(self):
        assert StepKey.INSERT_CLOSURE in step_keys_for("WRAP SKIRT")

    def test_returns_instruction_steps(self):
        steps = generate_instructions(infer_from_garment("Vest", SizeSystem.AU_MEN, "M"))
        assert all(isinstance(s, InstructionStep) for s in steps)


class TestDetails:
    @pytest.fixture(scope="class")
    def hoodie_steps(self):
        inference = infer_from_garment("Hoodie", SizeSystem.AU_WOMEN, "12")
        return {s.step: s.detail for s in generate_instructions(inference)}

    def test_prepare_mentions_fabric(self, hoodie_steps):
        assert hoodie_steps["Prepare your fabric"].startswith("Pre-wash and press Wool Blend Suiting.")

    def test_cut_uses_inferred_seam_allowance(self, hoodie_steps):
        assert "Cut with 15mm seam allowance included." in hoodie_steps["Cut pattern pieces"]

    def test_main_seams_use_first_stitch_tension_and_needle(self, hoodie_steps):
        detail = hoodie_steps["Sew main seams"]
        assert detail.startswith("Using Stretch stitch at tension 3–4,")
        assert "Use Ballpoint / Jersey needle (80/12)." in detail

    def test_finish_uses_second_stitch(self, hoodie_steps):
        assert hoodie_steps["Finish seams"].startswith("Finish raw edges with Zigzag or serger.")

    def test_hem_uses_last_stitch(self, hoodie_steps):
        assert "Stitch using Blind hem." in hoodie_steps["Hem and final details"]

    def test_interfacing_detail_starts_with_recommendation(self):
        inference = infer_from_garment("Blouse", SizeSystem.AU_WOMEN, "10")
        steps = {s.step: s.detail for s in generate_instructions(inference)}
        assert steps["Apply interfacing"].startswith("Lightweight fusible — collar and facing. ")

    def test_dog_pattern_uses_8mm(self):
        inference = infer_from_garment("Dog Coat", SizeSystem.DOGS, "M")
        steps = {s.step: s.detail for s in generate_instructions(inference)}
        assert "Cut with 8mm seam allowance included." in steps["Cut pattern pieces"]
