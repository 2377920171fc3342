"""
Tests for sewstudio/session — SessionState and the wizard/studio steps.

Covers:
  - Step 1 validation and defaults
  - Step 2 wholesale replacement of the Project and print-guide derivation
  - Step 3 empty-state errors
  - Studio recommendation resolution and pattern-pack generation
"""

from __future__ import annotations

import uuid

import pytest

from sewstudio.schemas.inference import Difficulty, SizeSystem
from sewstudio.schemas.project import Category
from sewstudio.session import (
    InvalidFieldError,
    MissingFieldError,
    MissingSessionStateError,
    SessionState,
    WizardError,
    apply_parameters,
    create_project,
    generate_pattern_pack,
    render_print_guide,
    require_output,
    resolve_garment,
    studio_recommendation,
)


@pytest.fixture
def state() -> SessionState:
    return SessionState()


def _step1(state: SessionState, **overrides):
    fields = dict(title="Linen Sundress", category="womens", size="12", garment_type="Dress")
    fields.update(overrides)
    return create_project(state, **fields)


# ── Step 1 ─────────────────────────────────────────────────────────────────────


class TestCreateProject:
    def test_creates_project_with_defaults(self, state):
        project = _step1(state)
        assert state.project is project
        assert project.category == Category.WOMENS
        assert project.size == 12.0
        assert project.size_system == "metric"
        assert project.fabric_stretch_pct == 0
        assert project.seam_allowance_mm == 10
        assert project.include_notches and project.include_grainline
        assert uuid.UUID(project.id).version == 4

    def test_title_is_trimmed(self, state):
        assert _step1(state, title="  Sundress  ").title == "Sundress"

    @pytest.mark.parametrize(
        "overrides",
        [{"title": "   "}, {"category": ""}, {"size": ""}, {"garment_type": ""}],
    )
    def test_missing_fields(self, state, overrides):
        with pytest.raises(MissingFieldError, match="Please fill in all required fields."):
            _step1(state, **overrides)
        assert state.project is None

    def test_title_too_long(self, state):
        with pytest.raises(InvalidFieldError) as exc_info:
            _step1(state, title="x" * 101)
        assert exc_info.value.field == "Title"

    def test_notes_too_long(self, state):
        with pytest.raises(InvalidFieldError):
            _step1(state, notes="x" * 501)

    @pytest.mark.parametrize("size", ["0", "201", "-4", "twelve"])
    def test_bad_size(self, state, size):
        with pytest.raises(InvalidFieldError):
            _step1(state, size=size)

    def test_garment_must_belong_to_category(self, state):
        with pytest.raises(InvalidFieldError, match="not offered"):
            _step1(state, category="animal", garment_type="Dress")

    def test_unknown_category(self, state):
        with pytest.raises(InvalidFieldError):
            _step1(state, category="aliens")

    def test_errors_share_a_base_class(self, state):
        with pytest.raises(WizardError):
            _step1(state, title="")

    def test_new_project_drops_old_guide(self, state):
        _step1(state)
        apply_parameters(state, 0, 10, True, True)
        _step1(state, title="Second")
        assert state.print_guide is None


# ── Step 2 ─────────────────────────────────────────────────────────────────────


class TestApplyParameters:
    def test_requires_project(self, state):
        with pytest.raises(
            MissingSessionStateError, match="No project found. Please start from the beginning."
        ):
            apply_parameters(state, 0, 10, True, True)

    def test_replaces_project_wholesale(self, state):
        original = _step1(state)
        project, guide = apply_parameters(state, 20, 15, False, True)
        assert project is not original
        assert original.seam_allowance_mm == 10
        assert project.id == original.id
        assert project.fabric_stretch_pct == 20
        assert project.seam_allowance_mm == 15
        assert project.include_notches is False
        assert state.project is project
        assert state.print_guide is guide

    def test_guide_follows_parameters(self, state):
        _step1(state)
        _, guide = apply_parameters(state, 20, 15, False, True)
        assert "Interfacing: 0.5m" in guide.materials
        assert guide.settings["Notches"] == "Not included"
        assert guide.settings["Fabric Stretch"] == "20%"

    @pytest.mark.parametrize("stretch, seam", [(-1, 10), (101, 10), (0, 2), (0, 31)])
    def test_out_of_range(self, state, stretch, seam):
        original = _step1(state)
        with pytest.raises(InvalidFieldError):
            apply_parameters(state, stretch, seam, True, True)
        assert state.project is original
        assert state.print_guide is None

    def test_bounds_are_inclusive(self, state):
        _step1(state)
        project, _ = apply_parameters(state, 100, 30, True, True)
        assert project.fabric_stretch_pct == 100
        project, _ = apply_parameters(state, 0, 3, True, True)
        assert project.seam_allowance_mm == 3


# ── Step 3 ─────────────────────────────────────────────────────────────────────


class TestOutput:
    def test_requires_guide(self, state):
        _step1(state)
        with pytest.raises(MissingSessionStateError, match="No generated pattern found."):
            require_output(state)

    def test_returns_project_and_guide(self, state):
        _step1(state)
        project, guide = apply_parameters(state, 0, 10, True, True)
        assert require_output(state) == (project, guide)

    def test_render_print_guide(self, state):
        _step1(state)
        apply_parameters(state, 0, 10, True, True)
        output = render_print_guide(state)
        assert output.filename == "linen-sundress-12-print-guide.pdf"
        assert output.content.startswith(b"%PDF")

    def test_render_without_output_raises(self, state):
        with pytest.raises(MissingSessionStateError):
            render_print_guide(state)

    def test_reset(self, state):
        _step1(state)
        apply_parameters(state, 0, 10, True, True)
        state.reset()
        assert state == SessionState()


# ── Studio ─────────────────────────────────────────────────────────────────────


class TestStudio:
    def test_override_wins(self):
        assert resolve_garment("a summer dress", "Jacket") == "Jacket"

    def test_description_inferred(self):
        assert resolve_garment("a cozy pullover for winter") == "Hoodie"

    def test_blank_description_resolves_nothing(self):
        assert resolve_garment("   ") == ""

    def test_recommendation_requires_all_inputs(self):
        assert studio_recommendation("", "au_women", "12") is None
        assert studio_recommendation("dress", None, "12") is None
        assert studio_recommendation("dress", "au_women", "") is None

    def test_recommendation_is_stored_on_state(self, state):
        rec = studio_recommendation("wide-leg trousers", "au_women", "12", state=state)
        assert rec is not None
        assert rec.garment_type == "Pants"
        assert rec.difficulty == Difficulty.INTERMEDIATE
        assert state.recommendation is rec

    def test_generate_pattern_pack(self):
        rec = studio_recommendation("", SizeSystem.DOGS, "M", garment_override="Dog Coat")
        output = generate_pattern_pack(rec, SizeSystem.DOGS, "M")
        assert output.filename == "dog-coat-M-pattern-pack.pdf"
        assert output.page_labels[0] == "Title"
