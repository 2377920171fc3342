"""session — explicit wizard state and the wizard/studio steps that use it."""

from sewstudio.session.state import (
    InvalidFieldError,
    MissingFieldError,
    MissingSessionStateError,
    SessionState,
    WizardError,
)
from sewstudio.session.wizard import (
    apply_parameters,
    create_project,
    generate_pattern_pack,
    render_print_guide,
    require_output,
    resolve_garment,
    studio_recommendation,
)

__all__ = [
    "InvalidFieldError",
    "MissingFieldError",
    "MissingSessionStateError",
    "SessionState",
    "WizardError",
    "apply_parameters",
    "create_project",
    "generate_pattern_pack",
    "render_print_guide",
    "require_output",
    "resolve_garment",
    "studio_recommendation",
]
