"""
Session state for the three-step pattern wizard.

SessionState is passed explicitly to every wizard step.  Its fields hold
frozen records; a step replaces a record wholesale and never edits one in
place.
"""

from __future__ import annotations

from dataclasses import dataclass

from sewstudio.schemas.inference import GarmentInference
from sewstudio.schemas.project import PrintGuide, Project


class WizardError(Exception):
    """Base class for wizard step failures.  str(exc) is the user-facing message."""


class MissingFieldError(WizardError):
    """A required form field was blank."""


class InvalidFieldError(WizardError):
    """A form field was present but out of range or not an allowed option."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class MissingSessionStateError(WizardError):
    """A later step was reached without the records an earlier step creates."""


@dataclass
class SessionState:
    """
    The records owned by one wizard session.

    Attributes:
        project: Set at step 1, replaced at step 2.
        print_guide: Derived at step 2 from the replaced project.
        recommendation: Latest studio inference, if any.
    """

    project: Project | None = None
    print_guide: PrintGuide | None = None
    recommendation: GarmentInference | None = None

    def reset(self) -> None:
        """Forget everything; the next visit starts from step 1."""
        self.project = None
        self.print_guide = None
        self.recommendation = None
