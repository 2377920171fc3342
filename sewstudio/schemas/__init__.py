"""
Schema definitions for the studio's data contracts.

Provides the records that flow between modules: the inference output and
construction steps, and the wizard's Project and PrintGuide.
"""

from .inference import Difficulty, GarmentInference, InstructionStep, SizeSystem
from .project import Category, PrintGuide, Project

__all__ = [
    # inference
    "Difficulty",
    "GarmentInference",
    "InstructionStep",
    "SizeSystem",
    # project
    "Category",
    "PrintGuide",
    "Project",
]
