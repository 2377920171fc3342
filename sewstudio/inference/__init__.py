"""inference — Inference Engine public API."""

from sewstudio.inference.classifier import GarmentClassifier, KeywordGarmentClassifier, infer_type
from sewstudio.inference.engine import (
    DeterministicInferenceEngine,
    InferenceEngine,
    InferenceInput,
    infer_from_garment,
)

__all__ = [
    "DeterministicInferenceEngine",
    "GarmentClassifier",
    "InferenceEngine",
    "InferenceInput",
    "KeywordGarmentClassifier",
    "infer_from_garment",
    "infer_type",
]
