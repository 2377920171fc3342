"""api — FastAPI service exposing inference and pattern-pack generation."""
