"""
System prompt and tool schema for the LLM garment classifier.

build_tool_schema() restricts the answer to the catalog vocabulary through a
JSON-schema enum; tool_choice={"type": "any"} in the API call forces Claude to
call the tool, so the response always carries a structured label.
"""

from __future__ import annotations

from sewstudio.catalog.registry import get_catalog

SYSTEM_PROMPT = """You are a sewing pattern assistant. You receive a short, informal
description of a garment someone wants to sew and classify it as exactly one
garment type from a fixed list.

## Rules

1. Always answer by calling the classify_garment tool.
2. Choose the single closest garment type, even if the description is vague.
3. Pet garments ("for my dog", "puppy coat") map to the Dog types.
4. Knitted tops such as sweaters and pullovers map to Hoodie unless the
   description clearly names another type.
5. If nothing fits at all, choose Dress.
"""


def build_tool_schema(vocabulary: tuple[str, ...] | None = None) -> dict:
    """Return the classify_garment tool definition for *vocabulary*."""
    labels = list(vocabulary if vocabulary is not None else get_catalog().vocabulary)
    return {
        "name": "classify_garment",
        "description": "Record the garment type that best matches the description.",
        "input_schema": {
            "type": "object",
            "properties": {
                "garment_type": {
                    "type": "string",
                    "enum": labels,
                    "description": "One garment type from the allowed list.",
                },
            },
            "required": ["garment_type"],
        },
    }
