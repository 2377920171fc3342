"""
LLMGarmentClassifier — Claude-backed description classifier.

Claude receives the free-text description and must call the classify_garment
tool with one label from the catalog vocabulary.  On any failure (network
error, no tool_use block, a label outside the vocabulary) classify() warns and
returns the keyword classifier's answer, so the caller always gets a usable
garment type.

Satisfies the GarmentClassifier Protocol and is a drop-in replacement for
KeywordGarmentClassifier.

Requires the ``anthropic`` package (``pip install sewstudio[llm]``).  The
import is deferred to ``__init__`` so the rest of the module is importable
without the package installed.
"""

from __future__ import annotations

import logging
import warnings

from sewstudio.catalog.registry import CatalogRegistry, get_catalog
from sewstudio.inference.classifier import infer_type
from sewstudio.inference.prompts import SYSTEM_PROMPT, build_tool_schema

logger = logging.getLogger("sewstudio-inference")


class LLMGarmentClassifier:
    """
    Garment classifier backed by the Claude tool-use API.

    The Anthropic client reads ``ANTHROPIC_API_KEY`` from the environment.
    """

    def __init__(
        self,
        model: str = "claude-haiku-4-5-20251001",
        max_tokens: int = 256,
        catalog: CatalogRegistry | None = None,
    ) -> None:
        try:
            import anthropic

            self._client = anthropic.Anthropic()
        except ImportError as exc:
            raise ImportError(
                "Install the LLM extras for classifier support: pip install sewstudio[llm]"
            ) from exc
        self._model = model
        self._max_tokens = max_tokens
        self._catalog = catalog or get_catalog()
        self._tool = build_tool_schema(self._catalog.vocabulary)

    def classify(self, description: str) -> str:
        """
        Classify *description* into a vocabulary label.

        Falls back to keyword inference with a UserWarning on any LLM failure.
        """
        fallback = infer_type(description, self._catalog)
        try:
            response = self._client.messages.create(
                model=self._model,
                max_tokens=self._max_tokens,
                system=SYSTEM_PROMPT,
                tools=[self._tool],
                tool_choice={"type": "any"},
                messages=[{"role": "user", "content": description}],
            )
            tool_block = next((b for b in response.content if b.type == "tool_use"), None)
            if tool_block is None:
                raise ValueError("Claude did not return a tool_use block")
            label = tool_block.input["garment_type"]
            if label not in self._catalog.vocabulary:
                raise ValueError(f"label {label!r} is not in the garment vocabulary")
        except Exception as exc:  # noqa: BLE001
            warnings.warn(
                f"LLMGarmentClassifier failed, using keyword inference: {exc}",
                stacklevel=2,
            )
            return fallback
        if label != fallback:
            logger.info("LLM classified %r as %r (keywords: %r)", description, label, fallback)
        return label
