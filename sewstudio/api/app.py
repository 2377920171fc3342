"""
Signature Sewing Studio HTTP service.

Endpoints
---------
GET  /health        liveness probe
POST /generate      description/size → garment type and sewing recommendations
POST /pattern-pack  same request body → the composed pattern-pack PDF

Request bodies are parsed by hand rather than through FastAPI's body binding
so that every client error is a 400 with an ``{"error": ...}`` body:
missing size_system/size gets its own message, anything else malformed
(non-JSON, wrong types, unknown size system) gets "Invalid request".

Run with ``sewstudio-api`` or ``uvicorn sewstudio.api.app:app``.
"""

from __future__ import annotations

import asyncio
import logging
import uuid
from functools import lru_cache
from typing import Any
from urllib.parse import quote

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from pydantic import ValidationError

from sewstudio.api.models import GenerateResponse, InferenceRequest, Recommendation
from sewstudio.catalog import get_catalog
from sewstudio.compositor import PackInput, PatternPackCompositor
from sewstudio.config import get_settings
from sewstudio.inference import GarmentClassifier, KeywordGarmentClassifier, infer_from_garment
from sewstudio.logging_config import setup_logging
from sewstudio.schemas.inference import SizeSystem
from sewstudio.writer import generate_instructions

logger = logging.getLogger("sewstudio-api")

MISSING_FIELDS_ERROR = "size_system and size are required"
INVALID_REQUEST_ERROR = "Invalid request"


class RequestError(Exception):
    """A client error answered with HTTP 400 and ``{"error": message}``."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


@lru_cache
def get_classifier() -> GarmentClassifier:
    """Description classifier selected by Settings.llm_classifier."""
    settings = get_settings()
    if settings.llm_classifier:
        from sewstudio.inference.llm_classifier import LLMGarmentClassifier

        logger.info("Using LLM garment classifier (%s)", settings.llm_model)
        return LLMGarmentClassifier(model=settings.llm_model)
    return KeywordGarmentClassifier()


async def _parse_request(request: Request) -> tuple[str, SizeSystem, str]:
    """Return (garment_type, size_system, size) or raise RequestError."""
    try:
        body: Any = await request.json()
        req = InferenceRequest.model_validate(body)
    except (ValueError, ValidationError) as exc:
        logger.debug("Rejected request body: %s", exc)
        raise RequestError(INVALID_REQUEST_ERROR) from exc

    if not req.size_system or not req.size:
        raise RequestError(MISSING_FIELDS_ERROR)
    try:
        size_system = SizeSystem(req.size_system)
    except ValueError as exc:
        raise RequestError(INVALID_REQUEST_ERROR) from exc

    if req.garment_type_override:
        garment_type = req.garment_type_override
    elif req.description:
        # LLMGarmentClassifier makes a blocking network call.
        garment_type = await asyncio.to_thread(get_classifier().classify, req.description)
    else:
        garment_type = get_catalog().default_garment_type
    return garment_type, size_system, req.size


def content_disposition(filename: str) -> str:
    """Attachment header with an ASCII fallback and an RFC 5987 UTF-8 name."""
    fallback = filename.encode("ascii", "replace").decode("ascii").replace('"', "_")
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename)}"


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(
        title="Signature Sewing Studio API",
        version="0.1.0",
        description="Garment inference and printable pattern packs",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["authorization", "x-client-info", "apikey", "content-type"],
    )

    @app.exception_handler(RequestError)
    async def _request_error(request: Request, exc: RequestError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"error": exc.message})

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/generate")
    async def generate(request: Request) -> JSONResponse:
        garment_type, size_system, size = await _parse_request(request)
        inference = infer_from_garment(garment_type, size_system, size)
        response = GenerateResponse(
            project_id=str(uuid.uuid4()),
            garment_type=garment_type,
            recommendations=Recommendation.from_inference(inference),
        )
        logger.info(
            "Generated recommendation for %r (%s %s)",
            garment_type,
            size_system.value,
            size,
            extra={"project_id": response.project_id},
        )
        return JSONResponse(content=response.model_dump(by_alias=True))

    @app.post("/pattern-pack")
    async def pattern_pack(request: Request) -> Response:
        garment_type, size_system, size = await _parse_request(request)
        inference = infer_from_garment(garment_type, size_system, size)
        pack_input = PackInput(
            garment_type=garment_type,
            size_system=size_system,
            size=size,
            recommendations=inference,
            instructions=generate_instructions(inference),
        )
        output = await asyncio.to_thread(PatternPackCompositor().compose, pack_input)
        return Response(
            content=output.content,
            media_type="application/pdf",
            headers={"Content-Disposition": content_disposition(output.filename)},
        )

    return app


_settings = get_settings()
setup_logging(level=_settings.log_level, json_output=_settings.json_logs)
app = create_app()


def main() -> None:
    """Console entry point: serve the API with uvicorn."""
    settings = get_settings()
    uvicorn.run("sewstudio.api.app:app", host=settings.host, port=settings.port)
