"""POST /api/validate endpoint."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from composecheck.config import Options
from composecheck.deps import get_options
from composecheck.validator import ValidationResult, validate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["validate"])


class ValidateRequest(BaseModel):
    """Request body for POST /api/validate."""

    yaml: str = Field("", description="docker-compose.yml contents")


@router.post("/validate", response_model=ValidationResult)
async def validate_compose(
    body: ValidateRequest,
    options: Options = Depends(get_options),
) -> ValidationResult:
    """Validate a Compose document and return its diagnostics."""
    if len(body.yaml) > options.max_document_chars:
        raise HTTPException(
            status_code=413,
            detail=f"Document exceeds {options.max_document_chars} characters",
        )

    result = validate(body.yaml)
    logger.info(
        "Validated compose document: state=%s errors=%d warnings=%d",
        result.state,
        result.error_count,
        result.warning_count,
    )
    return result


@router.get("/health")
async def health() -> dict:
    return {"status": "ok"}
