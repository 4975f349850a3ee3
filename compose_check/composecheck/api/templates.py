"""Stack template catalog endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from composecheck.config import Options
from composecheck.deps import get_options
from composecheck.templates import StackTemplate, get_template, list_templates

router = APIRouter(prefix="/api", tags=["templates"])


@router.get("/templates", response_model=list[StackTemplate])
async def get_templates() -> list[StackTemplate]:
    """List all sample stacks."""
    return list_templates()


@router.get("/templates/default", response_model=StackTemplate)
async def get_default_template(
    options: Options = Depends(get_options),
) -> StackTemplate:
    """Return the template the editor opens with."""
    template = get_template(options.default_template)
    if template is None:
        raise HTTPException(status_code=404, detail="Default template not found")
    return template


@router.get("/templates/{name:path}", response_model=StackTemplate)
async def get_template_by_name(name: str) -> StackTemplate:
    """Return a single sample stack by name."""
    template = get_template(name)
    if template is None:
        raise HTTPException(status_code=404, detail=f"Template '{name}' not found")
    return template
