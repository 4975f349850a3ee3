"""Runtime options for the validator service."""

from __future__ import annotations

import json
import os
from pathlib import Path

from pydantic import BaseModel, Field

from composecheck.templates import STACK_TEMPLATES

DEFAULT_TEMPLATE = "Node.js + PostgreSQL"


class Options(BaseModel):
    max_document_chars: int = Field(200_000, gt=0)
    default_template: str = DEFAULT_TEMPLATE


def load_options() -> Options:
    """Load options from the options JSON file or env fallback."""
    opts_path = os.environ.get("COMPOSECHECK_OPTIONS_PATH", "/data/options.json")
    if Path(opts_path).exists():
        options = Options(**json.loads(Path(opts_path).read_text()))
    else:
        options = Options(
            max_document_chars=int(
                os.environ.get("COMPOSECHECK_MAX_DOCUMENT_CHARS", "200000")
            ),
            default_template=os.environ.get(
                "COMPOSECHECK_DEFAULT_TEMPLATE", DEFAULT_TEMPLATE
            ),
        )

    if options.default_template not in STACK_TEMPLATES:
        raise ValueError(f"Unknown default template: {options.default_template!r}")
    return options
