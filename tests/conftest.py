"""Shared test fixtures and configuration."""

import os
import sys
from pathlib import Path

# Add compose_check/ to Python path so `from composecheck.xxx` imports work
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "compose_check"))

import pytest

os.environ["COMPOSECHECK_DEV_MODE"] = "true"


@pytest.fixture
def web_service() -> dict:
    return {"image": "nginx:alpine", "ports": ["8080:80"]}
