"""Pytest configuration and fixtures."""

import copy
import json
from pathlib import Path

import pytest

from cnis_analyzer.core.models import CnisResponse

MINIMAL_PDF = b"%PDF-1.4\n1 0 obj\n<< /Type /Catalog >>\nendobj\ntrailer\n<< /Root 1 0 R >>\n%%EOF\n"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_response_path(fixtures_dir: Path) -> Path:
    """Return path to a saved analysis response."""
    return fixtures_dir / "cnis_response.json"


@pytest.fixture
def sample_payload(sample_response_path: Path) -> dict:
    """Raw JSON body of a successful analysis."""
    return json.loads(sample_response_path.read_text(encoding="utf-8"))


@pytest.fixture
def sample_response(sample_payload: dict) -> CnisResponse:
    """Parsed analysis response."""
    return CnisResponse.model_validate(copy.deepcopy(sample_payload))


@pytest.fixture
def sample_pdf(tmp_path: Path) -> Path:
    """A tiny file carrying the PDF signature."""
    path = tmp_path / "cnis.pdf"
    path.write_bytes(MINIMAL_PDF)
    return path
