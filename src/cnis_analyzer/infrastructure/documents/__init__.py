"""CNIS document handling."""

from cnis_analyzer.infrastructure.documents.loader import (
    PDF_SIGNATURE,
    is_pdf,
    load_cnis_document,
)

__all__ = [
    "PDF_SIGNATURE",
    "is_pdf",
    "load_cnis_document",
]
