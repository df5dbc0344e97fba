"""Loading and sanity checks for the CNIS PDF extract."""

from pathlib import Path

from cnis_analyzer.core.models.request import CnisDocument
from cnis_analyzer.shared.exceptions import DocumentError, UnsupportedFileError

PDF_SIGNATURE = b"%PDF-"


def is_pdf(content: bytes) -> bool:
    """Check the PDF magic number at the start of the content."""
    return content.lstrip()[: len(PDF_SIGNATURE)] == PDF_SIGNATURE


def load_cnis_document(file_path: Path) -> CnisDocument:
    """
    Read a CNIS extract from disk.

    Args:
        file_path: Path to the PDF exported from Meu INSS

    Returns:
        CnisDocument with the raw bytes

    Raises:
        DocumentError: If the file is missing or empty
        UnsupportedFileError: If the file is not a PDF
    """
    if not file_path.is_file():
        raise DocumentError(f"Arquivo não encontrado: {file_path}")

    content = file_path.read_bytes()
    if not content:
        raise DocumentError(f"Arquivo vazio: {file_path.name}")

    if not is_pdf(content):
        raise UnsupportedFileError(
            f"Formato de arquivo não suportado: {file_path.name}. "
            "Use o extrato CNIS em PDF."
        )

    return CnisDocument(filename=file_path.name, content=content)
