"""Tests for CNIS document loading."""

import pytest

from cnis_analyzer.infrastructure.documents import is_pdf, load_cnis_document
from cnis_analyzer.shared.exceptions import DocumentError, UnsupportedFileError


class TestIsPdf:
    """Tests for the PDF signature check."""

    def test_pdf(self):
        assert is_pdf(b"%PDF-1.7\n...") is True

    def test_leading_whitespace(self):
        assert is_pdf(b"\n  %PDF-1.4") is True

    @pytest.mark.parametrize("content", [b"", b"PK\x03\x04", b"<html>", b"%PD"])
    def test_not_pdf(self, content):
        assert is_pdf(content) is False


class TestLoadCnisDocument:
    """Tests for load_cnis_document."""

    def test_load(self, sample_pdf):
        document = load_cnis_document(sample_pdf)
        assert document.filename == "cnis.pdf"
        assert document.content == sample_pdf.read_bytes()
        assert document.content_type == "application/pdf"
        assert document.size == len(document.content)

    def test_missing_file(self, tmp_path):
        with pytest.raises(DocumentError, match="não encontrado"):
            load_cnis_document(tmp_path / "nao_existe.pdf")

    def test_directory(self, tmp_path):
        with pytest.raises(DocumentError):
            load_cnis_document(tmp_path)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "vazio.pdf"
        path.write_bytes(b"")
        with pytest.raises(DocumentError, match="vazio"):
            load_cnis_document(path)

    def test_not_a_pdf(self, tmp_path):
        path = tmp_path / "cnis.txt"
        path.write_text("extrato", encoding="utf-8")
        with pytest.raises(UnsupportedFileError, match="cnis.txt"):
            load_cnis_document(path)
