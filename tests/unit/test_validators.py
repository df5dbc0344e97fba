"""Tests for validators."""

import pytest

from cnis_analyzer.shared.validators import (
    format_cpf,
    validar_cpf,
    validar_email,
    validar_telefone,
    validate_cpf,
)


class TestCPFValidation:
    """Tests for CPF validation."""

    def test_valid_cpf(self):
        """Test valid CPF numbers."""
        assert validate_cpf("52998224725") is True
        assert validate_cpf("529.982.247-25") is True
        assert validate_cpf("111.444.777-35") is True

    def test_invalid_cpf_all_same_digits(self):
        """Test that CPFs with all same digits are invalid."""
        assert validate_cpf("11111111111") is False
        assert validate_cpf("00000000000") is False

    def test_invalid_cpf_wrong_length(self):
        """Test CPFs with wrong length."""
        assert validate_cpf("1234567890") is False
        assert validate_cpf("") is False

    def test_invalid_cpf_wrong_check_digits(self):
        """Test CPFs with wrong check digits."""
        assert validate_cpf("52998224726") is False
        assert validate_cpf("52998224724") is False


class TestValidarCPF:
    """Tests for validar_cpf (returns tuple with reason)."""

    def test_valid_cpf_returns_true(self):
        valido, motivo = validar_cpf("529.982.247-25")
        assert valido is True
        assert motivo == ""

    def test_wrong_length_reason(self):
        valido, motivo = validar_cpf("123")
        assert valido is False
        assert "11 dígitos" in motivo
        assert "3" in motivo

    def test_first_digit_reason(self):
        valido, motivo = validar_cpf("52998224715")
        assert valido is False
        assert "Primeiro dígito verificador" in motivo

    def test_second_digit_reason(self):
        valido, motivo = validar_cpf("52998224720")
        assert valido is False
        assert "Segundo dígito verificador" in motivo


class TestFormatters:
    """Tests for CPF formatting."""

    def test_format_cpf(self):
        assert format_cpf("52998224725") == "529.982.247-25"
        assert format_cpf("529.982.247-25") == "529.982.247-25"

    def test_format_cpf_wrong_length_untouched(self):
        assert format_cpf("123") == "123"


class TestContactValidation:
    """Tests for e-mail and phone validation."""

    @pytest.mark.parametrize("email", ["user@example.com", " maria.silva@gov.br "])
    def test_valid_email(self, email):
        assert validar_email(email) == (True, "")

    @pytest.mark.parametrize("email", ["user", "user@", "user@example", "a b@c.com"])
    def test_invalid_email(self, email):
        valido, motivo = validar_email(email)
        assert valido is False
        assert "E-mail inválido" in motivo

    def test_empty_email(self):
        assert validar_email("   ") == (False, "E-mail não informado")

    @pytest.mark.parametrize(
        "telefone",
        ["5515997752078", "(15) 99775-2078", "1533224455", "+55 15 3322-4455"],
    )
    def test_valid_phone(self, telefone):
        assert validar_telefone(telefone) == (True, "")

    def test_phone_too_short(self):
        valido, motivo = validar_telefone("99775")
        assert valido is False
        assert "10 ou 11 dígitos" in motivo

    def test_empty_phone(self):
        assert validar_telefone("") == (False, "Telefone não informado")
