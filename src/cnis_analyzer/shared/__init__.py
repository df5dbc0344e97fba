"""Shared utilities for CNIS Analyzer."""

from cnis_analyzer.shared.config import Settings, get_settings
from cnis_analyzer.shared.formatters import (
    decompose_days,
    format_competencia,
    format_currency,
    format_date,
    format_duration_days,
    parse_iso_date,
)
from cnis_analyzer.shared.validators import (
    format_cpf,
    validar_cpf,
    validar_email,
    validar_telefone,
    validate_cpf,
)

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Formatters
    "decompose_days",
    "format_competencia",
    "format_currency",
    "format_date",
    "format_duration_days",
    "parse_iso_date",
    # Validators
    "format_cpf",
    "validar_cpf",
    "validar_email",
    "validar_telefone",
    "validate_cpf",
]
