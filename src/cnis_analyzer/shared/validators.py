"""Data validators for CNIS Analyzer."""

import re

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def validate_cpf(cpf: str) -> bool:
    """
    Validate Brazilian CPF number.

    Args:
        cpf: CPF string (can contain formatting characters)

    Returns:
        True if valid, False otherwise
    """
    valido, _ = validar_cpf(cpf)
    return valido


def format_cpf(cpf: str) -> str:
    """Format CPF as XXX.XXX.XXX-XX."""
    cpf = re.sub(r"\D", "", cpf)
    if len(cpf) != 11:
        return cpf
    return f"{cpf[:3]}.{cpf[3:6]}.{cpf[6:9]}-{cpf[9:]}"


def validar_cpf(cpf: str) -> tuple[bool, str]:
    """Validate CPF and return reason if invalid.

    Uses módulo 11 algorithm for check digit calculation.

    Args:
        cpf: CPF string (can contain formatting characters)

    Returns:
        (True, "") if valid
        (False, "reason") if invalid
    """
    cpf = re.sub(r"\D", "", cpf)

    if len(cpf) != 11:
        return False, f"CPF deve ter 11 dígitos, tem {len(cpf)}"

    if cpf == cpf[0] * 11:
        return False, "CPF com todos dígitos iguais é inválido"

    soma = sum(int(cpf[i]) * (10 - i) for i in range(9))
    resto = soma % 11
    digito1 = 0 if resto < 2 else 11 - resto

    if int(cpf[9]) != digito1:
        return False, f"Primeiro dígito verificador inválido (esperado {digito1})"

    soma = sum(int(cpf[i]) * (11 - i) for i in range(10))
    resto = soma % 11
    digito2 = 0 if resto < 2 else 11 - resto

    if int(cpf[10]) != digito2:
        return False, f"Segundo dígito verificador inválido (esperado {digito2})"

    return True, ""


def validar_email(email: str) -> tuple[bool, str]:
    """Check the basic shape of an e-mail address (local@domain.tld)."""
    email = email.strip()
    if not email:
        return False, "E-mail não informado"
    if not _EMAIL_PATTERN.match(email):
        return False, f"E-mail inválido: {email}"
    return True, ""


def validar_telefone(telefone: str) -> tuple[bool, str]:
    """Validate a phone number with DDD, optionally prefixed by country code 55.

    Accepts 10 or 11 digits (landline / mobile) or the same with the
    leading 55, ignoring formatting characters.
    """
    digits = re.sub(r"\D", "", telefone)
    if not digits:
        return False, "Telefone não informado"
    if len(digits) in (12, 13) and digits.startswith("55"):
        digits = digits[2:]
    if len(digits) not in (10, 11):
        return False, f"Telefone deve ter 10 ou 11 dígitos com DDD, tem {len(digits)}"
    return True, ""
