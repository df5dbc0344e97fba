"""Value formatters for display."""

from datetime import date, datetime
from decimal import Decimal
from typing import Any, Optional

MESES_ABREVIADOS = [
    "jan", "fev", "mar", "abr", "mai", "jun",
    "jul", "ago", "set", "out", "nov", "dez",
]


def format_currency(value: Decimal, symbol: str = "R$") -> str:
    """
    Format decimal as Brazilian currency.

    Args:
        value: Decimal value to format
        symbol: Currency symbol (default: R$)

    Returns:
        Formatted string like "R$ 1.234,56"
    """
    negative = value < 0
    value = abs(value)

    formatted = f"{value:,.2f}"

    # Convert to Brazilian format (. for thousands, , for decimals)
    formatted = formatted.replace(",", "X").replace(".", ",").replace("X", ".")

    result = f"{symbol} {formatted}"
    return f"-{result}" if negative else result


def decompose_days(days: int) -> tuple[int, int, int]:
    """Split a day count into (years, months, days) using 365-day years and 30-day months.

    This is a display approximation only; the authoritative contribution
    time arithmetic is done by the analysis service. Negative counts are
    clamped to zero.
    """
    days = max(0, int(days))
    anos = days // 365
    meses = (days % 365) // 30
    dias = (days % 365) % 30
    return anos, meses, dias


def format_duration_days(days: int) -> str:
    """
    Format a day count as "Xa Ym Zd".

    Args:
        days: Number of days

    Returns:
        Formatted string like "1a 1m 0d" for 395 days
    """
    anos, meses, dias = decompose_days(days)
    return f"{anos}a {meses}m {dias}d"


def parse_iso_date(value: Any) -> Optional[date]:
    """Parse an ISO-8601 date or instant ("2020-01-31" or "2020-01-31T00:00:00.000Z").

    Returns None for empty, non-string or invalid values.
    """
    if not value or not isinstance(value, str):
        return None
    value = value.strip()
    try:
        if "T" in value:
            return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
        return date.fromisoformat(value[:10])
    except ValueError:
        return None


def format_date(value: Optional[str]) -> str:
    """Format an ISO date string as DD/MM/YYYY, "-" when absent or invalid."""
    parsed = parse_iso_date(value)
    if parsed is None:
        return "-"
    return parsed.strftime("%d/%m/%Y")


def format_competencia(value: date, long_year: bool = False) -> str:
    """Format a competency month as "jan/24" (or "jan/2024" with long_year)."""
    mes = MESES_ABREVIADOS[value.month - 1]
    ano = f"{value.year}" if long_year else f"{value.year % 100:02d}"
    return f"{mes}/{ano}"
