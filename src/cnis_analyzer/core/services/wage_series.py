"""Flattening of the per-relation earnings history into one wage series."""

import logging
import re
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from cnis_analyzer.core.models.cnis import CnisData, CnisResponse
from cnis_analyzer.core.models.dashboard import WagePoint
from cnis_analyzer.shared.formatters import format_competencia, parse_iso_date

logger = logging.getLogger(__name__)

_MES_ANO = re.compile(r"^(\d{1,2})/(\d{4})$")


def parse_remuneracao(value: Any) -> Optional[Decimal]:
    """Parse a pt-BR amount ("1.234,56", "R$ 850,00") into Decimal.

    Every "." is a thousands separator and "," is the decimal separator.
    Returns None for empty or unparsable values.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        text = str(value)
    elif not isinstance(value, str):
        return None
    else:
        text = value.strip().replace("R$", "").replace(" ", "")
        if not text:
            return None
        text = text.replace(".", "").replace(",", ".")

    try:
        result = Decimal(text)
    except InvalidOperation:
        return None
    if not result.is_finite():
        return None
    return result


def parse_competencia(value: Any) -> Optional[date]:
    """Parse a competency as ISO date/instant or "MM/YYYY" (first day of month)."""
    if not value or not isinstance(value, str):
        return None
    value = value.strip()

    match = _MES_ANO.match(value)
    if match:
        mes, ano = int(match.group(1)), int(match.group(2))
        if 1 <= mes <= 12:
            return date(ano, mes, 1)
        return None

    return parse_iso_date(value)


class WageSeriesFlattener:
    """Builds the chronological wage series from every relation."""

    def __init__(self, cnis_data: CnisData):
        self.cnis_data = cnis_data
        self.skipped = 0

    def flatten(self) -> list[WagePoint]:
        """Return all parsable earnings, sorted by competency ascending.

        Malformed entries are skipped one by one and never abort the batch.
        """
        points: list[WagePoint] = []

        for relation in self.cnis_data.relations:
            for earning in relation.earnings:
                competencia = parse_competencia(earning.competencia)
                valor = parse_remuneracao(earning.remuneracao)
                if competencia is None or valor is None:
                    self.skipped += 1
                    logger.debug(
                        "Ignorando remuneração inválida no vínculo %s: competencia=%r remuneracao=%r",
                        relation.info.seq,
                        earning.competencia,
                        earning.remuneracao,
                    )
                    continue
                points.append(
                    WagePoint(
                        competencia=competencia,
                        value=valor,
                        label=format_competencia(competencia),
                    )
                )

        if self.skipped:
            logger.info("%d remunerações ignoradas por dados inválidos", self.skipped)

        return sorted(points, key=lambda p: p.competencia)


def flatten_wage_history(response: CnisResponse) -> list[WagePoint]:
    """Flatten the earnings history of a response into one sorted series."""
    return WageSeriesFlattener(response.cnis_data).flatten()
