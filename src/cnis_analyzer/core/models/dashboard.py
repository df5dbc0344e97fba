"""Derived dashboard views computed from a CnisResponse."""

from datetime import date
from decimal import Decimal
from typing import Any, Optional, Union

from pydantic import BaseModel, Field

from cnis_analyzer.core.models.cnis import ConsolidatedEntry, EarningHistory
from cnis_analyzer.core.models.enums import TipoRequisito

NAO_ATINGIDO = "Não atingido"
ADQUIRIDO = "Adquirido"

REGRAS_RESUMO = 5
SALARIOS_RECENTES = 6


class RequirementStatus(BaseModel):
    """State of one requirement of a rule.

    ``met`` is None when the service did not evaluate the requirement
    (not applicable), which is different from False (pending).
    """

    tipo: TipoRequisito
    met: Optional[bool] = None
    target: Any = None

    @property
    def pending(self) -> bool:
        return self.met is False

    @property
    def descricao(self) -> str:
        """Label for a pending requirement, e.g. "Idade: 62 anos"."""
        alvo = "-" if self.target is None else self.target
        if self.tipo == TipoRequisito.IDADE:
            return f"Idade: {alvo} anos"
        if self.tipo == TipoRequisito.CONTRIBUICAO:
            return f"Contribuição: {alvo} anos"
        return f"Pontos: {alvo} pts"


class RetirementRule(BaseModel):
    """A retirement rule ready for display."""

    rule_key: str = Field(..., description="Wire key, e.g. aposentadoriaPorIdade")
    label: str = Field(..., description="Human label (rule type)")
    is_eligible: bool
    eligibility_date: Optional[date] = None
    projected_fulfillment_date: Optional[date] = None
    requirements: list[RequirementStatus] = Field(default_factory=list)

    model_config = {"frozen": True}

    @property
    def pending_requirements(self) -> list[RequirementStatus]:
        return [r for r in self.requirements if r.pending]

    @property
    def needs_manual_check(self) -> bool:
        """Ineligible although no requirement is reported as pending.

        The service does not explain this combination; it is shown as a
        manual-check notice instead of being resolved locally.
        """
        return not self.is_eligible and not self.pending_requirements

    @property
    def status(self) -> str:
        """Full status: "Adquirido", the projected date, or "Não atingido"."""
        if self.is_eligible:
            return ADQUIRIDO
        if self.projected_fulfillment_date is None:
            return NAO_ATINGIDO
        return self.projected_fulfillment_date.strftime("%d/%m/%Y")

    @property
    def status_resumido(self) -> str:
        """Short status used in the overview: the projected year only."""
        if self.is_eligible:
            return ADQUIRIDO
        if self.projected_fulfillment_date is None:
            return NAO_ATINGIDO
        return str(self.projected_fulfillment_date.year)


class WagePoint(BaseModel):
    """One point of the wage series."""

    competencia: date
    value: Decimal
    label: str = ""

    model_config = {"frozen": True}


def recent_wages(series: list[WagePoint], limit: int = SALARIOS_RECENTES) -> list[WagePoint]:
    """Last ``limit`` points of a series, most recent first."""
    if limit <= 0:
        return []
    return series[-limit:][::-1]


class ContributionPeriodView(BaseModel):
    """A consolidated period joined with its social-security relation."""

    periodo: ConsolidatedEntry
    origem_do_vinculo: Optional[str] = None
    data_inicio: Optional[str] = None
    data_fim: Optional[str] = None
    indicadores: list[str] = Field(default_factory=list)
    indicadores_vinculo: list[str] = Field(default_factory=list)
    ultimas_remuneracoes: list[EarningHistory] = Field(default_factory=list)
    has_relation: bool = False

    @property
    def seq(self) -> int:
        return self.periodo.seq

    @property
    def is_pendencia(self) -> bool:
        return self.periodo.is_pendencia


class ClientHeader(BaseModel):
    nome: str
    cpf: str = "-"
    nit: str = "-"


class SummaryStats(BaseModel):
    """Headline numbers of the dashboard."""

    idade_abreviada: str
    idade_anos: int
    tempo_contribuicao: str = Field(..., description="Formatted Xa Ym Zd")
    duracao_total_em_dias: int
    carencia_meses: int
    pontos: Union[int, float]


class Dashboard(BaseModel):
    """Everything the dashboard renders, computed once per response."""

    cliente: ClientHeader
    resumo: SummaryStats
    regras: list[RetirementRule] = Field(default_factory=list)
    salarios: list[WagePoint] = Field(default_factory=list)
    salarios_ignorados: int = Field(default=0, description="Earnings skipped as unparsable")
    historico: list[ContributionPeriodView] = Field(default_factory=list)

    @property
    def regras_resumo(self) -> list[RetirementRule]:
        """First five rules, shown in the overview."""
        return self.regras[:REGRAS_RESUMO]

    @property
    def salarios_recentes(self) -> list[WagePoint]:
        """Six most recent wages, most recent first."""
        return recent_wages(self.salarios)
