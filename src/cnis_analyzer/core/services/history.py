"""Contribution history: consolidated periods joined with their relations."""

from typing import Optional

from cnis_analyzer.core.models.cnis import CnisResponse, SocialSecurityRelation
from cnis_analyzer.core.models.dashboard import ContributionPeriodView

ULTIMAS_REMUNERACOES = 12


def split_indicadores(indicadores: Optional[str]) -> list[str]:
    """Split an indicator string like "PREC-MENOR-" into ["PREC", "MENOR"]."""
    if not indicadores or not isinstance(indicadores, str):
        return []
    return [ind.strip() for ind in indicadores.split("-") if ind and ind.strip()]


class ContributionHistoryBuilder:
    """Builds one view per consolidated period, in service order."""

    def __init__(self, response: CnisResponse):
        self.response = response
        # First relation wins when the service repeats a seq
        self._relations: dict[int, SocialSecurityRelation] = {}
        for relation in response.cnis_data.relations:
            self._relations.setdefault(relation.info.seq, relation)

    def build(self) -> list[ContributionPeriodView]:
        return [
            self._build_view(periodo)
            for periodo in self.response.cnis_analysis.consolidado_resumido
        ]

    def _build_view(self, periodo) -> ContributionPeriodView:
        relation = self._relations.get(periodo.seq)
        if relation is None:
            return ContributionPeriodView(
                periodo=periodo,
                indicadores=split_indicadores(periodo.indicadores),
            )

        info = relation.info
        return ContributionPeriodView(
            periodo=periodo,
            origem_do_vinculo=info.origem_do_vinculo,
            data_inicio=info.data_inicio,
            data_fim=info.data_fim,
            indicadores=split_indicadores(periodo.indicadores),
            indicadores_vinculo=split_indicadores(info.indicadores),
            ultimas_remuneracoes=relation.earnings[-ULTIMAS_REMUNERACOES:][::-1],
            has_relation=True,
        )


def build_contribution_history(response: CnisResponse) -> list[ContributionPeriodView]:
    """Join consolidated periods with relation details by ``seq``."""
    return ContributionHistoryBuilder(response).build()
