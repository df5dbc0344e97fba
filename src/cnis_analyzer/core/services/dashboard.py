"""Dashboard assembly from a CnisResponse."""

from cnis_analyzer.core.models.cnis import CnisResponse
from cnis_analyzer.core.models.dashboard import ClientHeader, Dashboard, SummaryStats
from cnis_analyzer.core.services.eligibility import aggregate_retirement_rules
from cnis_analyzer.core.services.history import build_contribution_history
from cnis_analyzer.core.services.wage_series import WageSeriesFlattener
from cnis_analyzer.shared.formatters import format_duration_days
from cnis_analyzer.shared.validators import format_cpf


def build_dashboard(response: CnisResponse) -> Dashboard:
    """Compute every derived view of a response.

    Pure function: calling it twice on the same response gives equal
    dashboards.
    """
    analysis = response.cnis_analysis
    client = analysis.client_data
    wages = WageSeriesFlattener(response.cnis_data)
    salarios = wages.flatten()

    return Dashboard(
        cliente=ClientHeader(
            nome=client.client_name,
            cpf=format_cpf(client.client_federal_document) if client.client_federal_document else "-",
            nit=client.client_nit or "-",
        ),
        resumo=SummaryStats(
            idade_abreviada=analysis.idade.abreviado,
            idade_anos=analysis.idade.anos,
            tempo_contribuicao=format_duration_days(analysis.duracao_total_em_dias),
            duracao_total_em_dias=analysis.duracao_total_em_dias,
            carencia_meses=analysis.carencia_total,
            pontos=analysis.points,
        ),
        regras=aggregate_retirement_rules(response),
        salarios=salarios,
        salarios_ignorados=wages.skipped,
        historico=build_contribution_history(response),
    )
