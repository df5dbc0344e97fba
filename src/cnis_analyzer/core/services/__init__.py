"""Domain services for CNIS Analyzer."""

from cnis_analyzer.core.models.dashboard import recent_wages
from cnis_analyzer.core.services.dashboard import build_dashboard
from cnis_analyzer.core.services.eligibility import (
    EligibilityAggregator,
    aggregate_retirement_rules,
)
from cnis_analyzer.core.services.history import (
    ContributionHistoryBuilder,
    build_contribution_history,
    split_indicadores,
)
from cnis_analyzer.core.services.wage_series import (
    WageSeriesFlattener,
    flatten_wage_history,
    parse_competencia,
    parse_remuneracao,
)

__all__ = [
    "ContributionHistoryBuilder",
    "EligibilityAggregator",
    "WageSeriesFlattener",
    "aggregate_retirement_rules",
    "build_contribution_history",
    "build_dashboard",
    "flatten_wage_history",
    "parse_competencia",
    "parse_remuneracao",
    "recent_wages",
    "split_indicadores",
]
