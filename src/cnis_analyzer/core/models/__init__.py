"""Domain models for CNIS analysis."""

from cnis_analyzer.core.models.cnis import (
    RULE_KEY_PREFIX,
    AffiliationInfo,
    CnisAnalysis,
    CnisData,
    CnisResponse,
    ConsolidatedEntry,
    EarningHistory,
    RetirementRuleRecord,
    SocialSecurityRelation,
)
from cnis_analyzer.core.models.dashboard import (
    ClientHeader,
    ContributionPeriodView,
    Dashboard,
    RequirementStatus,
    RetirementRule,
    SummaryStats,
    WagePoint,
)
from cnis_analyzer.core.models.enums import Genero, TipoRequisito, TipoSegurado
from cnis_analyzer.core.models.request import AnalysisRequest, CnisDocument

__all__ = [
    "RULE_KEY_PREFIX",
    "AffiliationInfo",
    "AnalysisRequest",
    "ClientHeader",
    "CnisAnalysis",
    "CnisData",
    "CnisDocument",
    "CnisResponse",
    "ConsolidatedEntry",
    "ContributionPeriodView",
    "Dashboard",
    "EarningHistory",
    "Genero",
    "RequirementStatus",
    "RetirementRule",
    "RetirementRuleRecord",
    "SocialSecurityRelation",
    "SummaryStats",
    "TipoRequisito",
    "TipoSegurado",
    "WagePoint",
]
