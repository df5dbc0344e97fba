"""Wire models for the analysis service response.

The ``cnisAnalysis`` object mixes fixed fields with a variable number of
dynamically named retirement rules (``aposentadoriaPorIdade``,
``aposentadoriaPorPontos...``). Those keys are collected once, at
deserialization time, into ``CnisAnalysis.rules`` so the rest of the code
never scans key prefixes.
"""

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

RULE_KEY_PREFIX = "aposentadoria"

Number = Union[int, float]


class WireModel(BaseModel):
    """Base for camelCase wire objects; unknown fields are kept."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def to_wire(self) -> dict[str, Any]:
        """Dump back to the JSON shape received from the service."""
        return self.model_dump(by_alias=True, exclude_unset=True)


# === cnisAnalysis ===


class TimeComponent(WireModel):
    """Duration split as returned by the service (e.g. the client's age)."""

    anos: int = 0
    meses: int = 0
    dias: int = 0
    abreviado: str = ""


class ClientData(WireModel):
    """Client identification echoed by the service."""

    client_name: str
    client_mother_name: Optional[str] = None
    client_nit: Optional[str] = Field(default=None, alias="clientNIT")
    client_federal_document: Optional[str] = None
    client_birth_date: Optional[str] = None


class ContributionTimeData(WireModel):
    abreviado: str = ""
    dias: int = 0
    meses: int = 0
    anos: int = 0


class ContributionTimeEntry(WireModel):
    """Contribution time of one affiliation record."""

    seq: int
    origem_do_vinculo: Optional[str] = None
    tipo_do_vinculo: Optional[str] = None
    indicadores: Optional[str] = None
    dados: Optional[ContributionTimeData] = None


class PeriodDates(WireModel):
    data_inicio: Optional[str] = None
    data_fim: Optional[str] = None


class ContributionTime(WireModel):
    abreviado: str = ""
    data: PeriodDates = Field(default_factory=PeriodDates)


class ValidContributionTime(WireModel):
    abreviado: str = ""


class ConsolidatedEntry(WireModel):
    """One consolidated contribution period."""

    seq: int
    indicadores: Optional[str] = None
    is_pendencia: bool = False
    origem: Optional[str] = None
    contribution_time: ContributionTime = Field(default_factory=ContributionTime)
    valid_contribution_time: ValidContributionTime = Field(
        default_factory=ValidContributionTime
    )
    carencia: int = 0
    tipo: Optional[str] = None


class Eligibility(WireModel):
    """Eligibility verdict of a rule, kept exactly as received."""

    is_eligible: Any = False
    eligibility_date: Any = None
    projected_fulfillment_date: Any = None


class RuleRequirements(WireModel):
    """Requirement flags and targets of a rule.

    Values are kept as received so the body round-trips; a flag that is
    absent or not a boolean is read as "not applicable" by the aggregator.
    """

    atingiu_requisito_de_idade: Any = None
    required_age: Any = None
    atingiu_requisito_de_contribuicao: Any = None
    required_contribution_years: Any = None
    atingiu_requisito_de_pontos: Any = None
    required_points: Any = None


class RetirementRuleRecord(WireModel):
    """One retirement rule as evaluated by the service."""

    type: Any = None
    eligibility: Optional[Eligibility] = Field(default_factory=Eligibility)
    requirements: Optional[RuleRequirements] = Field(default_factory=RuleRequirements)
    points: Any = None
    total_contribution_years: Any = None
    age: Any = None


class CnisAnalysis(WireModel):
    """The ``cnisAnalysis`` object: fixed fields plus the rule mapping."""

    result_type: Optional[str] = Field(default=None, alias="_type")
    idade: TimeComponent
    client_data: ClientData
    tempo_de_contribuicao: list[ContributionTimeEntry] = Field(default_factory=list)
    carencia_total: int
    potencial_valido: Optional[str] = None
    restrito_valido: Optional[str] = None
    duracao_total_em_dias: int
    consolidado_resumido: list[ConsolidatedEntry] = Field(default_factory=list)
    points: Number = 0

    # Rule key (e.g. "aposentadoriaPorIdade") -> rule, in wire order
    rules: dict[str, RetirementRuleRecord] = Field(default_factory=dict, exclude=True)

    @model_validator(mode="before")
    @classmethod
    def collect_rules(cls, data: Any) -> Any:
        """Move every ``aposentadoria*`` key into ``rules``."""
        if not isinstance(data, dict):
            return data
        rule_keys = [k for k in data if isinstance(k, str) and k.startswith(RULE_KEY_PREFIX)]
        if not rule_keys:
            return data
        fixed = {k: v for k, v in data.items() if k not in rule_keys}
        rules = dict(fixed.get("rules") or {})
        rules.update({k: data[k] for k in rule_keys})
        fixed["rules"] = rules
        return fixed

    def to_wire(self) -> dict[str, Any]:
        data = super().to_wire()
        for key, rule in self.rules.items():
            data[key] = rule.to_wire()
        return data


# === cnisData ===


class AffiliateIdentification(WireModel):
    nit: Optional[str] = None
    cpf: Optional[str] = None
    nome: Optional[str] = None
    nome_da_mae: Optional[str] = None
    data_de_nascimento: Optional[str] = None


class AffiliationInfo(WireModel):
    """Header of one social-security relation (vínculo)."""

    seq: int
    origem_do_vinculo: Optional[str] = None
    data_inicio: Optional[str] = None
    data_fim: Optional[str] = None
    indicadores: Optional[str] = None


class EarningHistory(WireModel):
    """One monthly earnings record: competency plus reported remuneration.

    Values are kept raw; entries that cannot be parsed are skipped when
    the wage series is built.
    """

    competencia: Any = None
    remuneracao: Any = None
    indicadores: Any = None


class SocialSecurityRelation(WireModel):
    social_security_affiliation_info: AffiliationInfo
    social_security_affiliation_earnings_history: Optional[list[EarningHistory]] = None

    @property
    def info(self) -> AffiliationInfo:
        return self.social_security_affiliation_info

    @property
    def earnings(self) -> list[EarningHistory]:
        return self.social_security_affiliation_earnings_history or []


class CnisData(WireModel):
    """The ``cnisData`` object: raw data extracted from the CNIS."""

    affiliate_identification: Optional[AffiliateIdentification] = None
    social_security_relations: Optional[list[SocialSecurityRelation]] = None

    @property
    def relations(self) -> list[SocialSecurityRelation]:
        return self.social_security_relations or []


class CnisResponse(WireModel):
    """Root object returned by ``POST /analyze``."""

    cnis_analysis: CnisAnalysis
    cnis_data: CnisData

    def to_wire(self) -> dict[str, Any]:
        data = super().to_wire()
        data["cnisAnalysis"] = self.cnis_analysis.to_wire()
        data["cnisData"] = self.cnis_data.to_wire()
        return data
