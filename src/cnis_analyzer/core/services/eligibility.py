"""Retirement rule aggregation: eligible rules first, wire order preserved."""

from typing import Any, Optional

from cnis_analyzer.core.models.cnis import (
    CnisResponse,
    Eligibility,
    RetirementRuleRecord,
    RuleRequirements,
)
from cnis_analyzer.core.models.dashboard import RequirementStatus, RetirementRule
from cnis_analyzer.core.models.enums import TipoRequisito
from cnis_analyzer.shared.formatters import parse_iso_date


def requirement_flag(value: Any) -> Optional[bool]:
    """Read a requirement flag; anything but a boolean is "not applicable"."""
    return value if isinstance(value, bool) else None


class EligibilityAggregator:
    """Turns the rule mapping of a response into an ordered list of rules."""

    def __init__(self, response: CnisResponse):
        self.response = response

    def aggregate(self) -> list[RetirementRule]:
        """Return one RetirementRule per rule key, eligible rules first.

        ``sorted`` is stable, so rules with equal eligibility keep the
        order in which the service sent them.
        """
        rules = [
            self._to_rule(key, record)
            for key, record in self.response.cnis_analysis.rules.items()
        ]
        return sorted(rules, key=lambda rule: not rule.is_eligible)

    def _to_rule(self, key: str, record: RetirementRuleRecord) -> RetirementRule:
        req = record.requirements or RuleRequirements()
        eligibility = record.eligibility or Eligibility()
        requirements = [
            RequirementStatus(
                tipo=TipoRequisito.IDADE,
                met=requirement_flag(req.atingiu_requisito_de_idade),
                target=req.required_age,
            ),
            RequirementStatus(
                tipo=TipoRequisito.CONTRIBUICAO,
                met=requirement_flag(req.atingiu_requisito_de_contribuicao),
                target=req.required_contribution_years,
            ),
            RequirementStatus(
                tipo=TipoRequisito.PONTOS,
                met=requirement_flag(req.atingiu_requisito_de_pontos),
                target=req.required_points,
            ),
        ]
        label = record.type if isinstance(record.type, str) and record.type.strip() else key
        return RetirementRule(
            rule_key=key,
            label=label,
            # Only a literal true counts as eligible
            is_eligible=eligibility.is_eligible is True,
            eligibility_date=parse_iso_date(eligibility.eligibility_date),
            projected_fulfillment_date=parse_iso_date(eligibility.projected_fulfillment_date),
            requirements=requirements,
        )


def aggregate_retirement_rules(response: CnisResponse) -> list[RetirementRule]:
    """Extract and order the retirement rules of a response."""
    return EligibilityAggregator(response).aggregate()
