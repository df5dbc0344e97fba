"""Tests for retirement rule aggregation."""

import copy
from datetime import date

import pytest

from cnis_analyzer.core.models import CnisResponse, TipoRequisito
from cnis_analyzer.core.models.dashboard import ADQUIRIDO, NAO_ATINGIDO
from cnis_analyzer.core.services import EligibilityAggregator, aggregate_retirement_rules


def make_rule(is_eligible: bool, projected=None, **requirements) -> dict:
    """Helper to build a rule object in wire shape."""
    return {
        "type": None,
        "eligibility": {
            "isEligible": is_eligible,
            "eligibilityDate": None,
            "projectedFulfillmentDate": projected,
        },
        "requirements": requirements,
    }


def with_rules(payload: dict, rules: dict) -> CnisResponse:
    """Replace the rules of a payload and parse it."""
    payload = copy.deepcopy(payload)
    analysis = payload["cnisAnalysis"]
    for key in [k for k in analysis if k.startswith("aposentadoria")]:
        del analysis[key]
    analysis.update(rules)
    return CnisResponse.model_validate(payload)


class TestAggregation:
    """Tests for EligibilityAggregator ordering."""

    def test_one_rule_per_prefixed_key(self, sample_response):
        rules = aggregate_retirement_rules(sample_response)
        assert len(rules) == 5
        assert {r.rule_key for r in rules} == set(sample_response.cnis_analysis.rules)

    def test_eligible_first_in_wire_order(self, sample_response):
        rules = aggregate_retirement_rules(sample_response)
        assert [r.rule_key for r in rules] == [
            "aposentadoriaPorPontos",
            "aposentadoriaIdadeMinimaProgressiva",
            "aposentadoriaPorIdade",
            "aposentadoriaPedagio50",
            "aposentadoriaPedagio100",
        ]

    def test_no_ineligible_before_eligible(self, sample_response):
        flags = [r.is_eligible for r in aggregate_retirement_rules(sample_response)]
        assert flags == sorted(flags, reverse=True)

    def test_stable_when_nobody_is_eligible(self, sample_payload):
        response = with_rules(
            sample_payload,
            {
                "aposentadoriaC": make_rule(False),
                "aposentadoriaA": make_rule(False),
                "aposentadoriaB": make_rule(False),
            },
        )
        keys = [r.rule_key for r in aggregate_retirement_rules(response)]
        assert keys == ["aposentadoriaC", "aposentadoriaA", "aposentadoriaB"]

    def test_no_rules(self, sample_payload):
        response = with_rules(sample_payload, {})
        assert aggregate_retirement_rules(response) == []

    def test_only_prefixed_keys_are_rules(self, sample_payload):
        response = with_rules(sample_payload, {"aposentadoriaX": make_rule(True)})
        rules = EligibilityAggregator(response).aggregate()
        assert [r.rule_key for r in rules] == ["aposentadoriaX"]

    def test_label_falls_back_to_key(self, sample_payload):
        response = with_rules(sample_payload, {"aposentadoriaX": make_rule(True)})
        assert aggregate_retirement_rules(response)[0].label == "aposentadoriaX"


class TestRuleStatus:
    """Tests for rule status and pending requirements."""

    def _by_key(self, response) -> dict:
        return {r.rule_key: r for r in aggregate_retirement_rules(response)}

    def test_eligible_rule(self, sample_response):
        rule = self._by_key(sample_response)["aposentadoriaPorPontos"]
        assert rule.status == ADQUIRIDO
        assert rule.status_resumido == ADQUIRIDO
        assert rule.eligibility_date == date(2023, 1, 10)

    def test_projected_date(self, sample_response):
        rule = self._by_key(sample_response)["aposentadoriaPorIdade"]
        assert rule.projected_fulfillment_date == date(2026, 6, 23)
        assert rule.status == "23/06/2026"
        assert rule.status_resumido == "2026"

    def test_without_projection(self, sample_response):
        rule = self._by_key(sample_response)["aposentadoriaPedagio50"]
        assert rule.status == NAO_ATINGIDO
        assert rule.status_resumido == NAO_ATINGIDO

    def test_pending_requirements(self, sample_response):
        rule = self._by_key(sample_response)["aposentadoriaPorIdade"]
        pending = rule.pending_requirements
        assert [r.tipo for r in pending] == [TipoRequisito.IDADE]
        assert pending[0].descricao == "Idade: 65 anos"
        assert rule.needs_manual_check is False

    def test_contribution_description(self, sample_response):
        rule = self._by_key(sample_response)["aposentadoriaPedagio50"]
        assert [r.descricao for r in rule.pending_requirements] == ["Contribuição: 30 anos"]

    def test_ineligible_without_false_flag_needs_manual_check(self, sample_response):
        rule = self._by_key(sample_response)["aposentadoriaPedagio100"]
        assert rule.is_eligible is False
        assert rule.pending_requirements == []
        assert rule.needs_manual_check is True

    def test_absent_flags_are_not_applicable(self, sample_payload):
        response = with_rules(
            sample_payload,
            {"aposentadoriaX": make_rule(False, atingiuRequisitoDePontos=False, requiredPoints=100)},
        )
        rule = aggregate_retirement_rules(response)[0]
        by_tipo = {r.tipo: r for r in rule.requirements}
        assert by_tipo[TipoRequisito.IDADE].met is None
        assert by_tipo[TipoRequisito.CONTRIBUICAO].met is None
        assert by_tipo[TipoRequisito.PONTOS].pending is True
        assert [r.descricao for r in rule.pending_requirements] == ["Pontos: 100 pts"]

    def test_eligible_rule_never_needs_manual_check(self, sample_payload):
        response = with_rules(sample_payload, {"aposentadoriaX": make_rule(True)})
        assert aggregate_retirement_rules(response)[0].needs_manual_check is False


class TestOddRuleValues:
    """Rule fields of an unexpected shape never reject the response."""

    def test_non_boolean_flag_is_not_applicable(self, sample_payload):
        response = with_rules(
            sample_payload,
            {"aposentadoriaX": make_rule(False, atingiuRequisitoDeIdade="N/A", requiredAge=62)},
        )
        rule = aggregate_retirement_rules(response)[0]
        assert rule.requirements[0].met is None
        assert rule.pending_requirements == []
        assert rule.needs_manual_check is True

    def test_structured_target_is_displayed(self, sample_payload):
        response = with_rules(
            sample_payload,
            {
                "aposentadoriaX": make_rule(
                    False, atingiuRequisitoDeIdade=False, requiredAge={"anos": 65, "meses": 0}
                )
            },
        )
        rule = aggregate_retirement_rules(response)[0]
        assert rule.pending_requirements[0].target == {"anos": 65, "meses": 0}
        assert rule.pending_requirements[0].descricao.startswith("Idade: ")

    @pytest.mark.parametrize("value", [None, "true", 1])
    def test_non_boolean_eligibility_is_ineligible(self, sample_payload, value):
        payload_rule = make_rule(False)
        payload_rule["eligibility"]["isEligible"] = value
        response = with_rules(
            sample_payload,
            {"aposentadoriaA": payload_rule, "aposentadoriaB": make_rule(True)},
        )
        rules = aggregate_retirement_rules(response)
        assert [r.rule_key for r in rules] == ["aposentadoriaB", "aposentadoriaA"]
        assert rules[1].is_eligible is False

    def test_missing_eligibility_and_requirements(self, sample_payload):
        response = with_rules(
            sample_payload,
            {"aposentadoriaX": {"type": "Regra X", "eligibility": None, "requirements": None}},
        )
        rule = aggregate_retirement_rules(response)[0]
        assert rule.label == "Regra X"
        assert rule.is_eligible is False
        assert rule.status == NAO_ATINGIDO
        assert all(r.met is None for r in rule.requirements)

    def test_unparsable_dates_are_ignored(self, sample_payload):
        response = with_rules(
            sample_payload,
            {"aposentadoriaX": make_rule(False, projected=20260623)},
        )
        rule = aggregate_retirement_rules(response)[0]
        assert rule.projected_fulfillment_date is None
        assert rule.status == NAO_ATINGIDO

    def test_non_string_type_falls_back_to_key(self, sample_payload):
        payload_rule = make_rule(True)
        payload_rule["type"] = {"codigo": 41}
        response = with_rules(sample_payload, {"aposentadoriaX": payload_rule})
        assert aggregate_retirement_rules(response)[0].label == "aposentadoriaX"
