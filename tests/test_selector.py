"""Tests for question selection."""

import pytest

from ai_readiness.assessment.models import CompanySize, Industry, OrganizationProfile
from ai_readiness.assessment.questions import get_question_by_id
from ai_readiness.assessment.selector import effective_weight, reachable_answer_ids, select_questions


def _ids(questions):
    return [wq.id for wq in questions]


ALL_PROFILES = [
    OrganizationProfile(industry=industry, company_size=size)
    for industry in Industry
    for size in CompanySize
]


class TestInitialSelection:
    @pytest.mark.parametrize("profile", ALL_PROFILES, ids=lambda p: f"{p.industry.value}-{p.company_size.value}")
    def test_only_applicable_ungated_questions(self, profile):
        for wq in select_questions(profile, {}):
            question = wq.question
            assert not question.dependencies
            assert question.industries is None or profile.industry in question.industries
            assert question.company_sizes is None or profile.company_size in question.company_sizes

    def test_tech_enterprise(self, tech_enterprise):
        assert _ids(select_questions(tech_enterprise, {})) == [
            "data-storage",
            "data-quality",
            "technical-infrastructure",
            "talent-readiness",
            "change-management",
            "ai-center-of-excellence",
            "ethics-governance",
            "business-strategy",
            "process-maturity",
            "data-security",
        ]

    def test_healthcare_small_gets_size_and_industry_questions(self, healthcare_small):
        ids = _ids(select_questions(healthcare_small, {}))
        assert "compute-sourcing" in ids
        assert "regulatory-reporting" in ids
        assert "ai-center-of-excellence" not in ids

    def test_invalid_profile_returns_empty(self):
        assert select_questions(None, {}) == []
        assert select_questions({"industry": "technology"}, {}) == []


class TestDependencies:
    def test_hipaa_unlocked_by_exact_answer(self, healthcare_small):
        ids = _ids(select_questions(healthcare_small, {"data-storage": 3}))
        assert "healthcare-data-privacy" in ids
        assert "advanced-data-integration" in ids

    def test_hipaa_not_unlocked_by_lower_answer(self, healthcare_small):
        ids = _ids(select_questions(healthcare_small, {"data-storage": 2}))
        assert "healthcare-data-privacy" not in ids

    def test_hipaa_not_unlocked_by_higher_answer(self, healthcare_small):
        # exact match, not a threshold
        ids = _ids(select_questions(healthcare_small, {"data-storage": 4}))
        assert "healthcare-data-privacy" not in ids

    def test_other_industry_follow_up_not_offered(self, tech_enterprise):
        ids = _ids(select_questions(tech_enterprise, {"data-storage": 3}))
        assert "healthcare-data-privacy" not in ids
        assert "advanced-data-integration" in ids

    def test_unlocked_questions_follow_catalog_order(self, healthcare_small):
        ids = _ids(select_questions(healthcare_small, {"data-storage": 3}))
        assert ids[-2:] == ["healthcare-data-privacy", "advanced-data-integration"]


class TestSelectionProperties:
    def test_idempotent(self, healthcare_small):
        answers = {"data-storage": 3, "technical-infrastructure": 3}
        assert select_questions(healthcare_small, answers) == select_questions(healthcare_small, answers)

    def test_monotonic_unlocking(self, healthcare_small):
        smaller = {"data-storage": 3}
        larger = {"data-storage": 3, "technical-infrastructure": 3, "healthcare-data-privacy": 4}
        before = set(_ids(select_questions(healthcare_small, smaller)))
        after = set(_ids(select_questions(healthcare_small, larger)))
        assert before <= after
        assert "mlops-practices" in after - before

    def test_answered_question_retained_when_dependency_breaks(self, healthcare_small):
        answers = {"data-storage": 2, "healthcare-data-privacy": 4}
        ids = _ids(select_questions(healthcare_small, answers, retain_ids={"healthcare-data-privacy"}))
        assert "healthcare-data-privacy" in ids
        assert "advanced-data-integration" not in ids

    def test_answered_question_dropped_without_retention(self, healthcare_small):
        answers = {"data-storage": 2, "healthcare-data-privacy": 4}
        ids = _ids(select_questions(healthcare_small, answers))
        assert "healthcare-data-privacy" not in ids

    def test_answer_alone_does_not_unlock_gated_question(self, healthcare_small):
        answers = {"healthcare-data-privacy": 4, "advanced-data-integration": 4}
        ids = _ids(select_questions(healthcare_small, answers))
        assert "healthcare-data-privacy" not in ids
        assert "advanced-data-integration" not in ids

    def test_only_listed_ids_are_retained(self, healthcare_small):
        answers = {"data-storage": 2, "healthcare-data-privacy": 4, "advanced-data-integration": 4}
        ids = _ids(select_questions(healthcare_small, answers, retain_ids={"advanced-data-integration"}))
        assert "advanced-data-integration" in ids
        assert "healthcare-data-privacy" not in ids


class TestEffectiveWeight:
    def test_weight_uses_both_multipliers(self, healthcare_small):
        question = get_question_by_id("data-storage")
        assert effective_weight(question, healthcare_small) == pytest.approx(1.5 * 1.2 * 0.9)

    def test_selected_question_carries_effective_weight(self, tech_enterprise):
        first = select_questions(tech_enterprise, {})[0]
        assert first.effective_weight == pytest.approx(1.5 * 1.3 * 1.2)

    def test_catalog_weight_unchanged(self, tech_enterprise):
        select_questions(tech_enterprise, {})
        assert get_question_by_id("data-storage").weight.base_weight == 1.5

    def test_selected_question_wraps_catalog_entry(self, tech_enterprise):
        first = select_questions(tech_enterprise, {})[0]
        assert first.question is get_question_by_id("data-storage")


class TestReachableAnswers:
    def test_gated_answer_needs_its_gate_answered(self, healthcare_small):
        answers = {"healthcare-data-privacy": 4, "data-quality": 2}
        assert reachable_answer_ids(healthcare_small, answers) == {"data-quality"}

    def test_changed_gate_still_reachable_when_retaining(self, healthcare_small):
        answers = {"data-storage": 2, "healthcare-data-privacy": 4}
        assert reachable_answer_ids(healthcare_small, answers) == {"data-storage", "healthcare-data-privacy"}

    def test_changed_gate_unreachable_without_retaining(self, healthcare_small):
        answers = {"data-storage": 2, "healthcare-data-privacy": 4}
        assert reachable_answer_ids(healthcare_small, answers, retain_answered=False) == {"data-storage"}

    def test_met_gate_reachable_without_retaining(self, healthcare_small):
        answers = {"data-storage": 3, "healthcare-data-privacy": 4}
        assert reachable_answer_ids(healthcare_small, answers, retain_answered=False) == {
            "data-storage",
            "healthcare-data-privacy",
        }

    def test_other_industry_questions_never_reachable(self, tech_enterprise):
        answers = {"data-storage": 3, "healthcare-data-privacy": 4}
        assert reachable_answer_ids(tech_enterprise, answers) == {"data-storage"}
