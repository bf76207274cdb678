"""Tests for the question catalog."""

import pytest

from ai_readiness.assessment.errors import CatalogError
from ai_readiness.assessment.models import Domain, Industry, Question
from ai_readiness.assessment.questions import (
    BASE_QUESTIONS,
    DEFAULT_RECOMMENDATIONS,
    DOMAINS,
    IMPLEMENTATION_MILESTONES,
    INDUSTRY_QUESTIONS,
    MATURITY_QUESTIONS,
    all_catalog_questions,
    get_question_by_id,
    get_questions_by_domain,
    get_question_count,
)


def _definition(values):
    return {
        "id": "sample",
        "domain": "data_quality",
        "text": "Sample?",
        "weight": {"base_weight": 1.0, "industry": {}, "company_size": {}},
        "options": [
            {"value": v, "label": str(v), "description": str(v)} for v in values
        ],
    }


class TestCatalogInvariants:
    def test_question_ids_are_unique(self):
        ids = [q.id for q in all_catalog_questions()]
        assert len(ids) == len(set(ids))

    def test_option_values_use_the_likert_scale(self):
        for question in all_catalog_questions():
            assert set(question.option_values) in ({1, 2, 3, 4}, {1, 4}), question.id

    def test_base_questions_have_four_options(self):
        for question in BASE_QUESTIONS:
            assert question.option_values == (1, 2, 3, 4), question.id

    def test_dependencies_reference_catalog_questions(self):
        ids = {q.id for q in all_catalog_questions()}
        for question in all_catalog_questions():
            for dep in question.dependencies:
                assert dep.question_id in ids, question.id

    def test_every_domain_has_a_base_question(self):
        domains = {q.domain for q in BASE_QUESTIONS}
        assert domains == set(Domain)

    def test_every_domain_has_a_default_recommendation(self):
        assert set(DEFAULT_RECOMMENDATIONS) == set(Domain)

    def test_every_domain_has_metadata(self):
        assert set(DOMAINS) == {d.value for d in Domain}

    def test_every_industry_has_follow_ups(self):
        assert set(INDUSTRY_QUESTIONS) == set(Industry)

    def test_follow_ups_are_gated(self):
        for questions in INDUSTRY_QUESTIONS.values():
            for question in questions:
                assert question.dependencies
        for question in MATURITY_QUESTIONS:
            assert question.dependencies

    def test_milestones(self):
        assert [m["month"] for m in IMPLEMENTATION_MILESTONES] == [3, 6, 9, 12]


class TestCatalogImmutability:
    def test_question_is_frozen(self):
        question = BASE_QUESTIONS[0]
        with pytest.raises(AttributeError):
            question.text = "changed"

    def test_weight_multipliers_are_read_only(self):
        question = BASE_QUESTIONS[0]
        with pytest.raises(TypeError):
            question.weight.industry[Industry.RETAIL] = 5.0


class TestQuestionFromDict:
    def test_accepts_two_point_scale(self):
        question = Question.from_dict(_definition([1, 4]))
        assert question.option_values == (1, 4)

    def test_rejects_five_point_scale(self):
        with pytest.raises(CatalogError):
            Question.from_dict(_definition([1, 2, 3, 4, 5]))

    def test_rejects_partial_scale(self):
        with pytest.raises(CatalogError):
            Question.from_dict(_definition([1, 2, 3]))

    def test_rejects_duplicate_values(self):
        with pytest.raises(CatalogError):
            Question.from_dict(_definition([1, 1, 4]))


class TestLookups:
    def test_get_question_by_id(self):
        assert get_question_by_id("data-storage").domain == Domain.DATA_INFRASTRUCTURE

    def test_get_question_by_id_missing(self):
        assert get_question_by_id("nope") is None

    def test_get_questions_by_domain(self):
        ids = [q.id for q in get_questions_by_domain(Domain.TECHNICAL_INFRASTRUCTURE)]
        assert "technical-infrastructure" in ids
        assert "mlops-practices" in ids

    def test_question_count(self):
        expected = len(BASE_QUESTIONS) + len(MATURITY_QUESTIONS) + sum(
            len(qs) for qs in INDUSTRY_QUESTIONS.values()
        )
        assert get_question_count() == expected

    def test_get_option_by_value(self):
        question = get_question_by_id("healthcare-data-privacy")
        assert question.get_option(4).label == "Advanced"
        assert question.get_option(2) is None
