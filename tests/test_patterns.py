"""Tests for the scoring, maturity and benchmark patterns."""

import pytest

from ai_readiness.patterns import (
    AggregatedScoringEngine,
    BenchmarkComparison,
    BenchmarkEngine,
    MaturityClassifier,
    MaturityLevel,
    MaturityThreshold,
    WeightedItem,
    WeightedScoringEngine,
    calculate_maturity_level,
    clamp_score,
    create_likert_engine,
    round_half_up,
)


class TestWeightedScoring:
    def test_all_max_answers_score_100(self):
        engine = create_likert_engine()
        result = engine.score([WeightedItem("a", 4, 1.5), WeightedItem("b", 4, 2.0)])
        assert result.percentage == pytest.approx(100.0)

    def test_weights_shift_the_score(self):
        engine = WeightedScoringEngine(max_value=4)
        result = engine.score([WeightedItem("a", 4, 3.0), WeightedItem("b", 1, 1.0)])
        # (12 + 1) / (4 * 4)
        assert result.percentage == pytest.approx(81.25)

    def test_unanswered_items_count_as_zero(self):
        engine = WeightedScoringEngine(max_value=4)
        result = engine.score([WeightedItem("a", 4, 1.0), WeightedItem("b", 0, 1.0)])
        assert result.percentage == pytest.approx(50.0)
        assert result.item_count == 2

    def test_no_weight_scores_zero(self):
        result = WeightedScoringEngine().score([])
        assert result.percentage == 0.0
        assert result.total_weight == 0.0

    def test_details_in_dict(self):
        result = WeightedScoringEngine().score([WeightedItem("a", 2, 1.5)])
        data = result.to_dict()
        assert data["item_details"][0]["weighted_contribution"] == 3.0

    def test_rejects_non_positive_max(self):
        with pytest.raises(ValueError):
            WeightedScoringEngine(max_value=0)


class TestAggregation:
    def test_mean_of_groups(self):
        assert AggregatedScoringEngine().aggregate({"a": 50.0, "b": 100.0}) == 75.0

    def test_empty_is_zero(self):
        assert AggregatedScoringEngine().aggregate({}) == 0.0


class TestHelpers:
    @pytest.mark.parametrize("value,expected", [(0.5, 1), (1.5, 2), (2.5, 3), (79.49, 79), (79.5, 80)])
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected

    def test_clamp_score(self):
        assert clamp_score(-5) == 0.0
        assert clamp_score(105) == 100.0
        assert clamp_score(42) == 42


class TestMaturityClassifier:
    @pytest.mark.parametrize("score,level", [
        (100, MaturityLevel.OPTIMIZING),
        (90, MaturityLevel.OPTIMIZING),
        (89, MaturityLevel.MANAGED),
        (75, MaturityLevel.MANAGED),
        (74.9, MaturityLevel.DEFINED),
        (60, MaturityLevel.DEFINED),
        (59, MaturityLevel.DEVELOPING),
        (45, MaturityLevel.DEVELOPING),
        (44, MaturityLevel.INITIAL),
        (0, MaturityLevel.INITIAL),
    ])
    def test_default_thresholds(self, score, level):
        assert calculate_maturity_level(score) == level

    def test_levels_are_ordered(self):
        ranks = [level.rank for level in MaturityLevel]
        assert ranks == sorted(ranks)

    def test_classify_carries_next_step(self):
        classification = MaturityClassifier().classify(50)
        assert classification.level == MaturityLevel.DEVELOPING
        assert classification.next_step
        assert classification.to_dict()["level_label"] == "Developing"

    def test_custom_thresholds_sorted(self):
        classifier = MaturityClassifier([
            MaturityThreshold(MaturityLevel.INITIAL, 0),
            MaturityThreshold(MaturityLevel.OPTIMIZING, 50),
        ])
        assert classifier.classify_level(50) == MaturityLevel.OPTIMIZING
        assert classifier.classify_level(49) == MaturityLevel.INITIAL

    def test_threshold_summary_highest_first(self):
        summary = MaturityClassifier().get_threshold_summary()
        assert summary[0]["level"] == "optimizing"
        assert summary[-1]["min_score"] == 0


class TestBenchmarks:
    def test_percentile_above_and_below_average(self):
        engine = BenchmarkEngine()
        assert engine.percentile_rank(65) == 75
        assert engine.percentile_rank(64) == 25

    def test_compare(self):
        comparison = BenchmarkEngine().compare(80)
        assert comparison.industry_average == 65
        assert comparison.similar_companies_average == 70
        assert comparison.similar_companies_count == 50

    def test_comparison_dict_round_trip(self):
        comparison = BenchmarkEngine().compare(30)
        data = comparison.to_dict()
        assert data["similar_companies"] == {"average": 70, "count": 50}
        assert BenchmarkComparison.from_dict(data) == comparison

    def test_domain_benchmark(self):
        benchmark = BenchmarkEngine().benchmark_domain(90)
        assert benchmark.percentile_rank == 75
        assert benchmark.similar_companies == 70
