"""
Patterns Module for AI Readiness

Reusable analytical patterns used by the assessment scoring engine.
"""

from .maturity_classification import (
    MaturityClassifier,
    MaturityClassification,
    MaturityLevel,
    MaturityThreshold,
    calculate_maturity_level
)

from .weighted_scoring import (
    WeightedScoringEngine,
    AggregatedScoringEngine,
    WeightedItem,
    WeightedScore,
    clamp_score,
    round_half_up,
    create_likert_engine
)

from .benchmark_engine import (
    BenchmarkEngine,
    BenchmarkComparison,
    DomainBenchmark,
    create_placeholder_benchmarks
)

__all__ = [
    # Maturity Classification
    'MaturityClassifier',
    'MaturityClassification',
    'MaturityLevel',
    'MaturityThreshold',
    'calculate_maturity_level',
    # Weighted Scoring
    'WeightedScoringEngine',
    'AggregatedScoringEngine',
    'WeightedItem',
    'WeightedScore',
    'clamp_score',
    'round_half_up',
    'create_likert_engine',
    # Benchmarking
    'BenchmarkEngine',
    'BenchmarkComparison',
    'DomainBenchmark',
    'create_placeholder_benchmarks',
]
