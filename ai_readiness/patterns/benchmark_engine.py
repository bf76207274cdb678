"""
Benchmark Engine Pattern - AI Readiness

Compares readiness scores against reference figures. There is no pool of
real assessment results behind it: the reference figures are fixed
constants, so the comparison is indicative only.

Use cases:
- Overall score vs. industry average and similar companies
- Per-domain benchmark figures
"""

from dataclasses import dataclass
from typing import Dict, Any, Mapping
import logging

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DomainBenchmark:
    """Reference figures shown next to one domain score."""
    industry_average: float
    percentile_rank: int
    similar_companies: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "industry_average": self.industry_average,
            "percentile_rank": self.percentile_rank,
            "similar_companies": self.similar_companies
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DomainBenchmark":
        return cls(
            industry_average=data["industry_average"],
            percentile_rank=data["percentile_rank"],
            similar_companies=data["similar_companies"]
        )


@dataclass(frozen=True)
class BenchmarkComparison:
    """Overall score compared with reference figures."""
    industry_average: float
    percentile_rank: int
    similar_companies_average: float
    similar_companies_count: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "industry_average": self.industry_average,
            "percentile_rank": self.percentile_rank,
            "similar_companies": {
                "average": self.similar_companies_average,
                "count": self.similar_companies_count
            }
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BenchmarkComparison":
        similar = data["similar_companies"]
        return cls(
            industry_average=data["industry_average"],
            percentile_rank=data["percentile_rank"],
            similar_companies_average=similar["average"],
            similar_companies_count=similar["count"]
        )


class BenchmarkEngine:
    """
    Placeholder benchmarking against fixed reference figures.

    Example:
    ```python
    engine = BenchmarkEngine()

    comparison = engine.compare(72)
    print(comparison.percentile_rank)  # 75
    ```
    """

    INDUSTRY_AVERAGE = 65
    SIMILAR_COMPANIES_AVERAGE = 70
    SIMILAR_COMPANIES_COUNT = 50
    PERCENTILE_ABOVE_AVERAGE = 75
    PERCENTILE_BELOW_AVERAGE = 25

    def __init__(
        self,
        industry_average: float = INDUSTRY_AVERAGE,
        similar_companies_average: float = SIMILAR_COMPANIES_AVERAGE,
        similar_companies_count: int = SIMILAR_COMPANIES_COUNT
    ):
        self.industry_average = industry_average
        self.similar_companies_average = similar_companies_average
        self.similar_companies_count = similar_companies_count

    def percentile_rank(self, score: float) -> int:
        """Coarse percentile: above or below the industry average."""
        if score >= self.industry_average:
            return self.PERCENTILE_ABOVE_AVERAGE
        return self.PERCENTILE_BELOW_AVERAGE

    def compare(self, score: float) -> BenchmarkComparison:
        """Benchmark the overall score."""
        return BenchmarkComparison(
            industry_average=self.industry_average,
            percentile_rank=self.percentile_rank(score),
            similar_companies_average=self.similar_companies_average,
            similar_companies_count=self.similar_companies_count
        )

    def benchmark_domain(self, score: float) -> DomainBenchmark:
        """Benchmark a single domain score."""
        return DomainBenchmark(
            industry_average=self.industry_average,
            percentile_rank=self.percentile_rank(score),
            similar_companies=self.similar_companies_average
        )


def create_placeholder_benchmarks() -> BenchmarkEngine:
    """Create the benchmark engine with the built-in reference figures."""
    return BenchmarkEngine()
