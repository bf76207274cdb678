"""
Weighted Scoring Pattern - AI Readiness

Weighted Likert scoring for questionnaire domains. Each answered item
contributes value x weight; the sum is normalized against the maximum
answer value so a domain lands on a 0-100 scale.

Use cases:
- Per-domain readiness scores
- Equal-weight aggregation of domain scores into an overall score
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Any
import logging
import math

logger = logging.getLogger(__name__)


@dataclass
class WeightedItem:
    """A single scored item."""
    item_id: str
    value: float  # 0 when unanswered
    weight: float


@dataclass
class WeightedScore:
    """Result of scoring a group of items."""
    weighted_sum: float
    total_weight: float
    percentage: float  # 0-100
    item_count: int
    item_details: List[Dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "weighted_sum": round(self.weighted_sum, 4),
            "total_weight": round(self.total_weight, 4),
            "percentage": round(self.percentage, 2),
            "item_count": self.item_count,
            "item_details": self.item_details
        }


class WeightedScoringEngine:
    """
    Scores groups of weighted Likert answers.

    Example:
    ```python
    engine = WeightedScoringEngine(max_value=4)

    result = engine.score([
        WeightedItem("data-storage", value=3, weight=1.8),
        WeightedItem("advanced-data-integration", value=4, weight=2.16),
    ])

    print(f"Domain score: {result.percentage:.1f}")
    ```
    """

    def __init__(self, max_value: float = 4.0):
        if max_value <= 0:
            raise ValueError("max_value must be positive")
        self.max_value = max_value

    def score(self, items: Iterable[WeightedItem]) -> WeightedScore:
        """Calculate the weighted percentage for a group of items."""
        weighted_sum = 0.0
        total_weight = 0.0
        details = []

        for item in items:
            contribution = item.value * item.weight
            weighted_sum += contribution
            total_weight += item.weight
            details.append({
                "item_id": item.item_id,
                "value": item.value,
                "weight": round(item.weight, 4),
                "weighted_contribution": round(contribution, 4)
            })

        if total_weight > 0:
            percentage = (weighted_sum / (total_weight * self.max_value)) * 100
        else:
            percentage = 0.0

        return WeightedScore(
            weighted_sum=weighted_sum,
            total_weight=total_weight,
            percentage=clamp_score(percentage),
            item_count=len(details),
            item_details=details
        )


class AggregatedScoringEngine:
    """
    Combines group scores into one overall score.

    Groups are weighted equally: importance already flows through the
    item weights inside each group.
    """

    def aggregate(self, scores: Dict[str, float]) -> float:
        """Unweighted mean of the given group scores; 0 when there are none."""
        if not scores:
            logger.warning("No group scores to aggregate")
            return 0.0
        return clamp_score(sum(scores.values()) / len(scores))


def clamp_score(score: float) -> float:
    """Keep a score inside 0-100."""
    return max(0.0, min(100.0, score))


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up, as a UI would display it."""
    return math.floor(value + 0.5)


def create_likert_engine() -> WeightedScoringEngine:
    """Create the scoring engine for the 4-point readiness scale."""
    return WeightedScoringEngine(max_value=4)
