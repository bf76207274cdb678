"""
Maturity Classification Pattern - AI Readiness

Converts continuous 0-100 readiness scores into discrete maturity levels.
The same step function applies to the overall score and to every domain
score.

Use cases:
- Overall AI maturity level
- Per-domain maturity levels
- Labels and colors for result displays
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Any
from enum import Enum
import logging

logger = logging.getLogger(__name__)


class MaturityLevel(Enum):
    """Maturity levels, lowest to highest."""
    INITIAL = "initial"
    DEVELOPING = "developing"
    DEFINED = "defined"
    MANAGED = "managed"
    OPTIMIZING = "optimizing"

    @property
    def rank(self) -> int:
        """Numeric rank (higher = more mature)."""
        return {
            MaturityLevel.INITIAL: 1,
            MaturityLevel.DEVELOPING: 2,
            MaturityLevel.DEFINED: 3,
            MaturityLevel.MANAGED: 4,
            MaturityLevel.OPTIMIZING: 5
        }[self]

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def color(self) -> str:
        """Standard color for visualization."""
        return {
            MaturityLevel.INITIAL: "#dc3545",     # Red
            MaturityLevel.DEVELOPING: "#fd7e14",  # Orange
            MaturityLevel.DEFINED: "#ffc107",     # Yellow
            MaturityLevel.MANAGED: "#28a745",     # Green
            MaturityLevel.OPTIMIZING: "#17a2b8"   # Blue/Teal
        }[self]


@dataclass
class MaturityThreshold:
    """Lowest score that reaches a level."""
    level: MaturityLevel
    min_score: float
    description: str = ""
    next_step: str = ""


@dataclass
class MaturityClassification:
    """Result of classifying a score."""
    score: float
    level: MaturityLevel
    description: str
    next_step: str
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "level": self.level.value,
            "level_label": self.level.label,
            "level_rank": self.level.rank,
            "level_color": self.level.color,
            "description": self.description,
            "next_step": self.next_step,
            "metadata": self.metadata
        }


class MaturityClassifier:
    """
    Classifies readiness scores into maturity levels.

    Example:
    ```python
    classifier = MaturityClassifier()

    classifier.classify_level(90)   # MaturityLevel.OPTIMIZING
    classifier.classify_level(89)   # MaturityLevel.MANAGED
    classifier.classify_level(44)   # MaturityLevel.INITIAL
    ```
    """

    DEFAULT_THRESHOLDS = [
        MaturityThreshold(MaturityLevel.OPTIMIZING, 90, "AI is embedded and continuously improved",
                          "Share practices and push into new AI capabilities"),
        MaturityThreshold(MaturityLevel.MANAGED, 75, "AI capabilities are measured and managed",
                          "Scale what works across the organization"),
        MaturityThreshold(MaturityLevel.DEFINED, 60, "Documented practices are in place",
                          "Introduce metrics and consistent oversight"),
        MaturityThreshold(MaturityLevel.DEVELOPING, 45, "Foundations exist with notable gaps",
                          "Close the largest gaps before scaling"),
        MaturityThreshold(MaturityLevel.INITIAL, 0, "Ad-hoc or no AI readiness practices",
                          "Establish basic data, skills and governance foundations"),
    ]

    def __init__(self, thresholds: Optional[List[MaturityThreshold]] = None):
        self.thresholds = sorted(
            thresholds or self.DEFAULT_THRESHOLDS,
            key=lambda t: t.min_score,
            reverse=True
        )
        self._validate_thresholds()

    def _validate_thresholds(self) -> None:
        """Validate threshold configuration."""
        if not self.thresholds:
            raise ValueError("At least one threshold must be defined")

        if self.thresholds[-1].min_score > 0:
            logger.warning(
                f"Lowest maturity threshold starts at {self.thresholds[-1].min_score}; "
                f"lower scores fall back to {self.thresholds[-1].level.value}"
            )

    def _match(self, score: float) -> MaturityThreshold:
        for threshold in self.thresholds:
            if score >= threshold.min_score:
                return threshold
        return self.thresholds[-1]

    def classify_level(self, score: float) -> MaturityLevel:
        """Map a score to its maturity level."""
        return self._match(score).level

    def classify(self, score: float, metadata: Optional[Dict[str, Any]] = None) -> MaturityClassification:
        """Classify a score with description and suggested next step."""
        threshold = self._match(score)
        return MaturityClassification(
            score=score,
            level=threshold.level,
            description=threshold.description,
            next_step=threshold.next_step,
            metadata=metadata or {}
        )

    def get_threshold_summary(self) -> List[Dict[str, Any]]:
        """Thresholds for display, highest level first."""
        return [
            {
                "level": t.level.value,
                "min_score": t.min_score,
                "description": t.description
            }
            for t in self.thresholds
        ]


_default_classifier = MaturityClassifier()


def calculate_maturity_level(score: float) -> MaturityLevel:
    """Default score -> maturity level step function."""
    return _default_classifier.classify_level(score)
