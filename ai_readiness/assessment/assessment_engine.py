"""
AI Readiness Assessment Engine

Scores assessment responses and derives the full result:
- Domain scores (0-100) and an overall score
- Maturity levels
- Cost estimates and implementation timeframe
- Prioritized recommendations
"""

from dataclasses import dataclass, field
from typing import Dict, List, Any, Mapping, Optional, Sequence
import logging
import random

from .errors import InvalidAnswerValue
from .models import Domain, MAX_ANSWER_VALUE, OrganizationProfile, WeightedQuestion
from .questions import DEFAULT_RECOMMENDATIONS, IMPLEMENTATION_MILESTONES
from ..patterns.benchmark_engine import (
    BenchmarkComparison,
    BenchmarkEngine,
    DomainBenchmark,
    create_placeholder_benchmarks
)
from ..patterns.maturity_classification import MaturityClassifier, MaturityLevel
from ..patterns.weighted_scoring import (
    AggregatedScoringEngine,
    WeightedItem,
    WeightedScoringEngine,
    round_half_up
)

logger = logging.getLogger(__name__)


@dataclass
class DomainScore:
    """Score for a single readiness domain"""
    domain: Domain
    score: float  # 0-100
    maturity_level: MaturityLevel
    recommendations: List[str]
    benchmarks: DomainBenchmark
    answered_questions: int
    total_questions: int
    max_score: float = 100.0

    @property
    def percentage(self) -> float:
        return self.score

    def to_dict(self) -> Dict[str, Any]:
        return {
            "domain": self.domain.value,
            "score": self.score,
            "max_score": self.max_score,
            "percentage": self.percentage,
            "maturity_level": self.maturity_level.value,
            "recommendations": list(self.recommendations),
            "benchmarks": self.benchmarks.to_dict(),
            "answered_questions": self.answered_questions,
            "total_questions": self.total_questions
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DomainScore":
        return cls(
            domain=Domain(data["domain"]),
            score=data["score"],
            max_score=data.get("max_score", 100.0),
            maturity_level=MaturityLevel(data["maturity_level"]),
            recommendations=list(data["recommendations"]),
            benchmarks=DomainBenchmark.from_dict(data["benchmarks"]),
            answered_questions=data.get("answered_questions", 0),
            total_questions=data.get("total_questions", 0)
        )


@dataclass
class CostEstimate:
    """Estimated implementation spend, bucketed by category"""
    infrastructure: float = 0.0
    training: float = 0.0
    implementation: float = 0.0
    roi_optimistic: float = 2.5
    roi_conservative: float = 1.5
    roi_timeframe: int = 24  # months

    @property
    def total(self) -> float:
        return self.infrastructure + self.training + self.implementation

    def to_dict(self) -> Dict[str, Any]:
        return {
            "infrastructure": self.infrastructure,
            "training": self.training,
            "implementation": self.implementation,
            "total": self.total,
            "roi": {
                "optimistic": self.roi_optimistic,
                "conservative": self.roi_conservative,
                "timeframe": self.roi_timeframe
            }
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CostEstimate":
        roi = data.get("roi", {})
        return cls(
            infrastructure=data["infrastructure"],
            training=data["training"],
            implementation=data["implementation"],
            roi_optimistic=roi.get("optimistic", 2.5),
            roi_conservative=roi.get("conservative", 1.5),
            roi_timeframe=roi.get("timeframe", 24)
        )


@dataclass
class Milestone:
    month: int
    description: str
    domain: Domain

    def to_dict(self) -> Dict[str, Any]:
        return {"month": self.month, "description": self.description, "domain": self.domain.value}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Milestone":
        return cls(month=data["month"], description=data["description"], domain=Domain(data["domain"]))


@dataclass
class ImplementationTimeframe:
    minimum: int
    maximum: int
    milestones: List[Milestone] = field(default_factory=list)
    unit: str = "months"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "minimum": self.minimum,
            "maximum": self.maximum,
            "unit": self.unit,
            "milestones": [m.to_dict() for m in self.milestones]
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ImplementationTimeframe":
        return cls(
            minimum=data["minimum"],
            maximum=data["maximum"],
            unit=data.get("unit", "months"),
            milestones=[Milestone.from_dict(m) for m in data.get("milestones", [])]
        )


@dataclass
class Recommendation:
    """A single prioritized recommendation"""
    domain: Domain
    priority: str  # high, medium, low
    timeframe: str  # short, medium, long
    description: str
    estimated_cost: int
    expected_impact: int  # 70-90

    def to_dict(self) -> Dict[str, Any]:
        return {
            "domain": self.domain.value,
            "priority": self.priority,
            "timeframe": self.timeframe,
            "description": self.description,
            "estimated_cost": self.estimated_cost,
            "expected_impact": self.expected_impact
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Recommendation":
        return cls(
            domain=Domain(data["domain"]),
            priority=data["priority"],
            timeframe=data["timeframe"],
            description=data["description"],
            estimated_cost=data["estimated_cost"],
            expected_impact=data["expected_impact"]
        )


@dataclass
class AssessmentResult:
    """Complete assessment result"""
    total_score: int  # 0-100
    maturity_level: MaturityLevel
    domain_scores: Dict[Domain, DomainScore]
    benchmark_comparison: BenchmarkComparison
    estimated_costs: CostEstimate
    implementation_timeframe: ImplementationTimeframe
    recommendations: List[Recommendation]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization"""
        return {
            "total_score": self.total_score,
            "maturity_level": self.maturity_level.value,
            "domain_scores": {
                domain.value: ds.to_dict()
                for domain, ds in self.domain_scores.items()
            },
            "benchmark_comparison": self.benchmark_comparison.to_dict(),
            "estimated_costs": self.estimated_costs.to_dict(),
            "implementation_timeframe": self.implementation_timeframe.to_dict(),
            "recommendations": [r.to_dict() for r in self.recommendations]
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AssessmentResult":
        """Rebuild a result from its serialized form"""
        return cls(
            total_score=data["total_score"],
            maturity_level=MaturityLevel(data["maturity_level"]),
            domain_scores={
                Domain(domain): DomainScore.from_dict(ds)
                for domain, ds in data["domain_scores"].items()
            },
            benchmark_comparison=BenchmarkComparison.from_dict(data["benchmark_comparison"]),
            estimated_costs=CostEstimate.from_dict(data["estimated_costs"]),
            implementation_timeframe=ImplementationTimeframe.from_dict(data["implementation_timeframe"]),
            recommendations=[Recommendation.from_dict(r) for r in data["recommendations"]]
        )


class AssessmentEngine:
    """
    Engine for scoring AI readiness assessments.

    Stateless apart from configuration: the result is a pure function of the
    profile, the active question list and the answers.

    Example:
        engine = AssessmentEngine()

        profile = OrganizationProfile(industry="technology", company_size="enterprise")
        questions = select_questions(profile, answers)

        result = engine.compute_result(profile, questions, answers)
        print(f"Overall Score: {result.total_score}")
        print(f"Maturity: {result.maturity_level.value}")
    """

    # Domains whose spend is infrastructure or training; everything else is implementation
    INFRASTRUCTURE_DOMAINS = {Domain.DATA_INFRASTRUCTURE, Domain.TECHNICAL_INFRASTRUCTURE}
    TRAINING_DOMAINS = {Domain.TALENT_CAPABILITY}

    # (min score, minimum months, maximum months)
    TIMEFRAME_BREAKPOINTS = [
        (80, 6, 12),
        (60, 12, 18),
        (0, 18, 36)
    ]

    # Position within a domain's list -> (priority, timeframe)
    PRIORITY_TIERS = [
        (2, "high", "short"),
        (4, "medium", "medium"),
    ]
    LOWEST_TIER = ("low", "long")

    EXPECTED_IMPACT = {"high": 90, "medium": 80, "low": 70}
    IMPACT_RANGE = (70, 90)

    # Share of the total estimated cost spread across a domain's recommendations
    RECOMMENDATION_COST_SHARE = 0.1

    def __init__(
        self,
        impact_seed: Optional[int] = None,
        scorer: Optional[WeightedScoringEngine] = None,
        classifier: Optional[MaturityClassifier] = None,
        benchmarks: Optional[BenchmarkEngine] = None
    ):
        """
        Args:
            impact_seed: When set, expected impact is drawn at random from
                IMPACT_RANGE with this seed instead of derived from priority
        """
        self.impact_seed = impact_seed
        self.scorer = scorer or WeightedScoringEngine(max_value=MAX_ANSWER_VALUE)
        self.aggregator = AggregatedScoringEngine()
        self.classifier = classifier or MaturityClassifier()
        self.benchmarks = benchmarks or create_placeholder_benchmarks()

    def compute_result(
        self,
        profile: OrganizationProfile,
        active_questions: Sequence[WeightedQuestion],
        answers: Mapping[str, int]
    ) -> AssessmentResult:
        """
        Calculate the assessment result.

        Args:
            profile: Organization profile the questions were selected for
            active_questions: Selector output, each with its effective weight
            answers: question_id -> answer value (1-4)

        Returns:
            AssessmentResult with scores, costs, timeline and recommendations
        """
        self._check_answer_values(active_questions, answers)

        by_domain: Dict[Domain, List[WeightedQuestion]] = {}
        for wq in active_questions:
            by_domain.setdefault(wq.domain, []).append(wq)

        domain_scores = {
            domain: self._calculate_domain_score(domain, questions, answers)
            for domain, questions in by_domain.items()
        }

        total_score = round_half_up(
            self.aggregator.aggregate({d.value: ds.score for d, ds in domain_scores.items()})
        )
        maturity_level = self.classifier.classify_level(total_score)

        estimated_costs = self._estimate_costs(active_questions, answers)
        timeframe = self._determine_timeframe(total_score)
        recommendations = self._prioritize_recommendations(domain_scores, estimated_costs)

        logger.info(
            f"Assessment scored for {profile.industry.value}/{profile.company_size.value}: "
            f"{total_score} ({maturity_level.value}) across {len(domain_scores)} domains"
        )

        return AssessmentResult(
            total_score=total_score,
            maturity_level=maturity_level,
            domain_scores=domain_scores,
            benchmark_comparison=self.benchmarks.compare(total_score),
            estimated_costs=estimated_costs,
            implementation_timeframe=timeframe,
            recommendations=recommendations
        )

    def _check_answer_values(
        self,
        active_questions: Sequence[WeightedQuestion],
        answers: Mapping[str, int]
    ) -> None:
        for wq in active_questions:
            if wq.id in answers and not wq.question.accepts(answers[wq.id]):
                raise InvalidAnswerValue(wq.id, answers[wq.id], wq.question.option_values)

    def _calculate_domain_score(
        self,
        domain: Domain,
        questions: List[WeightedQuestion],
        answers: Mapping[str, int]
    ) -> DomainScore:
        """Calculate score for a single domain"""
        items = [
            WeightedItem(wq.id, answers.get(wq.id, 0), wq.effective_weight)
            for wq in questions
        ]
        weighted = self.scorer.score(items)

        recommendations = []
        for wq in questions:
            if wq.id in answers:
                option = wq.question.get_option(answers[wq.id])
                recommendations.extend(option.recommendations)

        if not recommendations:
            recommendations.append(DEFAULT_RECOMMENDATIONS[domain])

        answered = sum(1 for wq in questions if wq.id in answers)
        logger.debug(
            f"Domain {domain.value}: {weighted.percentage:.1f} "
            f"({answered}/{len(questions)} answered, weight {weighted.total_weight:.2f})"
        )

        return DomainScore(
            domain=domain,
            score=weighted.percentage,
            maturity_level=self.classifier.classify_level(weighted.percentage),
            recommendations=recommendations,
            benchmarks=self.benchmarks.benchmark_domain(weighted.percentage),
            answered_questions=answered,
            total_questions=len(questions)
        )

    def _estimate_costs(
        self,
        active_questions: Sequence[WeightedQuestion],
        answers: Mapping[str, int]
    ) -> CostEstimate:
        """Sum the midpoint cost of every chosen option, bucketed by domain"""
        costs = CostEstimate()

        for wq in active_questions:
            if wq.id not in answers:
                continue
            option = wq.question.get_option(answers[wq.id])
            if option.estimated_cost is None:
                continue

            midpoint = option.estimated_cost.midpoint
            if wq.domain in self.INFRASTRUCTURE_DOMAINS:
                costs.infrastructure += midpoint
            elif wq.domain in self.TRAINING_DOMAINS:
                costs.training += midpoint
            else:
                costs.implementation += midpoint

        return costs

    def _determine_timeframe(self, total_score: float) -> ImplementationTimeframe:
        """Implementation timeframe from the overall score"""
        for threshold, minimum, maximum in self.TIMEFRAME_BREAKPOINTS:
            if total_score >= threshold:
                break

        return ImplementationTimeframe(
            minimum=minimum,
            maximum=maximum,
            milestones=[Milestone(**m) for m in IMPLEMENTATION_MILESTONES]
        )

    def _priority_for_position(self, index: int) -> tuple:
        for limit, priority, timeframe in self.PRIORITY_TIERS:
            if index < limit:
                return priority, timeframe
        return self.LOWEST_TIER

    def _prioritize_recommendations(
        self,
        domain_scores: Dict[Domain, DomainScore],
        estimated_costs: CostEstimate
    ) -> List[Recommendation]:
        """Flatten domain recommendations, tiering them by position within each domain"""
        rng = random.Random(self.impact_seed) if self.impact_seed is not None else None
        recommendations = []

        for domain, ds in domain_scores.items():
            count = len(ds.recommendations)
            share = round_half_up(estimated_costs.total * self.RECOMMENDATION_COST_SHARE / count)

            for index, description in enumerate(ds.recommendations):
                priority, timeframe = self._priority_for_position(index)
                if rng is not None:
                    impact = rng.randint(*self.IMPACT_RANGE)
                else:
                    impact = self.EXPECTED_IMPACT[priority]

                recommendations.append(Recommendation(
                    domain=domain,
                    priority=priority,
                    timeframe=timeframe,
                    description=description,
                    estimated_cost=share,
                    expected_impact=impact
                ))

        return recommendations

    def validate_answers(
        self,
        active_questions: Sequence[WeightedQuestion],
        answers: Mapping[str, int]
    ) -> Dict[str, Any]:
        """
        Validate answer set against the active questions.

        Returns dict with:
        - valid: bool
        - missing_questions: list of unanswered question IDs
        - invalid_values: list of questions with invalid values
        - completion_percentage: float
        """
        missing = []
        invalid = []

        for wq in active_questions:
            if wq.id not in answers:
                missing.append(wq.id)
            elif not wq.question.accepts(answers[wq.id]):
                invalid.append(wq.id)

        total = len(active_questions)
        answered = total - len(missing)

        return {
            "valid": len(missing) == 0 and len(invalid) == 0,
            "missing_questions": missing,
            "invalid_values": invalid,
            "completion_percentage": (answered / total * 100) if total > 0 else 0,
            "answered_count": answered,
            "total_count": total
        }


def compute_result(
    profile: OrganizationProfile,
    active_questions: Sequence[WeightedQuestion],
    answers: Mapping[str, int]
) -> AssessmentResult:
    """Score with a default-configured engine."""
    return AssessmentEngine().compute_result(profile, active_questions, answers)
