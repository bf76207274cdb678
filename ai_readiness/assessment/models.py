"""
AI Readiness Assessment Models

Value types shared by the catalog, selector, scoring engine and session:
- Closed enums for industry, company size and readiness domain
- Organization profile
- Immutable question definitions and the selector's weighted view of them
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple
from enum import Enum
import logging

from .errors import CatalogError, InvalidProfile

logger = logging.getLogger(__name__)


class Industry(Enum):
    """Industries an organization can report."""
    HEALTHCARE = "healthcare"
    FINANCE = "finance"
    MANUFACTURING = "manufacturing"
    RETAIL = "retail"
    TECHNOLOGY = "technology"
    OTHER = "other"


class CompanySize(Enum):
    """Company size bands."""
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    ENTERPRISE = "enterprise"


class Domain(Enum):
    """Readiness dimensions used to group questions and report sub-scores."""
    DATA_INFRASTRUCTURE = "data_infrastructure"
    TALENT_CAPABILITY = "talent_capability"
    ETHICS_GOVERNANCE = "ethics_governance"
    TECHNICAL_INFRASTRUCTURE = "technical_infrastructure"
    BUSINESS_STRATEGY = "business_strategy"
    DATA_QUALITY = "data_quality"
    SECURITY_COMPLIANCE = "security_compliance"


# Likert scale used by every question
LIKERT_VALUES = frozenset({1, 2, 3, 4})
TWO_POINT_VALUES = frozenset({1, 4})
MAX_ANSWER_VALUE = 4

# Accepted spellings for profile keys coming from form submissions
_PROFILE_ALIASES = {
    "companySize": "company_size",
    "employeeCount": "employee_count",
    "annualRevenue": "annual_revenue",
}


def _coerce_enum(enum_cls, value: Any, field_name: str):
    if isinstance(value, enum_cls):
        return value
    if value is None or value == "":
        raise InvalidProfile(f"'{field_name}' is required", field=field_name)
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise InvalidProfile(
            f"'{value}' is not a valid {field_name} (expected one of: {allowed})",
            field=field_name
        ) from None


@dataclass(frozen=True)
class OrganizationProfile:
    """
    The organization taking the assessment.

    Industry and company size drive question selection and weighting; the
    remaining fields are informational.
    """
    industry: Industry
    company_size: CompanySize
    employee_count: Optional[int] = None
    annual_revenue: Optional[float] = None
    region: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "industry", _coerce_enum(Industry, self.industry, "industry"))
        object.__setattr__(
            self, "company_size", _coerce_enum(CompanySize, self.company_size, "company_size")
        )

        if self.employee_count is not None:
            if isinstance(self.employee_count, bool) or not isinstance(self.employee_count, int):
                raise InvalidProfile("'employee_count' must be an integer", field="employee_count")
            if self.employee_count <= 0:
                raise InvalidProfile("'employee_count' must be positive", field="employee_count")

        if self.annual_revenue is not None:
            if isinstance(self.annual_revenue, bool) or not isinstance(self.annual_revenue, (int, float)):
                raise InvalidProfile("'annual_revenue' must be a number", field="annual_revenue")
            if self.annual_revenue <= 0:
                raise InvalidProfile("'annual_revenue' must be positive", field="annual_revenue")

        if self.region is not None and not isinstance(self.region, str):
            raise InvalidProfile("'region' must be text", field="region")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "OrganizationProfile":
        """Build and validate a profile from a submitted mapping."""
        if not isinstance(data, Mapping):
            raise InvalidProfile("Organization profile must be an object")

        values = {_PROFILE_ALIASES.get(key, key): value for key, value in data.items()}
        return cls(
            industry=values.get("industry"),
            company_size=values.get("company_size"),
            employee_count=values.get("employee_count"),
            annual_revenue=values.get("annual_revenue"),
            region=values.get("region") or None,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "industry": self.industry.value,
            "company_size": self.company_size.value,
            "employee_count": self.employee_count,
            "annual_revenue": self.annual_revenue,
            "region": self.region,
        }


@dataclass(frozen=True)
class CostRange:
    """Estimated spend to move past an answer option."""
    min: float
    max: float
    currency: str = "USD"

    @property
    def midpoint(self) -> float:
        return (self.min + self.max) / 2


@dataclass(frozen=True)
class AnswerOption:
    """One selectable answer for a question."""
    value: int
    label: str
    description: str
    recommendations: Tuple[str, ...] = ()
    estimated_cost: Optional[CostRange] = None


@dataclass(frozen=True)
class Dependency:
    """Gate: the referenced question must have been answered with exactly this value."""
    question_id: str
    required_answer: int

    def is_met(self, answers: Mapping[str, int]) -> bool:
        return answers.get(self.question_id) == self.required_answer


@dataclass(frozen=True)
class QuestionWeight:
    """Base importance plus industry and company size multipliers."""
    base_weight: float
    industry: Mapping[Industry, float] = field(default_factory=dict)
    company_size: Mapping[CompanySize, float] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "industry", MappingProxyType(dict(self.industry)))
        object.__setattr__(self, "company_size", MappingProxyType(dict(self.company_size)))

    def for_profile(self, profile: OrganizationProfile) -> float:
        industry_multiplier = self.industry.get(profile.industry)
        if industry_multiplier is None:
            logger.warning(f"No industry multiplier for {profile.industry.value}, using 1.0")
            industry_multiplier = 1.0

        size_multiplier = self.company_size.get(profile.company_size)
        if size_multiplier is None:
            logger.warning(f"No company size multiplier for {profile.company_size.value}, using 1.0")
            size_multiplier = 1.0

        return self.base_weight * industry_multiplier * size_multiplier


@dataclass(frozen=True)
class Question:
    """A catalog question. Never mutated after the catalog is loaded."""
    id: str
    domain: Domain
    text: str
    weight: QuestionWeight
    options: Tuple[AnswerOption, ...]
    help_text: str = ""
    industries: Optional[Tuple[Industry, ...]] = None
    company_sizes: Optional[Tuple[CompanySize, ...]] = None
    dependencies: Tuple[Dependency, ...] = ()

    @property
    def option_values(self) -> Tuple[int, ...]:
        return tuple(option.value for option in self.options)

    def get_option(self, value: int) -> Optional[AnswerOption]:
        for option in self.options:
            if option.value == value:
                return option
        return None

    def accepts(self, value: Any) -> bool:
        """True when value is one of this question's integer option values."""
        if isinstance(value, bool) or not isinstance(value, int):
            return False
        return self.get_option(value) is not None

    def applies_to(self, profile: OrganizationProfile) -> bool:
        """Check the industry and company size allow-lists."""
        if self.industries is not None and profile.industry not in self.industries:
            return False
        if self.company_sizes is not None and profile.company_size not in self.company_sizes:
            return False
        return True

    def dependencies_met(self, answers: Mapping[str, int]) -> bool:
        return all(dep.is_met(answers) for dep in self.dependencies)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Question":
        """Build a question from a catalog definition, enforcing the option scale."""
        question_id = data["id"]
        options = tuple(
            AnswerOption(
                value=opt["value"],
                label=opt["label"],
                description=opt["description"],
                recommendations=tuple(opt.get("recommendations", ())),
                estimated_cost=CostRange(**opt["estimated_cost"]) if opt.get("estimated_cost") else None,
            )
            for opt in data["options"]
        )

        values = [opt.value for opt in options]
        if len(values) != len(set(values)):
            raise CatalogError(f"Question '{question_id}' has duplicate option values")
        if set(values) not in (LIKERT_VALUES, TWO_POINT_VALUES):
            raise CatalogError(
                f"Question '{question_id}' options must use values 1-4 or the pair 1/4, got {values}"
            )

        weight = data["weight"]
        industries = data.get("industries")
        company_sizes = data.get("company_sizes")

        return cls(
            id=question_id,
            domain=Domain(data["domain"]),
            text=data["text"],
            help_text=data.get("help_text", ""),
            weight=QuestionWeight(
                base_weight=weight["base_weight"],
                industry={Industry(k): v for k, v in weight["industry"].items()},
                company_size={CompanySize(k): v for k, v in weight["company_size"].items()},
            ),
            options=options,
            industries=tuple(Industry(i) for i in industries) if industries is not None else None,
            company_sizes=tuple(CompanySize(s) for s in company_sizes) if company_sizes is not None else None,
            dependencies=tuple(
                Dependency(question_id=dep["question_id"], required_answer=dep["required_answer"])
                for dep in data.get("dependencies", ())
            ),
        )


@dataclass(frozen=True)
class WeightedQuestion:
    """A catalog question paired with its effective weight for one profile."""
    question: Question
    effective_weight: float

    @property
    def id(self) -> str:
        return self.question.id

    @property
    def domain(self) -> Domain:
        return self.question.domain

    def to_dict(self) -> Dict[str, Any]:
        """Presentation view of the question."""
        q = self.question
        return {
            "id": q.id,
            "domain": q.domain.value,
            "text": q.text,
            "help_text": q.help_text,
            "effective_weight": round(self.effective_weight, 4),
            "options": [
                {
                    "value": opt.value,
                    "label": opt.label,
                    "description": opt.description,
                }
                for opt in q.options
            ],
        }
