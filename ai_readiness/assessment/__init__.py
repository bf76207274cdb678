"""
AI Readiness Assessment Module

Organizational AI readiness self-assessment with:
- Profile-driven, dependency-gated questionnaire
- Weighted multi-domain scoring engine
- Maturity levels, cost estimates, timeline and recommendations
- Wizard session with serializable snapshots
"""

from .assessment_engine import AssessmentEngine, AssessmentResult, DomainScore, compute_result
from .errors import (
    AssessmentError,
    CatalogError,
    InvalidAnswerValue,
    InvalidProfile,
    InvalidSnapshot,
    SessionStateError,
    UnknownQuestion
)
from .models import CompanySize, Domain, Industry, OrganizationProfile, Question, WeightedQuestion
from .questions import BASE_QUESTIONS, DOMAINS, INDUSTRY_QUESTIONS, MATURITY_QUESTIONS
from .selector import effective_weight, select_questions
from .session import AssessmentSession, SessionState

__all__ = [
    'AssessmentEngine', 'AssessmentResult', 'DomainScore', 'compute_result',
    'AssessmentError', 'CatalogError', 'InvalidAnswerValue', 'InvalidProfile',
    'InvalidSnapshot', 'SessionStateError', 'UnknownQuestion',
    'CompanySize', 'Domain', 'Industry', 'OrganizationProfile', 'Question', 'WeightedQuestion',
    'BASE_QUESTIONS', 'DOMAINS', 'INDUSTRY_QUESTIONS', 'MATURITY_QUESTIONS',
    'effective_weight', 'select_questions',
    'AssessmentSession', 'SessionState',
]
