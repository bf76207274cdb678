"""
Question Selector

Builds the ordered question list for one organization:
1. Base + industry-specific + maturity questions, in catalog order
2. Industry and company size allow-lists
3. Exact-match answer dependencies
4. Effective weight for the profile
"""

from typing import Iterable, List, Mapping, Optional, Set
import logging

from .models import OrganizationProfile, Question, WeightedQuestion
from .questions import BASE_QUESTIONS, INDUSTRY_QUESTIONS, MATURITY_QUESTIONS

logger = logging.getLogger(__name__)


def effective_weight(question: Question, profile: OrganizationProfile) -> float:
    """base weight x industry multiplier x company size multiplier"""
    return question.weight.for_profile(profile)


def candidate_questions(profile: OrganizationProfile) -> List[Question]:
    """Working set before any filtering."""
    return [
        *BASE_QUESTIONS,
        *INDUSTRY_QUESTIONS.get(profile.industry, []),
        *MATURITY_QUESTIONS,
    ]


def select_questions(
    profile: Optional[OrganizationProfile],
    answers_so_far: Optional[Mapping[str, int]] = None,
    retain_ids: Optional[Iterable[str]] = None
) -> List[WeightedQuestion]:
    """
    Select the questions that apply to this organization given its answers.

    A dependency only counts as met when the referenced answer equals the
    required value exactly. A question listed in ``retain_ids`` that already
    has a recorded answer is kept even when its dependency no longer holds.
    Sessions pass the ids that were active earlier in the run, so the list
    only ever grows; without it the list is filtered from scratch.

    Args:
        profile: Validated organization profile
        answers_so_far: question_id -> answer value (may be empty)
        retain_ids: Ids of questions that were active earlier

    Returns:
        Questions in catalog order, each carrying its effective weight
    """
    if not isinstance(profile, OrganizationProfile):
        return []

    answers = answers_so_far or {}
    retained = set(retain_ids or ())
    selected = []

    for question in candidate_questions(profile):
        if not question.applies_to(profile):
            continue

        if not question.dependencies_met(answers):
            if not (question.id in retained and question.id in answers):
                continue
            logger.debug(f"Keeping answered question '{question.id}' with unmet dependency")

        selected.append(
            WeightedQuestion(question=question, effective_weight=effective_weight(question, profile))
        )

    logger.debug(
        f"Selected {len(selected)} questions for {profile.industry.value}/"
        f"{profile.company_size.value} with {len(answers)} answers"
    )
    return selected


def reachable_answer_ids(
    profile: OrganizationProfile,
    answers: Mapping[str, int],
    retain_answered: bool = True
) -> Set[str]:
    """
    Ids of answered questions that could have been active when answered.

    A gated question is reachable once every question it depends on is
    reachable. With ``retain_answered`` the gating answer may have changed
    since, so only its presence is required; otherwise it must still hold
    exactly. Answers outside the result could never have been given.
    """
    candidates = [
        question for question in candidate_questions(profile)
        if question.applies_to(profile) and question.id in answers
    ]
    reachable: Set[str] = set()

    changed = True
    while changed:
        changed = False
        for question in candidates:
            if question.id in reachable:
                continue
            if all(
                dep.question_id in reachable and (retain_answered or dep.is_met(answers))
                for dep in question.dependencies
            ):
                reachable.add(question.id)
                changed = True

    return reachable
