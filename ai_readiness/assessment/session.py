"""
Assessment Session

Holds one run of the assessment wizard: profile, answers, the derived
question list, the current question pointer and the result. Every caller
owns its own session; nothing here is shared between sessions.

States: NO_PROFILE -> PROFILE_SET -> IN_PROGRESS -> COMPLETE, with reset()
returning to NO_PROFILE from anywhere.
"""

from typing import Any, Dict, List, Mapping, Optional, Set, Union
from enum import Enum
import logging

from .assessment_engine import AssessmentEngine, AssessmentResult
from .errors import (
    InvalidAnswerValue,
    InvalidProfile,
    InvalidSnapshot,
    SessionStateError,
    UnknownQuestion
)
from .models import OrganizationProfile, WeightedQuestion
from .selector import candidate_questions, reachable_answer_ids, select_questions

logger = logging.getLogger(__name__)

SNAPSHOT_VERSION = 1


class SessionState(Enum):
    NO_PROFILE = "no_profile"
    PROFILE_SET = "profile_set"
    IN_PROGRESS = "in_progress"
    COMPLETE = "complete"


class AssessmentSession:
    """
    Mutable state for one assessment run.

    Example:
        session = AssessmentSession()
        session.set_profile({"industry": "healthcare", "company_size": "small"})

        while not session.is_complete:
            question = session.current_question
            session.set_answer(question.id, 3)
            session.advance()

        result = session.get_result()
    """

    def __init__(
        self,
        engine: Optional[AssessmentEngine] = None,
        retain_answered: bool = True
    ):
        """
        Args:
            engine: Scoring engine used on completion
            retain_answered: Keep answered questions whose dependency no longer
                holds (their answers stay and still count). When False those
                questions drop out and their answers are purged.
        """
        self.engine = engine or AssessmentEngine()
        self.retain_answered = retain_answered
        self._clear()

    def _clear(self) -> None:
        self._profile: Optional[OrganizationProfile] = None
        self._answers: Dict[str, int] = {}
        self._questions: List[WeightedQuestion] = []
        self._seen_ids: Set[str] = set()
        self._current_index = 0
        self._state = SessionState.NO_PROFILE
        self._result: Optional[AssessmentResult] = None

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def profile(self) -> Optional[OrganizationProfile]:
        return self._profile

    @property
    def answers(self) -> Dict[str, int]:
        return dict(self._answers)

    @property
    def questions(self) -> List[WeightedQuestion]:
        return list(self._questions)

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def current_question(self) -> Optional[WeightedQuestion]:
        return self.get_active_question(self._current_index)

    @property
    def is_complete(self) -> bool:
        return self._state == SessionState.COMPLETE

    def get_active_question(self, index: int) -> Optional[WeightedQuestion]:
        if 0 <= index < len(self._questions):
            return self._questions[index]
        return None

    def get_result(self) -> Optional[AssessmentResult]:
        if self._state != SessionState.COMPLETE:
            return None
        return self._result

    def all_answered(self) -> bool:
        return all(wq.id in self._answers for wq in self._questions)

    def progress(self) -> Dict[str, Any]:
        total = len(self._questions)
        answered = sum(1 for wq in self._questions if wq.id in self._answers)
        return {
            "answered": answered,
            "total": total,
            "percentage": round(answered / total * 100, 1) if total else 0.0,
            "current_index": self._current_index
        }

    # =========================================================================
    # Transitions
    # =========================================================================

    def set_profile(self, profile: Union[OrganizationProfile, Mapping[str, Any]]) -> None:
        """Start a run for an organization, discarding any previous run"""
        if not isinstance(profile, OrganizationProfile):
            if profile is None:
                raise InvalidProfile("Organization profile is required")
            profile = OrganizationProfile.from_dict(profile)

        self._clear()
        self._profile = profile
        self._questions = select_questions(profile, {})
        self._seen_ids = {wq.id for wq in self._questions}
        self._state = SessionState.PROFILE_SET

        logger.info(
            f"Profile set ({profile.industry.value}/{profile.company_size.value}), "
            f"{len(self._questions)} questions selected"
        )

    def set_answer(self, question_id: str, value: int) -> None:
        """Record an answer and refresh the question list"""
        if self._state == SessionState.NO_PROFILE:
            raise SessionStateError("Set an organization profile before answering questions")
        if self._state == SessionState.COMPLETE:
            raise SessionStateError("Assessment is complete; reset to start again")

        active = next((wq for wq in self._questions if wq.id == question_id), None)
        if active is None:
            raise UnknownQuestion(question_id)

        if not active.question.accepts(value):
            raise InvalidAnswerValue(question_id, value, active.question.option_values)

        self._answers[question_id] = value
        self._refresh_questions()
        self._state = SessionState.IN_PROGRESS

    def advance(self) -> None:
        """
        Move to the next question, or complete the assessment.

        Completes only from the last question and only when every active
        question has an answer. Unanswered questions can be skipped.
        """
        if self._state in (SessionState.NO_PROFILE, SessionState.COMPLETE):
            return

        last_index = len(self._questions) - 1

        if self._current_index == last_index and self.all_answered():
            self._complete()
        elif self._current_index < last_index:
            self._current_index += 1
        else:
            logger.debug("Advance at last question with unanswered questions; staying put")

    def retreat(self) -> None:
        """Move to the previous question"""
        self._current_index = max(0, self._current_index - 1)

    def go_to(self, index: int) -> None:
        """Point at a specific question, clamped to the active list"""
        self._current_index = max(0, min(index, len(self._questions) - 1))

    def reset(self) -> None:
        """Discard profile, answers and result"""
        self._clear()
        logger.info("Assessment session reset")

    def _complete(self) -> None:
        self._result = self.engine.compute_result(self._profile, self._questions, self._answers)
        self._state = SessionState.COMPLETE
        logger.info(f"Assessment complete: {self._result.total_score} ({self._result.maturity_level.value})")

    def _refresh_questions(self) -> None:
        retain_ids = self._seen_ids if self.retain_answered else None
        self._questions = select_questions(self._profile, self._answers, retain_ids)
        self._seen_ids.update(wq.id for wq in self._questions)

        if not self.retain_answered:
            active_ids = {wq.id for wq in self._questions}
            orphaned = [qid for qid in self._answers if qid not in active_ids]
            for qid in orphaned:
                del self._answers[qid]
            if orphaned:
                logger.info(f"Purged answers for questions no longer eligible: {orphaned}")
                # Purging can cascade into further dependencies
                self._refresh_questions()
                return

        if self._questions and self._current_index > len(self._questions) - 1:
            self._current_index = len(self._questions) - 1

    # =========================================================================
    # Snapshot
    # =========================================================================

    def to_snapshot(self) -> Dict[str, Any]:
        """Serializable record of the session for client-side storage"""
        return {
            "version": SNAPSHOT_VERSION,
            "profile": self._profile.to_dict() if self._profile else None,
            "answers": dict(self._answers),
            "is_complete": self.is_complete,
            "result": self._result.to_dict() if self._result else None
        }

    @classmethod
    def from_snapshot(
        cls,
        data: Mapping[str, Any],
        engine: Optional[AssessmentEngine] = None,
        retain_answered: bool = True
    ) -> "AssessmentSession":
        """
        Restore a session saved with to_snapshot().

        The question list is re-derived from the profile and answers; the
        pointer starts at the first question. Answers are checked before
        anything is derived from them: every one must be a valid value for a
        question this profile could have reached, and a completed snapshot
        must answer every active question.
        """
        if not isinstance(data, Mapping):
            raise InvalidSnapshot("Snapshot must be an object")

        version = data.get("version", SNAPSHOT_VERSION)
        if version != SNAPSHOT_VERSION:
            logger.warning(f"Restoring snapshot version {version} as version {SNAPSHOT_VERSION}")

        session = cls(engine=engine, retain_answered=retain_answered)

        profile_data = data.get("profile")
        if profile_data is None:
            return session

        try:
            session._profile = OrganizationProfile.from_dict(profile_data)
        except InvalidProfile as e:
            raise InvalidSnapshot(f"Snapshot profile is invalid: {e}") from e

        answers = data.get("answers") or {}
        if not isinstance(answers, Mapping):
            raise InvalidSnapshot("Snapshot answers must be an object")
        session._check_snapshot_answers(answers)

        session._answers = dict(answers)
        session._seen_ids = reachable_answer_ids(session._profile, answers, retain_answered)
        session._refresh_questions()

        session._state = SessionState.IN_PROGRESS if session._answers else SessionState.PROFILE_SET

        if data.get("is_complete"):
            if not session.all_answered():
                raise InvalidSnapshot("Snapshot is marked complete but has unanswered questions")

            result_data = data.get("result")
            try:
                if result_data is not None:
                    session._result = AssessmentResult.from_dict(result_data)
                else:
                    session._result = session.engine.compute_result(
                        session._profile, session._questions, session._answers
                    )
            except (KeyError, TypeError, ValueError) as e:
                raise InvalidSnapshot(f"Snapshot result is invalid: {e}") from e
            session._state = SessionState.COMPLETE

        return session

    def _check_snapshot_answers(self, answers: Mapping[str, Any]) -> None:
        applicable = {
            question.id: question
            for question in candidate_questions(self._profile)
            if question.applies_to(self._profile)
        }

        for question_id, value in answers.items():
            question = applicable.get(question_id)
            if question is None:
                raise InvalidSnapshot(f"Snapshot answers unknown question '{question_id}'")
            if not question.accepts(value):
                raise InvalidSnapshot(f"Snapshot answer for '{question_id}' is invalid: {value!r}")

        unreachable = sorted(set(answers) - reachable_answer_ids(self._profile, answers, self.retain_answered))
        if unreachable:
            raise InvalidSnapshot(f"Snapshot answers questions that were never asked: {unreachable}")
