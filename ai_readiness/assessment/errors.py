"""
Assessment Errors

Exceptions raised by the question selector, scoring engine and session.
All of them are local, synchronous validation failures; nothing here is
retryable.
"""

from typing import Any, Dict, Iterable, Optional


class AssessmentError(ValueError):
    """Base class for assessment engine errors"""
    error_code = "assessment_error"

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.error_code, "message": str(self)}


class CatalogError(AssessmentError):
    """A catalog entry breaks a structural invariant"""
    error_code = "catalog_error"


class InvalidProfile(AssessmentError):
    """Organization profile is missing required fields or uses unknown values"""
    error_code = "invalid_profile"

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["field"] = self.field
        return data


class UnknownQuestion(AssessmentError):
    """Answer submitted for a question that is not in the active list"""
    error_code = "unknown_question"

    def __init__(self, question_id: str):
        super().__init__(f"Question '{question_id}' is not part of the active question list")
        self.question_id = question_id


class InvalidAnswerValue(AssessmentError):
    """Answer value is not one of the question's option values"""
    error_code = "invalid_answer_value"

    def __init__(self, question_id: str, value: Any, allowed: Iterable[int]):
        allowed = sorted(allowed)
        super().__init__(
            f"Value {value!r} is not a valid answer for '{question_id}' (allowed: {allowed})"
        )
        self.question_id = question_id
        self.value = value
        self.allowed = allowed


class SessionStateError(AssessmentError):
    """Operation is not permitted in the session's current state"""
    error_code = "invalid_session_state"


class InvalidSnapshot(AssessmentError):
    """Serialized session snapshot cannot be restored"""
    error_code = "invalid_snapshot"
