"""
SubmissionResult: decoded outcome of one remote code-evaluation run.
"""
import enum
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from submission_decoder.config.constants import SUBMISSION_STATUSES
from submission_decoder.models.feedback_question import FeedbackQuestion
from submission_decoder.models.validation import ValidationResult

SubmissionStatus = enum.Enum(
    "SubmissionStatus",
    [(name, name) for name in SUBMISSION_STATUSES],
    module=__name__,
)
SubmissionStatus.__doc__ = "Closed set of evaluation outcomes reported by the exercise server."


@dataclass(frozen=True)
class TestCaseResult:
    """Outcome of a single test case in the submission run."""

    __test__ = False  # not a pytest test class

    name: str
    successful: bool = False
    message: Optional[str] = None
    exception: Tuple[str, ...] = ()
    detailed_message: Optional[str] = None
    points: Tuple[str, ...] = ()


@dataclass
class SubmissionResult:
    """Decoded submission result. ``validation_result`` is merged once, after binding."""

    status: SubmissionStatus
    logs: Tuple[str, ...] = ()
    error: Optional[str] = None
    login: Optional[str] = None
    course: Optional[str] = None
    exercise_name: Optional[str] = None
    all_tests_passed: Optional[bool] = None
    reviewed: Optional[bool] = None
    requests_review: Optional[bool] = None
    points: Tuple[str, ...] = ()
    missing_review_points: Tuple[str, ...] = ()
    test_cases: Tuple[TestCaseResult, ...] = ()
    feedback_questions: List[FeedbackQuestion] = field(default_factory=list)
    feedback_answer_url: Optional[str] = None
    solution_url: Optional[str] = None
    submission_url: Optional[str] = None
    paste_url: Optional[str] = None
    valgrind: Optional[str] = None
    validation_result: Optional[ValidationResult] = None

    def set_validation_result(self, validation_result: ValidationResult) -> None:
        if self.validation_result is not None:
            raise RuntimeError("Validation result has already been merged")
        self.validation_result = validation_result

    def all_passed(self) -> bool:
        return self.status is SubmissionStatus.OK and all(tc.successful for tc in self.test_cases)

    def failed_test_cases(self) -> List[TestCaseResult]:
        return [tc for tc in self.test_cases if not tc.successful]
