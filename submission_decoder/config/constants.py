"""
Constants used across the decoder.
Pinned to the exercise server's result format.
"""
from typing import List

# =============================================================================
# Submission status (closed enum, as defined by the exercise server)
# =============================================================================
SUBMISSION_STATUSES: List[str] = [
    "PROCESSING",
    "FAIL",
    "OK",
    "ERROR",
    "HIDDEN",
]

# =============================================================================
# Checkstyle validation strategies
# =============================================================================
VALIDATION_STRATEGIES: List[str] = [
    "FAIL",
    "WARN",
    "DISABLED",
]

# =============================================================================
# Document field names
# =============================================================================
VALIDATIONS_FIELD: str = "validations"

# List-of-string fields decoded through the polymorphic log decoder.
RESULT_LIST_FIELDS: List[str] = [
    "logs",
    "points",
    "missing_review_points",
]
TEST_CASE_LIST_FIELDS: List[str] = [
    "exception",
    "points",
]

# List fields where JSON null is an ambiguous shape rather than "no value".
NULL_REJECTING_LIST_FIELDS: List[str] = [
    "logs",
]

# =============================================================================
# Feedback question kind grammar
# =============================================================================
KIND_TEXT: str = "text"
INTRANGE_PREFIX: str = "intrange["
INTRANGE_SUFFIX: str = "]"
INTRANGE_SEPARATOR: str = ".."
INTRANGE_PATTERN: str = r"intrange\[-?[0-9]+\.\.-?[0-9]+\]"

# =============================================================================
# Stack frame rendering
# =============================================================================
NATIVE_METHOD_LINE: int = -2
