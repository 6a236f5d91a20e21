"""
JSON Schemas for the submission result document.

Two schemas:
1. SUBMISSION_RESULT_SCHEMA: scalar shape of the top-level result document
2. VALIDATIONS_SCHEMA: checkstyle `validations` sub-document

Fields whose shape varies by content (caught logs, exception traces, point
lists) are deliberately left untyped here; the polymorphic log decoder
resolves them.
"""
from submission_decoder.config.constants import VALIDATION_STRATEGIES

_NULLABLE_STRING: dict = {"type": ["string", "null"]}
_NULLABLE_BOOLEAN: dict = {"type": ["boolean", "null"]}

# =============================================================================
# 1. Submission result document
# =============================================================================
TEST_CASE_SCHEMA: dict = {
    "type": "object",
    "required": ["name"],
    "properties": {
        "name": {"type": "string"},
        "successful": _NULLABLE_BOOLEAN,
        "message": _NULLABLE_STRING,
        "detailed_message": _NULLABLE_STRING,
    },
}

FEEDBACK_QUESTION_SCHEMA: dict = {
    "type": "object",
    "required": ["id", "question", "kind"],
    "properties": {
        "id": {"type": "integer"},
        "question": {"type": "string"},
        "kind": {"type": "string"},
    },
}

SUBMISSION_RESULT_SCHEMA: dict = {
    "type": "object",
    "required": ["status"],
    "properties": {
        "status": {"type": "string"},
        "error": _NULLABLE_STRING,
        "login": _NULLABLE_STRING,
        "course": _NULLABLE_STRING,
        "exercise_name": _NULLABLE_STRING,
        "all_tests_passed": _NULLABLE_BOOLEAN,
        "reviewed": _NULLABLE_BOOLEAN,
        "requests_review": _NULLABLE_BOOLEAN,
        "feedback_answer_url": _NULLABLE_STRING,
        "solution_url": _NULLABLE_STRING,
        "submission_url": _NULLABLE_STRING,
        "paste_url": _NULLABLE_STRING,
        "valgrind": _NULLABLE_STRING,
        "test_cases": {
            "type": ["array", "null"],
            "items": TEST_CASE_SCHEMA,
        },
        "feedback_questions": {
            "type": ["array", "null"],
            "items": FEEDBACK_QUESTION_SCHEMA,
        },
    },
}

# =============================================================================
# 2. Checkstyle validations sub-document
# =============================================================================
VALIDATION_ERROR_SCHEMA: dict = {
    "type": "object",
    "properties": {
        "line": {"type": ["integer", "null"]},
        "column": {"type": ["integer", "null"]},
        "message": _NULLABLE_STRING,
        "sourceName": _NULLABLE_STRING,
    },
}

VALIDATIONS_SCHEMA: dict = {
    "type": "object",
    "properties": {
        "strategy": {
            "type": ["string", "null"],
            "enum": VALIDATION_STRATEGIES + [None],
        },
        "validationErrors": {
            "type": ["object", "null"],
            "additionalProperties": {
                "type": "array",
                "items": VALIDATION_ERROR_SCHEMA,
            },
        },
    },
}
