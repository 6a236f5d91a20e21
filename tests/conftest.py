"""
Shared test fixtures for the submission decoder test suite.
"""
import json

import pytest


# ==========================================================================
# Stack frames & caught exceptions
# ==========================================================================

@pytest.fixture
def mock_stack_frames():
    return [
        {
            "declaringClass": "org.junit.Assert",
            "methodName": "fail",
            "fileName": "Assert.java",
            "lineNumber": 88,
        },
        {
            "declaringClass": "fi.helsinki.cs.SumTest",
            "methodName": "testSum",
            "fileName": "SumTest.java",
            "lineNumber": 21,
        },
    ]


@pytest.fixture
def mock_caught_exception(mock_stack_frames):
    return {
        "className": "java.lang.AssertionError",
        "message": "expected:<3> but was:<4>",
        "stackTrace": mock_stack_frames,
    }


# ==========================================================================
# Validations (checkstyle)
# ==========================================================================

@pytest.fixture
def mock_validations():
    return {
        "strategy": "FAIL",
        "validationErrors": {
            "src/Sum.java": [
                {
                    "line": 4,
                    "column": 9,
                    "message": "Indentation incorrect. Expected 8, but was 9.",
                    "sourceName": "com.puppycrawl.tools.checkstyle.checks.indentation.IndentationCheck",
                },
                {
                    "line": 12,
                    "column": 0,
                    "message": "Missing a Javadoc comment.",
                    "sourceName": "com.puppycrawl.tools.checkstyle.checks.javadoc.JavadocMethodCheck",
                },
            ],
            "src/Main.java": [
                {
                    "line": 1,
                    "column": 1,
                    "message": "Line is longer than 100 characters.",
                    "sourceName": "com.puppycrawl.tools.checkstyle.checks.sizes.LineLengthCheck",
                },
            ],
        },
    }


# ==========================================================================
# Submission result documents
# ==========================================================================

@pytest.fixture
def mock_submission(mock_caught_exception, mock_validations):
    return {
        "api_version": 7,
        "login": "student",
        "course": "mooc-2016-ohjelmointi",
        "exercise_name": "viikko01-Viikko01_001.Sum",
        "status": "fail",
        "points": ["1.1"],
        "missing_review_points": [],
        "all_tests_passed": False,
        "solution_url": "https://tmc.example.org/exercises/1/solution",
        "submission_url": "https://tmc.example.org/submissions/42",
        "feedback_answer_url": "https://tmc.example.org/submissions/42/feedback",
        "error": None,
        "valgrind": None,
        "reviewed": False,
        "requests_review": False,
        "test_cases": [
            {
                "name": "SumTest testSum",
                "successful": False,
                "message": "expected:<3> but was:<4>",
                "exception": mock_caught_exception,
                "detailed_message": None,
            },
            {
                "name": "SumTest testZero",
                "successful": True,
                "message": "",
                "exception": [],
                "detailed_message": None,
            },
        ],
        "feedback_questions": [
            {"id": 1, "question": "How hard was this?", "kind": "intrange[1..5]"},
            {"id": 2, "question": "Anything else?", "kind": "text"},
        ],
        "validations": mock_validations,
    }


@pytest.fixture
def mock_submission_json(mock_submission):
    return json.dumps(mock_submission, ensure_ascii=False)


@pytest.fixture
def minimal_submission_json():
    return json.dumps({"status": "OK"})
