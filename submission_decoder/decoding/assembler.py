"""
Submission Result Assembler: main entry point for decoding.

Executes the decode in stages:
    1. Input guard (empty / oversized text)
    2. JSON parse
    3. Document shape check (SUBMISSION_RESULT_SCHEMA)
    4. Field binding (status, polymorphic lists, test cases, feedback questions)
    5. Validations merge (separately decoded, written once)

Typed decode errors propagate unchanged; anything else is wrapped in
DecodeFailure so callers never receive a partially filled result.
"""
import enum
import json
import logging
from typing import Any, Optional, Type

from jsonschema import ValidationError, validate

from submission_decoder.config import settings
from submission_decoder.config.constants import (
    NULL_REJECTING_LIST_FIELDS,
    RESULT_LIST_FIELDS,
    TEST_CASE_LIST_FIELDS,
    VALIDATIONS_FIELD,
)
from submission_decoder.config.schemas import SUBMISSION_RESULT_SCHEMA
from submission_decoder.decoding.errors import (
    DecodeFailure,
    DocumentTooLargeError,
    EmptyInputError,
    MalformedDocumentError,
    MalformedShapeError,
    SubmissionDecodeError,
)
from submission_decoder.decoding.instance_creators import (
    InstanceCreatorRegistry,
    default_instance_creators,
)
from submission_decoder.decoding.logs import FrameFormatter, decode_log, format_stack_frame
from submission_decoder.decoding.metrics import record_decode_failure, timed_decode
from submission_decoder.decoding.status import decode_status
from submission_decoder.decoding.validations import (
    build_validation_result,
    empty_validation_result,
)
from submission_decoder.models.feedback_question import FeedbackQuestion
from submission_decoder.models.submission_result import (
    SubmissionResult,
    SubmissionStatus,
    TestCaseResult,
)

logger = logging.getLogger(__name__)

_SCALAR_FIELDS = (
    "error",
    "login",
    "course",
    "exercise_name",
    "all_tests_passed",
    "reviewed",
    "requests_review",
    "feedback_answer_url",
    "solution_url",
    "submission_url",
    "paste_url",
    "valgrind",
)


class SubmissionResultParser:
    """
    Decodes exercise server result documents into SubmissionResult values.

    Args:
        statuses: Closed enum the status field is decoded against.
        frame_formatter: Renders one stack frame of a caught exception.
        instance_creators: Concrete stand-ins for abstract declared types.
        max_document_chars: Size limit on raw text; 0 disables the check.
    """

    def __init__(
        self,
        statuses: Type[enum.Enum] = SubmissionStatus,
        frame_formatter: FrameFormatter = format_stack_frame,
        instance_creators: Optional[InstanceCreatorRegistry] = None,
        max_document_chars: Optional[int] = None,
    ) -> None:
        self.statuses = statuses
        self.frame_formatter = frame_formatter
        self.instance_creators = instance_creators or default_instance_creators()
        self.max_document_chars = (
            settings.MAX_DOCUMENT_CHARS if max_document_chars is None else max_document_chars
        )

    def parse_from_json(self, text: Optional[str]) -> SubmissionResult:
        """
        Decode one raw result document.

        Raises:
            SubmissionDecodeError: a typed error from the taxonomy, or
                DecodeFailure wrapping any unexpected error.
        """
        if text is None or not text.strip():
            logger.info("Attempted to parse empty string as JSON")
            record_decode_failure(EmptyInputError.__name__)
            raise EmptyInputError()

        if self.max_document_chars and len(text) > self.max_document_chars:
            record_decode_failure(DocumentTooLargeError.__name__)
            raise DocumentTooLargeError(len(text), self.max_document_chars)

        try:
            with timed_decode():
                document = self._load(text)
                result = self._bind(document)
                result.set_validation_result(self._decode_validations(document))
            return result
        except SubmissionDecodeError as e:
            record_decode_failure(type(e).__name__)
            raise
        except Exception as e:
            logger.warning("Failed to parse submission result", exc_info=True)
            record_decode_failure(DecodeFailure.__name__)
            raise DecodeFailure(e) from e

    # ------------------------------------------------------------------
    # Stages
    # ------------------------------------------------------------------

    def _load(self, text: str) -> Any:
        try:
            document = json.loads(text)
        except (json.JSONDecodeError, RecursionError) as e:
            raise MalformedDocumentError(e) from e

        try:
            validate(instance=document, schema=SUBMISSION_RESULT_SCHEMA)
        except ValidationError as e:
            raise MalformedShapeError.from_schema_error("", e, document) from e
        return document

    def _bind(self, document: dict) -> SubmissionResult:
        status = decode_status(document["status"], self.statuses)
        lists = {
            name: self._decode_list(document, name, name)
            for name in RESULT_LIST_FIELDS
        }
        return SubmissionResult(
            status=status,
            test_cases=tuple(
                self._bind_test_case(i, entry)
                for i, entry in enumerate(document.get("test_cases") or [])
            ),
            feedback_questions=[
                FeedbackQuestion.from_dict(entry)
                for entry in document.get("feedback_questions") or []
            ],
            **lists,
            **{name: document.get(name) for name in _SCALAR_FIELDS},
        )

    def _bind_test_case(self, index: int, entry: dict) -> TestCaseResult:
        lists = {
            name: self._decode_list(entry, name, f"test_cases.{index}.{name}")
            for name in TEST_CASE_LIST_FIELDS
        }
        return TestCaseResult(
            name=entry["name"],
            successful=bool(entry.get("successful")),
            message=entry.get("message"),
            detailed_message=entry.get("detailed_message"),
            **lists,
        )

    def _decode_list(self, container: dict, name: str, field: str):
        if name not in container:
            return ()
        if container[name] is None and name not in NULL_REJECTING_LIST_FIELDS:
            return ()
        return decode_log(container[name], field, self.frame_formatter)

    def _decode_validations(self, document: dict):
        if VALIDATIONS_FIELD not in document:
            return empty_validation_result()
        return build_validation_result(document[VALIDATIONS_FIELD], self.instance_creators)


_default_parser = SubmissionResultParser()


def parse_submission_result(text: Optional[str]) -> SubmissionResult:
    """Decode *text* with the default parser configuration."""
    return _default_parser.parse_from_json(text)
