"""
FeedbackQuestion: a question attached to a submission result.

The ``kind`` string carries its own grammar (see
``submission_decoder.decoding.kind_descriptor``); int-range kinds are
validated as soon as they are assigned.
"""
from typing import Optional

from jsonschema import ValidationError, validate

from submission_decoder.config.schemas import FEEDBACK_QUESTION_SCHEMA
from submission_decoder.decoding.errors import MalformedShapeError, NotAnIntRangeError
from submission_decoder.decoding.kind_descriptor import (
    IntRangeKind,
    KindDescriptor,
    is_int_range,
    is_text,
    parse_int_range,
    parse_kind,
)


class FeedbackQuestion:
    """
    Feedback question with derived int-range bounds.

    Compares by id, question and kind; mutable and therefore unhashable.
    """

    def __init__(self, id: int = 0, question: str = "", kind: Optional[str] = None) -> None:
        self.id = id
        self.question = question
        self._kind: Optional[str] = None
        if kind is not None:
            self.kind = kind

    @classmethod
    def from_dict(cls, data: dict) -> "FeedbackQuestion":
        """Bind one ``feedback_questions`` entry from the result document."""
        try:
            validate(instance=data, schema=FEEDBACK_QUESTION_SCHEMA)
        except ValidationError as e:
            raise MalformedShapeError.from_schema_error("feedback_questions", e, data) from e
        return cls(id=data["id"], question=data["question"], kind=data["kind"])

    @property
    def kind(self) -> Optional[str]:
        return self._kind

    @kind.setter
    def kind(self, kind: str) -> None:
        """Store *kind*; an int-range kind has its bounds validated eagerly."""
        if is_int_range(kind):
            parse_int_range(kind)
        self._kind = kind

    def is_int_range(self) -> bool:
        return is_int_range(self._kind)

    def is_text(self) -> bool:
        return is_text(self._kind)

    def descriptor(self) -> Optional[KindDescriptor]:
        return parse_kind(self._kind)

    @property
    def min(self) -> int:
        return self._range().minimum

    @property
    def max(self) -> int:
        return self._range().maximum

    def _range(self) -> IntRangeKind:
        if not self.is_int_range():
            raise NotAnIntRangeError(self._kind)
        return parse_int_range(self._kind)

    # kind can be reassigned
    __hash__ = None  # type: ignore[assignment]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FeedbackQuestion):
            return NotImplemented
        return (self.id, self.question, self._kind) == (other.id, other.question, other._kind)

    def __repr__(self) -> str:
        return f"FeedbackQuestion({self.id}, {self._kind!r}, {self.question!r})"
