"""
Polymorphic log decoding.

The exercise server emits list-of-string fields in one of two shapes: a
plain JSON array of strings, or, when a language-runtime exception was
caught, an exception object with a message and stack frames. Both are
normalized into one ordered tuple of strings.

The shape is resolved by inspecting the JSON node kind first
(:func:`resolve_log_shape`); each shape is then bound on its own.
"""
import logging
from dataclasses import dataclass
from typing import Any, Callable, Tuple, Union

from pydantic import ValidationError as PydanticValidationError

from submission_decoder.config.constants import NATIVE_METHOD_LINE
from submission_decoder.decoding.errors import AmbiguousShapeError, MalformedShapeError
from submission_decoder.models.caught_exception import CaughtException, StackFrame

logger = logging.getLogger(__name__)

FrameFormatter = Callable[[StackFrame], str]


@dataclass(frozen=True)
class PlainLog:
    """Log field given as a plain array of strings."""

    entries: Tuple[str, ...]


LogShape = Union[CaughtException, PlainLog]


def format_stack_frame(frame: StackFrame) -> str:
    """
    Render *frame* in the conventional ``Class.method(File:line)`` form.

    ``(Native Method)`` for native frames, ``(Unknown Source)`` when the
    file name is missing, and the bare file name when the line is unknown.
    """
    if frame.line_number == NATIVE_METHOD_LINE:
        location = "Native Method"
    elif frame.file_name is None:
        location = "Unknown Source"
    elif frame.line_number >= 0:
        location = f"{frame.file_name}:{frame.line_number}"
    else:
        location = frame.file_name
    return f"{frame.declaring_class}.{frame.method_name}({location})"


def resolve_log_shape(value: Any, field: str = "logs") -> LogShape:
    """Classify *value* as a caught exception or a plain string list."""
    if isinstance(value, dict):
        try:
            return CaughtException.model_validate(value)
        except PydanticValidationError as e:
            raise MalformedShapeError(field, value, f"invalid exception object: {e}") from e

    if isinstance(value, list):
        for entry in value:
            if not isinstance(entry, str):
                raise AmbiguousShapeError(field, value)
        return PlainLog(entries=tuple(value))

    raise AmbiguousShapeError(field, value)


def decode_log(
    value: Any,
    field: str = "logs",
    frame_formatter: FrameFormatter = format_stack_frame,
) -> Tuple[str, ...]:
    """
    Normalize a polymorphic log field into an ordered tuple of strings.

    An exception object yields its message first (when present) followed by
    one rendered entry per stack frame; a string array is returned unchanged.
    """
    shape = resolve_log_shape(value, field)
    if isinstance(shape, PlainLog):
        return shape.entries

    entries = []
    if shape.message is not None:
        entries.append(shape.message)
    entries.extend(frame_formatter(frame) for frame in shape.stack_trace)
    logger.debug("Field '%s' carried a caught exception with %d frames", field, len(shape.stack_trace))
    return tuple(entries)
