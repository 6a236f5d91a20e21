"""
Kind descriptor grammar for feedback questions.

A kind is either the literal ``"text"`` or ``"intrange[<min>..<max>]"`` with
optionally signed integer bounds. Any other string is accepted but inert.
"""
import re
from dataclasses import dataclass
from typing import Optional, Union

from submission_decoder.config.constants import (
    INTRANGE_PATTERN,
    INTRANGE_PREFIX,
    INTRANGE_SEPARATOR,
    INTRANGE_SUFFIX,
    KIND_TEXT,
)
from submission_decoder.decoding.errors import (
    MalformedKindError,
    NotAnIntRangeError,
    RangeInvalidError,
)

_INTRANGE_RE = re.compile(INTRANGE_PATTERN)


@dataclass(frozen=True)
class TextKind:
    """Free text answer."""


@dataclass(frozen=True)
class IntRangeKind:
    """Integer answer within inclusive bounds."""

    minimum: int
    maximum: int


KindDescriptor = Union[TextKind, IntRangeKind]


def is_int_range(kind: Optional[str]) -> bool:
    return kind is not None and _INTRANGE_RE.fullmatch(kind) is not None


def is_text(kind: Optional[str]) -> bool:
    return kind == KIND_TEXT


def parse_int_range(kind: Optional[str]) -> IntRangeKind:
    """
    Extract and validate the bounds of an intrange kind.

    Raises:
        NotAnIntRangeError: the text lacks the ``intrange[`` / ``]`` frame.
        MalformedKindError: the bounds do not split into two integers.
        RangeInvalidError: the lower bound exceeds the upper bound.
    """
    if kind is None or not (kind.startswith(INTRANGE_PREFIX) and kind.endswith(INTRANGE_SUFFIX)):
        raise NotAnIntRangeError(kind)

    bounds = kind[len(INTRANGE_PREFIX):len(kind) - len(INTRANGE_SUFFIX)].split(INTRANGE_SEPARATOR)
    if len(bounds) != 2:
        raise MalformedKindError(kind)
    try:
        minimum, maximum = int(bounds[0]), int(bounds[1])
    except ValueError as e:
        raise MalformedKindError(kind) from e

    if minimum > maximum:
        raise RangeInvalidError(kind, minimum, maximum)
    return IntRangeKind(minimum=minimum, maximum=maximum)


def parse_kind(kind: Optional[str]) -> Optional[KindDescriptor]:
    """Return the typed descriptor for *kind*, or None for an inert kind."""
    if is_text(kind):
        return TextKind()
    if is_int_range(kind):
        return parse_int_range(kind)
    return None
