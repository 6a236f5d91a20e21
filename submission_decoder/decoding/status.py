"""
Status decoding: maps a free-form status string onto a closed enum.
"""
import enum
import logging
from typing import Any, Type

from submission_decoder.decoding.errors import MalformedShapeError, UnknownStatusError
from submission_decoder.models.submission_result import SubmissionStatus

logger = logging.getLogger(__name__)


def decode_status(value: Any, statuses: Type[enum.Enum] = SubmissionStatus) -> enum.Enum:
    """
    Case-insensitive lookup of *value* among the member names of *statuses*.

    Raises:
        MalformedShapeError: *value* is not a string.
        UnknownStatusError: no member matches.
    """
    if not isinstance(value, str):
        raise MalformedShapeError("status", value, "expected a string")

    members = {member.name.upper(): member for member in statuses}
    try:
        return members[value.upper()]
    except KeyError:
        logger.warning("Attempted to parse unknown submission status %s", value)
        raise UnknownStatusError(value) from None
