"""
Path key decoding for the validation-result map.
"""
from typing import Any

from submission_decoder.decoding.errors import MalformedShapeError
from submission_decoder.models.path_key import PathKey


def decode_path_key(value: Any, field: str = "validationErrors") -> PathKey:
    """Wrap *value* verbatim; the path is never resolved against a filesystem."""
    if not isinstance(value, str):
        raise MalformedShapeError(field, value, "path key must be a string")
    return PathKey(value)
