"""
Validations sub-document decoding.

The ``validations`` field holds a checkstyle result whose schema is owned by
the validation runner, so it is decoded on its own rather than through the
top-level result binding.
"""
import logging
from typing import Any, Optional

from jsonschema import ValidationError, validate

from submission_decoder.config.schemas import VALIDATIONS_SCHEMA
from submission_decoder.config.constants import VALIDATIONS_FIELD
from submission_decoder.decoding.errors import MalformedShapeError, NoConcreteTypeError
from submission_decoder.decoding.instance_creators import (
    InstanceCreatorRegistry,
    default_instance_creators,
)
from submission_decoder.decoding.path_keys import decode_path_key
from submission_decoder.models import validation as validation_models
from submission_decoder.models.validation import ValidationResult, ValidationStrategy

logger = logging.getLogger(__name__)

# Document key -> ValidationError attribute
_ERROR_FIELDS = {
    "line": "line",
    "column": "column",
    "message": "message",
    "sourceName": "source_name",
}


def empty_validation_result() -> ValidationResult:
    return ValidationResult()


def build_validation_result(
    value: Any,
    creators: Optional[InstanceCreatorRegistry] = None,
) -> ValidationResult:
    """
    Decode a checkstyle ``validations`` sub-document.

    ``null``, ``{}`` and ``[]`` all decode to an empty container.

    Raises:
        MalformedShapeError: the sub-document does not match VALIDATIONS_SCHEMA.
        NoConcreteTypeError: no concrete type is registered for ValidationError.
    """
    if value is None or value == []:
        return empty_validation_result()

    try:
        validate(instance=value, schema=VALIDATIONS_SCHEMA)
    except ValidationError as e:
        raise MalformedShapeError.from_schema_error(VALIDATIONS_FIELD, e, value) from e

    creators = creators or default_instance_creators()
    strategy = value.get("strategy")
    errors_by_path = {}
    for path, entries in (value.get("validationErrors") or {}).items():
        key = decode_path_key(path, f"{VALIDATIONS_FIELD}.validationErrors")
        errors_by_path[key] = tuple(_build_error(entry, creators) for entry in entries)

    result = ValidationResult(
        strategy=ValidationStrategy(strategy) if strategy is not None else None,
        validation_errors=errors_by_path,
    )
    logger.debug(
        "Decoded %d validation errors across %d files",
        result.total_errors(),
        len(errors_by_path),
    )
    return result


def _build_error(entry: dict, creators: InstanceCreatorRegistry):
    error = creators.create(validation_models.ValidationError)
    if not (callable(getattr(error, "set_field", None)) and callable(getattr(error, "seal", None))):
        raise NoConcreteTypeError(
            validation_models.ValidationError,
            f"Stand-in {type(error).__name__} for ValidationError does not support set_field() and seal()",
        )
    for document_key, attribute in _ERROR_FIELDS.items():
        error.set_field(attribute, entry.get(document_key))
    return error.seal()
