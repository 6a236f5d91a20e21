"""
Error taxonomy for submission result decoding.

Every failure aborts the whole decode; there is no partial result. Each
error keeps the offending raw value or field name for diagnosis.
"""
from __future__ import annotations

from typing import Any, Optional


class SubmissionDecodeError(Exception):
    """Base class for every error raised while decoding a submission result."""


class EmptyInputError(SubmissionDecodeError):
    """Raised when the raw document is empty or whitespace-only."""

    def __init__(self) -> None:
        super().__init__("Empty input")


class DocumentTooLargeError(SubmissionDecodeError):
    """Raised when the raw document exceeds the configured size limit."""

    def __init__(self, length: int, limit: int) -> None:
        self.length = length
        self.limit = limit
        super().__init__(f"Document of {length} characters exceeds limit of {limit}")


class MalformedDocumentError(SubmissionDecodeError):
    """Raised when the raw document is not valid JSON."""

    def __init__(self, cause: Exception) -> None:
        self.cause = cause
        super().__init__(f"Malformed JSON document: {cause}")


class UnknownStatusError(SubmissionDecodeError):
    """Raised when the status string is not a member of the closed set."""

    def __init__(self, raw_value: str) -> None:
        self.raw_value = raw_value
        super().__init__(f"Unknown submission status: {raw_value}")


class AmbiguousShapeError(SubmissionDecodeError):
    """Raised when a list field is neither an exception object nor a string array."""

    def __init__(self, field: str, raw_value: Any) -> None:
        self.field = field
        self.raw_value = raw_value
        super().__init__(
            f"Field '{field}' is neither an exception object nor a list of strings: "
            f"{raw_value!r}"
        )


class MalformedShapeError(SubmissionDecodeError):
    """Raised when a field does not have the JSON type it is decoded as."""

    def __init__(self, field: str, raw_value: Any = None, reason: Optional[str] = None) -> None:
        self.field = field
        self.raw_value = raw_value
        self.reason = reason
        message = f"Malformed field '{field}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)

    @classmethod
    def from_schema_error(cls, prefix: str, error, instance: Any = None) -> "MalformedShapeError":
        """Build from a jsonschema error, naming the dotted document path of the violation."""
        parts = [prefix] + [str(p) for p in error.absolute_path]
        if error.validator == "required" and isinstance(error.instance, dict):
            missing = [name for name in error.validator_value if name not in error.instance]
            if missing:
                parts.append(missing[0])
        field = ".".join(p for p in parts if p) or "<document>"
        return cls(field, instance, error.message)


class NoConcreteTypeError(SubmissionDecodeError):
    """Raised when an abstract type has no registered concrete factory."""

    def __init__(self, declared_type: type, reason: Optional[str] = None) -> None:
        self.declared_type = declared_type
        self.reason = reason
        super().__init__(
            reason or f"No concrete type registered for abstract type {declared_type.__name__}"
        )


class KindDescriptorError(SubmissionDecodeError):
    """Base class for feedback question kind grammar violations."""

    def __init__(self, kind: Optional[str], message: str) -> None:
        self.kind = kind
        super().__init__(message)


class MalformedKindError(KindDescriptorError):
    def __init__(self, kind: str) -> None:
        super().__init__(kind, f"Parsing kind failed, malformed intrange: {kind}")


class RangeInvalidError(KindDescriptorError):
    def __init__(self, kind: str, minimum: int, maximum: int) -> None:
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            kind,
            f"Intrange lower bound must not exceed upper bound. Got: {kind}",
        )


class NotAnIntRangeError(KindDescriptorError):
    def __init__(self, kind: Optional[str]) -> None:
        super().__init__(kind, f"Kind is not an intrange: {kind}")


class DecodeFailure(SubmissionDecodeError):
    """Raised for any unexpected failure while assembling a submission result."""

    def __init__(self, cause: Exception) -> None:
        self.cause = cause
        super().__init__(f"Failed to parse submission result: {cause}")
