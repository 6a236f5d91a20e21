"""
Checkstyle validation result: errors reported for submitted source files.
"""
import abc
import enum
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from submission_decoder.models.path_key import PathKey


class ValidationStrategy(enum.Enum):
    """How the exercise server treats reported validation errors."""

    FAIL = "FAIL"
    WARN = "WARN"
    DISABLED = "DISABLED"


class ValidationError(abc.ABC):
    """A single style or structural issue found in submitted source."""

    @property
    @abc.abstractmethod
    def line(self) -> Optional[int]:
        ...

    @property
    @abc.abstractmethod
    def column(self) -> Optional[int]:
        ...

    @property
    @abc.abstractmethod
    def message(self) -> Optional[str]:
        ...

    @property
    @abc.abstractmethod
    def source_name(self) -> Optional[str]:
        ...


class CheckstyleValidationError(ValidationError):
    """
    Concrete validation error.

    Created empty and filled field by field by the decoder; ``seal()`` makes
    the instance read-only once every field has been copied in.
    """

    _FIELDS = ("line", "column", "message", "source_name")

    def __init__(self) -> None:
        object.__setattr__(self, "_sealed", False)
        for name in self._FIELDS:
            object.__setattr__(self, f"_{name}", None)

    def set_field(self, name: str, value) -> None:
        if self._sealed:
            raise AttributeError(f"{type(self).__name__} is sealed")
        if name not in self._FIELDS:
            raise AttributeError(f"Unknown validation error field: {name}")
        object.__setattr__(self, f"_{name}", value)

    def seal(self) -> "CheckstyleValidationError":
        object.__setattr__(self, "_sealed", True)
        return self

    def __setattr__(self, name: str, value) -> None:
        if self._sealed:
            raise AttributeError(f"{type(self).__name__} is sealed")
        object.__setattr__(self, name, value)

    @property
    def line(self) -> Optional[int]:
        return self._line

    @property
    def column(self) -> Optional[int]:
        return self._column

    @property
    def message(self) -> Optional[str]:
        return self._message

    @property
    def source_name(self) -> Optional[str]:
        return self._source_name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CheckstyleValidationError):
            return NotImplemented
        return all(getattr(self, n) == getattr(other, n) for n in self._FIELDS)

    def __hash__(self) -> int:
        return hash(tuple(getattr(self, n) for n in self._FIELDS))

    def __repr__(self) -> str:
        return f"CheckstyleValidationError({self.line}:{self.column} {self.message!r})"


@dataclass
class ValidationResult:
    """Validation errors keyed by source path, in document order per path."""

    strategy: Optional[ValidationStrategy] = None
    validation_errors: Dict[PathKey, Tuple[ValidationError, ...]] = field(default_factory=dict)

    def is_empty(self) -> bool:
        return self.total_errors() == 0

    def errors_for(self, path: PathKey) -> Tuple[ValidationError, ...]:
        return self.validation_errors.get(path, ())

    def total_errors(self) -> int:
        return sum(len(errors) for errors in self.validation_errors.values())
