"""
Typed Pydantic models for the caught-exception wire shape.

The exercise server serializes a language-runtime exception as an object
with an optional message and a list of stack frame descriptors.
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr


class StackFrame(BaseModel):
    """One serialized stack trace element."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    declaring_class: StrictStr = Field(..., alias="declaringClass")
    method_name: StrictStr = Field(..., alias="methodName")
    file_name: Optional[StrictStr] = Field(None, alias="fileName")
    line_number: StrictInt = Field(-1, alias="lineNumber")


class CaughtException(BaseModel):
    """Exception object emitted in place of a plain list of strings."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    message: Optional[StrictStr] = None
    stack_trace: List[StackFrame] = Field(default_factory=list, alias="stackTrace")
