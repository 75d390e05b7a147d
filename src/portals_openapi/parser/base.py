"""Data models for the portal source document and the generated operations.

Source records are untyped: a field can be absent, ``null``, an empty
string, or any other JSON value. The raw models keep every value as-is.
:func:`is_missing` is the single rule for treating a value as "not set",
and :func:`as_text` renders a present value where text is needed.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


def is_missing(value: Any) -> bool:
    """Return True for absent, null, or empty-string values."""
    return value is None or value == ""


def as_text(value: Any) -> str:
    """Render a JSON scalar the way it reads in the source document."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    return str(value)


class ParentContext(BaseModel):
    """A parent group and the number of its child records not yet processed."""

    path: str
    remaining: int = Field(ge=0)


class ParameterRecord(BaseModel):
    """One raw entry of a child record's ``parameters`` list."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    name: Any = None
    location: Any = Field(default=None, alias="in")
    is_visible: Any = Field(default=None, alias="isVisible")
    description: Any = None
    remarks: Any = None
    type_: Any = Field(default=None, alias="type")


class ChildRecord(BaseModel):
    """One raw operation record from a parent's ``apiMethods`` list."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    path: Any = None
    method: Any = None
    category: Any = None
    short_description: Any = Field(default=None, alias="shortDescription")
    is_visible: Any = Field(default=None, alias="isVisible")
    description: Any = None
    remarks: Any = None
    parameters: list[Any] | None = None
    type_: Any = Field(default=None, alias="type")


class Parameter(BaseModel):
    """An OpenAPI parameter object."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    location: str = Field(alias="in")  # path / query / header / cookie
    description: str | None = None
    schema_: dict[str, Any] = Field(alias="schema")


class OperationObject(BaseModel):
    """The OpenAPI operation emitted for one accepted child record."""

    tags: list[str] | None = None
    summary: str | None = None
    description: str | None = None
    parameters: list[Parameter] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize with OpenAPI key names, leaving unset members out."""
        return self.model_dump(by_alias=True, exclude_none=True)


class Operation(BaseModel):
    """An operation keyed by its endpoint and lowercase HTTP method."""

    endpoint: str
    method: str
    operation: OperationObject
