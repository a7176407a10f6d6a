"""
Document schemas for the MongoDB collections.

Schemas validate whole documents on create and on update (after merging
the partial update into the stored document), fill defaults and derive
computed fields. Field names on the wire and in the database are
camelCase; Python attributes are snake_case.
"""

import re
import types
from datetime import datetime, timezone
from typing import Any, ClassVar, Literal, Mapping, Optional, Union, get_args, get_origin

from pydantic import (
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    TypeAdapter,
    ValidationError,
    model_validator,
)
from pydantic.alias_generators import to_camel

from devcamper.domain.errors import FieldValidationError

URL_PATTERN = r"^https?://[^\s/$.?#][^\s]*$"

Career = Literal[
    "Web Development",
    "Mobile Development",
    "UI/UX",
    "Data Science",
    "Business",
    "Other",
]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def slugify(value: str) -> str:
    """Lowercase ``value`` and join its words with hyphens."""
    slug = re.sub(r"[^\w\s-]", "", value.lower())
    return re.sub(r"[\s_-]+", "-", slug).strip("-")


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        extra="ignore",
        str_strip_whitespace=True,
    )


class DocumentSchema(_CamelModel):
    """Base class for collection schemas.

    Class attributes:
        unique_fields: Wire names that carry a unique index.
        geo_fields: Wire names that carry a 2dsphere index.
    """

    unique_fields: ClassVar[tuple[str, ...]] = ()
    geo_fields: ClassVar[tuple[str, ...]] = ()

    @classmethod
    def validate_document(cls, fields: Mapping[str, Any]) -> dict[str, Any]:
        """Validate a full document and return it ready for storage.

        Raises:
            FieldValidationError: Listing every offending field.
        """
        try:
            model = cls.model_validate(dict(fields))
        except ValidationError as exc:
            raise FieldValidationError(_field_errors(exc)) from exc
        return model.model_dump(by_alias=True, exclude_none=True)

    @classmethod
    def cast_filter(cls, filter: Mapping[str, Any]) -> dict[str, Any]:
        """Cast string operands in a query document to the field types.

        Query-string values arrive as strings; comparing them against
        numbers or booleans in the database would never match. Keys that
        are not schema fields are passed through unchanged.

        Raises:
            FieldValidationError: If an operand cannot be cast.
        """
        fields_by_alias = {
            info.alias or to_camel(name): info for name, info in cls.model_fields.items()
        }
        cast: dict[str, Any] = {}
        errors: dict[str, str] = {}
        for key, condition in filter.items():
            info = fields_by_alias.get(key)
            if info is None:
                cast[key] = condition
                continue
            adapter = TypeAdapter(_scalar_type(info.annotation))
            try:
                cast[key] = _cast_condition(adapter, condition)
            except ValidationError:
                errors[key] = "cannot be compared with the given value"
        if errors:
            raise FieldValidationError(errors)
        return cast


class GeoLocation(_CamelModel):
    """GeoJSON Point with the geocoder's address components."""

    type: Literal["Point"] = "Point"
    coordinates: list[float] = Field(..., min_length=2, max_length=2)
    formatted_address: Optional[str] = None
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zipcode: Optional[str] = None
    country: Optional[str] = None


class BootcampDocument(DocumentSchema):
    """Schema of the ``bootcamps`` collection."""

    unique_fields: ClassVar[tuple[str, ...]] = ("name",)
    geo_fields: ClassVar[tuple[str, ...]] = ("location",)

    name: str = Field(..., min_length=1, max_length=50)
    slug: Optional[str] = None
    description: str = Field(..., min_length=1, max_length=500)
    website: Optional[str] = Field(None, pattern=URL_PATTERN)
    phone: Optional[str] = Field(None, max_length=20)
    email: Optional[EmailStr] = None
    address: str = Field(..., min_length=1)
    location: Optional[GeoLocation] = None
    careers: list[Career] = Field(..., min_length=1)
    average_rating: Optional[float] = Field(None, ge=1, le=10)
    average_cost: Optional[float] = None
    photo: str = "no-photo.jpg"
    housing: bool = False
    job_assistance: bool = False
    job_guarantee: bool = False
    accept_gi: bool = False
    created_at: datetime = Field(default_factory=_utcnow)

    @model_validator(mode="after")
    def _derive_slug(self) -> "BootcampDocument":
        self.slug = slugify(self.name)
        return self


class UserDocument(DocumentSchema):
    """Schema of the ``users`` collection. ``password`` holds a hash."""

    unique_fields: ClassVar[tuple[str, ...]] = ("email",)

    name: str = Field(..., min_length=1)
    email: EmailStr
    role: Literal["user", "publisher"] = "user"
    password: str = Field(..., min_length=1)
    created_at: datetime = Field(default_factory=_utcnow)


def _field_errors(exc: ValidationError) -> dict[str, str]:
    errors: dict[str, str] = {}
    for error in exc.errors():
        name = ".".join(str(part) for part in error["loc"]) or "document"
        errors.setdefault(name, error["msg"])
    return errors


def _scalar_type(annotation: Any) -> Any:
    """Unwrap Optional[...] and list[...] down to the element type."""
    if get_origin(annotation) in (Union, types.UnionType):
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        annotation = args[0] if len(args) == 1 else Union[tuple(args)]
    if get_origin(annotation) is list:
        annotation = get_args(annotation)[0]
    return annotation


def _cast_condition(adapter: TypeAdapter, condition: Any) -> Any:
    if isinstance(condition, dict):
        return {op: _cast_condition(adapter, operand) for op, operand in condition.items()}
    if isinstance(condition, list):
        return [_cast_condition(adapter, item) for item in condition]
    if isinstance(condition, str):
        return adapter.validate_python(condition)
    return condition
