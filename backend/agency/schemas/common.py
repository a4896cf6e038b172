"""Common schemas used across the agency entities."""

from typing import TypeVar

from pydantic import BaseModel, ValidationError
from pydantic.alias_generators import to_camel

from agency.exceptions import RecordParseError, ValidationFailedError

M = TypeVar("M", bound=BaseModel)


class AgencyModel(BaseModel):
    """Base for every agency record.

    Attributes are snake_case; camelCase aliases (``lineName``) are accepted
    too, so payloads from the web client and rows from the database both
    validate.  ``from_attributes`` lets records be read off ORM objects.
    """

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
        "loc_by_alias": False,
    }


def none_to_list(value):
    """Database rows store empty JSON arrays as NULL."""
    return [] if value is None else value


class Contact(AgencyModel):
    name: str
    role: str
    phone: str | None = None
    email: str | None = None
    notes: str | None = None


# ── Validation results ───────────────────────────────────────

class FieldError(AgencyModel):
    field: str
    message: str


class ValidationResult(AgencyModel):
    is_valid: bool
    errors: list[FieldError] = []

    @classmethod
    def from_errors(cls, errors: list[FieldError]) -> "ValidationResult":
        return cls(is_valid=not errors, errors=errors)

    def has_error(self, field: str) -> bool:
        return any(e.field == field for e in self.errors)

    def messages(self) -> str:
        """All messages joined, the way a form banner shows them."""
        return ", ".join(e.message for e in self.errors)

    def raise_for_errors(self, entity: str) -> None:
        if not self.is_valid:
            raise ValidationFailedError(entity, self.errors)


def parse_record(model: type[M], row, entity: str) -> M:
    """Validate a database row (mapping or ORM object) into ``model``.

    Raises:
        RecordParseError: if the row cannot form a valid record
    """
    try:
        return model.model_validate(row)
    except ValidationError as exc:
        raise RecordParseError(entity, exc.errors(include_url=False)) from exc
