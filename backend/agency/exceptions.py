"""Exception types for the agency library.

Validators report bad input as data (``ValidationResult``) and never raise.
These exceptions exist for callers that prefer to fail fast, and for row
transforms that receive records which cannot form a valid entity.
"""

import logging
from typing import Union

logger = logging.getLogger(__name__)


class AgencyError(Exception):
    """Base exception for agency library errors."""

    def __init__(self, message: str, error_code: str = "AGENCY_ERROR"):
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class ValidationFailedError(AgencyError):
    """Raised by ``ValidationResult.raise_for_errors`` when a form is invalid."""

    def __init__(self, entity: str, errors: list):
        self.entity = entity
        self.errors = errors
        super().__init__(
            message=f"{entity} failed validation: "
            + ", ".join(e.message for e in errors),
            error_code="VALIDATION_ERROR",
        )


class RecordParseError(AgencyError):
    """A database row could not be turned into an entity record."""

    def __init__(self, entity: str, errors: list[dict]):
        self.entity = entity
        self.errors = errors
        super().__init__(
            message=f"Invalid {entity} record",
            error_code="RECORD_PARSE_ERROR",
        )


def error_payload(exc: AgencyError) -> dict:
    """Build the standard error envelope for an agency error.

    Format:
    {
        "error": {
            "code": "ERROR_CODE",
            "message": "Human-readable error message",
            "details": {...}  // Optional additional details
        }
    }
    """
    content = {
        "error": {
            "code": exc.error_code,
            "message": exc.message,
        }
    }

    details: Union[dict, None] = None
    if isinstance(exc, ValidationFailedError):
        details = {
            "errors": [
                {"field": e.field, "message": e.message} for e in exc.errors
            ]
        }
    elif isinstance(exc, RecordParseError):
        details = {"entity": exc.entity, "errors": exc.errors}

    if details:
        content["error"]["details"] = details

    logger.debug("Agency error payload: %s - %s", exc.error_code, exc.message)
    return content
