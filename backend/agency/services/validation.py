"""Form validation for agency entities.

Every ``validate_*`` function returns a ``ValidationResult`` listing one
``FieldError`` per failed rule, tagged with the snake_case name of the field
the bad value came from.  Unknown enum tokens and out-of-range numbers are
reported, never raised; callers that want an exception use
``ValidationResult.raise_for_errors``.

Rules:
    - required text fields must be non-blank
    - enum-valued fields must hold tokens of *their* enum
    - service ratings lie in [MIN_RATING, MAX_RATING], bounds inclusive
    - money amounts and day counts are non-negative
"""

import logging
import re
from typing import Any
from urllib.parse import urlsplit

from agency.schemas.common import FieldError, ValidationResult
from agency.schemas.enums import (
    CONTAINER_TYPES,
    PORT_AGENT_SERVICES,
    PORT_TYPES,
    PROVIDER_TYPES,
    SERVICE_TYPES,
    SHIPPING_TERMS,
    ContainerType,
    PortAgentService,
    ProviderType,
    ServiceType,
    ShippingTerms,
)
from agency.schemas.port_agent import PortAgentFormData
from agency.schemas.service_provider import ServiceProviderFormData
from agency.schemas.shipping_line import ShippingLineFormData
from agency.schemas.shipping_rate import ShippingRateFormData

logger = logging.getLogger(__name__)

MIN_RATING = 1.0
MAX_RATING = 5.0

EMAIL_REGEX = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

RATING_MESSAGE = f"Service rating must be between {MIN_RATING} and {MAX_RATING}"


# ── Enum membership ──────────────────────────────────────────

def is_valid_service_type(value: str) -> bool:
    return value in SERVICE_TYPES


def is_valid_port_agent_service(value: str) -> bool:
    return value in PORT_AGENT_SERVICES


def is_valid_provider_type(value: str) -> bool:
    return value in PROVIDER_TYPES


def is_valid_port_type(value: str) -> bool:
    return value in PORT_TYPES


def is_valid_container_type(value: str) -> bool:
    return value in CONTAINER_TYPES


def is_valid_shipping_terms(value: str) -> bool:
    return value in SHIPPING_TERMS


# ── Format helpers ───────────────────────────────────────────

def is_valid_email(value: str) -> bool:
    return bool(EMAIL_REGEX.match(value))


def is_valid_url(value: str) -> bool:
    """Absolute URL with both a scheme and a host."""
    try:
        parts = urlsplit(value)
    except ValueError:
        return False
    return bool(parts.scheme and parts.netloc)


def _valid_values(enum_cls) -> str:
    return ", ".join(member.value for member in enum_cls)


def _is_blank(value: str | None) -> bool:
    return not (value or "").strip()


def _rating_out_of_range(value: float | None) -> bool:
    return value is not None and not (MIN_RATING <= value <= MAX_RATING)


def _is_negative(value: float | None) -> bool:
    return value is not None and value < 0


def _as_form(data: Any, form_cls):
    """Accept a form model, a mapping (camelCase or snake_case keys) or an
    attribute-bearing object."""
    if isinstance(data, form_cls):
        return data
    return form_cls.model_validate(data)


def _result(entity: str, errors: list[FieldError]) -> ValidationResult:
    if errors:
        logger.debug(
            "%s form rejected: %s", entity, ", ".join(e.field for e in errors)
        )
    return ValidationResult.from_errors(errors)


# ── Entity validators ────────────────────────────────────────

def validate_shipping_line(data: ShippingLineFormData | dict) -> ValidationResult:
    data = _as_form(data, ShippingLineFormData)
    errors: list[FieldError] = []

    if _is_blank(data.line_name):
        errors.append(FieldError(field="line_name", message="Line name is required"))

    invalid = [s for s in data.services_offered if not is_valid_service_type(s)]
    if invalid:
        errors.append(FieldError(
            field="services_offered",
            message=(
                f"Invalid service types: {', '.join(invalid)}. "
                f"Valid values: {_valid_values(ServiceType)}"
            ),
        ))

    if _is_negative(data.credit_limit):
        errors.append(FieldError(
            field="credit_limit", message="Credit limit cannot be negative"
        ))

    if _is_negative(data.credit_days):
        errors.append(FieldError(
            field="credit_days", message="Credit days cannot be negative"
        ))

    if _rating_out_of_range(data.service_rating):
        errors.append(FieldError(field="service_rating", message=RATING_MESSAGE))

    if data.local_agent_email and not is_valid_email(data.local_agent_email):
        errors.append(FieldError(
            field="local_agent_email", message="Invalid email format"
        ))

    if data.website and not is_valid_url(data.website):
        errors.append(FieldError(field="website", message="Invalid website URL"))

    return _result("Shipping line", errors)


def validate_port_agent(data: PortAgentFormData | dict) -> ValidationResult:
    data = _as_form(data, PortAgentFormData)
    errors: list[FieldError] = []

    if _is_blank(data.agent_name):
        errors.append(FieldError(field="agent_name", message="Agent name is required"))
    if _is_blank(data.port_name):
        errors.append(FieldError(field="port_name", message="Port name is required"))
    if _is_blank(data.port_country):
        errors.append(FieldError(
            field="port_country", message="Port country is required"
        ))

    invalid = [s for s in data.services if not is_valid_port_agent_service(s)]
    if invalid:
        errors.append(FieldError(
            field="services",
            message=(
                f"Invalid services: {', '.join(invalid)}. "
                f"Valid values: {_valid_values(PortAgentService)}"
            ),
        ))

    if _rating_out_of_range(data.service_rating):
        errors.append(FieldError(field="service_rating", message=RATING_MESSAGE))

    if data.email and not is_valid_email(data.email):
        errors.append(FieldError(field="email", message="Invalid email format"))

    return _result("Port agent", errors)


def validate_service_provider(
    data: ServiceProviderFormData | dict,
) -> ValidationResult:
    data = _as_form(data, ServiceProviderFormData)
    errors: list[FieldError] = []

    if _is_blank(data.provider_name):
        errors.append(FieldError(
            field="provider_name", message="Provider name is required"
        ))

    if not data.provider_type:
        errors.append(FieldError(
            field="provider_type", message="Provider type is required"
        ))
    elif not is_valid_provider_type(data.provider_type):
        errors.append(FieldError(
            field="provider_type",
            message=f"Invalid provider type. Valid values: {_valid_values(ProviderType)}",
        ))

    if _rating_out_of_range(data.service_rating):
        errors.append(FieldError(field="service_rating", message=RATING_MESSAGE))

    if data.email and not is_valid_email(data.email):
        errors.append(FieldError(field="email", message="Invalid email format"))

    return _result("Service provider", errors)


def validate_shipping_rate(data: ShippingRateFormData | dict) -> ValidationResult:
    data = _as_form(data, ShippingRateFormData)
    errors: list[FieldError] = []

    if not data.shipping_line_id:
        errors.append(FieldError(
            field="shipping_line_id", message="Shipping line is required"
        ))
    if not data.origin_port_id:
        errors.append(FieldError(
            field="origin_port_id", message="Origin port is required"
        ))
    if not data.destination_port_id:
        errors.append(FieldError(
            field="destination_port_id", message="Destination port is required"
        ))

    if not data.container_type:
        errors.append(FieldError(
            field="container_type", message="Container type is required"
        ))
    elif not is_valid_container_type(data.container_type):
        errors.append(FieldError(
            field="container_type",
            message=f"Invalid container type. Valid values: {_valid_values(ContainerType)}",
        ))

    if data.ocean_freight is None or data.ocean_freight < 0:
        errors.append(FieldError(
            field="ocean_freight",
            message="Ocean freight must be a non-negative number",
        ))

    if data.valid_from is None:
        errors.append(FieldError(
            field="valid_from", message="Valid from date is required"
        ))
    if data.valid_to is None:
        errors.append(FieldError(field="valid_to", message="Valid to date is required"))
    if data.valid_from and data.valid_to and data.valid_from > data.valid_to:
        errors.append(FieldError(
            field="valid_to", message="Valid to date must be after valid from date"
        ))

    if data.terms and not is_valid_shipping_terms(data.terms):
        errors.append(FieldError(
            field="terms",
            message=f"Invalid shipping terms. Valid values: {_valid_values(ShippingTerms)}",
        ))

    for field, label in (("baf", "BAF"), ("caf", "CAF"), ("pss", "PSS"), ("ens", "ENS")):
        if _is_negative(getattr(data, field)):
            errors.append(FieldError(field=field, message=f"{label} cannot be negative"))

    return _result("Shipping rate", errors)


def validate_agent_rating(rating: float) -> ValidationResult:
    """Check a single feedback rating before it is recorded."""
    errors: list[FieldError] = []
    if rating is None or _rating_out_of_range(rating):
        errors.append(FieldError(
            field="rating",
            message=f"Rating must be between {MIN_RATING:g} and {MAX_RATING:g}",
        ))
    return _result("Agent rating", errors)
