"""Pydantic schemas for ShippingLine records and forms."""

from datetime import datetime

from pydantic import Field, field_validator

from agency.schemas.common import AgencyModel, Contact, none_to_list, parse_record
from agency.schemas.enums import ServiceType


class RouteInfo(AgencyModel):
    origin_port: str
    destination_port: str
    frequency: str | None = None
    transit_days: int | None = None


class ShippingLine(AgencyModel):
    id: str
    line_code: str = Field(..., min_length=3, max_length=10)
    line_name: str
    head_office_address: str | None = None
    head_office_country: str | None = None
    website: str | None = None
    booking_portal_url: str | None = None
    tracking_url: str | None = None
    local_agent_name: str | None = None
    local_agent_address: str | None = None
    local_agent_phone: str | None = None
    local_agent_email: str | None = None
    contacts: list[Contact] = []
    services_offered: list[ServiceType] = []
    routes_served: list[RouteInfo] = []
    payment_terms: str | None = None
    credit_limit: float | None = Field(None, ge=0)
    credit_days: int | None = None
    service_rating: float | None = Field(None, ge=1, le=5)
    reliability_score: float | None = None
    is_preferred: bool = False
    is_active: bool = True
    notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @field_validator("contacts", "services_offered", "routes_served", mode="before")
    @classmethod
    def null_lists_to_empty(cls, v):
        return none_to_list(v)


class ShippingLineFormData(AgencyModel):
    """Create/edit form for a shipping line.

    Every field has a default and ``services_offered`` holds raw strings, so
    incomplete or unknown input reaches ``validate_shipping_line`` instead of
    failing here.
    """
    line_code: str | None = None
    line_name: str | None = None
    head_office_address: str | None = None
    head_office_country: str | None = None
    website: str | None = None
    booking_portal_url: str | None = None
    tracking_url: str | None = None
    local_agent_name: str | None = None
    local_agent_address: str | None = None
    local_agent_phone: str | None = None
    local_agent_email: str | None = None
    contacts: list[Contact] = []
    services_offered: list[str] = []
    routes_served: list[RouteInfo] = []
    payment_terms: str | None = None
    credit_limit: float | None = None
    credit_days: int | None = None
    service_rating: float | None = None
    is_preferred: bool = False
    notes: str | None = None

    @field_validator("contacts", "services_offered", "routes_served", mode="before")
    @classmethod
    def null_lists_to_empty(cls, v):
        return none_to_list(v)


def transform_shipping_line_row(row) -> ShippingLine:
    """Map a ``shipping_lines`` row into a ShippingLine."""
    return parse_record(ShippingLine, row, "shipping line")
