"""Pydantic schemas for PortAgent records, forms and feedback."""

from datetime import datetime

from pydantic import Field, field_validator

from agency.config import settings
from agency.schemas.common import AgencyModel, Contact, none_to_list, parse_record
from agency.schemas.enums import PortAgentService


class PortAgent(AgencyModel):
    id: str
    agent_code: str
    agent_name: str
    port_id: str | None = None
    port_name: str
    port_country: str
    address: str | None = None
    phone: str | None = None
    email: str | None = None
    website: str | None = None
    contacts: list[Contact] = []
    services: list[PortAgentService] = []
    customs_license: str | None = None
    ppjk_license: str | None = None
    other_licenses: list[str] = []
    payment_terms: str | None = None
    currency: str = Field(default_factory=lambda: settings.default_currency)
    bank_name: str | None = None
    bank_account: str | None = None
    bank_swift: str | None = None
    service_rating: float | None = Field(None, ge=1, le=5)
    response_time_hours: float | None = None
    rating_count: int | None = None
    is_preferred: bool = False
    is_active: bool = True
    notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @field_validator("contacts", "services", "other_licenses", mode="before")
    @classmethod
    def null_lists_to_empty(cls, v):
        return none_to_list(v)


class PortAgentFormData(AgencyModel):
    agent_code: str | None = None
    agent_name: str | None = None
    port_id: str | None = None
    port_name: str | None = None
    port_country: str | None = None
    address: str | None = None
    phone: str | None = None
    email: str | None = None
    website: str | None = None
    contacts: list[Contact] = []
    services: list[str] = []
    customs_license: str | None = None
    ppjk_license: str | None = None
    other_licenses: list[str] = []
    payment_terms: str | None = None
    currency: str = Field(default_factory=lambda: settings.default_currency)
    bank_name: str | None = None
    bank_account: str | None = None
    bank_swift: str | None = None
    service_rating: float | None = None
    is_preferred: bool = False
    notes: str | None = None

    @field_validator("contacts", "services", "other_licenses", mode="before")
    @classmethod
    def null_lists_to_empty(cls, v):
        return none_to_list(v)

    @field_validator("currency", mode="before")
    @classmethod
    def null_currency_to_default(cls, v):
        return settings.default_currency if v is None else v


class AgentFeedback(AgencyModel):
    """A single rating left for a port agent after a job."""
    id: str | None = None
    agent_id: str
    rating: float
    feedback: str | None = None
    created_by: str | None = None
    created_at: datetime | None = None


def transform_port_agent_row(row) -> PortAgent:
    """Map a ``port_agents`` row into a PortAgent."""
    return parse_record(PortAgent, row, "port agent")
