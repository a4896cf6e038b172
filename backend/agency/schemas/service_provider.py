"""Pydantic schemas for ServiceProvider records and forms."""

from datetime import date, datetime

from pydantic import Field, field_validator

from agency.schemas.common import AgencyModel, Contact, none_to_list, parse_record
from agency.schemas.enums import ProviderType


class ServiceDetail(AgencyModel):
    service: str
    unit: str
    rate: float
    currency: str
    notes: str | None = None


class CoverageArea(AgencyModel):
    city: str
    province: str
    notes: str | None = None


class ProviderDocument(AgencyModel):
    name: str
    number: str | None = None
    expiry_date: date | None = None


class ServiceProvider(AgencyModel):
    id: str
    provider_code: str
    provider_name: str
    provider_type: ProviderType
    city: str | None = None
    province: str | None = None
    country: str = ""
    address: str | None = None
    phone: str | None = None
    email: str | None = None
    contacts: list[Contact] = []
    services_detail: list[ServiceDetail] = []
    coverage_areas: list[CoverageArea] = []
    payment_terms: str | None = None
    npwp: str | None = None  # Indonesian tax ID
    siup: str | None = None  # Indonesian trading licence
    documents: list[ProviderDocument] = []
    service_rating: float | None = Field(None, ge=1, le=5)
    is_preferred: bool = False
    is_active: bool = True
    notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @field_validator(
        "contacts", "services_detail", "coverage_areas", "documents", mode="before"
    )
    @classmethod
    def null_lists_to_empty(cls, v):
        return none_to_list(v)


class ServiceProviderFormData(AgencyModel):
    provider_code: str | None = None
    provider_name: str | None = None
    provider_type: str | None = None
    city: str | None = None
    province: str | None = None
    country: str | None = None
    address: str | None = None
    phone: str | None = None
    email: str | None = None
    contacts: list[Contact] = []
    services_detail: list[ServiceDetail] = []
    coverage_areas: list[CoverageArea] = []
    payment_terms: str | None = None
    npwp: str | None = None
    siup: str | None = None
    documents: list[ProviderDocument] = []
    service_rating: float | None = None
    is_preferred: bool = False
    notes: str | None = None

    @field_validator(
        "contacts", "services_detail", "coverage_areas", "documents", mode="before"
    )
    @classmethod
    def null_lists_to_empty(cls, v):
        return none_to_list(v)


def transform_service_provider_row(row) -> ServiceProvider:
    """Map a ``service_providers`` row into a ServiceProvider."""
    return parse_record(ServiceProvider, row, "service provider")
