"""Pydantic schemas for ShippingRate records, forms and rate results."""

from datetime import date, datetime

from pydantic import Field, field_validator

from agency.config import settings
from agency.schemas.common import AgencyModel, none_to_list, parse_record
from agency.schemas.enums import ContainerType, ShippingTerms


class SurchargeItem(AgencyModel):
    name: str
    amount: float
    currency: str


class ShippingRate(AgencyModel):
    """A carrier's tariff for one lane and container type.

    ``total_rate`` is stored alongside the components; see
    ``agency.services.rates.validate_rate_total`` for the consistency check.
    """
    id: str
    shipping_line_id: str
    origin_port_id: str
    destination_port_id: str
    container_type: ContainerType
    ocean_freight: float = Field(..., ge=0)
    currency: str = Field(default_factory=lambda: settings.default_currency)
    baf: float = 0.0
    caf: float = 0.0
    pss: float = 0.0
    ens: float = 0.0
    other_surcharges: list[SurchargeItem] = []
    total_rate: float = 0.0
    transit_days: int | None = None
    frequency: str | None = None
    valid_from: date
    valid_to: date
    terms: ShippingTerms = ShippingTerms.CY_CY
    notes: str | None = None
    is_active: bool = True
    created_at: datetime | None = None

    # Joined view columns
    line_name: str | None = None
    line_code: str | None = None
    origin_code: str | None = None
    origin_port: str | None = None
    destination_code: str | None = None
    destination_port: str | None = None

    @field_validator("other_surcharges", mode="before")
    @classmethod
    def null_lists_to_empty(cls, v):
        return none_to_list(v)

    @field_validator("baf", "caf", "pss", "ens", mode="before")
    @classmethod
    def null_surcharge_to_zero(cls, v):
        return 0.0 if v is None else v


class ShippingRateFormData(AgencyModel):
    shipping_line_id: str | None = None
    origin_port_id: str | None = None
    destination_port_id: str | None = None
    container_type: str | None = None
    ocean_freight: float | None = None
    currency: str = Field(default_factory=lambda: settings.default_currency)
    baf: float | None = None
    caf: float | None = None
    pss: float | None = None
    ens: float | None = None
    other_surcharges: list[SurchargeItem] = []
    transit_days: int | None = None
    frequency: str | None = None
    valid_from: date | None = None
    valid_to: date | None = None
    terms: str | None = None
    notes: str | None = None

    @field_validator("other_surcharges", mode="before")
    @classmethod
    def null_lists_to_empty(cls, v):
        return none_to_list(v)

    @field_validator("currency", mode="before")
    @classmethod
    def null_currency_to_default(cls, v):
        return settings.default_currency if v is None else v


class FreightCostResult(AgencyModel):
    ocean_freight: float
    surcharges: float
    total: float
    currency: str


class BestRateResult(AgencyModel):
    best: ShippingRate | None = None
    alternatives: list[ShippingRate] = []


def transform_shipping_rate_row(row) -> ShippingRate:
    """Map a ``shipping_rates`` row into a ShippingRate."""
    return parse_record(ShippingRate, row, "shipping rate")
