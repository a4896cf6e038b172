"""Pydantic schema for Port reference data."""

from datetime import datetime

from agency.schemas.common import AgencyModel, parse_record
from agency.schemas.enums import PortType


class Port(AgencyModel):
    id: str
    port_code: str
    port_name: str
    country_code: str
    country_name: str
    port_type: PortType = PortType.SEAPORT
    city: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    timezone: str | None = None
    has_container_terminal: bool = False
    has_breakbulk_facility: bool = False
    has_ro_ro: bool = False
    max_draft_m: float | None = None
    max_vessel_loa_m: float | None = None
    primary_agent_id: str | None = None
    is_active: bool = True
    created_at: datetime | None = None


def transform_port_row(row) -> Port:
    """Map a ``ports`` row into a Port."""
    return parse_record(Port, row, "port")
