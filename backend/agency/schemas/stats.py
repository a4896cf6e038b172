"""Dashboard summary schemas.

The ``*StatsRecord`` models are the slice of an entity the dashboard
aggregates read, so counts can be computed from full records, ORM rows or
plain camelCase dicts alike.
"""

from agency.schemas.common import AgencyModel


class ShippingLineStatsRecord(AgencyModel):
    is_active: bool = False
    is_preferred: bool = False
    service_rating: float | None = None
    credit_limit: float | None = None


class PortAgentStatsRecord(AgencyModel):
    is_active: bool = False
    is_preferred: bool = False
    service_rating: float | None = None
    port_country: str | None = None


class ShippingLineStats(AgencyModel):
    total_lines: int = 0
    preferred_count: int = 0
    average_rating: float = 0.0
    total_credit_limit: float = 0.0


class PortAgentStats(AgencyModel):
    total_agents: int = 0
    preferred_count: int = 0
    average_rating: float = 0.0
    countries_count: int = 0


class FeedbackSummary(AgencyModel):
    average_rating: float = 0.0
    rating_count: int = 0
