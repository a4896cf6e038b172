"""Dashboard statistics for shipping lines and port agents.

Only active records count.  Average ratings use records that have a rating
and are rounded half-up to 2 places; with no rated records the average is 0.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Iterable

from agency.schemas.port_agent import AgentFeedback, PortAgent
from agency.schemas.shipping_line import ShippingLine
from agency.schemas.stats import (
    FeedbackSummary,
    PortAgentStats,
    PortAgentStatsRecord,
    ShippingLineStats,
    ShippingLineStatsRecord,
)


def _round2(value: float) -> float:
    return float(Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def _average_rating(ratings: list[float]) -> float:
    if not ratings:
        return 0.0
    return _round2(sum(ratings) / len(ratings))


def _records(items: Iterable[Any], record_cls) -> list:
    """Read entity records, ORM rows or camelCase dicts into ``record_cls``."""
    return [record_cls.model_validate(item) for item in items]


def calculate_shipping_line_stats(
    lines: Iterable[ShippingLine | dict],
) -> ShippingLineStats:
    records = _records(lines, ShippingLineStatsRecord)
    active = [line for line in records if line.is_active]

    return ShippingLineStats(
        total_lines=len(active),
        preferred_count=sum(1 for line in active if line.is_preferred),
        average_rating=_average_rating(
            [line.service_rating for line in active if line.service_rating is not None]
        ),
        total_credit_limit=sum(line.credit_limit or 0 for line in active),
    )


def calculate_port_agent_stats(agents: Iterable[PortAgent | dict]) -> PortAgentStats:
    records = _records(agents, PortAgentStatsRecord)
    active = [agent for agent in records if agent.is_active]

    return PortAgentStats(
        total_agents=len(active),
        preferred_count=sum(1 for agent in active if agent.is_preferred),
        average_rating=_average_rating(
            [agent.service_rating for agent in active if agent.service_rating is not None]
        ),
        # Exact match: "Indonesia" and "indonesia" are two countries
        countries_count=len({agent.port_country for agent in active}),
    )


def summarize_agent_feedback(feedback: Iterable[AgentFeedback]) -> FeedbackSummary:
    """Recompute a port agent's ``service_rating`` and ``rating_count``
    from every feedback entry left for it."""
    ratings = [entry.rating for entry in feedback]
    return FeedbackSummary(
        average_rating=_average_rating(ratings),
        rating_count=len(ratings),
    )
