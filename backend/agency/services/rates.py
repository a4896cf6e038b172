"""Shipping rate arithmetic and selection.

A rate's total is its ocean freight plus every surcharge:

    total_rate = ocean_freight + baf + caf + pss + ens + sum(other_surcharges)

Freight cost for a booking multiplies the per-container amounts by the
container quantity (minimum 1).  A rate is usable on a given day when it is
active and the day falls inside ``valid_from``..``valid_to`` inclusive.
"""

import logging
from datetime import date
from typing import Iterable

from agency.config import settings
from agency.schemas.enums import ContainerType
from agency.schemas.shipping_rate import (
    BestRateResult,
    FreightCostResult,
    ShippingRate,
    SurchargeItem,
)

logger = logging.getLogger(__name__)


def calculate_total_rate(
    ocean_freight: float,
    baf: float = 0.0,
    caf: float = 0.0,
    pss: float = 0.0,
    ens: float = 0.0,
    other_surcharges: Iterable[SurchargeItem] = (),
) -> float:
    other_total = sum(item.amount for item in other_surcharges)
    return ocean_freight + baf + caf + pss + ens + other_total


def _surcharges_per_unit(rate: ShippingRate) -> float:
    return (
        (rate.baf or 0)
        + (rate.caf or 0)
        + (rate.pss or 0)
        + (rate.ens or 0)
        + sum(item.amount for item in rate.other_surcharges)
    )


def calculate_total_freight_cost(
    rate: ShippingRate,
    quantity: int = 1,
) -> FreightCostResult:
    """Cost of shipping ``quantity`` containers at ``rate``.

    Quantities below 1 are charged as a single container.
    """
    quantity = max(quantity, 1)
    ocean_freight = rate.ocean_freight * quantity
    surcharges = _surcharges_per_unit(rate) * quantity

    return FreightCostResult(
        ocean_freight=ocean_freight,
        surcharges=surcharges,
        total=ocean_freight + surcharges,
        currency=rate.currency,
    )


def is_rate_valid(rate: ShippingRate, on: date | None = None) -> bool:
    """True if the rate is active and ``on`` (default today) is within its
    validity window."""
    if not rate.is_active:
        return False
    on = on or date.today()
    return rate.valid_from <= on <= rate.valid_to


def validate_rate_total(rate: ShippingRate) -> bool:
    """Check the stored ``total_rate`` against its components."""
    expected = calculate_total_rate(
        rate.ocean_freight,
        rate.baf,
        rate.caf,
        rate.pss,
        rate.ens,
        rate.other_surcharges,
    )
    return abs(rate.total_rate - expected) <= settings.rate_total_tolerance


def find_best_rate(
    rates: Iterable[ShippingRate],
    origin_port_id: str,
    destination_port_id: str,
    container_type: ContainerType | str | None = None,
    shipping_line_id: str | None = None,
    on: date | None = None,
) -> BestRateResult:
    """Pick the cheapest usable rate for a lane.

    Matches are rates for the given origin and destination (and container
    type / shipping line when given) that are valid on ``on``.  The cheapest
    by ``total_rate`` is returned as ``best`` with up to
    ``settings.best_rate_alternatives`` runners-up.
    """
    on = on or date.today()
    matches = [
        rate for rate in rates
        if rate.origin_port_id == origin_port_id
        and rate.destination_port_id == destination_port_id
        and (container_type is None or rate.container_type == container_type)
        and (shipping_line_id is None or rate.shipping_line_id == shipping_line_id)
        and is_rate_valid(rate, on)
    ]

    logger.debug(
        "Rate search %s -> %s (%s): %d match(es)",
        origin_port_id, destination_port_id, container_type or "any", len(matches),
    )

    if not matches:
        return BestRateResult(best=None, alternatives=[])

    matches.sort(key=lambda rate: rate.total_rate)
    return BestRateResult(
        best=matches[0],
        alternatives=matches[1:1 + settings.best_rate_alternatives],
    )
