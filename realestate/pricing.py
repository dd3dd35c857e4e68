"""
Pricing tables and multipliers.

Implements:
- City multipliers (exact, accent-sensitive name match)
- Panel building adjustments (low floor, top floor, insulation)
- Truncation of the running total to whole currency units
"""

from __future__ import annotations

import math
from typing import Final


# =============================================================================
# City Multipliers
# =============================================================================

# Cities not listed here are valid and priced at 1.0
CITY_MULTIPLIERS: Final[dict[str, float]] = {
    "Budapest": 1.3,
    "Debrecen": 1.2,
    "Nyíregyháza": 1.15,
}

DEFAULT_CITY_MULTIPLIER: Final[float] = 1.0


# =============================================================================
# Panel Building Adjustments
# =============================================================================

LOW_FLOOR_MIN: Final[int] = 0
LOW_FLOOR_MAX: Final[int] = 2
LOW_FLOOR_PREMIUM: Final[float] = 1.05

TOP_FLOOR: Final[int] = 10
TOP_FLOOR_DISCOUNT: Final[float] = 0.95

INSULATION_PREMIUM: Final[float] = 1.05


def city_multiplier(city: str) -> float:
    """
    Look up the price multiplier for a city.

    Matching is exact: "budapest" or "Nyiregyhaza" (no accents) get the
    default multiplier.
    """
    return CITY_MULTIPLIERS.get(city, DEFAULT_CITY_MULTIPLIER)


def panel_adjustments(floor: int, is_insulated: bool) -> list[float]:
    """
    Factors applied to a panel flat's total, in application order.

    Low floor (0-2) and top floor (10) ranges are disjoint, so at most one
    floor factor applies. Insulation stacks on top of either.

    Args:
        floor: Floor number, negative for basements
        is_insulated: Whether the building has been insulated

    Returns:
        List of multipliers, empty when nothing applies
    """
    factors = []
    if LOW_FLOOR_MIN <= floor <= LOW_FLOOR_MAX:
        factors.append(LOW_FLOOR_PREMIUM)
    if floor == TOP_FLOOR:
        factors.append(TOP_FLOOR_DISCOUNT)
    if is_insulated:
        factors.append(INSULATION_PREMIUM)
    return factors


def base_total(price_per_sqm: float, area_sqm: int, city: str) -> float:
    """Untruncated price x area x city multiplier."""
    return price_per_sqm * area_sqm * city_multiplier(city)


def truncate_price(total: float) -> int:
    """Drop the fractional part (toward zero, not rounded)."""
    return math.trunc(total)
