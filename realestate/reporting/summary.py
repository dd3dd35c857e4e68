"""
Multi-line valuation summary with currency-formatted figures.
"""

from typing import List

from ..models import PanelProperty, Property
from ..pricing import city_multiplier, panel_adjustments
from ..utils.formatting import format_currency, format_percent


def render_summary(prop: Property, currency: str = "HUF") -> str:
    """
    Render a valuation summary for a property.

    Args:
        prop: Property of either variant
        currency: Currency code for the price lines

    Returns:
        Summary text, one figure per line
    """
    lines: List[str] = [
        f"{type(prop).__name__} in {prop.city} ({prop.genre.name})",
        f"  Price per sqm:     {format_currency(prop.price_per_sqm, currency)}",
        f"  Area:              {prop.area_sqm} sqm, {prop.room_count:g} rooms",
        f"  City multiplier:   {_as_percent_change(city_multiplier(prop.city))}",
    ]

    if isinstance(prop, PanelProperty):
        factors = panel_adjustments(prop.floor, prop.is_insulated)
        adjustments = ", ".join(_as_percent_change(f) for f in factors) or "none"
        lines.append(f"  Floor:             {prop.floor}")
        lines.append(f"  Insulated:         {'yes' if prop.is_insulated else 'no'}")
        lines.append(f"  Panel adjustments: {adjustments}")

    lines.append(f"  Total price:       {format_currency(prop.total_price(), currency)}")
    lines.append(f"  Avg sqm per room:  {prop.average_area_per_room():.2f}")

    if isinstance(prop, PanelProperty):
        lines.append(f"  Room price:        {format_currency(prop.room_price(), currency)}")

    return "\n".join(lines)


def _as_percent_change(factor: float) -> str:
    """Render a multiplier such as 1.05 as '+5.0%'."""
    return format_percent((factor - 1) * 100, signed=True)
