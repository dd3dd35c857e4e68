"""
Real Estate Valuation Model

Prices listings by area, city and (for panel building flats) floor and
insulation:
1. Property: price per sqm x area x city multiplier
2. PanelProperty: the same, then low floor / top floor / insulation factors
3. Discounts reduce the price per sqm and compound multiplicatively
4. Totals and room prices are truncated to whole currency units
"""

from .errors import InvalidInputError
from .hooks import LoggingHook, RecordingHook, ValuationHook, null_hook
from .models import Genre, PanelProperty, PanelValuable, Property, Valuable
from .pricing import CITY_MULTIPLIERS, city_multiplier, panel_adjustments

__all__ = [
    # Models
    "Genre",
    "Property",
    "PanelProperty",
    "Valuable",
    "PanelValuable",
    # Pricing
    "CITY_MULTIPLIERS",
    "city_multiplier",
    "panel_adjustments",
    # Hooks
    "ValuationHook",
    "null_hook",
    "LoggingHook",
    "RecordingHook",
    # Errors
    "InvalidInputError",
]

__version__ = "1.0"
