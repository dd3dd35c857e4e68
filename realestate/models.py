"""
Data models for the valuation model.

Two variants share one data shape:
- Property: generic listing, priced by area and city
- PanelProperty: prefabricated block flat, with floor and insulation
  adjustments on top of the generic price
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .errors import InvalidInputError
from .hooks import ValuationHook, null_hook
from .pricing import base_total, panel_adjustments, truncate_price


class Genre(Enum):
    """
    Property genre.

    Stored and reported only; no pricing rule depends on it yet.
    """
    FAMILY_HOUSE = "family_house"
    CONDOMINIUM = "condominium"
    FARM = "farm"

    @classmethod
    def from_string(cls, value: str) -> Optional["Genre"]:
        """Convert string to Genre, case-insensitive."""
        normalised = value.lower().strip().replace(" ", "_").replace("-", "_")
        for member in cls:
            if member.value == normalised:
                return member
        return None


# =============================================================================
# Capabilities
# =============================================================================

class Valuable(ABC):
    """Anything that can be discounted, priced and described."""

    @abstractmethod
    def apply_discount(self, percentage: int) -> None:
        """Reduce the price per sqm by a percentage."""

    @abstractmethod
    def total_price(self) -> int:
        """Final valuation in whole currency units."""

    @abstractmethod
    def average_area_per_room(self) -> float:
        """Square metres per room."""

    @abstractmethod
    def describe(self) -> str:
        """One-line report including the computed figures."""


class PanelValuable(ABC):
    """Extra capabilities of panel building flats."""

    @abstractmethod
    def has_same_valuation(self, other: Valuable) -> bool:
        """Whether both sides value to the same total price."""

    @abstractmethod
    def room_price(self) -> int:
        """Unadjusted base price divided by room count."""


# =============================================================================
# Variants
# =============================================================================

@dataclass
class Property(Valuable):
    """
    A generic real estate listing.

    Only ``price_per_sqm`` changes after construction, and only through
    ``apply_discount``.
    """
    city: str
    price_per_sqm: float
    area_sqm: int
    room_count: float
    genre: Genre

    hook: ValuationHook = field(
        default=null_hook, kw_only=True, repr=False, compare=False
    )

    def __post_init__(self):
        """Validate and normalise fields after initialization."""
        self._validate()
        self.price_per_sqm = float(self.price_per_sqm)
        self.area_sqm = int(self.area_sqm)
        self.room_count = float(self.room_count)
        self.hook("constructed", self, None)

    def _validate(self) -> None:
        if not math.isfinite(self.price_per_sqm) or self.price_per_sqm < 0:
            raise InvalidInputError(
                "price_per_sqm", self.price_per_sqm, "must be a finite number >= 0"
            )
        if not float(self.area_sqm).is_integer() or self.area_sqm < 0:
            raise InvalidInputError(
                "area_sqm", self.area_sqm, "must be a whole number >= 0"
            )
        _check_room_count(self.room_count)
        self.genre = _coerce_genre(self.genre)

    # -------------------------------------------------------------------------
    # Valuation
    # -------------------------------------------------------------------------

    def apply_discount(self, percentage: int) -> None:
        """
        Reduce the price per sqm by ``percentage`` percent.

        The percentage is not bounded: over 100 makes the price negative,
        below 0 raises it. Repeated discounts compound.
        """
        self.price_per_sqm = self.price_per_sqm * (1 - percentage / 100)
        self.hook("apply_discount", self, self.price_per_sqm)

    def total_price(self) -> int:
        """Price x area x city multiplier, truncated."""
        total = truncate_price(self._adjusted_total())
        self.hook("total_price", self, total)
        return total

    def _adjusted_total(self) -> float:
        return base_total(self.price_per_sqm, self.area_sqm, self.city)

    def average_area_per_room(self) -> float:
        """Area divided by room count."""
        _check_room_count(self.room_count)
        average = self.area_sqm / self.room_count
        self.hook("average_area_per_room", self, average)
        return average

    def has_same_valuation(self, other: Valuable) -> bool:
        """
        Compare total prices with another property of either variant.

        Each side computes its own total, so a panel flat and a generic
        property with equal base figures can still differ.
        """
        same = self.total_price() == other.total_price()
        self.hook("has_same_valuation", self, same)
        return same

    # -------------------------------------------------------------------------
    # Reporting
    # -------------------------------------------------------------------------

    def describe(self) -> str:
        """
        One-line report of the listing.

        Total price and average area are recomputed on every call.
        """
        parts = self._describe_fields()
        parts.append(f"total price={self.total_price()}")
        parts.append(f"avg sqm per room={self.average_area_per_room()}")
        text = f"{type(self).__name__} [{', '.join(parts)}]"
        self.hook("describe", self, None)
        return text

    def _describe_fields(self) -> list[str]:
        return [
            f"city={self.city}",
            f"price per sqm={self.price_per_sqm}",
            f"sqm={self.area_sqm}",
            f"rooms={self.room_count}",
            f"genre={self.genre.name}",
        ]

    def __str__(self) -> str:
        return self.describe()


@dataclass
class PanelProperty(Property, PanelValuable):
    """
    A flat in a prefabricated panel building.

    Floors 0-2 carry a 5% premium, floor 10 a 5% discount, and an
    insulated building another 5% premium.
    """
    floor: int
    is_insulated: bool

    def _validate(self) -> None:
        super()._validate()
        if (
            isinstance(self.floor, bool)
            or not isinstance(self.floor, (int, float))
            or not float(self.floor).is_integer()
        ):
            raise InvalidInputError("floor", self.floor, "must be a whole number")
        if not isinstance(self.is_insulated, bool):
            raise InvalidInputError("is_insulated", self.is_insulated, "must be True or False")
        self.floor = int(self.floor)

    def _adjusted_total(self) -> float:
        total = super()._adjusted_total()
        for factor in panel_adjustments(self.floor, self.is_insulated):
            total *= factor
        return total

    def room_price(self) -> int:
        """
        Base price per room.

        Uses price per sqm x area only: city, floor and insulation factors
        from ``total_price()`` are not included.
        """
        _check_room_count(self.room_count)
        price = truncate_price(self.price_per_sqm * self.area_sqm / self.room_count)
        self.hook("room_price", self, price)
        return price

    def _describe_fields(self) -> list[str]:
        parts = super()._describe_fields()
        parts.append(f"floor={self.floor}")
        parts.append(f"insulated={self.is_insulated}")
        return parts


def _check_room_count(room_count: float) -> None:
    if not math.isfinite(room_count) or room_count <= 0:
        raise InvalidInputError("room_count", room_count, "must be a finite number > 0")


def _coerce_genre(value) -> Genre:
    """Accept a Genre or a genre name such as "farm" or "family house"."""
    if isinstance(value, Genre):
        return value
    genre = Genre.from_string(value) if isinstance(value, str) else None
    if genre is None:
        raise InvalidInputError(
            "genre", value, "must be one of " + ", ".join(g.name for g in Genre)
        )
    return genre
