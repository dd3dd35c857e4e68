"""
Fixed demonstration scenarios.

Each scenario builds one property from literal inputs and produces the
lines the console demo prints for it.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional

from ..hooks import ValuationHook, null_hook
from ..models import Genre, PanelProperty, Property


@dataclass
class ScenarioResult:
    """Outcome of one demonstration scenario."""
    title: str
    prop: Property
    extra_lines: List[str] = field(default_factory=list)

    def report_lines(self) -> List[str]:
        """Heading, the property's own report, then any extra lines."""
        return [f"=== {self.title} ===", self.prop.describe(), *self.extra_lines]


def property_creation(hook: ValuationHook = null_hook) -> ScenarioResult:
    """Generic farm in a city without a multiplier."""
    house = Property("Tokaj", 7000, 350, 3, Genre.FARM, hook=hook)
    return ScenarioResult(title="Test 1: Property Creation", prop=house)


def panel_creation(hook: ValuationHook = null_hook) -> ScenarioResult:
    """Panel flat on a middle floor, not insulated, unknown city."""
    panel = PanelProperty(
        "Kalmanhaza", 1500, 60, 3, Genre.CONDOMINIUM, 6, False, hook=hook
    )
    return ScenarioResult(title="Test 2: Panel Creation", prop=panel)


def panel_discount(hook: ValuationHook = null_hook) -> ScenarioResult:
    """Insulated panel flat after a 25% discount."""
    panel = PanelProperty(
        "Tokaj", 7000, 350, 3, Genre.CONDOMINIUM, 3, True, hook=hook
    )
    panel.apply_discount(25)
    return ScenarioResult(
        title="Test 3: Panel Discount",
        prop=panel,
        extra_lines=[f"Room price: {panel.room_price()}"],
    )


SCENARIOS: List[Callable[..., ScenarioResult]] = [
    property_creation,
    panel_creation,
    panel_discount,
]


def run_scenarios(hook: Optional[ValuationHook] = None) -> List[ScenarioResult]:
    """
    Run every scenario in order.

    Args:
        hook: Observability hook attached to each scenario's property

    Returns:
        One ScenarioResult per scenario
    """
    hook = hook or null_hook
    return [scenario(hook) for scenario in SCENARIOS]
