"""
Reports and the console demonstration.
"""

from .summary import render_summary
from .scenarios import ScenarioResult, run_scenarios

__all__ = ["render_summary", "ScenarioResult", "run_scenarios"]
