"""Expose component submodules for convenience."""

from .charts import (
    schedule_chart,
    composition_donut,
    fixed_income_chart,
    progress_gauge,
    allocation_donut,
    accumulation_chart,
)

__all__ = [
    "schedule_chart",
    "composition_donut",
    "fixed_income_chart",
    "progress_gauge",
    "allocation_donut",
    "accumulation_chart",
]
