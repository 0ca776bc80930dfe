from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Iterable

from load_planner.metrics import container_volume, total_volume, total_weight
from load_planner.models import Container, LoadingStats, Package
from load_planner.rounding import ZERO, ratio_pct

OVERLOAD_PCT = Decimal("100")
WARNING_PCT = Decimal("85")
OPTIMAL_PCT = Decimal("70")


class UtilizationLevel(str, Enum):
    OVER = "over"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class LoadingStatus(str, Enum):
    OVERLOADED = "overloaded"
    WARNING = "warning"
    OPTIMAL = "optimal"
    UNDERUSED = "underused"


def loading_stats(packages: Iterable[Package], container: Container) -> LoadingStats:
    """Demand of ``packages`` measured against one container.

    Utilization percentages are rounded to two places here and may exceed
    100 when the container is overloaded. Remaining capacity never goes
    below zero.
    """
    packages = list(packages)
    demand_volume = total_volume(packages)
    demand_weight = total_weight(packages)
    supply_volume = container_volume(container)
    supply_weight = container.max_weight
    return LoadingStats(
        total_volume=demand_volume,
        total_weight=demand_weight,
        container_volume=supply_volume,
        container_max_weight=supply_weight,
        volume_utilization=ratio_pct(demand_volume, supply_volume),
        weight_utilization=ratio_pct(demand_weight, supply_weight),
        remaining_volume=max(ZERO, supply_volume - demand_volume),
        remaining_weight=max(ZERO, supply_weight - demand_weight),
    )


def utilization_level(pct: Decimal) -> UtilizationLevel:
    if pct > OVERLOAD_PCT:
        return UtilizationLevel.OVER
    if pct > WARNING_PCT:
        return UtilizationLevel.HIGH
    if pct > OPTIMAL_PCT:
        return UtilizationLevel.MEDIUM
    return UtilizationLevel.LOW


def loading_status(stats: LoadingStats) -> LoadingStatus:
    volume_pct = stats.volume_utilization
    weight_pct = stats.weight_utilization
    if volume_pct > OVERLOAD_PCT or weight_pct > OVERLOAD_PCT:
        return LoadingStatus.OVERLOADED
    if volume_pct > WARNING_PCT or weight_pct > WARNING_PCT:
        return LoadingStatus.WARNING
    if volume_pct > OPTIMAL_PCT and weight_pct > OPTIMAL_PCT:
        return LoadingStatus.OPTIMAL
    return LoadingStatus.UNDERUSED


def is_overloaded(stats: LoadingStats) -> bool:
    return loading_status(stats) == LoadingStatus.OVERLOADED
