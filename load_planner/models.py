from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional, Tuple

from load_planner.rounding import ZERO, round_pct, to_decimal


def _coerce_decimals(obj, names) -> None:
    # frozen dataclasses: plain ints and floats become Decimal once, at construction
    for name in names:
        object.__setattr__(obj, name, to_decimal(getattr(obj, name)))


class ContainerKind(str, Enum):
    CONTAINER = "container"
    TRUCK = "truck"


@dataclass(frozen=True)
class Package:
    """N identical units of one rectangular package (cm, kg per unit)."""

    id: str
    type: str
    length: Decimal
    width: Decimal
    height: Decimal
    weight: Decimal
    quantity: int = 1

    def __post_init__(self):
        _coerce_decimals(self, ("length", "width", "height", "weight"))
        object.__setattr__(self, "quantity", int(self.quantity))


@dataclass(frozen=True)
class Container:
    id: str
    name: str
    kind: ContainerKind
    length: Decimal
    width: Decimal
    height: Decimal
    max_weight: Decimal

    def __post_init__(self):
        _coerce_decimals(self, ("length", "width", "height", "max_weight"))
        object.__setattr__(self, "kind", ContainerKind(self.kind))


@dataclass(frozen=True)
class LoadingStats:
    total_volume: Decimal
    total_weight: Decimal
    container_volume: Decimal
    container_max_weight: Decimal
    volume_utilization: Decimal
    weight_utilization: Decimal
    remaining_volume: Decimal
    remaining_weight: Decimal

    @classmethod
    def empty(cls) -> "LoadingStats":
        return cls(
            total_volume=ZERO,
            total_weight=ZERO,
            container_volume=ZERO,
            container_max_weight=ZERO,
            volume_utilization=round_pct(ZERO),
            weight_utilization=round_pct(ZERO),
            remaining_volume=ZERO,
            remaining_weight=ZERO,
        )


@dataclass(frozen=True)
class LoadingPlan:
    id: str
    name: str
    packages: Tuple[Package, ...]
    container: Optional[Container]
    suggested: Optional[Container]
    stats: LoadingStats
    created_at: datetime = field(default_factory=datetime.now)
