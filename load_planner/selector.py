from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable, Sequence, Tuple

from load_planner.catalog import STANDARD_CONTAINERS
from load_planner.metrics import container_volume, total_volume, total_weight
from load_planner.models import Container, Package
from load_planner.rounding import ZERO

logger = logging.getLogger(__name__)


class FallbackPolicy(str, Enum):
    """What to suggest when no catalog entry holds the whole demand.

    LAST trusts the catalog order and returns its final entry, which the
    default catalog keeps as the largest capacity. LARGEST searches for the
    biggest volume instead, for catalogs that are not ordered that way.
    """

    LAST = "last"
    LARGEST = "largest"


def _is_suitable(container: Container, demand_volume, demand_weight) -> bool:
    return container_volume(container) >= demand_volume and container.max_weight >= demand_weight


def _fill_ratio(container: Container, demand_volume):
    supply = container_volume(container)
    if supply <= 0:
        return ZERO
    return demand_volume / supply


def _fallback(catalog: Sequence[Container], policy: FallbackPolicy) -> Container:
    if policy == FallbackPolicy.LARGEST:
        best_index = max(
            range(len(catalog)),
            key=lambda idx: (container_volume(catalog[idx]), catalog[idx].max_weight, -idx),
        )
        return catalog[best_index]
    return catalog[-1]


def suitable_containers(
    packages: Iterable[Package],
    catalog: Sequence[Container] = STANDARD_CONTAINERS,
) -> Tuple[Container, ...]:
    packages = list(packages)
    demand_volume = total_volume(packages)
    demand_weight = total_weight(packages)
    return tuple(c for c in catalog if _is_suitable(c, demand_volume, demand_weight))


def suggest_optimal_container(
    packages: Iterable[Package],
    catalog: Sequence[Container] = STANDARD_CONTAINERS,
    fallback: FallbackPolicy = FallbackPolicy.LAST,
) -> Container:
    """Pick the catalog entry the demand fills most tightly.

    Only entries that hold the whole demand on both volume and weight are
    candidates. Among them the highest demand/volume ratio wins; equal ratios
    go to the smaller entry, then to the one that comes first in the catalog. When no entry is
    suitable the fallback policy decides. An empty package list makes every
    entry suitable, so the smallest one is returned.
    """
    catalog = tuple(catalog)
    if not catalog:
        raise ValueError("catalog must contain at least one container")
    packages = list(packages)
    demand_volume = total_volume(packages)
    demand_weight = total_weight(packages)

    candidates = [
        (idx, container)
        for idx, container in enumerate(catalog)
        if _is_suitable(container, demand_volume, demand_weight)
    ]
    if not candidates:
        chosen = _fallback(catalog, FallbackPolicy(fallback))
        logger.info(
            "No container holds %s m3 / %s kg, falling back to %s",
            demand_volume,
            demand_weight,
            chosen.id,
        )
        return chosen

    # equal ratios only happen for equal volumes, or for zero demand where the
    # volume term makes the smallest entry win
    _, best = min(
        candidates,
        key=lambda item: (-_fill_ratio(item[1], demand_volume), container_volume(item[1]), item[0]),
    )
    return best
