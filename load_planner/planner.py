from __future__ import annotations

from typing import Iterable, Optional, Sequence

from load_planner.catalog import STANDARD_CONTAINERS
from load_planner.inventory import new_package_id
from load_planner.models import Container, LoadingPlan, LoadingStats, Package
from load_planner.selector import FallbackPolicy, suggest_optimal_container
from load_planner.stats import loading_stats

DEFAULT_PLAN_NAME = "Plan de chargement"


def build_loading_plan(
    packages: Iterable[Package],
    container: Optional[Container] = None,
    catalog: Sequence[Container] = STANDARD_CONTAINERS,
    name: Optional[str] = None,
    fallback: FallbackPolicy = FallbackPolicy.LAST,
) -> LoadingPlan:
    """Snapshot of the packages against the chosen or suggested container.

    An explicit ``container`` overrides the suggestion. With no packages there
    is no suggestion, and without an override the stats stay at zero.
    """
    packages = tuple(packages)
    suggested = suggest_optimal_container(packages, catalog, fallback) if packages else None
    chosen = container or suggested
    stats = loading_stats(packages, chosen) if chosen else LoadingStats.empty()
    return LoadingPlan(
        id=new_package_id("plan"),
        name=name or DEFAULT_PLAN_NAME,
        packages=packages,
        container=chosen,
        suggested=suggested,
        stats=stats,
    )
