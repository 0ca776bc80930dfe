from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from load_planner.models import Container, Package
from load_planner.rounding import CM3_PER_M3, ZERO


def package_volume(pkg: Package) -> Decimal:
    """Volume in m3 of every unit in the record, not just one."""
    return (pkg.length * pkg.width * pkg.height * pkg.quantity) / CM3_PER_M3


def total_volume(packages: Iterable[Package]) -> Decimal:
    return sum((package_volume(pkg) for pkg in packages), ZERO)


def total_weight(packages: Iterable[Package]) -> Decimal:
    return sum((pkg.weight * pkg.quantity for pkg in packages), ZERO)


def container_volume(container: Container) -> Decimal:
    return (container.length * container.width * container.height) / CM3_PER_M3
