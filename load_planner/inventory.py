from __future__ import annotations

import uuid
from typing import Iterable, Iterator, Tuple

from load_planner.models import Package


class DuplicatePackageError(ValueError):
    pass


def new_package_id(prefix: str = "pkg") -> str:
    return f"{prefix}-{uuid.uuid4().hex}"


class PackageList:
    """Ordered, immutable set of packages keyed by id.

    Every change returns a new list so a snapshot handed to the engine is
    never altered afterwards.
    """

    __slots__ = ("_items",)

    def __init__(self, packages: Iterable[Package] = ()):
        items: Tuple[Package, ...] = tuple(packages)
        ids = [pkg.id for pkg in items]
        if len(ids) != len(set(ids)):
            raise DuplicatePackageError("Identifiants de colis dupliqués")
        self._items = items

    def __iter__(self) -> Iterator[Package]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __eq__(self, other) -> bool:
        if not isinstance(other, PackageList):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"PackageList({list(self._items)!r})"

    @property
    def packages(self) -> Tuple[Package, ...]:
        return self._items

    def ids(self) -> list[str]:
        return [pkg.id for pkg in self._items]

    def get(self, package_id: str):
        return next((pkg for pkg in self._items if pkg.id == package_id), None)

    def add(self, pkg: Package) -> "PackageList":
        if self.get(pkg.id) is not None:
            raise DuplicatePackageError(f"Le colis '{pkg.id}' existe déjà")
        return PackageList(self._items + (pkg,))

    def extend(self, packages: Iterable[Package]) -> "PackageList":
        return PackageList(self._items + tuple(packages))

    def remove(self, package_id: str) -> "PackageList":
        return PackageList(pkg for pkg in self._items if pkg.id != package_id)
