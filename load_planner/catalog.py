from __future__ import annotations

import logging
from typing import Iterable, Optional, Tuple

import yaml

from load_planner.models import Container, ContainerKind
from load_planner.rounding import to_decimal

logger = logging.getLogger(__name__)

# Ordered from the 20ft box to the largest truck. The selector falls back to
# the last entry when nothing fits, so keep the largest capacity at the end.
DEFAULT_CATALOG_YAML = """
containers:
  - id: container-20ft
    name: Conteneur 20 pieds
    kind: container
    length_cm: 589
    width_cm: 235
    height_cm: 239
    max_weight_kg: 28230
  - id: container-40ft
    name: Conteneur 40 pieds
    kind: container
    length_cm: 1203
    width_cm: 235
    height_cm: 239
    max_weight_kg: 26760
  - id: truck-small
    name: Camion 3.5T
    kind: truck
    length_cm: 420
    width_cm: 180
    height_cm: 180
    max_weight_kg: 3500
  - id: truck-medium
    name: Camion 7.5T
    kind: truck
    length_cm: 620
    width_cm: 240
    height_cm: 240
    max_weight_kg: 7500
  - id: truck-large
    name: Camion 19T
    kind: truck
    length_cm: 1360
    width_cm: 248
    height_cm: 270
    max_weight_kg: 19000
""".strip()

REQUIRED_FIELDS = ["id", "name", "kind", "length_cm", "width_cm", "height_cm", "max_weight_kg"]


class CatalogError(ValueError):
    pass


def _parse_entry(item: dict, entry_no: int) -> Container:
    if not isinstance(item, dict):
        raise CatalogError(f"Entrée {entry_no}: format invalide")
    missing = [name for name in REQUIRED_FIELDS if item.get(name) in (None, "")]
    if missing:
        raise CatalogError(f"Entrée {entry_no}: champs manquants: {', '.join(missing)}")
    try:
        kind = ContainerKind(str(item["kind"]).strip().lower())
    except ValueError as exc:
        raise CatalogError(f"Entrée {entry_no}: type de contenant inconnu '{item['kind']}'") from exc

    values = {}
    for name in ("length_cm", "width_cm", "height_cm", "max_weight_kg"):
        raw = item[name]
        try:
            value = to_decimal(raw)
        except Exception as exc:  # noqa: BLE001
            raise CatalogError(f"Entrée {entry_no}: {name} '{raw}' n'est pas un nombre") from exc
        if not value.is_finite() or value <= 0:
            raise CatalogError(f"Entrée {entry_no}: {name} doit être supérieur à 0")
        values[name] = value

    return Container(
        id=str(item["id"]).strip(),
        name=str(item["name"]).strip(),
        kind=kind,
        length=values["length_cm"],
        width=values["width_cm"],
        height=values["height_cm"],
        max_weight=values["max_weight_kg"],
    )


def load_container_catalog(content: str) -> Tuple[Container, ...]:
    try:
        data = yaml.safe_load(content) or {}
    except yaml.YAMLError as exc:
        raise CatalogError(f"YAML invalide: {exc}") from exc
    if not isinstance(data, dict):
        raise CatalogError("Le document doit contenir une clé 'containers'")
    items = data.get("containers") or []
    if not items:
        raise CatalogError("Le catalogue ne contient aucun contenant")

    containers = []
    seen = set()
    for entry_no, item in enumerate(items, start=1):
        container = _parse_entry(item, entry_no)
        if container.id in seen:
            raise CatalogError(f"Entrée {entry_no}: identifiant dupliqué '{container.id}'")
        seen.add(container.id)
        containers.append(container)
    logger.debug("Loaded catalog with %d containers", len(containers))
    return tuple(containers)


def find_container(container_id: str, catalog: Iterable[Container]) -> Optional[Container]:
    return next((c for c in catalog if c.id == container_id), None)


STANDARD_CONTAINERS: Tuple[Container, ...] = load_container_catalog(DEFAULT_CATALOG_YAML)
