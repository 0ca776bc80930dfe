from load_planner.catalog import CatalogError, STANDARD_CONTAINERS, find_container, load_container_catalog
from load_planner.inventory import DuplicatePackageError, PackageList, new_package_id
from load_planner.io import PackageInputError, load_packages_csv, load_packages_excel, normalize_package_rows
from load_planner.metrics import container_volume, package_volume, total_volume, total_weight
from load_planner.planner import build_loading_plan
from load_planner.selector import FallbackPolicy, suggest_optimal_container, suitable_containers
from load_planner.stats import loading_stats, loading_status

__all__ = [
    "CatalogError",
    "STANDARD_CONTAINERS",
    "find_container",
    "load_container_catalog",
    "DuplicatePackageError",
    "PackageList",
    "new_package_id",
    "PackageInputError",
    "load_packages_csv",
    "load_packages_excel",
    "normalize_package_rows",
    "container_volume",
    "package_volume",
    "total_volume",
    "total_weight",
    "build_loading_plan",
    "FallbackPolicy",
    "suggest_optimal_container",
    "suitable_containers",
    "loading_stats",
    "loading_status",
]
