from decimal import Decimal

from load_planner.catalog import STANDARD_CONTAINERS
from load_planner.metrics import container_volume, package_volume, total_volume, total_weight
from load_planner.models import Container, ContainerKind, LoadingStats, Package
from load_planner.selector import FallbackPolicy, suggest_optimal_container, suitable_containers
from load_planner.stats import (
    LoadingStatus,
    UtilizationLevel,
    is_overloaded,
    loading_stats,
    loading_status,
    utilization_level,
)

from tests.conftest import make_container, make_package


def test_package_volume_counts_every_unit(carton):
    assert package_volume(carton) == Decimal("0.036")
    single = make_package(quantity=1)
    double = make_package(quantity=2)
    assert package_volume(double) == 2 * package_volume(single)


def test_totals_of_empty_collection_are_zero():
    assert total_volume([]) == 0
    assert total_weight([]) == 0


def test_totals_sum_across_packages(carton):
    pallet = make_package("p2", 120, 80, 100, 25, quantity=2, type="Palette")
    assert total_volume([carton, pallet]) == Decimal("0.036") + Decimal("1.92")
    assert total_weight([carton, pallet]) == Decimal("60")


def test_totals_accept_generators(carton):
    assert total_weight(pkg for pkg in [carton]) == Decimal("10")


def test_container_volume(box_20ft):
    assert container_volume(box_20ft) == Decimal("33.081185")


def test_scenario_utilization_against_20ft(carton, box_20ft):
    stats = loading_stats([carton], box_20ft)
    assert stats.total_volume == Decimal("0.036")
    assert stats.total_weight == Decimal("10")
    assert stats.volume_utilization == Decimal("0.11")
    assert stats.weight_utilization == Decimal("0.04")
    assert stats.remaining_weight == Decimal("28220")


def test_overloaded_volume_is_not_clamped_but_remaining_is():
    small = make_container("tiny", 100, 100, 100, 1000)
    pkg = make_package(length=100, width=100, height=150, weight=10, quantity=1)
    stats = loading_stats([pkg], small)
    assert stats.volume_utilization == Decimal("150.00")
    assert stats.remaining_volume == 0
    assert stats.remaining_weight == Decimal("990")
    assert is_overloaded(stats)


def test_zero_capacity_gives_zero_utilization():
    flat = make_container("flat", 100, 100, 0, 0)
    stats = loading_stats([make_package()], flat)
    assert stats.volume_utilization == 0
    assert stats.weight_utilization == 0
    assert stats.remaining_volume == 0


def test_utilization_rounds_half_away_from_zero():
    container = make_container("c", 100, 100, 100, 800)
    pkg = make_package(weight="1", quantity=1)
    # 1 / 800 * 100 = 0.125
    assert loading_stats([pkg], container).weight_utilization == Decimal("0.13")


def test_loading_stats_is_repeatable(carton, box_20ft):
    assert loading_stats([carton], box_20ft) == loading_stats([carton], box_20ft)


def test_empty_stats_are_zero():
    stats = LoadingStats.empty()
    assert stats.volume_utilization == 0
    assert loading_status(stats) == LoadingStatus.UNDERUSED


def test_single_suitable_entry_is_returned():
    catalog = (
        make_container("small", 100, 100, 50, 1000),
        make_container("light", 200, 100, 100, 50),
        make_container("fits", 200, 100, 100, 500),
    )
    # 1.0 m3 and 100 kg
    pkg = make_package(length=100, width=100, height=100, weight=100, quantity=1)
    assert suggest_optimal_container([pkg], catalog).id == "fits"


def test_fallback_is_last_catalog_entry():
    catalog = (
        make_container("big", 1000, 1000, 1000, 10),
        make_container("last", 10, 10, 10, 10),
    )
    heavy = make_package(weight=1000)
    assert suggest_optimal_container([heavy], catalog).id == "last"
    assert suggest_optimal_container([heavy], catalog, FallbackPolicy.LARGEST).id == "big"


def test_tightest_fit_wins(carton):
    assert suggest_optimal_container([carton]).id == "truck-small"


def test_heavy_load_goes_to_20ft_container():
    load = make_package(length=100, width=100, height=100, weight=10000, quantity=1)
    assert suggest_optimal_container([load]).id == "container-20ft"


def test_oversize_load_falls_back_to_largest_truck():
    load = make_package(length=1000, width=1000, height=1000, weight=1, quantity=1)
    assert suggest_optimal_container([load]).id == STANDARD_CONTAINERS[-1].id


def test_equal_fill_ties_keep_catalog_order(carton):
    catalog = (
        make_container("first", 100, 100, 100, 100),
        make_container("second", 100, 100, 100, 100),
    )
    assert suggest_optimal_container([carton], catalog).id == "first"


def test_empty_packages_pick_smallest_container():
    assert suggest_optimal_container([]).id == "truck-small"
    assert len(suitable_containers([])) == len(STANDARD_CONTAINERS)


def test_empty_catalog_is_rejected(carton):
    try:
        suggest_optimal_container([carton], ())
        assert False, "ValueError expected"
    except ValueError:
        pass


def test_status_levels():
    assert utilization_level(Decimal("100.01")) == UtilizationLevel.OVER
    assert utilization_level(Decimal("90")) == UtilizationLevel.HIGH
    assert utilization_level(Decimal("75")) == UtilizationLevel.MEDIUM
    assert utilization_level(Decimal("70")) == UtilizationLevel.LOW


def test_status_needs_both_axes_for_optimal():
    container = make_container("c", 100, 100, 100, 100)
    balanced = make_package(length=100, width=100, height=80, weight=80, quantity=1)
    light = make_package(length=100, width=100, height=80, weight=10, quantity=1)
    assert loading_status(loading_stats([balanced], container)) == LoadingStatus.OPTIMAL
    assert loading_status(loading_stats([light], container)) == LoadingStatus.UNDERUSED


def test_plain_numbers_are_accepted():
    pkg = Package(id="p", type="Carton", length=30, width=20, height=15, weight=2.5, quantity=4)
    container = Container(
        id="c20",
        name="20 pieds",
        kind="container",
        length=589,
        width=235,
        height=239,
        max_weight=28230,
    )
    assert pkg.weight == Decimal("2.5")
    assert container.kind == ContainerKind.CONTAINER
    stats = loading_stats([pkg], container)
    assert stats.total_weight == Decimal("10")
    assert stats.volume_utilization == Decimal("0.11")
    assert stats.weight_utilization == Decimal("0.04")
    assert suggest_optimal_container([pkg]).id == "truck-small"
