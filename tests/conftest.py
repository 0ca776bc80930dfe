from decimal import Decimal

import pytest

from load_planner.models import Container, ContainerKind, Package


def make_package(pkg_id="p1", length=30, width=20, height=15, weight="2.5", quantity=1, type="Carton"):
    return Package(
        id=pkg_id,
        type=type,
        length=Decimal(str(length)),
        width=Decimal(str(width)),
        height=Decimal(str(height)),
        weight=Decimal(str(weight)),
        quantity=quantity,
    )


def make_container(container_id, length, width, height, max_weight, kind=ContainerKind.CONTAINER):
    return Container(
        id=container_id,
        name=container_id,
        kind=kind,
        length=Decimal(str(length)),
        width=Decimal(str(width)),
        height=Decimal(str(height)),
        max_weight=Decimal(str(max_weight)),
    )


@pytest.fixture
def carton():
    return make_package(quantity=4)


@pytest.fixture
def box_20ft():
    return make_container("container-20ft", 589, 235, 239, 28230)
