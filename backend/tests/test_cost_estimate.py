"""Tests for the design fee estimate."""

import pytest

from planner.services.cost_estimate import (
    ARCHITECTURE_PRICE_PER_M2,
    SiteObject,
    SiteObjectKind,
    architecture_price,
    estimate_cost,
    plot_area_sotka,
)


@pytest.mark.parametrize("total_area, expected", [
    (120, 1200000),
    (250, 1200000),
    (250.01, 2250000),
    (450, 2250000),
    (450.5, 3150000),
    (700, 3150000),
    (800, 800 * ARCHITECTURE_PRICE_PER_M2),
])
def test_architecture_price_tiers(total_area, expected):
    assert architecture_price(total_area) == pytest.approx(expected)


def test_plot_area_in_sotka():
    assert plot_area_sotka(30, 40) == pytest.approx(12.0)
    assert plot_area_sotka(None, None) == 0.0


@pytest.mark.parametrize("obj, area", [
    (SiteObject(SiteObjectKind.TERRACE, width=4, depth=3), 12.0),
    (SiteObject(SiteObjectKind.GARAGE, cars=1), 4.5 * 6.5),
    (SiteObject(SiteObjectKind.GARAGE, cars=3), 10.5 * 6.5),
    (SiteObject(SiteObjectKind.CARPORT, cars=2), 7.0 * 6.0),
])
def test_site_object_area(obj, area):
    assert obj.area == pytest.approx(area)


def test_site_object_description():
    assert SiteObject(SiteObjectKind.POOL, width=8, depth=4).describe() == "Pool: 8x4m"
    assert SiteObject(SiteObjectKind.GARAGE, cars=2).describe() == "Garage: 2 cars"
    assert SiteObject(SiteObjectKind.CUSTOM, width=3, depth=2.5, label="Shed").describe() == "Shed: 3x2.5m"


def test_estimate_totals():
    estimate = estimate_cost(240, 30, 40, [
        SiteObject(SiteObjectKind.TERRACE, width=4, depth=3),
        SiteObject(SiteObjectKind.GARAGE, cars=2),
    ])

    assert estimate.architecture_price == 1200000
    assert estimate.landscape_price == pytest.approx(1200000)
    assert [obj['cost'] for obj in estimate.objects] == [24000, 97500]
    assert estimate.grand_total == pytest.approx(1200000 + 1200000 + 24000 + 97500)


def test_estimate_without_plot():
    estimate = estimate_cost(120)

    assert estimate.landscape_price == 0
    assert estimate.objects == []
    assert estimate.to_dict()['grand_total'] == 1200000
