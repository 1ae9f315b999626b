# backend/planner/services/cost_estimate.py
# Design fee estimate for a configured house
# Architecture is priced by total house area in tiers, landscape design by
# plot size (sotka = 100 m²), and each site object by its footprint.

from typing import Dict, Any, List, Optional, Sequence
from dataclasses import dataclass, field
from enum import Enum
import logging

logger = logging.getLogger(__name__)

# =============================================================================
# PRICE CONSTANTS
# =============================================================================

# (max total house area m², flat architecture fee)
ARCHITECTURE_PRICE_TIERS = (
    (250.0, 1200000),
    (450.0, 2250000),
    (700.0, 3150000),
)
ARCHITECTURE_PRICE_PER_M2 = 4500     # above the last tier
LANDSCAPE_PRICE_PER_SOTKA = 100000
SITE_OBJECT_PRICE_PER_M2 = 2000
SQUARE_METRES_PER_SOTKA = 100.0

# Vehicle shelters: width (m) by number of cars, fixed depth
GARAGE_WIDTHS = {1: 4.5, 2: 7.5, 3: 10.5}
GARAGE_DEPTH = 6.5
CARPORT_WIDTHS = {1: 4.0, 2: 7.0, 3: 10.0}
CARPORT_DEPTH = 6.0


class SiteObjectKind(str, Enum):
    TERRACE = "terrace"
    POOL = "pool"
    BATHHOUSE = "bathhouse"
    BBQ = "bbq"
    GARAGE = "garage"
    CARPORT = "carport"
    CUSTOM = "custom"


SITE_OBJECT_NAMES = {
    SiteObjectKind.TERRACE: "Terrace",
    SiteObjectKind.POOL: "Pool",
    SiteObjectKind.BATHHOUSE: "Bathhouse",
    SiteObjectKind.BBQ: "BBQ Zone",
    SiteObjectKind.GARAGE: "Garage",
    SiteObjectKind.CARPORT: "Carport",
    SiteObjectKind.CUSTOM: "Outbuilding",
}


@dataclass
class SiteObject:
    """A building or landscape object placed on the plot next to the house"""
    kind: SiteObjectKind
    width: float = 0.0
    depth: float = 0.0
    cars: int = 1
    label: Optional[str] = None

    @property
    def name(self) -> str:
        return self.label or SITE_OBJECT_NAMES[SiteObjectKind(self.kind)]

    @property
    def area(self) -> float:
        kind = SiteObjectKind(self.kind)
        if kind == SiteObjectKind.GARAGE:
            return GARAGE_WIDTHS[self.cars] * GARAGE_DEPTH
        if kind == SiteObjectKind.CARPORT:
            return CARPORT_WIDTHS[self.cars] * CARPORT_DEPTH
        return self.width * self.depth

    def describe(self) -> str:
        """One-line description used in the project summary"""
        if SiteObjectKind(self.kind) in (SiteObjectKind.GARAGE, SiteObjectKind.CARPORT):
            return f"{self.name}: {self.cars} cars"
        return f"{self.name}: {self.width:g}x{self.depth:g}m"


@dataclass
class CostEstimate:
    total_area: float
    architecture_price: float
    plot_area_sotka: float
    landscape_price: float
    objects: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def objects_price(self) -> float:
        return sum(obj['cost'] for obj in self.objects)

    @property
    def grand_total(self) -> float:
        return self.architecture_price + self.landscape_price + self.objects_price

    def to_dict(self) -> Dict[str, Any]:
        return {
            'total_area': round(self.total_area, 2),
            'architecture_price': self.architecture_price,
            'plot_area_sotka': round(self.plot_area_sotka, 2),
            'landscape_price': self.landscape_price,
            'objects': self.objects,
            'objects_price': self.objects_price,
            'grand_total': self.grand_total,
        }


def architecture_price(total_area: float) -> float:
    """Flat fee for the tier the house falls into, per-m² above the largest tier"""
    for max_area, price in ARCHITECTURE_PRICE_TIERS:
        if total_area <= max_area:
            return price
    return total_area * ARCHITECTURE_PRICE_PER_M2


def plot_area_sotka(plot_width: Optional[float], plot_length: Optional[float]) -> float:
    if not plot_width or not plot_length:
        return 0.0
    return plot_width * plot_length / SQUARE_METRES_PER_SOTKA


def estimate_cost(
    total_area: float,
    plot_width: Optional[float] = None,
    plot_length: Optional[float] = None,
    site_objects: Sequence[SiteObject] = ()
) -> CostEstimate:
    """
    Estimate the design fee for a house and its plot.

    Args:
        total_area: Total house area (floor area x floors), m²
        plot_width: Plot width in metres, omitted when no plot is configured
        plot_length: Plot length in metres
        site_objects: Objects placed on the plot

    Returns:
        CostEstimate with the architecture, landscape and per-object prices
    """
    sotka = plot_area_sotka(plot_width, plot_length)
    objects = [
        {
            'kind': SiteObjectKind(obj.kind).value,
            'name': obj.name,
            'area': round(obj.area, 2),
            'cost': round(obj.area * SITE_OBJECT_PRICE_PER_M2),
        }
        for obj in site_objects
    ]

    estimate = CostEstimate(
        total_area=total_area,
        architecture_price=architecture_price(total_area),
        plot_area_sotka=sotka,
        landscape_price=sotka * LANDSCAPE_PRICE_PER_SOTKA,
        objects=objects
    )

    logger.debug(
        f"Cost estimate for {total_area:.1f} m², {len(objects)} site object(s): "
        f"{estimate.grand_total:.0f}"
    )
    return estimate
